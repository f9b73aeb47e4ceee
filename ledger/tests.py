import itertools
import re
import threading
from datetime import datetime
from io import StringIO
from unittest.mock import patch

from django.core.management import call_command
from django.db import DatabaseError, connection
from django.test import TestCase, TransactionTestCase
from django.utils import timezone
from rest_framework.test import APIClient

from accounts.models import User
from ledger.exceptions import (
    HistoryNotFound,
    InsufficientFunds,
    InvalidAmount,
    NoBalance,
    ServiceNotFound,
    StoreUnavailable,
)
from ledger.middleware import mask_body
from ledger.models import MAX_BALANCE_VALUE, Balance, Banner, Service, TransactionHistory
from ledger.services import BalanceService, ReconciliationService, TransactionService
from ledger.utils import generate_invoice_number

INVOICE_PATTERN = re.compile(r"^INV\d{14}-[0-9A-F]{4}$")


def make_user(email="user@example.com"):
    return User.objects.create_user(
        email=email, password="secret-pass", first_name="Test", last_name="User"
    )


def sequential_invoices():
    counter = itertools.count(1)
    return lambda: f"INV20250101000000-{next(counter):04X}"


# ============================================================
# Invoice Number Tests
# ============================================================


class InvoiceNumberTest(TestCase):
    def test_format(self):
        self.assertRegex(generate_invoice_number(), INVOICE_PATTERN)

    def test_timestamp_component(self):
        now = timezone.make_aware(datetime(2025, 11, 5, 15, 34, 28))
        invoice = generate_invoice_number(now)
        self.assertTrue(invoice.startswith("INV20251105153428-"))
        self.assertRegex(invoice, INVOICE_PATTERN)

    def test_zero_padding(self):
        now = timezone.make_aware(datetime(2026, 1, 2, 3, 4, 5))
        self.assertTrue(generate_invoice_number(now).startswith("INV20260102030405-"))


# ============================================================
# Model Tests
# ============================================================


class BalanceModelTest(TestCase):
    def setUp(self):
        self.user = make_user()

    def test_create_balance(self):
        balance = Balance.objects.create(user=self.user)
        self.assertEqual(balance.balance_value, 0)
        self.assertEqual(balance.created_by, "system")
        self.assertIsNotNone(balance.created_on)

    def test_balance_str(self):
        balance = Balance.objects.create(user=self.user, balance_value=700)
        self.assertIn("700", str(balance))


class TransactionHistoryModelTest(TestCase):
    def setUp(self):
        self.balance = Balance.objects.create(user=make_user(), balance_value=5000)
        self.entry = TransactionHistory.objects.create(
            balance=self.balance,
            invoice_number="INV20250101000000-0001",
            amount=5000,
            balance_before=0,
            balance_after=5000,
            transaction_type=TransactionHistory.TransactionType.TOPUP,
            description=TransactionHistory.TOPUP_DESCRIPTION,
        )

    def test_entry_cannot_be_edited(self):
        self.entry.amount = 1
        with self.assertRaises(ValueError):
            self.entry.save()
        self.entry.refresh_from_db()
        self.assertEqual(self.entry.amount, 5000)

    def test_entry_cannot_be_deleted(self):
        with self.assertRaises(ValueError):
            self.entry.delete()
        self.assertTrue(TransactionHistory.objects.filter(pk=self.entry.pk).exists())

    def test_is_consistent(self):
        self.assertTrue(self.entry.is_consistent)
        broken = TransactionHistory(
            amount=100,
            balance_before=500,
            balance_after=450,
            transaction_type=TransactionHistory.TransactionType.PAYMENT,
        )
        self.assertFalse(broken.is_consistent)

    def test_entry_str(self):
        self.assertIn("TOPUP", str(self.entry))
        self.assertIn("INV20250101000000-0001", str(self.entry))


# ============================================================
# Service Tests
# ============================================================


class BalanceServiceTest(TransactionTestCase):
    def setUp(self):
        self.user = make_user()

    def test_get_balance_without_row_is_zero(self):
        self.assertEqual(BalanceService.get_balance(self.user.id), 0)
        self.assertFalse(Balance.objects.filter(user=self.user).exists())

    def test_get_balance(self):
        Balance.objects.create(user=self.user, balance_value=1200)
        self.assertEqual(BalanceService.get_balance(self.user.id), 1200)

    def test_get_or_create_is_idempotent(self):
        first = BalanceService.get_or_create_for_update(self.user.id)
        second = BalanceService.get_or_create_for_update(self.user.id)
        self.assertEqual(first.pk, second.pk)
        self.assertEqual(Balance.objects.filter(user=self.user).count(), 1)


class TopUpServiceTest(TransactionTestCase):
    def setUp(self):
        self.user = make_user()

    def test_first_top_up_creates_balance(self):
        entry = TransactionService.top_up(self.user.id, 5000)

        balance = Balance.objects.get(user=self.user)
        self.assertEqual(balance.balance_value, 5000)
        self.assertEqual(entry.transaction_type, TransactionHistory.TransactionType.TOPUP)
        self.assertEqual(entry.amount, 5000)
        self.assertEqual(entry.balance_before, 0)
        self.assertEqual(entry.balance_after, 5000)
        self.assertEqual(entry.description, "Top Up Balance")
        self.assertRegex(entry.invoice_number, INVOICE_PATTERN)
        self.assertEqual(TransactionHistory.objects.filter(balance=balance).count(), 1)

    def test_top_up_existing_balance(self):
        Balance.objects.create(user=self.user, balance_value=1000)
        entry = TransactionService.top_up(self.user.id, 2500)

        self.assertEqual(entry.balance_before, 1000)
        self.assertEqual(entry.balance_after, 3500)
        self.assertEqual(BalanceService.get_balance(self.user.id), 3500)

    def test_zero_amount_raises_without_store_access(self):
        with self.assertNumQueries(0):
            with self.assertRaises(InvalidAmount):
                TransactionService.top_up(self.user.id, 0)

    def test_negative_amount_raises_without_store_access(self):
        with self.assertNumQueries(0):
            with self.assertRaises(InvalidAmount):
                TransactionService.top_up(self.user.id, -100)

    def test_non_integer_amount_raises(self):
        for amount in ("5000", 10.5, True, None):
            with self.subTest(amount=amount):
                with self.assertRaises(InvalidAmount):
                    TransactionService.top_up(self.user.id, amount)
        self.assertFalse(Balance.objects.filter(user=self.user).exists())

    def test_amount_above_column_range_raises_without_store_access(self):
        with self.assertNumQueries(0):
            with self.assertRaises(InvalidAmount):
                TransactionService.top_up(self.user.id, MAX_BALANCE_VALUE + 1)

    def test_top_up_past_maximum_balance_is_rejected(self):
        Balance.objects.create(user=self.user, balance_value=MAX_BALANCE_VALUE - 10)

        with self.assertRaises(InvalidAmount):
            TransactionService.top_up(self.user.id, 11)

        self.assertEqual(BalanceService.get_balance(self.user.id), MAX_BALANCE_VALUE - 10)
        self.assertEqual(TransactionHistory.objects.count(), 0)

    def test_top_up_to_exact_maximum_balance(self):
        Balance.objects.create(user=self.user, balance_value=MAX_BALANCE_VALUE - 10)
        entry = TransactionService.top_up(self.user.id, 10)
        self.assertEqual(entry.balance_after, MAX_BALANCE_VALUE)

    def test_failed_history_insert_rolls_back_new_balance(self):
        with patch.object(
            TransactionHistory.objects, "create", side_effect=DatabaseError("insert failed")
        ):
            with self.assertRaises(StoreUnavailable):
                TransactionService.top_up(self.user.id, 5000)

        self.assertFalse(Balance.objects.filter(user=self.user).exists())
        self.assertEqual(TransactionHistory.objects.count(), 0)

    def test_failed_history_insert_rolls_back_balance_update(self):
        Balance.objects.create(user=self.user, balance_value=1000)

        with patch.object(
            TransactionHistory.objects, "create", side_effect=DatabaseError("insert failed")
        ):
            with self.assertRaises(StoreUnavailable):
                TransactionService.top_up(self.user.id, 5000)

        self.assertEqual(BalanceService.get_balance(self.user.id), 1000)
        self.assertEqual(TransactionHistory.objects.count(), 0)


class PaymentServiceTest(TransactionTestCase):
    def setUp(self):
        self.user = make_user()
        self.service = Service.objects.create(
            service_code="PLN", service_name="Listrik", service_tariff=3000
        )

    def test_payment_success(self):
        TransactionService.top_up(self.user.id, 5000)
        entry = TransactionService.pay(self.user.id, "PLN")

        self.assertEqual(BalanceService.get_balance(self.user.id), 2000)
        self.assertEqual(entry.transaction_type, TransactionHistory.TransactionType.PAYMENT)
        self.assertEqual(entry.amount, 3000)
        self.assertEqual(entry.balance_before, 5000)
        self.assertEqual(entry.balance_after, 2000)
        self.assertEqual(entry.description, "Listrik")
        self.assertRegex(entry.invoice_number, INVOICE_PATTERN)
        self.assertIsNotNone(entry.created_on)

    def test_payment_of_exact_balance(self):
        TransactionService.top_up(self.user.id, 3000)
        entry = TransactionService.pay(self.user.id, "PLN")
        self.assertEqual(entry.balance_after, 0)

    def test_insufficient_funds(self):
        TransactionService.top_up(self.user.id, 1000)
        self.service.service_tariff = 5000
        self.service.save()

        with self.assertRaises(InsufficientFunds):
            TransactionService.pay(self.user.id, "PLN")

        self.assertEqual(BalanceService.get_balance(self.user.id), 1000)
        self.assertEqual(
            TransactionHistory.objects.filter(
                transaction_type=TransactionHistory.TransactionType.PAYMENT
            ).count(),
            0,
        )

    def test_unknown_service(self):
        TransactionService.top_up(self.user.id, 5000)

        with self.assertRaises(ServiceNotFound):
            TransactionService.pay(self.user.id, "UNKNOWN")

        self.assertEqual(BalanceService.get_balance(self.user.id), 5000)
        self.assertEqual(TransactionHistory.objects.count(), 1)

    def test_empty_service_code(self):
        with self.assertNumQueries(0):
            with self.assertRaises(ServiceNotFound):
                TransactionService.pay(self.user.id, "")

    def test_no_balance(self):
        with self.assertRaises(NoBalance):
            TransactionService.pay(self.user.id, "PLN")
        self.assertFalse(Balance.objects.filter(user=self.user).exists())

    def test_no_balance_checked_before_service(self):
        with self.assertRaises(NoBalance):
            TransactionService.pay(self.user.id, "UNKNOWN")

    def test_failed_history_insert_rolls_back_deduction(self):
        TransactionService.top_up(self.user.id, 5000)

        with patch.object(
            TransactionHistory.objects, "create", side_effect=DatabaseError("insert failed")
        ):
            with self.assertRaises(StoreUnavailable):
                TransactionService.pay(self.user.id, "PLN")

        self.assertEqual(BalanceService.get_balance(self.user.id), 5000)
        self.assertEqual(TransactionHistory.objects.count(), 1)


class LedgerInvariantTest(TransactionTestCase):
    def setUp(self):
        self.user = make_user()
        Service.objects.create(service_code="PULSA", service_name="Pulsa", service_tariff=400)
        Service.objects.create(service_code="PDAM", service_name="PDAM", service_tariff=1500)

    def test_balance_equals_topups_minus_payments(self):
        operations = [
            ("topup", 5000),
            ("pay", "PULSA"),
            ("topup", 700),
            ("pay", "PDAM"),
            ("pay", "PDAM"),
            ("pay", "PDAM"),
            ("topup", 1200),
            ("pay", "PULSA"),
        ]
        with patch("ledger.services.transaction.generate_invoice_number", sequential_invoices()):
            for kind, value in operations:
                if kind == "topup":
                    TransactionService.top_up(self.user.id, value)
                else:
                    try:
                        TransactionService.pay(self.user.id, value)
                    except InsufficientFunds:
                        pass

        entries = TransactionHistory.objects.filter(balance__user=self.user)
        topups = sum(e.amount for e in entries if e.transaction_type == "TOPUP")
        payments = sum(e.amount for e in entries if e.transaction_type == "PAYMENT")

        self.assertEqual(BalanceService.get_balance(self.user.id), topups - payments)
        for entry in entries:
            self.assertTrue(entry.is_consistent, entry)
        latest = entries.order_by("-id").first()
        self.assertEqual(latest.balance_after, BalanceService.get_balance(self.user.id))


class HistoryServiceTest(TransactionTestCase):
    def setUp(self):
        self.user = make_user()
        Service.objects.create(service_code="PLN", service_name="Listrik", service_tariff=1000)
        with patch("ledger.services.transaction.generate_invoice_number", sequential_invoices()):
            TransactionService.top_up(self.user.id, 10000)
            TransactionService.pay(self.user.id, "PLN")
            TransactionService.top_up(self.user.id, 500)
            TransactionService.pay(self.user.id, "PLN")

    def test_newest_first(self):
        entries = TransactionService.list_history(self.user.id)
        self.assertEqual(
            [e.invoice_number for e in entries],
            [
                "INV20250101000000-0004",
                "INV20250101000000-0003",
                "INV20250101000000-0002",
                "INV20250101000000-0001",
            ],
        )

    def test_pagination(self):
        entries = TransactionService.list_history(self.user.id, limit=2, offset=1)
        self.assertEqual(
            [e.invoice_number for e in entries],
            ["INV20250101000000-0003", "INV20250101000000-0002"],
        )

    def test_pagination_requires_both_parameters(self):
        self.assertEqual(len(TransactionService.list_history(self.user.id, limit=1)), 4)
        self.assertEqual(len(TransactionService.list_history(self.user.id, offset=3)), 4)

    def test_repeated_reads_are_identical(self):
        first = [e.pk for e in TransactionService.list_history(self.user.id)]
        second = [e.pk for e in TransactionService.list_history(self.user.id)]
        self.assertEqual(first, second)

    def test_only_own_history(self):
        other = make_user("other@example.com")
        TransactionService.top_up(other.id, 100)
        self.assertEqual(len(TransactionService.list_history(self.user.id)), 4)
        self.assertEqual(len(TransactionService.list_history(other.id)), 1)

    def test_empty_history_raises(self):
        other = make_user("other@example.com")
        with self.assertRaises(HistoryNotFound):
            TransactionService.list_history(other.id)

    def test_page_past_the_end_raises(self):
        with self.assertRaises(HistoryNotFound):
            TransactionService.list_history(self.user.id, limit=10, offset=10)


class ConcurrentPaymentTest(TransactionTestCase):
    """Row locks on PostgreSQL, IMMEDIATE transactions on SQLite."""

    def setUp(self):
        self.user = make_user()
        Service.objects.create(service_code="PLN", service_name="Listrik", service_tariff=3000)
        TransactionService.top_up(self.user.id, 5000)

    def run_concurrently(self, target, count):
        results = []
        barrier = threading.Barrier(count)

        def worker():
            try:
                barrier.wait()
                results.append(target())
            except Exception as exc:
                results.append(exc)
            finally:
                connection.close()

        threads = [threading.Thread(target=worker) for _ in range(count)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()
        return results

    def test_concurrent_payments_do_not_overdraw(self):
        results = self.run_concurrently(lambda: TransactionService.pay(self.user.id, "PLN"), 2)

        succeeded = [r for r in results if isinstance(r, TransactionHistory)]
        rejected = [r for r in results if isinstance(r, InsufficientFunds)]
        self.assertEqual(len(succeeded), 1)
        self.assertEqual(len(rejected), 1)
        self.assertEqual(BalanceService.get_balance(self.user.id), 2000)

    def test_concurrent_top_ups_are_not_lost(self):
        results = self.run_concurrently(lambda: TransactionService.top_up(self.user.id, 100), 5)

        self.assertTrue(all(isinstance(r, TransactionHistory) for r in results), results)
        self.assertEqual(BalanceService.get_balance(self.user.id), 5500)
        balance = Balance.objects.get(user=self.user)
        self.assertTrue(ReconciliationService.audit(balance).consistent)


# ============================================================
# Reconciliation Tests
# ============================================================


class ReconciliationServiceTest(TransactionTestCase):
    def setUp(self):
        self.user = make_user()
        Service.objects.create(service_code="PLN", service_name="Listrik", service_tariff=1000)
        TransactionService.top_up(self.user.id, 5000)
        TransactionService.pay(self.user.id, "PLN")
        self.balance = Balance.objects.get(user=self.user)

    def test_consistent_balance(self):
        audit = ReconciliationService.audit(self.balance)
        self.assertTrue(audit.consistent)
        self.assertEqual(audit.ledger_total, 4000)
        self.assertEqual(audit.last_balance_after, 4000)

    def test_tampered_balance_is_reported(self):
        Balance.objects.filter(pk=self.balance.pk).update(balance_value=9999)
        self.balance.refresh_from_db()

        audit = ReconciliationService.audit(self.balance)
        self.assertFalse(audit.consistent)
        self.assertEqual(audit.balance_value, 9999)
        self.assertEqual(audit.ledger_total, 4000)

    def test_reconcile_task(self):
        from ledger.tasks import reconcile_balances

        result = reconcile_balances.apply()
        self.assertEqual(result.get(), {"checked": 1, "mismatched": []})

        Balance.objects.filter(pk=self.balance.pk).update(balance_value=1)
        result = reconcile_balances.apply()
        self.assertEqual(result.get(), {"checked": 1, "mismatched": [self.balance.pk]})

    def test_reconcile_command(self):
        out = StringIO()
        call_command("reconcile_balances", stdout=out)
        self.assertIn("1 balance(s) consistent", out.getvalue())


# ============================================================
# API Tests
# ============================================================


class LedgerAPITestCase(TransactionTestCase):
    def setUp(self):
        self.client = APIClient()
        self.user = make_user()
        self.client.force_authenticate(user=self.user)
        Service.objects.create(service_code="PLN", service_name="Listrik", service_tariff=3000)


class BalanceAPITest(LedgerAPITestCase):
    def test_balance_without_row(self):
        response = self.client.get("/balance")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.data["status"], 0)
        self.assertEqual(response.data["data"], {"balance": 0})

    def test_balance(self):
        TransactionService.top_up(self.user.id, 4200)
        response = self.client.get("/balance")
        self.assertEqual(response.data["data"]["balance"], 4200)

    def test_requires_token(self):
        response = APIClient().get("/balance")
        self.assertEqual(response.status_code, 401)
        self.assertEqual(response.data["status"], 108)
        self.assertIsNone(response.data["data"])

    def test_unexpected_error_is_enveloped(self):
        with patch.object(BalanceService, "get_balance", side_effect=RuntimeError("boom")):
            response = self.client.get("/balance")
        self.assertEqual(response.status_code, 500)
        self.assertEqual(response.data["status"], 100)
        self.assertIsNone(response.data["data"])


class TopUpAPITest(LedgerAPITestCase):
    def test_top_up_success(self):
        response = self.client.post("/topup", {"top_up_amount": 5000}, format="json")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.data["status"], 0)
        self.assertEqual(response.data["data"], {"balance": 5000})

        response = self.client.post("/topup", {"top_up_amount": 1000}, format="json")
        self.assertEqual(response.data["data"], {"balance": 6000})

    def test_top_up_zero_amount(self):
        response = self.client.post("/topup", {"top_up_amount": 0}, format="json")
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.data["status"], 102)
        self.assertFalse(Balance.objects.exists())

    def test_top_up_negative_amount(self):
        response = self.client.post("/topup", {"top_up_amount": -1000}, format="json")
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.data["status"], 102)

    def test_top_up_non_numeric_amount(self):
        response = self.client.post("/topup", {"top_up_amount": "abc"}, format="json")
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.data["status"], 102)

    def test_top_up_missing_amount(self):
        response = self.client.post("/topup", {}, format="json")
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.data["status"], 201)

    def test_top_up_amount_out_of_range(self):
        response = self.client.post("/topup", {"top_up_amount": 10**20}, format="json")
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.data["status"], 102)
        self.assertFalse(Balance.objects.exists())

    def test_top_up_past_maximum_balance(self):
        Balance.objects.create(user=self.user, balance_value=MAX_BALANCE_VALUE)
        response = self.client.post("/topup", {"top_up_amount": 1}, format="json")
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.data["status"], 102)
        self.assertEqual(BalanceService.get_balance(self.user.id), MAX_BALANCE_VALUE)

    def test_top_up_store_failure(self):
        with patch.object(
            TransactionHistory.objects, "create", side_effect=DatabaseError("insert failed")
        ):
            response = self.client.post("/topup", {"top_up_amount": 5000}, format="json")
        self.assertEqual(response.status_code, 500)
        self.assertEqual(response.data["status"], 100)
        self.assertFalse(Balance.objects.exists())


class PaymentAPITest(LedgerAPITestCase):
    def test_payment_success(self):
        TransactionService.top_up(self.user.id, 5000)

        response = self.client.post("/transaction", {"service_code": "PLN"}, format="json")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.data["status"], 0)
        data = response.data["data"]
        self.assertRegex(data["invoice_number"], INVOICE_PATTERN)
        self.assertEqual(data["service_code"], "PLN")
        self.assertEqual(data["service_name"], "Listrik")
        self.assertEqual(data["transaction_type"], "PAYMENT")
        self.assertEqual(data["total_amount"], 3000)
        self.assertIn("created_on", data)
        self.assertEqual(BalanceService.get_balance(self.user.id), 2000)

    def test_payment_unknown_service(self):
        TransactionService.top_up(self.user.id, 5000)
        response = self.client.post("/transaction", {"service_code": "NOPE"}, format="json")
        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.data["status"], 207)

    def test_payment_without_balance(self):
        response = self.client.post("/transaction", {"service_code": "PLN"}, format="json")
        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.data["status"], 206)

    def test_payment_insufficient_funds(self):
        TransactionService.top_up(self.user.id, 1000)
        response = self.client.post("/transaction", {"service_code": "PLN"}, format="json")
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.data["status"], 208)
        self.assertEqual(BalanceService.get_balance(self.user.id), 1000)

    def test_payment_missing_service_code(self):
        response = self.client.post("/transaction", {}, format="json")
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.data["status"], 201)


class HistoryAPITest(LedgerAPITestCase):
    def test_empty_history(self):
        response = self.client.get("/transaction/history")
        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.data["status"], 209)

    def test_history(self):
        with patch("ledger.services.transaction.generate_invoice_number", sequential_invoices()):
            TransactionService.top_up(self.user.id, 5000)
            TransactionService.pay(self.user.id, "PLN")

        response = self.client.get("/transaction/history")
        self.assertEqual(response.status_code, 200)
        rows = response.data["data"]
        self.assertEqual(len(rows), 2)
        self.assertEqual(
            set(rows[0].keys()),
            {"invoice_number", "transaction_type", "description", "total_amount", "created_on"},
        )
        self.assertEqual(rows[0]["transaction_type"], "PAYMENT")
        self.assertEqual(rows[0]["description"], "Listrik")
        self.assertEqual(rows[0]["total_amount"], 3000)
        self.assertEqual(rows[1]["transaction_type"], "TOPUP")
        self.assertEqual(rows[1]["description"], "Top Up Balance")

    def test_history_pagination(self):
        for amount in (100, 200, 300):
            TransactionService.top_up(self.user.id, amount)

        response = self.client.get("/transaction/history?limit=1&offset=1")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(len(response.data["data"]), 1)
        self.assertEqual(response.data["data"][0]["total_amount"], 200)

    def test_history_invalid_pagination(self):
        response = self.client.get("/transaction/history?limit=-1&offset=0")
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.data["status"], 102)

    def test_history_pagination_out_of_range(self):
        TransactionService.top_up(self.user.id, 100)
        for query in (
            "limit=1&offset=100000000000000000000",
            f"limit=1&offset={MAX_BALANCE_VALUE}",
        ):
            with self.subTest(query=query):
                response = self.client.get(f"/transaction/history?{query}")
                self.assertEqual(response.status_code, 400)
                self.assertEqual(response.data["status"], 102)


class CatalogAPITest(LedgerAPITestCase):
    def test_services(self):
        response = self.client.get("/services")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(
            response.data["data"],
            [
                {
                    "service_code": "PLN",
                    "service_name": "Listrik",
                    "service_icon": "",
                    "service_tariff": 3000,
                }
            ],
        )

    def test_banners_are_public(self):
        Banner.objects.create(banner_name="Banner 1", description="Lorem ipsum")
        response = APIClient().get("/banner")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.data["data"][0]["banner_name"], "Banner 1")


# ============================================================
# Middleware Tests
# ============================================================


class MaskBodyTest(TestCase):
    def test_password_is_masked(self):
        masked = mask_body('{"email": "a@b.co", "password": "hunter22"}')
        self.assertNotIn("hunter22", masked)
        self.assertIn("a@b.co", masked)

    def test_non_json_body_is_unchanged(self):
        self.assertEqual(mask_body("top_up_amount=10"), "top_up_amount=10")
