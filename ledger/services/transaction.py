import logging

from django.db import DatabaseError, transaction

from ledger.exceptions import (
    HistoryNotFound,
    InsufficientFunds,
    InvalidAmount,
    NoBalance,
    ServiceNotFound,
    StoreUnavailable,
)
from ledger.models import MAX_BALANCE_VALUE, Service, TransactionHistory
from ledger.services.balance import BalanceService
from ledger.utils import generate_invoice_number

logger = logging.getLogger(__name__)


class TransactionService:
    """
    Moves money in and out of a user's balance.

    Each mutation runs as one atomic unit: the balance row is locked with
    select_for_update(), validated, updated, and a TransactionHistory entry
    is appended before commit. Concurrent top-ups and payments for the same
    user therefore serialize on the balance row, and a failure at any step
    rolls back both the balance update and the history insert.
    """

    @staticmethod
    def top_up(user_id: int, amount: int) -> TransactionHistory:
        """
        Add ``amount`` to the user's balance, creating the balance if needed.

        Args:
            user_id: Verified identifier of the user.
            amount: Positive integer amount, in the smallest currency unit.

        Returns:
            The TOPUP history entry; ``balance_after`` is the new balance.

        Raises:
            InvalidAmount: If amount is not a positive integer, or the new
                balance would not fit the balance column.
            StoreUnavailable: If the database fails; nothing is written.
        """
        if isinstance(amount, bool) or not isinstance(amount, int):
            raise InvalidAmount()
        if not 0 < amount <= MAX_BALANCE_VALUE:
            raise InvalidAmount()

        try:
            with transaction.atomic():
                balance = BalanceService.get_or_create_for_update(user_id)
                balance_before = balance.balance_value
                if balance_before > MAX_BALANCE_VALUE - amount:
                    logger.warning(
                        "Top-up rejected (balance limit): user=%s amount=%d balance=%d",
                        user_id,
                        amount,
                        balance_before,
                    )
                    raise InvalidAmount("Top-up would exceed the maximum balance.")
                balance.balance_value = balance_before + amount
                balance.save(update_fields=["balance_value", "modified_on"])

                entry = TransactionHistory.objects.create(
                    balance=balance,
                    invoice_number=generate_invoice_number(),
                    amount=amount,
                    balance_before=balance_before,
                    balance_after=balance.balance_value,
                    transaction_type=TransactionHistory.TransactionType.TOPUP,
                    description=TransactionHistory.TOPUP_DESCRIPTION,
                )
        except DatabaseError as exc:
            logger.exception("Top-up failed: user=%s amount=%d", user_id, amount)
            raise StoreUnavailable() from exc

        logger.info(
            "Top-up completed: user=%s amount=%d balance=%d->%d invoice=%s",
            user_id,
            amount,
            entry.balance_before,
            entry.balance_after,
            entry.invoice_number,
        )
        return entry

    @staticmethod
    def pay(user_id: int, service_code: str) -> TransactionHistory:
        """
        Charge the tariff of ``service_code`` to the user's balance.

        The sufficiency check and the deduction both use the balance read
        under the row lock, so two concurrent payments can never both pass
        against the same stale value.

        Returns:
            The PAYMENT history entry; ``description`` holds the service name.

        Raises:
            NoBalance: If the user has no balance row.
            ServiceNotFound: If the service code is empty or unknown.
            InsufficientFunds: If the tariff exceeds the current balance.
            StoreUnavailable: If the database fails; nothing is written.
        """
        if not service_code:
            raise ServiceNotFound()

        try:
            with transaction.atomic():
                balance = BalanceService.get_for_update(user_id)
                if balance is None:
                    raise NoBalance()

                service = Service.objects.filter(service_code=service_code).first()
                if service is None:
                    raise ServiceNotFound()

                tariff = service.service_tariff
                balance_before = balance.balance_value
                if balance_before < tariff:
                    logger.warning(
                        "Payment rejected (insufficient balance): user=%s service=%s "
                        "balance=%d tariff=%d",
                        user_id,
                        service_code,
                        balance_before,
                        tariff,
                    )
                    raise InsufficientFunds()

                balance.balance_value = balance_before - tariff
                balance.save(update_fields=["balance_value", "modified_on"])

                entry = TransactionHistory.objects.create(
                    balance=balance,
                    invoice_number=generate_invoice_number(),
                    amount=tariff,
                    balance_before=balance_before,
                    balance_after=balance.balance_value,
                    transaction_type=TransactionHistory.TransactionType.PAYMENT,
                    description=service.service_name,
                )
        except DatabaseError as exc:
            logger.exception("Payment failed: user=%s service=%s", user_id, service_code)
            raise StoreUnavailable() from exc

        logger.info(
            "Payment completed: user=%s service=%s amount=%d balance=%d->%d invoice=%s",
            user_id,
            service_code,
            entry.amount,
            entry.balance_before,
            entry.balance_after,
            entry.invoice_number,
        )
        return entry

    @staticmethod
    def list_history(user_id: int, limit: int = None, offset: int = None) -> list:
        """
        Return the user's history entries, newest first.

        Pagination applies only when both ``limit`` and ``offset`` are given.

        Raises:
            HistoryNotFound: If the user has no history entries.
        """
        queryset = TransactionHistory.objects.filter(balance__user_id=user_id).order_by(
            "-created_on", "-id"
        )
        if limit is not None and offset is not None:
            queryset = queryset[offset : offset + limit]

        entries = list(queryset)
        if not entries:
            raise HistoryNotFound()
        return entries
