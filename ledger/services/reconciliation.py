import logging
from dataclasses import dataclass
from typing import Optional

from django.db.models import Q, Sum

from ledger.models import Balance, TransactionHistory

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BalanceAudit:
    balance_id: int
    user_id: int
    balance_value: int
    ledger_total: int
    last_balance_after: Optional[int]
    inconsistent_entries: int

    @property
    def consistent(self) -> bool:
        return (
            self.balance_value == self.ledger_total
            and self.last_balance_after in (None, self.balance_value)
            and self.inconsistent_entries == 0
        )


class ReconciliationService:
    """
    Read-only audit of stored balances against their transaction history.

    A balance is consistent when it equals the sum of its TOPUP amounts minus
    the sum of its PAYMENT amounts, matches the ``balance_after`` of its most
    recent entry, and every entry's before/after snapshots match its amount.
    Mismatches are reported, never corrected.
    """

    @staticmethod
    def audit(balance: Balance) -> BalanceAudit:
        totals = balance.history.aggregate(
            topups=Sum("amount", filter=Q(transaction_type=TransactionHistory.TransactionType.TOPUP)),
            payments=Sum(
                "amount", filter=Q(transaction_type=TransactionHistory.TransactionType.PAYMENT)
            ),
        )
        ledger_total = (totals["topups"] or 0) - (totals["payments"] or 0)
        last_balance_after = (
            balance.history.order_by("-id").values_list("balance_after", flat=True).first()
        )
        inconsistent_entries = sum(
            1 for entry in balance.history.all() if not entry.is_consistent
        )

        audit = BalanceAudit(
            balance_id=balance.pk,
            user_id=balance.user_id,
            balance_value=balance.balance_value,
            ledger_total=ledger_total,
            last_balance_after=last_balance_after,
            inconsistent_entries=inconsistent_entries,
        )
        if not audit.consistent:
            logger.error(
                "Ledger mismatch: balance=%d user=%s value=%d ledger_total=%d "
                "last_balance_after=%s inconsistent_entries=%d",
                audit.balance_id,
                audit.user_id,
                audit.balance_value,
                audit.ledger_total,
                audit.last_balance_after,
                audit.inconsistent_entries,
            )
        return audit

    @classmethod
    def audit_all(cls) -> list:
        return [cls.audit(balance) for balance in Balance.objects.order_by("pk")]
