from django.db import models

from ledger.models.balance import Balance
from ledger.models.base import BaseModel


class TransactionHistory(BaseModel):
    """
    Append-only ledger entry for every balance mutation.

    Each entry snapshots the balance before and after the operation:
    TOPUP entries satisfy ``balance_after == balance_before + amount`` and
    PAYMENT entries ``balance_after == balance_before - amount``. Entries are
    never edited or deleted once written.
    """

    class TransactionType(models.TextChoices):
        TOPUP = "TOPUP", "Top Up"
        PAYMENT = "PAYMENT", "Payment"

    TOPUP_DESCRIPTION = "Top Up Balance"

    balance = models.ForeignKey(
        Balance,
        on_delete=models.PROTECT,
        related_name="history",
    )
    invoice_number = models.CharField(max_length=40, unique=True)
    amount = models.BigIntegerField()
    balance_before = models.BigIntegerField()
    balance_after = models.BigIntegerField()
    transaction_type = models.CharField(
        max_length=10,
        choices=TransactionType.choices,
    )
    description = models.CharField(max_length=255, blank=True)

    class Meta(BaseModel.Meta):
        verbose_name_plural = "transaction history"
        ordering = ["-created_on", "-id"]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(amount__gt=0),
                name="history_amount_positive",
            ),
        ]
        indexes = [
            models.Index(fields=["balance", "created_on"], name="idx_history_balance_created"),
        ]

    def __str__(self):
        return (
            f"{self.invoice_number} | {self.transaction_type} | "
            f"{self.amount} | {self.balance_before} -> {self.balance_after}"
        )

    def save(self, *args, **kwargs):
        if not self._state.adding:
            raise ValueError("Transaction history entries are append-only.")
        super().save(*args, **kwargs)

    def delete(self, *args, **kwargs):
        raise ValueError("Transaction history entries cannot be deleted.")

    @property
    def is_consistent(self):
        """Whether the before/after snapshots match the amount and type."""
        if self.transaction_type == self.TransactionType.TOPUP:
            return self.balance_after - self.balance_before == self.amount
        return self.balance_before - self.balance_after == self.amount
