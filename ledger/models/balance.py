from django.conf import settings
from django.db import models

from ledger.models.base import AuditedModel

# Largest value a BigIntegerField column can hold.
MAX_BALANCE_VALUE = models.BigIntegerField.MAX_BIGINT


class Balance(AuditedModel):
    """
    A user's stored balance, in the smallest currency unit.

    There is at most one row per user (one-to-one). The row is created lazily
    on the first top-up and is only ever changed by TransactionService, inside
    the same database transaction that appends the matching history entry.
    Concurrency safety is handled at the service layer via select_for_update().
    """

    user = models.OneToOneField(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="balance",
    )
    balance_value = models.BigIntegerField(default=0)

    class Meta(AuditedModel.Meta):
        constraints = [
            models.CheckConstraint(
                condition=models.Q(balance_value__gte=0),
                name="balance_value_non_negative",
            ),
        ]

    def __str__(self):
        return f"Balance {self.pk} user={self.user_id} (value={self.balance_value})"
