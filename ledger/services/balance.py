import logging

from ledger.models import Balance

logger = logging.getLogger(__name__)


class BalanceService:
    """
    Reads and lazily creates per-user balance rows.

    The locking accessors must be called inside ``transaction.atomic()``;
    they never commit on their own, so a freshly created row is only visible
    once the caller's mutation commits with it.
    """

    @staticmethod
    def get_balance(user_id: int) -> int:
        """Current balance for the user; 0 when no balance row exists yet."""
        value = (
            Balance.objects.filter(user_id=user_id)
            .values_list("balance_value", flat=True)
            .first()
        )
        return value if value is not None else 0

    @staticmethod
    def get_for_update(user_id: int):
        """Lock and return the user's balance row, or None if there is none."""
        return Balance.objects.select_for_update().filter(user_id=user_id).first()

    @staticmethod
    def get_or_create_for_update(user_id: int) -> Balance:
        """
        Lock the user's balance row, creating it with value 0 if absent.

        get_or_create() retries the read when a concurrent creator wins the
        unique constraint on ``user``, so both callers end up locking the
        same row.
        """
        balance, created = Balance.objects.get_or_create(
            user_id=user_id, defaults={"balance_value": 0}
        )
        if created:
            logger.info("Balance created: user=%s balance_id=%d", user_id, balance.pk)
        return Balance.objects.select_for_update().get(pk=balance.pk)
