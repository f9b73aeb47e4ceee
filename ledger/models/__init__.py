from ledger.models.balance import MAX_BALANCE_VALUE, Balance
from ledger.models.catalog import Banner, Service
from ledger.models.transaction import TransactionHistory

__all__ = [
    "Balance",
    "Banner",
    "Service",
    "TransactionHistory",
    "MAX_BALANCE_VALUE",
]
