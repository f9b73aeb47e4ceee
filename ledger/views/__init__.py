from ledger.views.balance import BalanceView, TopUpView
from ledger.views.catalog import BannerListView, ServiceListView
from ledger.views.transaction import PaymentView, TransactionHistoryView

__all__ = [
    "BalanceView",
    "TopUpView",
    "BannerListView",
    "ServiceListView",
    "PaymentView",
    "TransactionHistoryView",
]
