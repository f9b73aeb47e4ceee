from django.urls import path

from ledger.views import (
    BalanceView,
    BannerListView,
    PaymentView,
    ServiceListView,
    TopUpView,
    TransactionHistoryView,
)

urlpatterns = [
    path("banner", BannerListView.as_view(), name="banner-list"),
    path("services", ServiceListView.as_view(), name="service-list"),
    path("balance", BalanceView.as_view(), name="balance"),
    path("topup", TopUpView.as_view(), name="topup"),
    path("transaction", PaymentView.as_view(), name="transaction"),
    path(
        "transaction/history",
        TransactionHistoryView.as_view(),
        name="transaction-history",
    ),
]
