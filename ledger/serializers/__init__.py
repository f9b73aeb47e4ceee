from ledger.serializers.balance import BalanceSerializer
from ledger.serializers.catalog import BannerSerializer, ServiceSerializer
from ledger.serializers.topup import TopUpSerializer
from ledger.serializers.transaction import (
    HistoryQuerySerializer,
    PaymentReceiptSerializer,
    PaymentSerializer,
    TransactionHistorySerializer,
)

__all__ = [
    "BalanceSerializer",
    "BannerSerializer",
    "ServiceSerializer",
    "TopUpSerializer",
    "HistoryQuerySerializer",
    "PaymentReceiptSerializer",
    "PaymentSerializer",
    "TransactionHistorySerializer",
]
