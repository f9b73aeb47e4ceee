import logging

from rest_framework.views import APIView

from ledger.exceptions import LedgerError
from ledger.serializers import (
    HistoryQuerySerializer,
    PaymentReceiptSerializer,
    PaymentSerializer,
    TransactionHistorySerializer,
)
from ledger.services import TransactionService
from ledger.utils import api_error_response, success_response

logger = logging.getLogger(__name__)


class PaymentView(APIView):
    """
    POST /transaction — Pay for a catalog service from the balance.

    Request body: {"service_code": "<code>"}
    """

    def post(self, request, *args, **kwargs):
        serializer = PaymentSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        service_code = serializer.validated_data["service_code"]

        try:
            entry = TransactionService.pay(
                user_id=request.user.id,
                service_code=service_code,
            )
        except LedgerError as exc:
            return api_error_response(exc)

        return success_response(
            "Transaction successful",
            PaymentReceiptSerializer(entry, context={"service_code": service_code}).data,
        )


class TransactionHistoryView(APIView):
    """
    GET /transaction/history — Transaction history, newest first.

    Query params:
        - limit, offset: Pagination, applied only when both are given.
    """

    def get(self, request, *args, **kwargs):
        query = HistoryQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)

        try:
            entries = TransactionService.list_history(
                user_id=request.user.id,
                limit=query.validated_data.get("limit"),
                offset=query.validated_data.get("offset"),
            )
        except LedgerError as exc:
            return api_error_response(exc)

        return success_response(
            "Get history successful",
            TransactionHistorySerializer(entries, many=True).data,
        )
