import logging

from rest_framework.views import APIView

from ledger.exceptions import LedgerError
from ledger.serializers import BalanceSerializer, TopUpSerializer
from ledger.services import BalanceService, TransactionService
from ledger.utils import api_error_response, success_response

logger = logging.getLogger(__name__)


class BalanceView(APIView):
    """GET /balance — Current balance of the authenticated user (0 if none yet)."""

    def get(self, request, *args, **kwargs):
        value = BalanceService.get_balance(request.user.id)
        return success_response(
            "Get balance successful", BalanceSerializer({"balance": value}).data
        )


class TopUpView(APIView):
    """
    POST /topup — Top up the authenticated user's balance.

    Request body: {"top_up_amount": <positive integer>}
    """

    def post(self, request, *args, **kwargs):
        serializer = TopUpSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            entry = TransactionService.top_up(
                user_id=request.user.id,
                amount=serializer.validated_data["top_up_amount"],
            )
        except LedgerError as exc:
            return api_error_response(exc)

        return success_response(
            "Top up successful", BalanceSerializer({"balance": entry.balance_after}).data
        )
