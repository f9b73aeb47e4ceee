import logging

from rest_framework.permissions import AllowAny
from rest_framework.views import APIView

from accounts.exceptions import AccountError
from accounts.serializers import LoginSerializer, RegistrationSerializer
from accounts.services import UserService
from ledger.utils import api_error_response, success_response

logger = logging.getLogger(__name__)


class RegistrationView(APIView):
    """
    POST /registration — Register a new user.

    Request body: {"email", "password", "first_name", "last_name"}
    """

    authentication_classes = []
    permission_classes = [AllowAny]

    def post(self, request, *args, **kwargs):
        serializer = RegistrationSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            UserService.register(**serializer.validated_data)
        except AccountError as exc:
            return api_error_response(exc)

        return success_response("Registration successful, please log in")


class LoginView(APIView):
    """
    POST /login — Exchange email and password for an API token.

    Request body: {"email", "password"}
    """

    authentication_classes = []
    permission_classes = [AllowAny]

    def post(self, request, *args, **kwargs):
        serializer = LoginSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            token = UserService.login(**serializer.validated_data)
        except AccountError as exc:
            return api_error_response(exc)

        return success_response("Login successful", {"token": token})
