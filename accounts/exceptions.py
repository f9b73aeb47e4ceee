from rest_framework import status

from ledger.exceptions import ApiError


class AccountError(ApiError):
    """Base class for registration, login and profile errors."""


class InvalidCredentials(AccountError):
    code = 103
    http_status = status.HTTP_401_UNAUTHORIZED
    message = "Wrong email or password."


class EmailAlreadyRegistered(AccountError):
    code = 203
    http_status = status.HTTP_400_BAD_REQUEST
    message = "Email is already registered."


class PasswordTooShort(AccountError):
    code = 202
    validation_code = "password_too_short"
    http_status = status.HTTP_400_BAD_REQUEST
    message = "Password must be at least 8 characters."
