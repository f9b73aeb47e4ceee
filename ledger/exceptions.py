from rest_framework import status


class ApiError(Exception):
    """
    Base class for application errors rendered into the response envelope.

    Subclasses set ``code`` (the envelope status code), ``http_status`` and a
    default ``message``. A subclass with a ``validation_code`` is also used
    when a serializer raises a ValidationError carrying that code.
    """

    code = 100
    validation_code = None
    http_status = status.HTTP_500_INTERNAL_SERVER_ERROR
    message = "Internal error."

    def __init__(self, message=None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class LedgerError(ApiError):
    """Base class for balance and transaction-history errors."""


class InvalidAmount(LedgerError):
    """Raised when a top-up amount is not a positive integer."""

    code = 102
    http_status = status.HTTP_400_BAD_REQUEST
    message = "Amount must be a number greater than 0."


class NoBalance(LedgerError):
    """Raised when a payment is requested by a user who has no balance yet."""

    code = 206
    http_status = status.HTTP_404_NOT_FOUND
    message = "No balance yet."


class ServiceNotFound(LedgerError):
    """Raised when the service code is empty or not in the catalog."""

    code = 207
    http_status = status.HTTP_404_NOT_FOUND
    message = "Service not found."


class InsufficientFunds(LedgerError):
    """Raised when the service tariff exceeds the current balance."""

    code = 208
    http_status = status.HTTP_400_BAD_REQUEST
    message = "Insufficient balance."


class HistoryNotFound(LedgerError):
    """Raised when the user has no transaction history."""

    code = 209
    http_status = status.HTTP_404_NOT_FOUND
    message = "No transactions yet."


class StoreUnavailable(LedgerError):
    """Raised after rollback when the database fails inside a transaction."""

    code = 100
    http_status = status.HTTP_500_INTERNAL_SERVER_ERROR
    message = "Transaction could not be completed."
