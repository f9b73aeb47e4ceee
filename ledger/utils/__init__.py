from ledger.utils.invoice import generate_invoice_number
from ledger.utils.responses import (
    api_error_response,
    api_exception_handler,
    error_response,
    success_response,
)

__all__ = [
    "generate_invoice_number",
    "api_error_response",
    "api_exception_handler",
    "error_response",
    "success_response",
]
