import secrets

from django.conf import settings
from django.utils import timezone

INVOICE_PREFIX = getattr(settings, "LEDGER_INVOICE_PREFIX", "INV")


def generate_invoice_number(now=None) -> str:
    """
    Build an invoice number such as ``INV20251105153428-A4F2``.

    The prefix is followed by the local time at second resolution and four
    uppercase hex digits (2 random bytes). Uniqueness is enforced only by the
    unique constraint on ``TransactionHistory.invoice_number``.
    """
    now = timezone.localtime(now) if now else timezone.localtime()
    suffix = secrets.token_hex(2).upper()
    return f"{INVOICE_PREFIX}{now:%Y%m%d%H%M%S}-{suffix}"
