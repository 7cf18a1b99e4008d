"""Invoice number generation."""

from datetime import datetime

from src.domain.constants import INVOICE_NUMBER_PREFIX


def generate_invoice_number(now: datetime) -> str:
    """Return an invoice number derived from a timestamp.

    Args:
        now: Creation time of the invoice.

    Returns:
        str: ``INV-`` followed by the last six digits of the epoch millis.
    """
    millis = int(now.timestamp() * 1000)
    return f"{INVOICE_NUMBER_PREFIX}{str(millis)[-6:]}"


__all__ = ["generate_invoice_number"]
