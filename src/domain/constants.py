"""Domain constants for invoice billing."""

from decimal import Decimal

DEFAULT_DISPLAY_CURRENCY = "USD"

SUPPORTED_CURRENCIES = ("USD", "LKR", "EUR", "GBP")

# Rates relative to an implicit base unit; USD is the reference.
DEFAULT_CONVERSION_RATES = {
    "USD": Decimal("1"),
    "LKR": Decimal("300"),
    "EUR": Decimal("0.9"),
    "GBP": Decimal("0.8"),
}

INVOICE_NUMBER_PREFIX = "INV-"


__all__ = [
    "DEFAULT_DISPLAY_CURRENCY",
    "SUPPORTED_CURRENCIES",
    "DEFAULT_CONVERSION_RATES",
    "INVOICE_NUMBER_PREFIX",
]
