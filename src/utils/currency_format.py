"""Presentation helpers for monetary values."""

from decimal import ROUND_HALF_UP, Decimal

from src.utils.decimal_utils import coerce_decimal

CURRENCY_SYMBOLS = {
    "USD": "$",
    "EUR": "€",
    "GBP": "£",
    "LKR": "Rs",
}

_CENT = Decimal("0.01")


def round_money(value) -> Decimal:
    """Round a monetary value to cents, half up."""
    return coerce_decimal(value).quantize(_CENT, rounding=ROUND_HALF_UP)


def format_currency(value, currency_code: str) -> str:
    """Format currency values for display."""
    symbol = CURRENCY_SYMBOLS.get(currency_code, currency_code)
    return f"{round_money(value):,.2f} {symbol}"


__all__ = ["CURRENCY_SYMBOLS", "round_money", "format_currency"]
