"""Helpers for Decimal normalization."""

from decimal import Decimal

ZERO = Decimal("0")
HUNDRED = Decimal("100")


def coerce_decimal(value) -> Decimal:
    """Normalize numeric values to Decimal.

    Args:
        value: Raw numeric value from SQL, forms, or adapters.

    Returns:
        Decimal: Normalized numeric value.
    """
    if value is None:
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


__all__ = ["coerce_decimal", "ZERO", "HUNDRED"]
