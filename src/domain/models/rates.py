"""Rows produced by currency rate sources."""

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class RateRow:
    """Rate of a currency relative to the implicit base unit."""

    currency_code: str
    rate: Decimal


__all__ = ["RateRow"]
