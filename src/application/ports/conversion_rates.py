"""Application port for currency rate sources."""

from typing import Protocol

from src.domain.models.rates import RateRow


class ConversionRatesPort(Protocol):
    """Port exposing the current currency conversion rates."""

    def fetch_rates(self) -> list[RateRow]:
        """Return rate rows, newest first when a currency repeats."""


__all__ = ["ConversionRatesPort"]
