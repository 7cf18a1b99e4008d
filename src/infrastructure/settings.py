"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
import os

from src.domain.constants import (
    DEFAULT_CONVERSION_RATES,
    DEFAULT_DISPLAY_CURRENCY,
)
from src.domain.services.normalization import normalize_currency_code
from src.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class BillingSettings:
    """Settings for currency display and rate lookup.

    Attributes:
        display_currency: Currency totals are shown in by default.
        rates_source: Rate source identifier (static or database).
        static_rates: Rate table used by the static source.
    """

    display_currency: str = DEFAULT_DISPLAY_CURRENCY
    rates_source: str = "static"
    static_rates: dict[str, Decimal] = field(
        default_factory=lambda: dict(DEFAULT_CONVERSION_RATES)
    )

    @classmethod
    def from_env(cls) -> "BillingSettings":
        """Build settings from environment variables.

        Returns:
            BillingSettings: Settings sourced from environment variables.
        """
        logger = get_app_logger()
        display_currency = (
            normalize_currency_code(os.getenv("BILLING_DISPLAY_CURRENCY"))
            or DEFAULT_DISPLAY_CURRENCY
        )
        rates_source = (
            os.getenv("BILLING_RATES_SOURCE", "static").strip().lower()
        )
        raw_rates = os.getenv("BILLING_RATES")
        static_rates = dict(DEFAULT_CONVERSION_RATES)
        if raw_rates:
            static_rates = cls._parse_rates(raw_rates, logger=logger)
        return cls(
            display_currency=display_currency,
            rates_source=rates_source,
            static_rates=static_rates,
        )

    @staticmethod
    def _parse_rates(raw_rates: str, logger) -> dict[str, Decimal]:
        """Parse a ``CODE=rate`` comma-separated rate table.

        Args:
            raw_rates: Raw value such as ``USD=1,LKR=300``.
            logger: Logger used for warnings.

        Returns:
            dict[str, Decimal]: Parsed rates; malformed pairs are skipped.
        """
        rates: dict[str, Decimal] = {}
        for pair in raw_rates.split(","):
            if not pair.strip():
                continue
            code, sep, raw_value = pair.partition("=")
            normalized = normalize_currency_code(code)
            if not sep or normalized is None:
                logger.warning(f"Ignoring malformed rate entry '{pair}'")
                continue
            try:
                rates[normalized] = Decimal(raw_value.strip())
            except InvalidOperation:
                logger.warning(f"Ignoring non-numeric rate for {normalized}")
        return rates


__all__ = ["BillingSettings"]
