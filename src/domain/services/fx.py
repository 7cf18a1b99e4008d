"""Currency conversion through a static rate table."""

from collections.abc import Iterable, Mapping
from decimal import Decimal
from logging import Logger

from src.domain.models.rates import RateRow
from src.domain.services.normalization import normalize_currency_code
from src.utils.decimal_utils import coerce_decimal

_IDENTITY_RATE = Decimal("1")


def build_rate_map(
    rows: Iterable[RateRow],
    logger: Logger,
) -> dict[str, Decimal]:
    """Build a currency-to-rate mapping from rate rows.

    The first row per currency wins; rows are expected newest first.

    Args:
        rows: Rate rows from a rate source.
        logger: Logger used for warnings.

    Returns:
        dict[str, Decimal]: Rate per normalized currency code.
    """
    rates: dict[str, Decimal] = {}
    for row in rows:
        code = normalize_currency_code(row.currency_code)
        if code is None:
            logger.warning("Skipping FX rate with missing currency code")
            continue
        if code in rates:
            continue
        rate = coerce_decimal(row.rate)
        if not rate.is_finite() or rate <= 0:
            logger.warning(f"Skipping invalid FX rate for {code}: {rate}")
            continue
        rates[code] = rate
    return rates


def _lookup_rate(rates: Mapping[str, Decimal], code: str | None) -> Decimal:
    # Unknown codes and non-positive rates fall back to an identity rate.
    normalized = normalize_currency_code(code)
    if normalized is None:
        return _IDENTITY_RATE
    rate = rates.get(normalized)
    if rate is None:
        return _IDENTITY_RATE
    value = coerce_decimal(rate)
    if not value.is_finite() or value <= 0:
        return _IDENTITY_RATE
    return value


def convert_amount(
    amount,
    from_currency: str | None,
    to_currency: str | None,
    rates: Mapping[str, Decimal],
) -> Decimal:
    """Convert an amount between two currencies.

    Conversion is ``amount / rate_from * rate_to``. Currencies missing from
    ``rates``, or with a zero or negative rate, are treated as rate 1.

    Args:
        amount: Amount in ``from_currency``.
        from_currency: Source currency code.
        to_currency: Target currency code.
        rates: Mapping of currency code to rate versus the base unit.

    Returns:
        Decimal: Amount expressed in ``to_currency``.
    """
    value = coerce_decimal(amount)
    source = normalize_currency_code(from_currency)
    target = normalize_currency_code(to_currency)
    if source == target:
        return value
    return value / _lookup_rate(rates, source) * _lookup_rate(rates, target)


class StaticConversionProvider:
    """Conversion provider backed by an in-memory rate table."""

    def __init__(self, rates: Mapping[str, Decimal]) -> None:
        self._rates: dict[str, Decimal] = {}
        for key, value in rates.items():
            code = normalize_currency_code(key)
            rate = coerce_decimal(value)
            if code is None or not rate.is_finite() or rate <= 0:
                continue
            self._rates[code] = rate

    @classmethod
    def from_rows(
        cls,
        rows: Iterable[RateRow],
        logger: Logger,
    ) -> "StaticConversionProvider":
        """Build a provider from rate rows, warning about skipped rows."""
        return cls(build_rate_map(rows, logger))

    @property
    def rates(self) -> dict[str, Decimal]:
        return dict(self._rates)

    def convert(
        self,
        amount,
        from_currency: str | None,
        to_currency: str | None,
    ) -> Decimal:
        return convert_amount(amount, from_currency, to_currency, self._rates)


__all__ = ["build_rate_map", "convert_amount", "StaticConversionProvider"]
