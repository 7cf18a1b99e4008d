"""Currency rate sources."""

from collections.abc import Mapping
from decimal import Decimal

from sqlalchemy import text

from src.application.ports.conversion_rates import ConversionRatesPort
from src.application.ports.database import DatabaseEnginePort
from src.domain.models.rates import RateRow
from src.utils.decimal_utils import coerce_decimal


class StaticConversionRates(ConversionRatesPort):
    """Rate source serving a fixed in-memory table."""

    def __init__(self, rates: Mapping[str, Decimal]) -> None:
        self._rates = dict(rates)

    def fetch_rates(self) -> list[RateRow]:
        return [
            RateRow(currency_code=code, rate=coerce_decimal(rate))
            for code, rate in self._rates.items()
        ]


class SqlAlchemyConversionRates(ConversionRatesPort):
    """Rate source backed by the ``currency_rates`` table."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the rate source.

        Args:
            db_port: Port providing access to the billing engine.
        """
        self._db_port = db_port

    def fetch_rates(self) -> list[RateRow]:
        query = text(
            """
            SELECT currency_code, rate
            FROM currency_rates
            ORDER BY currency_code, effective_date DESC
            """
        )
        engine = self._db_port.get_billing_engine()
        with engine.connect() as conn:
            rows = conn.execute(query).all()
        return [
            RateRow(
                currency_code=row.currency_code,
                rate=coerce_decimal(row.rate),
            )
            for row in rows
        ]


__all__ = ["StaticConversionRates", "SqlAlchemyConversionRates"]
