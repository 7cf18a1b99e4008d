"""Tests for rate sources and their selection."""

from decimal import Decimal
from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest

from src.domain.models.rates import RateRow
from src.infrastructure import rates_source_factory as factory
from src.infrastructure.conversion_rates import (
    SqlAlchemyConversionRates,
    StaticConversionRates,
)
from src.infrastructure.settings import BillingSettings


class _FakeResult:
    def __init__(self, rows: list[SimpleNamespace]) -> None:
        self._rows = rows

    def all(self):
        return self._rows

    def first(self):
        return self._rows[0] if self._rows else None


def _build_db_port(results: list[list[SimpleNamespace]]) -> MagicMock:
    engine = MagicMock()
    conn = MagicMock()
    context = MagicMock()
    context.__enter__.return_value = conn
    engine.connect.return_value = context
    conn.execute.side_effect = [_FakeResult(rows) for rows in results]

    db_port = MagicMock()
    db_port.get_billing_engine.return_value = engine
    return db_port


def test_static_rates_return_rows() -> None:
    """The static source should expose its table as rate rows."""
    source = StaticConversionRates({"USD": 1, "LKR": Decimal("300")})

    assert source.fetch_rates() == [
        RateRow(currency_code="USD", rate=Decimal("1")),
        RateRow(currency_code="LKR", rate=Decimal("300")),
    ]


def test_sqlalchemy_rates_map_rows() -> None:
    """The database source should coerce rates to Decimal."""
    db_port = _build_db_port(
        [
            [
                SimpleNamespace(currency_code="EUR", rate=0.9),
                SimpleNamespace(currency_code="LKR", rate="300.5"),
            ]
        ]
    )

    rows = SqlAlchemyConversionRates(db_port).fetch_rates()

    assert rows == [
        RateRow(currency_code="EUR", rate=Decimal("0.9")),
        RateRow(currency_code="LKR", rate=Decimal("300.5")),
    ]


def test_factory_defaults_to_static_rates() -> None:
    """Factory should return the static source by default."""
    source = factory.create_rates_source(
        None,
        logger=MagicMock(),
        settings=BillingSettings(),
    )

    assert isinstance(source, StaticConversionRates)


def test_factory_uses_database_rates() -> None:
    """Factory should return the database source when configured."""
    source = factory.create_rates_source(
        MagicMock(),
        logger=MagicMock(),
        settings=BillingSettings(rates_source="database"),
    )

    assert isinstance(source, SqlAlchemyConversionRates)


def test_factory_requires_db_port_for_database_rates() -> None:
    """The database source cannot be built without a database port."""
    with pytest.raises(RuntimeError):
        factory.create_rates_source(
            None,
            logger=MagicMock(),
            settings=BillingSettings(rates_source="database"),
        )


def test_factory_rejects_unknown_source() -> None:
    """Unknown rate sources should raise a ValueError."""
    with pytest.raises(ValueError, match="Unsupported rate source"):
        factory.create_rates_source(
            None,
            logger=MagicMock(),
            settings=BillingSettings(rates_source="live"),
        )
