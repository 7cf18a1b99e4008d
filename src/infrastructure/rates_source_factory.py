"""Factory helpers to select the currency rate source."""

from src.application.ports.conversion_rates import ConversionRatesPort
from src.application.ports.database import DatabaseEnginePort
from src.infrastructure.conversion_rates import (
    SqlAlchemyConversionRates,
    StaticConversionRates,
)
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.settings import BillingSettings


def create_rates_source(
    db_port: DatabaseEnginePort | None,
    logger=None,
    settings: BillingSettings | None = None,
) -> ConversionRatesPort:
    """Return a rate source implementation based on configuration.

    Args:
        db_port: Port providing access to the billing engine; required for
            the database source.
        logger: Optional logger compatible with logging.Logger-like API.
        settings: Optional settings override; read from the environment
            when omitted.

    Returns:
        ConversionRatesPort: Concrete rate source.
    """
    resolved_logger = logger or get_app_logger()
    resolved_settings = settings or BillingSettings.from_env()
    source = resolved_settings.rates_source

    if source == "static":
        return StaticConversionRates(resolved_settings.static_rates)

    if source == "database":
        if db_port is None:
            raise RuntimeError("Database rate source requires a database port.")
        resolved_logger.info("Using currency_rates table for FX rates")
        return SqlAlchemyConversionRates(db_port)

    raise ValueError(
        "Unsupported rate source: "
        f"{source}. Expected static or database."
    )


__all__ = ["create_rates_source"]
