"""Composition root for wiring infrastructure adapters."""

from src.application.ports.conversion_rates import ConversionRatesPort
from src.application.ports.database import DatabaseEnginePort
from src.application.ports.invoice_repository import InvoiceRepositoryPort
from src.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from src.infrastructure.invoice_repository import SqlAlchemyInvoiceRepository
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.rates_source_factory import create_rates_source
from src.infrastructure.settings import BillingSettings


def build_database_adapter() -> DatabaseEnginePort:
    """Return the database adapter instance."""
    return SqlAlchemyDatabaseEngineAdapter()


def build_invoice_repository(
    db_port: DatabaseEnginePort | None = None,
) -> InvoiceRepositoryPort:
    """Return the invoice repository."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyInvoiceRepository(resolved_db)


def build_rates_source(
    db_port: DatabaseEnginePort | None = None,
    settings: BillingSettings | None = None,
) -> ConversionRatesPort:
    """Return the configured currency rate source."""
    resolved_settings = settings or BillingSettings.from_env()
    resolved_db = db_port
    if resolved_settings.rates_source == "database":
        resolved_db = db_port or build_database_adapter()
    return create_rates_source(
        resolved_db,
        logger=get_app_logger(),
        settings=resolved_settings,
    )


__all__ = [
    "build_database_adapter",
    "build_invoice_repository",
    "build_rates_source",
]
