"""Application ports package."""

from .conversion_rates import ConversionRatesPort
from .database import DatabaseEnginePort
from .invoice_repository import InvoiceRepositoryPort

__all__ = [
    "ConversionRatesPort",
    "DatabaseEnginePort",
    "InvoiceRepositoryPort",
]
