"""Application use cases."""

from .create_invoice import CreateInvoiceUseCase
from .get_invoice_totals import GetInvoiceTotalsUseCase
from .get_package_price import GetPackagePriceUseCase
from .record_payment import RecordPaymentUseCase

__all__ = [
    "CreateInvoiceUseCase",
    "GetInvoiceTotalsUseCase",
    "GetPackagePriceUseCase",
    "RecordPaymentUseCase",
]
