"""Domain models package."""

from .billing import (
    Discount,
    DiscountType,
    Invoice,
    InvoiceDraft,
    InvoiceStatus,
    InvoiceSummary,
    InvoiceTotals,
    LineItem,
    PackagePrice,
    Payment,
    PaymentMethod,
    PaymentResult,
)
from .rates import RateRow

__all__ = [
    "Discount",
    "DiscountType",
    "Invoice",
    "InvoiceDraft",
    "InvoiceStatus",
    "InvoiceSummary",
    "InvoiceTotals",
    "LineItem",
    "PackagePrice",
    "Payment",
    "PaymentMethod",
    "PaymentResult",
    "RateRow",
]
