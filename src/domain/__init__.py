"""Domain package for billing rules and core models."""

from .constants import (
    DEFAULT_CONVERSION_RATES,
    DEFAULT_DISPLAY_CURRENCY,
    SUPPORTED_CURRENCIES,
)
from .models import (
    Discount,
    DiscountType,
    Invoice,
    InvoiceStatus,
    InvoiceTotals,
    LineItem,
    PackagePrice,
    Payment,
    PaymentMethod,
    RateRow,
)
from .services import (
    StaticConversionProvider,
    build_rate_map,
    compute_invoice_totals,
    compute_package_price,
    convert_amount,
    derive_payment_status,
    normalize_currency_code,
)

__all__ = [
    "Discount",
    "DiscountType",
    "Invoice",
    "InvoiceStatus",
    "InvoiceTotals",
    "LineItem",
    "PackagePrice",
    "Payment",
    "PaymentMethod",
    "RateRow",
    "DEFAULT_CONVERSION_RATES",
    "DEFAULT_DISPLAY_CURRENCY",
    "SUPPORTED_CURRENCIES",
    "StaticConversionProvider",
    "build_rate_map",
    "compute_invoice_totals",
    "compute_package_price",
    "convert_amount",
    "derive_payment_status",
    "normalize_currency_code",
]
