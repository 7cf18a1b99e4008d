"""Domain services package."""

from .billing import (
    compute_invoice_totals,
    compute_package_price,
    compute_subtotal,
    derive_payment_status,
    sum_payments,
)
from .fx import StaticConversionProvider, build_rate_map, convert_amount
from .normalization import normalize_currency_code
from .numbering import generate_invoice_number
from .validation import (
    validate_discounts,
    validate_line_items,
    validate_tax_rate,
)

__all__ = [
    "compute_invoice_totals",
    "compute_package_price",
    "compute_subtotal",
    "derive_payment_status",
    "sum_payments",
    "StaticConversionProvider",
    "build_rate_map",
    "convert_amount",
    "normalize_currency_code",
    "generate_invoice_number",
    "validate_discounts",
    "validate_line_items",
    "validate_tax_rate",
]
