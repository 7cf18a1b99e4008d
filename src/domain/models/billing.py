"""Domain models for invoices and their computed totals."""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from enum import Enum

from src.utils.decimal_utils import coerce_decimal


class DiscountType(str, Enum):
    """How a discount value is interpreted."""

    PERCENTAGE = "percentage"
    FLAT = "flat"


class InvoiceStatus(str, Enum):
    """Lifecycle status of an invoice."""

    DRAFT = "draft"
    SENT = "sent"
    PAID = "paid"
    VOID = "void"
    PARTIAL = "partial"
    UNPAID = "unpaid"


class PaymentMethod(str, Enum):
    """Channel a payment was received through."""

    CASH = "cash"
    BANK_TRANSFER = "bank transfer"
    ONLINE = "online"
    OTHER = "other"


@dataclass(frozen=True)
class LineItem:
    """One billable row on an invoice.

    Attributes:
        id: Line identifier.
        description: Free-text description.
        quantity: Number of units billed.
        price: Unit price in ``currency``.
        currency: Currency code of the unit price.
    """

    id: str
    description: str
    quantity: int
    price: Decimal
    currency: str

    @property
    def line_total(self) -> Decimal:
        """Return price times quantity in the line currency."""
        return coerce_decimal(self.price) * coerce_decimal(self.quantity)


@dataclass(frozen=True)
class Discount:
    """Percentage-of-remaining or flat reduction applied in sequence.

    Flat values are denominated in the invoice base currency.
    """

    id: str
    label: str
    type: DiscountType
    value: Decimal


@dataclass(frozen=True)
class Payment:
    """Payment received against an invoice.

    Attributes:
        amount: Amount received.
        currency: Currency of the amount; None means the invoice currency.
        date: Day the payment was received.
    """

    amount: Decimal
    currency: str | None
    date: date
    id: str = ""
    method: PaymentMethod = PaymentMethod.CASH
    note: str | None = None


@dataclass(frozen=True)
class InvoiceTotals:
    """Computed totals for an invoice in a single display currency.

    Values keep full precision; rounding happens when they are formatted.
    """

    subtotal: Decimal
    total_discount: Decimal
    tax_amount: Decimal
    total: Decimal
    currency_code: str
    balance_due: Decimal | None = None

    @property
    def subtotal_after_discount(self) -> Decimal:
        """Return the subtotal minus discounts, without clamping."""
        return self.subtotal - self.total_discount


@dataclass(frozen=True)
class PackagePrice:
    """Discounted price of a service package.

    ``currency_code`` is set once the amounts are converted for display.
    """

    price: Decimal
    discounted_price: Decimal
    total_discount: Decimal
    currency_code: str | None = None


@dataclass(frozen=True)
class Invoice:
    """Invoice as stored by the persistence layer."""

    id: str
    project_id: str
    lead_id: str
    invoice_number: str
    status: InvoiceStatus
    issue_date: date
    due_date: date
    currency: str
    line_items: list[LineItem] = field(default_factory=list)
    discounts: list[Discount] = field(default_factory=list)
    tax_rate: Decimal = Decimal("0")
    payments: list[Payment] = field(default_factory=list)
    notes: str | None = None


@dataclass(frozen=True)
class InvoiceDraft:
    """Invoice fields collected before the invoice is created."""

    project_id: str
    lead_id: str
    issue_date: date
    due_date: date
    currency: str
    line_items: list[LineItem] = field(default_factory=list)
    discounts: list[Discount] = field(default_factory=list)
    tax_rate: Decimal = Decimal("0")
    notes: str | None = None


@dataclass(frozen=True)
class InvoiceSummary:
    """Invoice together with its totals for rendering."""

    invoice: Invoice
    totals: InvoiceTotals

    @property
    def currency_code(self) -> str:
        return self.totals.currency_code


@dataclass(frozen=True)
class PaymentResult:
    """Outcome of recording a payment against an invoice."""

    invoice_id: str
    status: InvoiceStatus
    totals: InvoiceTotals

    @property
    def balance_due(self) -> Decimal:
        """Return the remaining balance in the invoice currency."""
        if self.totals.balance_due is None:
            return self.totals.total
        return self.totals.balance_due


__all__ = [
    "DiscountType",
    "InvoiceStatus",
    "PaymentMethod",
    "LineItem",
    "Discount",
    "Payment",
    "InvoiceTotals",
    "PackagePrice",
    "Invoice",
    "InvoiceDraft",
    "InvoiceSummary",
    "PaymentResult",
]
