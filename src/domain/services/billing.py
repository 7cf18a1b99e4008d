"""Invoice totals, package pricing, and payment status rules.

Every function here is pure: results depend only on the arguments, nothing
is logged or persisted, and no rounding is applied. Callers validate inputs
(see ``validation``) and round when formatting.
"""

from collections.abc import Iterable, Mapping, Sequence
from decimal import Decimal

from src.domain.models.billing import (
    Discount,
    DiscountType,
    InvoiceStatus,
    InvoiceTotals,
    LineItem,
    PackagePrice,
    Payment,
)
from src.domain.services.fx import convert_amount
from src.domain.services.normalization import normalize_currency_code
from src.utils.decimal_utils import HUNDRED, ZERO, coerce_decimal


def compute_subtotal(
    line_items: Iterable[LineItem],
    display_currency: str,
    rates: Mapping[str, Decimal],
) -> Decimal:
    """Sum line totals after converting each one to the display currency."""
    subtotal = ZERO
    for item in line_items:
        subtotal += convert_amount(
            item.line_total,
            item.currency,
            display_currency,
            rates,
        )
    return subtotal


def _discount_amount(
    discount: Discount,
    remaining: Decimal,
    base_currency: str,
    display_currency: str,
    rates: Mapping[str, Decimal],
) -> Decimal:
    value = coerce_decimal(discount.value)
    if discount.type == DiscountType.PERCENTAGE:
        return remaining * value / HUNDRED
    if discount.type == DiscountType.FLAT:
        return convert_amount(value, base_currency, display_currency, rates)
    return ZERO


def sum_payments(
    payments: Iterable[Payment],
    display_currency: str,
    rates: Mapping[str, Decimal],
    base_currency: str,
) -> Decimal:
    """Sum payments in the display currency.

    Payments without a currency are taken to be in ``base_currency``.
    """
    return sum(
        (
            convert_amount(
                payment.amount,
                payment.currency or base_currency,
                display_currency,
                rates,
            )
            for payment in payments
        ),
        start=ZERO,
    )


def compute_invoice_totals(
    line_items: Sequence[LineItem],
    discounts: Sequence[Discount],
    tax_rate,
    display_currency: str,
    rates: Mapping[str, Decimal],
    payments: Sequence[Payment] | None = None,
    *,
    base_currency: str | None = None,
) -> InvoiceTotals:
    """Compute invoice totals in a single display currency.

    Discounts apply in the given order. A percentage discount takes its share
    of what remains after the earlier discounts; a flat discount is converted
    from ``base_currency``. Tax applies to the discounted amount floored at
    zero, so ``total`` is never negative even when discounts exceed the
    subtotal.

    Args:
        line_items: Billable rows; may be empty.
        discounts: Discounts in application order; may be empty.
        tax_rate: Tax percentage applied after discounts.
        display_currency: Currency all outputs are expressed in.
        rates: Conversion table; unknown codes convert at rate 1.
        payments: Optional payments. When given, ``balance_due`` is filled.
        base_currency: Currency of flat discounts and of payments without a
            currency. Defaults to ``display_currency``.

    Returns:
        InvoiceTotals: Subtotal, discount, tax, total, and balance due.
    """
    display = normalize_currency_code(display_currency) or display_currency
    base = normalize_currency_code(base_currency) or display

    subtotal = compute_subtotal(line_items, display, rates)

    total_discount = ZERO
    for discount in discounts:
        remaining = subtotal - total_discount
        total_discount += _discount_amount(
            discount,
            remaining,
            base,
            display,
            rates,
        )

    taxable = max(subtotal - total_discount, ZERO)
    tax_amount = taxable * coerce_decimal(tax_rate) / HUNDRED
    total = taxable + tax_amount

    balance_due = None
    if payments is not None:
        balance_due = total - sum_payments(payments, display, rates, base)

    return InvoiceTotals(
        subtotal=subtotal,
        total_discount=total_discount,
        tax_amount=tax_amount,
        total=total,
        currency_code=display,
        balance_due=balance_due,
    )


def compute_package_price(
    price,
    discounts: Sequence[Discount],
) -> PackagePrice:
    """Apply stacked discounts to a single-currency package price.

    Args:
        price: Package list price.
        discounts: Discounts in application order; flat values share the
            package currency.

    Returns:
        PackagePrice: Discounted price floored at zero and total discount.
    """
    list_price = coerce_decimal(price)
    remaining = list_price
    total_discount = ZERO
    for discount in discounts:
        value = coerce_decimal(discount.value)
        if discount.type == DiscountType.PERCENTAGE:
            amount = remaining * value / HUNDRED
        elif discount.type == DiscountType.FLAT:
            amount = value
        else:
            continue
        total_discount += amount
        remaining -= amount
    return PackagePrice(
        price=list_price,
        discounted_price=max(remaining, ZERO),
        total_discount=total_discount,
    )


def derive_payment_status(total, payments_total) -> InvoiceStatus:
    """Return the status implied by the amount paid against a total."""
    paid = coerce_decimal(payments_total)
    if paid >= coerce_decimal(total):
        return InvoiceStatus.PAID
    if paid <= 0:
        return InvoiceStatus.UNPAID
    return InvoiceStatus.PARTIAL


__all__ = [
    "compute_subtotal",
    "compute_invoice_totals",
    "compute_package_price",
    "derive_payment_status",
    "sum_payments",
]
