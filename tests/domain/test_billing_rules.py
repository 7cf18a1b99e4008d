"""Tests for package pricing, payment status and invoice numbering."""

from datetime import datetime, timezone
from decimal import Decimal

from src.domain.models.billing import Discount, DiscountType, InvoiceStatus
from src.domain.services.billing import (
    compute_package_price,
    derive_payment_status,
)
from src.domain.services.numbering import generate_invoice_number


def test_package_price_stacks_discounts() -> None:
    """Package discounts should compound in order."""
    discounts = [
        Discount(
            id="d-1",
            label="Launch",
            type=DiscountType.PERCENTAGE,
            value=Decimal("10"),
        ),
        Discount(
            id="d-2",
            label="Loyalty",
            type=DiscountType.FLAT,
            value=Decimal("100"),
        ),
    ]

    result = compute_package_price(Decimal("1000"), discounts)

    assert result.price == Decimal("1000")
    assert result.total_discount == Decimal("200")
    assert result.discounted_price == Decimal("800")


def test_package_price_is_floored_at_zero() -> None:
    """A flat discount above the price should leave a zero price."""
    discounts = [
        Discount(
            id="d-1",
            label="Giveaway",
            type=DiscountType.FLAT,
            value=Decimal("250"),
        ),
    ]

    result = compute_package_price(200, discounts)

    assert result.discounted_price == 0
    assert result.total_discount == Decimal("250")


def test_derive_payment_status() -> None:
    """Status should follow the amount paid against the total."""
    assert derive_payment_status(Decimal("100"), Decimal("0")) == (
        InvoiceStatus.UNPAID
    )
    assert derive_payment_status(Decimal("100"), Decimal("40")) == (
        InvoiceStatus.PARTIAL
    )
    assert derive_payment_status(Decimal("100"), Decimal("100")) == (
        InvoiceStatus.PAID
    )
    assert derive_payment_status(Decimal("100"), Decimal("150")) == (
        InvoiceStatus.PAID
    )


def test_generate_invoice_number_uses_last_six_millis_digits() -> None:
    """Invoice numbers should be derived from the creation timestamp."""
    now = datetime(2024, 1, 1, tzinfo=timezone.utc)

    assert generate_invoice_number(now) == "INV-200000"
