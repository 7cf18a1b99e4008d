"""Domain validation helpers.

These checks only warn. The totals calculator accepts any well-typed input,
so callers run them to surface suspicious values before computing.
"""

from collections.abc import Iterable
from decimal import Decimal
from logging import Logger

from src.domain.models.billing import Discount, DiscountType, LineItem
from src.domain.services.normalization import normalize_currency_code
from src.utils.decimal_utils import HUNDRED, coerce_decimal


def validate_line_items(
    line_items: Iterable[LineItem],
    logger: Logger,
) -> list[str]:
    """Warn about line items with unusable quantities, prices, or currencies.

    Args:
        line_items: Line items to inspect.
        logger: Logger used for warnings.

    Returns:
        list[str]: Messages describing each issue found.
    """
    issues: list[str] = []
    for item in line_items:
        if coerce_decimal(item.quantity) <= 0:
            issues.append(
                f"Line item {item.id} has non-positive quantity: {item.quantity}"
            )
        if coerce_decimal(item.price) < 0:
            issues.append(
                f"Line item {item.id} has negative price: {item.price}"
            )
        if normalize_currency_code(item.currency) is None:
            issues.append(f"Line item {item.id} has no currency")
    for message in issues:
        logger.warning(message)
    return issues


def validate_discounts(
    discounts: Iterable[Discount],
    logger: Logger,
) -> list[str]:
    """Warn about negative discounts and percentages above 100.

    Args:
        discounts: Discounts to inspect.
        logger: Logger used for warnings.

    Returns:
        list[str]: Messages describing each issue found.
    """
    issues: list[str] = []
    for discount in discounts:
        value = coerce_decimal(discount.value)
        if value < 0:
            issues.append(f"Discount {discount.id} has negative value: {value}")
        if discount.type == DiscountType.PERCENTAGE and value > HUNDRED:
            issues.append(
                f"Discount {discount.id} exceeds 100 percent: {value}"
            )
    for message in issues:
        logger.warning(message)
    return issues


def validate_tax_rate(tax_rate, logger: Logger) -> list[str]:
    """Warn when the tax rate is outside the 0-100 range."""
    rate = coerce_decimal(tax_rate)
    if Decimal("0") <= rate <= HUNDRED:
        return []
    message = f"Tax rate outside 0-100: {rate}"
    logger.warning(message)
    return [message]


__all__ = ["validate_line_items", "validate_discounts", "validate_tax_rate"]
