"""CLI adapter to quote a discounted service package price."""

from decimal import Decimal, InvalidOperation
import os

from src.application.use_cases.get_package_price import GetPackagePriceUseCase
from src.domain.models.billing import Discount, DiscountType
from src.infrastructure.container import build_rates_source
from src.infrastructure.logging.logger import get_app_logger, get_usage_logger
from src.infrastructure.settings import BillingSettings
from src.utils.currency_format import format_currency


def _parse_discounts(raw: str | None, logger) -> list[Discount]:
    """Parse ``type:value`` pairs such as ``percentage:10,flat:500``.

    Args:
        raw: Raw comma-separated discount list.
        logger: Logger used for warnings.

    Returns:
        list[Discount]: Parsed discounts in order; malformed pairs skipped.
    """
    discounts: list[Discount] = []
    if not raw:
        return discounts
    for position, pair in enumerate(raw.split(",")):
        if not pair.strip():
            continue
        kind, _, raw_value = pair.partition(":")
        try:
            discount_type = DiscountType(kind.strip().lower())
            value = Decimal(raw_value.strip())
        except (ValueError, InvalidOperation):
            logger.warning(f"Ignoring malformed discount '{pair}'")
            continue
        if not value.is_finite():
            logger.warning(f"Ignoring malformed discount '{pair}'")
            continue
        discounts.append(
            Discount(
                id=f"d-{position + 1}",
                label=pair.strip(),
                type=discount_type,
                value=value,
            )
        )
    return discounts


def main() -> None:
    """Price the package described by PACKAGE_* environment variables."""
    logger = get_app_logger()
    raw_price = os.getenv("PACKAGE_PRICE")
    try:
        price = Decimal(raw_price.strip()) if raw_price else None
    except InvalidOperation:
        price = None
    if price is None or not price.is_finite():
        logger.warning("PACKAGE_PRICE must be a number to quote a package.")
        return

    settings = BillingSettings.from_env()
    currency = os.getenv("PACKAGE_CURRENCY") or settings.display_currency
    display_currency = os.getenv("DISPLAY_CURRENCY") or currency
    discounts = _parse_discounts(os.getenv("PACKAGE_DISCOUNTS"), logger)

    try:
        use_case = GetPackagePriceUseCase(
            rates_port=build_rates_source(settings=settings),
            logger=logger,
        )
        result = use_case.execute(
            price,
            currency,
            discounts,
            display_currency=display_currency,
        )
    except RuntimeError as exc:
        logger.error(str(exc))
        return

    get_usage_logger().info(
        f"package-price: currency={currency}, display={result.currency_code}"
    )
    code = result.currency_code
    print(f"Price: {format_currency(result.price, code)}")
    if result.total_discount:
        print(f"Discount: -{format_currency(result.total_discount, code)}")
    print(f"Discounted price: {format_currency(result.discounted_price, code)}")


if __name__ == "__main__":  # pragma: no cover
    main()
