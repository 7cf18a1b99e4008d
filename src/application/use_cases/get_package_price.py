"""Use case to price a service package in a display currency."""

from collections.abc import Sequence

from src.application.ports.conversion_rates import ConversionRatesPort
from src.domain.models.billing import Discount, PackagePrice
from src.domain.services.billing import compute_package_price
from src.domain.services.fx import StaticConversionProvider
from src.domain.services.normalization import normalize_currency_code
from src.domain.services.validation import validate_discounts
from src.infrastructure.logging.logger import get_app_logger
from src.utils.decimal_utils import coerce_decimal


class GetPackagePriceUseCase:
    """Apply package discounts and convert the result for display."""

    def __init__(
        self,
        rates_port: ConversionRatesPort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            rates_port: Port providing currency conversion rates.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._rates_port = rates_port
        self._logger = logger or get_app_logger()

    def execute(
        self,
        price,
        currency: str,
        discounts: Sequence[Discount],
        display_currency: str | None = None,
    ) -> PackagePrice:
        """Return the discounted package price in the display currency.

        Discounts stack in the package currency; flat values share it.

        Args:
            price: Package list price in ``currency``.
            currency: Currency the package is priced in.
            discounts: Discounts in application order.
            display_currency: Currency to present the price in; defaults to
                the package currency.

        Returns:
            PackagePrice: Converted list price, discounted price, and
            discount, tagged with the display currency.
        """
        if coerce_decimal(price) < 0:
            self._logger.warning(f"Package price is negative: {price}")
        validate_discounts(discounts, self._logger)

        provider = StaticConversionProvider.from_rows(
            self._rates_port.fetch_rates(),
            self._logger,
        )
        source_currency = normalize_currency_code(currency) or currency
        target_currency = (
            normalize_currency_code(display_currency) or source_currency
        )
        priced = compute_package_price(price, discounts)
        result = PackagePrice(
            price=provider.convert(
                priced.price,
                source_currency,
                target_currency,
            ),
            discounted_price=provider.convert(
                priced.discounted_price,
                source_currency,
                target_currency,
            ),
            total_discount=provider.convert(
                priced.total_discount,
                source_currency,
                target_currency,
            ),
            currency_code=target_currency,
        )
        self._logger.info(
            f"Package priced: discounted={result.discounted_price}, "
            f"currency={target_currency}"
        )
        return result


__all__ = ["GetPackagePriceUseCase"]
