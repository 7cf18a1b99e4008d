"""CLI adapter to print the totals of a stored invoice."""

import os

from src.application.use_cases.get_invoice_totals import (
    GetInvoiceTotalsUseCase,
)
from src.infrastructure.container import (
    build_invoice_repository,
    build_rates_source,
)
from src.infrastructure.logging.logger import get_app_logger, get_usage_logger
from src.infrastructure.settings import BillingSettings
from src.utils.currency_format import format_currency


def main() -> None:
    """Compute and print totals for the invoice named by INVOICE_ID."""
    logger = get_app_logger()
    invoice_id = os.getenv("INVOICE_ID")
    if not invoice_id:
        logger.warning("INVOICE_ID is required to compute invoice totals.")
        return

    settings = BillingSettings.from_env()
    display_currency = os.getenv("DISPLAY_CURRENCY") or settings.display_currency

    try:
        use_case = GetInvoiceTotalsUseCase(
            invoice_repository=build_invoice_repository(),
            rates_port=build_rates_source(settings=settings),
            logger=logger,
        )
        summary = use_case.execute(
            invoice_id,
            display_currency=display_currency,
        )
    except RuntimeError as exc:
        logger.error(str(exc))
        return

    get_usage_logger().info(
        f"invoice-totals: invoice={invoice_id}, currency={display_currency}"
    )
    totals = summary.totals
    currency = totals.currency_code
    print(
        f"Invoice {summary.invoice.invoice_number} "
        f"(status={summary.invoice.status.value}, currency={currency})"
    )
    print(f"Subtotal: {format_currency(totals.subtotal, currency)}")
    if totals.total_discount > 0:
        print(f"Discount: -{format_currency(totals.total_discount, currency)}")
    if totals.tax_amount > 0:
        print(
            f"Tax ({summary.invoice.tax_rate}%): "
            f"{format_currency(totals.tax_amount, currency)}"
        )
    print(f"Total: {format_currency(totals.total, currency)}")
    if totals.balance_due is not None:
        print(f"Balance due: {format_currency(totals.balance_due, currency)}")


if __name__ == "__main__":  # pragma: no cover
    main()
