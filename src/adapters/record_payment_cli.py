"""CLI adapter to record a payment against a stored invoice."""

from datetime import date
from decimal import Decimal, InvalidOperation
import os

from src.application.use_cases.record_payment import RecordPaymentUseCase
from src.domain.models.billing import Payment, PaymentMethod
from src.infrastructure.container import (
    build_invoice_repository,
    build_rates_source,
)
from src.infrastructure.logging.logger import get_app_logger, get_usage_logger
from src.utils.currency_format import format_currency


def _parse_amount(value: str | None, logger) -> Decimal | None:
    """Parse a payment amount.

    Args:
        value: Raw amount string.
        logger: Logger used for warnings.

    Returns:
        Decimal | None: Parsed amount or None when invalid.
    """
    if not value:
        return None
    try:
        amount = Decimal(value.strip())
    except InvalidOperation:
        logger.warning(f"Invalid payment amount '{value}'.")
        return None
    if not amount.is_finite():
        logger.warning(f"Payment amount must be finite, got '{value}'.")
        return None
    return amount


def _parse_method(value: str | None, logger) -> PaymentMethod:
    if not value:
        return PaymentMethod.CASH
    try:
        return PaymentMethod(value.strip().lower())
    except ValueError:
        logger.warning(f"Unknown payment method '{value}', using 'other'.")
        return PaymentMethod.OTHER


def main() -> None:
    """Record the payment described by PAYMENT_* environment variables."""
    logger = get_app_logger()
    invoice_id = os.getenv("INVOICE_ID")
    amount = _parse_amount(os.getenv("PAYMENT_AMOUNT"), logger)
    if not invoice_id or amount is None:
        logger.warning(
            "INVOICE_ID and PAYMENT_AMOUNT are required to record a payment."
        )
        return

    payment = Payment(
        amount=amount,
        currency=os.getenv("PAYMENT_CURRENCY") or None,
        date=date.today(),
        method=_parse_method(os.getenv("PAYMENT_METHOD"), logger),
        note=os.getenv("PAYMENT_NOTE") or None,
    )
    try:
        use_case = RecordPaymentUseCase(
            invoice_repository=build_invoice_repository(),
            rates_port=build_rates_source(),
            logger=logger,
        )
        result = use_case.execute(invoice_id, payment)
    except RuntimeError as exc:
        logger.error(str(exc))
        return

    get_usage_logger().info(
        f"record-payment: invoice={invoice_id}, status={result.status.value}"
    )
    currency = result.totals.currency_code
    print(
        f"Payment recorded on {invoice_id}: status={result.status.value}, "
        f"balance due {format_currency(result.balance_due, currency)}"
    )


if __name__ == "__main__":  # pragma: no cover
    main()
