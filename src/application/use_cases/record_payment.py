"""Use case to record a payment and update the invoice status."""

from src.application.ports.conversion_rates import ConversionRatesPort
from src.application.ports.invoice_repository import InvoiceRepositoryPort
from src.domain.models.billing import InvoiceStatus, Payment, PaymentResult
from src.domain.services.billing import (
    compute_invoice_totals,
    derive_payment_status,
)
from src.domain.services.fx import build_rate_map
from src.infrastructure.logging.logger import get_app_logger
from src.utils.decimal_utils import coerce_decimal


class RecordPaymentUseCase:
    """Append a payment to an invoice and recompute its balance."""

    def __init__(
        self,
        invoice_repository: InvoiceRepositoryPort,
        rates_port: ConversionRatesPort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            invoice_repository: Port providing and persisting invoices.
            rates_port: Port providing currency conversion rates.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._invoice_repository = invoice_repository
        self._rates_port = rates_port
        self._logger = logger or get_app_logger()

    def execute(self, invoice_id: str, payment: Payment) -> PaymentResult:
        """Record the payment and return the new status and balance.

        Args:
            invoice_id: Identifier of the invoice being paid.
            payment: Payment received.

        Returns:
            PaymentResult: Derived status and totals in the invoice currency.

        Raises:
            RuntimeError: If the amount is not a positive finite number, or
                the invoice does not exist or is void.
        """
        amount = coerce_decimal(payment.amount)
        if not amount.is_finite() or amount <= 0:
            raise RuntimeError(
                f"Payment amount must be a positive number, got {payment.amount}"
            )
        invoice = self._invoice_repository.fetch_invoice(invoice_id)
        if invoice is None:
            raise RuntimeError(f"Invoice not found: {invoice_id}")
        if invoice.status == InvoiceStatus.VOID:
            raise RuntimeError(
                f"Cannot record payment on void invoice {invoice.invoice_number}"
            )

        rates = build_rate_map(self._rates_port.fetch_rates(), self._logger)
        payments = [*invoice.payments, payment]
        totals = compute_invoice_totals(
            invoice.line_items,
            invoice.discounts,
            invoice.tax_rate,
            invoice.currency,
            rates,
            payments=payments,
            base_currency=invoice.currency,
        )
        status = derive_payment_status(
            totals.total,
            totals.total - totals.balance_due,
        )
        self._invoice_repository.add_payment(invoice_id, payment, status)
        self._logger.info(
            f"Payment recorded on {invoice.invoice_number}: "
            f"amount={payment.amount}, status={status.value}, "
            f"balance_due={totals.balance_due}"
        )
        return PaymentResult(
            invoice_id=invoice_id,
            status=status,
            totals=totals,
        )


__all__ = ["RecordPaymentUseCase", "PaymentResult"]
