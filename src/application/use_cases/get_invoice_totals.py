"""Use case to compute invoice totals in a display currency."""

from src.application.ports.conversion_rates import ConversionRatesPort
from src.application.ports.invoice_repository import InvoiceRepositoryPort
from src.domain.models.billing import InvoiceSummary
from src.domain.services.billing import compute_invoice_totals
from src.domain.services.fx import build_rate_map
from src.domain.services.normalization import normalize_currency_code
from src.infrastructure.logging.logger import get_app_logger


class GetInvoiceTotalsUseCase:
    """Load an invoice and compute its totals and balance due."""

    def __init__(
        self,
        invoice_repository: InvoiceRepositoryPort,
        rates_port: ConversionRatesPort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            invoice_repository: Port providing invoice data.
            rates_port: Port providing currency conversion rates.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._invoice_repository = invoice_repository
        self._rates_port = rates_port
        self._logger = logger or get_app_logger()

    def execute(
        self,
        invoice_id: str,
        display_currency: str | None = None,
    ) -> InvoiceSummary:
        """Return the invoice with totals in the display currency.

        Args:
            invoice_id: Identifier of the invoice to load.
            display_currency: Currency to present totals in; defaults to the
                invoice currency.

        Returns:
            InvoiceSummary: The invoice and its computed totals.

        Raises:
            RuntimeError: If the invoice does not exist.
        """
        invoice = self._invoice_repository.fetch_invoice(invoice_id)
        if invoice is None:
            raise RuntimeError(f"Invoice not found: {invoice_id}")

        rates = build_rate_map(self._rates_port.fetch_rates(), self._logger)
        target_currency = (
            normalize_currency_code(display_currency) or invoice.currency
        )
        totals = compute_invoice_totals(
            invoice.line_items,
            invoice.discounts,
            invoice.tax_rate,
            target_currency,
            rates,
            payments=invoice.payments,
            base_currency=invoice.currency,
        )
        self._logger.info(
            f"Invoice totals computed for {invoice.invoice_number}: "
            f"total={totals.total}, balance_due={totals.balance_due}, "
            f"currency={totals.currency_code}"
        )
        return InvoiceSummary(invoice=invoice, totals=totals)


__all__ = ["GetInvoiceTotalsUseCase", "InvoiceSummary"]
