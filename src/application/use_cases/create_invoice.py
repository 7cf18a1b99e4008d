"""Use case to create an invoice with a snapshot of its totals."""

from collections.abc import Callable
from dataclasses import replace
from datetime import datetime

from src.application.ports.conversion_rates import ConversionRatesPort
from src.application.ports.invoice_repository import InvoiceRepositoryPort
from src.domain.models.billing import Invoice, InvoiceDraft, InvoiceStatus
from src.domain.services.billing import compute_invoice_totals
from src.domain.services.fx import build_rate_map
from src.domain.services.normalization import normalize_currency_code
from src.domain.services.numbering import generate_invoice_number
from src.domain.services.validation import (
    validate_discounts,
    validate_line_items,
    validate_tax_rate,
)
from src.infrastructure.logging.logger import get_app_logger


class CreateInvoiceUseCase:
    """Create an invoice and persist its totals as computed at creation."""

    def __init__(
        self,
        invoice_repository: InvoiceRepositoryPort,
        rates_port: ConversionRatesPort,
        logger=None,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        """Initialize the use case.

        Args:
            invoice_repository: Port persisting invoices.
            rates_port: Port providing currency conversion rates.
            logger: Optional logger compatible with logging.Logger-like API.
            clock: Callable returning the creation time.
        """
        self._invoice_repository = invoice_repository
        self._rates_port = rates_port
        self._logger = logger or get_app_logger()
        self._clock = clock

    def execute(self, draft: InvoiceDraft) -> Invoice:
        """Validate, number, total, and persist a new invoice.

        Validation issues are logged as warnings and do not block creation.

        Args:
            draft: Invoice fields entered by the user.

        Returns:
            Invoice: The created invoice in draft status.
        """
        validate_line_items(draft.line_items, self._logger)
        validate_discounts(draft.discounts, self._logger)
        validate_tax_rate(draft.tax_rate, self._logger)

        currency = normalize_currency_code(draft.currency) or draft.currency
        invoice = Invoice(
            id="",
            project_id=draft.project_id,
            lead_id=draft.lead_id,
            invoice_number=generate_invoice_number(self._clock()),
            status=InvoiceStatus.DRAFT,
            issue_date=draft.issue_date,
            due_date=draft.due_date,
            currency=currency,
            line_items=list(draft.line_items),
            discounts=list(draft.discounts),
            tax_rate=draft.tax_rate,
            payments=[],
            notes=draft.notes,
        )

        rates = build_rate_map(self._rates_port.fetch_rates(), self._logger)
        totals = compute_invoice_totals(
            invoice.line_items,
            invoice.discounts,
            invoice.tax_rate,
            currency,
            rates,
            base_currency=currency,
        )
        invoice_id = self._invoice_repository.create_invoice(invoice, totals)
        self._logger.info(
            f"Created invoice {invoice.invoice_number} ({invoice_id}): "
            f"total={totals.total} {currency}"
        )
        return replace(invoice, id=invoice_id)


__all__ = ["CreateInvoiceUseCase"]
