"""Application port for invoice persistence."""

from typing import Protocol

from src.domain.models.billing import (
    Invoice,
    InvoiceStatus,
    InvoiceTotals,
    Payment,
)


class InvoiceRepositoryPort(Protocol):
    """Port exposing read and write access to invoices."""

    def fetch_invoice(self, invoice_id: str) -> Invoice | None:
        """Return the invoice with its lines, discounts, and payments."""

    def create_invoice(self, invoice: Invoice, totals: InvoiceTotals) -> str:
        """Persist a new invoice with its totals snapshot; return its id."""

    def add_payment(
        self,
        invoice_id: str,
        payment: Payment,
        status: InvoiceStatus,
    ) -> None:
        """Append a payment and update the invoice status."""


__all__ = ["InvoiceRepositoryPort"]
