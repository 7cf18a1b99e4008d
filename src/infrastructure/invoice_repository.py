"""SQLAlchemy-backed repository for invoices.

Tables:
    invoices: header fields plus the totals snapshot taken at creation.
    invoice_line_items, invoice_discounts: ordered by ``position``.
    invoice_payments: ordered by ``paid_on``.
"""

from datetime import datetime, timezone
import uuid

from sqlalchemy import text

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.invoice_repository import InvoiceRepositoryPort
from src.domain.models.billing import (
    Discount,
    DiscountType,
    Invoice,
    InvoiceStatus,
    InvoiceTotals,
    LineItem,
    Payment,
    PaymentMethod,
)
from src.utils.decimal_utils import coerce_decimal


class SqlAlchemyInvoiceRepository(InvoiceRepositoryPort):
    """Repository backed by SQLAlchemy for invoice reads and writes."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the billing engine.
        """
        self._db_port = db_port

    def fetch_invoice(self, invoice_id: str) -> Invoice | None:
        header_query = text(
            """
            SELECT id, project_id, lead_id, invoice_number, status,
                   issue_date, due_date, currency, tax_rate, notes
            FROM invoices
            WHERE id = :invoice_id
            """
        )
        line_items_query = text(
            """
            SELECT id, description, quantity, price, currency
            FROM invoice_line_items
            WHERE invoice_id = :invoice_id
            ORDER BY position
            """
        )
        discounts_query = text(
            """
            SELECT id, label, discount_type, value
            FROM invoice_discounts
            WHERE invoice_id = :invoice_id
            ORDER BY position
            """
        )
        payments_query = text(
            """
            SELECT id, amount, currency, paid_on, method, note
            FROM invoice_payments
            WHERE invoice_id = :invoice_id
            ORDER BY paid_on, id
            """
        )
        params = {"invoice_id": invoice_id}
        engine = self._db_port.get_billing_engine()
        with engine.connect() as conn:
            header = conn.execute(header_query, params).first()
            if header is None:
                return None
            line_rows = conn.execute(line_items_query, params).all()
            discount_rows = conn.execute(discounts_query, params).all()
            payment_rows = conn.execute(payments_query, params).all()

        return Invoice(
            id=header.id,
            project_id=header.project_id,
            lead_id=header.lead_id,
            invoice_number=header.invoice_number,
            status=InvoiceStatus(header.status),
            issue_date=header.issue_date,
            due_date=header.due_date,
            currency=header.currency,
            line_items=[
                LineItem(
                    id=row.id,
                    description=row.description,
                    quantity=int(row.quantity),
                    price=coerce_decimal(row.price),
                    currency=row.currency,
                )
                for row in line_rows
            ],
            discounts=[
                Discount(
                    id=row.id,
                    label=row.label,
                    type=DiscountType(row.discount_type),
                    value=coerce_decimal(row.value),
                )
                for row in discount_rows
            ],
            tax_rate=coerce_decimal(header.tax_rate),
            payments=[
                Payment(
                    id=row.id,
                    amount=coerce_decimal(row.amount),
                    currency=row.currency,
                    date=row.paid_on,
                    method=PaymentMethod(row.method),
                    note=row.note,
                )
                for row in payment_rows
            ],
            notes=header.notes,
        )

    def create_invoice(self, invoice: Invoice, totals: InvoiceTotals) -> str:
        invoice_id = invoice.id or uuid.uuid4().hex
        now = self._utcnow()
        header_query = text(
            """
            INSERT INTO invoices (
                id, project_id, lead_id, invoice_number, status,
                issue_date, due_date, currency, tax_rate, notes,
                subtotal, total_discount, tax_amount, total,
                created_at, updated_at
            )
            VALUES (
                :id, :project_id, :lead_id, :invoice_number, :status,
                :issue_date, :due_date, :currency, :tax_rate, :notes,
                :subtotal, :total_discount, :tax_amount, :total,
                :created_at, :updated_at
            )
            """
        )
        line_items_query = text(
            """
            INSERT INTO invoice_line_items (
                id, invoice_id, position, description, quantity, price,
                currency
            )
            VALUES (
                :id, :invoice_id, :position, :description, :quantity, :price,
                :currency
            )
            """
        )
        discounts_query = text(
            """
            INSERT INTO invoice_discounts (
                id, invoice_id, position, label, discount_type, value
            )
            VALUES (
                :id, :invoice_id, :position, :label, :discount_type, :value
            )
            """
        )
        header_params = {
            "id": invoice_id,
            "project_id": invoice.project_id,
            "lead_id": invoice.lead_id,
            "invoice_number": invoice.invoice_number,
            "status": invoice.status.value,
            "issue_date": invoice.issue_date,
            "due_date": invoice.due_date,
            "currency": invoice.currency,
            "tax_rate": invoice.tax_rate,
            "notes": invoice.notes,
            "subtotal": totals.subtotal,
            "total_discount": totals.total_discount,
            "tax_amount": totals.tax_amount,
            "total": totals.total,
            "created_at": now,
            "updated_at": now,
        }
        line_params = [
            {
                "id": item.id or uuid.uuid4().hex,
                "invoice_id": invoice_id,
                "position": position,
                "description": item.description,
                "quantity": item.quantity,
                "price": item.price,
                "currency": item.currency,
            }
            for position, item in enumerate(invoice.line_items)
        ]
        discount_params = [
            {
                "id": discount.id or uuid.uuid4().hex,
                "invoice_id": invoice_id,
                "position": position,
                "label": discount.label,
                "discount_type": DiscountType(discount.type).value,
                "value": discount.value,
            }
            for position, discount in enumerate(invoice.discounts)
        ]
        engine = self._db_port.get_billing_engine()
        with engine.begin() as conn:
            conn.execute(header_query, header_params)
            if line_params:
                conn.execute(line_items_query, line_params)
            if discount_params:
                conn.execute(discounts_query, discount_params)
        return invoice_id

    def add_payment(
        self,
        invoice_id: str,
        payment: Payment,
        status: InvoiceStatus,
    ) -> None:
        payment_query = text(
            """
            INSERT INTO invoice_payments (
                id, invoice_id, amount, currency, paid_on, method, note
            )
            VALUES (
                :id, :invoice_id, :amount, :currency, :paid_on, :method, :note
            )
            """
        )
        status_query = text(
            """
            UPDATE invoices
            SET status = :status, updated_at = :updated_at
            WHERE id = :invoice_id
            """
        )
        engine = self._db_port.get_billing_engine()
        with engine.begin() as conn:
            conn.execute(
                payment_query,
                {
                    "id": payment.id or uuid.uuid4().hex,
                    "invoice_id": invoice_id,
                    "amount": payment.amount,
                    "currency": payment.currency,
                    "paid_on": payment.date,
                    "method": PaymentMethod(payment.method).value,
                    "note": payment.note,
                },
            )
            conn.execute(
                status_query,
                {
                    "status": status.value,
                    "updated_at": self._utcnow(),
                    "invoice_id": invoice_id,
                },
            )

    @staticmethod
    def _utcnow() -> datetime:
        return datetime.now(timezone.utc)


__all__ = ["SqlAlchemyInvoiceRepository"]
