"""Streamlit invoice view entry point."""

from decimal import Decimal

import altair as alt
import streamlit as st

from src.application.use_cases.get_invoice_totals import (
    GetInvoiceTotalsUseCase,
    InvoiceSummary,
)
from src.domain.constants import SUPPORTED_CURRENCIES
from src.domain.models.billing import InvoiceTotals
from src.infrastructure.container import (
    build_invoice_repository,
    build_rates_source,
)
from src.infrastructure.logging.logger import get_usage_logger
from src.infrastructure.settings import BillingSettings
from src.utils.currency_format import format_currency


def _fetch_invoice_summary(
    invoice_id: str,
    display_currency: str,
) -> InvoiceSummary:
    """Fetch an invoice and its totals in the display currency."""
    use_case = GetInvoiceTotalsUseCase(
        invoice_repository=build_invoice_repository(),
        rates_port=build_rates_source(),
    )
    return use_case.execute(invoice_id, display_currency=display_currency)


SUMMARY_CACHE_TTL_SECONDS = 60


@st.cache_data(show_spinner=False, ttl=SUMMARY_CACHE_TTL_SECONDS)
def _load_invoice_summary(
    invoice_id: str,
    display_currency: str,
    schema_version: int = 1,
) -> InvoiceSummary:
    """Cached wrapper around _fetch_invoice_summary."""
    _ = schema_version
    return _fetch_invoice_summary(invoice_id, display_currency)


def _line_item_rows(summary: InvoiceSummary) -> list[dict[str, str]]:
    """Build table rows for the invoice line items, in their own currency."""
    return [
        {
            "Description": item.description,
            "Quantity": str(item.quantity),
            "Unit Price": format_currency(item.price, item.currency),
            "Total": format_currency(item.line_total, item.currency),
        }
        for item in summary.invoice.line_items
    ]


def _prepare_totals_chart_data(
    totals: InvoiceTotals,
) -> list[dict[str, str | float]]:
    """Prepare bar chart data for the totals breakdown.

    Args:
        totals: Computed invoice totals.

    Returns:
        Altair-ready rows; zero components are omitted.
    """
    components: list[tuple[str, Decimal]] = [
        ("Subtotal", totals.subtotal),
        ("Discount", -totals.total_discount),
        ("Tax", totals.tax_amount),
        ("Total", totals.total),
    ]
    if totals.balance_due is not None:
        components.append(("Paid", totals.total - totals.balance_due))
        components.append(("Balance Due", totals.balance_due))
    return [
        {
            "component": label,
            "amount": float(amount),
            "amount_label": format_currency(amount, totals.currency_code),
        }
        for label, amount in components
        if amount != 0
    ]


def _render_totals_chart(totals: InvoiceTotals) -> None:
    data = _prepare_totals_chart_data(totals)
    if not data:
        st.info("No amounts to chart for this invoice.")
        return
    chart = alt.Chart(alt.Data(values=data)).mark_bar(
        cornerRadiusEnd=4,
    ).encode(
        x=alt.X("amount:Q", title=totals.currency_code),
        y=alt.Y(
            "component:N",
            sort=[row["component"] for row in data],
            title=None,
        ),
        color=alt.condition(
            alt.datum.amount < 0,
            alt.value("#e76f51"),
            alt.value("#1b9aaa"),
        ),
        tooltip=[
            alt.Tooltip("component:N"),
            alt.Tooltip("amount_label:N"),
        ],
    ).properties(height=220)
    st.altair_chart(chart, width="stretch")


def _render_summary(summary: InvoiceSummary) -> None:
    totals = summary.totals
    currency = totals.currency_code
    invoice = summary.invoice
    st.subheader(f"Invoice {invoice.invoice_number}")
    st.caption(
        f"Status: {invoice.status.value} · Issued {invoice.issue_date} · "
        f"Due {invoice.due_date}"
    )

    subtotal_col, discount_col, tax_col, total_col, balance_col = st.columns(5)
    subtotal_col.metric("Subtotal", format_currency(totals.subtotal, currency))
    discount_col.metric(
        "Discount",
        format_currency(totals.total_discount, currency),
    )
    tax_col.metric(
        f"Tax ({invoice.tax_rate}%)",
        format_currency(totals.tax_amount, currency),
    )
    total_col.metric("Total", format_currency(totals.total, currency))
    balance_due = (
        totals.balance_due if totals.balance_due is not None else totals.total
    )
    balance_col.metric("Balance Due", format_currency(balance_due, currency))

    st.dataframe(
        _line_item_rows(summary),
        width="stretch",
        hide_index=True,
    )
    _render_totals_chart(totals)
    if invoice.notes:
        st.caption(invoice.notes)


def main() -> None:
    """Render the Streamlit app."""
    st.set_page_config(page_title="Billing", layout="wide")
    st.title("Billing")

    settings = BillingSettings.from_env()
    currencies = list(SUPPORTED_CURRENCIES)
    default_index = (
        currencies.index(settings.display_currency)
        if settings.display_currency in currencies
        else 0
    )
    invoice_id = st.sidebar.text_input("Invoice ID").strip()
    display_currency = st.sidebar.selectbox(
        "Display currency",
        currencies,
        index=default_index,
    )
    if st.sidebar.button("Refresh"):
        _load_invoice_summary.clear()
    if not invoice_id:
        st.info("Enter an invoice ID to view its totals.")
        return

    try:
        summary = _load_invoice_summary(invoice_id, display_currency)
    except RuntimeError as exc:
        st.warning(str(exc))
        return
    get_usage_logger().info(
        f"Invoice view: invoice={invoice_id}, currency={display_currency}"
    )
    _render_summary(summary)


if __name__ == "__main__":  # pragma: no cover
    main()
