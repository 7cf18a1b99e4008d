"""Tests for the Streamlit invoice view."""

from datetime import date
from decimal import Decimal

import pytest

from src.adapters.interface.streamlit import app
from src.domain.models.billing import (
    Invoice,
    InvoiceStatus,
    InvoiceSummary,
    InvoiceTotals,
    LineItem,
)
from src.infrastructure.settings import BillingSettings


def _summary(balance_due: Decimal | None = Decimal("100")) -> InvoiceSummary:
    invoice = Invoice(
        id="inv-1",
        project_id="proj-1",
        lead_id="lead-1",
        invoice_number="INV-123456",
        status=InvoiceStatus.PARTIAL,
        issue_date=date(2024, 1, 1),
        due_date=date(2024, 1, 31),
        currency="USD",
        line_items=[
            LineItem(
                id="li-1",
                description="Consulting",
                quantity=3,
                price=Decimal("100"),
                currency="USD",
            )
        ],
        tax_rate=Decimal("15"),
    )
    totals = InvoiceTotals(
        subtotal=Decimal("300"),
        total_discount=Decimal("75"),
        tax_amount=Decimal("33.75"),
        total=Decimal("258.75"),
        currency_code="USD",
        balance_due=balance_due,
    )
    return InvoiceSummary(invoice=invoice, totals=totals)


class _FakeColumn:
    def __init__(self) -> None:
        self.metrics: list[tuple[str, str]] = []

    def metric(self, label: str, value: str, *args, **kwargs):
        self.metrics.append((label, value))


class _FakeSidebar:
    def __init__(self, invoice_id: str, refresh: bool = False) -> None:
        self._invoice_id = invoice_id
        self._refresh = refresh
        self.selectbox_kwargs = None

    def text_input(self, label: str, **_kwargs):
        return self._invoice_id

    def selectbox(self, label: str, options, **kwargs):
        self.selectbox_kwargs = kwargs
        return options[kwargs.get("index", 0)]

    def button(self, label: str, **_kwargs):
        return self._refresh


class _FakeStreamlit:
    def __init__(self, invoice_id: str = "", refresh: bool = False) -> None:
        self.sidebar = _FakeSidebar(invoice_id, refresh)
        self.columns_created: list[_FakeColumn] = []
        self.infos: list[str] = []
        self.warnings: list[str] = []
        self.dataframe_payload = None
        self.chart = None

    def set_page_config(self, **kwargs):
        self.config_kwargs = kwargs

    def title(self, text: str):
        self.title_text = text

    def subheader(self, text: str):
        self.subheader_text = text

    def caption(self, text: str):
        pass

    def info(self, text: str):
        self.infos.append(text)

    def warning(self, text: str):
        self.warnings.append(text)

    def columns(self, count: int):
        self.columns_created = [_FakeColumn() for _ in range(count)]
        return self.columns_created

    def dataframe(self, data, **kwargs):
        self.dataframe_payload = (data, kwargs)

    def altair_chart(self, chart, **kwargs):
        self.chart = chart


class _UsageLogger:
    def __init__(self) -> None:
        self.messages: list[str] = []

    def info(self, msg: str) -> None:
        self.messages.append(msg)


@pytest.fixture(autouse=True)
def usage_logger(monkeypatch):
    logger = _UsageLogger()
    monkeypatch.setattr(app, "get_usage_logger", lambda: logger)
    return logger


def _patch_settings(monkeypatch, currency: str = "LKR") -> None:
    monkeypatch.setattr(
        app.BillingSettings,
        "from_env",
        classmethod(lambda cls: BillingSettings(display_currency=currency)),
    )


def test_fetch_invoice_summary_invokes_use_case(monkeypatch):
    """_fetch_invoice_summary should wire the use case and execute it."""
    expected = _summary()

    class _FakeUseCase:
        def __init__(self, invoice_repository, rates_port):
            assert invoice_repository == "repository"
            assert rates_port == "rates"

        def execute(self, invoice_id, display_currency=None):
            assert (invoice_id, display_currency) == ("inv-1", "USD")
            return expected

    monkeypatch.setattr(app, "build_invoice_repository", lambda: "repository")
    monkeypatch.setattr(app, "build_rates_source", lambda: "rates")
    monkeypatch.setattr(app, "GetInvoiceTotalsUseCase", _FakeUseCase)

    assert app._fetch_invoice_summary("inv-1", "USD") is expected


def test_prepare_totals_chart_data_skips_zero_components():
    """Zero components are dropped and discounts are negative."""
    data = app._prepare_totals_chart_data(_summary(Decimal("0")).totals)

    components = {row["component"]: row["amount"] for row in data}
    assert components["Discount"] == -75.0
    assert components["Paid"] == 258.75
    assert "Balance Due" not in components


def test_main_prompts_for_invoice_id(monkeypatch):
    """main should ask for an invoice when none is entered."""
    fake_st = _FakeStreamlit()
    monkeypatch.setattr(app, "st", fake_st)
    _patch_settings(monkeypatch)

    app.main()

    assert fake_st.infos
    assert fake_st.sidebar.selectbox_kwargs["index"] == 1


def test_main_renders_invoice_totals(monkeypatch, usage_logger):
    """main should render metrics, line items and the totals chart."""
    fake_st = _FakeStreamlit(invoice_id=" inv-1 ")
    requested = {}

    def _fake_load(invoice_id, display_currency):
        requested["args"] = (invoice_id, display_currency)
        return _summary()

    monkeypatch.setattr(app, "st", fake_st)
    monkeypatch.setattr(app, "_load_invoice_summary", _fake_load)
    _patch_settings(monkeypatch, currency="USD")

    app.main()

    assert requested["args"] == ("inv-1", "USD")
    metrics = [metric for col in fake_st.columns_created for metric in col.metrics]
    assert ("Total", "258.75 $") in metrics
    assert ("Balance Due", "100.00 $") in metrics
    rows, kwargs = fake_st.dataframe_payload
    assert rows[0]["Total"] == "300.00 $"
    assert kwargs["hide_index"] is True
    assert fake_st.chart is not None
    assert usage_logger.messages == [
        "Invoice view: invoice=inv-1, currency=USD"
    ]


def test_main_warns_when_invoice_missing(monkeypatch):
    """main should warn when the invoice cannot be loaded."""
    fake_st = _FakeStreamlit(invoice_id="inv-404")

    def _fail(invoice_id, display_currency):
        raise RuntimeError(f"Invoice not found: {invoice_id}")

    monkeypatch.setattr(app, "st", fake_st)
    monkeypatch.setattr(app, "_load_invoice_summary", _fail)
    _patch_settings(monkeypatch)

    app.main()

    assert fake_st.warnings == ["Invoice not found: inv-404"]


def test_main_refresh_clears_cached_summary(monkeypatch):
    """The refresh button should drop cached summaries before loading."""
    fake_st = _FakeStreamlit(invoice_id="inv-1", refresh=True)
    events: list[str] = []

    def _fake_load(invoice_id, display_currency):
        events.append("load")
        return _summary()

    _fake_load.clear = lambda: events.append("clear")
    monkeypatch.setattr(app, "st", fake_st)
    monkeypatch.setattr(app, "_load_invoice_summary", _fake_load)
    _patch_settings(monkeypatch, currency="USD")

    app.main()

    assert events == ["clear", "load"]


def test_summary_cache_expires() -> None:
    """Cached summaries should expire so new payments show up."""
    assert 0 < app.SUMMARY_CACHE_TTL_SECONDS <= 300
