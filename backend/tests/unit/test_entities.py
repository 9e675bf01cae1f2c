"""Unit tests for domain entities."""

from datetime import date, datetime, timezone

import pytest

from formflow.domain.entities import (
    ActivityEntry,
    ActivityType,
    Client,
    DashboardStats,
    Form,
    FormField,
    FormFieldType,
    Invoice,
    InvoiceItem,
    InvoiceStatus,
)


def _invoice(items, tax_rate=None, status=InvoiceStatus.SENT) -> Invoice:
    return Invoice(
        number="INV-1",
        client=Client(name="A", email="a@x.com"),
        issue_date=date(2025, 4, 1),
        due_date=date(2025, 4, 15),
        items=items,
        tax_rate=tax_rate,
        status=status,
    )


def test_invoice_totals_without_tax():
    invoice = _invoice([InvoiceItem("Design", 1, 1500), InvoiceItem("Logo", 1, 500)])
    assert invoice.subtotal == 2000
    assert invoice.tax == 0
    assert invoice.total == 2000


def test_invoice_tax_applies_to_whole_subtotal():
    invoice = _invoice(
        [InvoiceItem("Hours", 1, 100), InvoiceItem("Expenses", 1, 100, taxable=False)],
        tax_rate=10,
    )
    assert invoice.subtotal == 200
    assert invoice.tax == pytest.approx(20)
    assert invoice.total == pytest.approx(220)


def test_new_entities_start_with_equal_timestamps():
    for entity in (
        Client(name="A", email="a@x.com"),
        _invoice([]),
        Form(title="Survey"),
    ):
        assert entity.updated_at == entity.created_at


def test_explicit_updated_at_is_kept():
    created = datetime(2025, 3, 1, tzinfo=timezone.utc)
    updated = datetime(2025, 4, 1, tzinfo=timezone.utc)
    client = Client(name="A", email="a@x.com", created_at=created, updated_at=updated)
    assert (client.created_at, client.updated_at) == (created, updated)


def test_is_past_due_only_for_sent_invoices():
    today = date(2025, 5, 1)
    assert _invoice([], status=InvoiceStatus.SENT).is_past_due(today)
    assert not _invoice([], status=InvoiceStatus.PAID).is_past_due(today)
    assert not _invoice([], status=InvoiceStatus.SENT).is_past_due(date(2025, 4, 15))


def test_choice_field_types():
    assert {t for t in FormFieldType if t.has_options} == {
        FormFieldType.SELECT, FormFieldType.CHECKBOX, FormFieldType.RADIO,
    }


def test_field_index():
    first = FormField(type=FormFieldType.TEXT, label="A")
    second = FormField(type=FormFieldType.EMAIL, label="B")
    form = Form(title="F", fields=[first, second])
    assert form.field_index(second.id) == 1
    assert form.field_index("missing") is None


def test_dashboard_record_prepends_and_caps():
    stats = DashboardStats()
    for i in range(4):
        stats.record(ActivityEntry(type=ActivityType.CLIENT, action=str(i)), limit=2)
    assert [e.action for e in stats.recent_activity] == ["3", "2"]


def test_move_invoice_between_counted_statuses():
    stats = DashboardStats(total_invoices=1, paid_invoices=1)
    stats.move_invoice(InvoiceStatus.PAID, InvoiceStatus.OVERDUE)
    assert (stats.paid_invoices, stats.overdue_invoices, stats.total_invoices) == (0, 1, 1)
    stats.move_invoice(InvoiceStatus.OVERDUE, InvoiceStatus.CANCELLED)
    assert (stats.paid_invoices, stats.overdue_invoices) == (0, 0)
