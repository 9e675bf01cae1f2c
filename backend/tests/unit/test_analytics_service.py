"""Unit tests for the AnalyticsService."""

import pytest

from formflow.application.services import AnalyticsService, DomainStore


def _add_invoice(store: DomainStore, issue_date: str, status: str, price: float) -> None:
    store.add_invoice({
        "number": f"{issue_date}-{status}",
        "client": {"name": "A", "email": "a@x.com"},
        "issue_date": issue_date,
        "due_date": issue_date,
        "status": status,
        "tax_rate": 10,
        "items": [{"description": "Work", "quantity": 1, "price": price}],
    })


@pytest.fixture
def store() -> DomainStore:
    store = DomainStore()
    _add_invoice(store, "2025-01-10", "paid", 100)
    _add_invoice(store, "2025-01-20", "sent", 50)
    _add_invoice(store, "2025-03-05", "overdue", 200)
    _add_invoice(store, "2024-03-05", "draft", 400)
    _add_invoice(store, "2025-06-01", "cancelled", 999)
    form = store.add_form({"title": "Survey"})
    store.update_form(form.id, {"response_count": 4})
    return store


def test_invoice_status_breakdown_ignores_cancelled(store):
    breakdown = AnalyticsService().invoice_status_breakdown(store.snapshot())
    assert breakdown.counts == {"draft": 1, "sent": 1, "paid": 1, "overdue": 1}
    assert breakdown.total == 4
    assert breakdown.percentages == {"draft": 25, "sent": 25, "paid": 25, "overdue": 25}


def test_breakdown_of_empty_store():
    breakdown = AnalyticsService().invoice_status_breakdown(DomainStore().snapshot())
    assert breakdown.total == 0
    assert set(breakdown.percentages.values()) == {0}


def test_monthly_revenue_uses_subtotals(store):
    revenue = AnalyticsService().monthly_revenue(store.snapshot(), year=2025)
    assert revenue.revenue[0] == 150
    assert revenue.invoices[0] == 2
    assert revenue.revenue[2] == 200
    assert revenue.revenue[5] == 999
    assert revenue.labels[0] == "Jan"


def test_monthly_revenue_all_years(store):
    revenue = AnalyticsService().monthly_revenue(store.snapshot())
    assert revenue.revenue[2] == 600
    assert revenue.invoices[2] == 2


def test_revenue_by_status(store):
    assert AnalyticsService().revenue_by_status(store.snapshot()) == {
        "paid": 100, "pending": 50, "overdue": 200,
    }


def test_form_submissions(store):
    assert AnalyticsService().form_submissions(store.snapshot()) == [("Survey", 4)]
