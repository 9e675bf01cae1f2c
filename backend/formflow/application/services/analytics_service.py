"""Chart-ready figures derived from a store snapshot."""

from dataclasses import dataclass, field

from formflow.domain.entities import InvoiceStatus, StoreSnapshot

MONTH_LABELS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)

# Statuses shown on the dashboard status chart.
_CHART_STATUSES = (
    InvoiceStatus.DRAFT,
    InvoiceStatus.SENT,
    InvoiceStatus.PAID,
    InvoiceStatus.OVERDUE,
)


@dataclass
class StatusBreakdown:
    counts: dict[str, int]
    percentages: dict[str, int]
    total: int


@dataclass
class MonthlyRevenue:
    year: int | None
    labels: tuple[str, ...] = MONTH_LABELS
    revenue: list[float] = field(default_factory=lambda: [0.0] * 12)
    invoices: list[int] = field(default_factory=lambda: [0] * 12)


class AnalyticsService:
    """Read-only reporting over snapshots. Holds no state of its own."""

    def invoice_status_breakdown(self, snapshot: StoreSnapshot) -> StatusBreakdown:
        counts = {status.value: 0 for status in _CHART_STATUSES}
        for invoice in snapshot.invoices:
            if invoice.status in _CHART_STATUSES:
                counts[invoice.status.value] += 1
        total = sum(counts.values())
        percentages = {
            key: round(value / total * 100) if total else 0
            for key, value in counts.items()
        }
        return StatusBreakdown(counts=counts, percentages=percentages, total=total)

    def monthly_revenue(self, snapshot: StoreSnapshot, year: int | None = None) -> MonthlyRevenue:
        """Bucket invoice subtotals by issue month. ``year=None`` folds all years together."""
        result = MonthlyRevenue(year=year)
        for invoice in snapshot.invoices:
            if year is not None and invoice.issue_date.year != year:
                continue
            month = invoice.issue_date.month - 1
            result.revenue[month] += invoice.subtotal
            result.invoices[month] += 1
        return result

    def revenue_by_status(self, snapshot: StoreSnapshot) -> dict[str, float]:
        """Subtotals of paid, pending (sent) and overdue invoices."""
        buckets = {
            InvoiceStatus.PAID: "paid",
            InvoiceStatus.SENT: "pending",
            InvoiceStatus.OVERDUE: "overdue",
        }
        totals = {name: 0.0 for name in buckets.values()}
        for invoice in snapshot.invoices:
            bucket = buckets.get(invoice.status)
            if bucket:
                totals[bucket] += invoice.subtotal
        return totals

    def form_submissions(self, snapshot: StoreSnapshot) -> list[tuple[str, int]]:
        return [(form.title, form.response_count) for form in snapshot.forms]
