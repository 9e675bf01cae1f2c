"""Dashboard aggregate — derived counters plus the recent activity log."""

from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum

from .client import Client, new_id, utc_now
from .form import Form
from .invoice import Invoice, InvoiceStatus


class ActivityType(str, Enum):
    INVOICE = "invoice"
    FORM = "form"
    CLIENT = "client"


@dataclass
class ActivityEntry:
    type: ActivityType
    action: str
    date: datetime = field(default_factory=utc_now)
    id: str = field(default_factory=lambda: new_id("activity"))


# Invoice statuses that own a dedicated counter on the dashboard.
_STATUS_COUNTERS: dict[InvoiceStatus, str] = {
    InvoiceStatus.PAID: "paid_invoices",
    InvoiceStatus.OVERDUE: "overdue_invoices",
}


@dataclass
class DashboardStats:
    """Aggregate counters kept in step with the store's collections.

    ``recent_activity`` is ordered newest first.
    """

    total_invoices: int = 0
    paid_invoices: int = 0
    overdue_invoices: int = 0
    total_forms: int = 0
    form_responses: int = 0
    total_clients: int = 0
    recent_activity: list[ActivityEntry] = field(default_factory=list)

    @classmethod
    def from_collections(
        cls,
        clients: Iterable[Client],
        invoices: Iterable[Invoice],
        forms: Iterable[Form],
        recent_activity: Iterable[ActivityEntry] = (),
    ) -> "DashboardStats":
        """Recompute every counter from scratch."""
        invoices = list(invoices)
        forms = list(forms)
        return cls(
            total_invoices=len(invoices),
            paid_invoices=sum(1 for inv in invoices if inv.status == InvoiceStatus.PAID),
            overdue_invoices=sum(1 for inv in invoices if inv.status == InvoiceStatus.OVERDUE),
            total_forms=len(forms),
            form_responses=sum(form.response_count for form in forms),
            total_clients=len(list(clients)),
            recent_activity=sorted(recent_activity, key=lambda e: e.date, reverse=True),
        )

    def counters(self) -> dict[str, int]:
        return {
            "total_invoices": self.total_invoices,
            "paid_invoices": self.paid_invoices,
            "overdue_invoices": self.overdue_invoices,
            "total_forms": self.total_forms,
            "form_responses": self.form_responses,
            "total_clients": self.total_clients,
        }

    def count_invoice(self, status: InvoiceStatus, delta: int) -> None:
        """Apply ``delta`` to the total and to the counter owned by ``status``."""
        self.total_invoices += delta
        self._bump_status(status, delta)

    def move_invoice(self, old: InvoiceStatus, new: InvoiceStatus) -> None:
        if old == new:
            return
        self._bump_status(old, -1)
        self._bump_status(new, 1)

    def record(self, entry: ActivityEntry, limit: int | None = None) -> None:
        """Prepend ``entry`` and evict the oldest entries beyond ``limit``."""
        self.recent_activity.insert(0, entry)
        if limit is not None and len(self.recent_activity) > limit:
            del self.recent_activity[limit:]

    def _bump_status(self, status: InvoiceStatus, delta: int) -> None:
        counter = _STATUS_COUNTERS.get(status)
        if counter is not None:
            setattr(self, counter, getattr(self, counter) + delta)
