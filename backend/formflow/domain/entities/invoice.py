"""Domain entities for invoices and their line items."""

from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum
from typing import Any

from .client import Client, new_id, utc_now


class InvoiceStatus(str, Enum):
    DRAFT = "draft"
    SENT = "sent"
    PAID = "paid"
    OVERDUE = "overdue"
    CANCELLED = "cancelled"


@dataclass
class InvoiceItem:
    """A single billed line. Owned by exactly one invoice."""

    description: str
    quantity: float
    price: float
    # Kept with the item; tax is charged on the whole subtotal.
    taxable: bool | None = None
    id: str = field(default_factory=lambda: new_id("item"))

    @property
    def amount(self) -> float:
        return self.quantity * self.price


@dataclass
class Invoice:
    """An invoice billing an embedded copy of a client.

    The embedded client is captured when the invoice is created; later edits
    or deletion of the directory client never reach it.
    """

    number: str
    client: Client
    issue_date: date
    due_date: date
    items: list[InvoiceItem] = field(default_factory=list)
    status: InvoiceStatus = InvoiceStatus.DRAFT
    currency: str = "USD"
    notes: str | None = None
    terms: str | None = None
    tax_rate: float | None = None
    id: str = field(default_factory=lambda: new_id("invoice"))
    created_at: datetime = field(default_factory=utc_now)
    updated_at: datetime | None = None

    def __post_init__(self) -> None:
        if self.updated_at is None:
            self.updated_at = self.created_at

    @property
    def subtotal(self) -> float:
        return sum(item.amount for item in self.items)

    @property
    def tax(self) -> float:
        if not self.tax_rate:
            return 0.0
        return self.subtotal * self.tax_rate / 100

    @property
    def total(self) -> float:
        return self.subtotal + self.tax

    def is_past_due(self, today: date) -> bool:
        """A sent invoice whose due date lies before ``today``."""
        return self.status == InvoiceStatus.SENT and self.due_date < today

    def update(self, **changes: Any) -> None:
        """Merge the given fields and refresh the updated_at timestamp."""
        for key, value in changes.items():
            setattr(self, key, value)
        self.updated_at = utc_now()
