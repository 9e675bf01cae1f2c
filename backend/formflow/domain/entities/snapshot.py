"""Immutable views of the store handed to readers and observers."""

from dataclasses import dataclass

from .client import Client
from .dashboard import DashboardStats
from .form import Form
from .invoice import Invoice


@dataclass(frozen=True)
class StoreSnapshot:
    """Deep copy of the store state at one instant.

    Nothing reachable from a snapshot is shared with the live store.
    """

    clients: tuple[Client, ...]
    invoices: tuple[Invoice, ...]
    forms: tuple[Form, ...]
    stats: DashboardStats
    loaded: bool


@dataclass(frozen=True)
class StoreChange:
    """Published to observers after every applied mutation."""

    operation: str
    entity_type: str
    entity_id: str | None
    snapshot: StoreSnapshot
