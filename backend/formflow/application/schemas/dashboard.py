"""Pydantic DTOs for the dashboard aggregate, snapshots and seed data."""

from datetime import datetime

from pydantic import BaseModel, Field

from formflow.domain.entities import ActivityType

from .client import ClientResponse
from .form import FormResponse
from .invoice import InvoiceResponse


class ActivityResponse(BaseModel):
    id: str
    type: ActivityType
    action: str
    date: datetime

    model_config = {"from_attributes": True}


class DashboardStatsResponse(BaseModel):
    total_invoices: int
    paid_invoices: int
    overdue_invoices: int
    total_forms: int
    form_responses: int
    total_clients: int
    recent_activity: list[ActivityResponse]

    model_config = {"from_attributes": True}


class SnapshotResponse(BaseModel):
    """Serializable view of a ``StoreSnapshot``."""

    clients: list[ClientResponse]
    invoices: list[InvoiceResponse]
    forms: list[FormResponse]
    stats: DashboardStatsResponse
    loaded: bool

    model_config = {"from_attributes": True}


class SeedData(BaseModel):
    """Initial content handed to ``DomainStore.load``.

    Counters are never seeded; the store derives them from the collections.
    """

    clients: list[ClientResponse] = Field(default_factory=list)
    invoices: list[InvoiceResponse] = Field(default_factory=list)
    forms: list[FormResponse] = Field(default_factory=list)
    recent_activity: list[ActivityResponse] = Field(default_factory=list)
