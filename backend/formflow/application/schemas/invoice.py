"""Pydantic DTOs for the Invoice feature."""

from datetime import date, datetime

from pydantic import BaseModel, Field

from formflow.domain.entities import InvoiceStatus

from .client import ClientResponse


class InvoiceItemSchema(BaseModel):
    """A line item. ``id`` is generated when omitted."""

    id: str | None = None
    description: str = Field(..., min_length=1, examples=["Website Design"])
    quantity: float = Field(..., gt=0, examples=[1])
    price: float = Field(..., ge=0, examples=[1500])
    taxable: bool | None = None

    model_config = {"from_attributes": True}


class InvoiceClientSchema(BaseModel):
    """Client data embedded into an invoice at creation time."""

    id: str | None = None
    name: str = Field(..., min_length=1)
    email: str = Field(..., min_length=1)
    phone: str | None = None
    address: str | None = None
    company: str | None = None
    notes: str | None = None

    model_config = {"from_attributes": True}


class InvoiceCreate(BaseModel):
    """Schema for creating a new invoice."""

    number: str = Field(..., min_length=1, examples=["INV-2025-001"])
    client: InvoiceClientSchema
    issue_date: date
    due_date: date
    items: list[InvoiceItemSchema] = Field(default_factory=list)
    notes: str | None = None
    terms: str | None = None
    status: InvoiceStatus = InvoiceStatus.DRAFT
    currency: str = Field("USD", min_length=3, max_length=3)
    tax_rate: float | None = Field(None, ge=0)


class InvoiceUpdate(BaseModel):
    """Schema for updating an existing invoice — all fields optional."""

    number: str | None = Field(None, min_length=1)
    client: InvoiceClientSchema | None = None
    issue_date: date | None = None
    due_date: date | None = None
    items: list[InvoiceItemSchema] | None = None
    notes: str | None = None
    terms: str | None = None
    status: InvoiceStatus | None = None
    currency: str | None = Field(None, min_length=3, max_length=3)
    tax_rate: float | None = Field(None, ge=0)


class InvoiceResponse(BaseModel):
    """Schema returned to the caller; also the shape of seeded invoices."""

    id: str
    number: str
    client: ClientResponse
    issue_date: date
    due_date: date
    items: list[InvoiceItemSchema]
    notes: str | None = None
    terms: str | None = None
    status: InvoiceStatus
    currency: str = "USD"
    tax_rate: float | None = None
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
