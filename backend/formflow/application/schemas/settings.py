"""Pydantic DTOs for the locally persisted business settings."""

import datetime
from enum import Enum

from pydantic import BaseModel, Field

DEFAULT_INVOICE_TEMPLATE = (
    "Dear {client_name},\n\n"
    "Please find attached invoice #{invoice_number} for {amount}.\n\n"
    "Payment is due by {due_date}.\n\n"
    "Best regards,\n"
    "{company_name}"
)
DEFAULT_REMINDER_TEMPLATE = (
    "Dear {client_name},\n\n"
    "This is a reminder that invoice #{invoice_number} for {amount} is due on {due_date}.\n\n"
    "Best regards,\n"
    "{company_name}"
)
DEFAULT_RECEIPT_TEMPLATE = (
    "Dear {client_name},\n\n"
    "Thank you for your payment of {amount} for invoice #{invoice_number}.\n\n"
    "Best regards,\n"
    "{company_name}"
)


class CompanySettings(BaseModel):
    company_name: str = ""
    email: str = ""
    phone: str = ""
    address: str = ""
    website: str = ""
    tax_id: str = ""


class InvoiceSettings(BaseModel):
    """Defaults used when drafting a new invoice."""

    prefix: str = "INV-"
    next_number: str = Field("2025-001", pattern=r"^\d{4}-\d+$")
    terms: str = "Net 30"
    notes: str = "Thank you for your business!"
    default_tax_rate: float = Field(7.5, ge=0)


class EmailSettings(BaseModel):
    """Message templates. Placeholders are substituted literally."""

    invoice_template: str = DEFAULT_INVOICE_TEMPLATE
    reminder_template: str = DEFAULT_REMINDER_TEMPLATE
    receipt_template: str = DEFAULT_RECEIPT_TEMPLATE


class EmailPreview(BaseModel):
    """A composed, never delivered, message."""

    to: str
    subject: str
    body: str


class ScheduleType(str, Enum):
    SCHEDULED = "scheduled"
    MONTHLY = "monthly"


class InvoiceSchedule(BaseModel):
    """When an invoice should be sent: once on ``date``, or every month on ``day``."""

    type: ScheduleType
    date: datetime.date | None = None
    day: int | None = Field(None, ge=1, le=31)
