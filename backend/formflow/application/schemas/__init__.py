from .client import ClientCreate, ClientUpdate, ClientResponse
from .invoice import (
    InvoiceClientSchema,
    InvoiceCreate,
    InvoiceItemSchema,
    InvoiceResponse,
    InvoiceUpdate,
)
from .form import (
    FieldValidationSchema,
    FormCreate,
    FormFieldSchema,
    FormResponse,
    FormUpdate,
)
from .dashboard import (
    ActivityResponse,
    DashboardStatsResponse,
    SeedData,
    SnapshotResponse,
)
from .settings import (
    CompanySettings,
    EmailPreview,
    EmailSettings,
    InvoiceSchedule,
    InvoiceSettings,
    ScheduleType,
)

__all__ = [
    "ClientCreate",
    "ClientUpdate",
    "ClientResponse",
    "InvoiceClientSchema",
    "InvoiceCreate",
    "InvoiceItemSchema",
    "InvoiceResponse",
    "InvoiceUpdate",
    "FieldValidationSchema",
    "FormCreate",
    "FormFieldSchema",
    "FormResponse",
    "FormUpdate",
    "ActivityResponse",
    "DashboardStatsResponse",
    "SeedData",
    "SnapshotResponse",
    "CompanySettings",
    "EmailPreview",
    "EmailSettings",
    "InvoiceSchedule",
    "InvoiceSettings",
    "ScheduleType",
]
