from .client import Client
from .invoice import Invoice, InvoiceItem, InvoiceStatus
from .form import FieldValidation, Form, FormField, FormFieldType
from .dashboard import ActivityEntry, ActivityType, DashboardStats
from .snapshot import StoreChange, StoreSnapshot

__all__ = [
    "Client",
    "Invoice",
    "InvoiceItem",
    "InvoiceStatus",
    "FieldValidation",
    "Form",
    "FormField",
    "FormFieldType",
    "ActivityEntry",
    "ActivityType",
    "DashboardStats",
    "StoreChange",
    "StoreSnapshot",
]
