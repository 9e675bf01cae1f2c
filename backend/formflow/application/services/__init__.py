from .domain_store import ACTIVITY_POLICY, DomainStore
from .analytics_service import AnalyticsService
from .bootstrap import bootstrap_store
from .form_builder_service import FormBuilderService
from .invoice_drafting_service import InvoiceDraftingService
from .settings_service import AppSettingsService
from .store_broadcaster import StoreBroadcaster

__all__ = [
    "ACTIVITY_POLICY",
    "DomainStore",
    "AnalyticsService",
    "bootstrap_store",
    "FormBuilderService",
    "InvoiceDraftingService",
    "AppSettingsService",
    "StoreBroadcaster",
]
