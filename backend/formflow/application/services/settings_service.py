"""Application service for the locally persisted business settings.

Company profile, invoicing defaults, email templates and per-invoice send
schedules are stored as opaque JSON blobs behind a ``SettingsRepository``.
Missing or invalid blobs fall back to the defaults declared on the DTOs.
"""

import logging
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from formflow.application.interfaces import SettingsRepository
from formflow.application.schemas import (
    CompanySettings,
    EmailSettings,
    InvoiceSchedule,
    InvoiceSettings,
)

logger = logging.getLogger(__name__)

COMPANY_KEY = "companySettings"
INVOICE_KEY = "invoiceSettings"
EMAIL_KEY = "emailSettings"
SCHEDULE_KEY_PREFIX = "schedule_"

_Model = TypeVar("_Model", bound=BaseModel)


class AppSettingsService:
    """Typed access to the settings blobs."""

    def __init__(self, repository: SettingsRepository):
        self._repository = repository

    def get_company(self) -> CompanySettings:
        return self._read(COMPANY_KEY, CompanySettings)

    def get_invoicing(self) -> InvoiceSettings:
        return self._read(INVOICE_KEY, InvoiceSettings)

    def get_email(self) -> EmailSettings:
        return self._read(EMAIL_KEY, EmailSettings)

    def update_company(self, updates: dict[str, Any]) -> CompanySettings:
        return self._merge(COMPANY_KEY, CompanySettings, updates)

    def update_invoicing(self, updates: dict[str, Any]) -> InvoiceSettings:
        return self._merge(INVOICE_KEY, InvoiceSettings, updates)

    def update_email(self, updates: dict[str, Any]) -> EmailSettings:
        return self._merge(EMAIL_KEY, EmailSettings, updates)

    def get_schedule(self, invoice_number: str) -> InvoiceSchedule | None:
        """The stored send schedule for an invoice, or None when it is sent manually."""
        key = SCHEDULE_KEY_PREFIX + invoice_number
        raw = self._repository.get(key)
        if raw is None:
            return None
        try:
            return InvoiceSchedule.model_validate(raw)
        except ValidationError as exc:
            logger.warning("Stored %s is invalid, ignoring it: %s", key, exc)
            return None

    def set_schedule(self, invoice_number: str, schedule: InvoiceSchedule) -> None:
        key = SCHEDULE_KEY_PREFIX + invoice_number
        self._repository.set(key, schedule.model_dump(mode="json", exclude_none=True))
        logger.info("Settings %s updated: %s", key, schedule.type.value)

    def _read(self, key: str, model: type[_Model]) -> _Model:
        raw = self._repository.get(key)
        if raw is None:
            return model()
        try:
            return model.model_validate(raw)
        except ValidationError as exc:
            logger.warning("Stored %s is invalid — using defaults: %s", key, exc)
            return model()

    def _merge(self, key: str, model: type[_Model], updates: dict[str, Any]) -> _Model:
        """Validate ``updates`` on top of the current values, then persist.

        Unknown keys are ignored; invalid values raise before anything is written.
        """
        current = self._read(key, model)
        merged = model.model_validate({**current.model_dump(), **updates})
        self._repository.set(key, merged.model_dump())
        logger.info("Settings %s updated: %s", key, sorted(set(updates) & set(model.model_fields)))
        return merged
