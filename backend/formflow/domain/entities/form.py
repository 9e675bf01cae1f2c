"""Domain entities for the form builder."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any

from .client import new_id, utc_now


class FormFieldType(str, Enum):
    TEXT = "text"
    TEXTAREA = "textarea"
    NUMBER = "number"
    EMAIL = "email"
    TEL = "tel"
    DATE = "date"
    TIME = "time"
    SELECT = "select"
    CHECKBOX = "checkbox"
    RADIO = "radio"
    FILE = "file"

    @property
    def has_options(self) -> bool:
        return self in _CHOICE_TYPES


_CHOICE_TYPES = frozenset({FormFieldType.SELECT, FormFieldType.CHECKBOX, FormFieldType.RADIO})


@dataclass
class FieldValidation:
    pattern: str | None = None
    min: float | None = None
    max: float | None = None
    min_length: int | None = None
    max_length: int | None = None


@dataclass
class FormField:
    """One input of a form. ``options`` only matter for choice types."""

    type: FormFieldType
    label: str
    placeholder: str | None = None
    required: bool | None = None
    options: list[str] | None = None
    validation: FieldValidation | None = None
    id: str = field(default_factory=lambda: new_id("field"))


@dataclass
class Form:
    """A form definition. Field order is the display and response order."""

    title: str
    description: str | None = None
    fields: list[FormField] = field(default_factory=list)
    published: bool = False
    response_count: int = 0
    id: str = field(default_factory=lambda: new_id("form"))
    created_at: datetime = field(default_factory=utc_now)
    updated_at: datetime | None = None

    def __post_init__(self) -> None:
        if self.updated_at is None:
            self.updated_at = self.created_at

    def field_index(self, field_id: str) -> int | None:
        for index, form_field in enumerate(self.fields):
            if form_field.id == field_id:
                return index
        return None

    def update(self, **changes: Any) -> None:
        """Merge the given fields and refresh the updated_at timestamp."""
        for key, value in changes.items():
            setattr(self, key, value)
        self.updated_at = utc_now()
