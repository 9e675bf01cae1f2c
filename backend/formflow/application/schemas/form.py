"""Pydantic DTOs for the Form feature."""

from datetime import datetime

from pydantic import BaseModel, Field

from formflow.domain.entities import FormFieldType


class FieldValidationSchema(BaseModel):
    pattern: str | None = None
    min: float | None = None
    max: float | None = None
    min_length: int | None = Field(None, ge=0)
    max_length: int | None = Field(None, ge=0)

    model_config = {"from_attributes": True}


class FormFieldSchema(BaseModel):
    """A single form field. ``id`` is generated when omitted."""

    id: str | None = None
    type: FormFieldType
    label: str = Field(..., min_length=1, examples=["Full Name"])
    placeholder: str | None = None
    required: bool | None = None
    options: list[str] | None = None
    validation: FieldValidationSchema | None = None

    model_config = {"from_attributes": True}


class FormCreate(BaseModel):
    """Schema for creating a new form. New forms always start with no responses."""

    title: str = Field(..., min_length=1, max_length=255, examples=["Client Intake Form"])
    description: str | None = None
    fields: list[FormFieldSchema] = Field(default_factory=list)
    published: bool = False


class FormUpdate(BaseModel):
    """Schema for updating an existing form — all fields optional."""

    title: str | None = Field(None, min_length=1, max_length=255)
    description: str | None = None
    fields: list[FormFieldSchema] | None = None
    published: bool | None = None
    response_count: int | None = Field(None, ge=0)


class FormResponse(BaseModel):
    """Schema returned to the caller; also the shape of seeded forms."""

    id: str
    title: str
    description: str | None = None
    fields: list[FormFieldSchema]
    published: bool
    response_count: int = Field(0, ge=0)
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
