"""Pydantic DTOs (Data Transfer Objects) for the Client feature."""

from datetime import datetime

from pydantic import BaseModel, Field


class ClientCreate(BaseModel):
    """Schema for creating a new client."""

    name: str = Field(..., min_length=1, max_length=255, examples=["Alice Johnson"])
    email: str = Field(..., min_length=1, max_length=255, examples=["alice@company.com"])
    phone: str | None = Field(None, max_length=50)
    address: str | None = None
    company: str | None = Field(None, max_length=255)
    notes: str | None = None


class ClientUpdate(BaseModel):
    """Schema for updating an existing client — all fields optional."""

    name: str | None = Field(None, min_length=1, max_length=255)
    email: str | None = Field(None, min_length=1, max_length=255)
    phone: str | None = Field(None, max_length=50)
    address: str | None = None
    company: str | None = Field(None, max_length=255)
    notes: str | None = None


class ClientResponse(BaseModel):
    """Schema returned to the caller; also the shape of seeded clients."""

    id: str
    name: str
    email: str
    phone: str | None = None
    address: str | None = None
    company: str | None = None
    notes: str | None = None
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
