"""Domain entity — a client in the directory."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any
from uuid import uuid4


def new_id(prefix: str) -> str:
    """Return a collision-resistant identifier such as ``client-3f2a…``."""
    return f"{prefix}-{uuid4().hex}"


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class Client:
    """A client that can be billed and contacted."""

    name: str
    email: str
    phone: str | None = None
    address: str | None = None
    company: str | None = None
    notes: str | None = None
    id: str = field(default_factory=lambda: new_id("client"))
    created_at: datetime = field(default_factory=utc_now)
    updated_at: datetime | None = None

    def __post_init__(self) -> None:
        if self.updated_at is None:
            self.updated_at = self.created_at

    def update(self, **changes: Any) -> None:
        """Merge the given fields and refresh the updated_at timestamp."""
        for key, value in changes.items():
            setattr(self, key, value)
        self.updated_at = utc_now()
