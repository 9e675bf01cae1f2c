"""Abstract repository interface (port) for opaque key-value settings."""

from abc import ABC, abstractmethod
from typing import Any


class SettingsRepository(ABC):
    """Port for string-keyed JSON blobs — implemented in the infrastructure layer."""

    @abstractmethod
    def get(self, key: str) -> dict[str, Any] | None:
        """Return the stored blob, or None when nothing is stored under ``key``."""
        ...

    @abstractmethod
    def set(self, key: str, value: dict[str, Any]) -> None:
        """Replace the blob stored under ``key``."""
        ...
