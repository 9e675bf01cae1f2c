"""JSON-file backed key-value store for the business settings.

Storage layout:
    <settings_dir>/<key>.json   — one pretty-printed JSON object per key
"""

import json
import logging
import re
from pathlib import Path
from typing import Any

from formflow.application.interfaces import SettingsRepository

logger = logging.getLogger(__name__)


def _sanitise(key: str) -> str:
    """Replace non-word characters with underscores so keys stay plain filenames."""
    return re.sub(r"[^\w\-]", "_", key).strip("_") or "unnamed"


class JsonFileSettingsRepository(SettingsRepository):
    """Implements the SettingsRepository port with one JSON file per key."""

    def __init__(self, settings_dir: str | Path):
        self._dir = Path(settings_dir)

    def _path(self, key: str) -> Path:
        return self._dir / f"{_sanitise(key)}.json"

    def get(self, key: str) -> dict[str, Any] | None:
        """Read the blob, returning None if it is missing or corrupt."""
        path = self._path(key)
        if not path.exists():
            return None
        try:
            data = json.loads(path.read_text("utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            logger.warning("Could not read %s — using defaults: %s", path, exc)
            return None
        if not isinstance(data, dict):
            logger.warning("Ignoring %s — expected a JSON object", path)
            return None
        return data

    def set(self, key: str, value: dict[str, Any]) -> None:
        path = self._path(key)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(value, indent=2), encoding="utf-8")
        logger.debug("Wrote %s", path)
