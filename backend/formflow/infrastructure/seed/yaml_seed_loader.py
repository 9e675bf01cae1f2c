"""YAML seed loader — reads the demo content the store starts with."""

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from formflow.application.interfaces import SeedLoader
from formflow.application.schemas import SeedData
from formflow.domain.exceptions import SeedLoadError

logger = logging.getLogger(__name__)


class YamlSeedLoader(SeedLoader):
    """Loads ``SeedData`` from a YAML document.

    Top-level keys: ``clients``, ``invoices``, ``forms``, ``recent_activity``.
    Invoices embed their client; YAML anchors/aliases keep that readable.
    A missing file yields an empty seed.
    """

    def __init__(self, path: str | Path):
        self._path = Path(path)

    def load(self) -> SeedData:
        if not self._path.exists():
            logger.warning("Seed file %s not found — starting empty", self._path)
            return SeedData()

        try:
            with self._path.open(encoding="utf-8") as fh:
                raw = yaml.safe_load(fh) or {}
        except (OSError, yaml.YAMLError) as exc:
            raise SeedLoadError(str(self._path), str(exc)) from exc

        if not isinstance(raw, dict):
            raise SeedLoadError(str(self._path), "top level must be a mapping")

        try:
            seed = SeedData.model_validate(raw)
        except ValidationError as exc:
            raise SeedLoadError(str(self._path), str(exc)) from exc

        logger.info(
            "Loaded seed %s: %d clients, %d invoices, %d forms, %d activity entries",
            self._path.name,
            len(seed.clients),
            len(seed.invoices),
            len(seed.forms),
            len(seed.recent_activity),
        )
        return seed
