"""Logging setup for FormFlow.

The store logs every mutation at INFO, which drowns out everything else in
a busy session. Each area of the package (store, settings files, seed
loading) therefore gets its own level from Settings:

    FORMFLOW_LOG_LEVEL_STORE=WARNING

Usage:
    from formflow.infrastructure.logging.log_config import setup_logging
    setup_logging(settings)   # first thing in formflow.main.lifespan
"""

import logging
import sys

from formflow.config import Settings, get_settings

LOG_FORMAT = "%(levelname)-8s %(name)s — %(message)s"

# Settings field → logger names it governs. Child loggers inherit the level.
_CATEGORY_MAP: dict[str, tuple[str, ...]] = {
    "log_level_store": (
        "formflow.application.services.domain_store",
        "formflow.application.services.store_broadcaster",
        "formflow.application.services.form_builder_service",
        "formflow.application.services.invoice_drafting_service",
    ),
    "log_level_settings": (
        "formflow.application.services.settings_service",
        "formflow.infrastructure.storage",
    ),
    "log_level_seed": (
        "formflow.application.services.bootstrap",
        "formflow.infrastructure.seed",
    ),
}


def setup_logging(settings: Settings | None = None) -> dict[str, int]:
    """Apply the root and per-area levels. Returns logger name → level applied.

    A stderr handler is installed only when the root logger has none, so a
    host application's handlers are left alone.
    """
    settings = settings or get_settings()
    applied = {"root": _parse_level(settings.log_level, "log_level")}

    root = logging.getLogger()
    root.setLevel(applied["root"])
    if not root.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)

    for settings_field, logger_names in _CATEGORY_MAP.items():
        level = _parse_level(getattr(settings, settings_field), settings_field)
        for name in logger_names:
            logging.getLogger(name).setLevel(level)
            applied[name] = level

    logging.getLogger(__name__).debug(
        "Log levels: root=%s store=%s settings=%s seed=%s",
        settings.log_level,
        settings.log_level_store,
        settings.log_level_settings,
        settings.log_level_seed,
    )
    return applied


def _parse_level(raw: str, source: str) -> int:
    """Level name → logging constant. Unknown names fall back to INFO with a warning."""
    level = logging.getLevelNamesMapping().get(raw.strip().upper())
    if level is None:
        logging.getLogger(__name__).warning("Unknown log level %r for %s, using INFO", raw, source)
        return logging.INFO
    return level
