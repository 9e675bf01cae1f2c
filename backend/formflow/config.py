import logging
from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings

_config_logger = logging.getLogger(__name__)

_PACKAGE_DIR = Path(__file__).resolve().parent
_BACKEND_DIR = _PACKAGE_DIR.parent
_ENV_FILES = (
    _BACKEND_DIR / ".env",
    ".env",
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    app_title: str = "FormFlow"
    app_version: str = "0.1.0"
    app_env: str = "development"

    # Bootstrap
    seed_file: str = str(_PACKAGE_DIR / "data" / "seed.yaml")
    startup_delay_seconds: float = 1.0

    # Local key-value settings (company profile, invoicing defaults, email templates)
    settings_dir: str = "data/settings"

    # Store behaviour
    activity_log_limit: int | None = None
    broadcast_queue_size: int = 100
    default_currency: str = "USD"
    embed_base_url: str = "https://your-domain.com"

    # Logging: per-category log levels (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    log_level: str = "INFO"              # Root / app-wide
    log_level_store: str = "INFO"        # DomainStore mutations + broadcaster
    log_level_settings: str = "WARNING"  # JSON settings files
    log_level_seed: str = "INFO"         # Seed loading / bootstrap

    model_config = {
        "env_file": _ENV_FILES,
        "env_file_encoding": "utf-8",
        "env_prefix": "FORMFLOW_",
    }

    def model_post_init(self, __context: object) -> None:
        if self.activity_log_limit is not None and self.activity_log_limit <= 0:
            _config_logger.warning(
                "Ignoring non-positive activity_log_limit=%s", self.activity_log_limit
            )
            object.__setattr__(self, "activity_log_limit", None)


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance — reads .env once."""
    return Settings()
