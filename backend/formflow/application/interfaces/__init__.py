from .settings_repository import SettingsRepository
from .seed_loader import SeedLoader

__all__ = [
    "SettingsRepository",
    "SeedLoader",
]
