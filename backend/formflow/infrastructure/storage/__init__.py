from .json_settings_repository import JsonFileSettingsRepository

__all__ = ["JsonFileSettingsRepository"]
