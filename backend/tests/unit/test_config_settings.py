"""Unit tests for application settings configuration."""

from pathlib import Path

from formflow.config import Settings


def test_settings_uses_backend_env_file_independent_of_cwd():
    """Settings should always include backend/.env as an env source."""
    env_files = Settings.model_config.get("env_file")
    assert env_files is not None

    normalized = {str(Path(item)) for item in env_files}
    expected_backend_env = str(Path(__file__).resolve().parents[2] / ".env")

    assert expected_backend_env in normalized
    assert str(Path(".env")) in normalized


def test_default_seed_file_ships_with_the_package():
    assert Path(Settings().seed_file).is_file()


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("FORMFLOW_ACTIVITY_LOG_LIMIT", "25")
    monkeypatch.setenv("FORMFLOW_STARTUP_DELAY_SECONDS", "0")

    settings = Settings()

    assert settings.activity_log_limit == 25
    assert settings.startup_delay_seconds == 0


def test_non_positive_activity_limit_means_unbounded():
    assert Settings(activity_log_limit=0).activity_log_limit is None
