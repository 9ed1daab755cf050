"""Tests for settings loading and the application timezone helpers."""

from datetime import timedelta, timezone

import pytest
from pydantic import ValidationError

from forager_notifications import config
from forager_notifications.utils import timestamps


@pytest.fixture(autouse=True)
def _fresh_settings():
    config.reset_settings_cache()
    timestamps.notification_timezone.cache_clear()
    yield
    config.reset_settings_cache()
    timestamps.notification_timezone.cache_clear()


def test_settings_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("FIREBASE_PROJECT_ID", "FIREBASE_CREDENTIALS_PATH", "PUSH_DRY_RUN", "APP_TIMEZONE", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)

    settings = config.Settings(_env_file=None)

    assert settings.firebase_project_id is None
    assert settings.push_dry_run is False
    assert settings.app_timezone == "UTC"
    assert settings.log_level == "INFO"


def test_settings_read_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FIREBASE_PROJECT_ID", "forager-prod")
    monkeypatch.setenv("PUSH_DRY_RUN", "true")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    settings = config.get_settings()

    assert settings.firebase_project_id == "forager-prod"
    assert settings.push_dry_run is True
    assert settings.log_level == "DEBUG"


def test_invalid_log_level_is_rejected(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "chatty")

    with pytest.raises(ValidationError):
        config.Settings(_env_file=None)


@pytest.mark.parametrize("name", ["UTC", "utc", "", "Nowhere/City"])
def test_notification_timestamps_default_to_utc(monkeypatch: pytest.MonkeyPatch, name) -> None:
    monkeypatch.setenv("APP_TIMEZONE", name)

    stamp = timestamps.notification_timestamp()

    assert stamp.tzinfo is timezone.utc
    assert stamp.utcoffset() == timedelta(0)


def test_unknown_timezone_is_logged(monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture) -> None:
    monkeypatch.setenv("APP_TIMEZONE", "Nowhere/City")

    with caplog.at_level("WARNING"):
        timestamps.notification_timezone()

    assert "Nowhere/City" in caplog.text
