"""Application configuration settings."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_FILE = ".env"
ENV_FILE_ENCODING = "utf-8"

_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


class Settings(BaseSettings):
    """Application configuration values loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE, env_file_encoding=ENV_FILE_ENCODING, extra="ignore"
    )

    firebase_project_id: str | None = Field(
        default=None,
        description="Google Cloud project that owns the Firestore database and FCM sender",
    )
    firebase_credentials_path: str | None = Field(
        default=None,
        description=(
            "Path to a service account JSON file; application default credentials "
            "are used when omitted"
        ),
    )
    push_dry_run: bool = Field(
        default=False,
        description="Validate push messages with FCM without delivering them to devices",
    )
    app_timezone: str = Field(
        default="UTC",
        description="Timezone used to stamp stored notifications",
    )
    log_level: str = Field(
        default="INFO",
        description="Minimum level for the application loggers",
    )

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, value: str) -> str:
        normalized = value.strip().upper()
        if normalized not in _LOG_LEVELS:
            raise ValueError(f"LOG_LEVEL must be one of {sorted(_LOG_LEVELS)}")
        return normalized


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings instance."""

    return Settings()


def reset_settings_cache() -> None:
    """Clear the settings cache to force reloading from the environment."""

    get_settings.cache_clear()


__all__ = ["Settings", "get_settings", "reset_settings_cache"]
