"""Application configuration settings."""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_FILE = ".env"
ENV_FILE_ENCODING = "utf-8"


class Settings(BaseSettings):
    """Application configuration values loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE, env_file_encoding=ENV_FILE_ENCODING, extra="ignore"
    )

    database_url: str = Field(
        default="sqlite:///./inbox.db",
        description="Database connection URL used by SQLAlchemy to connect to the DB",
        min_length=1,
    )
    secret_key: str = Field(
        description="Secret shared with the embedding application to verify JWT tokens",
        min_length=1,
    )
    notification_store: Literal["database", "http", "memory"] = Field(
        default="database",
        description="Backend used to list notifications and change read state",
    )
    store_base_url: str | None = Field(
        default=None,
        description="Base URL of the remote notification service when using the http store",
    )
    store_timeout_seconds: float = Field(
        default=10.0,
        description="Timeout applied to every request sent to the remote store",
        gt=0,
    )
    app_timezone: str | None = Field(
        default=None,
        description="Timezone used to display absolute timestamps",
    )
    base_uri: str = Field(
        default="/notifications",
        description="Prefix under which the inbox endpoints are reachable",
    )
    head_pre: str = Field(
        default="<title>Notifications</title>",
        description="Raw HTML inserted at the top of <head>",
    )
    body_pre: str = Field(
        default="",
        description="Raw HTML inserted at the top of <body>",
    )
    cors_origins: list[str] = Field(
        default_factory=list,
        description="Origins allowed to call the API from a browser",
    )
    log_level: str = Field(default="INFO", description="Root logging level")

    @model_validator(mode="after")
    def _validate_store_backend(self) -> "Settings":
        if self.notification_store == "http" and not self.store_base_url:
            raise ValueError(
                "STORE_BASE_URL must be provided when NOTIFICATION_STORE is 'http'"
            )
        return self


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings instance."""

    return Settings()


def reset_settings_cache() -> None:
    """Clear the settings cache to force reloading from the environment."""

    get_settings.cache_clear()


__all__ = ["Settings", "get_settings", "reset_settings_cache"]
