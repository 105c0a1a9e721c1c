"""
Application configuration using pydantic-settings.

Loads settings from environment variables (and optional .env file) with sensible defaults.

Fields loaded (env var names in parentheses):
- app_env (APP_ENV)
- log_level (LOG_LEVEL)
- db_url (DB_URL or DATABASE_URL)
- max_content_length (MAX_CONTENT_LENGTH)
- brief_engine_version (BRIEF_ENGINE_VERSION)
- allow_origins (ALLOW_ORIGINS)

Usage:
    from northnode.core.config import get_settings
    settings = get_settings()
    print(settings.max_content_length)
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Environment / logging
    app_env: str = Field(default="development", alias="APP_ENV")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    # Database URL (accept DB_URL or DATABASE_URL)
    db_url: str = Field(
        default="sqlite:///./northnode.db",
        validation_alias=AliasChoices("DB_URL", "DATABASE_URL"),
    )

    # Upper bound on content submitted for validation over HTTP
    max_content_length: int = Field(default=50_000, alias="MAX_CONTENT_LENGTH", ge=1)

    # Stamped into CampaignBrief.meta.engine_version
    brief_engine_version: str = Field(default="1.0.0", alias="BRIEF_ENGINE_VERSION")

    # Comma-separated CORS origins, "*" for any
    allow_origins: str = Field(default="*", alias="ALLOW_ORIGINS")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Return a cached Settings instance.
    """
    return Settings()  # type: ignore[call-arg]


__all__ = ["Settings", "get_settings"]
