"""Application configuration via pydantic-settings."""

from functools import lru_cache

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables and .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Discord
    discord_token: str = Field(
        default="",
        validation_alias=AliasChoices("discord_token", "token"),
    )

    # Attachment loading
    fetch_timeout_seconds: float = 30.0

    # Message rendering
    display_timezone: str = ""  # IANA name, e.g. "Asia/Tokyo"; empty = local time
    timestamp_format: str = "%c"

    # App
    log_level: str = "INFO"
    port: int = 3001


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings. Lazy initialization to avoid import-time errors."""
    return Settings()
