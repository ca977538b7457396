"""
Environment configuration for artifact lifecycle.

Loads configuration from environment variables using pydantic-settings.
"""

from functools import lru_cache
from typing import Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from ARTIFACTS_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="ARTIFACTS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Logging Configuration
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO", description="Logging level"
    )
    log_format: Literal["text", "json"] = Field(
        default="text", description="Logging format - text for human-readable, json for structured logs"
    )

    # Idle Callback Configuration
    idle_callback_timeout: Optional[float] = Field(
        default=None,
        gt=0,
        description="Seconds an idle callback may run before it is reported as slow",
    )


@lru_cache
def get_settings() -> Settings:
    """Get the cached settings instance."""
    return Settings()
