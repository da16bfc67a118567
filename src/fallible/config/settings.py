"""Environment-based configuration using pydantic-settings.

Example:
    >>> from fallible.config import get_settings
    >>> settings = get_settings()
    >>> settings.logging.level
    'WARNING'
    >>> settings.capture.base_exceptions
    False

    # Or with environment variables:
    # FALLIBLE_LOG_LEVEL=DEBUG
    # FALLIBLE_CAPTURE_BASE_EXCEPTIONS=true
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class LoggingSettings(BaseSettings):
    """Logging configuration."""

    model_config = SettingsConfigDict(
        env_prefix="FALLIBLE_LOG_",
        extra="ignore",
    )

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"
    format: Literal["console", "json", "none"] = "console"

    @field_validator("level", mode="before")
    @classmethod
    def _normalize_level(cls, v: str) -> str:
        return v.upper() if isinstance(v, str) else v


class CaptureSettings(BaseSettings):
    """What a capturing boundary turns into a Failure."""

    model_config = SettingsConfigDict(
        env_prefix="FALLIBLE_CAPTURE_",
        extra="ignore",
    )

    base_exceptions: bool = Field(
        default=False,
        description="Also capture KeyboardInterrupt, SystemExit and other non-Exception errors",
    )
    include_trace: bool = Field(default=True, description="Attach tracebacks to failure reports")


class FallibleSettings(BaseSettings):
    """Root settings for fallible.

    Example environment variables:
        FALLIBLE_LOG_LEVEL=DEBUG
        FALLIBLE_LOG_FORMAT=json
        FALLIBLE_CAPTURE_BASE_EXCEPTIONS=true
    """

    model_config = SettingsConfigDict(
        env_prefix="FALLIBLE_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
        validate_default=True,
    )

    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    capture: CaptureSettings = Field(default_factory=CaptureSettings)


@lru_cache(maxsize=1)
def get_settings() -> FallibleSettings:
    """Get the global settings instance (cached)."""
    return FallibleSettings()


def clear_settings_cache() -> None:
    """Clear the settings cache (useful for testing).

    The next get_settings() call reloads configuration from environment.
    """
    get_settings.cache_clear()
