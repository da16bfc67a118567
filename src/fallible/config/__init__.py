"""Configuration management using pydantic-settings."""

from .settings import (
    CaptureSettings,
    FallibleSettings,
    LoggingSettings,
    clear_settings_cache,
    get_settings,
)

__all__ = [
    "CaptureSettings",
    "FallibleSettings",
    "LoggingSettings",
    "clear_settings_cache",
    "get_settings",
]
