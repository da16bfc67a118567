"""Tests for environment-based settings and capture configuration."""

from __future__ import annotations

import pytest

from fallible import Try
from fallible.config import FallibleSettings, clear_settings_cache, get_settings


class Halt(BaseException):
    """Non-Exception error, like KeyboardInterrupt."""


def halt() -> int:
    raise Halt()


def test_defaults() -> None:
    settings = FallibleSettings()

    assert settings.logging.level == "WARNING"
    assert settings.logging.format == "console"
    assert settings.capture.base_exceptions is False
    assert settings.capture.include_trace is True


def test_env_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FALLIBLE_LOG_LEVEL", "debug")
    monkeypatch.setenv("FALLIBLE_LOG_FORMAT", "json")
    monkeypatch.setenv("FALLIBLE_CAPTURE_INCLUDE_TRACE", "false")
    clear_settings_cache()

    settings = get_settings()

    assert settings.logging.level == "DEBUG"
    assert settings.logging.format == "json"
    assert settings.capture.include_trace is False


def test_get_settings_is_cached() -> None:
    assert get_settings() is get_settings()


def test_base_exceptions_propagate_by_default() -> None:
    with pytest.raises(Halt):
        Try.of(halt)


def test_base_exceptions_captured_when_enabled(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FALLIBLE_CAPTURE_BASE_EXCEPTIONS", "true")
    clear_settings_cache()

    result = Try.of(halt)

    assert result.is_failure()
    assert isinstance(result.error(), Halt)


def test_include_trace_setting(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FALLIBLE_CAPTURE_INCLUDE_TRACE", "false")
    clear_settings_cache()

    report = Try.of(lambda: 1 // 0).failure_report()

    assert report is not None
    assert report.details is None


def test_invalid_settings_fail_before_the_call(monkeypatch: pytest.MonkeyPatch) -> None:
    """A bad config value raises up front, on success and failure paths alike."""
    from pydantic import ValidationError

    monkeypatch.setenv("FALLIBLE_LOG_LEVEL", "verbose")
    clear_settings_cache()
    calls: list[str] = []

    def divide() -> int:
        calls.append("divide")
        return 1 // 0

    with pytest.raises(ValidationError) as info:
        Try.of(divide)
    assert not isinstance(info.value.__context__, ZeroDivisionError)
    assert calls == []

    with pytest.raises(ValidationError):
        Try.of(lambda: 1)
    with pytest.raises(ValidationError):
        Try.failure(ValueError()).or_else_try(lambda: 2)


def test_capture_recovers_once_settings_are_fixed(monkeypatch: pytest.MonkeyPatch) -> None:
    from pydantic import ValidationError

    monkeypatch.setenv("FALLIBLE_LOG_LEVEL", "verbose")
    clear_settings_cache()
    with pytest.raises(ValidationError):
        Try.of(lambda: 1 // 0)

    monkeypatch.setenv("FALLIBLE_LOG_LEVEL", "info")
    clear_settings_cache()

    assert isinstance(Try.of(lambda: 1 // 0).error(), ZeroDivisionError)
