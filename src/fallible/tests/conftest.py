"""Shared fixtures: isolate settings and logging state between tests."""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from fallible.config import clear_settings_cache
from fallible.observability import CollectingRenderer, reset_logging, use_renderer


@pytest.fixture(autouse=True)
def clean_state(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Drop FALLIBLE_* env vars and cached settings/logging around each test."""
    import os
    for key in [k for k in os.environ if k.startswith("FALLIBLE_")]:
        monkeypatch.delenv(key)
    clear_settings_cache()
    reset_logging()
    yield
    clear_settings_cache()
    reset_logging()


@pytest.fixture
def collected() -> CollectingRenderer:
    """Capture log entries at DEBUG level."""
    return use_renderer(CollectingRenderer(), level="DEBUG")  # type: ignore[return-value]
