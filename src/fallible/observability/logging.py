"""Structured logging for library events.

Loggers carry a dict of bound fields and hand each entry to a renderer:
console lines for humans, JSON Lines for collectors, or an in-memory list.
Level and format come from FallibleSettings (WARNING, console) until
overridden with configure_logging() or use_renderer().

Overrides live in context variables. They apply to the calling thread or
asyncio task and to contexts copied from it later; other threads keep
using the settings.

Example:
    >>> from fallible.observability import CollectingRenderer, get_logger, reset_logging, use_renderer
    >>> renderer = use_renderer(CollectingRenderer(), level="DEBUG")
    >>> get_logger("svc").debug("started", port=8080)
    >>> renderer.events()
    ['started']
    >>> reset_logging()
"""

from __future__ import annotations

import json
import logging
import sys
import time
from contextvars import ContextVar
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any, Protocol, TextIO, Union, runtime_checkable

from fallible.config import get_settings

JsonValue = Union[str, int, float, bool, None, list[Any], dict[str, Any]]
JsonDict = dict[str, Any]

_renderer: ContextVar[LogRenderer | None] = ContextVar("fallible_log_renderer", default=None)
_level: ContextVar[int | None] = ContextVar("fallible_log_level", default=None)


# ─────────────────────────────────────────────────────────────────────────────
# Entries & Renderers
# ─────────────────────────────────────────────────────────────────────────────


@dataclass(slots=True)
class LogEntry:
    timestamp: float
    level: str
    event: str
    context: JsonDict

    @property
    def ts_iso(self) -> str:
        return datetime.fromtimestamp(self.timestamp, tz=UTC).isoformat()


@runtime_checkable
class LogRenderer(Protocol):
    """Anything that can emit a LogEntry."""

    def render(self, entry: LogEntry) -> None: ...


@dataclass(slots=True)
class ConsoleRenderer:
    """One line per entry: ``HH:MM:SS.mmm [level] event key=value ...``"""

    output: TextIO = field(default_factory=lambda: sys.stderr)
    colors: bool | None = None  # None = use colors when output is a TTY

    def __post_init__(self) -> None:
        if self.colors is None:
            self.colors = bool(getattr(self.output, "isatty", lambda: False)())

    def render(self, entry: LogEntry) -> None:
        clock = datetime.fromtimestamp(entry.timestamp, tz=UTC).strftime("%H:%M:%S.%f")[:-3]
        level = f"[{entry.level}]"
        if self.colors:
            level = f"{_LEVEL_COLORS.get(entry.level, '')}{level}\033[0m"
        fields = " ".join(f"{k}={v!r}" if isinstance(v, str) else f"{k}={v}" for k, v in sorted(entry.context.items()))
        print(" ".join(p for p in (clock, level, entry.event, fields) if p), file=self.output)


@dataclass(slots=True)
class JsonRenderer:
    """JSON Lines, one object per entry."""

    output: TextIO = field(default_factory=lambda: sys.stdout)

    def render(self, entry: LogEntry) -> None:
        record = {"timestamp": entry.ts_iso, "level": entry.level, "event": entry.event, **entry.context}
        print(json.dumps(record, default=str), file=self.output)


@dataclass(slots=True)
class NoOpRenderer:
    def render(self, entry: LogEntry) -> None:
        pass


@dataclass(slots=True)
class CollectingRenderer:
    """Keeps entries in memory."""

    entries: list[LogEntry] = field(default_factory=list)

    def render(self, entry: LogEntry) -> None:
        self.entries.append(entry)

    def events(self) -> list[str]:
        return [e.event for e in self.entries]


_LEVEL_COLORS = {"debug": "\033[2m", "info": "\033[32m", "warning": "\033[33m", "error": "\033[31m"}


# ─────────────────────────────────────────────────────────────────────────────
# Logger
# ─────────────────────────────────────────────────────────────────────────────


@dataclass(slots=True, frozen=True)
class BoundLogger:
    """Logger with fields attached to every entry. bind() returns a copy."""

    context: JsonDict = field(default_factory=dict)

    def bind(self, **kw: JsonValue) -> BoundLogger:
        return BoundLogger({**self.context, **kw})

    def is_enabled_for(self, level: int) -> bool:
        return level >= _effective_level()

    def _emit(self, level: int, event: str, kw: JsonDict) -> None:
        if self.is_enabled_for(level):
            entry = LogEntry(time.time(), logging.getLevelName(level).lower(), event, {**self.context, **kw})
            _current_renderer().render(entry)

    def debug(self, event: str, **kw: JsonValue) -> None:
        self._emit(logging.DEBUG, event, kw)

    def info(self, event: str, **kw: JsonValue) -> None:
        self._emit(logging.INFO, event, kw)

    def warning(self, event: str, **kw: JsonValue) -> None:
        self._emit(logging.WARNING, event, kw)

    def error(self, event: str, **kw: JsonValue) -> None:
        self._emit(logging.ERROR, event, kw)


def get_logger(name: str | None = None, **fields: JsonValue) -> BoundLogger:
    """Logger with ``logger=name`` and any extra fields bound."""
    return BoundLogger({"logger": name, **fields} if name else dict(fields))


# ─────────────────────────────────────────────────────────────────────────────
# Configuration
# ─────────────────────────────────────────────────────────────────────────────


def configure_logging(
    format: str = "console",  # noqa: A002 - matches the FALLIBLE_LOG_FORMAT values
    level: str = "INFO",
    *,
    output: TextIO | None = None,
    colors: bool | None = None,
) -> LogRenderer:
    """Set level and renderer for the current context.

    Args:
        format: "console", "json" or "none"
        level: DEBUG, INFO, WARNING, ERROR or CRITICAL
        output: Stream to write to (console: stderr, json: stdout)
        colors: Force console colors on or off
    """
    return use_renderer(_build_renderer(format, output=output, colors=colors), level)


def use_renderer(renderer: LogRenderer, level: str | None = None) -> LogRenderer:
    """Install renderer (and optionally level) for the current context."""
    if level is not None:
        _level.set(_parse_level(level))
    _renderer.set(renderer)
    return renderer


def reset_logging() -> None:
    """Forget overrides in the current context; settings apply again."""
    _renderer.set(None)
    _level.set(None)


def _build_renderer(format: str, *, output: TextIO | None = None, colors: bool | None = None) -> LogRenderer:  # noqa: A002
    if format == "console":
        return ConsoleRenderer(output=output or sys.stderr, colors=colors)
    if format == "json":
        return JsonRenderer(output=output or sys.stdout)
    if format == "none":
        return NoOpRenderer()
    raise ValueError(f"Unknown format: {format}. Use 'console', 'json', or 'none'")


def _current_renderer() -> LogRenderer:
    renderer = _renderer.get()
    if renderer is None:
        renderer = _build_renderer(get_settings().logging.format)
        _renderer.set(renderer)
    return renderer


def _effective_level() -> int:
    level = _level.get()
    return level if level is not None else _parse_level(get_settings().logging.level)


def _parse_level(name: str) -> int:
    return getattr(logging, name.upper(), logging.INFO)
