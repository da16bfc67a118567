"""Structured logging for fallible."""

from .logging import (
    BoundLogger,
    CollectingRenderer,
    ConsoleRenderer,
    JsonRenderer,
    LogEntry,
    LogRenderer,
    NoOpRenderer,
    configure_logging,
    get_logger,
    reset_logging,
    use_renderer,
)

__all__ = [
    "BoundLogger",
    "CollectingRenderer",
    "ConsoleRenderer",
    "JsonRenderer",
    "LogEntry",
    "LogRenderer",
    "NoOpRenderer",
    "configure_logging",
    "get_logger",
    "reset_logging",
    "use_renderer",
]
