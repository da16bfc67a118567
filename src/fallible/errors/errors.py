"""Error taxonomy for fallible computations.

Conditions the library manufactures itself (missing arguments, empty
containers) plus a classifier and a structured report for any captured
exception.
"""

from __future__ import annotations

import traceback
from enum import StrEnum
from typing import NoReturn, Self, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class ErrorCode(StrEnum):
    """Codes for the failure kinds a Try can carry."""
    MISSING_ARGUMENT = "MISSING_ARGUMENT"
    NO_SUCH_ELEMENT = "NO_SUCH_ELEMENT"
    CARRIED = "CARRIED"


class FallibleError(Exception):
    """Base class for conditions raised by fallible itself."""

    code: ErrorCode = ErrorCode.CARRIED


class MissingArgumentError(FallibleError, TypeError):
    """A required argument or value was None."""

    code = ErrorCode.MISSING_ARGUMENT


class NoSuchElementError(FallibleError, LookupError):
    """An Option was empty, or a filter rejected a value."""

    code = ErrorCode.NO_SUCH_ELEMENT


def require(value: T | None, message: str) -> T:
    """Return value, raising MissingArgumentError if it is None."""
    if value is None:
        raise MissingArgumentError(message)
    return value


def raise_unchecked(error: BaseException) -> NoReturn:
    """Re-raise a captured exception as is.

    The exception object keeps its identity, type, cause chain and
    traceback; nothing is wrapped around it.
    """
    raise require(error, "raise_unchecked() argument must not be None")


def classify_exception(exc: BaseException) -> ErrorCode:
    """Map exception to error code."""
    return exc.code if isinstance(exc, FallibleError) else ErrorCode.CARRIED


class FailureReport(BaseModel):
    """Structured description of a captured failure."""

    model_config = {"frozen": True}

    error_type: str
    message: str
    code: ErrorCode = ErrorCode.CARRIED
    details: str | None = None

    @classmethod
    def from_exception(cls, exc: BaseException, *, include_trace: bool = True) -> Self:
        """Create from exception with auto-classification."""
        return cls(
            error_type=f"{type(exc).__module__}.{type(exc).__qualname__}",
            message=str(exc),
            code=classify_exception(exc),
            details="".join(traceback.format_exception(exc)) if include_trace else None,
        )

    def render(self) -> str:
        """Format report as human-readable text."""
        head = f"{self.error_type}: {self.message}" if self.message else self.error_type
        parts = [f"{head} [{self.code}]"]
        if self.details:
            parts.append(f"\n\nDetails:\n{self.details.rstrip()}")
        return "".join(parts)

    __str__ = render
