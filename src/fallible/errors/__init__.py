"""Error handling for fallible.

- ErrorCode: Codes for the failure kinds a Try carries
- FallibleError/MissingArgumentError/NoSuchElementError: Conditions raised by the library
- FailureReport: Structured description of a captured exception
- raise_unchecked: Transparent re-raise of a captured exception
"""

from .errors import (
    ErrorCode,
    FailureReport,
    FallibleError,
    MissingArgumentError,
    NoSuchElementError,
    classify_exception,
    raise_unchecked,
    require,
)

__all__ = [
    # Codes
    "ErrorCode", "classify_exception",
    # Exceptions
    "FallibleError", "MissingArgumentError", "NoSuchElementError",
    # Helpers
    "FailureReport", "raise_unchecked", "require",
]
