"""fallible - reify the outcome of code that may raise.

    >>> from fallible import Try
    >>> Try.of(lambda: 10 // 0).map(lambda x: x + 1).or_else(-1)
    -1
"""

from .errors import (
    ErrorCode,
    FailureReport,
    FallibleError,
    MissingArgumentError,
    NoSuchElementError,
    classify_exception,
    raise_unchecked,
)
from .functions import attempt
from .monads import Failure, Nothing, Option, Some, Success, Try, collect_failures, sequence, traverse
from .types import BiConsumer, BiFunction, Consumer, Function, Predicate, Runnable, Supplier

__version__ = "0.1.0"

__all__ = [
    # Containers
    "Try", "Success", "Failure", "Option", "Some", "Nothing",
    # Collection ops
    "sequence", "traverse", "collect_failures",
    # Capturing
    "attempt", "raise_unchecked",
    # Fallible callable aliases
    "Supplier", "Function", "BiFunction", "Predicate", "Consumer", "BiConsumer", "Runnable",
    # Errors
    "ErrorCode", "FailureReport", "FallibleError", "MissingArgumentError", "NoSuchElementError",
    "classify_exception",
]
