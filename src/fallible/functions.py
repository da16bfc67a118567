"""Running plain functions under a capturing boundary."""

from __future__ import annotations

from functools import wraps
from typing import Callable, ParamSpec, TypeVar

from fallible.monads import Try

P = ParamSpec("P")
T = TypeVar("T")


def attempt(func: Callable[P, T]) -> Callable[P, Try[T]]:
    """Decorator making func return a Try instead of raising.

    Example:
        >>> @attempt
        ... def parse(s: str) -> int:
        ...     return int(s)
        >>> parse("12").get()
        12
        >>> parse("x").is_failure()
        True
    """
    @wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> Try[T]:
        return Try.of(lambda: func(*args, **kwargs))

    return wrapper
