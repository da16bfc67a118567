"""Try and Option containers.

Example:
    >>> from fallible.monads import Try
    >>>
    >>> def parse(s: str) -> Try[int]:
    ...     return Try.of(lambda: int(s))
    >>>
    >>> result = (
    ...     parse("20")
    ...     .filter(lambda n: n > 0)
    ...     .map(lambda n: 100 // n)
    ...     .or_else_try(lambda: 0)
    ... )
    >>> assert result.get() == 5
"""

from .option import Nothing, Option, Some
from .try_ import Failure, Success, Try, collect_failures, sequence, traverse

__all__ = [
    # Core types
    "Try",
    "Success",
    "Failure",
    "Option",
    "Some",
    "Nothing",
    # Collection operations
    "sequence",
    "traverse",
    "collect_failures",
]
