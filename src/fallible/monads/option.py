"""Option container: a value that may be absent.

Some(value) holds a non-None value, Nothing holds none. Keeping absence as
its own value (rather than plain None) lets callers tell "no container was
passed" apart from "the container is empty".
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, Generic, TypeVar, cast

from fallible.errors import MissingArgumentError, NoSuchElementError

if TYPE_CHECKING:
    from collections.abc import Iterator

T = TypeVar("T")
U = TypeVar("U")

_EMPTY: Any = object()


class Option(Generic[T]):
    """Immutable container holding zero or one non-None value.

    Examples:
        >>> Some(3).map(lambda x: x + 1).get()
        4
        >>> Nothing.or_else("default")
        'default'
        >>> Option.of_nullable(None).is_empty()
        True
    """

    __slots__ = ("_value",)
    __match_args__ = ("_value",)

    def __init__(self, value: T) -> None:
        """Private constructor. Use Some(), Nothing or Option.of_nullable().

        Raises MissingArgumentError for None; absence is spelled Nothing.
        """
        if value is None:
            raise MissingArgumentError("Option value must not be None")
        object.__setattr__(self, "_value", value)

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    @staticmethod
    def of_nullable(value: T | None) -> Option[T]:
        """Some(value) unless value is None."""
        return Nothing if value is None else Option(value)

    def is_present(self) -> bool:
        return self._value is not _EMPTY

    def is_empty(self) -> bool:
        return self._value is _EMPTY

    def get(self) -> T:
        """Return the value or raise NoSuchElementError when empty."""
        if self._value is _EMPTY:
            raise NoSuchElementError("No value present")
        return cast(T, self._value)

    def or_else(self, other: T) -> T:
        return other if self._value is _EMPTY else cast(T, self._value)

    def map(self, f: Callable[[T], U | None]) -> Option[U]:
        """Apply f to the value; a None result gives Nothing."""
        if self._value is _EMPTY:
            return Nothing
        return Option.of_nullable(f(cast(T, self._value)))

    def __bool__(self) -> bool:
        return self._value is not _EMPTY

    def __iter__(self) -> Iterator[T]:
        """Yields the value if present, nothing otherwise."""
        if self._value is not _EMPTY:
            yield cast(T, self._value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Option):
            return NotImplemented
        return self._value is other._value or self._value == other._value

    def __hash__(self) -> int:
        return hash((Option, self._value))

    def __repr__(self) -> str:
        return "Nothing" if self._value is _EMPTY else f"Some({self._value!r})"


def Some(value: T) -> Option[T]:  # noqa: N802
    """Construct a present Option. The value must not be None."""
    if value is None:
        raise MissingArgumentError("Some() value must not be None")
    return Option(value)


Nothing: Option[Any] = Option(_EMPTY)
