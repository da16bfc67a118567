"""Try container for fallible computations.

A Try is either a Success holding a value or a Failure holding the exception
a computation raised. Combinators run caller code under a capturing boundary,
so a raising mapper or predicate becomes a Failure instead of unwinding the
stack. Extracting the value of a Failure re-raises the original exception
object unchanged.

- Construction: of, from_optional, success, failure
- Functor/Monad: map, flat_map, filter, flatten, map_failure
- Recovery: or_else, or_else_get, or_else_try
- Side effects: if_success, if_failure, if_success_or_else, match
"""

from __future__ import annotations

import logging
from functools import partial
from typing import TYPE_CHECKING, Any, Callable, Generic, TypeVar, cast

from fallible.config import get_settings
from fallible.errors import FailureReport, MissingArgumentError, NoSuchElementError, raise_unchecked, require
from fallible.observability import get_logger

from .option import Nothing, Option

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from fallible.types import Consumer, Function, Predicate, Supplier

T = TypeVar("T")
U = TypeVar("U")

_log = get_logger("fallible.try")


def _capturable() -> type[BaseException]:
    """Exception class a capturing boundary converts into a Failure.

    Call before entering the guarded block; settings errors must not mix
    with the caller's exception.
    """
    return BaseException if get_settings().capture.base_exceptions else Exception


def _captured(error: BaseException, operation: str) -> Try[Any]:
    if _log.is_enabled_for(logging.DEBUG):
        _log.debug("failure captured", operation=operation, error_type=type(error).__name__, error=str(error))
    return Try(error, is_success=False)


def _run(supplier: Supplier[T] | None, operation: str) -> Try[T]:
    catch = _capturable()
    try:
        value = require(supplier, f"Try.{operation}() supplier must not be None")()
        if value is None:
            raise MissingArgumentError(f"Try.{operation}() returned no value (None)")
        return Try(value, is_success=True)
    except catch as e:
        return _captured(e, operation)


class Try(Generic[T]):
    """Outcome of a fallible computation: Success(value) or Failure(error).

    Immutable and value-based. Every combinator returns either self or a new
    Try; none changes the receiver.

    Examples:
        >>> Try.of(lambda: 10 // 2).map(lambda x: x + 1).get()
        6
        >>> Try.of(lambda: 10 // 0).or_else(-1)
        -1
        >>> Try.of(lambda: int("x")).or_else_try(lambda: 7).get()
        7

    Notes:
        - A Success never holds None; a computation producing None yields a
          Failure carrying MissingArgumentError.
        - get() on a Failure raises the captured exception itself.
    """

    __slots__ = ("_value", "_is_success")
    __match_args__ = ("_value",)

    def __init__(self, value: T | BaseException, is_success: bool) -> None:
        """Private constructor. Use Try.of(), Success() or Failure() instead.

        Raises MissingArgumentError for a None payload and TypeError for a
        Failure payload that is not an exception.
        """
        if value is None:
            variant = "success" if is_success else "failure"
            raise MissingArgumentError(f"Try.{variant}() payload must not be None")
        if not is_success and not isinstance(value, BaseException):
            raise TypeError(f"Try.failure() expects an exception, got {type(value).__name__}")
        object.__setattr__(self, "_value", value)
        object.__setattr__(self, "_is_success", is_success)

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    # ─────────────────────────────────────────────────────────────────
    # Construction
    # ─────────────────────────────────────────────────────────────────

    @staticmethod
    def of(supplier: Supplier[T] | None) -> Try[T]:
        """Invoke supplier once and capture its outcome.

        A None supplier, a raising supplier and a supplier returning None
        all produce a Failure.
        """
        return _run(supplier, "of")

    @staticmethod
    def from_optional(option: Option[T] | None) -> Try[T]:
        """Success with the contained value, or a Failure.

        None gives MissingArgumentError, an empty Option gives
        NoSuchElementError.
        """
        catch = _capturable()
        try:
            source = require(option, "Try.from_optional() argument must not be None")
            if source.is_present():
                return Success(source.get())
            return Failure(NoSuchElementError("No value present"))
        except catch as e:
            return _captured(e, "from_optional")

    @staticmethod
    def success(value: T) -> Try[T]:
        """Same as Success(value)."""
        return Success(value)

    @staticmethod
    def failure(error: BaseException) -> Try[T]:
        """Same as Failure(error)."""
        return Failure(error)

    # ─────────────────────────────────────────────────────────────────
    # Type Checking
    # ─────────────────────────────────────────────────────────────────

    def is_success(self) -> bool:
        return self._is_success

    def is_failure(self) -> bool:
        return not self._is_success

    # ─────────────────────────────────────────────────────────────────
    # Value Extraction
    # ─────────────────────────────────────────────────────────────────

    def get(self) -> T:
        """Return the value, or re-raise the captured exception."""
        if self._is_success:
            return cast(T, self._value)
        raise_unchecked(cast(BaseException, self._value))

    def error(self) -> BaseException | None:
        """The captured exception if Failure, None if Success."""
        return None if self._is_success else cast(BaseException, self._value)

    def failure_report(self, *, include_trace: bool | None = None) -> FailureReport | None:
        """Structured description of the captured exception, None if Success.

        include_trace defaults to the FALLIBLE_CAPTURE_INCLUDE_TRACE setting.
        """
        if self._is_success:
            return None
        if include_trace is None:
            include_trace = get_settings().capture.include_trace
        return FailureReport.from_exception(cast(BaseException, self._value), include_trace=include_trace)

    # ─────────────────────────────────────────────────────────────────
    # Conditional Execution
    # ─────────────────────────────────────────────────────────────────

    def if_success(self, consumer: Consumer[T]) -> None:
        """Call consumer with the value if Success. Its exceptions propagate."""
        if self._is_success:
            require(consumer, "Try.if_success() consumer must not be None")(self._value)

    def if_failure(self, consumer: Consumer[BaseException]) -> None:
        """Call consumer with the exception if Failure. Its exceptions propagate."""
        if not self._is_success:
            require(consumer, "Try.if_failure() consumer must not be None")(self._value)

    def if_success_or_else(self, value_consumer: Consumer[T], error_consumer: Consumer[BaseException]) -> None:
        """Call exactly one of the consumers depending on the variant."""
        if self._is_success:
            require(value_consumer, "Try.if_success_or_else() value consumer must not be None")(self._value)
        else:
            require(error_consumer, "Try.if_success_or_else() error consumer must not be None")(self._value)

    def match(self, *, success: Callable[[T], U], failure: Callable[[BaseException], U]) -> U:
        """Exhaustive case analysis returning the handler's result.

        Example:
            >>> Try.of(lambda: 1 // 0).match(success=str, failure=lambda e: type(e).__name__)
            'ZeroDivisionError'
        """
        if self._is_success:
            return success(cast(T, self._value))
        return failure(cast(BaseException, self._value))

    # ─────────────────────────────────────────────────────────────────
    # Composition
    # ─────────────────────────────────────────────────────────────────

    def filter(self, predicate: Predicate[T]) -> Try[T]:
        """Keep a Success whose value matches predicate.

        A rejected value gives NoSuchElementError, a raising predicate gives
        a Failure with what it raised. A Failure is returned as is and
        predicate is never called.
        """
        if not self._is_success:
            return self
        catch = _capturable()
        try:
            if require(predicate, "Try.filter() predicate must not be None")(cast(T, self._value)):
                return self
            return Failure(NoSuchElementError(f"Predicate does not match value {self._value!r}"))
        except catch as e:
            return _captured(e, "filter")

    def map(self, mapper: Function[T, U]) -> Try[U]:
        """Apply mapper to a Success value under a capturing boundary.

        Type signature: Try[T] -> (T -> U) -> Try[U]
        """
        if not self._is_success:
            return cast(Try[U], self)
        value = cast(T, self._value)
        return _run(lambda: require(mapper, "Try.map() mapper must not be None")(value), "map")

    def flat_map(self, mapper: Function[T, Try[U]]) -> Try[U]:
        """Monadic bind: chain a Try-returning step.

        The Try returned by mapper is passed through as is. A raising mapper,
        or one returning something other than a Try, gives a Failure.

        Type signature: Try[T] -> (T -> Try[U]) -> Try[U]

        Example:
            >>> parse = lambda s: Try.of(lambda: int(s))
            >>> Try.success("42").flat_map(parse).get()
            42
        """
        if not self._is_success:
            return cast(Try[U], self)
        catch = _capturable()
        try:
            result = require(mapper, "Try.flat_map() mapper must not be None")(cast(T, self._value))
            if not isinstance(result, Try):
                raise TypeError(f"Try.flat_map() mapper must return a Try, got {type(result).__name__}")
            return result
        except catch as e:
            return _captured(e, "flat_map")

    def flatten(self: Try[Try[U]]) -> Try[U]:
        """Try[Try[U]] -> Try[U]"""
        return self.flat_map(lambda inner: inner)

    def map_failure(self, mapper: Function[BaseException, BaseException]) -> Try[T]:
        """Replace the exception of a Failure. A Success is returned as is."""
        if self._is_success:
            return self
        catch = _capturable()
        try:
            return Failure(require(mapper, "Try.map_failure() mapper must not be None")(self._value))
        except catch as e:
            return _captured(e, "map_failure")

    def to_optional(self) -> Option[T]:
        """Some(value) if Success, Nothing if Failure. The exception is dropped."""
        return Option(cast(T, self._value)) if self._is_success else Nothing

    # ─────────────────────────────────────────────────────────────────
    # Recovery
    # ─────────────────────────────────────────────────────────────────

    def or_else(self, other: T) -> T:
        """The value if Success, otherwise other. Never raises."""
        return cast(T, self._value) if self._is_success else other

    def or_else_get(self, supplier: Supplier[T]) -> T:
        """The value if Success, otherwise supplier().

        supplier is only consulted for a Failure; passing None then raises
        MissingArgumentError.
        """
        if self._is_success:
            return cast(T, self._value)
        return require(supplier, "Try.or_else_get() supplier must not be None")()

    def or_else_try(self, fallback: Supplier[T]) -> Try[T]:
        """Self if Success, otherwise Try.of(fallback).

        fallback must not be None for either variant. Chains short-circuit
        on the first Success:

            >>> Try.of(lambda: 1 // 0).or_else_try(lambda: 2).or_else_try(lambda: 3).get()
            2
        """
        require(fallback, "Try.or_else_try() fallback must not be None")
        if self._is_success:
            return self
        if _log.is_enabled_for(logging.DEBUG):
            _log.debug("trying fallback", error_type=type(self._value).__name__)
        return _run(fallback, "or_else_try")

    # ─────────────────────────────────────────────────────────────────
    # Dunder Methods
    # ─────────────────────────────────────────────────────────────────

    def __bool__(self) -> bool:
        """True if Success."""
        return self._is_success

    def __repr__(self) -> str:
        variant = "Success" if self._is_success else "Failure"
        return f"{variant}({self._value!r})"

    def __eq__(self, other: object) -> bool:
        """Same variant and equal payload."""
        if not isinstance(other, Try):
            return NotImplemented
        return self._is_success == other._is_success and self._value == other._value

    def __hash__(self) -> int:
        return hash((self._is_success, self._value))

    def __iter__(self) -> Iterator[T]:
        """Yields the value if Success, nothing if Failure."""
        if self._is_success:
            yield cast(T, self._value)


# ═════════════════════════════════════════════════════════════════════════════
# Constructor Functions
# ═════════════════════════════════════════════════════════════════════════════


def Success(value: T) -> Try[T]:  # noqa: N802
    """Construct a Success. Raises MissingArgumentError if value is None."""
    return Try(require(value, "Try.success() value must not be None"), is_success=True)


def Failure(error: BaseException) -> Try[Any]:  # noqa: N802
    """Construct a Failure. Raises MissingArgumentError if error is None."""
    return Try(require(error, "Try.failure() error must not be None"), is_success=False)


# ═════════════════════════════════════════════════════════════════════════════
# Collection Operations
# ═════════════════════════════════════════════════════════════════════════════


def sequence(tries: Iterable[Try[T]]) -> Try[list[T]]:
    """Convert Trys to a Try of list. Returns the first Failure as is.

    Example:
        >>> sequence([Success(1), Success(2)]).get()
        [1, 2]
    """
    values: list[T] = []
    for t in tries:
        if not t._is_success:
            return cast(Try[list[T]], t)
        values.append(cast(T, t._value))
    return Try(values, is_success=True)


def traverse(items: Iterable[T], func: Function[T, U]) -> Try[list[U]]:
    """Apply func to each item under a capturing boundary, collect the values.

    Stops calling func after the first failure.
    """
    values: list[U] = []
    for item in items:
        result = _run(partial(func, item), "traverse")
        if not result._is_success:
            return cast(Try[list[U]], result)
        values.append(cast(U, result._value))
    return Try(values, is_success=True)


def collect_failures(tries: Iterable[Try[T]]) -> Try[list[T]]:
    """Like sequence, but gathers every exception into one group.

    Example:
        >>> collect_failures([Success(1), Try.of(lambda: 1 // 0)]).error()
        ExceptionGroup('1 of 2 attempts failed', [ZeroDivisionError('integer division or modulo by zero')])
    """
    items = list(tries)
    values: list[T] = []
    errors: list[BaseException] = []
    for t in items:
        (values if t._is_success else errors).append(t._value)  # type: ignore[arg-type]
    if errors:
        return Try(BaseExceptionGroup(f"{len(errors)} of {len(items)} attempts failed", errors), is_success=False)
    return Try(values, is_success=True)
