"""Tests for the attempt decorator."""

from __future__ import annotations

import pytest

from fallible import MissingArgumentError, Try, attempt


@attempt
def divide(a: int, b: int) -> int:
    """Integer division."""
    return a // b


def test_attempt_success() -> None:
    result = divide(10, 2)

    assert isinstance(result, Try)
    assert result.get() == 5


def test_attempt_failure() -> None:
    result = divide(10, 0)

    assert result.is_failure()
    with pytest.raises(ZeroDivisionError):
        result.get()


def test_attempt_keyword_arguments() -> None:
    assert divide(a=9, b=3).get() == 3


def test_attempt_preserves_metadata() -> None:
    assert divide.__name__ == "divide"
    assert divide.__doc__ == "Integer division."


def test_attempt_none_result() -> None:
    @attempt
    def nothing() -> None:
        return None

    assert isinstance(nothing().error(), MissingArgumentError)


def test_attempt_each_call_is_independent() -> None:
    calls: list[int] = []

    @attempt
    def count() -> int:
        calls.append(1)
        return len(calls)

    assert [count().get() for _ in range(3)] == [1, 2, 3]


def test_callable_aliases_accept_raising_code() -> None:
    from fallible import Function, Predicate, Supplier

    def fetch() -> int:
        raise TimeoutError("slow")

    supplier: Supplier[int] = fetch
    double: Function[int, int] = lambda x: x * 2
    positive: Predicate[int] = lambda x: x > 0

    assert Try.of(supplier).or_else_try(lambda: 4).filter(positive).map(double).get() == 8
