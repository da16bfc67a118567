"""Tests for sequence/traverse/collect_failures."""

from __future__ import annotations

from fallible import Success, Try, collect_failures, sequence, traverse


def test_sequence_all_success() -> None:
    assert sequence([Success(1), Success(2), Success(3)]).get() == [1, 2, 3]


def test_sequence_returns_first_failure() -> None:
    first = ValueError("first")
    tries = [Success(1), Try.failure(first), Try.failure(KeyError("second"))]

    assert sequence(tries).error() is first


def test_sequence_empty() -> None:
    assert sequence([]).get() == []


def test_traverse() -> None:
    assert traverse(["1", "2", "3"], int).get() == [1, 2, 3]
    assert isinstance(traverse(["1", "bad"], int).error(), ValueError)


def test_traverse_stops_after_failure() -> None:
    seen: list[str] = []

    def parse(s: str) -> int:
        seen.append(s)
        return int(s)

    traverse(["1", "x", "3"], parse)

    assert seen == ["1", "x"]


def test_traverse_passes_each_item_once() -> None:
    seen: list[int] = []

    def record(n: int) -> int:
        seen.append(n)
        return n * 10

    assert traverse(iter([1, 2, 3]), record).get() == [10, 20, 30]
    assert seen == [1, 2, 3]


def test_collect_failures_gathers_all_errors() -> None:
    e1, e2 = ValueError("a"), KeyError("b")
    result = collect_failures([Success(1), Try.failure(e1), Success(3), Try.failure(e2)])

    group = result.error()
    assert isinstance(group, ExceptionGroup)
    assert list(group.exceptions) == [e1, e2]
    assert str(group) == "2 of 4 attempts failed (2 sub-exceptions)"


def test_collect_failures_all_success() -> None:
    assert collect_failures([Success("a"), Success("b")]).get() == ["a", "b"]


def test_collect_failures_base_exceptions() -> None:
    class Halt(BaseException):
        pass

    group = collect_failures([Try.failure(Halt())]).error()

    assert isinstance(group, BaseExceptionGroup)
    assert not isinstance(group, ExceptionGroup)
