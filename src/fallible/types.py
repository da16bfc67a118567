"""Type aliases for fallible callables.

Any of these callables may raise any exception. They exist to document
intent at call sites that accept code which is allowed to fail; Python has
no checked exceptions, so no adapter is needed to pass them around.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeAlias, TypeVar

T = TypeVar("T")
U = TypeVar("U")
R = TypeVar("R")

# ═══════════════════════════════════════════════════════════════════════════════
# Fallible Callables
# ═══════════════════════════════════════════════════════════════════════════════

Supplier: TypeAlias = Callable[[], T]
Function: TypeAlias = Callable[[T], R]
BiFunction: TypeAlias = Callable[[T, U], R]
Predicate: TypeAlias = Callable[[T], bool]
Consumer: TypeAlias = Callable[[T], Any]
BiConsumer: TypeAlias = Callable[[T, U], Any]
Runnable: TypeAlias = Callable[[], Any]
