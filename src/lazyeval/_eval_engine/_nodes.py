"""Node types of a deferred computation.

Every computation is an instance of one of the `Eval` subclasses below.
Nodes are immutable apart from the cache slot of the memoizing variants,
which goes from empty to filled exactly once.

Nodes compare and hash by identity and never recurse in `repr`, so chains
of any depth can be printed, compared and stored in sets.
"""

from __future__ import annotations

import threading
from abc import ABC
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Final, cast

if TYPE_CHECKING:
    from collections.abc import Callable


class _Pending:
    """An empty memo cache slot.

    Use the PENDING singleton instead of making instances of this directly.
    """

    __slots__ = ()

    def __repr__(self) -> str:
        return "<pending>"


PENDING: Final = _Pending()


def _require_callable(obj: object, role: str) -> None:
    if not callable(obj):
        msg = f"{role} must be callable, got {type(obj).__name__}"
        raise TypeError(msg)


class Eval[T](ABC):
    """A computation producing a value of type T when triggered."""

    __slots__ = ()

    @property
    def value(self) -> T:
        """Trigger the computation and return its result."""
        from ._engine import trigger  # noqa: PLC0415

        return trigger(self)

    def flat_map[U](self, fn: Callable[[T], Eval[U]]) -> Eval[U]:
        """Chain a computation that depends on the result of this one.

        Nothing runs until the returned computation is triggered. Chains of
        any length resolve without growing the call stack.
        """
        return Sequencer(self, fn)

    def map[U](self, fn: Callable[[T], U]) -> Eval[U]:
        """Transform the result of this computation with a plain function."""
        _require_callable(fn, "map function")
        return Sequencer(self, lambda result: EagerValue(fn(result)))

    def memoize(self) -> Eval[T]:
        """Return a computation that resolves this one at most once and caches the result."""
        return Memoized(self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(...)"


@dataclass(frozen=True, slots=True, eq=False, repr=False)
class EagerValue[T](Eval[T]):
    """An already computed value."""

    result: T

    def memoize(self) -> Eval[T]:
        return self

    def __repr__(self) -> str:
        return f"EagerValue({self.result!r})"


@dataclass(slots=True, eq=False, repr=False)
class MemoizedThunk[T](Eval[T]):
    """A zero-argument function that runs on the first trigger only.

    The check-and-fill sequence is guarded by a lock owned by this instance,
    so the function runs at most once even under concurrent triggers. The
    function is dropped once the result is cached. A function that raises
    leaves the slot empty and will be called again on the next trigger.
    """

    thunk: Callable[[], T] | None
    _result: object = field(default=PENDING, init=False)
    # Reentrant so a thunk that triggers itself fails with RecursionError instead of deadlocking.
    _lock: threading.RLock = field(default_factory=threading.RLock, init=False)

    def __post_init__(self) -> None:
        _require_callable(self.thunk, "thunk")

    @property
    def is_filled(self) -> bool:
        return self._result is not PENDING

    def force(self) -> T:
        """Return the cached result, computing it first if necessary."""
        result = self._result
        if result is not PENDING:
            return cast("T", result)
        with self._lock:
            if self._result is PENDING:
                thunk = cast("Callable[[], T]", self.thunk)
                self._result = thunk()
                self.thunk = None
            return cast("T", self._result)

    def memoize(self) -> Eval[T]:
        return self

    def __repr__(self) -> str:
        return f"MemoizedThunk({self._result!r})"


@dataclass(frozen=True, slots=True, eq=False, repr=False)
class UnmemoizedThunk[T](Eval[T]):
    """A zero-argument function that runs again on every trigger."""

    thunk: Callable[[], T]

    def __post_init__(self) -> None:
        _require_callable(self.thunk, "thunk")


@dataclass(frozen=True, slots=True, eq=False, repr=False)
class DeferredChain[T](Eval[T]):
    """A zero-argument function producing another computation.

    The function runs once per trigger and the computation it returns is
    resolved by the same loop, without a nested call.
    """

    thunk: Callable[[], Eval[T]]

    def __post_init__(self) -> None:
        _require_callable(self.thunk, "thunk")


@dataclass(frozen=True, slots=True, eq=False, repr=False)
class Sequencer[A, B](Eval[B]):
    """Resolve `source`, then the computation `continuation` builds from its result."""

    source: Eval[A]
    continuation: Callable[[A], Eval[B]]

    def __post_init__(self) -> None:
        _require_callable(self.continuation, "continuation")


@dataclass(slots=True, eq=False, repr=False)
class Memoized[T](Eval[T]):
    """Cache the result of an arbitrary computation.

    The source is resolved by the trigger loop, which then fills the slot.
    Concurrent first triggers may each resolve the source, but the first
    stored result wins and every caller observes that one.
    """

    source: Eval[T]
    _result: object = field(default=PENDING, init=False)
    _lock: threading.Lock = field(default_factory=threading.Lock, init=False)

    @property
    def cached(self) -> Any:
        """The cached result, or PENDING while the slot is empty."""
        return self._result

    def fill(self, result: T) -> T:
        """Store `result` unless a result is already cached; return the cached one."""
        with self._lock:
            if self._result is PENDING:
                self._result = result
            return cast("T", self._result)

    def memoize(self) -> Eval[T]:
        return self

    def __repr__(self) -> str:
        return f"Memoized({self._result!r})"
