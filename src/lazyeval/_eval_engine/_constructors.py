"""Functions building computations with a given evaluation strategy."""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

from ._nodes import DeferredChain, EagerValue, Eval, MemoizedThunk, UnmemoizedThunk

if TYPE_CHECKING:
    from collections.abc import Callable


def eager[T](value: T) -> Eval[T]:
    """Wrap a value that has already been computed.

    Triggering returns the very same object every time.
    """
    return EagerValue(value)


def memoized_lazy[T](thunk: Callable[[], T]) -> Eval[T]:
    """Run `thunk` on the first trigger and cache its result.

    Later triggers return the cached result without calling `thunk` again,
    so its side effects happen at most once. If `thunk` raises, nothing is
    cached and the next trigger calls it again.

    Example:
        >>> numbers = memoized_lazy(lambda: [1, 2])
        >>> numbers.value is numbers.value
        True

    """
    return MemoizedThunk(thunk)


def unmemoized_lazy[T](thunk: Callable[[], T]) -> Eval[T]:
    """Run `thunk` on every trigger."""
    return UnmemoizedThunk(thunk)


def deferred[T](thunk: Callable[[], Eval[T]]) -> Eval[T]:
    """Delay building a computation until it is triggered.

    `thunk` is called on every trigger and the computation it returns is
    resolved without adding a stack frame, which makes `deferred` the tool
    for writing recursive computations.
    """
    return DeferredChain(thunk)


def sequence[A, B](source: Eval[A], continuation: Callable[[A], Eval[B]]) -> Eval[B]:
    """Resolve `source`, then the computation `continuation` builds from its result.

    Equivalent to `source.flat_map(continuation)`.
    """
    return source.flat_map(continuation)


UNIT: Final[Eval[None]] = EagerValue(None)
TRUE: Final[Eval[bool]] = EagerValue(True)  # noqa: FBT003
FALSE: Final[Eval[bool]] = EagerValue(False)  # noqa: FBT003
ZERO: Final[Eval[int]] = EagerValue(0)
ONE: Final[Eval[int]] = EagerValue(1)
