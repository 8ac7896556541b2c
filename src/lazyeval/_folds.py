"""Combinators built on top of the evaluation engine."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ._eval_engine import deferred, eager

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Sequence

    from ._eval_engine import Eval


def fold_right[A, B](
    items: Sequence[A],
    initial: Eval[B],
    fn: Callable[[A, Eval[B]], Eval[B]],
) -> Eval[B]:
    """Fold `items` from the right, passing the rest of the fold lazily.

    `fn` receives an item and a computation for the fold of everything after
    it. Returning without touching that computation stops the fold early;
    chaining onto it with `map` or `flat_map` keeps the fold stack-safe.

    Args:
        items: The items to fold over.
        initial: Result of folding an empty tail.
        fn: Combines an item with the lazily folded tail.

    Returns:
        A computation for the folded result.

    Example:
        >>> total = fold_right([1, 2, 3], eager(0), lambda n, rest: rest.map(lambda s: s + n))
        >>> total.value
        6

    """

    def step(index: int) -> Eval[B]:
        if index == len(items):
            return initial
        return fn(items[index], deferred(lambda: step(index + 1)))

    return deferred(lambda: step(0))


def map2[A, B, C](first: Eval[A], second: Eval[B], fn: Callable[[A, B], C]) -> Eval[C]:
    """Combine the results of two computations, resolving `first` before `second`."""
    return first.flat_map(lambda a: second.map(lambda b: fn(a, b)))


def sequence_all[T](computations: Iterable[Eval[T]]) -> Eval[list[T]]:
    """Resolve computations left to right and collect their results.

    Each trigger builds a fresh list.
    """
    items = list(computations)

    def start() -> Eval[list[T]]:
        collected: list[T] = []

        def step(index: int) -> Eval[list[T]]:
            if index == len(items):
                return eager(collected)

            def push(result: T) -> Eval[list[T]]:
                collected.append(result)
                return step(index + 1)

            return items[index].flat_map(push)

        return step(0)

    return deferred(start)
