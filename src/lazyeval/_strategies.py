"""Runnable demonstrations of the evaluation strategies.

Each scenario builds a computation around a function wrapped in a
`CallCounter`, triggers it a number of times and reports the result next
to how often the wrapped function actually ran:

- eager: the function runs once, when the computation is built
- memoized: the function runs once, on the first trigger
- unmemoized: the function runs on every trigger
- deferred: the function building the inner computation runs on every trigger
"""

from __future__ import annotations

import logging
from enum import StrEnum
from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict

from ._eval_engine import deferred, eager, memoized_lazy, unmemoized_lazy

if TYPE_CHECKING:
    from collections.abc import Callable

    from ._eval_engine import Eval

logger = logging.getLogger(__name__)


class Strategy(StrEnum):
    EAGER = "eager"
    MEMOIZED = "memoized"
    UNMEMOIZED = "unmemoized"
    DEFERRED = "deferred"


class CallCounter[T]:
    """Zero-argument callable that counts how often the wrapped function runs."""

    def __init__(self, fn: Callable[[], T]) -> None:
        self._fn = fn
        self.calls = 0

    def __call__(self) -> T:
        self.calls += 1
        return self._fn()


class StrategyReport(BaseModel):
    """Outcome of triggering one strategy repeatedly."""

    model_config = ConfigDict(frozen=True)

    strategy: Strategy
    result: list[int]
    calls: int
    triggers: int


class ChainReport(BaseModel):
    """Outcome of triggering a long chain of computations."""

    model_config = ConfigDict(frozen=True)

    depth: int
    result: int


def _check_positive(name: str, value: int) -> None:
    if value < 1:
        msg = f"{name} must be a positive integer, got {value}"
        raise ValueError(msg)


def _run(strategy: Strategy, computation: Eval[list[int]], counter: CallCounter, runs: int) -> StrategyReport:
    _check_positive("runs", runs)
    results = [computation.value for _ in range(runs)]
    logger.debug("%s: %d trigger(s), %d call(s)", strategy, runs, counter.calls)
    return StrategyReport(strategy=strategy, result=results[-1], calls=counter.calls, triggers=runs)


def eager_scenario(runs: int) -> StrategyReport:
    counter = CallCounter(lambda: [1, 2, 3])
    return _run(Strategy.EAGER, eager(counter()), counter, runs)


def memoized_scenario(runs: int) -> StrategyReport:
    counter = CallCounter(lambda: [1, 2])
    return _run(Strategy.MEMOIZED, memoized_lazy(counter), counter, runs)


def unmemoized_scenario(runs: int) -> StrategyReport:
    counter = CallCounter(lambda: [1, 2, 3, 4])
    return _run(Strategy.UNMEMOIZED, unmemoized_lazy(counter), counter, runs)


def deferred_scenario(runs: int) -> StrategyReport:
    zeros = [0, 0, 0]

    def build() -> Eval[list[int]]:
        return eager(zeros).flat_map(lambda e: deferred(lambda: memoized_lazy(lambda: e)))

    counter: CallCounter[Eval[list[int]]] = CallCounter(build)
    return _run(Strategy.DEFERRED, deferred(counter), counter, runs)


SCENARIOS: dict[Strategy, Callable[[int], StrategyReport]] = {
    Strategy.EAGER: eager_scenario,
    Strategy.MEMOIZED: memoized_scenario,
    Strategy.UNMEMOIZED: unmemoized_scenario,
    Strategy.DEFERRED: deferred_scenario,
}


def run_all_scenarios(runs: int) -> list[StrategyReport]:
    """Run every strategy scenario with the same number of triggers."""
    return [scenario(runs) for scenario in SCENARIOS.values()]


def chain_scenario(depth: int) -> ChainReport:
    """Chain `depth` increments onto zero and trigger the result.

    The chain is nested far deeper than the interpreter's recursion limit
    for any realistic depth, so this only succeeds because triggering is
    trampolined.
    """
    _check_positive("depth", depth)
    computation: Eval[int] = eager(0)
    for _ in range(depth):
        computation = computation.flat_map(lambda n: eager(n + 1))
    return ChainReport(depth=depth, result=computation.value)
