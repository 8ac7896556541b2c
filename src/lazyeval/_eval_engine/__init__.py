"""Evaluation engine module for lazyeval.

This module provides the deferred computation type and the loop that
evaluates it. Computations are built with one of four strategies and
chained with `sequence`; nothing runs until `trigger` is called.

Key types:
- Eval: Base class of all computations
- EagerValue, MemoizedThunk, UnmemoizedThunk, DeferredChain: The four strategies
- Sequencer: A computation chained onto the result of another
- Memoized: A cached view of an arbitrary computation
- trigger: Stack-safe evaluation of a computation
"""

from ._constructors import (
    FALSE,
    ONE,
    TRUE,
    UNIT,
    ZERO,
    deferred,
    eager,
    memoized_lazy,
    sequence,
    unmemoized_lazy,
)
from ._engine import EvaluationError, trigger
from ._nodes import (
    PENDING,
    DeferredChain,
    EagerValue,
    Eval,
    Memoized,
    MemoizedThunk,
    Sequencer,
    UnmemoizedThunk,
)

__all__ = [
    "FALSE",
    "ONE",
    "PENDING",
    "TRUE",
    "UNIT",
    "ZERO",
    "DeferredChain",
    "EagerValue",
    "Eval",
    "EvaluationError",
    "Memoized",
    "MemoizedThunk",
    "Sequencer",
    "UnmemoizedThunk",
    "deferred",
    "eager",
    "memoized_lazy",
    "sequence",
    "trigger",
    "unmemoized_lazy",
]
