"""Stack-safe lazy evaluation with explicit evaluation strategies."""

__all__ = [
    "FALSE",
    "ONE",
    "TRUE",
    "UNIT",
    "ZERO",
    "ChainReport",
    "DeferredChain",
    "EagerValue",
    "Eval",
    "EvaluationError",
    "Memoized",
    "MemoizedThunk",
    "Sequencer",
    "Strategy",
    "StrategyReport",
    "UnmemoizedThunk",
    "chain_scenario",
    "deferred",
    "eager",
    "fold_right",
    "map2",
    "memoized_lazy",
    "run_all_scenarios",
    "sequence",
    "sequence_all",
    "trigger",
    "unmemoized_lazy",
]

from ._eval_engine import (
    FALSE,
    ONE,
    TRUE,
    UNIT,
    ZERO,
    DeferredChain,
    EagerValue,
    Eval,
    EvaluationError,
    Memoized,
    MemoizedThunk,
    Sequencer,
    UnmemoizedThunk,
    deferred,
    eager,
    memoized_lazy,
    sequence,
    trigger,
    unmemoized_lazy,
)
from ._folds import fold_right, map2, sequence_all
from ._strategies import ChainReport, Strategy, StrategyReport, chain_scenario, run_all_scenarios
