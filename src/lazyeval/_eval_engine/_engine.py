"""Trampolined trigger loop for deferred computations."""

import logging
from typing import TYPE_CHECKING, Any

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

if TYPE_CHECKING:
    from collections.abc import Callable

logger = logging.getLogger(__name__)

type _Frame = Callable[[Any], Eval[Any]] | Memoized[Any]


class EvaluationError(TypeError):
    """Malformed computation reached the trigger loop.

    Raised when something other than an `Eval` has to be resolved, e.g. a
    continuation that returned a plain value. This is a programming error in
    the code building the computation, not a failure of the computation.
    """


def _resolve_terminal(node: object) -> Any:
    """Produce the value of a node that does not refer to another computation."""
    if isinstance(node, EagerValue):
        return node.result
    if isinstance(node, MemoizedThunk):
        return node.force()
    if isinstance(node, UnmemoizedThunk):
        return node.thunk()

    msg = f"Cannot trigger {type(node).__name__!r}: expected an Eval instance"
    raise EvaluationError(msg)


def trigger[T](computation: Eval[T]) -> T:
    """Evaluate a computation and return its result.

    The loop never calls itself. Sequencer and DeferredChain nodes are
    unwrapped in place while pending continuations and memo fills are kept
    on a list, so the native call stack stays flat however long the chain
    is. Once a terminal node yields a value, frames are popped until one
    produces the next computation or the list is empty.

    Exceptions raised by thunks or continuations propagate unchanged;
    pending frames are dropped and no memo slot is filled.

    Args:
        computation: The computation to evaluate.

    Returns:
        The result of the computation.

    Raises:
        EvaluationError: If a node that is not an Eval has to be resolved.

    Example:
        >>> trigger(eager(1).flat_map(lambda n: eager(n + 1)))
        2

    """
    pending: list[_Frame] = []
    current: object = computation
    steps = 0

    logger.debug("Triggering %r", computation)

    while True:
        steps += 1

        if isinstance(current, Sequencer):
            pending.append(current.continuation)
            current = current.source
            continue

        if isinstance(current, DeferredChain):
            current = current.thunk()
            continue

        if isinstance(current, Memoized):
            cached = current.cached
            if cached is PENDING:
                pending.append(current)
                current = current.source
                continue
            result = cached
        else:
            result = _resolve_terminal(current)

        while pending:
            frame = pending.pop()
            if isinstance(frame, Memoized):
                result = frame.fill(result)
                continue
            current = frame(result)
            break
        else:
            logger.debug("Resolved %r in %d steps", computation, steps)
            return result
