"""Sequential composition of outcomes.

Both combinators enforce the monotonicity of the commitment tag on the
success path: once a step has committed, nothing composed after it can
report ``Settled`` success again.

``chain`` and ``flatten`` disagree on the failure path. After a committed
first step, ``chain`` passes a failing continuation through with the inner
tag the continuation chose, while ``flatten`` under a ``Committed`` wrapper
always reports ``Failed(Committed(...))``. Callers that need the stricter
guarantee for failures after ``chain`` can apply ``commit`` themselves.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, assert_never

from commitment.core.outcome import Committed, Failed, Settled

if TYPE_CHECKING:
    from collections.abc import Callable

    from commitment.core.outcome import Outcome


def commit[T, E](x: Outcome[T, E]) -> Outcome[T, E]:
    """Mark an outcome as committed, on either side.

    Idempotent: committed outcomes are returned as they are.
    """
    match x:
        case Committed() | Failed(Committed()):
            return x
        case Settled(value):
            return Committed(value)
        case Failed(Settled(error)):
            return Failed(Committed(error))
        case _:
            assert_never(x)


def chain[T, U, E](
    first: Outcome[T, E],
    next_: Callable[[T], Outcome[U, E]],
) -> Outcome[U, E]:
    """Feed the success payload of ``first`` into ``next_``.

    - ``Failed`` short-circuits; ``next_`` is not called.
    - ``Settled(v)`` yields ``next_(v)`` untouched.
    - ``Committed(v)`` yields ``next_(v)`` with a ``Settled`` success promoted
      to ``Committed``. A failure from ``next_`` keeps its own inner tag.
    """
    match first:
        case Failed():
            return first
        case Settled(value):
            return next_(value)
        case Committed(value):
            return promote_success(next_(value))
        case _:
            assert_never(first)


def promote_success[U, E](result: Outcome[U, E]) -> Outcome[U, E]:
    """Apply the rule for a step that follows a commitment.

    ``Settled`` success becomes ``Committed``; failures keep their inner tag.
    Shared by ``chain`` and ``commitment.suspend.chain_async``.
    """
    match result:
        case Settled(value):
            return Committed(value)
        case Committed() | Failed():
            return result
        case _:
            assert_never(result)


def flatten[T, E](nested: Outcome[Outcome[T, E], E]) -> Outcome[T, E]:
    """Collapse one level of nesting.

    A ``Committed`` wrapper commits whatever it holds, failures included.
    """
    match nested:
        case Settled(inner):
            return inner
        case Committed(inner):
            return commit(inner)
        case Failed():
            return nested
        case _:
            assert_never(nested)

