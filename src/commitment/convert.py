"""Bridges between outcomes and simpler types.

The optional side is plain ``T | None``: any value other than ``None`` is
present. Note that ``to_option(Settled(None))`` is therefore
indistinguishable from a failure.

The result side is the tag-free ``Success``/``Failure`` pair. Going through
it discards the commitment bit; ``from_result`` asks the caller to supply it
again.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, assert_never

from commitment.core.outcome import Committed, Failed, Settled
from commitment.core.result_primitives import Failure, Success

if TYPE_CHECKING:
    from commitment.core.outcome import Outcome
    from commitment.core.result_primitives import Result


def from_option[T, E](opt: T | None, error: E) -> Outcome[T, E]:
    """``value`` becomes ``Settled(value)``; ``None`` becomes ``Failed(Settled(error))``."""
    if opt is None:
        return Failed(Settled(error))
    return Settled(opt)


def to_option[T, E](x: Outcome[T, E]) -> T | None:
    match x:
        case Settled(value) | Committed(value):
            return value
        case Failed():
            return None
        case _:
            assert_never(x)


def to_result[T, E](x: Outcome[T, E]) -> Result[T, E]:
    """Drop the commitment tag, keeping success/failure and the payload."""
    match x:
        case Settled(value) | Committed(value):
            return Success(value)
        case Failed(Settled(error) | Committed(error)):
            return Failure(error)
        case _:
            assert_never(x)


def from_result[T, E](result: Result[T, E], committed: bool) -> Outcome[T, E]:
    """Attach a commitment tag to a plain result.

    Args:
        result: ``Success`` or ``Failure``.
        committed: Whether the operation that produced ``result`` may have
            committed state.
    """
    match result:
        case Success(value):
            return Committed(value) if committed else Settled(value)
        case Failure(error):
            return Failed(Committed(error) if committed else Settled(error))
        case _:
            assert_never(result)
