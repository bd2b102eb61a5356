"""Payload transformers. Each touches one side and keeps every tag."""

from __future__ import annotations

from typing import TYPE_CHECKING, assert_never

from commitment.core.outcome import Committed, Failed, Settled

if TYPE_CHECKING:
    from collections.abc import Callable

    from commitment.core.outcome import Outcome


def map_ok[T, U, E](x: Outcome[T, E], f: Callable[[T], U]) -> Outcome[U, E]:
    """Apply ``f`` to a success payload; failures pass through."""
    match x:
        case Settled(value):
            return Settled(f(value))
        case Committed(value):
            return Committed(f(value))
        case Failed():
            return x
        case _:
            assert_never(x)


def map_err[T, E, F](x: Outcome[T, E], f: Callable[[E], F]) -> Outcome[T, F]:
    """Apply ``f`` to a failure payload; successes pass through."""
    match x:
        case Settled() | Committed():
            return x
        case Failed(Settled(error)):
            return Failed(Settled(f(error)))
        case Failed(Committed(error)):
            return Failed(Committed(f(error)))
        case _:
            assert_never(x)
