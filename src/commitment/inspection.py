"""Predicates over outcomes and a side-effecting visitor."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, assert_never

from commitment.core.outcome import Committed, Failed, Settled

if TYPE_CHECKING:
    from collections.abc import Callable

    from commitment.core.outcome import Outcome


def is_ok(x: Outcome[Any, Any]) -> bool:
    return isinstance(x, Settled | Committed)


def is_err(x: Outcome[Any, Any]) -> bool:
    return isinstance(x, Failed)


def is_committed(x: Outcome[Any, Any]) -> bool:
    """True for ``Committed(_)`` and ``Failed(Committed(_))``."""
    match x:
        case Committed() | Failed(Committed()):
            return True
        case Settled() | Failed(Settled()):
            return False
        case _:
            assert_never(x)


def is_settled(x: Outcome[Any, Any]) -> bool:
    """True for ``Settled(_)`` and ``Failed(Settled(_))``."""
    return not is_committed(x)


def iterate[T](x: Outcome[T, Any], f: Callable[[T], Any]) -> None:
    """Call ``f`` once with the success payload; do nothing on failure."""
    match x:
        case Settled(value) | Committed(value):
            f(value)
        case Failed():
            pass
        case _:
            assert_never(x)
