"""Outcome of an operation that may have committed state before returning.

An operation running on an event loop can only perform irrevocable work
(write a row, send a message, charge a card) across an ``await``. Once the
awaited call returns, the caller cannot tell whether anything was committed
upstream, so the outcome carries that fact alongside success or failure:

    Settled(value)              success, nothing committed
    Committed(value)            success, at least one commitment happened
    Failed(Settled(error))      failure, nothing committed
    Failed(Committed(error))    failure after at least one commitment

The error side reuses ``Settled``/``Committed`` as its inner tag, which keeps
success/failure orthogonal to the commitment dimension.

Usage:
    match outcome:
        case Settled(value):
            ...  # safe to retry, nothing happened
        case Committed(value):
            ...
        case Failed(Committed(error)):
            ...  # compensate, state already changed
        case Failed(Settled(error)):
            ...
"""

from __future__ import annotations

import dataclasses
import typing

T = typing.TypeVar("T")  # Success payload
E = typing.TypeVar("E")  # Error payload


@dataclasses.dataclass(frozen=True, slots=True)
class Settled[T]:
    """Produced without any commitment (the operation is still trapable)."""

    value: T


@dataclasses.dataclass(frozen=True, slots=True)
class Committed[T]:
    """Produced after at least one suspension that may have committed state."""

    value: T


# Inner tag of a failure: did the operation commit before it failed?
ErrTag = Settled[E] | Committed[E]


@dataclasses.dataclass(frozen=True, slots=True)
class Failed[E]:
    """A failure, tagged with whether a commitment preceded it.

    Attributes:
        tag: ``Settled(error)`` or ``Committed(error)``.
    """

    tag: ErrTag[E]

    @property
    def error(self) -> E:
        """The error payload, whichever inner tag carries it."""
        return self.tag.value


Outcome = Settled[T] | Committed[T] | Failed[E]


def ok(value: T, *, committed: bool = False) -> Outcome[T, typing.Any]:
    """Build a success outcome, committed or not."""
    return Committed(value) if committed else Settled(value)


def err(error: E, *, committed: bool = False) -> Outcome[typing.Any, E]:
    """Build a failure outcome, committed or not."""
    return Failed(Committed(error) if committed else Settled(error))
