"""Structural equality and a total order over outcomes.

``equal`` distinguishes every variant and inner tag. ``compare`` is coarser:
it orders by success/failure first and then by payload, ignoring the
commitment dimension, so ``Settled(5)`` and ``Committed(5)`` compare equal.
That makes outcomes usable as keys in containers ordered purely on
success/failure and payload value.
"""

from __future__ import annotations

from enum import IntEnum
import functools
from typing import TYPE_CHECKING, Any, assert_never

from commitment.core.outcome import Committed, Failed, Settled

if TYPE_CHECKING:
    from collections.abc import Callable

    from commitment.core.outcome import Outcome


class Ordering(IntEnum):
    """Result of a three-way comparison."""

    LESS = -1
    EQUAL = 0
    GREATER = 1

    @classmethod
    def of(cls, n: int) -> Ordering:
        """Normalize a ``cmp``-style integer to its sign."""
        if n < 0:
            return cls.LESS
        if n > 0:
            return cls.GREATER
        return cls.EQUAL


def natural(a: Any, b: Any) -> Ordering:
    """Three-way comparison using the payloads' own ``<`` and ``>``."""
    if a < b:
        return Ordering.LESS
    if a > b:
        return Ordering.GREATER
    return Ordering.EQUAL


def equal[T, E](
    eq_ok: Callable[[T, T], bool],
    eq_err: Callable[[E, E], bool],
    a: Outcome[T, E],
    b: Outcome[T, E],
) -> bool:
    """Return True when both outcomes have the same shape and equal payloads.

    Shape means the top-level variant and, for failures, the inner tag.
    """
    match a, b:
        case Settled(x), Settled(y):
            return eq_ok(x, y)
        case Committed(x), Committed(y):
            return eq_ok(x, y)
        case Failed(Settled(x)), Failed(Settled(y)):
            return eq_err(x, y)
        case Failed(Committed(x)), Failed(Committed(y)):
            return eq_err(x, y)
        case _:
            return False


def compare[T, E](
    cmp_ok: Callable[[T, T], int],
    cmp_err: Callable[[E, E], int],
    a: Outcome[T, E],
    b: Outcome[T, E],
) -> Ordering:
    """Three-way compare two outcomes.

    Any success is greater than any failure. Within a side, only the payload
    matters; commitment tags never affect the order.
    """
    match a:
        case Settled(x) | Committed(x):
            match b:
                case Settled(y) | Committed(y):
                    return Ordering.of(cmp_ok(x, y))
                case Failed():
                    return Ordering.GREATER
                case _:
                    assert_never(b)
        case Failed(tag_a):
            match b:
                case Settled() | Committed():
                    return Ordering.LESS
                case Failed(tag_b):
                    return Ordering.of(cmp_err(tag_a.value, tag_b.value))
                case _:
                    assert_never(b)
        case _:
            assert_never(a)


def sort_key(
    cmp_ok: Callable[[Any, Any], int] = natural,
    cmp_err: Callable[[Any, Any], int] = natural,
) -> Callable[[Any], Any]:
    """Return a ``sorted``/``min``/``max`` key built on ``compare``."""
    return functools.cmp_to_key(functools.partial(compare, cmp_ok, cmp_err))
