"""Bridges between asyncio code and outcomes.

These helpers never decide whether a commitment happened; the caller says
so by picking one. ``trap`` is for synchronous code that cannot suspend,
``awaited`` for an ``await`` that may have committed state.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, assert_never

from commitment.core.outcome import Committed, Failed, Settled
from commitment.sequencing import promote_success

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from commitment.core.outcome import Outcome

log = logging.getLogger(__name__)

_DEFAULT_CATCH: tuple[type[Exception], ...] = (Exception,)


def trap[T](
    fn: Callable[..., T],
    *args: Any,
    catch: tuple[type[Exception], ...] = _DEFAULT_CATCH,
    **kwargs: Any,
) -> Outcome[T, Exception]:
    """Call ``fn`` and wrap its return value or exception as a settled outcome.

    Exceptions outside ``catch`` propagate.
    """
    try:
        value = fn(*args, **kwargs)
    except catch as e:
        log.debug("trap: %s raised %r", getattr(fn, "__qualname__", fn), e)
        return Failed(Settled(e))
    return Settled(value)


async def awaited[T](
    awaitable: Awaitable[T],
    *,
    catch: tuple[type[Exception], ...] = _DEFAULT_CATCH,
) -> Outcome[T, Exception]:
    """Await a suspension point that may commit, and tag the outcome committed.

    Cancellation is a ``BaseException`` and is never converted into a failure.
    """
    try:
        value = await awaitable
    except catch as e:
        log.debug("awaited: suspension raised %r", e)
        return Failed(Committed(e))
    return Committed(value)


async def chain_async[T, U, E](
    first: Outcome[T, E],
    next_: Callable[[T], Awaitable[Outcome[U, E]]],
) -> Outcome[U, E]:
    """``chain`` for a coroutine continuation; same tag rules.

    ``next_`` is neither called nor awaited when ``first`` is ``Failed``.
    """
    match first:
        case Failed():
            return first
        case Settled(value):
            return await next_(value)
        case Committed(value):
            return promote_success(await next_(value))
        case _:
            assert_never(first)
