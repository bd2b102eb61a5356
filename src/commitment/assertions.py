"""Fail-fast shape checks.

A failed check is a programming error. It is never returned as a value:
depending on ``assert_mode`` it raises ``OutcomeAssertionError`` (a
``BaseException`` that ordinary handlers do not catch) or aborts the
process. Passing checks return the outcome unchanged so they can be used
inline.
"""

from __future__ import annotations

import logging
import os
from typing import TYPE_CHECKING, Any, NoReturn

from commitment.config import FrozenConfig, Settings, current_config
from commitment.errors import ConfigurationError, OutcomeAssertionError
from commitment.inspection import is_committed, is_err, is_ok, is_settled

if TYPE_CHECKING:
    from collections.abc import Callable

    from commitment.core.outcome import Outcome

log = logging.getLogger(__name__)

_HINTS = {
    "ok": "Handle the Failed case explicitly instead of asserting success.",
    "err": "The operation succeeded where a failure was expected.",
    "settled": "A commitment happened upstream; the operation is no longer trapable.",
    "committed": "No commitment happened upstream; check that the awaited step ran.",
}


def _fail(expected: str, actual: Outcome[Any, Any]) -> NoReturn:
    # A broken configuration must not turn the failure into a catchable Exception.
    config_error: ConfigurationError | None = None
    try:
        cfg = current_config()
    except ConfigurationError as e:
        config_error = e
        cfg = FrozenConfig(**Settings().model_dump())
        log.warning("Using default assertion settings: %s", e)
    message = f"expected {expected} outcome, got {actual!r}"
    if cfg.assert_mode == "abort":
        log.critical("Aborting: %s", message)
        os.abort()
    if cfg.log_assertions:
        log.error("Outcome assertion failed: %s", message)
    raise OutcomeAssertionError(
        message, expected=expected, actual=actual, hint=_HINTS[expected]
    ) from config_error


def _check[T, E](
    x: Outcome[T, E], predicate: Callable[[Outcome[Any, Any]], bool], expected: str
) -> Outcome[T, E]:
    if not predicate(x):
        _fail(expected, x)
    return x


def assert_ok[T, E](x: Outcome[T, E]) -> Outcome[T, E]:
    """Stop unless ``x`` is ``Settled`` or ``Committed``."""
    return _check(x, is_ok, "ok")


def assert_err[T, E](x: Outcome[T, E]) -> Outcome[T, E]:
    """Stop unless ``x`` is ``Failed``."""
    return _check(x, is_err, "err")


def assert_settled[T, E](x: Outcome[T, E]) -> Outcome[T, E]:
    """Stop unless ``x`` is ``Settled(_)`` or ``Failed(Settled(_))``."""
    return _check(x, is_settled, "settled")


def assert_committed[T, E](x: Outcome[T, E]) -> Outcome[T, E]:
    """Stop unless ``x`` is ``Committed(_)`` or ``Failed(Committed(_))``."""
    return _check(x, is_committed, "committed")
