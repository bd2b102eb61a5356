"""Re-export hub for the core value types."""

from __future__ import annotations

from .outcome import Committed, ErrTag, Failed, Outcome, Settled, err, ok
from .result_primitives import Failure, Result, Success

__all__ = [
    "Committed",
    "ErrTag",
    "Failed",
    "Failure",
    "Outcome",
    "Result",
    "Settled",
    "Success",
    "err",
    "ok",
]
