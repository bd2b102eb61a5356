"""Exception hierarchy for commitment.

Failures of the operations an outcome describes are values (``Failed``),
never exceptions. The classes here cover misuse of the library itself.
"""

from __future__ import annotations

from typing import Any


class CommitmentError(Exception):
    """Base exception for recoverable library errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint = hint


class ConfigurationError(CommitmentError):
    """Configuration validation or resolution failed."""


class OutcomeAssertionError(BaseException):
    """An ``assert_*`` check failed: a programming error, not a failure value.

    Derives from ``BaseException`` so ``except Exception`` handlers cannot
    swallow it; it ends the current task or thread the way ``SystemExit``
    ends a program.
    """

    def __init__(
        self,
        message: str,
        *,
        expected: str,
        actual: Any,
        hint: str | None = None,
    ) -> None:
        super().__init__(message)
        self.expected = expected
        self.actual = actual
        self.hint = hint
