"""Plain two-variant result: the commitment-free view of an outcome.

Code that only asks "did it work?" (a retry loop, a response serializer, a
library that predates outcomes) speaks ``Success``/``Failure``. Converting an
outcome to this form with ``to_result`` forgets whether state was committed;
``from_result`` takes that fact back from the caller, who is the only one
who can know it.
"""

from __future__ import annotations

import dataclasses
import typing

TSuccess = typing.TypeVar("TSuccess")
TFailure = typing.TypeVar("TFailure")


@dataclasses.dataclass(frozen=True, slots=True)
class Success[TSuccess]:
    """The operation produced ``value``; nothing is said about commitment."""

    value: TSuccess


@dataclasses.dataclass(frozen=True, slots=True)
class Failure[TFailure]:
    """The operation failed with ``error``.

    The payload is unconstrained: outcomes commonly carry strings or domain
    error values rather than exceptions.
    """

    error: TFailure


# Equivalent to an Outcome with the commitment tag erased.
Result = Success[TSuccess] | Failure[TFailure]
