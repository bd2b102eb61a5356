"""commitment: outcomes that remember whether state was committed.

An ``Outcome`` is ``Settled(value)``, ``Committed(value)`` or
``Failed(Settled(error) | Committed(error))``. The combinators compose
outcomes while keeping the commitment flag monotonic on the success path.

Public API:
    - Settled, Committed, Failed, ok(), err(): the value type
    - chain(), flatten(), commit(): sequencing
    - map_ok(), map_err(): transformers
    - from_option(), to_option(), from_result(), to_result(): conversions
    - is_ok(), is_err(), is_settled(), is_committed(), iterate(): inspection
    - assert_ok(), assert_err(), assert_settled(), assert_committed(): fatal checks
    - trap(), awaited(), chain_async(): asyncio bridges
"""

from __future__ import annotations

import logging

from commitment.assertions import (
    assert_committed,
    assert_err,
    assert_ok,
    assert_settled,
)
from commitment.compare import Ordering, compare, equal, natural, sort_key
from commitment.config import (
    FrozenConfig,
    Settings,
    config_scope,
    current_config,
    resolve_config,
)
from commitment.convert import from_option, from_result, to_option, to_result
from commitment.core.types import (
    Committed,
    ErrTag,
    Failed,
    Failure,
    Outcome,
    Result,
    Settled,
    Success,
    err,
    ok,
)
from commitment.errors import (
    CommitmentError,
    ConfigurationError,
    OutcomeAssertionError,
)
from commitment.inspection import is_committed, is_err, is_ok, is_settled, iterate
from commitment.sequencing import chain, commit, flatten
from commitment.suspend import awaited, chain_async, trap
from commitment.transform import map_err, map_ok

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("commitment-outcome")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"

# Library-level NullHandler: stay silent unless the consumer configures logging.
logging.getLogger("commitment").addHandler(logging.NullHandler())

__all__ = [
    "CommitmentError",
    "Committed",
    "ConfigurationError",
    "ErrTag",
    "Failed",
    "Failure",
    "FrozenConfig",
    "Ordering",
    "Outcome",
    "OutcomeAssertionError",
    "Result",
    "Settings",
    "Settled",
    "Success",
    "assert_committed",
    "assert_err",
    "assert_ok",
    "assert_settled",
    "awaited",
    "chain",
    "chain_async",
    "commit",
    "compare",
    "config_scope",
    "current_config",
    "equal",
    "err",
    "flatten",
    "from_option",
    "from_result",
    "is_committed",
    "is_err",
    "is_ok",
    "is_settled",
    "iterate",
    "map_err",
    "map_ok",
    "natural",
    "ok",
    "resolve_config",
    "sort_key",
    "to_option",
    "to_result",
    "trap",
]
