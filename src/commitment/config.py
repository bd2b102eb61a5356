"""Configuration for the fatal assertion path.

Resolve-once, freeze-then-flow: values are validated by the pydantic
``Settings`` schema and frozen into a ``FrozenConfig``. Precedence is
defaults < environment (``COMMITMENT_*``) < programmatic overrides. A
``.env`` file is loaded through python-dotenv before the environment is read.

Example:
    with config_scope(assert_mode="abort"):
        assert_committed(outcome)  # aborts the process on mismatch
"""

from __future__ import annotations

from contextlib import contextmanager
import contextvars
from dataclasses import dataclass
from enum import Enum
import logging
import os
from typing import TYPE_CHECKING, Any, Literal, overload

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from commitment.errors import ConfigurationError

if TYPE_CHECKING:
    from collections.abc import Generator, Mapping

log = logging.getLogger(__name__)

ENV_PREFIX = "COMMITMENT_"

AssertMode = Literal["raise", "abort"]


# --- Schema (Pydantic wall) ---


class Settings(BaseModel):
    """Schema, defaults and validation rules for every configuration field."""

    #: ``raise`` ends the task with ``OutcomeAssertionError``; ``abort`` ends the process.
    assert_mode: AssertMode = Field(default="raise")
    log_assertions: bool = Field(default=True)

    model_config = ConfigDict(extra="forbid")

    @field_validator("assert_mode", mode="before")
    @classmethod
    def normalize_assert_mode(cls, v: Any) -> Any:
        """Accept any casing and surrounding whitespace."""
        if isinstance(v, str):
            return v.strip().lower()
        return v


def _default_settings() -> dict[str, Any]:
    return Settings().model_dump()


# --- Immutable runtime payload ---


@dataclass(frozen=True)
class FrozenConfig:
    """Validated, immutable configuration."""

    assert_mode: AssertMode
    log_assertions: bool


# --- Audit types ---


class Origin(str, Enum):
    """Source origin for configuration field values."""

    DEFAULT = "default"
    ENV = "env"
    OVERRIDES = "overrides"


@dataclass(frozen=True)
class FieldOrigin:
    """Where a configuration field value came from."""

    origin: Origin
    env_key: str | None = None  # e.g., "COMMITMENT_ASSERT_MODE"


SourceMap = dict[str, FieldOrigin]


# --- Ambient scope ---

_AMBIENT: contextvars.ContextVar[FrozenConfig | None] = contextvars.ContextVar(
    "commitment_ambient_config", default=None
)

_DOTENV_LOADED: bool = False


@contextmanager
def config_scope(
    cfg_or_overrides: Mapping[str, Any] | FrozenConfig | None = None,
    **overrides: object,
) -> Generator[FrozenConfig]:
    """Run a block with a specific configuration.

    The ambient value lives in a ``ContextVar``, so scopes are local to the
    current thread and asyncio task.

    Args:
        cfg_or_overrides: A ``FrozenConfig`` to use as-is, or a mapping of
            overrides to resolve.
        **overrides: Additional overrides, merged over a mapping argument.

    Yields:
        The configuration active inside the block.
    """
    if isinstance(cfg_or_overrides, FrozenConfig):
        cfg = cfg_or_overrides
    else:
        cfg = resolve_config(overrides={**(cfg_or_overrides or {}), **overrides})

    token = _AMBIENT.set(cfg)
    try:
        yield cfg
    finally:
        _AMBIENT.reset(token)


def current_config() -> FrozenConfig:
    """Return the ambient configuration, resolving one when no scope is active."""
    cfg = _AMBIENT.get()
    return cfg if cfg is not None else resolve_config()


def _load_dotenv_once() -> None:
    global _DOTENV_LOADED
    if _DOTENV_LOADED:
        return
    # Imported here so tests can patch dotenv.load_dotenv.
    from dotenv import load_dotenv

    load_dotenv()
    _DOTENV_LOADED = True


# --- Loading ---


_TRUE_STRINGS = frozenset({"1", "true", "yes", "on"})
_FALSE_STRINGS = frozenset({"0", "false", "no", "off"})


def _coerce_bool(v: str) -> bool | str:
    """Map common boolean spellings; anything else is left for the schema to reject."""
    s = v.strip().lower()
    if s in _TRUE_STRINGS:
        return True
    if s in _FALSE_STRINGS:
        return False
    return v


def load_env() -> dict[str, Any]:
    """Read known ``COMMITMENT_*`` fields from ``os.environ``.

    Unknown suffixes are ignored so unrelated variables sharing the prefix
    cannot break resolution.
    """
    config: dict[str, Any] = {}
    for key, value in os.environ.items():
        if not key.startswith(ENV_PREFIX):
            continue
        field_name = key[len(ENV_PREFIX) :].lower()
        info = Settings.model_fields.get(field_name)
        if info is None:
            log.debug("Ignoring unknown configuration variable %s", key)
            continue
        config[field_name] = _coerce_bool(value) if info.annotation is bool else value
    return config


# --- Public resolution API ---


@overload
def resolve_config(
    overrides: Mapping[str, Any] | None = ...,
    *,
    explain: Literal[True],
) -> tuple[FrozenConfig, SourceMap]: ...


@overload
def resolve_config(
    overrides: Mapping[str, Any] | None = ...,
    *,
    explain: Literal[False] = ...,
) -> FrozenConfig: ...


def resolve_config(
    overrides: Mapping[str, Any] | None = None,
    *,
    explain: bool = False,
) -> FrozenConfig | tuple[FrozenConfig, SourceMap]:
    """Resolve configuration from defaults, environment and overrides.

    Args:
        overrides: Programmatic overrides (highest precedence).
        explain: If True, also return the origin of every field.

    Returns:
        FrozenConfig, or ``(FrozenConfig, SourceMap)`` when ``explain`` is True.

    Raises:
        ConfigurationError: If a value fails validation or an override names
            an unknown field.
    """
    _load_dotenv_once()

    merged, sources = _resolve_layers(overrides=overrides or {}, env=load_env())

    try:
        settings = Settings.model_validate(merged)
    except ValidationError as e:
        err = e.errors()[0]
        field = ".".join(str(part) for part in err.get("loc", ())) or "<root>"
        hint = None
        if err.get("type") == "extra_forbidden":
            hint = f"Known fields: {', '.join(sorted(Settings.model_fields))}"
        elif field == "assert_mode":
            hint = f"Set {ENV_PREFIX}ASSERT_MODE to 'raise' or 'abort'."
        elif field == "log_assertions":
            hint = (
                f"Set {ENV_PREFIX}LOG_ASSERTIONS to true/false, 1/0, yes/no or on/off."
            )
        raise ConfigurationError(
            f"Configuration validation failed for {field}: {err.get('msg')}",
            hint=hint,
        ) from e

    frozen = FrozenConfig(**settings.model_dump())
    return (frozen, sources) if explain else frozen


def _resolve_layers(
    *,
    overrides: Mapping[str, Any],
    env: Mapping[str, Any],
) -> tuple[dict[str, Any], SourceMap]:
    """Merge layers last-wins while recording each field's origin."""
    out: dict[str, Any] = {}
    src: SourceMap = {}

    for k, v in _default_settings().items():
        out[k] = v
        src[k] = FieldOrigin(origin=Origin.DEFAULT)

    for k, v in env.items():
        out[k] = v
        src[k] = FieldOrigin(origin=Origin.ENV, env_key=f"{ENV_PREFIX}{k.upper()}")

    for k, v in overrides.items():
        out[k] = v
        src[k] = FieldOrigin(origin=Origin.OVERRIDES)

    return out, src


def audit_lines(cfg: FrozenConfig, sources: SourceMap) -> list[str]:
    """Render one ``field: value (origin)`` line per field."""
    lines = []
    for field in cfg.__dataclass_fields__:
        where = sources.get(field, FieldOrigin(origin=Origin.DEFAULT))
        label = f"env:{where.env_key}" if where.origin is Origin.ENV else where.origin.value
        lines.append(f"{field}: {getattr(cfg, field)!r} ({label})")
    return lines
