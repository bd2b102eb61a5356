"""Fail-fast assertions: passing checks return the value, failing ones stop."""

from __future__ import annotations

import logging

import pytest

from commitment import (
    Committed,
    ConfigurationError,
    Failed,
    OutcomeAssertionError,
    Settled,
    assert_committed,
    assert_err,
    assert_ok,
    assert_settled,
    config_scope,
)

pytestmark = pytest.mark.unit

SETTLED_OK = Settled(1)
COMMITTED_OK = Committed(1)
SETTLED_ERR = Failed(Settled("e"))
COMMITTED_ERR = Failed(Committed("e"))

CASES = [
    (assert_ok, [SETTLED_OK, COMMITTED_OK], [SETTLED_ERR, COMMITTED_ERR]),
    (assert_err, [SETTLED_ERR, COMMITTED_ERR], [SETTLED_OK, COMMITTED_OK]),
    (assert_settled, [SETTLED_OK, SETTLED_ERR], [COMMITTED_OK, COMMITTED_ERR]),
    (assert_committed, [COMMITTED_OK, COMMITTED_ERR], [SETTLED_OK, SETTLED_ERR]),
]


@pytest.mark.parametrize(
    ("check", "value"),
    [(check, v) for check, passing, _ in CASES for v in passing],
)
def test_passing_check_returns_value(check, value) -> None:
    assert check(value) is value


@pytest.mark.parametrize(
    ("check", "value"),
    [(check, v) for check, _, failing in CASES for v in failing],
)
def test_failing_check_raises(check, value) -> None:
    with pytest.raises(OutcomeAssertionError) as exc:
        check(value)
    assert exc.value.actual is value
    assert exc.value.hint


def test_failure_is_not_catchable_as_exception() -> None:
    """Broad ``except Exception`` handlers must not recover from a failed check."""
    with pytest.raises(OutcomeAssertionError):
        try:
            assert_ok(SETTLED_ERR)
        except Exception:  # noqa: BLE001
            pytest.fail("OutcomeAssertionError was caught as Exception")


@pytest.mark.parametrize(
    ("env_key", "env_value"),
    [
        ("COMMITMENT_ASSERT_MODE", "halt"),
        ("COMMITMENT_LOG_ASSERTIONS", "enabled"),
    ],
)
def test_failure_stays_fatal_with_invalid_configuration(
    monkeypatch, caplog, env_key, env_value
) -> None:
    """A configuration error must not downgrade the failure to an Exception."""
    monkeypatch.setenv(env_key, env_value)

    with (
        caplog.at_level(logging.WARNING, logger="commitment"),
        pytest.raises(OutcomeAssertionError) as exc,
    ):
        try:
            assert_ok(SETTLED_ERR)
        except Exception as e:  # noqa: BLE001
            pytest.fail(f"failed check was caught as Exception: {e!r}")

    assert isinstance(exc.value.__cause__, ConfigurationError)
    assert exc.value.actual is SETTLED_ERR
    assert any("default assertion settings" in r.message for r in caplog.records)


def test_error_carries_expected_shape() -> None:
    with pytest.raises(OutcomeAssertionError) as exc:
        assert_committed(SETTLED_OK)
    assert exc.value.expected == "committed"
    assert "Settled(value=1)" in str(exc.value)


def test_failed_check_is_logged(caplog) -> None:
    with caplog.at_level(logging.ERROR, logger="commitment"):
        with pytest.raises(OutcomeAssertionError):
            assert_err(COMMITTED_OK)
    assert any("Outcome assertion failed" in r.message for r in caplog.records)


def test_logging_can_be_disabled(caplog) -> None:
    with (
        config_scope(log_assertions=False),
        caplog.at_level(logging.ERROR, logger="commitment"),
        pytest.raises(OutcomeAssertionError),
    ):
        assert_err(COMMITTED_OK)
    assert not caplog.records


class _Aborted(Exception):
    pass


def test_abort_mode_aborts_the_process(monkeypatch) -> None:
    calls = []

    def fake_abort():
        calls.append(True)
        raise _Aborted

    monkeypatch.setattr("os.abort", fake_abort)
    with config_scope(assert_mode="abort"), pytest.raises(_Aborted):
        assert_settled(COMMITTED_ERR)
    assert calls == [True]


def test_abort_mode_skips_error_logging_and_raising(monkeypatch, caplog) -> None:
    def fake_abort():
        raise _Aborted

    monkeypatch.setattr("os.abort", fake_abort)
    with (
        config_scope(assert_mode="abort", log_assertions=False),
        caplog.at_level(logging.DEBUG, logger="commitment"),
        pytest.raises(_Aborted),
    ):
        assert_committed(SETTLED_OK)

    assert [r.levelno for r in caplog.records] == [logging.CRITICAL]
    assert caplog.records[0].message.startswith("Aborting: expected committed outcome")


def test_abort_mode_from_environment(monkeypatch) -> None:
    monkeypatch.setenv("COMMITMENT_ASSERT_MODE", "ABORT")

    def fake_abort():
        raise _Aborted

    monkeypatch.setattr("os.abort", fake_abort)
    with pytest.raises(_Aborted):
        assert_ok(SETTLED_ERR)


def test_abort_mode_is_not_used_for_passing_checks(monkeypatch) -> None:
    monkeypatch.setattr("os.abort", lambda: pytest.fail("aborted"))
    with config_scope(assert_mode="abort"):
        assert assert_ok(SETTLED_OK) is SETTLED_OK
