r"""Unit tests for RetrySession."""

from __future__ import annotations

import pytest

from phoenixsdk.core.config import RetryPolicy
from phoenixsdk.retry import RetrySession
from tests.helpers import FakeClock


def test_retry_session_start(fake_clock: FakeClock) -> None:
    policy = RetryPolicy()
    session = RetrySession.start(policy)
    assert session.policy is policy
    assert session.start_time == fake_clock.now
    assert session.attempts_made == 0


def test_retry_session_elapsed(fake_clock: FakeClock) -> None:
    session = RetrySession.start(RetryPolicy())
    fake_clock.sleep(12.5)
    assert session.elapsed() == 12.5


@pytest.mark.parametrize(("attempts_made", "expected"), [(0, True), (2, True), (3, False)])
def test_retry_session_has_attempts_left(attempts_made: int, expected: bool) -> None:
    session = RetrySession(RetryPolicy(max_attempts=3), start_time=0.0, attempts_made=attempts_made)
    assert session.has_attempts_left() is expected


def test_retry_session_has_attempts_left_zero_attempts() -> None:
    session = RetrySession(RetryPolicy(max_attempts=0), start_time=0.0)
    assert not session.has_attempts_left()


def test_retry_session_has_attempts_left_unlimited() -> None:
    session = RetrySession(RetryPolicy(), start_time=0.0, attempts_made=10_000)
    assert session.has_attempts_left()


def test_retry_session_would_exceed(fake_clock: FakeClock) -> None:
    session = RetrySession.start(RetryPolicy(total_timeout_minutes=1))
    fake_clock.sleep(50)
    assert not session.would_exceed(9.9)
    assert session.would_exceed(10)
    assert session.would_exceed(11)


def test_retry_session_record_retry() -> None:
    session = RetrySession(RetryPolicy(), start_time=0.0)
    session.record_retry()
    session.record_retry()
    assert session.attempts_made == 2
