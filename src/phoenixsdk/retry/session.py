r"""Bookkeeping of one retrying call."""

from __future__ import annotations

__all__ = ["RetrySession"]

import time
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from phoenixsdk.core.config import RetryPolicy


@dataclass
class RetrySession:
    """Attempt counter and clock of one retrying call.

    A session is created when a retrying call starts and discarded when
    it ends. Sessions are never shared between calls.

    Attributes:
        policy: The retry policy of the call.
        start_time: The ``time.monotonic()`` value when the call started.
        attempts_made: The number of retries already made.
    """

    policy: RetryPolicy
    start_time: float
    attempts_made: int = 0

    @classmethod
    def start(cls, policy: RetryPolicy) -> RetrySession:
        """Start a new session with the clock set to now."""
        return cls(policy=policy, start_time=time.monotonic())

    def elapsed(self) -> float:
        """Return the seconds elapsed since the session started."""
        return time.monotonic() - self.start_time

    def has_attempts_left(self) -> bool:
        """Indicate if another retry is allowed by ``max_attempts``."""
        max_attempts = self.policy.max_attempts
        return max_attempts is None or self.attempts_made < max_attempts

    def would_exceed(self, wait: float) -> bool:
        """Indicate if waiting ``wait`` seconds reaches the time budget.

        Args:
            wait: The wait in seconds before the next attempt.
        """
        return self.elapsed() + wait >= self.policy.total_timeout

    def record_retry(self) -> None:
        self.attempts_made += 1
