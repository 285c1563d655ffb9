r"""Shared core logic for retry executors.

This module provides the two phases shared by the synchronous and
asynchronous executors once an attempt was classified as busy:
computing the next wait, then committing to it or failing.
"""

from __future__ import annotations

__all__ = ["commit_to_wait", "compute_next_wait"]

import logging
from typing import TYPE_CHECKING

from phoenixsdk.exceptions import RetryTimeoutError

if TYPE_CHECKING:
    import httpx

    from phoenixsdk.retry.session import RetrySession
    from phoenixsdk.retry.strategy import RetryStrategy

logger: logging.Logger = logging.getLogger(__name__)


def compute_next_wait(
    session: RetrySession,
    strategy: RetryStrategy,
    response: httpx.Response | None = None,
) -> float:
    """Compute the wait before the next attempt.

    Args:
        session: The retry session of the call.
        strategy: The retry strategy.
        response: The busy response, or ``None`` when the busy signal
            was a raised error. Raised errors always use the backoff.

    Returns:
        The wait in seconds.
    """
    return strategy.calculate_delay(session.attempts_made, response)


def commit_to_wait(session: RetrySession, wait: float) -> None:
    """Commit to waiting before the next attempt, or fail.

    The time budget is checked before sleeping so a call never sleeps
    past its budget.

    Args:
        session: The retry session of the call.
        wait: The wait in seconds computed for the next attempt.

    Raises:
        RetryTimeoutError: If ``elapsed + wait`` reaches the total
            timeout of the policy.
    """
    elapsed = session.elapsed()
    if session.would_exceed(wait):
        logger.debug(
            f"Retry budget exhausted after {session.attempts_made} retries: "
            f"elapsed={elapsed:.2f}s + wait={wait:.2f}s >= "
            f"{session.policy.total_timeout:.2f}s"
        )
        raise RetryTimeoutError(session.policy.total_timeout_minutes)
    session.record_retry()
    logger.debug(
        f"Server busy, waiting {wait:.2f}s before retry {session.attempts_made} "
        f"(elapsed={elapsed:.2f}s)"
    )
