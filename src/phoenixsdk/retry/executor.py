r"""Synchronous retry executor for busy server responses.

This module provides the RetryExecutor class that wraps a single
transport call and retries it while the Phoenix server answers 503.
"""

from __future__ import annotations

__all__ = ["RetryExecutor"]

import logging
import time
from typing import TYPE_CHECKING

from phoenixsdk.retry.decider import AttemptOutcome, RetryDecider
from phoenixsdk.retry.executor_core import commit_to_wait, compute_next_wait
from phoenixsdk.retry.session import RetrySession
from phoenixsdk.retry.strategy import RetryStrategy

if TYPE_CHECKING:
    from collections.abc import Callable

    import httpx

    from phoenixsdk.core.config import RetryPolicy

logger: logging.Logger = logging.getLogger(__name__)


class RetryExecutor:
    """Executes a call with automatic retry on busy responses.

    The executor drives the following state machine for each call:

    - Attempting: the attempt function is called.
    - A response other than 503 ends the call and is returned, whatever
      its status.
    - A 503 response, or a raised ``ServiceUnavailableError``, is busy:
      if ``max_attempts`` retries were already made the call ends with
      the 503 response (or the error is re-raised); otherwise the next
      wait is computed, the time budget is checked, and the executor
      sleeps before attempting again.
    - Any other raised error ends the call and is propagated unchanged.

    Args:
        strategy: The strategy computing the waits.
            Defaults to ``RetryStrategy()``.
        decider: The attempt classifier. Defaults to ``RetryDecider()``.

    Example:
        ```pycon
        >>> import httpx
        >>> from phoenixsdk.core.config import RetryPolicy
        >>> from phoenixsdk.retry import RetryExecutor
        >>> executor = RetryExecutor()
        >>> response = executor.execute(
        ...     lambda: httpx.Response(201), RetryPolicy(total_timeout_minutes=1)
        ... )
        >>> response.status_code
        201

        ```
    """

    def __init__(
        self,
        strategy: RetryStrategy | None = None,
        decider: RetryDecider | None = None,
    ) -> None:
        self.strategy = strategy if strategy is not None else RetryStrategy()
        self.decider = decider if decider is not None else RetryDecider()

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(strategy={self.strategy!r})"

    def execute(
        self,
        attempt_func: Callable[[], httpx.Response],
        policy: RetryPolicy,
    ) -> httpx.Response:
        """Execute the attempt function with automatic retry logic.

        Args:
            attempt_func: Zero-argument function performing one HTTP
                exchange.
            policy: The retry policy of the call.

        Returns:
            The first response that is not a 503, or the last 503
            response when ``max_attempts`` retries were made.

        Raises:
            RetryTimeoutError: If the next wait would reach the time
                budget of the policy.
            Exception: Any error raised by ``attempt_func`` other than a
                busy error, or a busy error once the retries are
                exhausted.
        """
        session = RetrySession.start(policy)
        while True:
            logger.debug(f"Attempt {session.attempts_made + 1} (policy={policy})")
            try:
                response = attempt_func()
            except Exception as exc:
                if self.decider.classify_exception(exc) is AttemptOutcome.FATAL:
                    raise
                if not session.has_attempts_left():
                    logger.debug(f"No retry left after {session.attempts_made} retries")
                    raise
                wait = compute_next_wait(session, self.strategy)
                commit_to_wait(session, wait)
            else:
                if self.decider.classify_response(response) is AttemptOutcome.SUCCESS:
                    return response
                if not session.has_attempts_left():
                    logger.debug(f"No retry left after {session.attempts_made} retries")
                    return response
                wait = compute_next_wait(session, self.strategy, response)
                commit_to_wait(session, wait)
            time.sleep(wait)
