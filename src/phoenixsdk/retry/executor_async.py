r"""Asynchronous retry executor for busy server responses.

This module provides the AsyncRetryExecutor class, the asynchronous
counterpart of ``RetryExecutor``. Waits use ``asyncio.sleep`` so other
calls keep running while a busy call is waiting.
"""

from __future__ import annotations

__all__ = ["AsyncRetryExecutor"]

import asyncio
import logging
from typing import TYPE_CHECKING

from phoenixsdk.retry.decider import AttemptOutcome, RetryDecider
from phoenixsdk.retry.executor_core import commit_to_wait, compute_next_wait
from phoenixsdk.retry.session import RetrySession
from phoenixsdk.retry.strategy import RetryStrategy

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    import httpx

    from phoenixsdk.core.config import RetryPolicy

logger: logging.Logger = logging.getLogger(__name__)


class AsyncRetryExecutor:
    """Executes an async call with automatic retry on busy responses.

    See ``RetryExecutor`` for the state machine.

    Args:
        strategy: The strategy computing the waits.
            Defaults to ``RetryStrategy()``.
        decider: The attempt classifier. Defaults to ``RetryDecider()``.

    Example:
        ```pycon
        >>> import asyncio
        >>> import httpx
        >>> from phoenixsdk.core.config import RetryPolicy
        >>> from phoenixsdk.retry import AsyncRetryExecutor
        >>> async def attempt():
        ...     return httpx.Response(200)
        ...
        >>> executor = AsyncRetryExecutor()
        >>> response = asyncio.run(executor.execute(attempt, RetryPolicy()))
        >>> response.status_code
        200

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

    async def execute(
        self,
        attempt_func: Callable[[], Awaitable[httpx.Response]],
        policy: RetryPolicy,
    ) -> httpx.Response:
        """Execute the async attempt function with automatic retry
        logic.

        Args:
            attempt_func: Zero-argument coroutine function performing
                one HTTP exchange.
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
                response = await attempt_func()
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
            await asyncio.sleep(wait)
