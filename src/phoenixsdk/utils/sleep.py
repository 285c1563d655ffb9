r"""Sleep time calculation for busy retries."""

from __future__ import annotations

__all__ = ["calculate_sleep_time"]

import logging
from typing import TYPE_CHECKING

from phoenixsdk.backoff.exponential import ExponentialBackoff
from phoenixsdk.utils.retry_after import get_retry_after

if TYPE_CHECKING:
    import httpx

    from phoenixsdk.backoff.base import BaseBackoffStrategy

logger: logging.Logger = logging.getLogger(__name__)


def calculate_sleep_time(
    attempt: int,
    response: httpx.Response | None = None,
    backoff_strategy: BaseBackoffStrategy | None = None,
) -> float:
    """Calculate the wait before the next attempt of a busy call.

    The sleep time is calculated as follows:
    1. If ``response`` carries a ``Retry-After`` header with a positive
       integer, that many seconds are used.
    2. Otherwise ``backoff_strategy.calculate(attempt)`` is used. A
       ``Retry-After`` of zero or an unparsable value lands here too.

    Args:
        attempt: The number of retries already made (0-indexed).
        response: The busy HTTP response, if the busy signal came as a
            response. ``None`` when it came as a raised error.
        backoff_strategy: The fallback backoff strategy.
            Defaults to ``ExponentialBackoff()``.

    Returns:
        The sleep time in seconds.

    Example:
        ```pycon
        >>> import httpx
        >>> from phoenixsdk.backoff import ExponentialBackoff
        >>> from phoenixsdk.utils.sleep import calculate_sleep_time
        >>> response = httpx.Response(503, headers={"Retry-After": "5"})
        >>> calculate_sleep_time(attempt=3, response=response)
        5.0
        >>> calculate_sleep_time(attempt=1, backoff_strategy=ExponentialBackoff(max_jitter=0))
        4.0

        ```
    """
    retry_after = get_retry_after(response) if response is not None else None
    if retry_after is not None and retry_after > 0:
        logger.debug(f"Using Retry-After header value: {retry_after}s")
        return float(retry_after)

    if backoff_strategy is None:
        backoff_strategy = ExponentialBackoff()
    sleep_time = backoff_strategy.calculate(attempt)
    logger.debug(f"Using backoff delay for attempt {attempt}: {sleep_time:.2f}s")
    return sleep_time
