r"""Retry strategy for calculating the wait between busy attempts."""

from __future__ import annotations

__all__ = ["RetryStrategy"]

from typing import TYPE_CHECKING

from phoenixsdk.backoff.exponential import ExponentialBackoff
from phoenixsdk.utils.sleep import calculate_sleep_time

if TYPE_CHECKING:
    import httpx

    from phoenixsdk.backoff.base import BaseBackoffStrategy


class RetryStrategy:
    """Strategy for calculating retry delays.

    The server ``Retry-After`` hint is preferred when present and
    positive, and the backoff strategy is used otherwise.

    Args:
        backoff_strategy: Backoff strategy instance.
            Defaults to ``ExponentialBackoff()``.

    Attributes:
        backoff_strategy: Backoff strategy instance.
    """

    def __init__(self, backoff_strategy: BaseBackoffStrategy | None = None) -> None:
        self.backoff_strategy: BaseBackoffStrategy = (
            backoff_strategy if backoff_strategy is not None else ExponentialBackoff()
        )

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(backoff_strategy={self.backoff_strategy!r})"

    def calculate_delay(
        self,
        attempt: int,
        response: httpx.Response | None = None,
    ) -> float:
        """Calculate delay before next retry.

        Args:
            attempt: The number of retries already made (0-indexed).
            response: The busy HTTP response, or ``None`` when the busy
                signal was a raised error.

        Returns:
            Sleep time in seconds.
        """
        return calculate_sleep_time(
            attempt=attempt,
            response=response,
            backoff_strategy=self.backoff_strategy,
        )
