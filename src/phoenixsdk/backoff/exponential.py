r"""Exponential backoff strategy with bounded jitter."""

from __future__ import annotations

__all__ = [
    "DEFAULT_BASE_DELAY",
    "DEFAULT_MAX_DELAY",
    "DEFAULT_MAX_JITTER",
    "ExponentialBackoff",
]

import random

from phoenixsdk.backoff.base import BaseBackoffStrategy

DEFAULT_BASE_DELAY = 2.0
DEFAULT_MAX_DELAY = 30.0
DEFAULT_MAX_JITTER = 1.0

# 2 ** 32 is far above any cap, and keeps the float conversion finite
_MAX_EXPONENT = 32


class ExponentialBackoff(BaseBackoffStrategy):
    """Exponential backoff strategy.

    Calculates delay as:
    ``min(max_delay, base_delay * 2 ** attempt + uniform(0, max_jitter))``.

    The jitter is an absolute number of seconds, so consecutive delays
    never decrease as long as ``max_jitter <= base_delay``.

    Args:
        base_delay: The delay before the first retry, without jitter.
        max_delay: The cap applied after the jitter is added.
        max_jitter: Upper bound of the random jitter in seconds.
            Set to 0 to disable jitter.

    Example:
        ```pycon
        >>> from phoenixsdk.backoff import ExponentialBackoff
        >>> backoff = ExponentialBackoff(max_jitter=0.0)
        >>> backoff.calculate(0)
        2.0
        >>> backoff.calculate(1)
        4.0
        >>> backoff.calculate(10)  # Would be 2048.0, but capped
        30.0

        ```
    """

    def __init__(
        self,
        base_delay: float = DEFAULT_BASE_DELAY,
        max_delay: float = DEFAULT_MAX_DELAY,
        max_jitter: float = DEFAULT_MAX_JITTER,
    ) -> None:
        if base_delay < 0:
            msg = f"base_delay must be non-negative, got {base_delay}"
            raise ValueError(msg)
        if max_delay <= 0:
            msg = f"max_delay must be positive, got {max_delay}"
            raise ValueError(msg)
        if max_jitter < 0:
            msg = f"max_jitter must be non-negative, got {max_jitter}"
            raise ValueError(msg)

        self.base_delay = base_delay
        self.max_delay = max_delay
        self.max_jitter = max_jitter

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__qualname__}(base_delay={self.base_delay}, "
            f"max_delay={self.max_delay}, max_jitter={self.max_jitter})"
        )

    def calculate(self, attempt: int) -> float:
        """Calculate exponential backoff delay.

        Args:
            attempt: The number of retries already made (0-indexed).

        Returns:
            The calculated delay in seconds, capped at ``max_delay``.
        """
        delay = self.base_delay * (2 ** min(attempt, _MAX_EXPONENT))
        if self.max_jitter > 0:
            delay += random.uniform(0, self.max_jitter)  # noqa: S311
        return min(delay, self.max_delay)
