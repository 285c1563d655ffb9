r"""Abstract base class for backoff strategies."""

from __future__ import annotations

__all__ = ["BaseBackoffStrategy"]

from abc import ABC, abstractmethod


class BaseBackoffStrategy(ABC):
    """Abstract base class for backoff strategies.

    A backoff strategy determines how long to wait before retrying a
    busy request based on the number of retries already made.
    """

    @abstractmethod
    def calculate(self, attempt: int) -> float:
        """Calculate the backoff delay for a given retry attempt.

        Args:
            attempt: The number of retries already made (0-indexed).
                attempt=0 is the wait before the first retry.

        Returns:
            The delay in seconds before the next attempt.
        """
