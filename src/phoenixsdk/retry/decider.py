r"""Retry decision logic for busy responses and errors.

The Phoenix server answers HTTP 503 when too many heavy operations are
in flight. This is the only condition that triggers a retry.
"""

from __future__ import annotations

__all__ = ["BUSY_STATUS_CODE", "AttemptOutcome", "RetryDecider"]

import logging
from enum import Enum
from typing import TYPE_CHECKING

from phoenixsdk.exceptions import ErrorKind, PhoenixError

if TYPE_CHECKING:
    import httpx

logger: logging.Logger = logging.getLogger(__name__)

BUSY_STATUS_CODE = 503


class AttemptOutcome(Enum):
    """The outcome of one attempt."""

    SUCCESS = "success"
    TRANSIENT_BUSY = "transient_busy"
    FATAL = "fatal"


class RetryDecider:
    """Classifies the outcome of each attempt.

    Example:
        ```pycon
        >>> import httpx
        >>> from phoenixsdk.retry import RetryDecider
        >>> decider = RetryDecider()
        >>> decider.classify_response(httpx.Response(503))
        <AttemptOutcome.TRANSIENT_BUSY: 'transient_busy'>
        >>> decider.classify_response(httpx.Response(400))
        <AttemptOutcome.SUCCESS: 'success'>

        ```
    """

    def classify_response(self, response: httpx.Response) -> AttemptOutcome:
        """Classify a response.

        Only a 503 is busy. Every other status, error statuses included,
        ends the retry loop and is left to the caller to interpret.

        Args:
            response: The HTTP response of the attempt.

        Returns:
            ``TRANSIENT_BUSY`` for a 503, ``SUCCESS`` otherwise.
        """
        if response.status_code == BUSY_STATUS_CODE:
            return AttemptOutcome.TRANSIENT_BUSY
        return AttemptOutcome.SUCCESS

    def classify_exception(self, exc: Exception) -> AttemptOutcome:
        """Classify an exception raised by an attempt.

        Args:
            exc: The exception raised by the attempt.

        Returns:
            ``TRANSIENT_BUSY`` if the exception is a service unavailable
            error, ``FATAL`` otherwise.
        """
        if isinstance(exc, PhoenixError) and exc.kind is ErrorKind.SERVICE_UNAVAILABLE:
            return AttemptOutcome.TRANSIENT_BUSY
        logger.debug(f"Attempt raised non-retryable {type(exc).__name__}: {exc}")
        return AttemptOutcome.FATAL
