r"""Parameter validation utilities for the client configuration and
the retry policy."""

from __future__ import annotations

__all__ = ["validate_port", "validate_retry_policy", "validate_timeout_ms"]


def validate_timeout_ms(timeout_ms: float) -> None:
    """Validate the per-request timeout.

    Args:
        timeout_ms: Maximum milliseconds to wait for a server response.
            Must be > 0.

    Raises:
        ValueError: If ``timeout_ms`` is <= 0.

    Example:
        ```pycon
        >>> from phoenixsdk.core.validation import validate_timeout_ms
        >>> validate_timeout_ms(30000)
        >>> validate_timeout_ms(0)  # doctest: +SKIP
        Traceback (most recent call last):
        ...
        ValueError: timeout_ms must be > 0, got 0

        ```
    """
    if timeout_ms <= 0:
        msg = f"timeout_ms must be > 0, got {timeout_ms}"
        raise ValueError(msg)


def validate_port(port: int) -> None:
    """Validate a TCP port number.

    Args:
        port: The port number. Must be in ``[1, 65535]``.

    Raises:
        ValueError: If the port is out of range.
    """
    if not 0 < port < 65536:
        msg = f"port must be in [1, 65535], got {port}"
        raise ValueError(msg)


def validate_retry_policy(max_attempts: int | None, total_timeout_minutes: float) -> None:
    """Validate retry policy parameters.

    Args:
        max_attempts: Maximum number of retries after the initial attempt.
            ``None`` means unlimited. Must be >= 0 otherwise.
            A value of 0 means no retries (only the initial attempt).
        total_timeout_minutes: Total time budget in minutes. Must be > 0.

    Raises:
        ValueError: If ``max_attempts`` is negative or
            ``total_timeout_minutes`` is non-positive.

    Example:
        ```pycon
        >>> from phoenixsdk.core.validation import validate_retry_policy
        >>> validate_retry_policy(max_attempts=None, total_timeout_minutes=10)
        >>> validate_retry_policy(max_attempts=0, total_timeout_minutes=1)
        >>> validate_retry_policy(max_attempts=-1, total_timeout_minutes=1)  # doctest: +SKIP

        ```
    """
    if max_attempts is not None and max_attempts < 0:
        msg = f"max_attempts must be >= 0, got {max_attempts}"
        raise ValueError(msg)
    if total_timeout_minutes <= 0:
        msg = f"total_timeout_minutes must be > 0, got {total_timeout_minutes}"
        raise ValueError(msg)
