r"""Configuration dataclasses and defaults for the Phoenix client.

This module provides the connection configuration used to build a
transport, and the per-call retry policy consumed by the retry
executors.
"""

from __future__ import annotations

__all__ = [
    "BASE_PATH",
    "DEFAULT_BASE_URL",
    "DEFAULT_HEADERS",
    "DEFAULT_PORT",
    "DEFAULT_TIMEOUT_MINUTES",
    "DEFAULT_TIMEOUT_MS",
    "ClientConfig",
    "RetryPolicy",
]

from dataclasses import dataclass, field, replace
from typing import Any

import httpx

from phoenixsdk.core.validation import (
    validate_port,
    validate_retry_policy,
    validate_timeout_ms,
)

# Host of the Phoenix server when none is configured
DEFAULT_BASE_URL = "localhost"

# Port the Phoenix REST service listens on out of the box
DEFAULT_PORT = 8022

# Fixed root prefixed on every request path
BASE_PATH = "/phoenix"

# Default timeout in milliseconds for a single HTTP exchange
DEFAULT_TIMEOUT_MS = 30000

# Default total time budget of a retrying call
DEFAULT_TIMEOUT_MINUTES = 10.0

DEFAULT_HEADERS: dict[str, str] = {"Content-Type": "application/json"}


@dataclass
class ClientConfig:
    """Connection configuration for ``Transport`` and ``PhoenixClient``.

    Args:
        base_url: Host of the Phoenix server, optionally with a scheme.
            ``http://`` is assumed when no scheme is given.
        port: Port of the Phoenix server.
        timeout_ms: Timeout in milliseconds of a single HTTP exchange.
            Must be > 0.
        headers: Extra headers merged over the default
            ``Content-Type: application/json`` header.
        raise_for_status: If ``True``, responses with a status >= 400 are
            converted to a ``PhoenixError`` and raised by the client.
            If ``False``, they are returned as-is.

    Example:
        ```pycon
        >>> from phoenixsdk.core.config import ClientConfig
        >>> config = ClientConfig()
        >>> config.port
        8022
        >>> config = config.merge(base_url="https://phoenix-host")
        >>> config.base_url
        'https://phoenix-host'

        ```
    """

    base_url: str = DEFAULT_BASE_URL
    port: int = DEFAULT_PORT
    timeout_ms: float = DEFAULT_TIMEOUT_MS
    headers: dict[str, str] = field(default_factory=dict)
    raise_for_status: bool = True

    def __post_init__(self) -> None:
        validate_port(self.port)
        validate_timeout_ms(self.timeout_ms)

    @property
    def timeout(self) -> float:
        """The per-request timeout in seconds."""
        return self.timeout_ms / 1000

    def merged_headers(self) -> httpx.Headers:
        """Return the default headers with the extra headers applied.

        Header names are matched case-insensitively, so an extra
        ``content-type`` replaces the default ``Content-Type``.
        """
        headers = httpx.Headers(DEFAULT_HEADERS)
        headers.update(self.headers)
        return headers

    def merge(self, **overrides: Any) -> ClientConfig:
        """Create a new config with the specified parameters overridden.

        Only non-None override values are applied.

        Args:
            **overrides: Keyword arguments for parameters to override.

        Returns:
            A new ``ClientConfig`` instance with overrides applied.
        """
        filtered_overrides = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **filtered_overrides)


@dataclass(frozen=True)
class RetryPolicy:
    """Retry policy of one call.

    The policy only drives retries of calls rejected with HTTP 503
    (server busy). Every other failure is raised on the first attempt.

    Args:
        max_attempts: Maximum number of retries after the initial
            attempt. ``None`` means unlimited, in which case only the
            time budget stops the retries.
        total_timeout_minutes: Total time budget in minutes. A retry is
            never started when its wait would reach this budget.

    Example:
        ```pycon
        >>> from phoenixsdk.core.config import RetryPolicy
        >>> policy = RetryPolicy(total_timeout_minutes=1)
        >>> policy.total_timeout
        60.0
        >>> policy.max_attempts is None
        True

        ```
    """

    max_attempts: int | None = None
    total_timeout_minutes: float = DEFAULT_TIMEOUT_MINUTES

    def __post_init__(self) -> None:
        validate_retry_policy(
            max_attempts=self.max_attempts,
            total_timeout_minutes=self.total_timeout_minutes,
        )

    @property
    def total_timeout(self) -> float:
        """The total time budget in seconds."""
        return float(self.total_timeout_minutes * 60)
