r"""Configuration and validation shared by the sync and async
components."""

from __future__ import annotations

__all__ = [
    "BASE_PATH",
    "DEFAULT_BASE_URL",
    "DEFAULT_PORT",
    "DEFAULT_TIMEOUT_MINUTES",
    "DEFAULT_TIMEOUT_MS",
    "ClientConfig",
    "EndpointCall",
    "HTTP_METHODS",
    "RetryPolicy",
    "validate_port",
    "validate_retry_policy",
    "validate_timeout_ms",
]

from phoenixsdk.core.call import HTTP_METHODS, EndpointCall
from phoenixsdk.core.config import (
    BASE_PATH,
    DEFAULT_BASE_URL,
    DEFAULT_PORT,
    DEFAULT_TIMEOUT_MINUTES,
    DEFAULT_TIMEOUT_MS,
    ClientConfig,
    RetryPolicy,
)
from phoenixsdk.core.validation import (
    validate_port,
    validate_retry_policy,
    validate_timeout_ms,
)
