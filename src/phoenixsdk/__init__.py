r"""phoenixsdk - Client for the Phoenix imposition server REST API.

This package exposes every endpoint of the Phoenix REST API as a method
of a ``PhoenixAPI`` object. Long-running operations accept a
``RetryPolicy``: while the server answers ``503 Service Unavailable``,
the call is retried after the delay given by the ``Retry-After`` header
or an exponential backoff, until it succeeds or the retry budget runs
out.

Key Features:
    - One method per endpoint, with URL-quoted path parameters
    - Synchronous and asynchronous clients built on httpx
    - Retry of busy (503) answers honoring ``Retry-After``
    - Bounded retries by attempt count and total wall-clock time
    - Classified errors with a closed ``ErrorKind`` enumeration

Example:
    ```pycon
    >>> from phoenixsdk import create_phoenix_api
    >>> from phoenixsdk.core.config import ClientConfig, RetryPolicy
    >>> api = create_phoenix_api(ClientConfig(base_url="phoenix-host"))  # doctest: +SKIP
    >>> api.create_job({"id": "job-1"})  # doctest: +SKIP
    >>> api.export_pdf(
    ...     "job-1", {"path": "out.pdf"}, retry_policy=RetryPolicy(total_timeout_minutes=5)
    ... )  # doctest: +SKIP

    ```
"""

from __future__ import annotations

__all__ = [
    "AsyncPhoenixClient",
    "ClientConfig",
    "ErrorKind",
    "PhoenixAPI",
    "PhoenixClient",
    "PhoenixError",
    "RetryPolicy",
    "__version__",
    "create_async_phoenix_api",
    "create_phoenix_api",
]

from importlib.metadata import PackageNotFoundError, version

from phoenixsdk.api import PhoenixAPI, create_async_phoenix_api, create_phoenix_api
from phoenixsdk.client import PhoenixClient
from phoenixsdk.client_async import AsyncPhoenixClient
from phoenixsdk.core.config import ClientConfig, RetryPolicy
from phoenixsdk.exceptions import ErrorKind, PhoenixError

try:
    __version__ = version(__name__)
except PackageNotFoundError:  # pragma: no cover
    # Package is not installed, fallback if needed
    __version__ = "0.0.0"
