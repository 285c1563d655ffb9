r"""Synchronous client exposing the request primitive used by every
endpoint method.

The client combines a ``Transport`` and a ``RetryExecutor``. A call
without a retry policy performs exactly one exchange. A call with a
retry policy is retried while the server answers 503.
"""

from __future__ import annotations

__all__ = ["PhoenixClient"]

import logging
from typing import TYPE_CHECKING, Any

from phoenixsdk.core.call import EndpointCall
from phoenixsdk.retry.executor import RetryExecutor
from phoenixsdk.transport import Transport
from phoenixsdk.utils.response import raise_for_status

if TYPE_CHECKING:
    from types import TracebackType
    from typing import Self

    import httpx

    from phoenixsdk.core.config import ClientConfig, RetryPolicy

logger: logging.Logger = logging.getLogger(__name__)


class PhoenixClient:
    r"""Synchronous client for the Phoenix REST API.

    Two usage patterns are supported:

    .. code-block:: python

        from phoenixsdk import PhoenixClient
        from phoenixsdk.core.config import ClientConfig, RetryPolicy

        with PhoenixClient(ClientConfig(base_url="phoenix-host")) as client:
            response = client.request("GET", "/jobs")
            response = client.request(
                "POST",
                "/jobs/job-1/plan",
                {"profiles": ["Default"]},
                retry_policy=RetryPolicy(total_timeout_minutes=10),
            )

    or, when the transport is shared or mocked:

    .. code-block:: python

        import httpx
        from phoenixsdk import PhoenixClient
        from phoenixsdk.transport import Transport

        transport = Transport(transport=httpx.MockTransport(handler))
        with PhoenixClient(transport=transport) as client:
            response = client.request("GET", "/jobs")

    Args:
        config: The connection configuration. Ignored if ``transport``
            is provided. If both are ``None``, a default ``ClientConfig``
            is used.
        transport: Optional transport to use for the exchanges.
        executor: Optional retry executor.
            Defaults to ``RetryExecutor()``.
    """

    def __init__(
        self,
        config: ClientConfig | None = None,
        *,
        transport: Transport | None = None,
        executor: RetryExecutor | None = None,
    ) -> None:
        self._transport: Transport = transport or Transport(config)
        self._executor: RetryExecutor = executor or RetryExecutor()

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(base_url={self.base_url!r})"

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self.close()

    @property
    def base_url(self) -> str:
        return self._transport.base_url

    @property
    def config(self) -> ClientConfig:
        return self._transport.config

    def close(self) -> None:
        self._transport.close()

    def request(
        self,
        method: str,
        path: str,
        data: Any = None,
        *,
        retry_policy: RetryPolicy | None = None,
        params: dict[str, Any] | None = None,
        files: dict[str, Any] | None = None,
    ) -> httpx.Response:
        r"""Send a request to the Phoenix API.

        Args:
            method: HTTP method (GET, POST, PUT, PATCH, DELETE).
            path: The path relative to the API root (e.g. ``/jobs``).
            data: Optional payload, sent as JSON for a ``dict`` or
                ``list`` and as raw content for ``bytes`` or ``str``.
            retry_policy: Optional retry policy. If provided, the call is
                retried while the server answers 503.
            params: Optional query parameters.
            files: Optional multipart files.

        Returns:
            The HTTP response.

        Raises:
            PhoenixError: The classified error of a response with a
                status >= 400 when ``config.raise_for_status`` is true,
                ``PhoenixConnectionError`` if no response was received,
                or ``RetryTimeoutError`` if the retry budget ran out.
        """
        call = EndpointCall(method, path, data=data, params=params, files=files)
        if retry_policy is None:
            response = self._transport.send(call)
        else:
            response = self._executor.execute(lambda: self._transport.send(call), retry_policy)
        logger.debug(f"{call.method} {call.path} -> {response.status_code}")
        if self.config.raise_for_status:
            raise_for_status(response)
        return response
