r"""Asynchronous client exposing the request primitive used by every
endpoint method.

This is the asynchronous counterpart of ``PhoenixClient``. Many calls
may be in flight at once over the same client.
"""

from __future__ import annotations

__all__ = ["AsyncPhoenixClient"]

import logging
from typing import TYPE_CHECKING, Any

from phoenixsdk.core.call import EndpointCall
from phoenixsdk.retry.executor_async import AsyncRetryExecutor
from phoenixsdk.transport_async import AsyncTransport
from phoenixsdk.utils.response import raise_for_status

if TYPE_CHECKING:
    from types import TracebackType
    from typing import Self

    import httpx

    from phoenixsdk.core.config import ClientConfig, RetryPolicy

logger: logging.Logger = logging.getLogger(__name__)


class AsyncPhoenixClient:
    r"""Asynchronous client for the Phoenix REST API.

    Args:
        config: The connection configuration. Ignored if ``transport``
            is provided. If both are ``None``, a default ``ClientConfig``
            is used.
        transport: Optional async transport to use for the exchanges.
        executor: Optional retry executor.
            Defaults to ``AsyncRetryExecutor()``.

    Example:
        ```pycon
        >>> import asyncio
        >>> from phoenixsdk import AsyncPhoenixClient
        >>> from phoenixsdk.core.config import RetryPolicy
        >>> async def main():
        ...     async with AsyncPhoenixClient() as client:
        ...         return await client.request(
        ...             "POST", "/jobs", {"id": "job-1"}, retry_policy=RetryPolicy()
        ...         )
        ...
        >>> asyncio.run(main())  # doctest: +SKIP

        ```
    """

    def __init__(
        self,
        config: ClientConfig | None = None,
        *,
        transport: AsyncTransport | None = None,
        executor: AsyncRetryExecutor | None = None,
    ) -> None:
        self._transport: AsyncTransport = transport or AsyncTransport(config)
        self._executor: AsyncRetryExecutor = executor or AsyncRetryExecutor()

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(base_url={self.base_url!r})"

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    @property
    def base_url(self) -> str:
        return self._transport.base_url

    @property
    def config(self) -> ClientConfig:
        return self._transport.config

    async def aclose(self) -> None:
        await self._transport.aclose()

    async def request(
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

        See ``PhoenixClient.request`` for the arguments.

        Returns:
            The HTTP response.

        Raises:
            PhoenixError: See ``PhoenixClient.request``.
        """
        call = EndpointCall(method, path, data=data, params=params, files=files)
        if retry_policy is None:
            response = await self._transport.send(call)
        else:
            response = await self._executor.execute(
                lambda: self._transport.send(call), retry_policy
            )
        logger.debug(f"{call.method} {call.path} -> {response.status_code}")
        if self.config.raise_for_status:
            raise_for_status(response)
        return response
