r"""Asynchronous transport performing single HTTP exchanges with the
Phoenix server.

This is the ``httpx.AsyncClient`` counterpart of ``Transport``. A
single instance can serve many concurrent calls: no per-call state is
stored on the transport.
"""

from __future__ import annotations

__all__ = ["AsyncTransport"]

import logging
from typing import TYPE_CHECKING

import httpx

from phoenixsdk.core.config import ClientConfig
from phoenixsdk.exceptions import PhoenixConnectionError
from phoenixsdk.transport import build_headers, compose_base_url

if TYPE_CHECKING:
    from types import TracebackType
    from typing import Self

    from phoenixsdk.core.call import EndpointCall

logger: logging.Logger = logging.getLogger(__name__)


class AsyncTransport:
    r"""Asynchronous transport to a Phoenix server.

    Args:
        config: The connection configuration.
            If ``None``, a default ``ClientConfig`` is used.
        transport: Optional ``httpx`` async transport, for instance an
            ``httpx.MockTransport`` in tests.

    Example:
        ```pycon
        >>> import asyncio
        >>> from phoenixsdk.transport_async import AsyncTransport
        >>> async def main():
        ...     async with AsyncTransport() as transport:
        ...         return transport.base_url
        ...
        >>> asyncio.run(main())
        'http://localhost:8022/phoenix'

        ```
    """

    def __init__(
        self,
        config: ClientConfig | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._config: ClientConfig = config or ClientConfig()
        self._base_url = compose_base_url(self._config.base_url, self._config.port)
        self._client = httpx.AsyncClient(
            base_url=self._base_url,
            timeout=self._config.timeout,
            transport=transport,
        )

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(base_url={self._base_url!r})"

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
        return self._base_url

    @property
    def config(self) -> ClientConfig:
        return self._config

    @property
    def is_closed(self) -> bool:
        return self._client.is_closed

    async def aclose(self) -> None:
        """Close the underlying ``httpx.AsyncClient``."""
        await self._client.aclose()

    async def send(self, call: EndpointCall) -> httpx.Response:
        """Perform exactly one HTTP exchange.

        Args:
            call: The endpoint call to perform.

        Returns:
            The HTTP response, whatever its status code.

        Raises:
            PhoenixConnectionError: If no response was received
                (DNS, connection, network or timeout failure).
        """
        url = call.path.lstrip("/")
        logger.debug(f"{call.method} {self._base_url}/{url}")
        try:
            return await self._client.request(
                call.method,
                url,
                headers=build_headers(self._config, call),
                **call.to_request_kwargs(),
            )
        except httpx.RequestError as exc:
            logger.debug(f"{call.method} request to {call.path} failed: {type(exc).__name__}: {exc}")
            msg = f"{call.method} request to {call.path} failed: {exc}"
            raise PhoenixConnectionError(msg) from exc
