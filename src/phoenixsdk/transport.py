r"""Synchronous transport performing single HTTP exchanges with the
Phoenix server.

The transport owns one ``httpx.Client`` configured from a
``ClientConfig``. It never interprets the status code of a response:
every response is returned to the caller, and only the absence of a
response is reported as an error.
"""

from __future__ import annotations

__all__ = ["Transport", "build_headers", "compose_base_url"]

import logging
from typing import TYPE_CHECKING

import httpx

from phoenixsdk.core.config import BASE_PATH, ClientConfig
from phoenixsdk.exceptions import PhoenixConnectionError

if TYPE_CHECKING:
    from types import TracebackType
    from typing import Self

    from phoenixsdk.core.call import EndpointCall

logger: logging.Logger = logging.getLogger(__name__)


def compose_base_url(base_url: str, port: int) -> str:
    """Compose the root URL of the Phoenix API.

    Args:
        base_url: Host of the server, optionally with a scheme.
            ``http://`` is assumed when no scheme is given.
        port: Port of the server.

    Returns:
        The URL ``scheme://host:port/phoenix``.

    Example:
        ```pycon
        >>> from phoenixsdk.transport import compose_base_url
        >>> compose_base_url("myhost", 8022)
        'http://myhost:8022/phoenix'
        >>> compose_base_url("https://myhost/", 443)
        'https://myhost:443/phoenix'

        ```
    """
    address = base_url.strip().rstrip("/")
    if "://" not in address:
        address = f"http://{address}"
    return f"{address}:{port}{BASE_PATH}"


def build_headers(config: ClientConfig, call: EndpointCall) -> httpx.Headers:
    """Build the headers of one call.

    The JSON content type is dropped for multipart calls so ``httpx``
    can set the multipart boundary.

    Args:
        config: The client configuration.
        call: The endpoint call.

    Returns:
        The request headers.
    """
    headers = config.merged_headers()
    if call.is_multipart and "Content-Type" in headers:
        del headers["Content-Type"]
    return headers


class Transport:
    r"""Synchronous transport to a Phoenix server.

    Args:
        config: The connection configuration.
            If ``None``, a default ``ClientConfig`` is used.
        transport: Optional ``httpx`` transport, for instance an
            ``httpx.MockTransport`` in tests.

    Example:
        ```pycon
        >>> from phoenixsdk.core.config import ClientConfig
        >>> from phoenixsdk.transport import Transport
        >>> with Transport(ClientConfig(base_url="myhost")) as transport:
        ...     transport.base_url
        ...
        'http://myhost:8022/phoenix'

        ```
    """

    def __init__(
        self,
        config: ClientConfig | None = None,
        *,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._config: ClientConfig = config or ClientConfig()
        self._base_url = compose_base_url(self._config.base_url, self._config.port)
        self._client = httpx.Client(
            base_url=self._base_url,
            timeout=self._config.timeout,
            transport=transport,
        )

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(base_url={self._base_url!r})"

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
        return self._base_url

    @property
    def config(self) -> ClientConfig:
        return self._config

    @property
    def is_closed(self) -> bool:
        return self._client.is_closed

    def close(self) -> None:
        """Close the underlying ``httpx.Client``."""
        self._client.close()

    def send(self, call: EndpointCall) -> httpx.Response:
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
            return self._client.request(
                call.method,
                url,
                headers=build_headers(self._config, call),
                **call.to_request_kwargs(),
            )
        except httpx.RequestError as exc:
            logger.debug(f"{call.method} request to {call.path} failed: {type(exc).__name__}: {exc}")
            msg = f"{call.method} request to {call.path} failed: {exc}"
            raise PhoenixConnectionError(msg) from exc
