r"""Implement the factories building a ``PhoenixAPI`` from a
configuration."""

from __future__ import annotations

__all__ = ["create_async_phoenix_api", "create_phoenix_api"]

import logging
from typing import TYPE_CHECKING, Any

from phoenixsdk.api.phoenix import PhoenixAPI
from phoenixsdk.client import PhoenixClient
from phoenixsdk.client_async import AsyncPhoenixClient
from phoenixsdk.core.config import ClientConfig

if TYPE_CHECKING:
    from collections.abc import Awaitable

    import httpx

logger: logging.Logger = logging.getLogger(__name__)


def create_phoenix_api(
    config: ClientConfig | None = None, **overrides: Any
) -> PhoenixAPI[httpx.Response]:
    r"""Create an API object over a new synchronous client.

    Each call creates an independent client. Close it with
    ``api.client.close()`` when done.

    Args:
        config: The connection configuration. If ``None``, a default
            ``ClientConfig`` is used.
        **overrides: Fields of ``ClientConfig`` overriding ``config``.
            ``None`` values are ignored.

    Returns:
        The API object.

    Example:
        ```pycon
        >>> from phoenixsdk import create_phoenix_api
        >>> from phoenixsdk.core.config import ClientConfig
        >>> api = create_phoenix_api(ClientConfig(base_url="phoenix-host", port=8022))
        >>> api.client.base_url
        'http://phoenix-host:8022/phoenix'
        >>> api.client.close()
        >>> api = create_phoenix_api(base_url="phoenix-host", port=9000)
        >>> api.client.base_url
        'http://phoenix-host:9000/phoenix'
        >>> api.client.close()

        ```
    """
    client = PhoenixClient((config or ClientConfig()).merge(**overrides))
    logger.debug(f"Created Phoenix API for {client.base_url}")
    return PhoenixAPI(client)


def create_async_phoenix_api(
    config: ClientConfig | None = None, **overrides: Any
) -> PhoenixAPI[Awaitable[httpx.Response]]:
    r"""Create an API object over a new asynchronous client.

    The methods of the returned object must be awaited. Close the
    client with ``await api.client.aclose()`` when done.

    Args:
        config: The connection configuration. If ``None``, a default
            ``ClientConfig`` is used.
        **overrides: Fields of ``ClientConfig`` overriding ``config``.
            ``None`` values are ignored.

    Returns:
        The API object.
    """
    client = AsyncPhoenixClient((config or ClientConfig()).merge(**overrides))
    logger.debug(f"Created async Phoenix API for {client.base_url}")
    return PhoenixAPI(client)
