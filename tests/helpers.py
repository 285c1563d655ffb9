r"""Shared test helpers.

This module contains the fake clock used to exercise time budgets and
small builders of ``httpx.MockTransport`` servers.
"""

from __future__ import annotations

__all__ = [
    "FakeClock",
    "RecordingServer",
    "busy_response",
    "error_response",
    "make_async_client",
    "make_client",
]

from typing import TYPE_CHECKING, Any

import httpx

from phoenixsdk.backoff import ExponentialBackoff
from phoenixsdk.client import PhoenixClient
from phoenixsdk.client_async import AsyncPhoenixClient
from phoenixsdk.core.config import ClientConfig
from phoenixsdk.retry import AsyncRetryExecutor, RetryExecutor, RetryStrategy
from phoenixsdk.transport import Transport
from phoenixsdk.transport_async import AsyncTransport

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable


class FakeClock:
    """Monotonic clock advanced only by the patched sleeps.

    Attributes:
        now: The current clock value in seconds.
        sleeps: The durations of all the sleeps, in call order.
    """

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start
        self.sleeps: list[float] = []

    def monotonic(self) -> float:
        return self.now

    def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.now += seconds


def busy_response(retry_after: str | None = None) -> httpx.Response:
    headers = {"Retry-After": retry_after} if retry_after is not None else {}
    return httpx.Response(503, headers=headers)


def error_response(status_code: int, text: str, **kwargs: Any) -> httpx.Response:
    """Create a response with a Phoenix ``ResponseEntity`` error body."""
    return httpx.Response(
        status_code, json={"success": False, "errors": [{"text": text}]}, **kwargs
    )


class RecordingServer:
    """Handler for ``httpx.MockTransport`` returning scripted responses.

    Each request gets a fresh copy of its scripted response. Once the
    script is exhausted, the last response is repeated.

    Args:
        responses: The responses to return, or a factory called with
            each request.
    """

    def __init__(
        self,
        responses: Iterable[httpx.Response] | Callable[[httpx.Request], httpx.Response],
    ) -> None:
        self._factory = responses if callable(responses) else None
        self._responses = [] if callable(responses) else list(responses)
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self._factory is not None:
            return self._factory(request)
        scripted = self._responses[min(len(self.requests), len(self._responses)) - 1]
        return httpx.Response(
            scripted.status_code, headers=scripted.headers, content=scripted.content
        )

    @property
    def call_count(self) -> int:
        return len(self.requests)


def _no_jitter_strategy() -> RetryStrategy:
    return RetryStrategy(ExponentialBackoff(max_jitter=0.0))


def make_client(
    handler: Callable[[httpx.Request], httpx.Response],
    config: ClientConfig | None = None,
) -> PhoenixClient:
    transport = Transport(config, transport=httpx.MockTransport(handler))
    return PhoenixClient(transport=transport, executor=RetryExecutor(_no_jitter_strategy()))


def make_async_client(
    handler: Callable[[httpx.Request], httpx.Response],
    config: ClientConfig | None = None,
) -> AsyncPhoenixClient:
    transport = AsyncTransport(config, transport=httpx.MockTransport(handler))
    return AsyncPhoenixClient(
        transport=transport, executor=AsyncRetryExecutor(_no_jitter_strategy())
    )
