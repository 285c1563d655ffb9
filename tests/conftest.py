from __future__ import annotations

from typing import TYPE_CHECKING
from unittest.mock import AsyncMock, Mock, patch

import httpx
import pytest

from phoenixsdk.backoff import ExponentialBackoff
from phoenixsdk.retry import AsyncRetryExecutor, RetryExecutor, RetryStrategy
from tests.helpers import FakeClock

if TYPE_CHECKING:
    from collections.abc import Generator


@pytest.fixture
def mock_sleep() -> Generator[Mock, None, None]:
    """Patch time.sleep to make tests run faster."""
    with patch("time.sleep", return_value=None) as mock:
        yield mock


@pytest.fixture
def mock_asleep() -> Generator[Mock, None, None]:
    """Patch asyncio.sleep to make tests run faster."""
    with patch("asyncio.sleep", return_value=None) as mock:
        yield mock


@pytest.fixture
def fake_clock() -> Generator[FakeClock, None, None]:
    """Patch the retry session clock and both sleeps with a fake clock.

    Each sleep advances the clock by the requested number of seconds,
    so time budgets are exercised without waiting.
    """
    clock = FakeClock()
    with (
        patch("phoenixsdk.retry.session.time", Mock(monotonic=clock.monotonic)),
        patch("time.sleep", side_effect=clock.sleep),
        patch("asyncio.sleep", new=AsyncMock(side_effect=clock.sleep)),
    ):
        yield clock


@pytest.fixture
def executor() -> RetryExecutor:
    """Create a retry executor without jitter."""
    return RetryExecutor(strategy=RetryStrategy(ExponentialBackoff(max_jitter=0.0)))


@pytest.fixture
def async_executor() -> AsyncRetryExecutor:
    """Create an async retry executor without jitter."""
    return AsyncRetryExecutor(strategy=RetryStrategy(ExponentialBackoff(max_jitter=0.0)))


@pytest.fixture
def mock_response() -> httpx.Response:
    """Create a mock httpx.Response for testing."""
    return Mock(spec=httpx.Response, status_code=200)


@pytest.fixture
def mock_attempt_func(mock_response: httpx.Response) -> Mock:
    """Create a mock attempt function for testing."""
    return Mock(return_value=mock_response)


@pytest.fixture
def mock_async_attempt_func(mock_response: httpx.Response) -> AsyncMock:
    """Create a mock async attempt function for testing."""
    return AsyncMock(return_value=mock_response)
