r"""Retry package for calls rejected by a busy server.

Public API:
    - RetrySession: Bookkeeping of one retrying call
    - RetryStrategy: Strategy for calculating retry delays
    - RetryDecider: Classification of each attempt
    - RetryExecutor: Synchronous retry executor
    - AsyncRetryExecutor: Asynchronous retry executor
"""

from __future__ import annotations

__all__ = [
    "AsyncRetryExecutor",
    "AttemptOutcome",
    "RetryDecider",
    "RetryExecutor",
    "RetrySession",
    "RetryStrategy",
]

from phoenixsdk.retry.decider import AttemptOutcome, RetryDecider
from phoenixsdk.retry.executor import RetryExecutor
from phoenixsdk.retry.executor_async import AsyncRetryExecutor
from phoenixsdk.retry.session import RetrySession
from phoenixsdk.retry.strategy import RetryStrategy
