r"""Backoff strategies for the delays between busy retries."""

from __future__ import annotations

__all__ = ["BaseBackoffStrategy", "ExponentialBackoff"]

from phoenixsdk.backoff.base import BaseBackoffStrategy
from phoenixsdk.backoff.exponential import ExponentialBackoff
