r"""Utility functions for response classification and retry timing."""

from __future__ import annotations

__all__ = [
    "calculate_sleep_time",
    "classify_response",
    "extract_error_details",
    "get_retry_after",
    "parse_retry_after",
    "raise_for_status",
]

from phoenixsdk.utils.response import classify_response, extract_error_details, raise_for_status
from phoenixsdk.utils.retry_after import get_retry_after, parse_retry_after
from phoenixsdk.utils.sleep import calculate_sleep_time
