r"""Retry-After header parsing utilities.

The Phoenix server sends ``Retry-After`` as a number of seconds on
busy (503) and rate limited (429) responses.
"""

from __future__ import annotations

__all__ = ["get_retry_after", "parse_retry_after"]

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import httpx

logger: logging.Logger = logging.getLogger(__name__)


def parse_retry_after(retry_after_header: str | None) -> int | None:
    """Parse the value of a Retry-After header.

    Only a non-negative integer number of seconds is accepted. Anything
    else, including HTTP-dates and decimal values, returns ``None`` so
    the caller can fall back to its own backoff.

    Args:
        retry_after_header: The value of the Retry-After header, or
            ``None`` if the header is not present.

    Returns:
        The number of seconds to wait, or ``None`` if the header is
        absent or unparsable.

    Example:
        ```pycon
        >>> from phoenixsdk.utils import parse_retry_after
        >>> parse_retry_after("120")
        120
        >>> parse_retry_after(" 5 ")
        5
        >>> parse_retry_after("0")
        0
        >>> parse_retry_after(None) is None
        True
        >>> parse_retry_after("-1") is None
        True
        >>> parse_retry_after("invalid") is None
        True

        ```
    """
    if retry_after_header is None:
        return None
    value = retry_after_header.strip()
    if not (value.isascii() and value.isdigit()):
        logger.debug(f"Failed to parse Retry-After header: {retry_after_header!r}")
        return None
    return int(value)


def get_retry_after(response: httpx.Response) -> int | None:
    """Return the parsed Retry-After header of a response, if any.

    Args:
        response: The HTTP response.

    Returns:
        The number of seconds to wait, or ``None``.
    """
    return parse_retry_after(response.headers.get("Retry-After"))
