r"""HTTP response classification utilities.

This module converts non-2xx responses of the Phoenix server into the
``PhoenixError`` taxonomy.
"""

from __future__ import annotations

__all__ = ["classify_response", "extract_error_details", "raise_for_status"]

import logging
import re
from typing import TYPE_CHECKING, Any

from phoenixsdk.exceptions import (
    AlreadyExistsError,
    AuthenticationError,
    AuthorizationError,
    PhoenixError,
    RateLimitError,
    ResourceConflictError,
    ResourceNotFoundError,
    ServiceUnavailableError,
    UnclassifiedError,
    ValidationError,
)
from phoenixsdk.utils.retry_after import get_retry_after

if TYPE_CHECKING:
    import httpx

logger: logging.Logger = logging.getLogger(__name__)

_ALREADY_EXISTS_PATTERN = re.compile(r"already exists", re.IGNORECASE)
_IDENTIFIER_PATTERN = re.compile(r"ID:?\s+(\S+)")


def extract_error_details(response: httpx.Response) -> tuple[str, Any]:
    """Extract the error message and details of a response.

    The Phoenix server answers errors with a ``ResponseEntity`` body
    whose ``errors`` list holds ``{"text": ...}`` entries. The text of
    the first entry is used as the message. When the body is not JSON
    or has no errors, the reason phrase is used.

    Args:
        response: The HTTP response.

    Returns:
        A tuple ``(message, details)`` where ``details`` is the raw
        ``errors`` list, or ``None``.

    Example:
        ```pycon
        >>> import httpx
        >>> from phoenixsdk.utils.response import extract_error_details
        >>> response = httpx.Response(400, json={"errors": [{"text": "Bad width"}]})
        >>> extract_error_details(response)
        ('Bad width', [{'text': 'Bad width'}])
        >>> extract_error_details(httpx.Response(404))
        ('Not Found', None)

        ```
    """
    fallback = response.reason_phrase or f"HTTP {response.status_code}"
    try:
        body = response.json()
    except ValueError:
        return fallback, None

    errors = body.get("errors") if isinstance(body, dict) else None
    if not isinstance(errors, list) or not errors:
        return fallback, None
    primary = errors[0]
    text = primary.get("text") if isinstance(primary, dict) else None
    if not isinstance(text, str) or not text:
        return fallback, errors
    return text, errors


def classify_response(response: httpx.Response) -> PhoenixError:
    """Convert an error response into a ``PhoenixError``.

    Args:
        response: An HTTP response with a status >= 400.

    Returns:
        The matching ``PhoenixError`` subclass instance.

    Example:
        ```pycon
        >>> import httpx
        >>> from phoenixsdk.utils.response import classify_response
        >>> response = httpx.Response(
        ...     409, json={"errors": [{"text": "Project already exists with ID: job-1"}]}
        ... )
        >>> error = classify_response(response)
        >>> type(error).__name__, error.resource_id
        ('AlreadyExistsError', 'job-1')

        ```
    """
    status = response.status_code
    message, details = extract_error_details(response)
    common: dict[str, Any] = {"response": response, "details": details}
    logger.debug(f"Classifying response with status {status}: {message}")

    if status == 400:
        return ValidationError(message, **common)
    if status == 401:
        return AuthenticationError(message, **common)
    if status == 403:
        return AuthorizationError(message, **common)
    if status == 404:
        return ResourceNotFoundError(message, **common)
    if status == 409:
        if _ALREADY_EXISTS_PATTERN.search(message):
            match = _IDENTIFIER_PATTERN.search(message)
            resource_id = match.group(1) if match else "unknown"
            return AlreadyExistsError(resource_id, message, **common)
        return ResourceConflictError(message, **common)
    if status == 429:
        return RateLimitError(get_retry_after(response), **common)
    if status == 503:
        return ServiceUnavailableError(get_retry_after(response), **common)
    return UnclassifiedError(
        f"HTTP {status}: {message}",
        status_code=status,
        **common,
    )


def raise_for_status(response: httpx.Response) -> httpx.Response:
    """Raise the classified error of a response with a status >= 400.

    Args:
        response: The HTTP response.

    Returns:
        The response itself when its status is < 400.

    Raises:
        PhoenixError: The classified error for a status >= 400.
    """
    if response.status_code >= 400:
        raise classify_response(response)
    return response
