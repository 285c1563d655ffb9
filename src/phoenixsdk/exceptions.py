r"""Define the exceptions raised by the Phoenix client.

Every error surfaced to callers is a ``PhoenixError``. Each concrete
subclass carries a distinct ``ErrorKind`` so callers can branch with a
``match`` statement on ``error.kind`` instead of a chain of
``isinstance`` checks.

Example:
    ```pycon
    >>> from phoenixsdk.exceptions import ErrorKind, ResourceNotFoundError
    >>> error = ResourceNotFoundError("Job not found: job-1")
    >>> error.kind
    <ErrorKind.NOT_FOUND: 'not_found'>
    >>> error.status_code
    404

    ```
"""

from __future__ import annotations

__all__ = [
    "AlreadyExistsError",
    "AuthenticationError",
    "AuthorizationError",
    "ErrorKind",
    "PhoenixConnectionError",
    "PhoenixError",
    "RateLimitError",
    "ResourceConflictError",
    "ResourceNotFoundError",
    "RetryTimeoutError",
    "ServiceUnavailableError",
    "UnclassifiedError",
    "ValidationError",
]

from enum import Enum
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    import httpx


class ErrorKind(str, Enum):
    """Enumerate the kinds of errors raised by the client."""

    CONNECTION = "connection"
    VALIDATION = "validation"
    AUTHENTICATION = "authentication"
    AUTHORIZATION = "authorization"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    ALREADY_EXISTS = "already_exists"
    RATE_LIMIT = "rate_limit"
    SERVICE_UNAVAILABLE = "service_unavailable"
    TIMEOUT = "timeout"
    UNCLASSIFIED = "unclassified"


class PhoenixError(Exception):
    """Base class for all the errors raised by the client.

    Args:
        message: The human readable error message.
        kind: The error kind.
        status_code: The HTTP status code, if a response was received.
        details: Optional structured details sent by the server
            (usually the ``errors`` list of a ``ResponseEntity``).
        response: The HTTP response that caused the error, if any.
    """

    default_kind: ErrorKind = ErrorKind.UNCLASSIFIED

    def __init__(
        self,
        message: str,
        *,
        kind: ErrorKind | None = None,
        status_code: int | None = None,
        details: Any = None,
        response: httpx.Response | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.kind = kind if kind is not None else self.default_kind
        self.status_code = status_code
        self.details = details
        self.response = response

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__qualname__}(message={self.message!r}, "
            f"kind={self.kind.value}, status_code={self.status_code})"
        )


class PhoenixConnectionError(PhoenixError):
    """Raised when no response was received from the server."""

    default_kind = ErrorKind.CONNECTION


class ValidationError(PhoenixError):
    """Raised when the server rejects a request payload (HTTP 400)."""

    default_kind = ErrorKind.VALIDATION

    def __init__(self, message: str, **kwargs: Any) -> None:
        kwargs.setdefault("status_code", 400)
        super().__init__(message, **kwargs)


class AuthenticationError(PhoenixError):
    """Raised on HTTP 401."""

    default_kind = ErrorKind.AUTHENTICATION

    def __init__(self, message: str = "Authentication failed", **kwargs: Any) -> None:
        kwargs.setdefault("status_code", 401)
        super().__init__(message, **kwargs)


class AuthorizationError(PhoenixError):
    """Raised on HTTP 403."""

    default_kind = ErrorKind.AUTHORIZATION

    def __init__(self, message: str = "Access denied", **kwargs: Any) -> None:
        kwargs.setdefault("status_code", 403)
        super().__init__(message, **kwargs)


class ResourceNotFoundError(PhoenixError):
    """Raised on HTTP 404."""

    default_kind = ErrorKind.NOT_FOUND

    def __init__(self, message: str, **kwargs: Any) -> None:
        kwargs.setdefault("status_code", 404)
        super().__init__(message, **kwargs)


class ResourceConflictError(PhoenixError):
    """Raised on HTTP 409."""

    default_kind = ErrorKind.CONFLICT

    def __init__(self, message: str, **kwargs: Any) -> None:
        kwargs.setdefault("status_code", 409)
        super().__init__(message, **kwargs)


class AlreadyExistsError(ResourceConflictError):
    """Raised on HTTP 409 when the identifier is already taken.

    Args:
        resource_id: The duplicated identifier reported by the server.
        message: Optional message. Defaults to the server wording.
        **kwargs: See ``PhoenixError``.
    """

    default_kind = ErrorKind.ALREADY_EXISTS

    def __init__(self, resource_id: str, message: str | None = None, **kwargs: Any) -> None:
        super().__init__(message or f"Project already exists with ID: {resource_id}", **kwargs)
        self.resource_id = resource_id


class RateLimitError(PhoenixError):
    """Raised on HTTP 429.

    Args:
        retry_after: The ``Retry-After`` hint in seconds, if any.
        **kwargs: See ``PhoenixError``.
    """

    default_kind = ErrorKind.RATE_LIMIT

    def __init__(self, retry_after: int | None = None, **kwargs: Any) -> None:
        kwargs.setdefault("status_code", 429)
        message = (
            f"Rate limit exceeded. Retry after {retry_after} seconds."
            if retry_after is not None
            else "Rate limit exceeded"
        )
        super().__init__(message, **kwargs)
        self.retry_after = retry_after


class ServiceUnavailableError(PhoenixError):
    """Raised on HTTP 503 when the server is busy.

    Args:
        retry_after: The ``Retry-After`` hint in seconds, if any.
        **kwargs: See ``PhoenixError``.
    """

    default_kind = ErrorKind.SERVICE_UNAVAILABLE

    def __init__(self, retry_after: int | None = None, **kwargs: Any) -> None:
        kwargs.setdefault("status_code", 503)
        message = (
            f"Service unavailable. Retry after {retry_after} seconds."
            if retry_after is not None
            else "Service unavailable"
        )
        super().__init__(message, **kwargs)
        self.retry_after = retry_after


class RetryTimeoutError(PhoenixError):
    """Raised when another wait would exceed the retry time budget.

    Args:
        timeout_minutes: The configured total timeout in minutes.
        **kwargs: See ``PhoenixError``.
    """

    default_kind = ErrorKind.TIMEOUT

    def __init__(self, timeout_minutes: float, **kwargs: Any) -> None:
        super().__init__(f"Request timeout exceeded: {timeout_minutes} minutes", **kwargs)
        self.timeout_minutes = timeout_minutes


class UnclassifiedError(PhoenixError):
    """Raised for any other non-2xx status code."""

    default_kind = ErrorKind.UNCLASSIFIED
