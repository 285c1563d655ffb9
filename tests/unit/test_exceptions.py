r"""Unit tests for the error taxonomy."""

from __future__ import annotations

import httpx
import pytest

from phoenixsdk.exceptions import (
    AlreadyExistsError,
    AuthenticationError,
    AuthorizationError,
    ErrorKind,
    PhoenixConnectionError,
    PhoenixError,
    RateLimitError,
    ResourceConflictError,
    ResourceNotFoundError,
    RetryTimeoutError,
    ServiceUnavailableError,
    UnclassifiedError,
    ValidationError,
)

#################################
#     Tests for PhoenixError     #
#################################


def test_phoenix_error_defaults() -> None:
    error = PhoenixError("boom")
    assert error.message == "boom"
    assert str(error) == "boom"
    assert error.kind is ErrorKind.UNCLASSIFIED
    assert error.status_code is None
    assert error.details is None
    assert error.response is None


def test_phoenix_error_with_all_fields() -> None:
    response = httpx.Response(418)
    error = PhoenixError(
        "teapot",
        kind=ErrorKind.VALIDATION,
        status_code=418,
        details=[{"text": "teapot"}],
        response=response,
    )
    assert error.kind is ErrorKind.VALIDATION
    assert error.status_code == 418
    assert error.details == [{"text": "teapot"}]
    assert error.response is response


def test_phoenix_error_repr() -> None:
    assert repr(ResourceNotFoundError("missing")) == (
        "ResourceNotFoundError(message='missing', kind=not_found, status_code=404)"
    )


def test_phoenix_error_can_be_caught_as_exception() -> None:
    with pytest.raises(PhoenixError, match=r"missing"):
        raise ResourceNotFoundError("missing")


##################################
#     Tests for the subclasses    #
##################################


@pytest.mark.parametrize(
    ("error", "kind", "status_code"),
    [
        (PhoenixConnectionError("down"), ErrorKind.CONNECTION, None),
        (ValidationError("bad"), ErrorKind.VALIDATION, 400),
        (AuthenticationError(), ErrorKind.AUTHENTICATION, 401),
        (AuthorizationError(), ErrorKind.AUTHORIZATION, 403),
        (ResourceNotFoundError("missing"), ErrorKind.NOT_FOUND, 404),
        (ResourceConflictError("conflict"), ErrorKind.CONFLICT, 409),
        (AlreadyExistsError("job-1"), ErrorKind.ALREADY_EXISTS, 409),
        (RateLimitError(), ErrorKind.RATE_LIMIT, 429),
        (ServiceUnavailableError(), ErrorKind.SERVICE_UNAVAILABLE, 503),
        (RetryTimeoutError(10), ErrorKind.TIMEOUT, None),
        (UnclassifiedError("HTTP 500: oops", status_code=500), ErrorKind.UNCLASSIFIED, 500),
    ],
)
def test_error_kind_and_status_code(
    error: PhoenixError, kind: ErrorKind, status_code: int | None
) -> None:
    assert isinstance(error, PhoenixError)
    assert error.kind is kind
    assert error.status_code == status_code


def test_each_kind_has_one_error_class() -> None:
    classes = [
        PhoenixConnectionError,
        ValidationError,
        AuthenticationError,
        AuthorizationError,
        ResourceNotFoundError,
        ResourceConflictError,
        AlreadyExistsError,
        RateLimitError,
        ServiceUnavailableError,
        RetryTimeoutError,
        UnclassifiedError,
    ]
    assert {cls.default_kind for cls in classes} == set(ErrorKind)


def test_authentication_error_default_message() -> None:
    assert AuthenticationError().message == "Authentication failed"


def test_authorization_error_default_message() -> None:
    assert AuthorizationError().message == "Access denied"


def test_already_exists_error() -> None:
    error = AlreadyExistsError("job-1")
    assert isinstance(error, ResourceConflictError)
    assert error.resource_id == "job-1"
    assert error.message == "Project already exists with ID: job-1"


def test_already_exists_error_custom_message() -> None:
    error = AlreadyExistsError("X", "Project already exists with ID X")
    assert error.resource_id == "X"
    assert error.message == "Project already exists with ID X"


def test_rate_limit_error_with_retry_after() -> None:
    error = RateLimitError(retry_after=7)
    assert error.retry_after == 7
    assert error.message == "Rate limit exceeded. Retry after 7 seconds."


def test_rate_limit_error_without_retry_after() -> None:
    error = RateLimitError()
    assert error.retry_after is None
    assert error.message == "Rate limit exceeded"


def test_service_unavailable_error_with_retry_after() -> None:
    error = ServiceUnavailableError(retry_after=2)
    assert error.retry_after == 2
    assert error.message == "Service unavailable. Retry after 2 seconds."


def test_service_unavailable_error_without_retry_after() -> None:
    assert ServiceUnavailableError().message == "Service unavailable"


def test_retry_timeout_error() -> None:
    error = RetryTimeoutError(1.5)
    assert error.timeout_minutes == 1.5
    assert error.message == "Request timeout exceeded: 1.5 minutes"


def test_error_kind_match_statement() -> None:
    def describe(error: PhoenixError) -> str:
        match error.kind:
            case ErrorKind.ALREADY_EXISTS:
                return "exists"
            case ErrorKind.SERVICE_UNAVAILABLE:
                return "busy"
            case _:
                return "other"

    assert describe(AlreadyExistsError("job-1")) == "exists"
    assert describe(ServiceUnavailableError()) == "busy"
    assert describe(ValidationError("bad")) == "other"
