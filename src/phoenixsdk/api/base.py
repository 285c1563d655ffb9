r"""Base class and helpers shared by the endpoint groups.

Endpoint methods only build a method/path/payload triple and hand it to
the client request primitive. They return whatever the client returns:
an ``httpx.Response`` for ``PhoenixClient``, or an awaitable of one for
``AsyncPhoenixClient``.
"""

from __future__ import annotations

__all__ = ["BaseAPI", "Requester", "build_path"]

from string import Formatter
from typing import TYPE_CHECKING, Any, Generic, Protocol, TypeVar
from urllib.parse import quote

if TYPE_CHECKING:
    from phoenixsdk.core.config import RetryPolicy

ResponseT_co = TypeVar("ResponseT_co", covariant=True)

_FORMATTER = Formatter()


class Requester(Protocol[ResponseT_co]):
    """Interface of the request primitive consumed by the endpoint
    methods."""

    def request(
        self,
        method: str,
        path: str,
        data: Any = None,
        *,
        retry_policy: RetryPolicy | None = None,
        params: dict[str, Any] | None = None,
        files: dict[str, Any] | None = None,
    ) -> ResponseT_co: ...


def build_path(template: str, **values: Any) -> str:
    """Substitute the path parameters of an endpoint template.

    Each value is percent-encoded so identifiers containing ``/`` or
    spaces stay in a single path segment. Parameters whose name ends
    with ``_path`` are file paths and keep their ``/`` separators.

    Args:
        template: The path template, e.g. ``/jobs/{project_id}``.
        **values: The path parameter values.

    Returns:
        The path with the parameters substituted.

    Raises:
        KeyError: If a parameter of the template has no value.

    Example:
        ```pycon
        >>> from phoenixsdk.api.base import build_path
        >>> build_path("/jobs/{project_id}/layouts/{layout_index}", project_id="my job", layout_index=0)
        '/jobs/my%20job/layouts/0'
        >>> build_path("/jobs/{project_id}/output/{file_id}/{file_path}",
        ...     project_id="j", file_id="f", file_path="dir/out.pdf")
        '/jobs/j/output/f/dir/out.pdf'

        ```
    """
    encoded = {}
    for _, name, _, _ in _FORMATTER.parse(template):
        if name is None:
            continue
        safe = "/" if name.endswith("_path") else ""
        encoded[name] = quote(str(values[name]), safe=safe)
    return template.format(**encoded)


class BaseAPI(Generic[ResponseT_co]):
    """Base class of the endpoint groups.

    Args:
        client: The client providing the request primitive.
    """

    def __init__(self, client: Requester[ResponseT_co]) -> None:
        self._client = client

    @property
    def client(self) -> Requester[ResponseT_co]:
        return self._client

    def _request(
        self,
        method: str,
        path: str,
        data: Any = None,
        *,
        retry_policy: RetryPolicy | None = None,
        params: dict[str, Any] | None = None,
        files: dict[str, Any] | None = None,
    ) -> ResponseT_co:
        return self._client.request(
            method,
            path,
            data,
            retry_policy=retry_policy,
            params=params,
            files=files,
        )
