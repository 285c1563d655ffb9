r"""Implement the aggregate object exposing every endpoint group."""

from __future__ import annotations

__all__ = ["PhoenixAPI"]

from phoenixsdk.api.base import ResponseT_co
from phoenixsdk.api.engines import EnginesAPI
from phoenixsdk.api.exports import ExportsAPI
from phoenixsdk.api.jobs import JobsAPI
from phoenixsdk.api.layouts import LayoutsAPI
from phoenixsdk.api.libraries import LibrariesAPI
from phoenixsdk.api.parts import PartsAPI
from phoenixsdk.api.presets import PresetsAPI
from phoenixsdk.api.products import ProductsAPI
from phoenixsdk.api.projects import ProjectsAPI


class PhoenixAPI(
    JobsAPI[ResponseT_co],
    ExportsAPI[ResponseT_co],
    LayoutsAPI[ResponseT_co],
    EnginesAPI[ResponseT_co],
    ProductsAPI[ResponseT_co],
    ProjectsAPI[ResponseT_co],
    PartsAPI[ResponseT_co],
    LibrariesAPI[ResponseT_co],
    PresetsAPI[ResponseT_co],
):
    r"""All the Phoenix endpoints over one client.

    The object works over ``PhoenixClient`` and ``AsyncPhoenixClient``
    alike: each method returns what ``client.request`` returns, so the
    methods of an API built on the async client must be awaited.

    Args:
        client: The client providing the request primitive.

    Example:
        ```pycon
        >>> from phoenixsdk import PhoenixAPI, PhoenixClient
        >>> from phoenixsdk.core.config import ClientConfig, RetryPolicy
        >>> with PhoenixClient(ClientConfig(base_url="phoenix-host")) as client:  # doctest: +SKIP
        ...     api = PhoenixAPI(client)
        ...     api.create_job({"id": "job-1"})
        ...     api.run_plan("job-1", {"profiles": ["Default"]}, retry_policy=RetryPolicy())
        ...

        ```
    """

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(client={self._client!r})"
