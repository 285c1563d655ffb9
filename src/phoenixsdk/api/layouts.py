r"""Layout endpoints of a job: layouts, their sides, plate, press and
sheet, component placement and step-and-repeat."""

from __future__ import annotations

__all__ = ["LayoutsAPI"]

from typing import TYPE_CHECKING, Any

from phoenixsdk.api.base import BaseAPI, ResponseT_co, build_path

if TYPE_CHECKING:
    from phoenixsdk.core.config import RetryPolicy

_LAYOUT = "/jobs/{project_id}/layouts/{layout_index}"


class LayoutsAPI(BaseAPI[ResponseT_co]):
    """Endpoints under ``/jobs/{project_id}/layouts``.

    Layouts are addressed by their zero-based index in the job.
    """

    def _layout_path(self, project_id: str, layout_index: int, suffix: str = "") -> str:
        return build_path(_LAYOUT, project_id=project_id, layout_index=layout_index) + suffix

    def get_layouts(
        self, project_id: str, *, retry_policy: RetryPolicy | None = None
    ) -> ResponseT_co:
        return self._request(
            "GET",
            build_path("/jobs/{project_id}/layouts", project_id=project_id),
            retry_policy=retry_policy,
        )

    def create_layout(
        self, project_id: str, *, retry_policy: RetryPolicy | None = None
    ) -> ResponseT_co:
        """Append an empty layout to the job."""
        return self._request(
            "POST",
            build_path("/jobs/{project_id}/layouts", project_id=project_id),
            retry_policy=retry_policy,
        )

    def get_layout(
        self, project_id: str, layout_index: int, *, retry_policy: RetryPolicy | None = None
    ) -> ResponseT_co:
        return self._request(
            "GET", self._layout_path(project_id, layout_index), retry_policy=retry_policy
        )

    def edit_layout(
        self,
        project_id: str,
        layout_index: int,
        request: dict[str, Any],
        *,
        retry_policy: RetryPolicy | None = None,
    ) -> ResponseT_co:
        return self._request(
            "PUT", self._layout_path(project_id, layout_index), request, retry_policy=retry_policy
        )

    def delete_layout(
        self, project_id: str, layout_index: int, *, retry_policy: RetryPolicy | None = None
    ) -> ResponseT_co:
        return self._request(
            "DELETE", self._layout_path(project_id, layout_index), retry_policy=retry_policy
        )

    # sides

    def get_layout_front(
        self, project_id: str, layout_index: int, *, retry_policy: RetryPolicy | None = None
    ) -> ResponseT_co:
        return self._request(
            "GET", self._layout_path(project_id, layout_index, "/front"), retry_policy=retry_policy
        )

    def edit_layout_front(
        self,
        project_id: str,
        layout_index: int,
        request: dict[str, Any],
        *,
        retry_policy: RetryPolicy | None = None,
    ) -> ResponseT_co:
        return self._request(
            "PATCH",
            self._layout_path(project_id, layout_index, "/front"),
            request,
            retry_policy=retry_policy,
        )

    def get_layout_back(
        self, project_id: str, layout_index: int, *, retry_policy: RetryPolicy | None = None
    ) -> ResponseT_co:
        return self._request(
            "GET", self._layout_path(project_id, layout_index, "/back"), retry_policy=retry_policy
        )

    def edit_layout_back(
        self,
        project_id: str,
        layout_index: int,
        request: dict[str, Any],
        *,
        retry_policy: RetryPolicy | None = None,
    ) -> ResponseT_co:
        return self._request(
            "PATCH",
            self._layout_path(project_id, layout_index, "/back"),
            request,
            retry_policy=retry_policy,
        )

    # placement

    def place_component(
        self,
        project_id: str,
        layout_index: int,
        request: dict[str, Any],
        *,
        retry_policy: RetryPolicy | None = None,
    ) -> ResponseT_co:
        """Place a product component on the layout
        (``PlaceComponentResource``)."""
        return self._request(
            "POST",
            self._layout_path(project_id, layout_index, "/place/component"),
            request,
            retry_policy=retry_policy,
        )

    def place_die_template(
        self,
        project_id: str,
        layout_index: int,
        request: dict[str, Any],
        *,
        retry_policy: RetryPolicy | None = None,
    ) -> ResponseT_co:
        return self._request(
            "POST",
            self._layout_path(project_id, layout_index, "/place/die-template"),
            request,
            retry_policy=retry_policy,
        )

    def generate_step_and_repeat(
        self,
        project_id: str,
        layout_index: int,
        request: dict[str, Any],
        *,
        retry_policy: RetryPolicy | None = None,
    ) -> ResponseT_co:
        return self._request(
            "POST",
            self._layout_path(project_id, layout_index, "/step-repeat"),
            request,
            retry_policy=retry_policy,
        )

    # plate, press and sheet

    def get_layout_plate(
        self, project_id: str, layout_index: int, *, retry_policy: RetryPolicy | None = None
    ) -> ResponseT_co:
        return self._request(
            "GET", self._layout_path(project_id, layout_index, "/plate"), retry_policy=retry_policy
        )

    def set_layout_plate(
        self,
        project_id: str,
        layout_index: int,
        request: dict[str, Any],
        *,
        retry_policy: RetryPolicy | None = None,
    ) -> ResponseT_co:
        return self._request(
            "POST",
            self._layout_path(project_id, layout_index, "/plate"),
            request,
            retry_policy=retry_policy,
        )

    def get_layout_press(
        self, project_id: str, layout_index: int, *, retry_policy: RetryPolicy | None = None
    ) -> ResponseT_co:
        return self._request(
            "GET", self._layout_path(project_id, layout_index, "/press"), retry_policy=retry_policy
        )

    def set_layout_press(
        self,
        project_id: str,
        layout_index: int,
        request: dict[str, Any],
        *,
        retry_policy: RetryPolicy | None = None,
    ) -> ResponseT_co:
        return self._request(
            "POST",
            self._layout_path(project_id, layout_index, "/press"),
            request,
            retry_policy=retry_policy,
        )

    def get_layout_sheet(
        self, project_id: str, layout_index: int, *, retry_policy: RetryPolicy | None = None
    ) -> ResponseT_co:
        return self._request(
            "GET", self._layout_path(project_id, layout_index, "/sheet"), retry_policy=retry_policy
        )

    def set_layout_sheet(
        self,
        project_id: str,
        layout_index: int,
        request: dict[str, Any],
        *,
        retry_policy: RetryPolicy | None = None,
    ) -> ResponseT_co:
        """Select the stock sheet of the layout."""
        return self._request(
            "POST",
            self._layout_path(project_id, layout_index, "/sheet"),
            request,
            retry_policy=retry_policy,
        )

    def edit_layout_sheet(
        self,
        project_id: str,
        layout_index: int,
        request: dict[str, Any],
        *,
        retry_policy: RetryPolicy | None = None,
    ) -> ResponseT_co:
        """Edit the custom sheet of the layout."""
        return self._request(
            "PUT",
            self._layout_path(project_id, layout_index, "/sheet"),
            request,
            retry_policy=retry_policy,
        )
