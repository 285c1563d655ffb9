r"""Product endpoints of an open job."""

from __future__ import annotations

__all__ = ["RENDER_MODES", "ProductsAPI"]

from typing import TYPE_CHECKING, Any

from phoenixsdk.api.base import BaseAPI, ResponseT_co, build_path

if TYPE_CHECKING:
    from phoenixsdk.core.config import RetryPolicy

RENDER_MODES = ("Artwork", "Colors", "Dielines")


class ProductsAPI(BaseAPI[ResponseT_co]):
    """Endpoints under ``/jobs/{project_id}/products``."""

    def _product_path(self, project_id: str, product_name: str, suffix: str = "") -> str:
        return (
            build_path(
                "/jobs/{project_id}/products/{product_name}",
                project_id=project_id,
                product_name=product_name,
            )
            + suffix
        )

    def get_products(
        self,
        project_id: str,
        *,
        thumb: bool | None = None,
        thumb_width: int | None = None,
        thumb_height: int | None = None,
        render_mode: str | None = None,
        retry_policy: RetryPolicy | None = None,
    ) -> ResponseT_co:
        r"""Retrieve the products of a job.

        Args:
            project_id: The job identifier.
            thumb: If ``True``, the server includes a thumbnail of each
                product.
            thumb_width: The thumbnail width in pixels.
            thumb_height: The thumbnail height in pixels.
            render_mode: The thumbnail render mode, one of
                ``Artwork``, ``Colors`` or ``Dielines``.
            retry_policy: Optional retry policy for busy servers.

        Returns:
            The response of the client.

        Raises:
            ValueError: If ``render_mode`` is not a valid render mode.
        """
        if render_mode is not None and render_mode not in RENDER_MODES:
            msg = f"render_mode must be one of {RENDER_MODES}, got {render_mode!r}"
            raise ValueError(msg)
        params = {
            "thumb": None if thumb is None else str(thumb).lower(),
            "thumb-width": thumb_width,
            "thumb-height": thumb_height,
            "render-mode": render_mode,
        }
        return self._request(
            "GET",
            build_path("/jobs/{project_id}/products", project_id=project_id),
            params=params,
            retry_policy=retry_policy,
        )

    def create_product(
        self,
        project_id: str,
        request: dict[str, Any],
        *,
        retry_policy: RetryPolicy | None = None,
    ) -> ResponseT_co:
        return self._request(
            "POST",
            build_path("/jobs/{project_id}/products", project_id=project_id),
            request,
            retry_policy=retry_policy,
        )

    def import_product_csv(
        self,
        project_id: str,
        request: dict[str, Any],
        *,
        retry_policy: RetryPolicy | None = None,
    ) -> ResponseT_co:
        """Import products from a CSV file already uploaded to the job."""
        return self._request(
            "POST",
            build_path("/jobs/{project_id}/products/import/csv", project_id=project_id),
            request,
            retry_policy=retry_policy,
        )

    def get_product(
        self, project_id: str, product_name: str, *, retry_policy: RetryPolicy | None = None
    ) -> ResponseT_co:
        return self._request(
            "GET", self._product_path(project_id, product_name), retry_policy=retry_policy
        )

    def delete_product(
        self, project_id: str, product_name: str, *, retry_policy: RetryPolicy | None = None
    ) -> ResponseT_co:
        return self._request(
            "DELETE", self._product_path(project_id, product_name), retry_policy=retry_policy
        )

    def snap_product(
        self, project_id: str, product_name: str, *, retry_policy: RetryPolicy | None = None
    ) -> ResponseT_co:
        return self._request(
            "POST",
            self._product_path(project_id, product_name, "/snap"),
            retry_policy=retry_policy,
        )

    def trace_product_image(
        self,
        project_id: str,
        product_name: str,
        request: dict[str, Any],
        *,
        retry_policy: RetryPolicy | None = None,
    ) -> ResponseT_co:
        """Generate a die shape by tracing the product artwork."""
        return self._request(
            "POST",
            self._product_path(project_id, product_name, "/image-tracing"),
            request,
            retry_policy=retry_policy,
        )

    def apply_product_mark(
        self,
        project_id: str,
        product_name: str,
        request: dict[str, Any],
        *,
        retry_policy: RetryPolicy | None = None,
    ) -> ResponseT_co:
        return self._request(
            "POST",
            self._product_path(project_id, product_name, "/mark/apply"),
            request,
            retry_policy=retry_policy,
        )
