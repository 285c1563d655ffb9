r"""Project endpoints: projects, repeat templates, scripts and the
typed product creation endpoints."""

from __future__ import annotations

__all__ = ["PRODUCT_TYPES", "ProjectsAPI"]

from typing import TYPE_CHECKING, Any

from phoenixsdk.api.base import BaseAPI, ResponseT_co, build_path

if TYPE_CHECKING:
    from phoenixsdk.core.config import RetryPolicy

PRODUCT_TYPES = ("bound", "flat", "folded", "tiled")


class ProjectsAPI(BaseAPI[ResponseT_co]):
    """Endpoints under ``/projects`` and the global ``/script``."""

    def get_projects(self, *, retry_policy: RetryPolicy | None = None) -> ResponseT_co:
        return self._request("GET", "/projects", retry_policy=retry_policy)

    def create_project(
        self, request: dict[str, Any], *, retry_policy: RetryPolicy | None = None
    ) -> ResponseT_co:
        return self._request("POST", "/projects", request, retry_policy=retry_policy)

    def open_project(
        self, project_id: str, *, retry_policy: RetryPolicy | None = None
    ) -> ResponseT_co:
        """Open a saved project as a job."""
        return self._request(
            "POST",
            build_path("/projects/{project_id}/open", project_id=project_id),
            retry_policy=retry_policy,
        )

    def run_project_script(
        self,
        project_id: str,
        request: dict[str, Any],
        *,
        retry_policy: RetryPolicy | None = None,
    ) -> ResponseT_co:
        return self._request(
            "POST",
            build_path("/projects/{project_id}/script", project_id=project_id),
            request,
            retry_policy=retry_policy,
        )

    def run_script(
        self, request: dict[str, Any], *, retry_policy: RetryPolicy | None = None
    ) -> ResponseT_co:
        """Run a script outside of any job."""
        return self._request("POST", "/script", request, retry_policy=retry_policy)

    # repeat templates

    def get_project_repeat_templates(
        self, project_id: str, *, retry_policy: RetryPolicy | None = None
    ) -> ResponseT_co:
        return self._request(
            "GET",
            build_path("/projects/{project_id}/repeat-templates", project_id=project_id),
            retry_policy=retry_policy,
        )

    def create_project_repeat_template(
        self,
        project_id: str,
        request: dict[str, Any],
        *,
        retry_policy: RetryPolicy | None = None,
    ) -> ResponseT_co:
        return self._request(
            "POST",
            build_path("/projects/{project_id}/repeat-templates", project_id=project_id),
            request,
            retry_policy=retry_policy,
        )

    def update_repeat_template(
        self,
        project_id: str,
        template_name: str,
        request: dict[str, Any],
        *,
        retry_policy: RetryPolicy | None = None,
    ) -> ResponseT_co:
        return self._request(
            "PATCH",
            build_path(
                "/projects/{project_id}/repeat-templates/{template_name}",
                project_id=project_id,
                template_name=template_name,
            ),
            request,
            retry_policy=retry_policy,
        )

    def delete_repeat_template(
        self, project_id: str, template_name: str, *, retry_policy: RetryPolicy | None = None
    ) -> ResponseT_co:
        return self._request(
            "DELETE",
            build_path(
                "/projects/{project_id}/repeat-templates/{template_name}",
                project_id=project_id,
                template_name=template_name,
            ),
            retry_policy=retry_policy,
        )

    # products

    def create_typed_product(
        self,
        product_type: str,
        project_id: str,
        request: dict[str, Any],
        *,
        retry_policy: RetryPolicy | None = None,
    ) -> ResponseT_co:
        r"""Create a product of the given type in the project.

        Args:
            product_type: One of ``bound``, ``flat``, ``folded`` or
                ``tiled``.
            project_id: The project identifier.
            request: The product definition.
            retry_policy: Optional retry policy for busy servers.

        Returns:
            The response of the client.

        Raises:
            ValueError: If the product type is unknown.
        """
        if product_type not in PRODUCT_TYPES:
            msg = f"Unknown product type: {product_type!r}. Valid types: {PRODUCT_TYPES}"
            raise ValueError(msg)
        return self._request(
            "POST",
            build_path(
                "/projects/{project_id}/products/{product_type}",
                project_id=project_id,
                product_type=product_type,
            ),
            request,
            retry_policy=retry_policy,
        )

    def create_bound_product(
        self,
        project_id: str,
        request: dict[str, Any],
        *,
        retry_policy: RetryPolicy | None = None,
    ) -> ResponseT_co:
        return self.create_typed_product("bound", project_id, request, retry_policy=retry_policy)

    def create_flat_product(
        self,
        project_id: str,
        request: dict[str, Any],
        *,
        retry_policy: RetryPolicy | None = None,
    ) -> ResponseT_co:
        return self.create_typed_product("flat", project_id, request, retry_policy=retry_policy)

    def create_folded_product(
        self,
        project_id: str,
        request: dict[str, Any],
        *,
        retry_policy: RetryPolicy | None = None,
    ) -> ResponseT_co:
        return self.create_typed_product("folded", project_id, request, retry_policy=retry_policy)

    def create_tiled_product(
        self,
        project_id: str,
        request: dict[str, Any],
        *,
        retry_policy: RetryPolicy | None = None,
    ) -> ResponseT_co:
        return self.create_typed_product("tiled", project_id, request, retry_policy=retry_policy)

    def get_project_products(
        self, project_id: str, *, retry_policy: RetryPolicy | None = None
    ) -> ResponseT_co:
        return self._request(
            "GET",
            build_path("/projects/{project_id}/products", project_id=project_id),
            retry_policy=retry_policy,
        )

    def get_project_product(
        self, project_id: str, product_name: str, *, retry_policy: RetryPolicy | None = None
    ) -> ResponseT_co:
        return self._request(
            "GET",
            build_path(
                "/projects/{project_id}/products/{product_name}",
                project_id=project_id,
                product_name=product_name,
            ),
            retry_policy=retry_policy,
        )

    def update_project_product(
        self,
        project_id: str,
        product_name: str,
        request: dict[str, Any],
        *,
        retry_policy: RetryPolicy | None = None,
    ) -> ResponseT_co:
        return self._request(
            "PATCH",
            build_path(
                "/projects/{project_id}/products/{product_name}",
                project_id=project_id,
                product_name=product_name,
            ),
            request,
            retry_policy=retry_policy,
        )

    def delete_project_product(
        self, project_id: str, product_name: str, *, retry_policy: RetryPolicy | None = None
    ) -> ResponseT_co:
        return self._request(
            "DELETE",
            build_path(
                "/projects/{project_id}/products/{product_name}",
                project_id=project_id,
                product_name=product_name,
            ),
            retry_policy=retry_policy,
        )
