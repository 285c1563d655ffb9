r"""Product part endpoints of a project.

Parts are addressed by ``project_id``, ``product_name`` and a
zero-based ``part_index``, then by nested indexes for sections,
signatures, flats, tiles, components, pages, colors and layers.
"""

from __future__ import annotations

__all__ = ["PartsAPI"]

from typing import TYPE_CHECKING, Any

from phoenixsdk.api.base import BaseAPI, ResponseT_co, build_path

if TYPE_CHECKING:
    from phoenixsdk.core.config import RetryPolicy


class PartsAPI(BaseAPI[ResponseT_co]):
    """Endpoints under ``/projects/{project_id}/products/{product_name}``."""

    def _part_path(
        self,
        project_id: str,
        product_name: str,
        collection: str,
        part_index: int | None = None,
        suffix: str = "",
    ) -> str:
        path = build_path(
            "/projects/{project_id}/products/{product_name}/",
            project_id=project_id,
            product_name=product_name,
        )
        path += collection
        if part_index is not None:
            path += build_path("/{part_index}", part_index=part_index)
        return path + suffix

    # bound parts

    def get_bound_product_parts(
        self, project_id: str, product_name: str, *, retry_policy: RetryPolicy | None = None
    ) -> ResponseT_co:
        return self._request(
            "GET",
            self._part_path(project_id, product_name, "bound-parts"),
            retry_policy=retry_policy,
        )

    def get_bound_product_part(
        self,
        project_id: str,
        product_name: str,
        part_index: int,
        *,
        retry_policy: RetryPolicy | None = None,
    ) -> ResponseT_co:
        return self._request(
            "GET",
            self._part_path(project_id, product_name, "bound-parts", part_index),
            retry_policy=retry_policy,
        )

    def update_bound_product_part(
        self,
        project_id: str,
        product_name: str,
        part_index: int,
        request: dict[str, Any],
        *,
        retry_policy: RetryPolicy | None = None,
    ) -> ResponseT_co:
        return self._request(
            "PATCH",
            self._part_path(project_id, product_name, "bound-parts", part_index),
            request,
            retry_policy=retry_policy,
        )

    def get_bound_product_part_sections(
        self,
        project_id: str,
        product_name: str,
        part_index: int,
        *,
        retry_policy: RetryPolicy | None = None,
    ) -> ResponseT_co:
        return self._request(
            "GET",
            self._part_path(project_id, product_name, "bound-parts", part_index, "/sections"),
            retry_policy=retry_policy,
        )

    def create_bound_product_part_section(
        self,
        project_id: str,
        product_name: str,
        part_index: int,
        request: dict[str, Any],
        *,
        retry_policy: RetryPolicy | None = None,
    ) -> ResponseT_co:
        return self._request(
            "POST",
            self._part_path(project_id, product_name, "bound-parts", part_index, "/sections"),
            request,
            retry_policy=retry_policy,
        )

    def get_bound_product_part_section(
        self,
        project_id: str,
        product_name: str,
        part_index: int,
        section_index: int,
        *,
        retry_policy: RetryPolicy | None = None,
    ) -> ResponseT_co:
        suffix = build_path("/sections/{section_index}", section_index=section_index)
        return self._request(
            "GET",
            self._part_path(project_id, product_name, "bound-parts", part_index, suffix),
            retry_policy=retry_policy,
        )

    def update_bound_product_part_section(
        self,
        project_id: str,
        product_name: str,
        part_index: int,
        section_index: int,
        request: dict[str, Any],
        *,
        retry_policy: RetryPolicy | None = None,
    ) -> ResponseT_co:
        suffix = build_path("/sections/{section_index}", section_index=section_index)
        return self._request(
            "PATCH",
            self._part_path(project_id, product_name, "bound-parts", part_index, suffix),
            request,
            retry_policy=retry_policy,
        )

    def delete_bound_product_part_section(
        self,
        project_id: str,
        product_name: str,
        part_index: int,
        section_index: int,
        *,
        retry_policy: RetryPolicy | None = None,
    ) -> ResponseT_co:
        suffix = build_path("/sections/{section_index}", section_index=section_index)
        return self._request(
            "DELETE",
            self._part_path(project_id, product_name, "bound-parts", part_index, suffix),
            retry_policy=retry_policy,
        )

    def get_bound_product_section_signatures(
        self,
        project_id: str,
        product_name: str,
        part_index: int,
        section_index: int,
        *,
        retry_policy: RetryPolicy | None = None,
    ) -> ResponseT_co:
        suffix = build_path("/sections/{section_index}/signatures", section_index=section_index)
        return self._request(
            "GET",
            self._part_path(project_id, product_name, "bound-parts", part_index, suffix),
            retry_policy=retry_policy,
        )

    def create_bound_product_section_signature(
        self,
        project_id: str,
        product_name: str,
        part_index: int,
        section_index: int,
        request: dict[str, Any],
        *,
        retry_policy: RetryPolicy | None = None,
    ) -> ResponseT_co:
        suffix = build_path("/sections/{section_index}/signatures", section_index=section_index)
        return self._request(
            "POST",
            self._part_path(project_id, product_name, "bound-parts", part_index, suffix),
            request,
            retry_policy=retry_policy,
        )

    def get_bound_product_signature(
        self,
        project_id: str,
        product_name: str,
        part_index: int,
        section_index: int,
        signature_index: int,
        *,
        retry_policy: RetryPolicy | None = None,
    ) -> ResponseT_co:
        suffix = build_path(
            "/sections/{section_index}/signatures/{signature_index}",
            section_index=section_index,
            signature_index=signature_index,
        )
        return self._request(
            "GET",
            self._part_path(project_id, product_name, "bound-parts", part_index, suffix),
            retry_policy=retry_policy,
        )

    def delete_bound_product_signature(
        self,
        project_id: str,
        product_name: str,
        part_index: int,
        section_index: int,
        signature_index: int,
        *,
        retry_policy: RetryPolicy | None = None,
    ) -> ResponseT_co:
        suffix = build_path(
            "/sections/{section_index}/signatures/{signature_index}",
            section_index=section_index,
            signature_index=signature_index,
        )
        return self._request(
            "DELETE",
            self._part_path(project_id, product_name, "bound-parts", part_index, suffix),
            retry_policy=retry_policy,
        )

    # flat parts

    def get_flat_product_parts(
        self, project_id: str, product_name: str, *, retry_policy: RetryPolicy | None = None
    ) -> ResponseT_co:
        return self._request(
            "GET",
            self._part_path(project_id, product_name, "flat-parts"),
            retry_policy=retry_policy,
        )

    def get_flat_part(
        self,
        project_id: str,
        product_name: str,
        part_index: int,
        *,
        retry_policy: RetryPolicy | None = None,
    ) -> ResponseT_co:
        return self._request(
            "GET",
            self._part_path(project_id, product_name, "flat-parts", part_index),
            retry_policy=retry_policy,
        )

    def update_flat_part(
        self,
        project_id: str,
        product_name: str,
        part_index: int,
        request: dict[str, Any],
        *,
        retry_policy: RetryPolicy | None = None,
    ) -> ResponseT_co:
        return self._request(
            "PATCH",
            self._part_path(project_id, product_name, "flat-parts", part_index),
            request,
            retry_policy=retry_policy,
        )

    def get_flat_product_flats(
        self,
        project_id: str,
        product_name: str,
        part_index: int,
        *,
        retry_policy: RetryPolicy | None = None,
    ) -> ResponseT_co:
        return self._request(
            "GET",
            self._part_path(project_id, product_name, "flat-parts", part_index, "/flats"),
            retry_policy=retry_policy,
        )

    def get_flat_product_flat(
        self,
        project_id: str,
        product_name: str,
        part_index: int,
        flat_index: int,
        *,
        retry_policy: RetryPolicy | None = None,
    ) -> ResponseT_co:
        suffix = build_path("/flats/{flat_index}", flat_index=flat_index)
        return self._request(
            "GET",
            self._part_path(project_id, product_name, "flat-parts", part_index, suffix),
            retry_policy=retry_policy,
        )

    def update_flat_product_flat(
        self,
        project_id: str,
        product_name: str,
        part_index: int,
        flat_index: int,
        request: dict[str, Any],
        *,
        retry_policy: RetryPolicy | None = None,
    ) -> ResponseT_co:
        suffix = build_path("/flats/{flat_index}", flat_index=flat_index)
        return self._request(
            "PATCH",
            self._part_path(project_id, product_name, "flat-parts", part_index, suffix),
            request,
            retry_policy=retry_policy,
        )

    # folded parts

    def get_folded_product_parts(
        self, project_id: str, product_name: str, *, retry_policy: RetryPolicy | None = None
    ) -> ResponseT_co:
        return self._request(
            "GET",
            self._part_path(project_id, product_name, "folded-parts"),
            retry_policy=retry_policy,
        )

    def get_folded_product_part(
        self,
        project_id: str,
        product_name: str,
        part_index: int,
        *,
        retry_policy: RetryPolicy | None = None,
    ) -> ResponseT_co:
        return self._request(
            "GET",
            self._part_path(project_id, product_name, "folded-parts", part_index),
            retry_policy=retry_policy,
        )

    def update_folded_product_part(
        self,
        project_id: str,
        product_name: str,
        part_index: int,
        request: dict[str, Any],
        *,
        retry_policy: RetryPolicy | None = None,
    ) -> ResponseT_co:
        return self._request(
            "PATCH",
            self._part_path(project_id, product_name, "folded-parts", part_index),
            request,
            retry_policy=retry_policy,
        )

    def get_folded_product_part_signatures(
        self,
        project_id: str,
        product_name: str,
        part_index: int,
        *,
        retry_policy: RetryPolicy | None = None,
    ) -> ResponseT_co:
        return self._request(
            "GET",
            self._part_path(project_id, product_name, "folded-parts", part_index, "/signatures"),
            retry_policy=retry_policy,
        )

    def get_folded_product_part_signature(
        self,
        project_id: str,
        product_name: str,
        part_index: int,
        signature_index: int,
        *,
        retry_policy: RetryPolicy | None = None,
    ) -> ResponseT_co:
        suffix = build_path("/signatures/{signature_index}", signature_index=signature_index)
        return self._request(
            "GET",
            self._part_path(project_id, product_name, "folded-parts", part_index, suffix),
            retry_policy=retry_policy,
        )

    # tiled parts

    def get_tiled_product_parts(
        self, project_id: str, product_name: str, *, retry_policy: RetryPolicy | None = None
    ) -> ResponseT_co:
        return self._request(
            "GET",
            self._part_path(project_id, product_name, "tiled-parts"),
            retry_policy=retry_policy,
        )

    def get_tiled_product_part(
        self,
        project_id: str,
        product_name: str,
        part_index: int,
        *,
        retry_policy: RetryPolicy | None = None,
    ) -> ResponseT_co:
        return self._request(
            "GET",
            self._part_path(project_id, product_name, "tiled-parts", part_index),
            retry_policy=retry_policy,
        )

    def update_tiled_product_part(
        self,
        project_id: str,
        product_name: str,
        part_index: int,
        request: dict[str, Any],
        *,
        retry_policy: RetryPolicy | None = None,
    ) -> ResponseT_co:
        return self._request(
            "PATCH",
            self._part_path(project_id, product_name, "tiled-parts", part_index),
            request,
            retry_policy=retry_policy,
        )

    def get_tiled_product_part_tiles(
        self,
        project_id: str,
        product_name: str,
        part_index: int,
        *,
        retry_policy: RetryPolicy | None = None,
    ) -> ResponseT_co:
        return self._request(
            "GET",
            self._part_path(project_id, product_name, "tiled-parts", part_index, "/tiles"),
            retry_policy=retry_policy,
        )

    def get_tiled_product_part_tile(
        self,
        project_id: str,
        product_name: str,
        part_index: int,
        tile_index: int,
        *,
        retry_policy: RetryPolicy | None = None,
    ) -> ResponseT_co:
        suffix = build_path("/tiles/{tile_index}", tile_index=tile_index)
        return self._request(
            "GET",
            self._part_path(project_id, product_name, "tiled-parts", part_index, suffix),
            retry_policy=retry_policy,
        )

    def update_tiled_product_part_tile(
        self,
        project_id: str,
        product_name: str,
        part_index: int,
        tile_index: int,
        request: dict[str, Any],
        *,
        retry_policy: RetryPolicy | None = None,
    ) -> ResponseT_co:
        suffix = build_path("/tiles/{tile_index}", tile_index=tile_index)
        return self._request(
            "PATCH",
            self._part_path(project_id, product_name, "tiled-parts", part_index, suffix),
            request,
            retry_policy=retry_policy,
        )

    # generic parts and components

    def get_product_parts(
        self, project_id: str, product_name: str, *, retry_policy: RetryPolicy | None = None
    ) -> ResponseT_co:
        return self._request(
            "GET", self._part_path(project_id, product_name, "parts"), retry_policy=retry_policy
        )

    def get_product_part(
        self,
        project_id: str,
        product_name: str,
        part_index: int,
        *,
        retry_policy: RetryPolicy | None = None,
    ) -> ResponseT_co:
        return self._request(
            "GET",
            self._part_path(project_id, product_name, "parts", part_index),
            retry_policy=retry_policy,
        )

    def update_product_part(
        self,
        project_id: str,
        product_name: str,
        part_index: int,
        request: dict[str, Any],
        *,
        retry_policy: RetryPolicy | None = None,
    ) -> ResponseT_co:
        return self._request(
            "PATCH",
            self._part_path(project_id, product_name, "parts", part_index),
            request,
            retry_policy=retry_policy,
        )

    def get_product_part_components(
        self,
        project_id: str,
        product_name: str,
        part_index: int,
        *,
        retry_policy: RetryPolicy | None = None,
    ) -> ResponseT_co:
        return self._request(
            "GET",
            self._part_path(project_id, product_name, "parts", part_index, "/components"),
            retry_policy=retry_policy,
        )

    def get_product_part_component(
        self,
        project_id: str,
        product_name: str,
        part_index: int,
        component_index: int,
        *,
        retry_policy: RetryPolicy | None = None,
    ) -> ResponseT_co:
        suffix = build_path("/components/{component_index}", component_index=component_index)
        return self._request(
            "GET",
            self._part_path(project_id, product_name, "parts", part_index, suffix),
            retry_policy=retry_policy,
        )

    def update_product_part_component(
        self,
        project_id: str,
        product_name: str,
        part_index: int,
        component_index: int,
        request: dict[str, Any],
        *,
        retry_policy: RetryPolicy | None = None,
    ) -> ResponseT_co:
        suffix = build_path("/components/{component_index}", component_index=component_index)
        return self._request(
            "PATCH",
            self._part_path(project_id, product_name, "parts", part_index, suffix),
            request,
            retry_policy=retry_policy,
        )

    # pages

    def _page_path(
        self,
        project_id: str,
        product_name: str,
        part_index: int,
        page_index: int,
        suffix: str = "",
    ) -> str:
        page = build_path("/pages/{page_index}", page_index=page_index)
        return self._part_path(project_id, product_name, "parts", part_index, page + suffix)

    def get_product_part_pages(
        self,
        project_id: str,
        product_name: str,
        part_index: int,
        *,
        retry_policy: RetryPolicy | None = None,
    ) -> ResponseT_co:
        return self._request(
            "GET",
            self._part_path(project_id, product_name, "parts", part_index, "/pages"),
            retry_policy=retry_policy,
        )

    def create_product_part_pages(
        self,
        project_id: str,
        product_name: str,
        part_index: int,
        request: dict[str, Any],
        *,
        retry_policy: RetryPolicy | None = None,
    ) -> ResponseT_co:
        return self._request(
            "POST",
            self._part_path(project_id, product_name, "parts", part_index, "/pages"),
            request,
            retry_policy=retry_policy,
        )

    def assign_product_part_pages(
        self,
        project_id: str,
        product_name: str,
        part_index: int,
        request: dict[str, Any],
        *,
        retry_policy: RetryPolicy | None = None,
    ) -> ResponseT_co:
        """Assign artwork files to a range of pages of the part."""
        return self._request(
            "POST",
            self._part_path(project_id, product_name, "parts", part_index, "/pages/assign"),
            request,
            retry_policy=retry_policy,
        )

    def get_product_part_page(
        self,
        project_id: str,
        product_name: str,
        part_index: int,
        page_index: int,
        *,
        retry_policy: RetryPolicy | None = None,
    ) -> ResponseT_co:
        return self._request(
            "GET",
            self._page_path(project_id, product_name, part_index, page_index),
            retry_policy=retry_policy,
        )

    def update_product_part_page(
        self,
        project_id: str,
        product_name: str,
        part_index: int,
        page_index: int,
        request: dict[str, Any],
        *,
        retry_policy: RetryPolicy | None = None,
    ) -> ResponseT_co:
        return self._request(
            "PATCH",
            self._page_path(project_id, product_name, part_index, page_index),
            request,
            retry_policy=retry_policy,
        )

    def delete_product_part_page(
        self,
        project_id: str,
        product_name: str,
        part_index: int,
        page_index: int,
        *,
        retry_policy: RetryPolicy | None = None,
    ) -> ResponseT_co:
        return self._request(
            "DELETE",
            self._page_path(project_id, product_name, part_index, page_index),
            retry_policy=retry_policy,
        )

    def update_product_part_page_file(
        self,
        project_id: str,
        product_name: str,
        part_index: int,
        page_index: int,
        request: dict[str, Any],
        *,
        retry_policy: RetryPolicy | None = None,
    ) -> ResponseT_co:
        return self._request(
            "PUT",
            self._page_path(project_id, product_name, part_index, page_index, "/file"),
            request,
            retry_policy=retry_policy,
        )

    def delete_product_part_page_file(
        self,
        project_id: str,
        product_name: str,
        part_index: int,
        page_index: int,
        *,
        retry_policy: RetryPolicy | None = None,
    ) -> ResponseT_co:
        return self._request(
            "DELETE",
            self._page_path(project_id, product_name, part_index, page_index, "/file"),
            retry_policy=retry_policy,
        )

    def get_product_part_page_colors(
        self,
        project_id: str,
        product_name: str,
        part_index: int,
        page_index: int,
        *,
        retry_policy: RetryPolicy | None = None,
    ) -> ResponseT_co:
        return self._request(
            "GET",
            self._page_path(project_id, product_name, part_index, page_index, "/colors"),
            retry_policy=retry_policy,
        )

    def get_product_part_page_color(
        self,
        project_id: str,
        product_name: str,
        part_index: int,
        page_index: int,
        color_index: int,
        *,
        retry_policy: RetryPolicy | None = None,
    ) -> ResponseT_co:
        suffix = build_path("/color/{color_index}", color_index=color_index)
        return self._request(
            "GET",
            self._page_path(project_id, product_name, part_index, page_index, suffix),
            retry_policy=retry_policy,
        )

    def update_product_part_page_color(
        self,
        project_id: str,
        product_name: str,
        part_index: int,
        page_index: int,
        color_index: int,
        request: dict[str, Any],
        *,
        retry_policy: RetryPolicy | None = None,
    ) -> ResponseT_co:
        suffix = build_path("/color/{color_index}", color_index=color_index)
        return self._request(
            "PUT",
            self._page_path(project_id, product_name, part_index, page_index, suffix),
            request,
            retry_policy=retry_policy,
        )

    def get_product_part_page_layers(
        self,
        project_id: str,
        product_name: str,
        part_index: int,
        page_index: int,
        *,
        retry_policy: RetryPolicy | None = None,
    ) -> ResponseT_co:
        return self._request(
            "GET",
            self._page_path(project_id, product_name, part_index, page_index, "/layers"),
            retry_policy=retry_policy,
        )

    def get_product_part_page_layer(
        self,
        project_id: str,
        product_name: str,
        part_index: int,
        page_index: int,
        layer_index: int,
        *,
        retry_policy: RetryPolicy | None = None,
    ) -> ResponseT_co:
        suffix = build_path("/layers/{layer_index}", layer_index=layer_index)
        return self._request(
            "GET",
            self._page_path(project_id, product_name, part_index, page_index, suffix),
            retry_policy=retry_policy,
        )

    def update_product_part_page_layer(
        self,
        project_id: str,
        product_name: str,
        part_index: int,
        page_index: int,
        layer_index: int,
        request: dict[str, Any],
        *,
        retry_policy: RetryPolicy | None = None,
    ) -> ResponseT_co:
        suffix = build_path("/layers/{layer_index}", layer_index=layer_index)
        return self._request(
            "PATCH",
            self._page_path(project_id, product_name, part_index, page_index, suffix),
            request,
            retry_policy=retry_policy,
        )
