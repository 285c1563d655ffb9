r"""Preset endpoints: the named settings the server offers for imports,
exports, imposition AI profiles, marks and tools."""

from __future__ import annotations

__all__ = ["DIE_IMPORT_FORMATS", "EXPORT_PRESET_KINDS", "PresetsAPI"]

from typing import TYPE_CHECKING, Any

from phoenixsdk.api.base import BaseAPI, ResponseT_co, build_path

if TYPE_CHECKING:
    from phoenixsdk.core.config import RetryPolicy

DIE_IMPORT_FORMATS = ("ard", "cff2", "ddes2", "ddes3", "dxf", "mfg", "pdf")

EXPORT_PRESET_KINDS = (
    "cover-sheet",
    "die/cff2",
    "die/dxf",
    "die/pdf",
    "die/zcc",
    "hp-jdf",
    "jdf",
    "jdf-cutting",
    "jdf-kongsberg",
    "pdf",
    "pdf-vector",
    "report/csv",
    "report/json",
    "report/pdf",
    "report/xml",
)


class PresetsAPI(BaseAPI[ResponseT_co]):
    """Endpoints under ``/presets``."""

    def _presets(self, category: str, retry_policy: RetryPolicy | None) -> ResponseT_co:
        return self._request("GET", f"/presets/{category}", retry_policy=retry_policy)

    def get_die_import_presets(
        self, die_format: str, *, retry_policy: RetryPolicy | None = None
    ) -> ResponseT_co:
        r"""Retrieve the import presets of a die format.

        Args:
            die_format: One of ``ard``, ``cff2``, ``ddes2``, ``ddes3``,
                ``dxf``, ``mfg`` or ``pdf``.
            retry_policy: Optional retry policy for busy servers.

        Returns:
            The response of the client.

        Raises:
            ValueError: If the die format is unknown.
        """
        if die_format not in DIE_IMPORT_FORMATS:
            msg = f"Unknown die format: {die_format!r}. Valid formats: {DIE_IMPORT_FORMATS}"
            raise ValueError(msg)
        return self._presets(f"import/die/{die_format}", retry_policy)

    def get_export_presets(
        self, kind: str, *, retry_policy: RetryPolicy | None = None
    ) -> ResponseT_co:
        """Retrieve the presets of an export kind, e.g. ``report/pdf`` or
        ``jdf-cutting``.

        Raises:
            ValueError: If the export kind is unknown.
        """
        if kind not in EXPORT_PRESET_KINDS:
            msg = f"Unknown export kind: {kind!r}. Valid kinds: {EXPORT_PRESET_KINDS}"
            raise ValueError(msg)
        return self._presets(f"export/{kind}", retry_policy)

    def get_product_csv_import_presets(
        self, *, retry_policy: RetryPolicy | None = None
    ) -> ResponseT_co:
        return self._presets("import/product/csv", retry_policy)

    def get_stock_csv_import_presets(
        self, *, retry_policy: RetryPolicy | None = None
    ) -> ResponseT_co:
        return self._presets("import/stock-csv", retry_policy)

    def get_dynamic_ink_mapping_presets(
        self, *, retry_policy: RetryPolicy | None = None
    ) -> ResponseT_co:
        return self._presets("marks/dynamic-ink-mappings", retry_policy)

    def get_dynamic_keyword_mappings(
        self, *, retry_policy: RetryPolicy | None = None
    ) -> ResponseT_co:
        return self._presets("marks/dynamic-keyword-mappings", retry_policy)

    def get_step_and_repeat_presets(
        self, *, retry_policy: RetryPolicy | None = None
    ) -> ResponseT_co:
        return self._presets("tools/step-and-repeat", retry_policy)

    def get_product_tiling_presets(
        self, *, retry_policy: RetryPolicy | None = None
    ) -> ResponseT_co:
        return self._presets("products/tiling", retry_policy)

    # imposition AI profiles

    def get_imposition_ai_profiles(
        self, *, retry_policy: RetryPolicy | None = None
    ) -> ResponseT_co:
        """Retrieve the names of the imposition AI profiles."""
        return self._presets("imposition-ai/profiles", retry_policy)

    def get_imposition_ai_profiles_v2(
        self, *, retry_policy: RetryPolicy | None = None
    ) -> ResponseT_co:
        return self._presets("imposition-ai", retry_policy)

    def get_imposition_ai_profile(
        self, profile_id: str, *, retry_policy: RetryPolicy | None = None
    ) -> ResponseT_co:
        return self._request(
            "GET",
            build_path("/presets/imposition-ai/{profile_id}", profile_id=profile_id),
            retry_policy=retry_policy,
        )

    def add_imposition_ai_profile(
        self, request: dict[str, Any], *, retry_policy: RetryPolicy | None = None
    ) -> ResponseT_co:
        return self._request(
            "POST", "/presets/imposition-ai", request, retry_policy=retry_policy
        )

    def update_imposition_ai_profile(
        self,
        profile_id: str,
        request: dict[str, Any],
        *,
        retry_policy: RetryPolicy | None = None,
    ) -> ResponseT_co:
        return self._request(
            "PUT",
            build_path("/presets/imposition-ai/{profile_id}", profile_id=profile_id),
            request,
            retry_policy=retry_policy,
        )

    def delete_imposition_ai_profile(
        self, profile_id: str, *, retry_policy: RetryPolicy | None = None
    ) -> ResponseT_co:
        return self._request(
            "DELETE",
            build_path("/presets/imposition-ai/{profile_id}", profile_id=profile_id),
            retry_policy=retry_policy,
        )
