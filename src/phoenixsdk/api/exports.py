r"""Export endpoints of a job.

Exports are the heaviest operations of the server and the usual source
of busy (503) answers, so each of them accepts a retry policy.
"""

from __future__ import annotations

__all__ = ["ExportsAPI"]

from typing import TYPE_CHECKING, Any

from phoenixsdk.api.base import BaseAPI, ResponseT_co, build_path

if TYPE_CHECKING:
    from phoenixsdk.core.config import RetryPolicy


class ExportsAPI(BaseAPI[ResponseT_co]):
    """Endpoints under ``/jobs/{project_id}/export``."""

    def _export(
        self,
        project_id: str,
        target: str,
        request: dict[str, Any] | None,
        retry_policy: RetryPolicy | None,
    ) -> ResponseT_co:
        path = build_path("/jobs/{project_id}/export/", project_id=project_id) + target
        return self._request("POST", path, request or {}, retry_policy=retry_policy)

    # reports

    def export_json(
        self,
        project_id: str,
        request: dict[str, Any] | None = None,
        *,
        retry_policy: RetryPolicy | None = None,
    ) -> ResponseT_co:
        """Export the job report as JSON (``ExportJsonReportResource``)."""
        return self._export(project_id, "report/json", request, retry_policy)

    def export_xml(
        self,
        project_id: str,
        request: dict[str, Any] | None = None,
        *,
        retry_policy: RetryPolicy | None = None,
    ) -> ResponseT_co:
        return self._export(project_id, "report/xml", request, retry_policy)

    def export_csv(
        self,
        project_id: str,
        request: dict[str, Any] | None = None,
        *,
        retry_policy: RetryPolicy | None = None,
    ) -> ResponseT_co:
        return self._export(project_id, "report/csv", request, retry_policy)

    def export_pdf_report(
        self,
        project_id: str,
        request: dict[str, Any] | None = None,
        *,
        retry_policy: RetryPolicy | None = None,
    ) -> ResponseT_co:
        return self._export(project_id, "report/pdf", request, retry_policy)

    def export_cover_sheet(
        self,
        project_id: str,
        request: dict[str, Any] | None = None,
        *,
        retry_policy: RetryPolicy | None = None,
    ) -> ResponseT_co:
        return self._export(project_id, "cover-sheet", request, retry_policy)

    def export_tiling_report(
        self,
        project_id: str,
        request: dict[str, Any] | None = None,
        *,
        retry_policy: RetryPolicy | None = None,
    ) -> ResponseT_co:
        return self._export(project_id, "tiling-report", request, retry_policy)

    def export_product_tiling_report(
        self,
        project_id: str,
        product_name: str,
        request: dict[str, Any] | None = None,
        *,
        retry_policy: RetryPolicy | None = None,
    ) -> ResponseT_co:
        """Export the tiling report of one product."""
        path = build_path(
            "/jobs/{project_id}/products/{product_name}/export/tiling-report",
            project_id=project_id,
            product_name=product_name,
        )
        return self._request("POST", path, request or {}, retry_policy=retry_policy)

    # dies

    def export_cff2(
        self,
        project_id: str,
        request: dict[str, Any] | None = None,
        *,
        retry_policy: RetryPolicy | None = None,
    ) -> ResponseT_co:
        return self._export(project_id, "die/cff2", request, retry_policy)

    def export_dxf(
        self,
        project_id: str,
        request: dict[str, Any] | None = None,
        *,
        retry_policy: RetryPolicy | None = None,
    ) -> ResponseT_co:
        return self._export(project_id, "die/dxf", request, retry_policy)

    def export_mfg(
        self,
        project_id: str,
        request: dict[str, Any] | None = None,
        *,
        retry_policy: RetryPolicy | None = None,
    ) -> ResponseT_co:
        return self._export(project_id, "die/mfg", request, retry_policy)

    def export_pdf_cut(
        self,
        project_id: str,
        request: dict[str, Any] | None = None,
        *,
        retry_policy: RetryPolicy | None = None,
    ) -> ResponseT_co:
        return self._export(project_id, "die/pdf", request, retry_policy)

    def export_zcc(
        self,
        project_id: str,
        request: dict[str, Any] | None = None,
        *,
        retry_policy: RetryPolicy | None = None,
    ) -> ResponseT_co:
        return self._export(project_id, "die/zcc", request, retry_policy)

    # job tickets

    def export_hp_jdf(
        self,
        project_id: str,
        request: dict[str, Any] | None = None,
        *,
        retry_policy: RetryPolicy | None = None,
    ) -> ResponseT_co:
        return self._export(project_id, "hp-jdf", request, retry_policy)

    def export_jdf(
        self,
        project_id: str,
        request: dict[str, Any] | None = None,
        *,
        retry_policy: RetryPolicy | None = None,
    ) -> ResponseT_co:
        return self._export(project_id, "jdf", request, retry_policy)

    def export_cut_jdf(
        self,
        project_id: str,
        request: dict[str, Any] | None = None,
        *,
        retry_policy: RetryPolicy | None = None,
    ) -> ResponseT_co:
        return self._export(project_id, "jdf-cutting", request, retry_policy)

    def export_cut_kongsberg_jdf(
        self,
        project_id: str,
        request: dict[str, Any] | None = None,
        *,
        retry_policy: RetryPolicy | None = None,
    ) -> ResponseT_co:
        return self._export(project_id, "jdf-kongsberg", request, retry_policy)

    # imposed output

    def export_pdf(
        self,
        project_id: str,
        request: dict[str, Any] | None = None,
        *,
        retry_policy: RetryPolicy | None = None,
    ) -> ResponseT_co:
        """Export the imposed layouts as PDF (``ExportPdfResource``)."""
        return self._export(project_id, "pdf", request, retry_policy)

    def export_pdf_vector(
        self,
        project_id: str,
        request: dict[str, Any] | None = None,
        *,
        retry_policy: RetryPolicy | None = None,
    ) -> ResponseT_co:
        return self._export(project_id, "pdf-vector", request, retry_policy)
