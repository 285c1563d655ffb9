r"""Job endpoints: job lifecycle, saving, scripts, uploaded and output
files."""

from __future__ import annotations

__all__ = ["JobsAPI"]

from typing import TYPE_CHECKING, Any

from phoenixsdk.api.base import BaseAPI, ResponseT_co, build_path

if TYPE_CHECKING:
    from phoenixsdk.core.config import RetryPolicy


class JobsAPI(BaseAPI[ResponseT_co]):
    """Endpoints under ``/jobs``."""

    def get_jobs(self, *, retry_policy: RetryPolicy | None = None) -> ResponseT_co:
        """Retrieve all the open jobs."""
        return self._request("GET", "/jobs/", retry_policy=retry_policy)

    def create_job(
        self, request: dict[str, Any], *, retry_policy: RetryPolicy | None = None
    ) -> ResponseT_co:
        """Create a new job.

        Args:
            request: The job creation payload (``CreateJobResource``).
            retry_policy: Optional retry policy for busy servers.
        """
        return self._request("POST", "/jobs", request, retry_policy=retry_policy)

    def open_job_with_file(
        self, file: Any, *, retry_policy: RetryPolicy | None = None
    ) -> ResponseT_co:
        """Open a job by uploading a Phoenix job file (``.phx``).

        Args:
            file: The file to upload, in any form accepted by ``httpx``
                for a multipart file (bytes, binary file object, or a
                ``(filename, content[, content_type])`` tuple).
            retry_policy: Optional retry policy for busy servers.
        """
        return self._request("POST", "/jobs/open", files={"file": file}, retry_policy=retry_policy)

    def get_job(self, project_id: str, *, retry_policy: RetryPolicy | None = None) -> ResponseT_co:
        return self._request(
            "GET",
            build_path("/jobs/{project_id}", project_id=project_id),
            retry_policy=retry_policy,
        )

    def delete_job(
        self, project_id: str, *, retry_policy: RetryPolicy | None = None
    ) -> ResponseT_co:
        return self._request(
            "DELETE",
            build_path("/jobs/{project_id}", project_id=project_id),
            retry_policy=retry_policy,
        )

    def update_job(
        self,
        project_id: str,
        request: dict[str, Any],
        *,
        retry_policy: RetryPolicy | None = None,
    ) -> ResponseT_co:
        """Update the settings of a job (``EditProjectResource``)."""
        return self._request(
            "PATCH",
            build_path("/jobs/{project_id}", project_id=project_id),
            request,
            retry_policy=retry_policy,
        )

    def save_project(
        self,
        project_id: str,
        request: dict[str, Any],
        *,
        retry_policy: RetryPolicy | None = None,
    ) -> ResponseT_co:
        return self._request(
            "POST",
            build_path("/jobs/{project_id}/save", project_id=project_id),
            request,
            retry_policy=retry_policy,
        )

    def save_project_template(
        self,
        project_id: str,
        request: dict[str, Any],
        *,
        retry_policy: RetryPolicy | None = None,
    ) -> ResponseT_co:
        return self._request(
            "POST",
            build_path("/jobs/{project_id}/save-template", project_id=project_id),
            request,
            retry_policy=retry_policy,
        )

    def run_job_script(
        self,
        project_id: str,
        request: dict[str, Any],
        *,
        retry_policy: RetryPolicy | None = None,
    ) -> ResponseT_co:
        """Run a script in the context of a job."""
        return self._request(
            "POST",
            build_path("/jobs/{project_id}/script", project_id=project_id),
            request,
            retry_policy=retry_policy,
        )

    def snap_project_artwork(
        self, project_id: str, *, retry_policy: RetryPolicy | None = None
    ) -> ResponseT_co:
        return self._request(
            "POST",
            build_path("/jobs/{project_id}/snap", project_id=project_id),
            retry_policy=retry_policy,
        )

    def import_die_template(
        self,
        project_id: str,
        request: dict[str, Any],
        *,
        retry_policy: RetryPolicy | None = None,
    ) -> ResponseT_co:
        return self._request(
            "POST",
            build_path("/jobs/{project_id}/import/die-template", project_id=project_id),
            request,
            retry_policy=retry_policy,
        )

    # uploaded files

    def get_uploaded_files(
        self, project_id: str, *, retry_policy: RetryPolicy | None = None
    ) -> ResponseT_co:
        return self._request(
            "GET",
            build_path("/jobs/{project_id}/files/upload", project_id=project_id),
            retry_policy=retry_policy,
        )

    def upload_file(
        self, project_id: str, file: Any, *, retry_policy: RetryPolicy | None = None
    ) -> ResponseT_co:
        """Upload a file to the job file area as multipart form data."""
        return self._request(
            "POST",
            build_path("/jobs/{project_id}/files/upload", project_id=project_id),
            files={"file": file},
            retry_policy=retry_policy,
        )

    def get_uploaded_file(
        self, project_id: str, file_id: str, *, retry_policy: RetryPolicy | None = None
    ) -> ResponseT_co:
        return self._request(
            "GET",
            build_path(
                "/jobs/{project_id}/files/upload/{file_id}",
                project_id=project_id,
                file_id=file_id,
            ),
            retry_policy=retry_policy,
        )

    def delete_uploaded_file(
        self, project_id: str, file_id: str, *, retry_policy: RetryPolicy | None = None
    ) -> ResponseT_co:
        return self._request(
            "DELETE",
            build_path(
                "/jobs/{project_id}/files/upload/{file_id}",
                project_id=project_id,
                file_id=file_id,
            ),
            retry_policy=retry_policy,
        )

    def download_uploaded_file(
        self,
        project_id: str,
        file_id: str,
        output_path: str,
        *,
        retry_policy: RetryPolicy | None = None,
    ) -> ResponseT_co:
        """Download the content of an uploaded file.

        The raw bytes are available on ``response.content``.
        """
        return self._request(
            "GET",
            build_path(
                "/jobs/{project_id}/files/upload/{file_id}/{output_path}",
                project_id=project_id,
                file_id=file_id,
                output_path=output_path,
            ),
            retry_policy=retry_policy,
        )

    # output files

    def get_output_files(
        self, project_id: str, *, retry_policy: RetryPolicy | None = None
    ) -> ResponseT_co:
        return self._request(
            "GET",
            build_path("/jobs/{project_id}/output", project_id=project_id),
            retry_policy=retry_policy,
        )

    def get_output_file(
        self, project_id: str, file_id: str, *, retry_policy: RetryPolicy | None = None
    ) -> ResponseT_co:
        return self._request(
            "GET",
            build_path(
                "/jobs/{project_id}/output/{file_id}", project_id=project_id, file_id=file_id
            ),
            retry_policy=retry_policy,
        )

    def download_output_file(
        self,
        project_id: str,
        file_id: str,
        file_path: str,
        *,
        retry_policy: RetryPolicy | None = None,
    ) -> ResponseT_co:
        """Download one file produced by an export.

        Args:
            project_id: The job identifier.
            file_id: The output identifier returned by the export.
            file_path: The relative path of the file in the output,
                ``/`` separators are kept.
            retry_policy: Optional retry policy for busy servers.
        """
        return self._request(
            "GET",
            build_path(
                "/jobs/{project_id}/output/{file_id}/{file_path}",
                project_id=project_id,
                file_id=file_id,
                file_path=file_path,
            ),
            retry_policy=retry_policy,
        )
