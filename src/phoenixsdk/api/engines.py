r"""Imposition engine endpoints of a job.

The ``impose``, ``optimize`` and ``populate`` engines work on a single
layout and share the same run/results/apply shape. The ``plan`` engine
works on the whole job and can run in the background.

Engine runs are long and the server answers 503 while it is busy, so
they are usually called with a ``RetryPolicy``.
"""

from __future__ import annotations

__all__ = ["LAYOUT_ENGINES", "EnginesAPI"]

from typing import TYPE_CHECKING, Any

from phoenixsdk.api.base import BaseAPI, ResponseT_co, build_path

if TYPE_CHECKING:
    from phoenixsdk.core.config import RetryPolicy

LAYOUT_ENGINES = ("impose", "optimize", "populate")


class EnginesAPI(BaseAPI[ResponseT_co]):
    """Endpoints of the imposition engines."""

    def _engine_path(
        self, engine: str, project_id: str, layout_index: int, suffix: str = ""
    ) -> str:
        if engine not in LAYOUT_ENGINES:
            msg = f"Unknown layout engine: {engine!r}. Valid engines: {LAYOUT_ENGINES}"
            raise ValueError(msg)
        return (
            build_path(
                "/jobs/{project_id}/{engine}/{layout_index}",
                project_id=project_id,
                engine=engine,
                layout_index=layout_index,
            )
            + suffix
        )

    def run_layout_engine(
        self,
        engine: str,
        project_id: str,
        layout_index: int,
        request: dict[str, Any],
        *,
        retry_policy: RetryPolicy | None = None,
    ) -> ResponseT_co:
        r"""Run a layout engine on one layout.

        Args:
            engine: One of ``impose``, ``optimize`` or ``populate``.
            project_id: The job identifier.
            layout_index: The zero-based index of the layout.
            request: The engine settings.
            retry_policy: Optional retry policy for busy servers.

        Returns:
            The response of the client.

        Raises:
            ValueError: If the engine is unknown.
        """
        return self._request(
            "POST",
            self._engine_path(engine, project_id, layout_index),
            request,
            retry_policy=retry_policy,
        )

    def get_layout_engine_results(
        self,
        engine: str,
        project_id: str,
        layout_index: int,
        *,
        retry_policy: RetryPolicy | None = None,
    ) -> ResponseT_co:
        return self._request(
            "GET",
            self._engine_path(engine, project_id, layout_index, "/results"),
            retry_policy=retry_policy,
        )

    def get_layout_engine_result(
        self,
        engine: str,
        project_id: str,
        layout_index: int,
        result_id: str,
        *,
        retry_policy: RetryPolicy | None = None,
    ) -> ResponseT_co:
        suffix = build_path("/result/{result_id}", result_id=result_id)
        return self._request(
            "GET",
            self._engine_path(engine, project_id, layout_index, suffix),
            retry_policy=retry_policy,
        )

    def apply_layout_engine_result(
        self,
        engine: str,
        project_id: str,
        layout_index: int,
        result_id: str,
        *,
        retry_policy: RetryPolicy | None = None,
    ) -> ResponseT_co:
        suffix = build_path("/result/{result_id}/apply", result_id=result_id)
        return self._request(
            "POST",
            self._engine_path(engine, project_id, layout_index, suffix),
            retry_policy=retry_policy,
        )

    # impose

    def run_impose(
        self,
        project_id: str,
        layout_index: int,
        request: dict[str, Any],
        *,
        retry_policy: RetryPolicy | None = None,
    ) -> ResponseT_co:
        return self.run_layout_engine(
            "impose", project_id, layout_index, request, retry_policy=retry_policy
        )

    def get_impose_results(
        self, project_id: str, layout_index: int, *, retry_policy: RetryPolicy | None = None
    ) -> ResponseT_co:
        return self.get_layout_engine_results(
            "impose", project_id, layout_index, retry_policy=retry_policy
        )

    def get_impose_result(
        self,
        project_id: str,
        layout_index: int,
        result_id: str,
        *,
        retry_policy: RetryPolicy | None = None,
    ) -> ResponseT_co:
        return self.get_layout_engine_result(
            "impose", project_id, layout_index, result_id, retry_policy=retry_policy
        )

    def apply_impose_result(
        self,
        project_id: str,
        layout_index: int,
        result_id: str,
        *,
        retry_policy: RetryPolicy | None = None,
    ) -> ResponseT_co:
        return self.apply_layout_engine_result(
            "impose", project_id, layout_index, result_id, retry_policy=retry_policy
        )

    # optimize

    def run_optimize(
        self,
        project_id: str,
        layout_index: int,
        request: dict[str, Any],
        *,
        retry_policy: RetryPolicy | None = None,
    ) -> ResponseT_co:
        return self.run_layout_engine(
            "optimize", project_id, layout_index, request, retry_policy=retry_policy
        )

    def get_optimize_results(
        self, project_id: str, layout_index: int, *, retry_policy: RetryPolicy | None = None
    ) -> ResponseT_co:
        return self.get_layout_engine_results(
            "optimize", project_id, layout_index, retry_policy=retry_policy
        )

    def get_optimize_result(
        self,
        project_id: str,
        layout_index: int,
        result_id: str,
        *,
        retry_policy: RetryPolicy | None = None,
    ) -> ResponseT_co:
        return self.get_layout_engine_result(
            "optimize", project_id, layout_index, result_id, retry_policy=retry_policy
        )

    def apply_optimize_result(
        self,
        project_id: str,
        layout_index: int,
        result_id: str,
        *,
        retry_policy: RetryPolicy | None = None,
    ) -> ResponseT_co:
        return self.apply_layout_engine_result(
            "optimize", project_id, layout_index, result_id, retry_policy=retry_policy
        )

    # populate

    def run_populate(
        self,
        project_id: str,
        layout_index: int,
        request: dict[str, Any],
        *,
        retry_policy: RetryPolicy | None = None,
    ) -> ResponseT_co:
        return self.run_layout_engine(
            "populate", project_id, layout_index, request, retry_policy=retry_policy
        )

    def get_populate_results(
        self, project_id: str, layout_index: int, *, retry_policy: RetryPolicy | None = None
    ) -> ResponseT_co:
        return self.get_layout_engine_results(
            "populate", project_id, layout_index, retry_policy=retry_policy
        )

    def get_populate_result(
        self,
        project_id: str,
        layout_index: int,
        result_id: str,
        *,
        retry_policy: RetryPolicy | None = None,
    ) -> ResponseT_co:
        return self.get_layout_engine_result(
            "populate", project_id, layout_index, result_id, retry_policy=retry_policy
        )

    def apply_populate_result(
        self,
        project_id: str,
        layout_index: int,
        result_id: str,
        *,
        retry_policy: RetryPolicy | None = None,
    ) -> ResponseT_co:
        return self.apply_layout_engine_result(
            "populate", project_id, layout_index, result_id, retry_policy=retry_policy
        )

    # plan

    def run_plan(
        self,
        project_id: str,
        request: dict[str, Any],
        *,
        retry_policy: RetryPolicy | None = None,
    ) -> ResponseT_co:
        """Run the plan engine on the job and wait for its results."""
        return self._request(
            "POST",
            build_path("/jobs/{project_id}/plan", project_id=project_id),
            request,
            retry_policy=retry_policy,
        )

    def start_plan(
        self,
        project_id: str,
        request: dict[str, Any],
        *,
        retry_policy: RetryPolicy | None = None,
    ) -> ResponseT_co:
        """Start the plan engine in the background.

        Poll ``get_plan_status`` and stop it with ``stop_plan``.
        """
        return self._request(
            "POST",
            build_path("/jobs/{project_id}/plan/start", project_id=project_id),
            request,
            retry_policy=retry_policy,
        )

    def stop_plan(
        self, project_id: str, *, retry_policy: RetryPolicy | None = None
    ) -> ResponseT_co:
        return self._request(
            "POST",
            build_path("/jobs/{project_id}/plan/stop", project_id=project_id),
            retry_policy=retry_policy,
        )

    def get_plan_status(
        self, project_id: str, *, retry_policy: RetryPolicy | None = None
    ) -> ResponseT_co:
        return self._request(
            "GET",
            build_path("/jobs/{project_id}/plan/status", project_id=project_id),
            retry_policy=retry_policy,
        )

    def get_plan_results(
        self, project_id: str, *, retry_policy: RetryPolicy | None = None
    ) -> ResponseT_co:
        return self._request(
            "GET",
            build_path("/jobs/{project_id}/plan/results", project_id=project_id),
            retry_policy=retry_policy,
        )

    def get_plan_result(
        self, project_id: str, result_id: str, *, retry_policy: RetryPolicy | None = None
    ) -> ResponseT_co:
        return self._request(
            "GET",
            build_path(
                "/jobs/{project_id}/plan/results/{result_id}",
                project_id=project_id,
                result_id=result_id,
            ),
            retry_policy=retry_policy,
        )

    def apply_plan_result(
        self, project_id: str, result_id: str, *, retry_policy: RetryPolicy | None = None
    ) -> ResponseT_co:
        return self._request(
            "POST",
            build_path(
                "/jobs/{project_id}/plan/results/{result_id}/apply",
                project_id=project_id,
                result_id=result_id,
            ),
            retry_policy=retry_policy,
        )

    def apply_partial_plan(
        self,
        project_id: str,
        result_id: str,
        start_index: int,
        end_index: int,
        *,
        retry_policy: RetryPolicy | None = None,
    ) -> ResponseT_co:
        """Apply the layouts ``start_index`` to ``end_index`` of a plan
        result."""
        return self._request(
            "POST",
            build_path(
                "/jobs/{project_id}/plan/results/{result_id}/apply/{start_index}/{end_index}",
                project_id=project_id,
                result_id=result_id,
                start_index=start_index,
                end_index=end_index,
            ),
            retry_policy=retry_policy,
        )
