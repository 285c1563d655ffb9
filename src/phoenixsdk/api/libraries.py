r"""Library endpoints: the shared resources of the server (dies, modes,
plates, presses, processes, stocks, templates, things, folding
patterns, marks, scripts and tiling presets).

Most libraries follow the same list/get/add/update/delete shape and
are implemented on top of a small set of private helpers.
"""

from __future__ import annotations

__all__ = ["LibrariesAPI"]

from typing import TYPE_CHECKING, Any

from phoenixsdk.api.base import BaseAPI, ResponseT_co, build_path

if TYPE_CHECKING:
    from phoenixsdk.core.config import RetryPolicy


class LibrariesAPI(BaseAPI[ResponseT_co]):
    """Endpoints under ``/libraries``."""

    def _list(self, library: str, retry_policy: RetryPolicy | None) -> ResponseT_co:
        return self._request("GET", f"/libraries/{library}", retry_policy=retry_policy)

    def _add(
        self, library: str, request: dict[str, Any], retry_policy: RetryPolicy | None
    ) -> ResponseT_co:
        return self._request("POST", f"/libraries/{library}", request, retry_policy=retry_policy)

    def _item(
        self,
        method: str,
        library: str,
        item_id: str,
        request: dict[str, Any] | None,
        retry_policy: RetryPolicy | None,
    ) -> ResponseT_co:
        path = f"/libraries/{library}" + build_path("/{item_id}", item_id=item_id)
        return self._request(method, path, request, retry_policy=retry_policy)

    # die designs

    def get_die_designs(self, *, retry_policy: RetryPolicy | None = None) -> ResponseT_co:
        return self._list("die-designs", retry_policy)

    def get_die_design(
        self, die_design_id: str, *, retry_policy: RetryPolicy | None = None
    ) -> ResponseT_co:
        return self._item("GET", "die-designs", die_design_id, None, retry_policy)

    def delete_die_design(
        self, die_design_id: str, *, retry_policy: RetryPolicy | None = None
    ) -> ResponseT_co:
        return self._item("DELETE", "die-designs", die_design_id, None, retry_policy)

    def import_die_design(
        self, request: dict[str, Any], *, retry_policy: RetryPolicy | None = None
    ) -> ResponseT_co:
        """Import a die design file into the library."""
        return self._add("die-designs/import", request, retry_policy)

    # modes

    def get_modes(self, *, retry_policy: RetryPolicy | None = None) -> ResponseT_co:
        return self._list("modes", retry_policy)

    def get_mode(self, mode_id: str, *, retry_policy: RetryPolicy | None = None) -> ResponseT_co:
        return self._item("GET", "modes", mode_id, None, retry_policy)

    def add_mode(
        self, request: dict[str, Any], *, retry_policy: RetryPolicy | None = None
    ) -> ResponseT_co:
        return self._add("modes", request, retry_policy)

    def update_mode(
        self, mode_id: str, request: dict[str, Any], *, retry_policy: RetryPolicy | None = None
    ) -> ResponseT_co:
        return self._item("PUT", "modes", mode_id, request, retry_policy)

    def delete_mode(
        self, mode_id: str, *, retry_policy: RetryPolicy | None = None
    ) -> ResponseT_co:
        return self._item("DELETE", "modes", mode_id, None, retry_policy)

    # plates

    def get_plates(self, *, retry_policy: RetryPolicy | None = None) -> ResponseT_co:
        return self._list("plates", retry_policy)

    def get_plate(self, plate_id: str, *, retry_policy: RetryPolicy | None = None) -> ResponseT_co:
        return self._item("GET", "plates", plate_id, None, retry_policy)

    def add_plate(
        self, request: dict[str, Any], *, retry_policy: RetryPolicy | None = None
    ) -> ResponseT_co:
        return self._add("plates", request, retry_policy)

    def update_plate(
        self, plate_id: str, request: dict[str, Any], *, retry_policy: RetryPolicy | None = None
    ) -> ResponseT_co:
        return self._item("PUT", "plates", plate_id, request, retry_policy)

    def delete_plate(
        self, plate_id: str, *, retry_policy: RetryPolicy | None = None
    ) -> ResponseT_co:
        return self._item("DELETE", "plates", plate_id, None, retry_policy)

    # presses

    def get_presses(self, *, retry_policy: RetryPolicy | None = None) -> ResponseT_co:
        return self._list("presses", retry_policy)

    def get_press(self, press_id: str, *, retry_policy: RetryPolicy | None = None) -> ResponseT_co:
        return self._item("GET", "presses", press_id, None, retry_policy)

    def add_press(
        self, request: dict[str, Any], *, retry_policy: RetryPolicy | None = None
    ) -> ResponseT_co:
        return self._add("presses", request, retry_policy)

    def update_press(
        self, press_id: str, request: dict[str, Any], *, retry_policy: RetryPolicy | None = None
    ) -> ResponseT_co:
        return self._item("PUT", "presses", press_id, request, retry_policy)

    def delete_press(
        self, press_id: str, *, retry_policy: RetryPolicy | None = None
    ) -> ResponseT_co:
        return self._item("DELETE", "presses", press_id, None, retry_policy)

    # process types

    def get_process_types(self, *, retry_policy: RetryPolicy | None = None) -> ResponseT_co:
        return self._list("process-types", retry_policy)

    def get_process_type(
        self, process_type_id: str, *, retry_policy: RetryPolicy | None = None
    ) -> ResponseT_co:
        return self._item("GET", "process-types", process_type_id, None, retry_policy)

    def add_process_type(
        self, request: dict[str, Any], *, retry_policy: RetryPolicy | None = None
    ) -> ResponseT_co:
        return self._add("process-types", request, retry_policy)

    def update_process_type(
        self,
        process_type_id: str,
        request: dict[str, Any],
        *,
        retry_policy: RetryPolicy | None = None,
    ) -> ResponseT_co:
        return self._item("PUT", "process-types", process_type_id, request, retry_policy)

    def delete_process_type(
        self, process_type_id: str, *, retry_policy: RetryPolicy | None = None
    ) -> ResponseT_co:
        return self._item("DELETE", "process-types", process_type_id, None, retry_policy)

    # processes

    def get_processes(self, *, retry_policy: RetryPolicy | None = None) -> ResponseT_co:
        return self._list("processes", retry_policy)

    def get_process(
        self, process_id: str, *, retry_policy: RetryPolicy | None = None
    ) -> ResponseT_co:
        return self._item("GET", "processes", process_id, None, retry_policy)

    def add_process(
        self, request: dict[str, Any], *, retry_policy: RetryPolicy | None = None
    ) -> ResponseT_co:
        return self._add("processes", request, retry_policy)

    def update_process(
        self, process_id: str, request: dict[str, Any], *, retry_policy: RetryPolicy | None = None
    ) -> ResponseT_co:
        return self._item("PUT", "processes", process_id, request, retry_policy)

    def delete_process(
        self, process_id: str, *, retry_policy: RetryPolicy | None = None
    ) -> ResponseT_co:
        return self._item("DELETE", "processes", process_id, None, retry_policy)

    # stock types

    def get_stock_types(self, *, retry_policy: RetryPolicy | None = None) -> ResponseT_co:
        return self._list("stock-types", retry_policy)

    def get_stock_type(
        self, stock_type_id: str, *, retry_policy: RetryPolicy | None = None
    ) -> ResponseT_co:
        return self._item("GET", "stock-types", stock_type_id, None, retry_policy)

    def add_stock_type(
        self, request: dict[str, Any], *, retry_policy: RetryPolicy | None = None
    ) -> ResponseT_co:
        return self._add("stock-types", request, retry_policy)

    def update_stock_type(
        self,
        stock_type_id: str,
        request: dict[str, Any],
        *,
        retry_policy: RetryPolicy | None = None,
    ) -> ResponseT_co:
        return self._item("PUT", "stock-types", stock_type_id, request, retry_policy)

    def delete_stock_type(
        self, stock_type_id: str, *, retry_policy: RetryPolicy | None = None
    ) -> ResponseT_co:
        return self._item("DELETE", "stock-types", stock_type_id, None, retry_policy)

    # stocks

    def get_stocks(self, *, retry_policy: RetryPolicy | None = None) -> ResponseT_co:
        return self._list("stocks", retry_policy)

    def get_stocks_v2(self, *, retry_policy: RetryPolicy | None = None) -> ResponseT_co:
        return self._list("v2/stocks", retry_policy)

    def get_stock(self, stock_id: str, *, retry_policy: RetryPolicy | None = None) -> ResponseT_co:
        return self._item("GET", "stocks", stock_id, None, retry_policy)

    def get_stock_v2(
        self, stock_id: str, *, retry_policy: RetryPolicy | None = None
    ) -> ResponseT_co:
        return self._item("GET", "v2/stocks", stock_id, None, retry_policy)

    def add_stock(
        self, request: dict[str, Any], *, retry_policy: RetryPolicy | None = None
    ) -> ResponseT_co:
        return self._add("stocks", request, retry_policy)

    def add_stock_v2(
        self, request: dict[str, Any], *, retry_policy: RetryPolicy | None = None
    ) -> ResponseT_co:
        return self._add("v2/stocks", request, retry_policy)

    def update_stock(
        self, stock_id: str, request: dict[str, Any], *, retry_policy: RetryPolicy | None = None
    ) -> ResponseT_co:
        return self._item("PUT", "stocks", stock_id, request, retry_policy)

    def delete_stock(
        self, stock_id: str, *, retry_policy: RetryPolicy | None = None
    ) -> ResponseT_co:
        return self._item("DELETE", "stocks", stock_id, None, retry_policy)

    # stock grades, rolls and sheets

    def _grades(self, stock_id: str) -> str:
        return build_path("stocks/{stock_id}/grades", stock_id=stock_id)

    def _grade_items(self, stock_id: str, stock_grade_id: str, kind: str) -> str:
        return self._grades(stock_id) + build_path(
            "/{stock_grade_id}/", stock_grade_id=stock_grade_id
        ) + kind

    def get_stock_grades(
        self, stock_id: str, *, retry_policy: RetryPolicy | None = None
    ) -> ResponseT_co:
        return self._list(self._grades(stock_id), retry_policy)

    def get_stock_grade(
        self, stock_id: str, stock_grade_id: str, *, retry_policy: RetryPolicy | None = None
    ) -> ResponseT_co:
        return self._item("GET", self._grades(stock_id), stock_grade_id, None, retry_policy)

    def add_stock_grade(
        self, stock_id: str, request: dict[str, Any], *, retry_policy: RetryPolicy | None = None
    ) -> ResponseT_co:
        return self._add(self._grades(stock_id), request, retry_policy)

    def update_stock_grade(
        self,
        stock_id: str,
        stock_grade_id: str,
        request: dict[str, Any],
        *,
        retry_policy: RetryPolicy | None = None,
    ) -> ResponseT_co:
        return self._item("PUT", self._grades(stock_id), stock_grade_id, request, retry_policy)

    def delete_stock_grade(
        self, stock_id: str, stock_grade_id: str, *, retry_policy: RetryPolicy | None = None
    ) -> ResponseT_co:
        return self._item("DELETE", self._grades(stock_id), stock_grade_id, None, retry_policy)

    def get_stock_grade_rolls(
        self, stock_id: str, stock_grade_id: str, *, retry_policy: RetryPolicy | None = None
    ) -> ResponseT_co:
        return self._list(self._grade_items(stock_id, stock_grade_id, "rolls"), retry_policy)

    def get_stock_grade_roll(
        self,
        stock_id: str,
        stock_grade_id: str,
        roll_id: str,
        *,
        retry_policy: RetryPolicy | None = None,
    ) -> ResponseT_co:
        library = self._grade_items(stock_id, stock_grade_id, "rolls")
        return self._item("GET", library, roll_id, None, retry_policy)

    def add_stock_grade_roll(
        self,
        stock_id: str,
        stock_grade_id: str,
        request: dict[str, Any],
        *,
        retry_policy: RetryPolicy | None = None,
    ) -> ResponseT_co:
        return self._add(
            self._grade_items(stock_id, stock_grade_id, "rolls"), request, retry_policy
        )

    def update_stock_grade_roll(
        self,
        stock_id: str,
        stock_grade_id: str,
        roll_id: str,
        request: dict[str, Any],
        *,
        retry_policy: RetryPolicy | None = None,
    ) -> ResponseT_co:
        library = self._grade_items(stock_id, stock_grade_id, "rolls")
        return self._item("PUT", library, roll_id, request, retry_policy)

    def delete_stock_grade_roll(
        self,
        stock_id: str,
        stock_grade_id: str,
        roll_id: str,
        *,
        retry_policy: RetryPolicy | None = None,
    ) -> ResponseT_co:
        library = self._grade_items(stock_id, stock_grade_id, "rolls")
        return self._item("DELETE", library, roll_id, None, retry_policy)

    def get_stock_grade_sheets(
        self, stock_id: str, stock_grade_id: str, *, retry_policy: RetryPolicy | None = None
    ) -> ResponseT_co:
        return self._list(self._grade_items(stock_id, stock_grade_id, "sheets"), retry_policy)

    def get_stock_grade_sheet(
        self,
        stock_id: str,
        stock_grade_id: str,
        sheet_id: str,
        *,
        retry_policy: RetryPolicy | None = None,
    ) -> ResponseT_co:
        library = self._grade_items(stock_id, stock_grade_id, "sheets")
        return self._item("GET", library, sheet_id, None, retry_policy)

    def add_stock_grade_sheet(
        self,
        stock_id: str,
        stock_grade_id: str,
        request: dict[str, Any],
        *,
        retry_policy: RetryPolicy | None = None,
    ) -> ResponseT_co:
        return self._add(
            self._grade_items(stock_id, stock_grade_id, "sheets"), request, retry_policy
        )

    def update_stock_grade_sheet(
        self,
        stock_id: str,
        stock_grade_id: str,
        sheet_id: str,
        request: dict[str, Any],
        *,
        retry_policy: RetryPolicy | None = None,
    ) -> ResponseT_co:
        library = self._grade_items(stock_id, stock_grade_id, "sheets")
        return self._item("PUT", library, sheet_id, request, retry_policy)

    def delete_stock_grade_sheet(
        self,
        stock_id: str,
        stock_grade_id: str,
        sheet_id: str,
        *,
        retry_policy: RetryPolicy | None = None,
    ) -> ResponseT_co:
        library = self._grade_items(stock_id, stock_grade_id, "sheets")
        return self._item("DELETE", library, sheet_id, None, retry_policy)

    # templates

    def get_templates(self, *, retry_policy: RetryPolicy | None = None) -> ResponseT_co:
        return self._list("templates", retry_policy)

    def get_template(
        self, template_id: str, *, retry_policy: RetryPolicy | None = None
    ) -> ResponseT_co:
        return self._item("GET", "templates", template_id, None, retry_policy)

    def add_template(
        self, request: dict[str, Any], *, retry_policy: RetryPolicy | None = None
    ) -> ResponseT_co:
        return self._add("templates", request, retry_policy)

    def delete_template(
        self, template_id: str, *, retry_policy: RetryPolicy | None = None
    ) -> ResponseT_co:
        return self._item("DELETE", "templates", template_id, None, retry_policy)

    # things

    def get_things(self, *, retry_policy: RetryPolicy | None = None) -> ResponseT_co:
        return self._list("things", retry_policy)

    def get_thing(self, thing_id: str, *, retry_policy: RetryPolicy | None = None) -> ResponseT_co:
        return self._item("GET", "things", thing_id, None, retry_policy)

    def add_thing(
        self, request: dict[str, Any], *, retry_policy: RetryPolicy | None = None
    ) -> ResponseT_co:
        return self._add("things", request, retry_policy)

    def update_thing(
        self, thing_id: str, request: dict[str, Any], *, retry_policy: RetryPolicy | None = None
    ) -> ResponseT_co:
        return self._item("PUT", "things", thing_id, request, retry_policy)

    def delete_thing(
        self, thing_id: str, *, retry_policy: RetryPolicy | None = None
    ) -> ResponseT_co:
        return self._item("DELETE", "things", thing_id, None, retry_policy)

    # folding patterns

    def get_folding_patterns(self, *, retry_policy: RetryPolicy | None = None) -> ResponseT_co:
        return self._list("folding", retry_policy)

    def get_folding_patterns_v2(
        self, *, retry_policy: RetryPolicy | None = None
    ) -> ResponseT_co:
        return self._list("v2/folding", retry_policy)

    def get_folding_pattern(
        self, folding_pattern_id: str, *, retry_policy: RetryPolicy | None = None
    ) -> ResponseT_co:
        return self._item("GET", "v2/folding", folding_pattern_id, None, retry_policy)

    def add_folding_pattern(
        self, request: dict[str, Any], *, retry_policy: RetryPolicy | None = None
    ) -> ResponseT_co:
        return self._add("v2/folding", request, retry_policy)

    def update_folding_pattern(
        self,
        folding_pattern_id: str,
        request: dict[str, Any],
        *,
        retry_policy: RetryPolicy | None = None,
    ) -> ResponseT_co:
        return self._item("PUT", "v2/folding", folding_pattern_id, request, retry_policy)

    def delete_folding_pattern(
        self, folding_pattern_id: str, *, retry_policy: RetryPolicy | None = None
    ) -> ResponseT_co:
        return self._item("DELETE", "v2/folding", folding_pattern_id, None, retry_policy)

    # marks

    def get_mark_sets(self, *, retry_policy: RetryPolicy | None = None) -> ResponseT_co:
        return self._list("markssets", retry_policy)

    def get_marks(self, *, retry_policy: RetryPolicy | None = None) -> ResponseT_co:
        return self._list("marks", retry_policy)

    def get_marks_v2(self, *, retry_policy: RetryPolicy | None = None) -> ResponseT_co:
        return self._list("v2/marks", retry_policy)

    def get_mark(self, mark_id: str, *, retry_policy: RetryPolicy | None = None) -> ResponseT_co:
        return self._item("GET", "marks", mark_id, None, retry_policy)

    def add_mark(
        self, request: dict[str, Any], *, retry_policy: RetryPolicy | None = None
    ) -> ResponseT_co:
        return self._add("v2/marks", request, retry_policy)

    def update_mark(
        self, mark_id: str, request: dict[str, Any], *, retry_policy: RetryPolicy | None = None
    ) -> ResponseT_co:
        return self._item("PUT", "v2/marks", mark_id, request, retry_policy)

    def delete_mark(
        self, mark_id: str, *, retry_policy: RetryPolicy | None = None
    ) -> ResponseT_co:
        return self._item("DELETE", "v2/marks", mark_id, None, retry_policy)

    # scripts

    def get_scripts(self, *, retry_policy: RetryPolicy | None = None) -> ResponseT_co:
        return self._list("scripts", retry_policy)

    def get_script(
        self, script_id: str, *, retry_policy: RetryPolicy | None = None
    ) -> ResponseT_co:
        return self._item("GET", "scripts", script_id, None, retry_policy)

    def add_script(
        self, request: dict[str, Any], *, retry_policy: RetryPolicy | None = None
    ) -> ResponseT_co:
        return self._add("scripts", request, retry_policy)

    def update_script(
        self, script_id: str, request: dict[str, Any], *, retry_policy: RetryPolicy | None = None
    ) -> ResponseT_co:
        return self._item("PUT", "scripts", script_id, request, retry_policy)

    def delete_script(
        self, script_id: str, *, retry_policy: RetryPolicy | None = None
    ) -> ResponseT_co:
        return self._item("DELETE", "scripts", script_id, None, retry_policy)

    # tiling presets

    def get_tiling_presets(self, *, retry_policy: RetryPolicy | None = None) -> ResponseT_co:
        return self._list("tiling", retry_policy)

    def get_tiling_preset(
        self, tiling_preset_id: str, *, retry_policy: RetryPolicy | None = None
    ) -> ResponseT_co:
        return self._item("GET", "tiling", tiling_preset_id, None, retry_policy)

    def add_tiling_preset(
        self, request: dict[str, Any], *, retry_policy: RetryPolicy | None = None
    ) -> ResponseT_co:
        return self._add("tiling", request, retry_policy)

    def update_tiling_preset(
        self,
        tiling_preset_id: str,
        request: dict[str, Any],
        *,
        retry_policy: RetryPolicy | None = None,
    ) -> ResponseT_co:
        return self._item("PUT", "tiling", tiling_preset_id, request, retry_policy)

    def delete_tiling_preset(
        self, tiling_preset_id: str, *, retry_policy: RetryPolicy | None = None
    ) -> ResponseT_co:
        return self._item("DELETE", "tiling", tiling_preset_id, None, retry_policy)
