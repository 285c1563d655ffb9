r"""Unit tests checking the method, path and payload of the endpoint
methods of ``PhoenixAPI``."""

from __future__ import annotations

from typing import Any
from unittest.mock import Mock

import pytest

from phoenixsdk import PhoenixAPI
from phoenixsdk.api.engines import LAYOUT_ENGINES
from phoenixsdk.api.presets import DIE_IMPORT_FORMATS, EXPORT_PRESET_KINDS
from phoenixsdk.api.projects import PRODUCT_TYPES
from phoenixsdk.core.config import RetryPolicy

POLICY = RetryPolicy(max_attempts=3, total_timeout_minutes=2)
REQ = {"name": "value"}

P = "/jobs/job-1"
PRJ = "/projects/job-1"
PROD = "/projects/job-1/products/box"


@pytest.fixture
def client() -> Mock:
    return Mock()


@pytest.fixture
def api(client: Mock) -> PhoenixAPI:
    return PhoenixAPI(client)


# (method name, positional arguments, HTTP method, path, payload)
ENDPOINTS: list[tuple[str, tuple[Any, ...], str, str, Any]] = [
    # jobs
    ("get_jobs", (), "GET", "/jobs/", None),
    ("create_job", (REQ,), "POST", "/jobs", REQ),
    ("get_job", ("job-1",), "GET", P, None),
    ("delete_job", ("job-1",), "DELETE", P, None),
    ("update_job", ("job-1", REQ), "PATCH", P, REQ),
    ("save_project", ("job-1", REQ), "POST", f"{P}/save", REQ),
    ("save_project_template", ("job-1", REQ), "POST", f"{P}/save-template", REQ),
    ("run_job_script", ("job-1", REQ), "POST", f"{P}/script", REQ),
    ("snap_project_artwork", ("job-1",), "POST", f"{P}/snap", None),
    ("import_die_template", ("job-1", REQ), "POST", f"{P}/import/die-template", REQ),
    ("get_uploaded_files", ("job-1",), "GET", f"{P}/files/upload", None),
    ("get_uploaded_file", ("job-1", "f1"), "GET", f"{P}/files/upload/f1", None),
    ("delete_uploaded_file", ("job-1", "f1"), "DELETE", f"{P}/files/upload/f1", None),
    (
        "download_uploaded_file",
        ("job-1", "f1", "art work.pdf"),
        "GET",
        f"{P}/files/upload/f1/art%20work.pdf",
        None,
    ),
    ("get_output_files", ("job-1",), "GET", f"{P}/output", None),
    ("get_output_file", ("job-1", "o1"), "GET", f"{P}/output/o1", None),
    ("download_output_file", ("job-1", "o1", "dir/a.pdf"), "GET", f"{P}/output/o1/dir/a.pdf", None),
    # exports
    ("export_json", ("job-1", REQ), "POST", f"{P}/export/report/json", REQ),
    ("export_xml", ("job-1", REQ), "POST", f"{P}/export/report/xml", REQ),
    ("export_csv", ("job-1", REQ), "POST", f"{P}/export/report/csv", REQ),
    ("export_pdf_report", ("job-1", REQ), "POST", f"{P}/export/report/pdf", REQ),
    ("export_cover_sheet", ("job-1", REQ), "POST", f"{P}/export/cover-sheet", REQ),
    ("export_tiling_report", ("job-1", REQ), "POST", f"{P}/export/tiling-report", REQ),
    (
        "export_product_tiling_report",
        ("job-1", "box", REQ),
        "POST",
        f"{P}/products/box/export/tiling-report",
        REQ,
    ),
    ("export_cff2", ("job-1", REQ), "POST", f"{P}/export/die/cff2", REQ),
    ("export_dxf", ("job-1", REQ), "POST", f"{P}/export/die/dxf", REQ),
    ("export_mfg", ("job-1", REQ), "POST", f"{P}/export/die/mfg", REQ),
    ("export_pdf_cut", ("job-1", REQ), "POST", f"{P}/export/die/pdf", REQ),
    ("export_zcc", ("job-1", REQ), "POST", f"{P}/export/die/zcc", REQ),
    ("export_hp_jdf", ("job-1", REQ), "POST", f"{P}/export/hp-jdf", REQ),
    ("export_jdf", ("job-1", REQ), "POST", f"{P}/export/jdf", REQ),
    ("export_cut_jdf", ("job-1", REQ), "POST", f"{P}/export/jdf-cutting", REQ),
    ("export_cut_kongsberg_jdf", ("job-1", REQ), "POST", f"{P}/export/jdf-kongsberg", REQ),
    ("export_pdf", ("job-1", REQ), "POST", f"{P}/export/pdf", REQ),
    ("export_pdf_vector", ("job-1", REQ), "POST", f"{P}/export/pdf-vector", REQ),
    # layouts
    ("get_layouts", ("job-1",), "GET", f"{P}/layouts", None),
    ("create_layout", ("job-1",), "POST", f"{P}/layouts", None),
    ("get_layout", ("job-1", 0), "GET", f"{P}/layouts/0", None),
    ("edit_layout", ("job-1", 0, REQ), "PUT", f"{P}/layouts/0", REQ),
    ("delete_layout", ("job-1", 1), "DELETE", f"{P}/layouts/1", None),
    ("get_layout_front", ("job-1", 0), "GET", f"{P}/layouts/0/front", None),
    ("edit_layout_front", ("job-1", 0, REQ), "PATCH", f"{P}/layouts/0/front", REQ),
    ("get_layout_back", ("job-1", 0), "GET", f"{P}/layouts/0/back", None),
    ("edit_layout_back", ("job-1", 0, REQ), "PATCH", f"{P}/layouts/0/back", REQ),
    ("place_component", ("job-1", 0, REQ), "POST", f"{P}/layouts/0/place/component", REQ),
    ("place_die_template", ("job-1", 0, REQ), "POST", f"{P}/layouts/0/place/die-template", REQ),
    ("generate_step_and_repeat", ("job-1", 0, REQ), "POST", f"{P}/layouts/0/step-repeat", REQ),
    ("get_layout_plate", ("job-1", 0), "GET", f"{P}/layouts/0/plate", None),
    ("set_layout_plate", ("job-1", 0, REQ), "POST", f"{P}/layouts/0/plate", REQ),
    ("get_layout_press", ("job-1", 0), "GET", f"{P}/layouts/0/press", None),
    ("set_layout_press", ("job-1", 0, REQ), "POST", f"{P}/layouts/0/press", REQ),
    ("get_layout_sheet", ("job-1", 0), "GET", f"{P}/layouts/0/sheet", None),
    ("set_layout_sheet", ("job-1", 0, REQ), "POST", f"{P}/layouts/0/sheet", REQ),
    ("edit_layout_sheet", ("job-1", 0, REQ), "PUT", f"{P}/layouts/0/sheet", REQ),
    # engines
    ("run_impose", ("job-1", 0, REQ), "POST", f"{P}/impose/0", REQ),
    ("get_impose_results", ("job-1", 0), "GET", f"{P}/impose/0/results", None),
    ("get_impose_result", ("job-1", 0, "r1"), "GET", f"{P}/impose/0/result/r1", None),
    ("apply_impose_result", ("job-1", 0, "r1"), "POST", f"{P}/impose/0/result/r1/apply", None),
    ("run_optimize", ("job-1", 1, REQ), "POST", f"{P}/optimize/1", REQ),
    ("get_optimize_results", ("job-1", 1), "GET", f"{P}/optimize/1/results", None),
    ("get_optimize_result", ("job-1", 1, "r1"), "GET", f"{P}/optimize/1/result/r1", None),
    ("apply_optimize_result", ("job-1", 1, "r1"), "POST", f"{P}/optimize/1/result/r1/apply", None),
    ("run_populate", ("job-1", 2, REQ), "POST", f"{P}/populate/2", REQ),
    ("get_populate_results", ("job-1", 2), "GET", f"{P}/populate/2/results", None),
    ("get_populate_result", ("job-1", 2, "r1"), "GET", f"{P}/populate/2/result/r1", None),
    ("apply_populate_result", ("job-1", 2, "r1"), "POST", f"{P}/populate/2/result/r1/apply", None),
    ("run_plan", ("job-1", REQ), "POST", f"{P}/plan", REQ),
    ("start_plan", ("job-1", REQ), "POST", f"{P}/plan/start", REQ),
    ("stop_plan", ("job-1",), "POST", f"{P}/plan/stop", None),
    ("get_plan_status", ("job-1",), "GET", f"{P}/plan/status", None),
    ("get_plan_results", ("job-1",), "GET", f"{P}/plan/results", None),
    ("get_plan_result", ("job-1", "r1"), "GET", f"{P}/plan/results/r1", None),
    ("apply_plan_result", ("job-1", "r1"), "POST", f"{P}/plan/results/r1/apply", None),
    ("apply_partial_plan", ("job-1", "r1", 0, 3), "POST", f"{P}/plan/results/r1/apply/0/3", None),
    # products
    ("create_product", ("job-1", REQ), "POST", f"{P}/products", REQ),
    ("import_product_csv", ("job-1", REQ), "POST", f"{P}/products/import/csv", REQ),
    ("get_product", ("job-1", "box 1"), "GET", f"{P}/products/box%201", None),
    ("delete_product", ("job-1", "box"), "DELETE", f"{P}/products/box", None),
    ("snap_product", ("job-1", "box"), "POST", f"{P}/products/box/snap", None),
    ("trace_product_image", ("job-1", "box", REQ), "POST", f"{P}/products/box/image-tracing", REQ),
    ("apply_product_mark", ("job-1", "box", REQ), "POST", f"{P}/products/box/mark/apply", REQ),
    # projects
    ("get_projects", (), "GET", "/projects", None),
    ("create_project", (REQ,), "POST", "/projects", REQ),
    ("open_project", ("job-1",), "POST", f"{PRJ}/open", None),
    ("run_project_script", ("job-1", REQ), "POST", f"{PRJ}/script", REQ),
    ("run_script", (REQ,), "POST", "/script", REQ),
    ("get_project_repeat_templates", ("job-1",), "GET", f"{PRJ}/repeat-templates", None),
    ("create_project_repeat_template", ("job-1", REQ), "POST", f"{PRJ}/repeat-templates", REQ),
    ("update_repeat_template", ("job-1", "t1", REQ), "PATCH", f"{PRJ}/repeat-templates/t1", REQ),
    ("delete_repeat_template", ("job-1", "t1"), "DELETE", f"{PRJ}/repeat-templates/t1", None),
    ("create_bound_product", ("job-1", REQ), "POST", f"{PRJ}/products/bound", REQ),
    ("create_flat_product", ("job-1", REQ), "POST", f"{PRJ}/products/flat", REQ),
    ("create_folded_product", ("job-1", REQ), "POST", f"{PRJ}/products/folded", REQ),
    ("create_tiled_product", ("job-1", REQ), "POST", f"{PRJ}/products/tiled", REQ),
    ("get_project_products", ("job-1",), "GET", f"{PRJ}/products", None),
    ("get_project_product", ("job-1", "box"), "GET", PROD, None),
    ("update_project_product", ("job-1", "box", REQ), "PATCH", PROD, REQ),
    ("delete_project_product", ("job-1", "box"), "DELETE", PROD, None),
    # bound parts
    ("get_bound_product_parts", ("job-1", "box"), "GET", f"{PROD}/bound-parts", None),
    ("get_bound_product_part", ("job-1", "box", 0), "GET", f"{PROD}/bound-parts/0", None),
    ("update_bound_product_part", ("job-1", "box", 0, REQ), "PATCH", f"{PROD}/bound-parts/0", REQ),
    (
        "get_bound_product_part_sections",
        ("job-1", "box", 0),
        "GET",
        f"{PROD}/bound-parts/0/sections",
        None,
    ),
    (
        "create_bound_product_part_section",
        ("job-1", "box", 0, REQ),
        "POST",
        f"{PROD}/bound-parts/0/sections",
        REQ,
    ),
    (
        "get_bound_product_part_section",
        ("job-1", "box", 0, 1),
        "GET",
        f"{PROD}/bound-parts/0/sections/1",
        None,
    ),
    (
        "delete_bound_product_part_section",
        ("job-1", "box", 0, 1),
        "DELETE",
        f"{PROD}/bound-parts/0/sections/1",
        None,
    ),
    (
        "get_bound_product_section_signatures",
        ("job-1", "box", 0, 1),
        "GET",
        f"{PROD}/bound-parts/0/sections/1/signatures",
        None,
    ),
    (
        "get_bound_product_signature",
        ("job-1", "box", 0, 1, 2),
        "GET",
        f"{PROD}/bound-parts/0/sections/1/signatures/2",
        None,
    ),
    (
        "delete_bound_product_signature",
        ("job-1", "box", 0, 1, 2),
        "DELETE",
        f"{PROD}/bound-parts/0/sections/1/signatures/2",
        None,
    ),
    # flat, folded and tiled parts
    ("get_flat_product_parts", ("job-1", "box"), "GET", f"{PROD}/flat-parts", None),
    ("update_flat_part", ("job-1", "box", 0, REQ), "PATCH", f"{PROD}/flat-parts/0", REQ),
    ("get_flat_product_flats", ("job-1", "box", 0), "GET", f"{PROD}/flat-parts/0/flats", None),
    ("get_flat_product_flat", ("job-1", "box", 0, 3), "GET", f"{PROD}/flat-parts/0/flats/3", None),
    ("get_folded_product_parts", ("job-1", "box"), "GET", f"{PROD}/folded-parts", None),
    (
        "get_folded_product_part_signature",
        ("job-1", "box", 0, 2),
        "GET",
        f"{PROD}/folded-parts/0/signatures/2",
        None,
    ),
    ("get_tiled_product_part", ("job-1", "box", 0), "GET", f"{PROD}/tiled-parts/0", None),
    ("update_tiled_product_part", ("job-1", "box", 0, REQ), "PATCH", f"{PROD}/tiled-parts/0", REQ),
    ("get_tiled_product_part_tiles", ("job-1", "box", 0), "GET", f"{PROD}/tiled-parts/0/tiles", None),
    # generic parts and pages
    ("get_product_parts", ("job-1", "box"), "GET", f"{PROD}/parts", None),
    (
        "get_product_part_component",
        ("job-1", "box", 0, 4),
        "GET",
        f"{PROD}/parts/0/components/4",
        None,
    ),
    ("get_product_part_pages", ("job-1", "box", 0), "GET", f"{PROD}/parts/0/pages", None),
    (
        "assign_product_part_pages",
        ("job-1", "box", 0, REQ),
        "POST",
        f"{PROD}/parts/0/pages/assign",
        REQ,
    ),
    ("delete_product_part_page", ("job-1", "box", 0, 1), "DELETE", f"{PROD}/parts/0/pages/1", None),
    (
        "update_product_part_page_file",
        ("job-1", "box", 0, 1, REQ),
        "PUT",
        f"{PROD}/parts/0/pages/1/file",
        REQ,
    ),
    (
        "get_product_part_page_colors",
        ("job-1", "box", 0, 1),
        "GET",
        f"{PROD}/parts/0/pages/1/colors",
        None,
    ),
    (
        "update_product_part_page_color",
        ("job-1", "box", 0, 1, 2, REQ),
        "PUT",
        f"{PROD}/parts/0/pages/1/color/2",
        REQ,
    ),
    (
        "update_product_part_page_layer",
        ("job-1", "box", 0, 1, 2, REQ),
        "PATCH",
        f"{PROD}/parts/0/pages/1/layers/2",
        REQ,
    ),
    # libraries
    ("get_die_designs", (), "GET", "/libraries/die-designs", None),
    ("import_die_design", (REQ,), "POST", "/libraries/die-designs/import", REQ),
    ("get_mode", ("m 1",), "GET", "/libraries/modes/m%201", None),
    ("add_plate", (REQ,), "POST", "/libraries/plates", REQ),
    ("update_press", ("p1", REQ), "PUT", "/libraries/presses/p1", REQ),
    ("delete_process_type", ("pt1",), "DELETE", "/libraries/process-types/pt1", None),
    ("get_processes", (), "GET", "/libraries/processes", None),
    ("get_stock_types", (), "GET", "/libraries/stock-types", None),
    ("get_stocks_v2", (), "GET", "/libraries/v2/stocks", None),
    ("get_stock_v2", ("s1",), "GET", "/libraries/v2/stocks/s1", None),
    ("get_stock_grades", ("s1",), "GET", "/libraries/stocks/s1/grades", None),
    ("update_stock_grade", ("s1", "g1", REQ), "PUT", "/libraries/stocks/s1/grades/g1", REQ),
    ("get_stock_grade_rolls", ("s1", "g1"), "GET", "/libraries/stocks/s1/grades/g1/rolls", None),
    ("add_stock_grade_roll", ("s1", "g1", REQ), "POST", "/libraries/stocks/s1/grades/g1/rolls", REQ),
    (
        "delete_stock_grade_sheet",
        ("s1", "g1", "sh1"),
        "DELETE",
        "/libraries/stocks/s1/grades/g1/sheets/sh1",
        None,
    ),
    ("add_template", (REQ,), "POST", "/libraries/templates", REQ),
    ("get_thing", ("t1",), "GET", "/libraries/things/t1", None),
    ("get_folding_patterns", (), "GET", "/libraries/folding", None),
    ("add_folding_pattern", (REQ,), "POST", "/libraries/v2/folding", REQ),
    ("get_mark_sets", (), "GET", "/libraries/markssets", None),
    ("get_mark", ("mk1",), "GET", "/libraries/marks/mk1", None),
    ("delete_mark", ("mk1",), "DELETE", "/libraries/v2/marks/mk1", None),
    ("update_script", ("sc1", REQ), "PUT", "/libraries/scripts/sc1", REQ),
    ("get_tiling_presets", (), "GET", "/libraries/tiling", None),
    # presets
    ("get_die_import_presets", ("cff2",), "GET", "/presets/import/die/cff2", None),
    ("get_export_presets", ("report/pdf",), "GET", "/presets/export/report/pdf", None),
    ("get_product_csv_import_presets", (), "GET", "/presets/import/product/csv", None),
    ("get_stock_csv_import_presets", (), "GET", "/presets/import/stock-csv", None),
    ("get_dynamic_ink_mapping_presets", (), "GET", "/presets/marks/dynamic-ink-mappings", None),
    ("get_dynamic_keyword_mappings", (), "GET", "/presets/marks/dynamic-keyword-mappings", None),
    ("get_step_and_repeat_presets", (), "GET", "/presets/tools/step-and-repeat", None),
    ("get_product_tiling_presets", (), "GET", "/presets/products/tiling", None),
    ("get_imposition_ai_profiles", (), "GET", "/presets/imposition-ai/profiles", None),
    ("get_imposition_ai_profiles_v2", (), "GET", "/presets/imposition-ai", None),
    ("add_imposition_ai_profile", (REQ,), "POST", "/presets/imposition-ai", REQ),
    ("update_imposition_ai_profile", ("ai1", REQ), "PUT", "/presets/imposition-ai/ai1", REQ),
]


@pytest.mark.parametrize(
    ("name", "args", "method", "path", "data"),
    ENDPOINTS,
    ids=[endpoint[0] for endpoint in ENDPOINTS],
)
def test_endpoint_request(
    api: PhoenixAPI,
    client: Mock,
    name: str,
    args: tuple[Any, ...],
    method: str,
    path: str,
    data: Any,
) -> None:
    result = getattr(api, name)(*args, retry_policy=POLICY)
    assert result is client.request.return_value
    client.request.assert_called_once_with(
        method, path, data, retry_policy=POLICY, params=None, files=None
    )


@pytest.mark.parametrize(
    ("name", "args"),
    [("get_jobs", ()), ("get_job", ("job-1",)), ("run_plan", ("job-1", REQ))],
)
def test_endpoint_without_retry_policy(
    api: PhoenixAPI, client: Mock, name: str, args: tuple[Any, ...]
) -> None:
    getattr(api, name)(*args)
    assert client.request.call_args.kwargs["retry_policy"] is None


def test_phoenix_api_repr(api: PhoenixAPI, client: Mock) -> None:
    assert repr(api).startswith("PhoenixAPI(client=")


##########################
#     Tests for jobs     #
##########################


def test_open_job_with_file(api: PhoenixAPI, client: Mock) -> None:
    upload = ("job.phx", b"content")
    api.open_job_with_file(upload)
    client.request.assert_called_once_with(
        "POST", "/jobs/open", None, retry_policy=None, params=None, files={"file": upload}
    )


def test_upload_file(api: PhoenixAPI, client: Mock) -> None:
    api.upload_file("job-1", b"content", retry_policy=POLICY)
    client.request.assert_called_once_with(
        "POST",
        "/jobs/job-1/files/upload",
        None,
        retry_policy=POLICY,
        params=None,
        files={"file": b"content"},
    )


#############################
#     Tests for exports     #
#############################


def test_export_without_request_sends_empty_body(api: PhoenixAPI, client: Mock) -> None:
    api.export_pdf("job-1")
    client.request.assert_called_once_with(
        "POST", "/jobs/job-1/export/pdf", {}, retry_policy=None, params=None, files=None
    )


#############################
#     Tests for engines     #
#############################


@pytest.mark.parametrize("engine", LAYOUT_ENGINES)
def test_run_layout_engine(api: PhoenixAPI, client: Mock, engine: str) -> None:
    api.run_layout_engine(engine, "job-1", 3, REQ)
    assert client.request.call_args.args[:2] == ("POST", f"/jobs/job-1/{engine}/3")


@pytest.mark.parametrize("engine", ["plan", "Impose", "unknown"])
def test_run_layout_engine_unknown(api: PhoenixAPI, client: Mock, engine: str) -> None:
    with pytest.raises(ValueError, match=r"Unknown layout engine"):
        api.run_layout_engine(engine, "job-1", 0, REQ)
    client.request.assert_not_called()


##############################
#     Tests for products     #
##############################


def test_get_products_without_thumbnails(api: PhoenixAPI, client: Mock) -> None:
    api.get_products("job-1")
    assert client.request.call_args.kwargs["params"] == {
        "thumb": None,
        "thumb-width": None,
        "thumb-height": None,
        "render-mode": None,
    }


def test_get_products_with_thumbnails(api: PhoenixAPI, client: Mock) -> None:
    api.get_products("job-1", thumb=True, thumb_width=64, thumb_height=32, render_mode="Dielines")
    client.request.assert_called_once_with(
        "GET",
        "/jobs/job-1/products",
        None,
        retry_policy=None,
        params={"thumb": "true", "thumb-width": 64, "thumb-height": 32, "render-mode": "Dielines"},
        files=None,
    )


def test_get_products_thumb_false(api: PhoenixAPI, client: Mock) -> None:
    api.get_products("job-1", thumb=False)
    assert client.request.call_args.kwargs["params"]["thumb"] == "false"


def test_get_products_invalid_render_mode(api: PhoenixAPI, client: Mock) -> None:
    with pytest.raises(ValueError, match=r"render_mode must be one of"):
        api.get_products("job-1", render_mode="colors")
    client.request.assert_not_called()


##############################
#     Tests for projects     #
##############################


@pytest.mark.parametrize("product_type", PRODUCT_TYPES)
def test_create_typed_product(api: PhoenixAPI, client: Mock, product_type: str) -> None:
    api.create_typed_product(product_type, "job-1", REQ)
    assert client.request.call_args.args == (
        "POST",
        f"/projects/job-1/products/{product_type}",
        REQ,
    )


def test_create_typed_product_unknown(api: PhoenixAPI, client: Mock) -> None:
    with pytest.raises(ValueError, match=r"Unknown product type"):
        api.create_typed_product("stitched", "job-1", REQ)
    client.request.assert_not_called()


#############################
#     Tests for presets     #
#############################


@pytest.mark.parametrize("die_format", DIE_IMPORT_FORMATS)
def test_get_die_import_presets(api: PhoenixAPI, client: Mock, die_format: str) -> None:
    api.get_die_import_presets(die_format)
    assert client.request.call_args.args == ("GET", f"/presets/import/die/{die_format}", None)


def test_get_die_import_presets_unknown(api: PhoenixAPI, client: Mock) -> None:
    with pytest.raises(ValueError, match=r"Unknown die format"):
        api.get_die_import_presets("svg")
    client.request.assert_not_called()


@pytest.mark.parametrize("kind", EXPORT_PRESET_KINDS)
def test_get_export_presets(api: PhoenixAPI, client: Mock, kind: str) -> None:
    api.get_export_presets(kind)
    assert client.request.call_args.args == ("GET", f"/presets/export/{kind}", None)


def test_get_export_presets_unknown(api: PhoenixAPI, client: Mock) -> None:
    with pytest.raises(ValueError, match=r"Unknown export kind"):
        api.get_export_presets("report/html")
    client.request.assert_not_called()
