r"""Unit tests for the endpoint base class and path building."""

from __future__ import annotations

from unittest.mock import Mock

import pytest

from phoenixsdk.api import BaseAPI, build_path
from phoenixsdk.core.config import RetryPolicy

################################
#     Tests for build_path     #
################################


def test_build_path_no_parameters() -> None:
    assert build_path("/jobs") == "/jobs"


def test_build_path_substitutes_values() -> None:
    path = build_path(
        "/jobs/{project_id}/layouts/{layout_index}", project_id="job-1", layout_index=2
    )
    assert path == "/jobs/job-1/layouts/2"


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("my job", "/jobs/my%20job"),
        ("a/b", "/jobs/a%2Fb"),
        ("50%", "/jobs/50%25"),
        ("café", "/jobs/caf%C3%A9"),
        ("a?b#c", "/jobs/a%3Fb%23c"),
    ],
)
def test_build_path_quotes_values(value: str, expected: str) -> None:
    assert build_path("/jobs/{project_id}", project_id=value) == expected


def test_build_path_keeps_separators_of_file_paths() -> None:
    assert build_path(
        "/jobs/{project_id}/output/{file_id}/{file_path}",
        project_id="a/b",
        file_id="out",
        file_path="reports/job 1.pdf",
    ) == "/jobs/a%2Fb/output/out/reports/job%201.pdf"


def test_build_path_missing_value() -> None:
    with pytest.raises(KeyError, match=r"project_id"):
        build_path("/jobs/{project_id}")


#############################
#     Tests for BaseAPI     #
#############################


def test_base_api_client() -> None:
    client = Mock()
    assert BaseAPI(client).client is client


def test_base_api_request_forwards_arguments() -> None:
    client = Mock()
    policy = RetryPolicy(max_attempts=1)
    result = BaseAPI(client)._request(
        "POST", "/jobs", {"id": "j"}, retry_policy=policy, params={"a": 1}
    )
    assert result is client.request.return_value
    client.request.assert_called_once_with(
        "POST", "/jobs", {"id": "j"}, retry_policy=policy, params={"a": 1}, files=None
    )
