r"""Contain the endpoint groups of the Phoenix API and the aggregate
``PhoenixAPI`` object."""

from __future__ import annotations

__all__ = [
    "BaseAPI",
    "EnginesAPI",
    "ExportsAPI",
    "JobsAPI",
    "LayoutsAPI",
    "LibrariesAPI",
    "PartsAPI",
    "PhoenixAPI",
    "PresetsAPI",
    "ProductsAPI",
    "ProjectsAPI",
    "Requester",
    "build_path",
    "create_async_phoenix_api",
    "create_phoenix_api",
]

from phoenixsdk.api.base import BaseAPI, Requester, build_path
from phoenixsdk.api.engines import EnginesAPI
from phoenixsdk.api.exports import ExportsAPI
from phoenixsdk.api.factory import create_async_phoenix_api, create_phoenix_api
from phoenixsdk.api.jobs import JobsAPI
from phoenixsdk.api.layouts import LayoutsAPI
from phoenixsdk.api.libraries import LibrariesAPI
from phoenixsdk.api.parts import PartsAPI
from phoenixsdk.api.phoenix import PhoenixAPI
from phoenixsdk.api.presets import PresetsAPI
from phoenixsdk.api.products import ProductsAPI
from phoenixsdk.api.projects import ProjectsAPI
