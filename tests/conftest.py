"""Pytest configuration and shared fixtures for the ETS CSV export tests."""

from __future__ import annotations

import os
import sys

import pytest

_TESTS_DIR = os.path.dirname(__file__)
_PROJECT_ROOT = os.path.abspath(os.path.join(_TESTS_DIR, ".."))
if _PROJECT_ROOT not in sys.path:
    sys.path.insert(0, _PROJECT_ROOT)


@pytest.fixture
def overview_data():
    """Overview in the generator's JSON shape, deliberately out of order."""
    return {
        "mainGroups": [
            {
                "main": 2,
                "name": "jaloezieën",
                "middleGroups": [
                    {
                        "middle": 0,
                        "name": "op/neer",
                        "addresses": [
                            {
                                "groupAddress": "2/0/0",
                                "name": "Woonkamer raam",
                                "comment": "1.1.5 – K1",
                                "datapointType": "DPT1.008",
                            }
                        ],
                    }
                ],
            },
            {
                "main": 1,
                "name": "verlichting",
                "middleGroups": [
                    {
                        "middle": 1,
                        "name": "status",
                        "addresses": [
                            {
                                "groupAddress": "1/1/0",
                                "name": "Keuken status",
                                "comment": "1.1.1",
                                "datapointType": "DPT1.001",
                            }
                        ],
                    },
                    {
                        "middle": 0,
                        "name": "schakelen",
                        "addresses": [
                            {
                                "groupAddress": "1/0/1",
                                "name": "Hal",
                                "comment": "1.1.2",
                                "datapointType": "DPT1.001",
                            },
                            {
                                "groupAddress": "1/0/0",
                                "name": "Keuken",
                                "comment": "1.1.1",
                                "datapointType": "DPT1.001",
                            },
                        ],
                    },
                ],
            },
        ]
    }


@pytest.fixture
def overview(overview_data):
    """The same overview as a validated model."""
    from core.overview import HierarchicalOverview

    return HierarchicalOverview.model_validate(overview_data)


@pytest.fixture
def app():
    """Create a FastAPI test app with default configuration."""
    from api.app import create_app

    return create_app({"export": {"default_project_name": "Testproject"}})


@pytest.fixture
async def client(app):
    """Create an AsyncClient for HTTP testing against the ASGI app."""
    import httpx

    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(
        transport=transport, base_url="http://testserver"
    ) as client:
        yield client


@pytest.fixture(autouse=True)
def _run_sync_endpoints_inline(monkeypatch):
    """Run sync FastAPI endpoints inline to avoid AnyIO threadpool hangs."""
    import fastapi.concurrency as fastapi_concurrency
    import fastapi.dependencies.utils as fastapi_dep_utils
    import fastapi.routing as fastapi_routing
    import starlette.concurrency as starlette_concurrency

    async def _run_inline(func, *args, **kwargs):
        return func(*args, **kwargs)

    monkeypatch.setattr(starlette_concurrency, "run_in_threadpool", _run_inline, raising=False)
    monkeypatch.setattr(fastapi_concurrency, "run_in_threadpool", _run_inline, raising=False)
    monkeypatch.setattr(fastapi_routing, "run_in_threadpool", _run_inline, raising=False)
    monkeypatch.setattr(fastapi_dep_utils, "run_in_threadpool", _run_inline, raising=False)
