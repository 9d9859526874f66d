"""
Pytest configuration and fixtures for MapGate tests.

This module provides shared map graph fixtures and an async HTTP client
for testing the FastAPI endpoints without running the lifespan.
"""

import os

# Set required env vars before any app imports
os.environ.setdefault("AUTHORIZER_HASH", "test-authorizer-hash-for-unit-tests")
os.environ["VALIDATE_MAPS"] = "true"
os.environ.pop("MAP_CONFIG_PATH", None)

import pytest
import pytest_asyncio

from mapgate.config import settings
from mapgate.dal import map_config as map_config_module
from mapgate.models.map_graph import MapGraph


@pytest.fixture
def anyio_backend():
    """Specify anyio backend for async tests."""
    return "asyncio"


@pytest.fixture
def auth_headers() -> dict[str, str]:
    """Headers that mark a request as privileged."""
    return {"ed": "1", "au": settings.AUTHORIZER_HASH}


@pytest.fixture
def player_name() -> str:
    """A well-formed 64-letter username."""
    return "a" * 64


@pytest.fixture
def chain_graph() -> MapGraph:
    """A small graph with a three-hop chain, a cycle and mixing groups.

    summit -(volcano_clear)-> volcano -(canyon_clear)-> canyon
        -(tutorial_clear)-> tutorial (free)
    loop_a -(loop_x)-> loop_b -(loop_y)-> loop_a
    """
    return MapGraph.model_validate({
        "mapTokens": {
            "tutorial": "",
            "meadow": "",
            "canyon": "tutorial_clear",
            "canyon_night": "tutorial_clear",
            "volcano": "canyon_clear",
            "summit": "volcano_clear",
            "loop_a": "loop_x",
            "loop_b": "loop_y",
            "orphan": "lost_token",
        },
        "tokenMapping": {
            "tutorial_clear": "tutorial",
            "canyon_clear": "canyon",
            "volcano_clear": "volcano",
            "loop_x": "loop_b",
            "loop_y": "loop_a",
        },
        "ghostMixing": [
            ["canyon", "canyon_night"],
            ["tutorial", "meadow"],
        ],
    })


@pytest.fixture
def loaded_graph(chain_graph: MapGraph):
    """Install ``chain_graph`` as the process-wide graph for one test."""
    map_config_module.init_map_graph(chain_graph)
    yield chain_graph
    map_config_module.reset_map_graph()


@pytest.fixture
def no_graph():
    """Make sure no process-wide graph is installed."""
    map_config_module.reset_map_graph()
    yield
    map_config_module.reset_map_graph()


@pytest.fixture
def validation_disabled(monkeypatch):
    monkeypatch.setattr(settings, "VALIDATE_MAPS", False)


@pytest_asyncio.fixture
async def client():
    """Async HTTP client for testing FastAPI endpoints.

    Yields:
        AsyncClient: HTTPX async client with the FastAPI app.
    """
    from httpx import ASGITransport, AsyncClient
    from mapgate.main import app

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
