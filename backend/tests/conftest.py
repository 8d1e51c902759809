"""pytest configuration and fixtures.

This module provides the HTTP client fixture for API tests and small
builders for workflow graphs shared by the engine and API test suites.
"""

from collections.abc import AsyncGenerator
from typing import Any, cast

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from starlette.types import ASGIApp

# Import app (required for async_client fixture)
from hrflow.main import app
from hrflow.schemas.workflow import WorkflowGraph

# =============================================================================
# PYTEST CONFIGURATION
# =============================================================================


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers",
        "slow: marks tests as slow (deselect with '-m \"not slow\"')",
    )
    config.addinivalue_line(
        "markers",
        "asyncio: marks tests as async (pytest-asyncio)",
    )


# =============================================================================
# GRAPH BUILDERS
# =============================================================================


def make_node(
    node_id: str,
    kind: str,
    label: str | None = None,
    **data: Any,
) -> dict[str, Any]:
    """Build a wire-format node dict of the given kind."""
    return {
        "id": node_id,
        "type": kind,
        "position": {"x": 0, "y": 0},
        "data": {
            "id": node_id,
            "type": kind,
            "label": node_id.title() if label is None else label,
            **data,
        },
    }


def make_edge(source: str, target: str, edge_id: str | None = None) -> dict[str, Any]:
    """Build a wire-format edge dict."""
    return {
        "id": edge_id or f"e-{source}-{target}",
        "source": source,
        "target": target,
    }


def make_graph(
    nodes: list[dict[str, Any]],
    edges: list[dict[str, Any]] | None = None,
) -> WorkflowGraph:
    """Validate node and edge dicts into a WorkflowGraph."""
    return WorkflowGraph.model_validate({"nodes": nodes, "edges": edges or []})


# =============================================================================
# HTTP CLIENT FIXTURES
# =============================================================================


@pytest_asyncio.fixture(scope="function")
async def async_client() -> AsyncGenerator[AsyncClient]:
    """Async HTTP client for testing API endpoints.

    Uses ASGI transport to test the FastAPI app without running a server.

    Yields:
        AsyncClient: HTTP client configured for testing.

    Example:
        async def test_status(async_client):
            response = await async_client.get("/api/v1/status")
            assert response.status_code == 200
    """
    try:
        transport = ASGITransport(app=cast("ASGIApp", app))
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            yield client
    finally:
        app.dependency_overrides.clear()


# =============================================================================
# SAMPLE DATA FIXTURES
# =============================================================================


@pytest.fixture
def onboarding_payload() -> dict[str, Any]:
    """A valid onboarding workflow in wire format.

    start -> collect (task) -> approve (approval) -> welcome (automated) -> end
    """
    return {
        "nodes": [
            make_node("start", "start", "Start", title="Onboarding"),
            make_node(
                "collect",
                "task",
                "Collect Documents",
                assignee="hr@example.com",
                dueDate="2025-03-01",
                customFields={"team": "platform"},
            ),
            make_node("approve", "approval", "Manager Approval", approverRole="Manager"),
            make_node(
                "welcome",
                "automatedStep",
                "Welcome Email",
                actionId="send_email",
                actionLabel="Send Email",
                parameters={"to": "new.hire@example.com"},
            ),
            make_node("end", "end", "Done", endMessage="Welcome aboard", showSummary=True),
        ],
        "edges": [
            make_edge("start", "collect"),
            make_edge("collect", "approve"),
            make_edge("approve", "welcome"),
            make_edge("welcome", "end"),
        ],
    }


@pytest.fixture
def onboarding_workflow(onboarding_payload: dict[str, Any]) -> WorkflowGraph:
    """The onboarding workflow as a validated WorkflowGraph."""
    return WorkflowGraph.model_validate(onboarding_payload)


@pytest.fixture
def cyclic_payload() -> dict[str, Any]:
    """A workflow whose task and approval nodes form a cycle."""
    return {
        "nodes": [
            make_node("start", "start"),
            make_node("task", "task"),
            make_node("approval", "approval"),
            make_node("end", "end"),
        ],
        "edges": [
            make_edge("start", "task"),
            make_edge("task", "approval"),
            make_edge("approval", "task"),
            make_edge("approval", "end"),
        ],
    }
