"""Simulation API Router.

This module provides the REST endpoint for the designer's test-run panel.
"""

from __future__ import annotations

from fastapi import APIRouter, Request

from hrflow.api.deps import (  # noqa: TC001 - Required at runtime for FastAPI
    Simulator,
    bad_request,
    check_graph_size,
)
from hrflow.core.logging import LogContext, get_logger
from hrflow.schemas.base import ErrorResponse
from hrflow.schemas.simulation import SimulationResult
from hrflow.schemas.workflow import WorkflowGraph  # noqa: TC001
from hrflow.services.workflow import GraphTooLargeError

logger = get_logger(__name__)

router = APIRouter()


@router.post(
    "/simulate",
    response_model=SimulationResult,
    response_model_exclude_none=True,
    summary="Simulate Workflow",
    description=(
        "Validate the graph and, when it has no errors, walk it from the "
        "Start node and return the visited steps."
    ),
    responses={
        200: {"description": "Simulation attempted; see success"},
        400: {"model": ErrorResponse, "description": "Graph exceeds size limits"},
        422: {"description": "Request body is not a workflow graph"},
    },
)
async def simulate(
    request: Request,
    workflow: WorkflowGraph,
    simulator: Simulator,
) -> SimulationResult:
    """Simulate a workflow graph.

    A graph with blocking findings yields ``success: false`` and the
    findings, not an HTTP error.

    Raises:
        HTTPException: 400 if the graph exceeds the configured size limits.
    """
    with LogContext(logger, action="simulate_workflow", request_path=request.url.path):
        try:
            check_graph_size(workflow)
        except GraphTooLargeError as e:
            logger.warning(
                "Simulation request rejected", extra={"context": e.details}
            )
            raise bad_request(e) from e

        return simulator.run(workflow)


__all__ = ["router"]
