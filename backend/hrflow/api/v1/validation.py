"""Validation API Router.

This module provides the REST endpoint that runs the structural checks
over a workflow graph sent by the designer. Nothing is stored.
"""

from __future__ import annotations

from fastapi import APIRouter

from hrflow.api.deps import (  # noqa: TC001 - Required at runtime for FastAPI
    Validator,
    bad_request,
    check_graph_size,
)
from hrflow.schemas.base import ErrorResponse
from hrflow.schemas.validation import ValidationReport
from hrflow.schemas.workflow import WorkflowGraph  # noqa: TC001
from hrflow.services.workflow import GraphTooLargeError

router = APIRouter(prefix="/validation")


@router.post(
    "/validate",
    response_model=ValidationReport,
    response_model_exclude_none=True,
    summary="Validate Workflow Graph",
    description="Run every structural check and return the findings by severity.",
    responses={
        200: {"description": "Validation completed"},
        400: {"model": ErrorResponse, "description": "Graph exceeds size limits"},
        422: {"description": "Request body is not a workflow graph"},
    },
)
async def validate_graph(
    workflow: WorkflowGraph,
    validator: Validator,
) -> ValidationReport:
    """Validate a workflow graph.

    Structural defects are not request errors: a cyclic graph still gets a
    200 response with ``isValid: false``.

    Raises:
        HTTPException: 400 if the graph exceeds the configured size limits.
    """
    try:
        check_graph_size(workflow)
    except GraphTooLargeError as e:
        raise bad_request(e) from e

    return validator.build_report(workflow)


__all__ = ["router"]
