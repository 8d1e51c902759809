"""Workflow Document API Router.

This module provides import and export of workflow documents as JSON.
Import parses raw text so malformed JSON and non-workflow JSON can be
reported as distinct errors; export returns a downloadable attachment.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Query, Request, Response

from hrflow.api.deps import bad_request, check_graph_size
from hrflow.core.logging import LogContext, get_logger
from hrflow.schemas.base import ErrorResponse
from hrflow.schemas.workflow import WorkflowGraph
from hrflow.services.workflow import (
    GraphTooLargeError,
    WorkflowFormatError,
    deserialize_workflow,
    export_filename,
    serialize_workflow,
)

logger = get_logger(__name__)

router = APIRouter()


@router.post(
    "/import",
    response_model=WorkflowGraph,
    response_model_exclude_unset=True,
    summary="Import workflow document",
    description="Parse a JSON workflow document and return the loaded graph.",
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {"application/json": {"schema": {"type": "object"}}},
        }
    },
    responses={
        400: {
            "model": ErrorResponse,
            "description": "Invalid JSON or not a workflow document",
        },
    },
)
async def import_workflow(request: Request) -> WorkflowGraph:
    """Load a workflow document from the raw request body.

    Raises:
        HTTPException: 400 with ``INVALID_JSON`` when the body is not JSON,
            ``INVALID_WORKFLOW_STRUCTURE`` when it is not a workflow graph,
            or ``GRAPH_TOO_LARGE`` when it exceeds the size limits.
    """
    body = await request.body()

    with LogContext(logger, action="import_workflow", request_path=request.url.path):
        try:
            workflow = deserialize_workflow(body)
            check_graph_size(workflow)
        except (WorkflowFormatError, GraphTooLargeError) as e:
            raise bad_request(e) from e

        logger.info(
            "Workflow imported",
            extra={
                "context": {
                    "node_count": len(workflow.nodes),
                    "edge_count": len(workflow.edges),
                }
            },
        )
        return workflow


@router.post(
    "/export",
    response_class=Response,
    summary="Export workflow document",
    description="Serialize a workflow graph as a downloadable JSON file.",
    responses={
        200: {
            "content": {"application/json": {}},
            "description": "Workflow document attachment",
        },
        400: {"model": ErrorResponse, "description": "Graph exceeds size limits"},
    },
)
async def export_workflow(
    workflow: WorkflowGraph,
    filename: Annotated[
        str | None,
        Query(description="Download filename; .json is appended if missing"),
    ] = None,
) -> Response:
    """Export a workflow graph as a JSON attachment.

    Raises:
        HTTPException: 400 if the graph exceeds the configured size limits.
    """
    try:
        check_graph_size(workflow)
    except GraphTooLargeError as e:
        raise bad_request(e) from e

    name = export_filename(filename)
    return Response(
        content=serialize_workflow(workflow),
        media_type="application/json",
        headers={"Content-Disposition": f'attachment; filename="{name}"'},
    )


__all__ = ["router"]
