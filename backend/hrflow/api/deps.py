"""API dependencies.

Shared dependencies for API routes: engine services and request
size limits for submitted graphs.
"""

from typing import Annotated

from fastapi import Depends, HTTPException, status

from hrflow.core.config import settings
from hrflow.schemas.base import ErrorResponse
from hrflow.schemas.workflow import WorkflowGraph
from hrflow.services.automation_service import AutomationService
from hrflow.services.workflow import (
    GraphTooLargeError,
    WorkflowError,
    WorkflowSimulator,
    WorkflowValidator,
)

# =============================================================================
# Engine Dependencies
# =============================================================================

# The engine is stateless, so one instance of each service serves every request.
_validator = WorkflowValidator()
_simulator = WorkflowSimulator(_validator)
_automation_service = AutomationService()


def get_validator() -> WorkflowValidator:
    """Get the shared workflow validator."""
    return _validator


def get_simulator() -> WorkflowSimulator:
    """Get the shared workflow simulator."""
    return _simulator


def get_automation_service() -> AutomationService:
    """Get the automated action catalogue."""
    return _automation_service


Validator = Annotated[WorkflowValidator, Depends(get_validator)]
"""Type alias for validator dependency injection.

Usage:
    @router.post("/validate")
    async def validate(graph: WorkflowGraph, validator: Validator):
        return validator.build_report(graph)
"""

Simulator = Annotated[WorkflowSimulator, Depends(get_simulator)]
"""Type alias for simulator dependency injection."""

Automations = Annotated[AutomationService, Depends(get_automation_service)]
"""Type alias for automation catalogue dependency injection."""


# =============================================================================
# Request Limits
# =============================================================================


def check_graph_size(workflow: WorkflowGraph) -> None:
    """Reject graphs larger than the configured limits.

    Raises:
        GraphTooLargeError: If the node or edge count exceeds its limit.
    """
    if len(workflow.nodes) > settings.MAX_GRAPH_NODES:
        raise GraphTooLargeError(
            current=len(workflow.nodes),
            limit=settings.MAX_GRAPH_NODES,
            metric="nodes",
        )
    if len(workflow.edges) > settings.MAX_GRAPH_EDGES:
        raise GraphTooLargeError(
            current=len(workflow.edges),
            limit=settings.MAX_GRAPH_EDGES,
            metric="edges",
        )


def error_detail(error: WorkflowError) -> dict:
    """Build the error envelope used as HTTPException detail."""
    return ErrorResponse(
        error=error.error_code,
        message=error.message,
        details=error.details or None,
    ).model_dump()


def bad_request(error: WorkflowError) -> HTTPException:
    """Map a workflow error to a 400 response."""
    return HTTPException(
        status_code=status.HTTP_400_BAD_REQUEST,
        detail=error_detail(error),
    )


__all__ = [
    "Automations",
    "Simulator",
    "Validator",
    "bad_request",
    "check_graph_size",
    "error_detail",
    "get_automation_service",
    "get_simulator",
    "get_validator",
]
