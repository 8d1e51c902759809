"""Workflow document and engine exceptions.

This module defines the errors raised around the workflow engine. Structural
defects of a well-formed graph are never exceptions; they are reported as
validation findings. Exceptions here cover documents that cannot be turned
into a graph at all, and requests the service refuses to process.
"""

from typing import Any

from hrflow.core.exceptions import AppError


class WorkflowError(AppError):
    """Base exception for workflow engine errors.

    Attributes:
        message: Human-readable error message.
        error_code: Machine-readable error code for API responses.
        details: Additional error context as dictionary.
    """

    def __init__(
        self,
        message: str,
        error_code: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, error_code=error_code, details=details)


class WorkflowFormatError(WorkflowError):
    """Raised when a workflow document cannot be loaded."""


class InvalidJSONError(WorkflowFormatError):
    """Raised when a workflow document is not valid JSON.

    Attributes:
        line: Line of the syntax error (1-based).
        column: Column of the syntax error (1-based).
    """

    def __init__(self, line: int, column: int) -> None:
        super().__init__(
            message="Invalid JSON format",
            error_code="INVALID_JSON",
            details={"line": line, "column": column},
        )
        self.line = line
        self.column = column


class InvalidWorkflowStructureError(WorkflowFormatError):
    """Raised when well-formed JSON does not describe a workflow graph.

    Attributes:
        reason: Which structural requirement failed.
        errors: Field-level problems, if any were collected.
    """

    def __init__(
        self,
        reason: str,
        errors: list[dict[str, Any]] | None = None,
    ) -> None:
        details: dict[str, Any] = {"reason": reason}
        if errors:
            details["errors"] = errors
        super().__init__(
            message=f"Invalid workflow format: {reason}",
            error_code="INVALID_WORKFLOW_STRUCTURE",
            details=details,
        )
        self.reason = reason
        self.errors = errors or []


class GraphTooLargeError(WorkflowError):
    """Raised when a submitted graph exceeds the configured size limits.

    Attributes:
        current: Current count.
        limit: Maximum allowed limit.
        metric: Type of metric (nodes, edges).
    """

    def __init__(self, current: int, limit: int, metric: str = "nodes") -> None:
        super().__init__(
            message=f"Graph too large: {current} {metric} (limit: {limit})",
            error_code="GRAPH_TOO_LARGE",
            details={"current": current, "limit": limit, "metric": metric},
        )
        self.current = current
        self.limit = limit
        self.metric = metric


class AutomationNotFoundError(WorkflowError):
    """Raised when an automated action id is not in the catalogue.

    Attributes:
        action_id: The requested action id.
    """

    def __init__(self, action_id: str) -> None:
        super().__init__(
            message=f"Automated action '{action_id}' not found",
            error_code="AUTOMATION_NOT_FOUND",
            details={"action_id": action_id},
        )
        self.action_id = action_id


__all__ = [
    "AutomationNotFoundError",
    "GraphTooLargeError",
    "InvalidJSONError",
    "InvalidWorkflowStructureError",
    "WorkflowError",
    "WorkflowFormatError",
]
