"""Pydantic schemas for request/response validation.

This package contains all Pydantic models exchanged over the API.
Exports all schemas for convenient importing.
"""

# Automation schemas
from hrflow.schemas.automation import AutomatedAction

# Base schemas
from hrflow.schemas.base import BaseSchema, ErrorResponse

# Simulation schemas
from hrflow.schemas.simulation import SimulationResult, SimulationStep

# Validation schemas
from hrflow.schemas.validation import (
    FindingCode,
    ValidationFinding,
    ValidationReport,
)

# Workflow graph schemas
from hrflow.schemas.workflow import (
    ApprovalNodeData,
    AutomatedStepNodeData,
    EndNodeData,
    NodeData,
    NodeDataBase,
    Position,
    StartNodeData,
    TaskNodeData,
    WorkflowEdge,
    WorkflowGraph,
    WorkflowNode,
)

__all__ = [
    # Base
    "BaseSchema",
    "ErrorResponse",
    # Automation
    "AutomatedAction",
    # Simulation
    "SimulationResult",
    "SimulationStep",
    # Validation
    "FindingCode",
    "ValidationFinding",
    "ValidationReport",
    # Workflow
    "ApprovalNodeData",
    "AutomatedStepNodeData",
    "EndNodeData",
    "NodeData",
    "NodeDataBase",
    "Position",
    "StartNodeData",
    "TaskNodeData",
    "WorkflowEdge",
    "WorkflowGraph",
    "WorkflowNode",
]
