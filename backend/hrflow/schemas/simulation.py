"""Pydantic schemas for workflow simulation results."""

from __future__ import annotations

from datetime import datetime  # noqa: TC003 - Required at runtime for Pydantic

from pydantic import Field

from hrflow.models.enums import NodeType, StepStatus
from hrflow.schemas.base import BaseSchema
from hrflow.schemas.validation import ValidationFinding


class SimulationStep(BaseSchema):
    """One visited node in a simulation trace."""

    node_id: str = Field(..., description="Visited node id")
    node_kind: NodeType = Field(..., description="Kind of the visited node")
    node_label: str = Field(..., description="Label of the visited node")
    status: StepStatus = Field(
        default=StepStatus.COMPLETED,
        description="Step status; the simulator only produces completed",
    )
    timestamp: datetime = Field(..., description="UTC time of the visit")
    details: str | None = Field(
        default=None,
        description="What the step did",
        examples=["Executed task node: Collect documents"],
    )


class SimulationResult(BaseSchema):
    """Outcome of simulating a workflow.

    When validation reports any error, ``success`` is false, ``steps`` is
    empty, ``findings`` carries every finding and ``elapsed_ms`` is 0.
    Otherwise ``findings`` carries the warnings only.
    """

    success: bool = Field(..., description="Whether the walk was performed")
    steps: list[SimulationStep] = Field(
        default_factory=list,
        description="Visited nodes in pre-order",
    )
    findings: list[ValidationFinding] = Field(
        default_factory=list,
        description="Validation findings reported with the result",
    )
    elapsed_ms: float = Field(
        default=0.0,
        ge=0.0,
        description="Wall-clock duration of the walk in milliseconds",
    )


__all__ = [
    "SimulationResult",
    "SimulationStep",
]
