"""Pydantic schemas for workflow graphs, nodes, and edges.

This module defines the graph document exchanged with the designer:
a list of nodes (each carrying kind-specific data discriminated by
``data.type``) and a list of directed edges.

Every model keeps unknown fields verbatim so that documents produced by
newer designer versions survive a load/save cycle unchanged.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Annotated, Literal, Self

from pydantic import (
    ConfigDict,
    Field,
    NonNegativeFloat,
    NonNegativeInt,
    model_validator,
)

from hrflow.models.enums import NodeType
from hrflow.schemas.base import BaseSchema


class GraphSchema(BaseSchema):
    """Base schema for graph documents. Unknown fields are preserved."""

    model_config = ConfigDict(extra="allow")


class Position(GraphSchema):
    """Canvas coordinates of a node."""

    x: int | float = Field(default=0.0, description="Horizontal canvas coordinate")
    y: int | float = Field(default=0.0, description="Vertical canvas coordinate")


# =============================================================================
# Node Data (one model per node kind)
# =============================================================================


class NodeDataBase(GraphSchema):
    """Fields shared by every node kind."""

    id: str | None = Field(
        default=None,
        description="Echo of the owning node id",
        examples=["node-1"],
    )
    label: str = Field(
        default="",
        description="Display label shown on the canvas",
        examples=["Collect documents"],
    )


class StartNodeData(NodeDataBase):
    """Entry point of a workflow."""

    type: Literal["start"] = "start"
    title: str = ""
    metadata: dict[str, str] = Field(default_factory=dict)


class TaskNodeData(NodeDataBase):
    """Manual task assigned to a person."""

    type: Literal["task"] = "task"
    title: str = ""
    description: str = ""
    assignee: str = ""
    due_date: str = Field(default="", examples=["2025-03-01"])
    custom_fields: dict[str, str] = Field(default_factory=dict)


class ApprovalNodeData(NodeDataBase):
    """Approval gate handled by a role."""

    type: Literal["approval"] = "approval"
    title: str = ""
    approver_role: str = Field(default="", examples=["Manager"])
    auto_approve_threshold: NonNegativeInt | NonNegativeFloat = 0


class AutomatedStepNodeData(NodeDataBase):
    """Step executed by an automated action from the catalogue."""

    type: Literal["automatedStep"] = "automatedStep"
    title: str = ""
    action_id: str = Field(default="", examples=["send_email"])
    action_label: str = Field(default="", examples=["Send Email"])
    parameters: dict[str, str] = Field(default_factory=dict)


class EndNodeData(NodeDataBase):
    """Terminal node of a workflow."""

    type: Literal["end"] = "end"
    end_message: str = ""
    show_summary: bool = False


NodeData = Annotated[
    StartNodeData
    | TaskNodeData
    | ApprovalNodeData
    | AutomatedStepNodeData
    | EndNodeData,
    Field(discriminator="type"),
]


# =============================================================================
# Graph Elements
# =============================================================================


class WorkflowNode(GraphSchema):
    """A node placed on the designer canvas."""

    id: str = Field(
        ...,
        min_length=1,
        description="Unique node identifier",
        examples=["node-1"],
    )
    type: str = Field(
        ...,
        min_length=1,
        description="Renderer node type (usually equal to the data kind)",
        examples=["task"],
    )
    position: Position = Field(..., description="Canvas position")
    data: NodeData = Field(..., description="Kind-specific node attributes")

    @property
    def kind(self) -> NodeType:
        """Node kind taken from the data discriminant."""
        return NodeType(self.data.type)

    @property
    def display_name(self) -> str:
        """Label used in messages; falls back to the id when unlabeled."""
        return self.data.label or self.id


class WorkflowEdge(GraphSchema):
    """A directed connection between two nodes."""

    id: str = Field(
        ...,
        min_length=1,
        description="Unique edge identifier",
        examples=["edge-1"],
    )
    source: str = Field(..., min_length=1, description="Source node id")
    target: str = Field(..., min_length=1, description="Target node id")
    type: str | None = Field(
        default=None,
        description="Optional renderer edge type",
        examples=["smoothstep"],
    )


class WorkflowGraph(GraphSchema):
    """A complete workflow document.

    Node ids and edge ids must be unique within the document; duplicates
    are rejected here so the engine never has to pick between them.
    """

    nodes: list[WorkflowNode] = Field(..., description="Nodes in display order")
    edges: list[WorkflowEdge] = Field(..., description="Edges in insertion order")

    @model_validator(mode="after")
    def validate_unique_ids(self) -> Self:
        """Ensure node ids and edge ids are unique."""
        duplicate_nodes = _duplicates(node.id for node in self.nodes)
        if duplicate_nodes:
            raise ValueError(f"Duplicate node ids: {', '.join(duplicate_nodes)}")

        duplicate_edges = _duplicates(edge.id for edge in self.edges)
        if duplicate_edges:
            raise ValueError(f"Duplicate edge ids: {', '.join(duplicate_edges)}")
        return self


def _duplicates(ids: Iterable[str]) -> list[str]:
    seen: set[str] = set()
    repeated: list[str] = []
    for item in ids:
        if item in seen and item not in repeated:
            repeated.append(item)
        seen.add(item)
    return repeated


__all__ = [
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
