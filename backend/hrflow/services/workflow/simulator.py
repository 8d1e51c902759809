"""Mock execution of validated workflow graphs.

The simulator replays a workflow as an ordered trace without running
anything: it validates first, refuses to walk a graph with blocking
findings, and otherwise visits nodes depth-first in pre-order from the
first Start node, following outgoing edges in insertion order.

A graph with errors is not an exception: the result comes back with
``success=False``, no steps and every finding.
"""

from __future__ import annotations

import logging
import time
from datetime import UTC, datetime

from hrflow.models.enums import NodeType, StepStatus
from hrflow.schemas.simulation import SimulationResult, SimulationStep
from hrflow.schemas.workflow import WorkflowGraph, WorkflowNode
from hrflow.services.workflow.algorithms import GraphAlgorithms
from hrflow.services.workflow.graph import Graph
from hrflow.services.workflow.validator import WorkflowValidator

logger = logging.getLogger(__name__)


class WorkflowSimulator:
    """Validate-then-walk simulator.

    Attributes:
        validator: Validator consulted before every walk.

    Example:
        >>> simulator = WorkflowSimulator()
        >>> result = simulator.run(graph)
        >>> [step.node_id for step in result.steps]
        ['start', 'review', 'end']
    """

    def __init__(self, validator: WorkflowValidator | None = None) -> None:
        self.validator = validator or WorkflowValidator()

    def run(self, workflow: WorkflowGraph) -> SimulationResult:
        """Simulate a workflow.

        Args:
            workflow: The workflow graph to simulate.

        Returns:
            SimulationResult. ``findings`` holds every finding when the walk
            was refused and only warnings when it ran.
        """
        findings = self.validator.validate(workflow)
        blocking = [f for f in findings if f.is_blocking]

        if blocking:
            logger.info(
                "Simulation refused: workflow has blocking findings",
                extra={
                    "context": {
                        "action": "simulate_workflow",
                        "errors": len(blocking),
                        "codes": [f.code for f in blocking],
                    }
                },
            )
            return SimulationResult(
                success=False,
                steps=[],
                findings=findings,
                elapsed_ms=0.0,
            )

        started = time.perf_counter()
        steps = self._walk(workflow)
        elapsed_ms = (time.perf_counter() - started) * 1000

        logger.info(
            "Simulation completed",
            extra={
                "context": {
                    "action": "simulate_workflow",
                    "steps": len(steps),
                    "warnings": len(findings),
                    "elapsed_ms": elapsed_ms,
                }
            },
        )
        return SimulationResult(
            success=True,
            steps=steps,
            findings=findings,
            elapsed_ms=elapsed_ms,
        )

    def _walk(self, workflow: WorkflowGraph) -> list[SimulationStep]:
        """Pre-order walk from the first Start node.

        Other Start nodes never seed the walk. Edge targets that are not
        nodes of the workflow are skipped.
        """
        start = next(
            (node for node in workflow.nodes if node.kind == NodeType.START),
            None,
        )
        if start is None:
            return []

        nodes_by_id = {node.id: node for node in workflow.nodes}
        graph = Graph[str]()
        for node in workflow.nodes:
            graph.add_node(node.id)
        for edge in workflow.edges:
            if edge.source in nodes_by_id and edge.target in nodes_by_id:
                graph.add_edge(edge.source, edge.target)

        return [
            _completed_step(nodes_by_id[node_id])
            for node_id in GraphAlgorithms.preorder(graph, start.id)
        ]


def _completed_step(node: WorkflowNode) -> SimulationStep:
    return SimulationStep(
        node_id=node.id,
        node_kind=node.kind,
        node_label=node.data.label,
        status=StepStatus.COMPLETED,
        timestamp=datetime.now(UTC),
        details=f"Executed {node.kind} node: {node.display_name}",
    )


def simulate_workflow(workflow: WorkflowGraph) -> SimulationResult:
    """Simulate a workflow graph with a default simulator."""
    return WorkflowSimulator().run(workflow)


__all__ = [
    "WorkflowSimulator",
    "simulate_workflow",
]
