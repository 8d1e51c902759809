"""Structural validation service for workflow graphs.

This module provides the WorkflowValidator, a stateless analyzer that runs
six independent checks over a workflow graph and returns their findings
concatenated in a fixed order:

1. Start-node presence (error)
2. Multiple start nodes (warning, one per start node)
3. Cycle detection (error, at most one)
4. End-node egress (error, one per offending end node)
5. Disconnection (warning, at most one; needs a start node)
6. Incomplete paths (warning, one per non-end node without outgoing edges)

Findings are return values. The validator never raises for a graph that
passed schema validation and never mutates its input.
"""

import logging

from hrflow.models.enums import NodeType, Severity
from hrflow.schemas.validation import (
    FindingCode,
    ValidationFinding,
    ValidationReport,
)
from hrflow.schemas.workflow import WorkflowGraph, WorkflowNode
from hrflow.services.workflow.algorithms import GraphAlgorithms
from hrflow.services.workflow.graph import Graph

logger = logging.getLogger(__name__)

NO_START_NODE_MESSAGE = "Workflow must contain at least one Start Node"
MULTIPLE_START_NODES_MESSAGE = (
    "Multiple Start Nodes detected. Only one Start Node is recommended"
)
CYCLE_MESSAGE = "Workflow contains cycles. Cyclic workflows are not supported"
END_NODE_OUTGOING_MESSAGE = "End Node cannot have outgoing connections"


class WorkflowValidator:
    """Stateless structural validator for workflow graphs.

    A single instance may be shared across threads and requests.

    Example:
        >>> validator = WorkflowValidator()
        >>> findings = validator.validate(graph)
        >>> report = validator.build_report(graph)
        >>> report.is_valid
        True
    """

    def validate(self, workflow: WorkflowGraph) -> list[ValidationFinding]:
        """Run every check and return the findings in check order.

        Args:
            workflow: The workflow graph to inspect.

        Returns:
            List of findings; empty when the graph has no defects.
        """
        graph = Graph.from_workflow(workflow)
        start_nodes = _nodes_of_kind(workflow, NodeType.START)

        findings: list[ValidationFinding] = []
        findings.extend(self._check_start_node(start_nodes))
        findings.extend(self._check_multiple_start_nodes(start_nodes))
        findings.extend(self._check_cycles(graph))
        findings.extend(self._check_end_nodes(workflow, graph))
        findings.extend(self._check_disconnected(workflow, graph, start_nodes))
        findings.extend(self._check_incomplete_paths(workflow, graph))

        logger.debug(
            "Workflow validated",
            extra={
                "context": {
                    "action": "validate_workflow",
                    "node_count": len(workflow.nodes),
                    "edge_count": len(workflow.edges),
                    "errors": sum(1 for f in findings if f.is_blocking),
                    "warnings": sum(1 for f in findings if not f.is_blocking),
                }
            },
        )
        return findings

    def build_report(self, workflow: WorkflowGraph) -> ValidationReport:
        """Validate and split findings into errors and warnings."""
        return ValidationReport.from_findings(self.validate(workflow))

    # ==========================================================================
    # Checks
    # ==========================================================================

    def _check_start_node(
        self, start_nodes: list[WorkflowNode]
    ) -> list[ValidationFinding]:
        if start_nodes:
            return []
        return [
            ValidationFinding(
                code=FindingCode.NO_START_NODE,
                message=NO_START_NODE_MESSAGE,
                severity=Severity.ERROR,
            )
        ]

    def _check_multiple_start_nodes(
        self, start_nodes: list[WorkflowNode]
    ) -> list[ValidationFinding]:
        if len(start_nodes) <= 1:
            return []
        return [
            ValidationFinding(
                node_id=node.id,
                code=FindingCode.MULTIPLE_START_NODES,
                message=MULTIPLE_START_NODES_MESSAGE,
                severity=Severity.WARNING,
            )
            for node in start_nodes
        ]

    def _check_cycles(self, graph: Graph[str]) -> list[ValidationFinding]:
        """One finding regardless of how many cycles exist."""
        cycle = GraphAlgorithms.detect_cycle(graph)
        if cycle is None:
            return []

        logger.debug(
            "Cycle detected",
            extra={"context": {"action": "validate_workflow", "cycle_path": cycle}},
        )
        return [
            ValidationFinding(
                code=FindingCode.CYCLE_DETECTED,
                message=CYCLE_MESSAGE,
                severity=Severity.ERROR,
            )
        ]

    def _check_end_nodes(
        self, workflow: WorkflowGraph, graph: Graph[str]
    ) -> list[ValidationFinding]:
        return [
            ValidationFinding(
                node_id=node.id,
                code=FindingCode.END_NODE_HAS_OUTGOING,
                message=END_NODE_OUTGOING_MESSAGE,
                severity=Severity.ERROR,
            )
            for node in _nodes_of_kind(workflow, NodeType.END)
            if graph.get_out_degree(node.id) > 0
        ]

    def _check_disconnected(
        self,
        workflow: WorkflowGraph,
        graph: Graph[str],
        start_nodes: list[WorkflowNode],
    ) -> list[ValidationFinding]:
        """Nodes off every start-to-end path.

        Skipped without a start node; the start-node check already reports
        that case.
        """
        if not start_nodes:
            return []

        from_start = GraphAlgorithms.reachable_from(graph, (n.id for n in start_nodes))
        to_end = GraphAlgorithms.reaching(
            graph, (n.id for n in _nodes_of_kind(workflow, NodeType.END))
        )

        disconnected = [
            node
            for node in workflow.nodes
            if node.id not in from_start or node.id not in to_end
        ]
        if not disconnected:
            return []

        names = ", ".join(node.display_name for node in disconnected)
        return [
            ValidationFinding(
                code=FindingCode.DISCONNECTED_NODES,
                message=f"Disconnected nodes detected: {names}",
                severity=Severity.WARNING,
            )
        ]

    def _check_incomplete_paths(
        self, workflow: WorkflowGraph, graph: Graph[str]
    ) -> list[ValidationFinding]:
        return [
            ValidationFinding(
                node_id=node.id,
                code=FindingCode.INCOMPLETE_PATH,
                message=(
                    f'Node "{node.display_name}" has no outgoing connections '
                    "and is not an End Node"
                ),
                severity=Severity.WARNING,
            )
            for node in workflow.nodes
            if node.kind != NodeType.END and graph.get_out_degree(node.id) == 0
        ]


def _nodes_of_kind(workflow: WorkflowGraph, kind: NodeType) -> list[WorkflowNode]:
    return [node for node in workflow.nodes if node.kind == kind]


def validate_workflow(workflow: WorkflowGraph) -> list[ValidationFinding]:
    """Validate a workflow graph with a default validator."""
    return WorkflowValidator().validate(workflow)


__all__ = [
    "WorkflowValidator",
    "validate_workflow",
]
