"""Tests for WorkflowValidator.

Covers each structural check in isolation, the fixed order in which
findings are reported, and the report built from them.
"""

from typing import Any

import pytest
from conftest import make_edge, make_graph, make_node

from hrflow.schemas.validation import FindingCode
from hrflow.schemas.workflow import WorkflowGraph
from hrflow.services.workflow.validator import WorkflowValidator, validate_workflow


@pytest.fixture
def validator() -> WorkflowValidator:
    """Create a validator."""
    return WorkflowValidator()


def codes(findings) -> list[str]:
    return [f.code for f in findings]


class TestValidWorkflows:
    """Graphs with no structural defects."""

    def test_minimal_valid_graph(self, validator: WorkflowValidator) -> None:
        """Test that start -> end produces no findings."""
        workflow = make_graph(
            [make_node("s", "start"), make_node("e", "end")],
            [make_edge("s", "e")],
        )
        assert validator.validate(workflow) == []

    def test_onboarding_workflow(
        self, validator: WorkflowValidator, onboarding_workflow: WorkflowGraph
    ) -> None:
        """Test a linear workflow through every node kind."""
        assert validator.validate(onboarding_workflow) == []

    def test_branches_rejoining(self, validator: WorkflowValidator) -> None:
        """Test that a diamond is neither a cycle nor disconnected."""
        workflow = make_graph(
            [
                make_node("s", "start"),
                make_node("a", "task"),
                make_node("b", "approval"),
                make_node("e", "end"),
            ],
            [
                make_edge("s", "a"),
                make_edge("s", "b"),
                make_edge("a", "e"),
                make_edge("b", "e"),
            ],
        )
        assert validator.validate(workflow) == []


class TestStartNodeCheck:
    """Start-node presence."""

    def test_empty_graph(self, validator: WorkflowValidator) -> None:
        """Test that an empty graph reports exactly one missing-start error."""
        findings = validator.validate(make_graph([]))

        assert len(findings) == 1
        finding = findings[0]
        assert finding.code == FindingCode.NO_START_NODE
        assert finding.severity == "error"
        assert finding.message == "Workflow must contain at least one Start Node"
        assert finding.node_id is None
        assert finding.edge_id is None

    def test_missing_start_skips_disconnection(self, validator: WorkflowValidator) -> None:
        """Test that only the start error and the incomplete-path warning appear."""
        workflow = make_graph([make_node("t", "task"), make_node("e", "end")])
        assert codes(validator.validate(workflow)) == [
            FindingCode.NO_START_NODE,
            FindingCode.INCOMPLETE_PATH,
        ]


class TestMultipleStartNodesCheck:
    """Multiple start nodes."""

    def test_one_warning_per_start_node(self, validator: WorkflowValidator) -> None:
        """Test that each start node gets its own warning, in node order."""
        workflow = make_graph(
            [make_node("s1", "start"), make_node("s2", "start"), make_node("e", "end")],
            [make_edge("s1", "e"), make_edge("s2", "e")],
        )
        findings = validator.validate(workflow)

        assert codes(findings) == [
            FindingCode.MULTIPLE_START_NODES,
            FindingCode.MULTIPLE_START_NODES,
        ]
        assert [f.node_id for f in findings] == ["s1", "s2"]
        assert all(f.severity == "warning" for f in findings)
        assert findings[0].message == (
            "Multiple Start Nodes detected. Only one Start Node is recommended"
        )


class TestCycleCheck:
    """Cycle detection."""

    def test_cycle_is_single_error(
        self, validator: WorkflowValidator, cyclic_payload: dict[str, Any]
    ) -> None:
        """Test that a cycle yields one graph-level error."""
        findings = validator.validate(WorkflowGraph.model_validate(cyclic_payload))

        assert codes(findings) == [FindingCode.CYCLE_DETECTED]
        assert findings[0].message == (
            "Workflow contains cycles. Cyclic workflows are not supported"
        )
        assert findings[0].node_id is None

    def test_two_cycles_one_finding(self, validator: WorkflowValidator) -> None:
        """Test that the cycle check reports at most once."""
        workflow = make_graph(
            [
                make_node("s", "start"),
                make_node("a", "task"),
                make_node("b", "task"),
                make_node("e", "end"),
            ],
            [
                make_edge("s", "a"),
                make_edge("a", "a", "loop-a"),
                make_edge("a", "b"),
                make_edge("b", "b", "loop-b"),
                make_edge("b", "e"),
            ],
        )
        assert codes(validator.validate(workflow)).count(FindingCode.CYCLE_DETECTED) == 1

    def test_self_loop_on_task(self, validator: WorkflowValidator) -> None:
        """Test that a self-loop is a cycle and not an incomplete path."""
        workflow = make_graph(
            [make_node("s", "start"), make_node("a", "task"), make_node("e", "end")],
            [make_edge("s", "a"), make_edge("a", "a"), make_edge("a", "e")],
        )
        assert codes(validator.validate(workflow)) == [FindingCode.CYCLE_DETECTED]

    def test_cycle_through_unknown_node(self, validator: WorkflowValidator) -> None:
        """Test that edges to unknown ids still take part in cycle detection."""
        workflow = make_graph(
            [make_node("s", "start"), make_node("a", "task"), make_node("e", "end")],
            [
                make_edge("s", "a"),
                make_edge("a", "ghost"),
                make_edge("ghost", "a"),
                make_edge("a", "e"),
            ],
        )
        assert FindingCode.CYCLE_DETECTED in codes(validator.validate(workflow))


class TestEndNodeCheck:
    """End-node egress."""

    def test_end_with_outgoing_edge(self, validator: WorkflowValidator) -> None:
        """Test that an end node with an outgoing edge is an error on that node."""
        workflow = make_graph(
            [
                make_node("s", "start"),
                make_node("e1", "end"),
                make_node("e2", "end"),
            ],
            [make_edge("s", "e1"), make_edge("e1", "e2")],
        )
        findings = validator.validate(workflow)

        assert codes(findings) == [FindingCode.END_NODE_HAS_OUTGOING]
        assert findings[0].node_id == "e1"
        assert findings[0].severity == "error"
        assert findings[0].message == "End Node cannot have outgoing connections"


class TestDisconnectedCheck:
    """Nodes that are not on a start-to-end path."""

    def test_single_warning_listing_nodes(self, validator: WorkflowValidator) -> None:
        """Test that all disconnected nodes are named in one warning."""
        workflow = make_graph(
            [
                make_node("s", "start"),
                make_node("e", "end"),
                make_node("lost", "task", "Lost Task"),
                make_node("orphan", "approval", ""),
            ],
            [
                make_edge("s", "e"),
                make_edge("lost", "e"),
                make_edge("orphan", "e"),
            ],
        )
        findings = validator.validate(workflow)

        assert codes(findings) == [FindingCode.DISCONNECTED_NODES]
        assert findings[0].severity == "warning"
        assert findings[0].node_id is None
        # Unlabeled nodes are named by id
        assert findings[0].message == "Disconnected nodes detected: Lost Task, orphan"

    def test_reachable_dead_end(self, validator: WorkflowValidator) -> None:
        """Test that a reachable node with no path to an end is disconnected."""
        workflow = make_graph(
            [make_node("s", "start"), make_node("t", "task"), make_node("e", "end")],
            [make_edge("s", "t"), make_edge("s", "e")],
        )
        assert codes(validator.validate(workflow)) == [
            FindingCode.DISCONNECTED_NODES,
            FindingCode.INCOMPLETE_PATH,
        ]

    def test_no_end_node_disconnects_everything(self, validator: WorkflowValidator) -> None:
        """Test that without an end node every node is disconnected."""
        workflow = make_graph(
            [make_node("s", "start"), make_node("t", "task")],
            [make_edge("s", "t")],
        )
        findings = validator.validate(workflow)

        assert codes(findings) == [
            FindingCode.DISCONNECTED_NODES,
            FindingCode.INCOMPLETE_PATH,
        ]
        assert findings[0].message == "Disconnected nodes detected: S, T"


class TestIncompletePathCheck:
    """Non-end nodes without outgoing edges."""

    def test_dangling_task(self, validator: WorkflowValidator) -> None:
        """Test the per-node warning and its message."""
        workflow = make_graph(
            [
                make_node("s", "start"),
                make_node("t", "task", "Review"),
                make_node("e", "end"),
            ],
            [make_edge("s", "t"), make_edge("s", "e")],
        )
        findings = validator.validate(workflow)
        incomplete = [f for f in findings if f.code == FindingCode.INCOMPLETE_PATH]

        assert len(incomplete) == 1
        assert incomplete[0].node_id == "t"
        assert incomplete[0].message == (
            'Node "Review" has no outgoing connections and is not an End Node'
        )

    def test_lone_start(self, validator: WorkflowValidator) -> None:
        """Test a graph with only a start node."""
        findings = validator.validate(make_graph([make_node("s", "start", "")]))

        assert codes(findings) == [
            FindingCode.DISCONNECTED_NODES,
            FindingCode.INCOMPLETE_PATH,
        ]
        assert findings[1].message == (
            'Node "s" has no outgoing connections and is not an End Node'
        )

    def test_edge_to_unknown_node_counts_as_outgoing(
        self, validator: WorkflowValidator
    ) -> None:
        """Test that a dangling edge target still counts for out-degree."""
        workflow = make_graph(
            [make_node("s", "start"), make_node("t", "task"), make_node("e", "end")],
            [make_edge("s", "t"), make_edge("t", "ghost"), make_edge("t", "e")],
        )
        assert validator.validate(workflow) == []


class TestFindingOrder:
    """Findings come back grouped by check, in check order."""

    def test_all_checks_fire_in_order(self, validator: WorkflowValidator) -> None:
        """Test a graph that trips every check."""
        workflow = make_graph(
            [
                make_node("s1", "start"),
                make_node("s2", "start"),
                make_node("a", "task"),
                make_node("b", "task"),
                make_node("e", "end"),
                make_node("x", "task"),
            ],
            [
                make_edge("s1", "a"),
                make_edge("a", "b"),
                make_edge("b", "a"),
                make_edge("s2", "e"),
                make_edge("e", "s1"),
            ],
        )
        assert codes(validator.validate(workflow)) == [
            FindingCode.MULTIPLE_START_NODES,
            FindingCode.MULTIPLE_START_NODES,
            FindingCode.CYCLE_DETECTED,
            FindingCode.END_NODE_HAS_OUTGOING,
            FindingCode.DISCONNECTED_NODES,
            FindingCode.INCOMPLETE_PATH,
        ]

    def test_validation_is_idempotent(
        self, validator: WorkflowValidator, cyclic_payload: dict[str, Any]
    ) -> None:
        """Test that repeated validation gives equal findings."""
        workflow = WorkflowGraph.model_validate(cyclic_payload)
        assert validator.validate(workflow) == validator.validate(workflow)

    def test_input_is_not_mutated(
        self, validator: WorkflowValidator, onboarding_workflow: WorkflowGraph
    ) -> None:
        """Test that validation leaves the graph unchanged."""
        before = onboarding_workflow.model_copy(deep=True)
        validator.validate(onboarding_workflow)
        assert onboarding_workflow == before


class TestReport:
    """ValidationReport built from findings."""

    def test_report_for_invalid_graph(
        self, validator: WorkflowValidator, cyclic_payload: dict[str, Any]
    ) -> None:
        """Test errors and warnings are partitioned."""
        report = validator.build_report(WorkflowGraph.model_validate(cyclic_payload))

        assert report.is_valid is False
        assert report.has_warnings is False
        assert codes(report.errors) == [FindingCode.CYCLE_DETECTED]
        assert report.warnings == []
        assert report.findings == report.errors

    def test_report_with_warnings_only(self, validator: WorkflowValidator) -> None:
        """Test that warnings alone keep the graph valid."""
        workflow = make_graph(
            [make_node("s1", "start"), make_node("s2", "start"), make_node("e", "end")],
            [make_edge("s1", "e"), make_edge("s2", "e")],
        )
        report = validator.build_report(workflow)

        assert report.is_valid is True
        assert report.has_warnings is True
        assert len(report.warnings) == 2

    def test_module_level_helper(self, onboarding_workflow: WorkflowGraph) -> None:
        """Test validate_workflow uses a default validator."""
        assert validate_workflow(onboarding_workflow) == []
