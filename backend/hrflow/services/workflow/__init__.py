"""Workflow validation and simulation package.

This package provides the stateless engine behind the designer's
"validate" and "test run" features:

- Graph: ordered directed graph data structure
- GraphAlgorithms: cycle detection, reachability, pre-order walk
- WorkflowValidator: six structural checks producing findings
- WorkflowSimulator: validate-then-walk mock execution
- Serializer: lossless JSON save/load of workflow documents
- Exceptions: document and request errors

Example:
    >>> from hrflow.services.workflow import WorkflowSimulator, WorkflowValidator
    >>> findings = WorkflowValidator().validate(graph)
    >>> result = WorkflowSimulator().run(graph)
"""

from hrflow.services.workflow.algorithms import GraphAlgorithms
from hrflow.services.workflow.exceptions import (
    AutomationNotFoundError,
    GraphTooLargeError,
    InvalidJSONError,
    InvalidWorkflowStructureError,
    WorkflowError,
    WorkflowFormatError,
)
from hrflow.services.workflow.graph import Graph
from hrflow.services.workflow.serializer import (
    deserialize_workflow,
    export_filename,
    serialize_workflow,
)
from hrflow.services.workflow.simulator import WorkflowSimulator, simulate_workflow
from hrflow.services.workflow.validator import WorkflowValidator, validate_workflow

__all__ = [
    # Data structures
    "Graph",
    # Algorithms
    "GraphAlgorithms",
    # Engine
    "WorkflowSimulator",
    "WorkflowValidator",
    "simulate_workflow",
    "validate_workflow",
    # Serialization
    "deserialize_workflow",
    "export_filename",
    "serialize_workflow",
    # Exceptions
    "AutomationNotFoundError",
    "GraphTooLargeError",
    "InvalidJSONError",
    "InvalidWorkflowStructureError",
    "WorkflowError",
    "WorkflowFormatError",
]
