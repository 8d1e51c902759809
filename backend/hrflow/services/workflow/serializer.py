"""Workflow document serialization.

Save/load of workflow graphs as JSON documents. Serialization writes back
the fields the document was loaded with, including attributes the engine
does not know about, and leaves out defaults it never had, so that
``deserialize_workflow(serialize_workflow(graph)) == graph``.

Loading distinguishes two failures:
- InvalidJSONError: the text is not JSON at all
- InvalidWorkflowStructureError: the JSON is not a workflow graph
"""

from __future__ import annotations

import json
import logging
from typing import Any

from pydantic import ValidationError

from hrflow.schemas.workflow import WorkflowGraph
from hrflow.services.workflow.exceptions import (
    InvalidJSONError,
    InvalidWorkflowStructureError,
)

logger = logging.getLogger(__name__)

DEFAULT_EXPORT_FILENAME = "workflow.json"

_REQUIRED_NODE_FIELDS = ("id", "type", "position", "data")
_REQUIRED_EDGE_FIELDS = ("id", "source", "target")


def serialize_workflow(workflow: WorkflowGraph) -> str:
    """Serialize a workflow graph to a pretty-printed JSON document."""
    return workflow.model_dump_json(by_alias=True, exclude_unset=True, indent=2)


def deserialize_workflow(document: str | bytes) -> WorkflowGraph:
    """Load a workflow graph from a JSON document.

    Args:
        document: JSON text.

    Returns:
        The parsed WorkflowGraph.

    Raises:
        InvalidJSONError: If the document is not valid JSON, including
            bytes that are not valid UTF-8.
        InvalidWorkflowStructureError: If the JSON lacks the nodes/edges
            arrays, a node or edge lacks a required field, or node data
            does not match its kind.
    """
    try:
        parsed = json.loads(document)
    except json.JSONDecodeError as e:
        logger.warning(
            "Rejected workflow document: invalid JSON",
            extra={"context": {"line": e.lineno, "column": e.colno}},
        )
        raise InvalidJSONError(line=e.lineno, column=e.colno) from e
    except UnicodeDecodeError as e:
        line, column = _byte_position(e.object, e.start)
        logger.warning(
            "Rejected workflow document: undecodable bytes",
            extra={"context": {"line": line, "column": column, "encoding": e.encoding}},
        )
        raise InvalidJSONError(line=line, column=column) from e

    try:
        _check_structure(parsed)
        return WorkflowGraph.model_validate(parsed)
    except InvalidWorkflowStructureError as e:
        logger.warning(
            "Rejected workflow document: invalid structure",
            extra={"context": {"reason": e.reason}},
        )
        raise
    except ValidationError as e:
        errors = [
            {"loc": [str(part) for part in err["loc"]], "msg": err["msg"]}
            for err in e.errors()
        ]
        logger.warning(
            "Rejected workflow document: invalid node or edge fields",
            extra={"context": {"errors": errors}},
        )
        raise InvalidWorkflowStructureError(
            "node or edge fields do not match the workflow schema",
            errors=errors,
        ) from e


def export_filename(filename: str | None = None) -> str:
    """Return a download filename that ends with ``.json``."""
    if not filename:
        return DEFAULT_EXPORT_FILENAME
    return filename if filename.endswith(".json") else f"{filename}.json"


def _check_structure(parsed: Any) -> None:
    """Shape checks that give clearer messages than schema errors."""
    if not isinstance(parsed, dict):
        raise InvalidWorkflowStructureError("expected an object")

    if not isinstance(parsed.get("nodes"), list):
        raise InvalidWorkflowStructureError("missing or invalid nodes array")

    if not isinstance(parsed.get("edges"), list):
        raise InvalidWorkflowStructureError("missing or invalid edges array")

    for index, node in enumerate(parsed["nodes"]):
        if not _has_fields(node, _REQUIRED_NODE_FIELDS):
            raise InvalidWorkflowStructureError(
                "invalid node structure in workflow",
                errors=[{"loc": ["nodes", str(index)], "msg": "missing required field"}],
            )

    for index, edge in enumerate(parsed["edges"]):
        if not _has_fields(edge, _REQUIRED_EDGE_FIELDS):
            raise InvalidWorkflowStructureError(
                "invalid edge structure in workflow",
                errors=[{"loc": ["edges", str(index)], "msg": "missing required field"}],
            )


def _has_fields(item: Any, fields: tuple[str, ...]) -> bool:
    if not isinstance(item, dict):
        return False
    return all(item.get(field) not in (None, "") for field in fields)


def _byte_position(data: bytes, offset: int) -> tuple[int, int]:
    """1-based line and column of a byte offset."""
    line = data.count(b"\n", 0, offset) + 1
    column = offset - data.rfind(b"\n", 0, offset)
    return line, column


__all__ = [
    "DEFAULT_EXPORT_FILENAME",
    "deserialize_workflow",
    "export_filename",
    "serialize_workflow",
]
