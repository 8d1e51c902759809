"""Pydantic schemas for workflow validation findings.

This module defines the finding produced by each structural check and the
report returned by the validation endpoint. All findings use consistent
codes and human-readable messages.
"""

from __future__ import annotations

from enum import Enum
from typing import Self

from pydantic import Field

from hrflow.models.enums import Severity
from hrflow.schemas.base import BaseSchema

# =============================================================================
# Validation Enums
# =============================================================================


class FindingCode(str, Enum):
    """Machine-readable finding codes, one per structural check."""

    # Errors (block simulation)
    NO_START_NODE = "NO_START_NODE"
    CYCLE_DETECTED = "CYCLE_DETECTED"
    END_NODE_HAS_OUTGOING = "END_NODE_HAS_OUTGOING"

    # Warnings
    MULTIPLE_START_NODES = "MULTIPLE_START_NODES"
    DISCONNECTED_NODES = "DISCONNECTED_NODES"
    INCOMPLETE_PATH = "INCOMPLETE_PATH"


# =============================================================================
# Validation Result Schemas
# =============================================================================


class ValidationFinding(BaseSchema):
    """Single validation finding.

    A finding with neither ``node_id`` nor ``edge_id`` applies to the whole
    graph. API responses omit absent ids instead of sending null.
    """

    node_id: str | None = Field(
        default=None,
        description="Affected node id, if the finding targets a node",
    )
    edge_id: str | None = Field(
        default=None,
        description="Affected edge id, if the finding targets an edge",
    )
    code: FindingCode = Field(
        ...,
        description="Machine-readable finding code",
    )
    message: str = Field(
        ...,
        description="Human-readable message",
    )
    severity: Severity = Field(
        ...,
        description="error blocks simulation, warning does not",
    )

    @property
    def is_blocking(self) -> bool:
        """Whether this finding prevents simulation."""
        return self.severity == Severity.ERROR


class ValidationReport(BaseSchema):
    """Findings of one validation run split by severity."""

    findings: list[ValidationFinding] = Field(
        default_factory=list,
        description="All findings in check order",
    )
    errors: list[ValidationFinding] = Field(
        default_factory=list,
        description="Blocking findings",
    )
    warnings: list[ValidationFinding] = Field(
        default_factory=list,
        description="Non-blocking findings",
    )
    is_valid: bool = Field(
        ...,
        description="True when no blocking finding exists",
    )
    has_warnings: bool = Field(
        default=False,
        description="True when at least one warning exists",
    )

    @classmethod
    def from_findings(cls, findings: list[ValidationFinding]) -> Self:
        """Partition findings into errors and warnings, keeping order."""
        errors = [f for f in findings if f.is_blocking]
        warnings = [f for f in findings if not f.is_blocking]
        return cls(
            findings=findings,
            errors=errors,
            warnings=warnings,
            is_valid=not errors,
            has_warnings=bool(warnings),
        )


__all__ = [
    "FindingCode",
    "ValidationFinding",
    "ValidationReport",
]
