"""Domain enum definitions for the HR workflow engine.

This module defines all enum types used across the application for
type-safe representation of domain-specific values. Values match the
strings exchanged with the designer frontend.
"""

from enum import Enum


class NodeType(str, Enum):
    """Workflow node kinds.

    Each kind carries its own attribute shape (see hrflow.schemas.workflow).
    """

    START = "start"
    TASK = "task"
    APPROVAL = "approval"
    AUTOMATED_STEP = "automatedStep"
    END = "end"

    def __str__(self) -> str:
        """Return the string value for serialization."""
        return self.value


class Severity(str, Enum):
    """Validation finding severity.

    ERROR findings block simulation; WARNING findings are advisory.
    """

    ERROR = "error"
    WARNING = "warning"

    def __str__(self) -> str:
        """Return the string value for serialization."""
        return self.value


class StepStatus(str, Enum):
    """Status of a simulated step.

    The simulator only produces COMPLETED. PENDING and FAILED are part of
    the wire format for a richer execution model that does not exist yet.
    """

    PENDING = "pending"
    COMPLETED = "completed"
    FAILED = "failed"

    def __str__(self) -> str:
        """Return the string value for serialization."""
        return self.value


__all__ = [
    "NodeType",
    "Severity",
    "StepStatus",
]
