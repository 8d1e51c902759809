"""Domain models.

This package contains the enums shared by schemas and services.
"""

from hrflow.models.enums import NodeType, Severity, StepStatus

__all__ = [
    "NodeType",
    "Severity",
    "StepStatus",
]
