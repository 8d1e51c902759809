"""Business logic services.

This package contains the workflow engine and the automation catalogue.
"""

from hrflow.services.automation_service import AUTOMATIONS, AutomationService
from hrflow.services.workflow import (
    WorkflowSimulator,
    WorkflowValidator,
    simulate_workflow,
    validate_workflow,
)

__all__ = [
    "AUTOMATIONS",
    "AutomationService",
    "WorkflowSimulator",
    "WorkflowValidator",
    "simulate_workflow",
    "validate_workflow",
]
