"""Automated action catalogue.

Automated Step nodes reference one of these actions by id. The catalogue is
static; actions are never executed by this service.
"""

from __future__ import annotations

from hrflow.schemas.automation import AutomatedAction
from hrflow.services.workflow.exceptions import AutomationNotFoundError

AUTOMATIONS: tuple[AutomatedAction, ...] = (
    AutomatedAction(id="send_email", label="Send Email", params=["to", "subject", "body"]),
    AutomatedAction(
        id="generate_doc",
        label="Generate Document",
        params=["template", "recipient"],
    ),
    AutomatedAction(
        id="create_ticket",
        label="Create Support Ticket",
        params=["title", "priority", "assignee"],
    ),
    AutomatedAction(
        id="update_database",
        label="Update Database Record",
        params=["table", "recordId", "fields"],
    ),
    AutomatedAction(
        id="send_notification",
        label="Send Push Notification",
        params=["userId", "message"],
    ),
)


class AutomationService:
    """Read access to the automated action catalogue."""

    def __init__(self, actions: tuple[AutomatedAction, ...] = AUTOMATIONS) -> None:
        self._actions = {action.id: action for action in actions}

    def list_automations(self) -> list[AutomatedAction]:
        """Return every action in catalogue order."""
        return list(self._actions.values())

    def get_automation(self, action_id: str) -> AutomatedAction:
        """Return one action.

        Raises:
            AutomationNotFoundError: If no action has this id.
        """
        action = self._actions.get(action_id)
        if action is None:
            raise AutomationNotFoundError(action_id)
        return action


__all__ = [
    "AUTOMATIONS",
    "AutomationService",
]
