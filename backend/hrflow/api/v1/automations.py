"""Automated Action API Router.

Read-only access to the catalogue of actions Automated Step nodes can use.
"""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, status

from hrflow.api.deps import Automations, error_detail  # noqa: TC001
from hrflow.schemas.automation import AutomatedAction
from hrflow.schemas.base import ErrorResponse
from hrflow.services.workflow import AutomationNotFoundError

router = APIRouter()


@router.get(
    "/",
    response_model=list[AutomatedAction],
    summary="List automated actions",
    description="Retrieve every action in catalogue order.",
)
async def list_automations(service: Automations) -> list[AutomatedAction]:
    """List the automated action catalogue."""
    return service.list_automations()


@router.get(
    "/{action_id}",
    response_model=AutomatedAction,
    summary="Get automated action",
    responses={404: {"model": ErrorResponse, "description": "Unknown action"}},
)
async def get_automation(action_id: str, service: Automations) -> AutomatedAction:
    """Get one automated action by id.

    Raises:
        HTTPException: 404 if the action is not in the catalogue.
    """
    try:
        return service.get_automation(action_id)
    except AutomationNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=error_detail(e),
        ) from e


__all__ = ["router"]
