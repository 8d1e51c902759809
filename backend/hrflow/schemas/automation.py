"""Pydantic schemas for the automated action catalogue."""

from __future__ import annotations

from pydantic import Field

from hrflow.schemas.base import BaseSchema


class AutomatedAction(BaseSchema):
    """An action an Automated Step node can run."""

    id: str = Field(..., description="Action identifier", examples=["send_email"])
    label: str = Field(..., description="Display name", examples=["Send Email"])
    params: list[str] = Field(
        default_factory=list,
        description="Parameter names the action expects",
        examples=[["to", "subject", "body"]],
    )


__all__ = ["AutomatedAction"]
