"""Base Pydantic schemas with common patterns.

This module defines the base schema used across the API. Field names are
snake_case in Python and camelCase on the wire, matching the designer
frontend's JSON documents.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class BaseSchema(BaseModel):
    """Base schema with common configuration for all schemas.

    Configures Pydantic v2 settings for consistent behavior across all schemas.
    Both the camelCase alias and the Python field name are accepted on input.
    """

    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,
        use_enum_values=True,
        alias_generator=to_camel,
    )


class ErrorResponse(BaseSchema):
    """Standard error response schema."""

    error: str = Field(
        ...,
        description="Error type identifier",
        examples=["INVALID_JSON"],
    )
    message: str = Field(
        ...,
        description="Human-readable error message",
        examples=["Invalid JSON format"],
    )
    details: dict[str, Any] | None = Field(
        default=None,
        description="Additional error details",
        examples=[{"reason": "missing or invalid nodes array"}],
    )


__all__ = [
    "BaseSchema",
    "ErrorResponse",
]
