"""Common exception base classes.

This module defines the root of the application exception hierarchy.
Domain packages derive their own errors from AppError so API layers can
catch them in one place.
"""

from __future__ import annotations

from typing import Any


class AppError(Exception):
    """Base application exception.

    Attributes:
        message: Human-readable error message.
        error_code: Machine-readable error code for API responses.
        details: Additional error context as dictionary.
    """

    def __init__(
        self,
        message: str,
        error_code: str = "APP_ERROR",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}


__all__ = [
    "AppError",
]
