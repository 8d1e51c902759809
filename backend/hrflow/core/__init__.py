"""Core application configuration and utilities.

This package contains core functionality including:
- Configuration management (config.py)
- Logging setup (logging.py)
- Exception base class (exceptions.py)
"""

from hrflow.core.config import settings
from hrflow.core.exceptions import AppError

__all__ = [
    "AppError",
    "settings",
]
