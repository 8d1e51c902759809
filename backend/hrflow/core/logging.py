"""Structured logging configuration for the workflow engine service.

This module provides the logging setup shared by the API and the engine:
- JSON structured logging for production environments
- Colored console output for development (DEBUG mode)
- Optional rotating file handler (10MB max, 5 backups)
- Scoped structured context via LogContext

Engine modules log through ``logging.getLogger(__name__)`` and attach
structured data as ``extra={"context": {...}}``; both formatters render it.
"""

from __future__ import annotations

import json
import logging
import sys
from contextvars import ContextVar, Token
from datetime import UTC, datetime
from enum import Enum
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, ClassVar, Self

from hrflow.core.config import settings


class LogLevel(str, Enum):
    """Log level enumeration for type-safe log level configuration."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class JSONFormatter(logging.Formatter):
    """JSON formatter for structured logging.

    Format:
        {
            "timestamp": "2025-01-12T10:30:45.123Z",
            "level": "INFO",
            "logger": "hrflow.services.workflow.simulator",
            "message": "Simulation completed",
            "service": "HR Workflow Engine",
            "version": "0.1.0",
            "context": {"steps": 4, "elapsed_ms": 0.12}
        }
    """

    def __init__(
        self,
        service_name: str = "HR Workflow Engine",
        service_version: str = "0.1.0",
    ) -> None:
        """Initialize JSON formatter.

        Args:
            service_name: Name of the service
            service_version: Version of the service
        """
        super().__init__()
        self.service_name = service_name
        self.service_version = service_version

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON."""
        log_entry: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=UTC)
            .isoformat()
            .replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "service": self.service_name,
            "version": self.service_version,
        }

        context = record_context(record)
        if context:
            log_entry["context"] = context

        if record.exc_info:
            log_entry["exception"] = {
                "type": record.exc_info[0].__name__ if record.exc_info[0] else None,
                "message": str(record.exc_info[1]) if record.exc_info[1] else None,
                "traceback": self.formatException(record.exc_info),
            }

        # Source location only for ERROR and above
        if record.levelno >= logging.ERROR:
            log_entry["source"] = {
                "function": record.funcName,
                "line": record.lineno,
                "file": record.pathname,
            }

        return json.dumps(log_entry, default=str, ensure_ascii=False)


class ColoredConsoleFormatter(logging.Formatter):
    """Colored console formatter for development environments."""

    COLORS: ClassVar[dict[str, str]] = {
        "DEBUG": "\033[36m",  # Cyan
        "INFO": "\033[32m",  # Green
        "WARNING": "\033[33m",  # Yellow
        "ERROR": "\033[31m",  # Red
        "CRITICAL": "\033[41m",  # Red background
    }
    RESET: ClassVar[str] = "\033[0m"

    def __init__(self) -> None:
        super().__init__(
            fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

    def format(self, record: logging.LogRecord) -> str:
        """Format log record with colors and inline context."""
        log_color = self.COLORS.get(record.levelname, self.RESET)
        record.levelname = f"{log_color}{record.levelname}{self.RESET}"

        context = record_context(record)
        if context:
            record.msg = f"{record.msg} | Context: {json.dumps(context, default=str)}"

        return super().format(record)


def setup_logging(
    log_level: str | None = None,
    log_file: str | None = None,
    service_name: str | None = None,
    enable_json: bool = True,
    enable_console: bool = True,
) -> logging.Logger:
    """Configure application logging on the root logger.

    Args:
        log_level: Logging level name. Defaults to settings.LOG_LEVEL.
        log_file: Path to a log file. When None no file handler is installed.
        service_name: Service name stamped on JSON records.
            Defaults to settings.PROJECT_NAME.
        enable_json: Use JSON formatting for the file handler.
        enable_console: Install a stdout handler.

    Returns:
        Configured root logger instance.

    Examples:
        >>> logger = setup_logging(log_level="INFO")
        >>> logger.info("Service started", extra={"context": {"port": 8000}})
    """
    if log_level is None:
        log_level = settings.LOG_LEVEL
    if service_name is None:
        service_name = settings.PROJECT_NAME

    level = getattr(logging, log_level.upper(), logging.INFO)

    logger = logging.getLogger()
    logger.setLevel(level)

    # Remove existing handlers to avoid duplicates on reconfiguration
    logger.handlers.clear()

    if log_file is not None:
        log_file_path = Path(log_file)
        log_file_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = RotatingFileHandler(
            filename=str(log_file_path),
            maxBytes=10 * 1024 * 1024,  # 10MB
            backupCount=5,
            encoding="utf-8",
        )
        file_handler.setLevel(logging.DEBUG)
        if enable_json:
            file_handler.setFormatter(
                JSONFormatter(service_name=service_name, service_version=settings.VERSION)
            )
        else:
            file_handler.setFormatter(
                logging.Formatter(
                    "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
                    datefmt="%Y-%m-%d %H:%M:%S",
                )
            )
        logger.addHandler(file_handler)

    if enable_console:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(level)
        if settings.DEBUG:
            console_handler.setFormatter(ColoredConsoleFormatter())
        else:
            console_handler.setFormatter(
                JSONFormatter(service_name=service_name, service_version=settings.VERSION)
            )
        logger.addHandler(console_handler)

    logger.info(
        f"Logging initialized - Level: {log_level}, File: {log_file}",
        extra={
            "context": {
                "log_level": log_level,
                "log_file": log_file,
                "service": service_name,
            }
        },
    )

    return logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance with the specified name.

    Examples:
        >>> from hrflow.core.logging import get_logger
        >>> logger = get_logger(__name__)
        >>> logger.info("Processing request")
    """
    return logging.getLogger(name)


class LogContext:
    """Add structured context to every record created inside a scope.

    The scope follows the current task through ``contextvars``, so
    concurrent requests never see each other's context. Records created
    inside it, by any logger, carry the values as ``record.scope_context``;
    both formatters merge them with the record's own ``context``.

    Examples:
        >>> logger = get_logger(__name__)
        >>> with LogContext(logger, request_path="/api/v1/simulate"):
        ...     logger.info("Simulating workflow")
        # Record carries context {"request_path": "/api/v1/simulate"}
    """

    def __init__(self, logger: logging.Logger, **context: Any) -> None:
        self.logger = logger
        self.context = context
        self._token: Token[dict[str, Any] | None] | None = None

    def __enter__(self) -> Self:
        """Enter context and push its values onto the current scope."""
        _install_record_factory()
        self._token = _scope_context.set({**(_scope_context.get() or {}), **self.context})
        return self

    def __exit__(self, *args: Any) -> None:
        """Exit context and restore the enclosing scope."""
        if self._token is not None:
            _scope_context.reset(self._token)
            self._token = None


_scope_context: ContextVar[dict[str, Any] | None] = ContextVar(
    "log_scope_context", default=None
)
_factory_installed = False


def _install_record_factory() -> None:
    global _factory_installed
    if _factory_installed:
        return

    base_factory = logging.getLogRecordFactory()

    def record_factory(*args: Any, **kwargs: Any) -> logging.LogRecord:
        record = base_factory(*args, **kwargs)
        scope = _scope_context.get()
        if scope:
            record.scope_context = dict(scope)
        return record

    logging.setLogRecordFactory(record_factory)
    _factory_installed = True


def record_context(record: logging.LogRecord) -> dict[str, Any]:
    """Scoped context merged with the record's own ``extra`` context."""
    return {
        **getattr(record, "scope_context", {}),
        **getattr(record, "context", {}),
    }


__all__ = [
    "ColoredConsoleFormatter",
    "JSONFormatter",
    "LogContext",
    "LogLevel",
    "get_logger",
    "record_context",
    "setup_logging",
]
