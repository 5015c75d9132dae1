"""Logging configuration for the Jira MCP server.

stdout carries the MCP protocol, so every handler writes to stderr or to a
rotating log file.
"""

import contextvars
import logging
import os
import sys
import time
import types
import uuid
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any

# Default logger configuration
DEFAULT_LOGGER_NAME = "jira-mcp-server"
DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] [%(name)s] [%(context)s] %(message)s"
DEFAULT_LOG_LEVEL = "INFO"
MAX_LOG_SIZE = 10 * 1024 * 1024  # 10 MB
LOG_BACKUP_COUNT = 5

_log_context: contextvars.ContextVar[dict[str, Any]] = contextvars.ContextVar(
    "jira_mcp_log_context", default={}
)


class ContextFilter(logging.Filter):
    """Adds the current operation context to every record as ``%(context)s``."""

    def filter(self, record: logging.LogRecord) -> bool:
        context_data = _log_context.get()
        if not context_data:
            record.context = "no-context"
        else:
            # Format context as: operation=X,trace_id=Y,...
            record.context = ",".join(f"{k}={v}" for k, v in context_data.items())
        return True


class LoggingContextManager:
    """Context manager that tags log records with an operation and trace id."""

    def __init__(self, logger: logging.Logger, operation: str, **context: Any) -> None:
        """
        Initializes the logging context manager.

        Args:
            logger: Logger used for the start/end records
            operation: Name of the operation being executed
            **context: Additional context data
        """
        self.logger = logger
        self.operation = operation
        self.context = context.copy()
        self.trace_id = context.get("trace_id", str(uuid.uuid4())[:8])
        self._token: contextvars.Token | None = None
        self.start_time = 0.0

    def __enter__(self) -> "LoggingContextManager":
        self.start_time = time.monotonic()
        self.context["operation"] = self.operation
        self.context["trace_id"] = self.trace_id
        self._token = _log_context.set({**_log_context.get(), **self.context})
        self.logger.debug(f"Operation started: {self.operation}")
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: types.TracebackType | None,
    ) -> None:
        duration = time.monotonic() - self.start_time
        if exc_type:
            self.logger.error(
                f"Operation failed: {self.operation} after {duration:.3f}s - {exc_val}"
            )
        else:
            self.logger.debug(
                f"Operation completed: {self.operation} in {duration:.3f}s"
            )
        if self._token is not None:
            _log_context.reset(self._token)


def setup_logger(
    name: str = DEFAULT_LOGGER_NAME,
    level: str | None = None,
    log_dir: str | None = None,
    log_format: str | None = None,
) -> logging.Logger:
    """
    Configures and returns the named logger.

    Args:
        name: Logger name
        level: Log level (DEBUG, INFO, etc.); defaults to LOG_LEVEL
        log_dir: Directory for a rotating log file; defaults to LOG_DIR,
            no file is written when neither is set
        log_format: Log format; defaults to LOG_FORMAT

    Returns:
        Configured logger
    """
    logger = logging.getLogger(name)

    log_level = level or os.getenv("LOG_LEVEL", DEFAULT_LOG_LEVEL)
    logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))

    formatter = logging.Formatter(log_format or os.getenv("LOG_FORMAT", DEFAULT_FORMAT))
    context_filter = ContextFilter()

    # Drop handlers from a previous call so reconfiguration does not duplicate output
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    console_handler.addFilter(context_filter)
    logger.addHandler(console_handler)

    log_directory = log_dir or os.getenv("LOG_DIR")
    if log_directory:
        Path(log_directory).mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            Path(log_directory) / f"{name}.log",
            maxBytes=MAX_LOG_SIZE,
            backupCount=LOG_BACKUP_COUNT,
        )
        file_handler.setFormatter(formatter)
        file_handler.addFilter(context_filter)
        logger.addHandler(file_handler)

    # Prevents propagation to the root logger
    logger.propagate = False

    return logger


def log_operation(
    logger: logging.Logger, operation: str, **context: Any
) -> LoggingContextManager:
    """
    Creates a context manager for operation logging.

    Args:
        logger: Logger used for the start/end records
        operation: Name of the operation
        **context: Additional context data

    Returns:
        Context manager configured for operation logging
    """
    return LoggingContextManager(logger, operation, **context)
