"""Structured logging utilities for the batch-cognito tool."""

import json
import logging
import os
import sys
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

LOGGER_NAMESPACE = "batchcognito"

# Extra fields copied from ``extra=`` into formatted records
CONTEXT_FIELDS = (
    "operation",
    "pool_id",
    "page",
    "page_size",
    "total_users",
    "file_path",
    "error_code",
    "duration",
)


class ColoredFormatter(logging.Formatter):
    """Custom formatter with color support for terminal output."""

    # ANSI color codes
    COLORS = {
        "DEBUG": "\033[36m",  # Cyan
        "INFO": "\033[32m",  # Green
        "WARNING": "\033[33m",  # Yellow
        "ERROR": "\033[31m",  # Red
        "CRITICAL": "\033[35m",  # Magenta
        "RESET": "\033[0m",  # Reset
    }

    def __init__(self, *args: Any, disable_colors: bool = False, **kwargs: Any) -> None:
        """Initialize formatter with color configuration.

        Args:
            disable_colors: Whether to disable colored output
        """
        super().__init__(*args, **kwargs)
        self.disable_colors = disable_colors

    def format(self, record: logging.LogRecord) -> str:
        """Format log record with colors for terminal output."""
        if (
            not self.disable_colors
            and hasattr(sys.stderr, "isatty")
            and sys.stderr.isatty()
        ):
            color = self.COLORS.get(record.levelname, "")
            reset = self.COLORS["RESET"]
            record = logging.makeLogRecord(record.__dict__)
            record.levelname = f"{color}{record.levelname}{reset}"

        return super().format(record)


class StructuredFormatter(logging.Formatter):
    """JSON formatter for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as structured JSON."""
        log_entry = {
            "timestamp": datetime.now(UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)

        for field in CONTEXT_FIELDS:
            if hasattr(record, field):
                log_entry[field] = getattr(record, field)

        return json.dumps(log_entry, default=str)


class DetailedFormatter(logging.Formatter):
    """Detailed formatter with context information."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record with detailed context."""
        base_msg = super().format(record)

        context_parts = []
        if hasattr(record, "operation"):
            context_parts.append(f"op={record.operation}")
        if hasattr(record, "pool_id"):
            context_parts.append(f"pool={record.pool_id}")
        if hasattr(record, "page"):
            context_parts.append(f"page={record.page}")
        if hasattr(record, "error_code"):
            context_parts.append(f"code={record.error_code}")
        if hasattr(record, "duration"):
            context_parts.append(f"duration={record.duration:.3f}s")

        if context_parts:
            return base_msg + " [" + ", ".join(context_parts) + "]"

        return base_msg


class OperationFilter(logging.Filter):
    """Filter to add operation context to log records."""

    def __init__(self, operation: str | None = None):
        """Initialize the filter with an operation context.

        Args:
            operation: The current operation being performed
        """
        super().__init__()
        self.operation = operation

    def filter(self, record: logging.LogRecord) -> bool:
        """Add operation context to the record."""
        if self.operation and not hasattr(record, "operation"):
            record.operation = self.operation
        return True


def setup_logging(
    level: str = "INFO",
    log_file: str | None = None,
    operation: str | None = None,
    log_format: str = "console",
    disable_colors: bool = False,
) -> logging.Logger:
    """Configure logging for the application.

    Console output always goes to stderr so it never mixes with CSV
    written to stdout.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional log file path for file output
        operation: Current operation context for filtering
        log_format: Log format (console, json, detailed)
        disable_colors: Whether to disable colored output

    Returns:
        logging.Logger: Configured logger instance
    """
    root_logger = logging.getLogger(LOGGER_NAMESPACE)
    root_logger.handlers.clear()
    root_logger.propagate = False

    log_level = getattr(logging, level.upper(), logging.INFO)
    root_logger.setLevel(log_level)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(log_level)

    if log_format == "json":
        console_formatter: logging.Formatter = StructuredFormatter()
    elif log_format == "detailed":
        console_formatter = DetailedFormatter(
            fmt="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    else:  # console format (default)
        console_formatter = ColoredFormatter(
            fmt="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
            disable_colors=disable_colors,
        )

    console_handler.setFormatter(console_formatter)
    root_logger.addHandler(console_handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(log_level)

        # Always use structured logging for files
        file_handler.setFormatter(StructuredFormatter())
        root_logger.addHandler(file_handler)

    if operation:
        operation_filter = OperationFilter(operation)
        for handler in root_logger.handlers:
            handler.addFilter(operation_filter)

    return root_logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for the specified module.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger: Logger instance
    """
    if name == LOGGER_NAMESPACE or name.startswith(f"{LOGGER_NAMESPACE}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{LOGGER_NAMESPACE}.{name}")


def resolve_log_level(verbose: int = 0) -> str:
    """Resolve the effective log level.

    ``BATCH_COGNITO_LOG_LEVEL`` is fully respected when set. Otherwise a
    single ``-v`` switches the level to DEBUG, and the default is INFO.

    Args:
        verbose: Number of ``-v`` flags given on the command line

    Returns:
        str: Log level name
    """
    override = os.getenv("BATCH_COGNITO_LOG_LEVEL")
    if override:
        return override.upper()
    return "DEBUG" if verbose > 0 else "INFO"


def configure_from_env(verbose: int = 0) -> logging.Logger:
    """Configure logging from environment variables.

    Environment variables:
        BATCH_COGNITO_LOG_LEVEL: Log level (overrides ``verbose``)
        BATCH_COGNITO_LOG_FILE: Log file path (optional)
        BATCH_COGNITO_LOG_OPERATION: Current operation context (optional)
        BATCH_COGNITO_LOG_FORMAT: Log format (console, json, detailed) (default: console)
        BATCH_COGNITO_LOG_DISABLE_COLORS: Disable colored output (default: false)

    Args:
        verbose: Number of ``-v`` flags given on the command line

    Returns:
        logging.Logger: Configured logger instance
    """
    log_file = os.getenv("BATCH_COGNITO_LOG_FILE")
    operation = os.getenv("BATCH_COGNITO_LOG_OPERATION")
    log_format = os.getenv("BATCH_COGNITO_LOG_FORMAT", "console")
    disable_colors = (
        os.getenv("BATCH_COGNITO_LOG_DISABLE_COLORS", "false").lower() == "true"
    )

    return setup_logging(
        level=resolve_log_level(verbose),
        log_file=log_file,
        operation=operation,
        log_format=log_format,
        disable_colors=disable_colors,
    )


def init_default_logging() -> None:
    """Initialize default logging configuration if not already configured."""
    if not logging.getLogger(LOGGER_NAMESPACE).handlers:
        configure_from_env()


# Initialize logging when module is imported
init_default_logging()
