"""Utility modules for batch-cognito."""

from .file_utils import FileSink, StdoutSink, open_sink, read_emails_generator
from .logging_utils import configure_from_env, get_logger, setup_logging

__all__ = [
    "FileSink",
    "StdoutSink",
    "open_sink",
    "read_emails_generator",
    "configure_from_env",
    "get_logger",
    "setup_logging",
]
