"""CLI module for Cognito user pool batch operations."""

from .commands import OperationHandler
from .main import cli, main

__all__ = [
    "OperationHandler",
    "cli",
    "main",
]
