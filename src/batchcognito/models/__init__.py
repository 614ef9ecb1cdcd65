"""Data models for Cognito user pool operations."""

from batchcognito.models.config import ExportConfig, GroupOperationConfig
from batchcognito.models.user import CognitoUser

__all__ = [
    "CognitoUser",
    "ExportConfig",
    "GroupOperationConfig",
]
