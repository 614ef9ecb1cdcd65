"""batch-cognito - Batch operations for AWS Cognito user pools."""

__version__ = "0.1.0"

from .core.config import MAX_PAGE_SIZE, get_aws_config, region_from_pool_id
from .core.deadline import run_with_deadline
from .core.exceptions import (
    BatchCognitoError,
    ConfigError,
    ExportTimeoutError,
    FileOperationError,
    RemoteCallError,
    ThrottlingError,
    ValidationError,
)
from .models.config import ExportConfig, GroupOperationConfig
from .models.user import CognitoUser
from .operations.export_ops import export_users_to_csv, run_sync
from .operations.group_ops import run_group_operation

__all__ = [
    "__version__",
    # Core
    "MAX_PAGE_SIZE",
    "get_aws_config",
    "region_from_pool_id",
    "run_with_deadline",
    # Exceptions
    "BatchCognitoError",
    "ConfigError",
    "ValidationError",
    "FileOperationError",
    "RemoteCallError",
    "ThrottlingError",
    "ExportTimeoutError",
    # Models
    "ExportConfig",
    "GroupOperationConfig",
    "CognitoUser",
    # Operations
    "export_users_to_csv",
    "run_sync",
    "run_group_operation",
]
