"""Core functionality for Cognito user pool access."""

from batchcognito.core.auth import doctor
from batchcognito.core.cognito_client import (
    CognitoClientManager,
    CognitoUserOperations,
    get_user_operations,
)
from batchcognito.core.config import (
    MAX_PAGE_SIZE,
    check_env_file,
    get_aws_config,
    region_from_pool_id,
    validate_pool_id,
)
from batchcognito.core.deadline import run_with_deadline

__all__ = [
    "doctor",
    "CognitoClientManager",
    "CognitoUserOperations",
    "get_user_operations",
    "MAX_PAGE_SIZE",
    "check_env_file",
    "get_aws_config",
    "region_from_pool_id",
    "validate_pool_id",
    "run_with_deadline",
]
