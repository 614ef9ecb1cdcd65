"""Credential and pool access checks."""

from typing import Any

from ..utils.logging_utils import get_logger
from .cognito_client import CognitoClientManager, CognitoUserOperations
from .exceptions import BatchCognitoError

# Module logger
logger = get_logger(__name__)


def doctor(pool_id: str, user_ops: CognitoUserOperations | None = None) -> dict[str, Any]:
    """Test that the AWS credentials can reach the user pool.

    Args:
        pool_id: Cognito user pool ID
        user_ops: Optional operations wrapper; built from the environment
            when omitted

    Returns:
        Dict[str, Any]: Status information including success status and details
    """
    result: dict[str, Any] = {"success": False, "pool_id": pool_id, "region": None}

    try:
        logger.info(
            f"Checking access to user pool {pool_id}...",
            extra={"operation": "doctor_check", "pool_id": pool_id},
        )
        if user_ops is None:
            manager = CognitoClientManager(pool_id)
            result["region"] = manager.region
            user_ops = CognitoUserOperations(manager.get_client())

        pool = user_ops.describe_user_pool(pool_id)
    except BatchCognitoError as e:
        logger.error(
            f"Doctor check failed: {e}",
            extra={"operation": "doctor_check", "pool_id": pool_id},
        )
        result["error"] = str(e)
        return result

    result.update(
        {
            "success": True,
            "pool_name": pool.get("Name"),
            "estimated_users": pool.get("EstimatedNumberOfUsers"),
        }
    )
    logger.info(
        "Doctor check completed successfully",
        extra={"operation": "doctor_check", "pool_id": pool_id},
    )
    return result
