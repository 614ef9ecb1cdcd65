"""Configuration utilities for Cognito API access."""

import os
import re

import dotenv

from batchcognito.core.exceptions import ConfigError, ValidationError

# Largest page the ListUsers API accepts
MAX_PAGE_SIZE = 60

# Global constants for API configuration
API_TIMEOUT = 30  # read timeout in seconds
CONNECT_TIMEOUT = 10  # connect timeout in seconds

POOL_ID_ENV_VAR = "COGNITO_USER_POOL_ID"

# Pool IDs look like "us-east-1_AbCdEf123"
_POOL_ID_PATTERN = re.compile(r"^(?P<region>[a-z]{2}(?:-[a-z]+)+-\d+)_[0-9A-Za-z]+$")


def check_env_file() -> None:
    """Check if .env file exists and load it."""
    env_path = ".env"
    if os.path.exists(env_path):
        dotenv.load_dotenv(env_path)


def validate_pool_id(pool_id: str | None) -> str:
    """Validate that a user pool ID was supplied.

    Args:
        pool_id: Cognito user pool ID

    Returns:
        str: The stripped pool ID

    Raises:
        ValidationError: If the pool ID is missing or empty
    """
    if pool_id is None or not pool_id.strip():
        raise ValidationError(
            "User pool ID is required but not set or empty",
            field="pool_id",
            details=f"Pass --pool-id or set {POOL_ID_ENV_VAR}",
        )
    return pool_id.strip()


def region_from_pool_id(pool_id: str) -> str | None:
    """Derive the AWS region encoded in a user pool ID.

    Returns None when the ID does not follow the ``<region>_<suffix>`` form.
    """
    match = _POOL_ID_PATTERN.match(pool_id)
    if match is None:
        return None
    return match.group("region")


def get_aws_config(pool_id: str) -> dict[str, str | None]:
    """Get AWS session configuration from environment variables.

    The region comes from ``AWS_REGION`` or ``AWS_DEFAULT_REGION``, falling
    back to the region embedded in the pool ID.

    Args:
        pool_id: Cognito user pool ID

    Returns:
        Dict[str, Optional[str]]: ``region`` and ``profile`` entries

    Raises:
        ConfigError: If no region can be determined
    """
    check_env_file()

    region = (
        os.getenv("AWS_REGION")
        or os.getenv("AWS_DEFAULT_REGION")
        or region_from_pool_id(pool_id)
    )
    if not region:
        raise ConfigError(
            f"Cannot determine AWS region for user pool {pool_id}",
            details="Set AWS_REGION or use a pool ID of the form <region>_<id>",
        )

    return {
        "region": region,
        "profile": os.getenv("AWS_PROFILE") or None,
    }
