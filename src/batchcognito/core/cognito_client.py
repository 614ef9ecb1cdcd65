"""boto3 client wrapper for the Cognito Identity Provider API.

This module provides a clean interface between boto3 and the export logic,
handling client construction and error translation.
"""

from typing import Any

import boto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError

from ..utils.logging_utils import get_logger
from .config import API_TIMEOUT, CONNECT_TIMEOUT, get_aws_config
from .exceptions import ConfigError, RemoteCallError, wrap_client_error

LIST_USERS = "ListUsers"
DESCRIBE_USER_POOL = "DescribeUserPool"

# Module logger
logger = get_logger(__name__)


class CognitoClientManager:
    """Manager for the boto3 ``cognito-idp`` client of one user pool."""

    def __init__(self, pool_id: str) -> None:
        """Initialize the client manager.

        Args:
            pool_id: Cognito user pool ID

        Raises:
            ConfigError: If no AWS region can be resolved
        """
        self.pool_id = pool_id
        self._config = get_aws_config(pool_id)
        self._client: Any | None = None

    @property
    def region(self) -> str | None:
        return self._config["region"]

    @property
    def profile(self) -> str | None:
        return self._config["profile"]

    def get_client(self) -> Any:
        """Get or create the ``cognito-idp`` client.

        Retries are disabled at the botocore level; a failed page request
        fails the whole export.

        Returns:
            The boto3 client

        Raises:
            ConfigError: If client initialization fails
        """
        if self._client is not None:
            return self._client

        try:
            session = boto3.Session(
                profile_name=self.profile, region_name=self.region
            )
            self._client = session.client(
                "cognito-idp",
                config=Config(
                    connect_timeout=CONNECT_TIMEOUT,
                    read_timeout=API_TIMEOUT,
                    retries={"max_attempts": 1, "mode": "standard"},
                ),
            )
        except BotoCoreError as e:
            logger.error(
                f"Failed to initialize Cognito client: {e}",
                extra={"pool_id": self.pool_id},
                exc_info=True,
            )
            raise ConfigError(
                f"Failed to initialize Cognito client for {self.pool_id}",
                details=str(e),
            ) from e

        logger.debug(
            f"Initialized Cognito client in {self.region}",
            extra={"pool_id": self.pool_id},
        )
        return self._client


class CognitoUserOperations:
    """Wrapper for Cognito user pool calls with error handling."""

    def __init__(self, client: Any) -> None:
        """Initialize with a boto3 ``cognito-idp`` client.

        Args:
            client: Initialized Cognito Identity Provider client
        """
        self.client = client

    def list_users_page(
        self, pool_id: str, limit: int, pagination_token: str | None = None
    ) -> tuple[list[dict[str, Any]], str | None]:
        """Fetch one page of users.

        Args:
            pool_id: Cognito user pool ID
            limit: Maximum number of users in the page
            pagination_token: Cursor returned by the previous page, if any

        Returns:
            Tuple[List[Dict[str, Any]], Optional[str]]: (users, next_token)

        Raises:
            RemoteCallError: If the call fails or the response is malformed
        """
        request: dict[str, Any] = {"UserPoolId": pool_id, "Limit": limit}
        if pagination_token is not None:
            request["PaginationToken"] = pagination_token

        try:
            response = self.client.list_users(**request)
        except Exception as e:
            raise wrap_client_error(e, LIST_USERS) from e

        users = response.get("Users")
        if not isinstance(users, list):
            raise RemoteCallError(
                "Malformed response",
                operation=LIST_USERS,
                details="Users list missing",
            )

        return users, response.get("PaginationToken") or None

    def describe_user_pool(self, pool_id: str) -> dict[str, Any]:
        """Describe a user pool.

        Args:
            pool_id: Cognito user pool ID

        Returns:
            Dict[str, Any]: The ``UserPool`` description

        Raises:
            RemoteCallError: If the call fails
        """
        try:
            response = self.client.describe_user_pool(UserPoolId=pool_id)
        except Exception as e:
            raise wrap_client_error(e, DESCRIBE_USER_POOL) from e
        return dict(response.get("UserPool") or {})


def get_user_operations(pool_id: str) -> CognitoUserOperations:
    """Build the user operations wrapper for a pool.

    Args:
        pool_id: Cognito user pool ID

    Returns:
        CognitoUserOperations: Wrapper around a freshly configured client
    """
    manager = CognitoClientManager(pool_id)
    return CognitoUserOperations(manager.get_client())
