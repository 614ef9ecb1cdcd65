"""Tests for the boto3 Cognito client wrapper."""

from unittest.mock import MagicMock, patch

import boto3
import pytest
from botocore.exceptions import ProfileNotFound
from botocore.stub import Stubber

from batchcognito.core.cognito_client import (
    CognitoClientManager,
    CognitoUserOperations,
    get_user_operations,
)
from batchcognito.core.exceptions import ConfigError, RemoteCallError, ThrottlingError
from conftest import POOL_ID


@pytest.fixture
def cognito_client():
    return boto3.client(
        "cognito-idp",
        region_name="us-east-1",
        aws_access_key_id="testing",
        aws_secret_access_key="testing",
    )


class TestListUsersPage:
    """Tests for CognitoUserOperations.list_users_page."""

    def test_first_page_has_no_token(self, cognito_client):
        ops = CognitoUserOperations(cognito_client)
        with Stubber(cognito_client) as stubber:
            stubber.add_response(
                "list_users",
                {
                    "Users": [
                        {
                            "Username": "alice",
                            "Attributes": [{"Name": "email", "Value": "a@example.com"}],
                        }
                    ],
                    "PaginationToken": "tok1",
                },
                {"UserPoolId": POOL_ID, "Limit": 60},
            )

            users, token = ops.list_users_page(POOL_ID, limit=60)

            stubber.assert_no_pending_responses()

        assert users[0]["Username"] == "alice"
        assert token == "tok1"

    def test_token_is_forwarded(self, cognito_client):
        ops = CognitoUserOperations(cognito_client)
        with Stubber(cognito_client) as stubber:
            stubber.add_response(
                "list_users",
                {"Users": []},
                {"UserPoolId": POOL_ID, "Limit": 60, "PaginationToken": "tok1"},
            )

            users, token = ops.list_users_page(POOL_ID, limit=60, pagination_token="tok1")

        assert users == []
        assert token is None

    def test_client_error_is_wrapped(self, cognito_client):
        ops = CognitoUserOperations(cognito_client)
        with Stubber(cognito_client) as stubber:
            stubber.add_client_error(
                "list_users",
                service_error_code="NotAuthorizedException",
                service_message="Access denied",
                http_status_code=400,
            )

            with pytest.raises(RemoteCallError) as exc_info:
                ops.list_users_page(POOL_ID, limit=60)

        assert exc_info.value.error_code == "NotAuthorizedException"
        assert exc_info.value.operation == "ListUsers"
        assert "Access denied" in str(exc_info.value)

    def test_throttling_is_distinguished(self, cognito_client):
        ops = CognitoUserOperations(cognito_client)
        with Stubber(cognito_client) as stubber:
            stubber.add_client_error(
                "list_users",
                service_error_code="TooManyRequestsException",
                service_message="Rate exceeded",
                http_status_code=429,
            )

            with pytest.raises(ThrottlingError):
                ops.list_users_page(POOL_ID, limit=60)

    def test_malformed_response(self):
        client = MagicMock()
        client.list_users.return_value = {"Unexpected": True}
        ops = CognitoUserOperations(client)

        with pytest.raises(RemoteCallError, match="Malformed"):
            ops.list_users_page(POOL_ID, limit=60)


class TestDescribeUserPool:
    """Tests for CognitoUserOperations.describe_user_pool."""

    def test_returns_pool(self, cognito_client):
        ops = CognitoUserOperations(cognito_client)
        with Stubber(cognito_client) as stubber:
            stubber.add_response(
                "describe_user_pool",
                {"UserPool": {"Id": POOL_ID, "Name": "test-pool", "EstimatedNumberOfUsers": 3}},
                {"UserPoolId": POOL_ID},
            )

            pool = ops.describe_user_pool(POOL_ID)

        assert pool["Name"] == "test-pool"
        assert pool["EstimatedNumberOfUsers"] == 3

    def test_not_found(self, cognito_client):
        ops = CognitoUserOperations(cognito_client)
        with Stubber(cognito_client) as stubber:
            stubber.add_client_error(
                "describe_user_pool",
                service_error_code="ResourceNotFoundException",
                service_message="User pool does not exist.",
            )

            with pytest.raises(RemoteCallError) as exc_info:
                ops.describe_user_pool(POOL_ID)

        assert exc_info.value.operation == "DescribeUserPool"


class TestCognitoClientManager:
    """Tests for CognitoClientManager."""

    def test_region_from_pool_id(self, clean_aws_env):
        manager = CognitoClientManager("eu-west-1_Abc123")
        assert manager.region == "eu-west-1"
        assert manager.profile is None

    def test_env_region_wins(self, clean_aws_env, monkeypatch):
        monkeypatch.setenv("AWS_REGION", "ap-southeast-2")
        manager = CognitoClientManager(POOL_ID)
        assert manager.region == "ap-southeast-2"

    def test_unresolvable_region(self, clean_aws_env):
        with pytest.raises(ConfigError):
            CognitoClientManager("not-a-pool-id")

    @patch("batchcognito.core.cognito_client.boto3.Session")
    def test_client_is_cached(self, mock_session_class, clean_aws_env):
        session = MagicMock()
        mock_session_class.return_value = session

        manager = CognitoClientManager(POOL_ID)
        first = manager.get_client()
        second = manager.get_client()

        assert first is second
        session.client.assert_called_once()
        mock_session_class.assert_called_once_with(
            profile_name=None, region_name="us-east-1"
        )
        assert session.client.call_args[0] == ("cognito-idp",)
        config = session.client.call_args[1]["config"]
        assert config.retries["max_attempts"] == 1

    @patch("batchcognito.core.cognito_client.boto3.Session")
    def test_unknown_profile(self, mock_session_class, clean_aws_env, monkeypatch):
        monkeypatch.setenv("AWS_PROFILE", "missing")
        mock_session_class.side_effect = ProfileNotFound(profile="missing")

        manager = CognitoClientManager(POOL_ID)

        with pytest.raises(ConfigError, match="Failed to initialize"):
            manager.get_client()

    @patch("batchcognito.core.cognito_client.boto3.Session")
    def test_get_user_operations(self, mock_session_class, clean_aws_env):
        client = MagicMock()
        mock_session_class.return_value.client.return_value = client

        ops = get_user_operations(POOL_ID)

        assert isinstance(ops, CognitoUserOperations)
        assert ops.client is client
