"""Tests for the doctor check."""

from unittest.mock import MagicMock, patch

from batchcognito.core.auth import doctor
from batchcognito.core.exceptions import ConfigError, RemoteCallError
from conftest import POOL_ID


def test_doctor_success():
    user_ops = MagicMock()
    user_ops.describe_user_pool.return_value = {
        "Name": "customers",
        "EstimatedNumberOfUsers": 42,
    }

    result = doctor(POOL_ID, user_ops)

    assert result["success"] is True
    assert result["pool_name"] == "customers"
    assert result["estimated_users"] == 42
    user_ops.describe_user_pool.assert_called_once_with(POOL_ID)


def test_doctor_remote_failure():
    user_ops = MagicMock()
    user_ops.describe_user_pool.side_effect = RemoteCallError(
        "DescribeUserPool failed: denied", operation="DescribeUserPool"
    )

    result = doctor(POOL_ID, user_ops)

    assert result["success"] is False
    assert "denied" in result["error"]


@patch("batchcognito.core.auth.CognitoClientManager")
def test_doctor_config_failure(mock_manager_class):
    mock_manager_class.side_effect = ConfigError("Cannot determine AWS region")

    result = doctor("bad")

    assert result["success"] is False
    assert "region" in result["error"]


@patch("batchcognito.core.auth.CognitoUserOperations")
@patch("batchcognito.core.auth.CognitoClientManager")
def test_doctor_builds_client(mock_manager_class, mock_ops_class):
    mock_manager_class.return_value.region = "us-east-1"
    mock_ops_class.return_value.describe_user_pool.return_value = {"Name": "p"}

    result = doctor(POOL_ID)

    assert result["success"] is True
    assert result["region"] == "us-east-1"
    mock_manager_class.assert_called_once_with(POOL_ID)
