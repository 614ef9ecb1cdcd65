"""Tests for group operation stubs."""

import pytest

from batchcognito.core.exceptions import FileOperationError, ValidationError
from batchcognito.models.config import GroupOperationConfig
from batchcognito.operations.group_ops import run_group_operation
from conftest import POOL_ID


@pytest.fixture
def emails_file(tmp_path):
    path = tmp_path / "emails.txt"
    path.write_text("a@example.com\nb@example.com\n\n# skipped\nc@example.com\n")
    return path


@pytest.mark.parametrize("operation", ["add", "del"])
def test_counts_emails_without_remote_calls(operation, emails_file, caplog):
    config = GroupOperationConfig(
        pool_id=POOL_ID, groups=("admins",), emails_file=emails_file
    )

    with caplog.at_level("INFO", logger="batchcognito"):
        assert run_group_operation(config, operation) == 3

    assert "not implemented yet" in caplog.text


def test_unknown_operation(emails_file):
    config = GroupOperationConfig(
        pool_id=POOL_ID, groups=("admins",), emails_file=emails_file
    )

    with pytest.raises(ValidationError):
        run_group_operation(config, "move")


def test_missing_emails_file(tmp_path):
    config = GroupOperationConfig(
        pool_id=POOL_ID, groups=("admins",), emails_file=tmp_path / "missing.txt"
    )

    with pytest.raises(FileOperationError):
        run_group_operation(config, "add")
