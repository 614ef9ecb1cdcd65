import logging
from typing import Any

import pytest

POOL_ID = "us-east-1_TestPool1"


def make_user(username: str | None = "alice", email: str | None = None) -> dict[str, Any]:
    """Build a ListUsers response item."""
    user: dict[str, Any] = {"Attributes": [{"Name": "sub", "Value": "1234"}]}
    if username is not None:
        user["Username"] = username
    if email is not None:
        user["Attributes"].append({"Name": "email", "Value": email})
    return user


def make_page(count: int, prefix: str = "user") -> list[dict[str, Any]]:
    """Build ``count`` users named ``{prefix}{i}`` with matching e-mails."""
    return [
        make_user(f"{prefix}{i}", f"{prefix}{i}@example.com") for i in range(count)
    ]


class FakeUserSource:
    """In-memory listing collaborator returning scripted pages.

    Each entry of ``pages`` is ``(users, next_token)`` or an exception to
    raise for that call.
    """

    def __init__(self, pages: list[Any]) -> None:
        self.pages = list(pages)
        self.calls: list[dict[str, Any]] = []

    def list_users_page(
        self, pool_id: str, limit: int, pagination_token: str | None = None
    ) -> tuple[list[dict[str, Any]], str | None]:
        self.calls.append(
            {"pool_id": pool_id, "limit": limit, "pagination_token": pagination_token}
        )
        page = self.pages[len(self.calls) - 1]
        if isinstance(page, Exception):
            raise page
        return page


@pytest.fixture(autouse=True)
def reset_batchcognito_logging():
    """Route tool logs through the root logger so caplog sees them."""
    logger = logging.getLogger("batchcognito")
    logger.handlers.clear()
    logger.propagate = True
    logger.setLevel(logging.DEBUG)
    yield
    logger.handlers.clear()
    logger.propagate = True


@pytest.fixture
def pool_id():
    return POOL_ID


@pytest.fixture
def clean_aws_env(monkeypatch):
    """Remove AWS and tool variables that would leak from the host."""
    for name in (
        "AWS_REGION",
        "AWS_DEFAULT_REGION",
        "AWS_PROFILE",
        "COGNITO_USER_POOL_ID",
        "BATCH_COGNITO_LOG_LEVEL",
        "BATCH_COGNITO_LOG_FILE",
        "BATCH_COGNITO_LOG_FORMAT",
    ):
        monkeypatch.delenv(name, raising=False)
    # Keep check_env_file from picking up a stray .env
    monkeypatch.setattr("batchcognito.core.config.check_env_file", lambda: None)
