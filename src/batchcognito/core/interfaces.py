"""Protocol interfaces for Cognito user pool operations."""

from typing import Any, Protocol


class UserListingProtocol(Protocol):
    """Protocol for the paginated user listing collaborator."""

    def list_users_page(
        self, pool_id: str, limit: int, pagination_token: str | None = None
    ) -> tuple[list[dict[str, Any]], str | None]:
        """Fetch a single page of users.

        Args:
            pool_id: Cognito user pool ID
            limit: Maximum number of users in the page
            pagination_token: Cursor returned by the previous page, if any

        Returns:
            Tuple[List[Dict[str, Any]], Optional[str]]: (users, next_token)
        """
        ...


class CsvSinkProtocol(Protocol):
    """Protocol for CSV output targets."""

    name: str

    def write(self, text: str) -> None:
        """Append text to the target."""
        ...

    def flush(self) -> None:
        """Flush buffered text to the target."""
        ...

    def close(self) -> None:
        """Release the target if the sink owns it."""
        ...
