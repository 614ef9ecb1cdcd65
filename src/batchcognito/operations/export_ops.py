"""Export operations for Cognito user pools."""

import csv
import io
import time
from collections.abc import Sequence

from ..core.cognito_client import LIST_USERS, get_user_operations
from ..core.config import MAX_PAGE_SIZE
from ..core.deadline import run_with_deadline
from ..core.exceptions import RemoteCallError, wrap_client_error
from ..core.interfaces import CsvSinkProtocol, UserListingProtocol
from ..models.config import ExportConfig
from ..models.user import CognitoUser
from ..utils.file_utils import open_sink
from ..utils.logging_utils import get_logger

CSV_HEADER = ("username", "email")

# Module logger
logger = get_logger(__name__)


def format_csv_row(values: Sequence[str]) -> str:
    """Render one CSV row terminated by a bare LF.

    Fields containing a comma, quote or line break are quoted; all other
    values are written as-is.

    Args:
        values: Field values

    Returns:
        str: The encoded row including its newline
    """
    buffer = io.StringIO()
    csv.writer(buffer, lineterminator="\n").writerow(values)
    return buffer.getvalue()


def _fetch_page(
    user_ops: UserListingProtocol,
    pool_id: str,
    pagination_token: str | None,
    page: int,
) -> tuple[list, str | None]:
    """Request one page, translating every failure into RemoteCallError."""
    logger.debug(
        f"Requesting page {page} of users",
        extra={"pool_id": pool_id, "page": page, "page_size": MAX_PAGE_SIZE},
    )
    try:
        return user_ops.list_users_page(
            pool_id, limit=MAX_PAGE_SIZE, pagination_token=pagination_token
        )
    except Exception as e:
        raise wrap_client_error(e, LIST_USERS, page) from e


def _stream_users(
    config: ExportConfig, user_ops: UserListingProtocol, sink: CsvSinkProtocol
) -> int:
    sink.write(format_csv_row(CSV_HEADER))

    total_users = 0
    page = 0
    pagination_token: str | None = None

    while True:
        page += 1
        if config.max_pages is not None and page > config.max_pages:
            raise RemoteCallError(
                "Pagination did not finish within the page limit",
                operation=LIST_USERS,
                page=page,
                details=f"max_pages={config.max_pages}",
            )

        users, next_token = _fetch_page(
            user_ops, config.pool_id, pagination_token, page
        )

        for item in users:
            sink.write(format_csv_row(CognitoUser.from_cognito_data(item).to_row()))
        total_users += len(users)

        # Completed pages stay in the output even if a later page fails
        sink.flush()

        logger.debug(
            f"Wrote {len(users)} users from page {page}",
            extra={"pool_id": config.pool_id, "page": page, "total_users": total_users},
        )

        if next_token and next_token == pagination_token:
            raise RemoteCallError(
                "Pagination token did not advance",
                operation=LIST_USERS,
                page=page,
            )

        # An empty token also marks the last page
        pagination_token = next_token or None
        if pagination_token is None:
            break

    sink.flush()
    return total_users


def export_users_to_csv(
    config: ExportConfig,
    user_ops: UserListingProtocol,
    sink: CsvSinkProtocol | None = None,
) -> int:
    """Stream every user of a pool to CSV.

    Writes the ``username,email`` header, then one row per user, page by
    page, until the service stops returning a pagination token.

    Args:
        config: Export configuration
        user_ops: Paginated user listing collaborator
        sink: Output target; when omitted one is opened from
            ``config.output_file`` (standard output if unset) and closed
            when the export ends

    Returns:
        int: Number of user rows written

    Raises:
        FileOperationError: If the destination cannot be created or written
        RemoteCallError: If any page request fails
    """
    owns_sink = sink is None
    if sink is None:
        sink = open_sink(config.output_file)

    logger.info(
        f"Exporting users of {config.pool_id} to {sink.name}",
        extra={"pool_id": config.pool_id, "file_path": sink.name},
    )

    try:
        total_users = _stream_users(config, user_ops, sink)
    finally:
        if owns_sink:
            sink.close()

    logger.info(
        "Finished exporting Cognito users to CSV",
        extra={"pool_id": config.pool_id, "total_users": total_users},
    )
    return total_users


def run_sync(
    config: ExportConfig, user_ops: UserListingProtocol | None = None
) -> int:
    """Export a user pool to CSV, honoring the configured deadline.

    Args:
        config: Export configuration
        user_ops: Optional listing collaborator; a boto3-backed one is
            built from the environment when omitted

    Returns:
        int: Number of user rows written

    Raises:
        ExportTimeoutError: If ``config.timeout`` elapses first
        ConfigError: If the AWS client cannot be configured
        FileOperationError: If the destination cannot be created or written
        RemoteCallError: If any page request fails
    """
    logger.info(
        "Starting users sync from Cognito user pool",
        extra={"pool_id": config.pool_id, "operation": "sync"},
    )
    if config.concurrency != 1:
        logger.debug(
            f"Ignoring concurrency={config.concurrency}; sync runs one request at a time"
        )
    if config.groups:
        logger.debug(f"Groups {list(config.groups)} are not used by sync")

    if user_ops is None:
        user_ops = get_user_operations(config.pool_id)

    started = time.monotonic()
    total_users = run_with_deadline(
        export_users_to_csv, config.timeout, config, user_ops
    )

    logger.info(
        "Users sync completed successfully",
        extra={
            "pool_id": config.pool_id,
            "operation": "sync",
            "total_users": total_users,
            "duration": time.monotonic() - started,
        },
    )
    return total_users
