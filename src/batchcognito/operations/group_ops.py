"""Group membership operations for Cognito user pools.

Only the request surface exists: the e-mails are read and the request is
logged, but no membership is changed.
"""

from ..core.exceptions import ValidationError
from ..models.config import GroupOperationConfig
from ..utils.file_utils import read_emails_generator
from ..utils.logging_utils import get_logger

GROUP_OPERATIONS = {
    "add": "add groups",
    "del": "remove groups",
}

# Module logger
logger = get_logger(__name__)


def run_group_operation(config: GroupOperationConfig, operation: str) -> int:
    """Handle an ``add`` or ``del`` group request.

    Args:
        config: Group operation configuration
        operation: Either ``"add"`` or ``"del"``

    Returns:
        int: Number of e-mails that the request covers

    Raises:
        ValidationError: If the operation is unknown
        FileOperationError: If the e-mails file cannot be read
    """
    if operation not in GROUP_OPERATIONS:
        raise ValidationError(
            "Unknown group operation", field="operation", value=operation
        )

    emails = list(read_emails_generator(config.emails_file))

    logger.info(
        f"{GROUP_OPERATIONS[operation]} operation requested (not implemented yet)",
        extra={
            "operation": operation,
            "pool_id": config.pool_id,
            "file_path": str(config.emails_file),
        },
    )
    logger.debug(
        f"groups={list(config.groups)} emails={len(emails)} "
        f"concurrency={config.concurrency} timeout={config.timeout}"
    )

    return len(emails)
