"""Operations on Cognito user pools."""

from .export_ops import CSV_HEADER, export_users_to_csv, format_csv_row, run_sync
from .group_ops import run_group_operation

__all__ = [
    "CSV_HEADER",
    "export_users_to_csv",
    "format_csv_row",
    "run_sync",
    "run_group_operation",
]
