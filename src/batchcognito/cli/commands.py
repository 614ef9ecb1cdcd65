"""Command handlers for CLI operations."""

import sys
from typing import NoReturn

import click
from rich.table import Table

from ..core.auth import doctor
from ..core.exceptions import (
    BatchCognitoError,
    ExportTimeoutError,
    RemoteCallError,
)
from ..models.config import ExportConfig, GroupOperationConfig
from ..operations.export_ops import run_sync
from ..operations.group_ops import GROUP_OPERATIONS, run_group_operation
from ..utils.display_utils import print_error, print_info, print_success
from ..utils.rich_utils import get_console


class OperationHandler:
    """Handles CLI operations for Cognito user pools.

    Each handler runs one operation and turns any tool error into a
    readable message and a non-zero exit status.
    """

    def _handle_operation_error(
        self, error: BatchCognitoError, operation_name: str
    ) -> NoReturn:
        """Report an operation error and exit.

        Args:
            error: The exception that occurred
            operation_name: Name of the operation that failed
        """
        if isinstance(error, ExportTimeoutError):
            print_error(f"{operation_name} timed out: {error}")
        elif isinstance(error, RemoteCallError):
            print_error(f"{operation_name} failed calling Cognito: {error}")
        else:
            print_error(f"{operation_name} failed: {error}")
        sys.exit(1)

    def handle_sync(self, config: ExportConfig) -> int:
        """Export all users of a pool to CSV.

        Args:
            config: Export configuration

        Returns:
            int: Number of users exported
        """
        try:
            total_users = run_sync(config)
        except BatchCognitoError as e:
            self._handle_operation_error(e, "Sync")

        destination = str(config.output_file) if config.output_file else "stdout"
        print_success(
            f"Exported {total_users} users to {destination}",
            err=config.writes_to_stdout,
        )
        return total_users

    def handle_group_operation(
        self, config: GroupOperationConfig, operation: str
    ) -> int:
        """Handle an add/del group request.

        Args:
            config: Group operation configuration
            operation: ``add`` or ``del``

        Returns:
            int: Number of e-mails covered by the request
        """
        try:
            count = run_group_operation(config, operation)
        except BatchCognitoError as e:
            self._handle_operation_error(e, GROUP_OPERATIONS.get(operation, operation))

        print_info(
            f"{GROUP_OPERATIONS[operation].capitalize()} is not implemented yet; "
            f"{count} e-mails read, no changes made"
        )
        return count

    def handle_doctor(self, pool_id: str) -> bool:
        """Check credentials and pool access.

        Args:
            pool_id: Cognito user pool ID

        Returns:
            bool: True when the pool is reachable
        """
        result = doctor(pool_id)

        table = Table(title="batch-cognito doctor", show_header=False)
        table.add_column("Check", style="muted")
        table.add_column("Result")
        table.add_row("Pool ID", pool_id)
        table.add_row("Region", str(result.get("region") or "-"))
        if result["success"]:
            table.add_row("Pool name", str(result.get("pool_name") or "-"))
            table.add_row("Estimated users", str(result.get("estimated_users", "-")))
            table.add_row("Status", "[success]OK[/success]")
        else:
            table.add_row("Status", f"[error]{result.get('error')}[/error]")
        get_console().print(table)

        if not result["success"]:
            click.echo("Doctor check failed", err=True)
        return bool(result["success"])
