"""Click-based CLI entry point for batch-cognito."""

import sys
from pathlib import Path
from typing import Any

import click

from .. import __version__
from ..core.config import POOL_ID_ENV_VAR
from ..core.exceptions import ValidationError
from ..models.config import ExportConfig, GroupOperationConfig
from ..utils.display_utils import RED, RESET, YELLOW
from ..utils.logging_utils import configure_from_env
from ..utils.rich_utils import install_rich_tracebacks
from .commands import OperationHandler


def _apply_verbosity(ctx: click.Context, param: click.Parameter, value: int) -> int:
    """Raise the log level for ``-v`` given after a subcommand name."""
    if value:
        root = ctx.find_root()
        root.meta["verbose"] = root.meta.get("verbose", 0) + value
        configure_from_env(root.meta["verbose"])
    return value


verbose_option = click.option(
    "-v",
    "--verbose",
    count=True,
    expose_value=False,
    callback=_apply_verbosity,
    help="Increase verbosity (use -v, -vv, ...).",
)

pool_id_option = click.option(
    "--pool-id",
    envvar=POOL_ID_ENV_VAR,
    required=True,
    help=f"Cognito user pool ID (e.g. us-east-1_XXXXXXXXX). Defaults to ${POOL_ID_ENV_VAR}.",
)

timeout_option = click.option(
    "--timeout",
    type=click.FloatRange(min=0, min_open=True),
    metavar="SECONDS",
    help="Maximum duration allowed for the operation, in seconds.",
)

concurrency_option = click.option(
    "--concurrency",
    type=click.IntRange(min=1),
    default=1,
    show_default=True,
    metavar="N",
    help="Maximum number of concurrent operations.",
)

group_option = click.option(
    "--group",
    "--groups",
    "groups",
    multiple=True,
    help="Cognito group name. Repeat for several groups.",
)


def _build_config(factory: type, **kwargs: Any) -> Any:
    try:
        return factory(**kwargs)
    except ValidationError as e:
        raise click.BadParameter(str(e)) from e


@click.group(invoke_without_command=True)
@click.option(
    "-v",
    "--verbose",
    count=True,
    help="Increase verbosity (use -v, -vv, ...). "
    "BATCH_COGNITO_LOG_LEVEL overrides this when set.",
)
@click.version_option(version=__version__, prog_name="batch-cognito")
@click.pass_context
def cli(ctx: click.Context, verbose: int) -> None:
    """batch-cognito - Batch operations for AWS Cognito user pools."""
    ctx.meta["verbose"] = verbose
    configure_from_env(verbose)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


@cli.command()
@pool_id_option
@click.option(
    "-f",
    "--file",
    "output_file",
    type=click.Path(dir_okay=False, path_type=Path),
    metavar="PATH",
    help="Output CSV file. Users are written to stdout when omitted.",
)
@timeout_option
@group_option
@concurrency_option
@click.option(
    "--max-pages",
    type=click.IntRange(min=1),
    metavar="N",
    help="Fail if pagination has not finished after N pages.",
)
@verbose_option
def sync(
    pool_id: str,
    output_file: Path | None,
    timeout: float | None,
    groups: tuple[str, ...],
    concurrency: int,
    max_pages: int | None,
) -> None:
    """Export all users of a Cognito user pool as username,email CSV."""
    config = _build_config(
        ExportConfig,
        pool_id=pool_id,
        output_file=output_file,
        timeout=timeout,
        # Sync issues one request at a time
        concurrency=1,
        groups=groups,
        max_pages=max_pages,
    )
    handler = OperationHandler()
    handler.handle_sync(config)


def _group_command(operation: str, name: str, help_text: str) -> click.Command:
    @cli.command(name=name, help=help_text)
    @pool_id_option
    @click.option(
        "--group",
        "--groups",
        "groups",
        multiple=True,
        required=True,
        help="Cognito group name. Repeat for several groups.",
    )
    @click.option(
        "--emails-file",
        required=True,
        type=click.Path(exists=True, dir_okay=False, readable=True, path_type=Path),
        help="File containing user e-mails, one per line.",
    )
    @concurrency_option
    @timeout_option
    @verbose_option
    def command(
        pool_id: str,
        groups: tuple[str, ...],
        emails_file: Path,
        concurrency: int,
        timeout: float | None,
    ) -> None:
        config = _build_config(
            GroupOperationConfig,
            pool_id=pool_id,
            groups=groups,
            emails_file=emails_file,
            concurrency=concurrency,
            timeout=timeout,
        )
        handler = OperationHandler()
        handler.handle_group_operation(config, operation)

    return command


add = _group_command("add", "add", "Add users to one or more Cognito groups.")
delete = _group_command("del", "del", "Remove users from one or more Cognito groups.")


@cli.command()
@pool_id_option
@verbose_option
def doctor(pool_id: str) -> None:
    """Test AWS credentials and access to the user pool."""
    handler = OperationHandler()
    if not handler.handle_doctor(pool_id):
        sys.exit(1)


def main() -> None:
    """Main entry point for the CLI application."""
    try:
        install_rich_tracebacks()
        # Non-standalone so interrupts reach us instead of click's "Aborted!"
        rv = cli(standalone_mode=False)
    except (KeyboardInterrupt, click.exceptions.Abort):
        click.echo(f"\n{YELLOW}Operation interrupted by user.{RESET}", err=True)
        sys.exit(130)
    except click.ClickException as e:
        e.show()
        sys.exit(e.exit_code)
    except Exception as e:
        click.echo(f"{RED}Unexpected error: {e}{RESET}", err=True)
        sys.exit(1)
    sys.exit(rv if isinstance(rv, int) else 0)


if __name__ == "__main__":
    main()
