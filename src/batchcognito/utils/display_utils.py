"""Display utilities for user-facing status output."""

import click

# Color constants for terminal output
RED = "\033[91m"
GREEN = "\033[92m"
YELLOW = "\033[93m"
CYAN = "\033[96m"
RESET = "\033[0m"


def print_error(message: str) -> None:
    """Print an error message to stderr.

    Args:
        message: Error message
    """
    click.echo(f"{RED}ERROR: {message}{RESET}", err=True)


def print_success(message: str, err: bool = False) -> None:
    """Print a success message.

    Args:
        message: Success message
        err: Write to stderr instead of stdout, used when stdout carries CSV
    """
    click.echo(f"{GREEN}SUCCESS: {message}{RESET}", err=err)


def print_info(message: str, err: bool = False) -> None:
    """Print an info message.

    Args:
        message: Info message
        err: Write to stderr instead of stdout
    """
    click.echo(f"{CYAN}INFO: {message}{RESET}", err=err)
