"""Rich utilities: shared console, themes, and helpers."""

from __future__ import annotations

from rich.console import Console
from rich.theme import Theme
from rich.traceback import install as rich_traceback_install

_console: Console | None = None
_err_console: Console | None = None

_THEME = Theme(
    {
        "info": "cyan",
        "warning": "yellow",
        "error": "red",
        "success": "green",
        "muted": "grey62",
    }
)


def get_console(stderr: bool = False) -> Console:
    """Return a shared Rich Console instance.

    A separate stderr console is kept so status output never lands in a
    CSV stream written to stdout.
    """
    global _console, _err_console
    if stderr:
        if _err_console is None:
            _err_console = Console(
                theme=_THEME, highlight=False, soft_wrap=False, stderr=True
            )
        return _err_console
    if _console is None:
        _console = Console(theme=_THEME, highlight=False, soft_wrap=False)
    return _console


def install_rich_tracebacks() -> None:
    """Enable rich tracebacks globally for nicer error output."""
    rich_traceback_install(show_locals=False, word_wrap=True, suppress=["click"])
