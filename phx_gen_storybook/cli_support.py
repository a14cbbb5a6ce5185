"""Shared console and prompt helpers for the phx-gen-storybook CLI."""
from __future__ import annotations

from typing import Iterable, List

import typer
from rich.console import Console
from rich.markup import escape

from phx_gen_storybook.core.errors import InvalidOptionError


def reject_extra_args(args: Iterable[str]) -> None:
    """Fail on leftover command line tokens.

    Stray positional arguments are reported before unknown switches.

    Raises:
        InvalidOptionError: Naming the offending token verbatim
    """
    extra: List[str] = list(args)
    positional = [token for token in extra if not token.startswith("-")]
    if positional:
        raise InvalidOptionError(positional[0])
    if extra:
        raise InvalidOptionError(extra[0])


def confirm_action(message: str, default: bool = False) -> bool:
    """Ask a yes/no question on the terminal.

    Args:
        message: Question to display
        default: Answer used when the user just presses Enter
    """
    return typer.confirm(message, default=default)


def handle_cli_error(
    e: Exception,
    console: Console,
    verbose: bool = False,
    exit_code: int = 1
) -> None:
    """Handle CLI errors with consistent formatting.

    Args:
        e: Exception to handle
        console: Rich console for output
        verbose: Show exception traceback if True
        exit_code: Exit code to use
    """
    console.print(f"[red]Error:[/red] {escape(str(e))}", highlight=False)
    if verbose:
        console.print_exception()
    raise typer.Exit(exit_code)


def print_action(console: Console, action: str, path: str, color: str = "green") -> None:
    """Print a file action line such as ``* creating lib/my_app_web/storybook.ex``."""
    console.print(f"[{color}]* {action}[/{color}] {escape(path)}", highlight=False)