"""Shared helpers for the report-sorter CLI.

Exit codes, console output helpers and logging setup used by the command
modules.
"""

from __future__ import annotations

import logging
from pathlib import Path

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_CONFIG_ERROR = 2

console = Console()
err_console = Console(stderr=True)


def _setup_logging(verbose: bool = False, quiet: bool = False) -> None:
    """Configure root logging through Rich.

    Args:
        verbose: Log at DEBUG level.
        quiet: Log errors only (ignored when verbose is set).

    """
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.ERROR
    else:
        level = logging.WARNING

    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, rich_tracebacks=verbose, show_path=verbose)],
        force=True,
    )


def _error(message: str) -> None:
    err_console.print(f"[red]Error:[/red] {escape(message)}")


def _warning(message: str) -> None:
    err_console.print(f"[yellow]Warning:[/yellow] {escape(message)}")


def _validate_input_path(path: str) -> Path:
    """Resolve a table file argument, exiting with EXIT_ERROR if unusable."""
    resolved = Path(path).expanduser().resolve()

    if not resolved.exists():
        _error(f"File does not exist: {resolved}")
        raise typer.Exit(code=EXIT_ERROR)

    if not resolved.is_file():
        _error(f"Path is not a file: {resolved}")
        raise typer.Exit(code=EXIT_ERROR)

    return resolved
