"""Console output helpers for the command-line tools."""

import sys
from functools import wraps
from typing import Any, Callable

import click
from rich.console import Console
from rich.markup import escape

console = Console(soft_wrap=True)
err_console = Console(stderr=True, soft_wrap=True)


def success(message: str) -> None:
    """Print a success message."""
    console.print(f"[green]✓[/green] {escape(message)}")


def error(message: str) -> None:
    """Print an error message to stderr."""
    err_console.print(f"[bold red]Error:[/bold red] {escape(message)}", highlight=False)


def handle_errors(func: Callable) -> Callable:
    """
    Decorator for click commands: report uncaught exceptions and exit 1.

    Click's own exceptions (usage errors, aborts, explicit exits) pass through
    untouched so click keeps its exit codes.
    """

    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except (click.exceptions.ClickException, click.exceptions.Exit, click.Abort):
            raise
        except KeyboardInterrupt:
            error("Interrupted")
            sys.exit(130)
        except Exception as e:
            error(str(e))
            sys.exit(1)

    return wrapper
