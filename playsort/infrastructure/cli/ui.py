"""UI helpers for CLI interaction.

This module provides reusable UI components and helpers for the CLI,
keeping the presentation logic separate from playlist logic.
"""

from collections.abc import Callable
import functools
import json
from typing import Any, ParamSpec, TypeVar

from rich.console import Console
from rich.table import Table
import typer

from playsort.config import get_logger
from playsort.domain.entities.playlist import Playlist
from playsort.domain.transforms import MESSAGE_KEY, MOVES_KEY, SORT_MODES

# Initialize console and logger
console = Console()
logger = get_logger(__name__)

P = ParamSpec("P")
R = TypeVar("R")


def command_error_handler(func: Callable[P, R]) -> Callable[P, R]:
    """Decorator to standardize error handling for CLI commands.

    This decorator wraps a command function to:
    1. Provide consistent error handling using Typer's Exit mechanism
    2. Log errors using Loguru with proper context
    3. Display user-friendly error messages with Rich

    Args:
        func: The command function to wrap

    Returns:
        Wrapped function with integrated error handling
    """

    @functools.wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
        operation = func.__name__.replace("_", " ")

        with logger.contextualize(operation=operation):
            try:
                logger.debug(f"Executing {operation}")
                return func(*args, **kwargs)

            except typer.Exit:
                raise

            except typer.Abort:
                logger.info(f"Operation {operation} aborted by user")
                raise

            except Exception as e:
                display_error(e, operation)
                raise typer.Exit(code=1) from e

    return wrapper


def playlist_to_dict(playlist: Playlist) -> dict[str, Any]:
    """Plain representation of a playlist result for JSON output."""
    return {
        "name": playlist.name,
        "message": playlist.metadata.get(MESSAGE_KEY),
        "moves": playlist.metadata.get(MOVES_KEY, 0),
        "current_position": playlist.current_position,
        "items": [item.path for item in playlist.items],
    }


def display_playlist_result(
    playlist: Playlist,
    output_format: str = "table",
    show_items: bool = True,
) -> None:
    """Display the outcome of a playlist edit.

    Args:
        playlist: Edited playlist
        output_format: "table" or "json" output format
        show_items: Whether to list the entries in their new order
    """
    if output_format == "json":
        console.print_json(json.dumps(playlist_to_dict(playlist)))
        return

    message = playlist.metadata.get(MESSAGE_KEY) or "Playlist unchanged"
    console.print(f"\n[bold blue]{message}[/bold blue]")

    summary_table = Table(show_header=False, box=None, padding=(0, 2))
    summary_table.add_column(style="cyan")
    summary_table.add_column(style="green bold")
    summary_table.add_row("Entries", str(len(playlist.items)))
    summary_table.add_row("Moves", str(playlist.metadata.get(MOVES_KEY, 0)))
    if playlist.current_position is not None:
        summary_table.add_row("Current", str(playlist.current_position + 1))
    console.print(summary_table)

    if show_items and playlist.items:
        console.print()
        details_table = Table(title=playlist.name or "Playlist")
        details_table.add_column("#", style="dim", justify="right")
        details_table.add_column("Entry", style="green")
        for i, item in enumerate(playlist.items, 1):
            marker = "▶ " if i - 1 == playlist.current_position else ""
            details_table.add_row(str(i), f"{marker}{item.title or item.display_name}")
        console.print(details_table)

    console.print()


def display_sort_modes() -> None:
    """List the available sort modes."""
    table = Table(title="Sort Modes")
    table.add_column("ID", style="cyan")
    table.add_column("Sorts by", style="green")
    for mode in SORT_MODES:
        table.add_row(mode.id, mode.title)
    console.print(table)


def display_error(error: Exception, operation: str) -> None:
    """Display error message with consistent formatting.

    Args:
        error: The exception that occurred
        operation: Description of the operation that failed
    """
    console.print(f"\n[bold red]✗ Error during {operation}:[/bold red] {error}")
    logger.exception(f"Error during {operation}")
