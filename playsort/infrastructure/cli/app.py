"""playsort CLI - Main application entry point and app structure."""

from typing import Annotated

from rich.console import Console
import typer

from playsort import __version__
from playsort.config import get_logger, setup_loguru_logger
from playsort.infrastructure.cli.playlist_commands import register_playlist_commands

VERSION = __version__

console = Console()
logger = get_logger(__name__)

app = typer.Typer(
    help=f"🎵 playsort v{VERSION} - Sort, reverse and shuffle playlists",
    no_args_is_help=True,
    rich_markup_mode="rich",
    add_completion=False,
    pretty_exceptions_enable=True,
    pretty_exceptions_short=True,
    pretty_exceptions_show_locals=False,
)

register_playlist_commands(app)


@app.command(name="version", rich_help_panel="⚙️ System")
def version_command() -> None:
    """Show version information."""
    console.print(
        f"[bold bright_blue]🎵 playsort[/bold bright_blue] [dim]v{VERSION}[/dim]"
    )


@app.callback()
def init_cli(
    ctx: typer.Context,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable verbose output"),
    ] = False,
) -> None:
    """Initialize playsort CLI."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose

    setup_loguru_logger(verbose)


def main() -> int:
    """Application entry point."""
    try:
        return app() or 0
    except Exception:
        logger.exception("Unhandled exception")
        return 1
