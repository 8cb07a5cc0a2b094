"""Playlist editing commands for the playsort CLI."""

from pathlib import Path
import random
from typing import Annotated

import typer

from playsort.application.commands import run_commands
from playsort.config import get_logger, settings
from playsort.domain.entities.playlist import Playlist
from playsort.domain.transforms import (
    Transform,
    reverse,
    shuffle,
    sort_by,
    sort_mode_ids,
)
from playsort.infrastructure.cli.ui import (
    command_error_handler,
    console,
    display_playlist_result,
    display_sort_modes,
)
from playsort.infrastructure.file_info import enrich_playlist
from playsort.infrastructure.m3u import read_m3u, save_m3u, write_m3u

logger = get_logger(__name__)

PlaylistArg = Annotated[
    Path,
    typer.Argument(
        help="M3U playlist file", exists=True, dir_okay=False, readable=True
    ),
]
OutputOpt = Annotated[
    Path | None,
    typer.Option(
        "--output", "-o", help="Write the result here instead of in place"
    ),
]
FormatOpt = Annotated[
    str,
    typer.Option("--format", "-f", help="Output format (table, json)"),
]


def register_playlist_commands(app: typer.Typer) -> None:
    """Register playlist commands with the Typer app."""
    panel = "🎵 Playlist"
    app.command(name="sort", help="Sort a playlist", rich_help_panel=panel)(
        sort_command
    )
    app.command(name="reverse", help="Reverse a playlist", rich_help_panel=panel)(
        reverse_command
    )
    app.command(name="shuffle", help="Shuffle a playlist", rich_help_panel=panel)(
        shuffle_command
    )
    app.command(
        name="run",
        help="Run playlist command lines, e.g. 'sort date-desc startover'",
        rich_help_panel=panel,
    )(run)
    app.command(name="modes", help="List sort modes", rich_help_panel=panel)(modes)


def _load(playlist_path: Path, base_dir: Path | None = None) -> Playlist:
    playlist = read_m3u(playlist_path)
    return enrich_playlist(playlist, base_dir or playlist_path.parent)


def _apply_and_write(
    playlist_path: Path,
    transform: Transform,
    output: Path | None,
    output_format: str,
    base_dir: Path | None = None,
) -> Playlist:
    result = transform(_load(playlist_path, base_dir))
    target = output or playlist_path
    # Relative entries only stay valid next to the source playlist
    working_dir = None
    if target.parent.resolve() != playlist_path.parent.resolve():
        working_dir = (base_dir or playlist_path.parent).resolve()
    write_m3u(result, target, working_dir)
    display_playlist_result(result, output_format)
    return result


@command_error_handler
def sort_command(
    playlist_path: PlaylistArg,
    mode: Annotated[
        str | None,
        typer.Argument(help=f"Sort mode ({', '.join(sort_mode_ids())})"),
    ] = None,
    startover: Annotated[
        bool,
        typer.Option("--startover", help="Restart from the first entry after sorting"),
    ] = False,
    output: OutputOpt = None,
    base_dir: Annotated[
        Path | None,
        typer.Option(
            "--base-dir", help="Resolve relative entries here (default: playlist folder)"
        ),
    ] = None,
    output_format: FormatOpt = "table",
) -> None:
    """Sort a playlist by name, date or size."""
    mode = mode or settings.playlist.default_sort_mode
    _apply_and_write(
        playlist_path, sort_by(mode, startover), output, output_format, base_dir
    )


@command_error_handler
def reverse_command(
    playlist_path: PlaylistArg,
    output: OutputOpt = None,
    output_format: FormatOpt = "table",
) -> None:
    """Reverse a playlist."""
    _apply_and_write(playlist_path, reverse(), output, output_format)


@command_error_handler
def shuffle_command(
    playlist_path: PlaylistArg,
    seed: Annotated[
        int | None, typer.Option("--seed", help="Seed for a repeatable shuffle")
    ] = None,
    output: OutputOpt = None,
    output_format: FormatOpt = "table",
) -> None:
    """Shuffle a playlist."""
    rng = random.Random(seed) if seed is not None else None
    _apply_and_write(playlist_path, shuffle(rng), output, output_format)


@command_error_handler
def run(
    playlist_path: PlaylistArg,
    commands: Annotated[
        list[str],
        typer.Argument(help="Command lines, e.g. 'sort size-desc' 'playlast'"),
    ],
    output: OutputOpt = None,
    save: Annotated[
        bool,
        typer.Option(
            "--save", help="Also save a timestamped copy to the playlist directory"
        ),
    ] = False,
    seed: Annotated[
        int | None, typer.Option("--seed", help="Seed for shuffle commands")
    ] = None,
    output_format: FormatOpt = "table",
) -> None:
    """Run command lines against a playlist, in order."""
    rng = random.Random(seed) if seed is not None else None
    result = _apply_and_write(
        playlist_path,
        lambda p: run_commands(p, commands, rng),
        output,
        output_format,
    )
    if save:
        saved = save_m3u(result, working_dir=playlist_path.parent.resolve())
        console.print(f'[green]Playlist written to "{saved}"[/green]')


def modes() -> None:
    """List available sort modes."""
    display_sort_modes()
