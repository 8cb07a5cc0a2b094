"""M3U playlist files.

Reads extended M3U (``#EXTINF`` titles are kept, other directives are
skipped) and writes playlists back, either to a given path or as a
timestamped file in the playlist directory.
"""

from datetime import datetime
from pathlib import Path

from playsort.config import get_logger, resilient_operation, settings
from playsort.domain.entities.playlist import Playlist, PlaylistItem, is_remote_path
from playsort.domain.exceptions import EmptyPlaylistError, PlaylistSaveError

logger = get_logger(__name__)

M3U_HEADER = "#EXTM3U"
EXTINF_PREFIX = "#EXTINF:"


def parse_m3u(text: str, name: str | None = None) -> Playlist:
    """Parse M3U text into a playlist positioned at its first entry."""
    items: list[PlaylistItem] = []
    pending_title: str | None = None

    for raw_line in text.splitlines():
        line = raw_line.strip()
        if not line:
            continue
        if line.startswith(EXTINF_PREFIX):
            # "#EXTINF:<duration>,<title>"; the title may itself contain commas
            _, _, title = line[len(EXTINF_PREFIX) :].partition(",")
            pending_title = title.strip() or None
            continue
        if line.startswith("#"):
            continue
        items.append(PlaylistItem(path=line, title=pending_title))
        pending_title = None

    return Playlist(items=items, current_position=0 if items else None, name=name)


@resilient_operation("m3u_read")
def read_m3u(path: Path) -> Playlist:
    """Read an M3U file; the playlist is named after the file stem."""
    text = Path(path).read_text(encoding="utf-8-sig")
    playlist = parse_m3u(text, name=Path(path).stem)
    logger.debug(f"Read {len(playlist.items)} entries from {path}")
    return playlist


def render_m3u(playlist: Playlist, working_dir: Path | None = None) -> str:
    """Render a playlist as extended M3U text.

    Local paths are joined to ``working_dir`` when one is given, so the
    file still resolves when opened from elsewhere.
    """
    lines = [M3U_HEADER]
    for item in playlist.items:
        path = item.path
        if working_dir is not None and not is_remote_path(path):
            path = str(Path(working_dir) / path)
        if item.title:
            lines.append(f"{EXTINF_PREFIX},{item.title}")
        lines.append(path)
    return "\n".join(lines) + "\n"


def playlist_filename(count: int, now: datetime, prefix: str = "playlist") -> str:
    """Timestamped file name, e.g. ``playlist-012-240131-235959.m3u``."""
    return (
        f"{prefix}-{count:03d}-{now.year % 100:02d}{now.month:02d}{now.day:02d}"
        f"-{now.hour:02d}{now.minute:02d}{now.second:02d}.m3u"
    )


@resilient_operation("m3u_write")
def write_m3u(
    playlist: Playlist, path: Path, working_dir: Path | None = None
) -> Path:
    """Write a playlist to ``path``.

    Raises:
        PlaylistSaveError: If the file cannot be written
    """
    path = Path(path)
    try:
        path.write_text(render_m3u(playlist, working_dir), encoding="utf-8")
    except OSError as e:
        raise PlaylistSaveError(f'Error in creating playlist file "{path}"') from e
    logger.info(f'Playlist written to "{path}"')
    return path


def save_m3u(
    playlist: Playlist,
    directory: Path | None = None,
    working_dir: Path | None = None,
    now: datetime | None = None,
) -> Path:
    """Save a timestamped copy of a playlist into the playlist directory.

    Args:
        playlist: Playlist to save
        directory: Target directory, defaults to the configured playlist_dir
        working_dir: Base for relative local paths, defaults to the current directory
        now: Timestamp used in the file name, defaults to the current time

    Returns:
        Path of the written file

    Raises:
        EmptyPlaylistError: If the playlist has no entries
        PlaylistSaveError: If the directory or file cannot be created
    """
    if not playlist.items:
        raise EmptyPlaylistError("Nothing to save: playlist is empty")

    directory = Path(directory or settings.playlist.playlist_dir).expanduser()
    try:
        directory.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise PlaylistSaveError(
            f'Failed to create playlist directory "{directory}"'
        ) from e

    name = playlist_filename(
        len(playlist.items), now or datetime.now(), settings.playlist.file_prefix
    )
    return write_m3u(playlist, directory / name, working_dir or Path.cwd())
