"""File metadata lookup for local playlist entries."""

from pathlib import Path

import attrs
from attrs import define

from playsort.config import get_logger
from playsort.domain.entities.playlist import Playlist, PlaylistItem, is_remote_path

logger = get_logger(__name__)


@define(frozen=True, slots=True)
class FileInfo:
    """Subset of ``os.stat`` results used for sorting."""

    modified_time: float
    size_bytes: int


def resolve_local_path(path: str, base_dir: Path | None = None) -> Path:
    """Resolve a playlist path against ``base_dir`` when it is relative."""
    local = Path(path).expanduser()
    if base_dir is not None and not local.is_absolute():
        local = base_dir / local
    return local


def read_file_info(path: str, base_dir: Path | None = None) -> FileInfo | None:
    """Stat a local playlist entry.

    Returns None for URLs and for files that cannot be read; the latter is
    logged as a warning and sorts as if its metadata were zero.
    """
    if is_remote_path(path):
        return None

    try:
        stat = resolve_local_path(path, base_dir).stat()
    except OSError as e:
        logger.warning(f"failed to read file info for: {path} ({e})")
        return None

    return FileInfo(modified_time=stat.st_mtime, size_bytes=stat.st_size)


def with_file_info(item: PlaylistItem, base_dir: Path | None = None) -> PlaylistItem:
    """Attach file metadata to a single item."""
    info = read_file_info(item.path, base_dir)
    if info is None:
        return item
    return item.with_file_info(info.modified_time, info.size_bytes)


def enrich_playlist(playlist: Playlist, base_dir: Path | None = None) -> Playlist:
    """Attach file metadata to every local entry of a playlist."""
    items = [with_file_info(item, base_dir) for item in playlist.items]
    logger.debug(
        f"Read file info for {sum(1 for i in items if i.size_bytes is not None)}"
        f" of {len(items)} entries"
    )
    return attrs.evolve(playlist, items=items)
