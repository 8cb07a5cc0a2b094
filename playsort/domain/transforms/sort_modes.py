"""Sort modes understood by the playlist reordering engine."""

from collections.abc import Callable
from typing import Any

from attrs import define

from playsort.config import get_logger
from playsort.domain.entities.playlist import PlaylistItem

from .natural import natural_sort_key

logger = get_logger(__name__)


@define(frozen=True, slots=True)
class SortMode:
    """A named ordering of playlist items."""

    id: str
    title: str
    key: Callable[[PlaylistItem], Any]
    reverse: bool = False


def _name_key(item: PlaylistItem) -> Any:
    return natural_sort_key(item.display_name)


def _date_key(item: PlaylistItem) -> float:
    return item.modified_time or 0


def _size_key(item: PlaylistItem) -> int:
    return item.size_bytes or 0


# Order matters: the first mode is the fallback for unknown ids
SORT_MODES: tuple[SortMode, ...] = (
    SortMode("name-asc", "name", _name_key),
    SortMode("name-desc", "name in descending order", _name_key, reverse=True),
    SortMode("date-asc", "date", _date_key),
    SortMode("date-desc", "date in descending order", _date_key, reverse=True),
    SortMode("size-asc", "size", _size_key),
    SortMode("size-desc", "size in descending order", _size_key, reverse=True),
)

DEFAULT_SORT_MODE = SORT_MODES[0]


def resolve_sort_mode(mode_id: str | None) -> SortMode:
    """Look up a sort mode by id, falling back to the default mode.

    Unknown ids never fail; they are logged and sorted by the default.
    """
    for mode in SORT_MODES:
        if mode.id == mode_id:
            return mode

    if mode_id:
        logger.warning(
            f"Unknown sort mode {mode_id!r}, falling back to {DEFAULT_SORT_MODE.id}"
        )
    return DEFAULT_SORT_MODE


def sort_mode_ids() -> list[str]:
    """All known sort mode ids, in definition order."""
    return [mode.id for mode in SORT_MODES]
