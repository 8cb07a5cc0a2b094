"""playsort domain layer - pure playlist logic with no I/O."""

from . import entities, transforms

from .entities import Playlist, PlaylistItem, PlaylistMove, apply_moves
from .exceptions import (
    EmptyPlaylistError,
    PlaylistSaveError,
    PlaysortError,
    UnknownCommandError,
)
from .transforms import (
    SORT_MODES,
    SortMode,
    Transform,
    create_pipeline,
    natural_sort_key,
    reorder,
    resolve_sort_mode,
    reverse,
    shuffle,
    sort_by,
)

__all__ = [
    # Modules
    "entities",
    "transforms",
    # Key domain types
    "Playlist",
    "PlaylistItem",
    "PlaylistMove",
    "SortMode",
    "SORT_MODES",
    "apply_moves",
    # Errors
    "EmptyPlaylistError",
    "PlaylistSaveError",
    "PlaysortError",
    "UnknownCommandError",
    # Transform functions
    "Transform",
    "create_pipeline",
    "natural_sort_key",
    "reorder",
    "resolve_sort_mode",
    "reverse",
    "shuffle",
    "sort_by",
]
