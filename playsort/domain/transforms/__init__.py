"""Pure functional transformations for domain entities."""

from .core import (
    MESSAGE_KEY,
    MOVES_KEY,
    Transform,
    create_pipeline,
    play_first,
    play_last,
    realize_permutation,
    reorder,
    reverse,
    reverse_moves,
    shuffle,
    sort_by,
    sorted_order,
)
from .natural import natural_sort_key, normalize_name
from .sort_modes import (
    DEFAULT_SORT_MODE,
    SORT_MODES,
    SortMode,
    resolve_sort_mode,
    sort_mode_ids,
)

__all__ = [
    # Core pipeline functions
    "MESSAGE_KEY",
    "MOVES_KEY",
    "Transform",
    "create_pipeline",
    # Reordering engine
    "realize_permutation",
    "reorder",
    "reverse_moves",
    "sorted_order",
    # Playlist transforms
    "play_first",
    "play_last",
    "reverse",
    "shuffle",
    "sort_by",
    # Ordering
    "DEFAULT_SORT_MODE",
    "SORT_MODES",
    "SortMode",
    "natural_sort_key",
    "normalize_name",
    "resolve_sort_mode",
    "sort_mode_ids",
]
