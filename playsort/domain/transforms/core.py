"""
Pure functional transformations for playlists.

This module contains the playlist reordering engine and the curried playlist
transforms built on top of it. Every edit is expressed as a list of
single-entry moves because that is the only edit the host playlist supports;
the transforms then replay those moves on an immutable snapshot.

Transformations follow functional programming principles:
- Immutability: All operations return new objects instead of modifying existing ones
- Composition: Transformations can be combined to form complex pipelines
- Currying: Functions are designed to work with partial application
"""

import random
from collections.abc import Callable, Sequence

from toolz import compose_left, curry

from playsort.config import get_logger
from playsort.domain.entities.operations import PlaylistMove
from playsort.domain.entities.playlist import Playlist, PlaylistItem

from .sort_modes import resolve_sort_mode

logger = get_logger(__name__)

# Type alias for transformation functions
Transform = Callable[[Playlist], Playlist]

MESSAGE_KEY = "last_message"
MOVES_KEY = "last_moves"


# === Core Pipeline Functions ===


def create_pipeline(*operations: Transform) -> Transform:
    """
    Compose multiple transformations into a single operation.

    Args:
        *operations: Transformation functions to compose

    Returns:
        A single transformation function combining all operations
    """
    return compose_left(*operations)


# === Reordering Engine ===


def realize_permutation(order: Sequence[int]) -> list[PlaylistMove]:
    """Turn a target order into host moves.

    ``order[k]`` is the current index of the entry that must end up at
    position ``k``. Each position is settled in turn by swapping the entry
    sitting there with the slot it belongs to; a swap of positions ``i < j``
    is two moves, ``(i, j + 1)`` then ``(j - 1, i)``. Moves that would not
    change anything are dropped.

    Args:
        order: Permutation of ``range(len(order))``

    Returns:
        Moves that, applied in order, produce the target order
    """
    targets = [0] * len(order)
    for new_position, old_index in enumerate(order):
        targets[old_index] = new_position

    moves: list[PlaylistMove] = []
    for i in range(len(targets)):
        while targets[i] != i:
            # Positions before i are settled, so j > i
            j = targets[i]
            for move in (PlaylistMove(i, j + 1), PlaylistMove(j - 1, i)):
                if not move.is_noop:
                    moves.append(move)
            targets[i], targets[j] = targets[j], targets[i]

    return moves


def sorted_order(items: Sequence[PlaylistItem], key: str | None) -> list[int]:
    """Stable target order of ``items`` for the given sort mode id."""
    mode = resolve_sort_mode(key)
    return sorted(
        range(len(items)),
        key=lambda index: mode.key(items[index]),
        reverse=mode.reverse,
    )


def reorder(
    items: Sequence[PlaylistItem],
    key: str | None,
    reset_position: bool = False,
) -> list[PlaylistMove]:
    """Compute the moves that sort a playlist snapshot.

    Args:
        items: Playlist entries in their current order
        key: Sort mode id (``name-asc``, ``date-desc``...); unknown ids sort
            by the default mode
        reset_position: Whether the caller will point playback at the first
            entry afterwards; the engine itself never touches the position

    Returns:
        Moves to apply in order; empty for fewer than two entries
    """
    if len(items) < 2:
        return []

    moves = realize_permutation(sorted_order(items, key))
    logger.debug(
        f"Reorder by {key!r}: {len(moves)} moves for {len(items)} items"
        f" (reset_position={reset_position})"
    )
    return moves


def reverse_moves(count: int) -> list[PlaylistMove]:
    """Moves that reverse a playlist of ``count`` entries."""
    return [PlaylistMove(index, 0) for index in range(1, count)]


# === Playlist Transforms ===


def _with_moves(
    playlist: Playlist, moves: list[PlaylistMove], message: str
) -> Playlist:
    return (
        playlist.apply_moves(moves)
        .with_metadata(MOVES_KEY, len(moves))
        .with_metadata(MESSAGE_KEY, message)
    )


@curry
def sort_by(
    mode_id: str | None,
    startover: bool = False,
    playlist: Playlist | None = None,
) -> Transform | Playlist:
    """
    Sort a playlist by one of the sort modes.

    Args:
        mode_id: Sort mode id; unknown ids use the default mode
        startover: Point playback at the first entry after sorting
        playlist: Optional playlist to transform immediately

    Returns:
        Transformation function or transformed playlist if provided
    """
    mode = resolve_sort_mode(mode_id)

    def transform(p: Playlist) -> Playlist:
        if len(p.items) < 2:
            return p

        moves = reorder(p.items, mode.id, reset_position=startover)
        result = _with_moves(p, moves, f"Playlist sorted by {mode.title}")
        if startover:
            result = result.with_position(0)
        return result

    return transform(playlist) if playlist is not None else transform


@curry
def reverse(playlist: Playlist | None = None) -> Transform | Playlist:
    """
    Reverse the playlist order.

    Args:
        playlist: Optional playlist to transform immediately

    Returns:
        Transformation function or transformed playlist if provided
    """

    def transform(p: Playlist) -> Playlist:
        if len(p.items) < 2:
            return p
        return _with_moves(p, reverse_moves(len(p.items)), "Playlist reversed")

    return transform(playlist) if playlist is not None else transform


@curry
def shuffle(
    rng: random.Random | None = None,
    playlist: Playlist | None = None,
) -> Transform | Playlist:
    """
    Shuffle the playlist and restart playback from the first entry.

    After the shuffle, the entry sitting at the old current index is moved
    to a random slot so the playing entry does not always stay put.

    Args:
        rng: Random source, defaults to a fresh unseeded generator
        playlist: Optional playlist to transform immediately

    Returns:
        Transformation function or transformed playlist if provided
    """
    source = rng or random.Random()

    def transform(p: Playlist) -> Playlist:
        count = len(p.items)
        if count < 2:
            return p

        order = list(range(count))
        source.shuffle(order)
        moves = realize_permutation(order)

        position = p.current_position or 0
        extra = PlaylistMove(position, source.randint(0, count - 1))
        if not extra.is_noop:
            moves.append(extra)

        return _with_moves(p, moves, "Playlist shuffled").with_position(0)

    return transform(playlist) if playlist is not None else transform


@curry
def play_first(playlist: Playlist | None = None) -> Transform | Playlist:
    """Point playback at the first entry; no-op for fewer than two entries."""

    def transform(p: Playlist) -> Playlist:
        if len(p.items) < 2:
            return p
        return p.with_position(0)

    return transform(playlist) if playlist is not None else transform


@curry
def play_last(playlist: Playlist | None = None) -> Transform | Playlist:
    """Point playback at the last entry; no-op for fewer than two entries."""

    def transform(p: Playlist) -> Playlist:
        if len(p.items) < 2:
            return p
        return p.with_position(len(p.items) - 1)

    return transform(playlist) if playlist is not None else transform
