"""Playlist-related domain entities.

Pure playlist representations with zero I/O. The host player owns the live
playlist; these entities describe a snapshot of it.
"""

from collections.abc import Sequence
from typing import Any

import attrs
from attrs import Factory, define, field, validators

from .operations import PlaylistMove, apply_moves


def is_remote_path(path: str | None) -> bool:
    """Check whether a playlist path addresses a URL rather than a local file."""
    return path is not None and "://" in path


@define(frozen=True, slots=True)
class PlaylistItem:
    """A single playlist entry.

    Local files may carry a modification time and size. URL entries never do;
    sorting treats the missing values as zero.
    """

    path: str = field(validator=validators.instance_of(str))
    # Name used for name-based ordering; the host reports the entry's filename
    display_name: str = field(
        default=Factory(lambda self: self.path, takes_self=True),
        validator=validators.instance_of(str),
    )
    title: str | None = field(default=None)
    modified_time: float | None = field(default=None)
    size_bytes: int | None = field(default=None)

    @property
    def is_remote(self) -> bool:
        """True for URL-addressed entries."""
        return is_remote_path(self.path)

    def with_file_info(
        self, modified_time: float | None, size_bytes: int | None
    ) -> "PlaylistItem":
        """Create a new item with file metadata attached."""
        return attrs.evolve(self, modified_time=modified_time, size_bytes=size_bytes)


def _check_position(instance: "Playlist", attribute: Any, value: int | None) -> None:
    if not instance.items:
        if value is not None:
            raise ValueError(
                f"Empty playlist cannot have a current position (got {value})"
            )
        return
    if value is None:
        return
    if not 0 <= value < len(instance.items):
        raise ValueError(
            f"Current position {value} out of range for {len(instance.items)} items"
        )


@define(frozen=True, slots=True)
class Playlist:
    """Ordered playlist snapshot with a current playback position.

    The position is an index into ``items`` whenever the playlist is
    non-empty, and ``None`` when it is empty. A non-empty playlist may also
    have no current entry (``None``), e.g. before playback started.
    """

    items: list[PlaylistItem] = field(factory=list)
    current_position: int | None = field(default=None, validator=_check_position)
    name: str | None = field(default=None)
    metadata: dict[str, Any] = field(factory=dict)

    @property
    def current_item(self) -> PlaylistItem | None:
        """The entry at the current position, if any."""
        if self.current_position is None:
            return None
        return self.items[self.current_position]

    def with_items(
        self, items: list[PlaylistItem], current_position: int | None = None
    ) -> "Playlist":
        """Create a new playlist with the given items.

        The position defaults to 0 for a non-empty result, None otherwise.
        """
        if current_position is None and items:
            current_position = 0
        return attrs.evolve(
            self,
            items=list(items),
            current_position=current_position if items else None,
            metadata=self.metadata.copy(),
        )

    def with_position(self, position: int | None) -> "Playlist":
        """Create a new playlist pointing at another entry."""
        return attrs.evolve(self, current_position=position)

    def with_metadata(self, key: str, value: Any) -> "Playlist":
        """Add metadata to the playlist."""
        new_metadata = self.metadata.copy()
        new_metadata[key] = value
        return attrs.evolve(self, metadata=new_metadata)

    def apply_moves(self, moves: Sequence[PlaylistMove]) -> "Playlist":
        """Replay moves the way the host does.

        The current position follows the entry that was current, so the
        playing entry stays logically in place.
        """
        if not moves:
            return self

        indices = apply_moves(range(len(self.items)), moves)
        items = [self.items[i] for i in indices]

        position = self.current_position
        if position is not None:
            position = indices.index(position)

        return attrs.evolve(
            self, items=items, current_position=position, metadata=self.metadata.copy()
        )
