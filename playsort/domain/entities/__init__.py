"""Core domain entities representing playlist concepts."""

from .operations import PlaylistMove, apply_moves
from .playlist import Playlist, PlaylistItem, is_remote_path

__all__ = [
    # Playlist entities
    "Playlist",
    "PlaylistItem",
    "is_remote_path",
    # Operation entities
    "PlaylistMove",
    "apply_moves",
]
