"""Domain layer test fixtures - Pure playlist objects with no dependencies.

These fixtures create domain entities for testing playlist logic.
Fast creation, no I/O, function-scoped for isolation.
"""

import pytest

from playsort.domain.entities.playlist import PlaylistItem


@pytest.fixture
def local_items():
    """Local files with distinct names, dates and sizes."""
    return [
        PlaylistItem(path="b.mkv", modified_time=300.0, size_bytes=10),
        PlaylistItem(path="c.mkv", modified_time=100.0, size_bytes=30),
        PlaylistItem(path="a.mkv", modified_time=200.0, size_bytes=20),
    ]


@pytest.fixture
def mixed_items():
    """One local file with metadata and one URL without any."""
    return [
        PlaylistItem(path="https://example.com/watch?v=1"),
        PlaylistItem(path="/media/clip.mp4", modified_time=50.0, size_bytes=100),
    ]
