import pytest

from playsort.domain.entities.playlist import Playlist, PlaylistItem


@pytest.fixture(autouse=True)
def isolated_workdir(tmp_path, monkeypatch):
    """Run every test from a scratch directory so logs and saves stay there."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def make_items():
    """Build playlist items from names."""

    def _make(names):
        return [PlaylistItem(path=name) for name in names]

    return _make


@pytest.fixture
def make_playlist(make_items):
    """Build a playlist from names, positioned at the first entry."""

    def _make(names, position=0):
        items = make_items(names)
        return Playlist(items=items, current_position=position if items else None)

    return _make
