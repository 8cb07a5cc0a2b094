"""Tests for curried playlist transforms.

These tests verify that the transforms work correctly and leave their input
untouched.
"""

import random

import pytest

from playsort.domain import Playlist, PlaylistItem, create_pipeline
from playsort.domain.transforms import (
    MESSAGE_KEY,
    MOVES_KEY,
    play_first,
    play_last,
    reverse,
    shuffle,
    sort_by,
)


def _paths(playlist):
    return [item.path for item in playlist.items]


class TestSortBy:
    """Test sorting transforms."""

    def test_sort_by_name(self, make_playlist):
        playlist = make_playlist(["file10", "file2", "file1"])

        result = sort_by("name-asc", playlist=playlist)

        assert _paths(result) == ["file1", "file2", "file10"]
        assert result.metadata[MESSAGE_KEY] == "Playlist sorted by name"
        assert result.metadata[MOVES_KEY] > 0
        assert _paths(playlist) == ["file10", "file2", "file1"]

    def test_current_entry_follows_sort(self, make_playlist):
        playlist = make_playlist(["c", "a", "b"], position=0)

        result = sort_by("name-asc", False, playlist)

        assert result.current_item.path == "c"
        assert result.current_position == 2

    def test_startover_resets_position(self, make_playlist):
        playlist = make_playlist(["c", "a", "b"], position=0)

        result = sort_by("name-desc", True, playlist)

        assert _paths(result) == ["c", "b", "a"]
        assert result.current_position == 0
        assert result.metadata[MESSAGE_KEY] == "Playlist sorted by name in descending order"

    def test_sort_by_size_desc(self):
        playlist = Playlist(
            items=[
                PlaylistItem(path="https://example.com/v"),
                PlaylistItem(path="/media/a.mp4", size_bytes=100),
            ],
            current_position=0,
        )

        result = sort_by("size-desc", playlist=playlist)

        assert _paths(result) == ["/media/a.mp4", "https://example.com/v"]
        assert result.metadata[MESSAGE_KEY] == "Playlist sorted by size in descending order"

    def test_unknown_mode_uses_default(self, make_playlist):
        result = sort_by("sideways", playlist=make_playlist(["b", "a"]))

        assert _paths(result) == ["a", "b"]
        assert result.metadata[MESSAGE_KEY] == "Playlist sorted by name"

    def test_already_sorted_reports_zero_moves(self, make_playlist):
        result = sort_by("name-asc", playlist=make_playlist(["a", "b"]))

        assert result.metadata[MOVES_KEY] == 0

    @pytest.mark.parametrize("names", [[], ["only"]])
    def test_short_playlist_is_unchanged(self, make_playlist, names):
        playlist = make_playlist(names)

        assert sort_by("name-desc", True, playlist) is playlist


class TestReverse:
    """Test reverse transform."""

    def test_reverse(self, make_playlist):
        playlist = make_playlist(["a", "b", "c", "d"], position=1)

        result = reverse(playlist)

        assert _paths(result) == ["d", "c", "b", "a"]
        assert result.current_item.path == "b"
        assert result.metadata[MESSAGE_KEY] == "Playlist reversed"
        assert result.metadata[MOVES_KEY] == 3

    def test_reverse_single(self, make_playlist):
        playlist = make_playlist(["a"])

        assert reverse(playlist) is playlist


class TestShuffle:
    """Test shuffle transform."""

    def test_shuffle_is_a_permutation(self, make_playlist):
        names = [f"track{i}" for i in range(20)]
        playlist = make_playlist(names, position=5)

        result = shuffle(random.Random(7), playlist)

        assert sorted(_paths(result)) == sorted(names)
        assert result.current_position == 0
        assert result.metadata[MESSAGE_KEY] == "Playlist shuffled"

    def test_same_seed_same_order(self, make_playlist):
        playlist = make_playlist([f"track{i}" for i in range(10)])

        first = shuffle(random.Random(3), playlist)
        second = shuffle(random.Random(3), playlist)

        assert _paths(first) == _paths(second)

    def test_shuffle_single(self, make_playlist):
        playlist = make_playlist(["a"])

        assert shuffle(random.Random(1), playlist) is playlist


class TestPlayPosition:
    """Test play-first and play-last transforms."""

    def test_play_first_and_last(self, make_playlist):
        playlist = make_playlist(["a", "b", "c"], position=1)

        assert play_first(playlist).current_position == 0
        assert play_last(playlist).current_position == 2

    def test_single_entry_is_untouched(self, make_playlist):
        playlist = make_playlist(["a"])

        assert play_last(playlist) is playlist
        assert play_first(playlist) is playlist


class TestPipeline:
    """Test composing transforms."""

    def test_create_pipeline(self, make_playlist):
        pipeline = create_pipeline(sort_by("name-asc"), reverse(), play_last())

        result = pipeline(make_playlist(["b", "c", "a"]))

        assert _paths(result) == ["c", "b", "a"]
        assert result.current_position == 2
        assert result.metadata[MESSAGE_KEY] == "Playlist reversed"
