"""Tests for the playlist reordering engine.

The engine returns host moves; every check replays them with the host's
insert-before semantics and compares against a direct sort.
"""

from itertools import permutations

import pytest

from playsort.domain.entities.operations import PlaylistMove, apply_moves
from playsort.domain.entities.playlist import PlaylistItem
from playsort.domain.transforms import (
    SORT_MODES,
    realize_permutation,
    reorder,
    resolve_sort_mode,
    reverse_moves,
)

MODE_IDS = [mode.id for mode in SORT_MODES]


def _sorted_directly(items, mode_id):
    mode = resolve_sort_mode(mode_id)
    return sorted(items, key=mode.key, reverse=mode.reverse)


def _paths(items):
    return [item.path for item in items]


class TestRealizePermutation:
    """Test turning a target order into moves."""

    def test_swap_of_two_is_a_single_move(self):
        """Adjacent swap drops the second, no-op move."""
        assert realize_permutation([1, 0]) == [PlaylistMove(0, 2)]

    def test_three_cycle(self):
        """A rotation needs one adjacent swap and one two-move swap."""
        moves = realize_permutation([2, 0, 1])

        assert moves == [PlaylistMove(0, 2), PlaylistMove(0, 3), PlaylistMove(1, 0)]
        assert apply_moves("abc", moves) == ["c", "a", "b"]

    def test_identity_needs_no_moves(self):
        assert realize_permutation([0, 1, 2, 3]) == []

    @pytest.mark.parametrize("order", list(permutations(range(5))))
    def test_every_permutation_is_reproduced(self, order):
        """Applying the moves yields exactly the requested order."""
        moves = realize_permutation(order)

        assert apply_moves(range(5), moves) == list(order)
        assert not any(move.is_noop for move in moves)


class TestReorder:
    """Test the sort contract of the engine."""

    @pytest.mark.parametrize("mode_id", MODE_IDS)
    @pytest.mark.parametrize("count", [0, 1])
    def test_short_playlists_produce_no_moves(self, make_items, mode_id, count):
        assert reorder(make_items(["only"] * count), mode_id) == []

    @pytest.mark.parametrize("mode_id", [*MODE_IDS, "bogus", "", None])
    def test_moves_match_direct_sort(self, mode_id):
        """Permutation equivalence across all orders of a small playlist."""
        base = [
            PlaylistItem(path="file10", modified_time=5.0, size_bytes=1),
            PlaylistItem(path="file2", modified_time=5.0, size_bytes=3),
            PlaylistItem(path="File1", size_bytes=3),
            PlaylistItem(path="http://host/x", modified_time=None),
        ]
        for items in permutations(base):
            moves = reorder(list(items), mode_id)
            assert apply_moves(items, moves) == _sorted_directly(items, mode_id)

    def test_natural_name_order(self, make_items):
        items = make_items(["file2", "file10", "file1"])

        result = apply_moves(items, reorder(items, "name-asc"))

        assert _paths(result) == ["file1", "file2", "file10"]

    def test_name_asc_and_desc_are_reversed(self, make_items):
        """Distinct names sort to exactly opposite orders."""
        for names in permutations(["e10", "e9", "Alpha", "beta"]):
            items = make_items(names)
            ascending = apply_moves(items, reorder(items, "name-asc"))
            descending = apply_moves(items, reorder(items, "name-desc"))
            assert descending == ascending[::-1]

    @pytest.mark.parametrize(
        ("mode_id", "field"),
        [
            ("size-asc", "size_bytes"),
            ("size-desc", "size_bytes"),
            ("date-asc", "modified_time"),
            ("date-desc", "modified_time"),
        ],
    )
    def test_equal_keys_keep_original_order(self, mode_id, field):
        """Stable in both directions."""
        items = [
            PlaylistItem(path="first", **{field: 7}),
            PlaylistItem(path="big", **{field: 9}),
            PlaylistItem(path="second", **{field: 7}),
            PlaylistItem(path="third", **{field: 7}),
        ]

        result = _paths(apply_moves(items, reorder(items, mode_id)))

        equal = [path for path in result if path != "big"]
        assert equal == ["first", "second", "third"]

    @pytest.mark.parametrize("mode_id", MODE_IDS)
    def test_sorted_input_needs_no_moves(self, local_items, mode_id):
        """Idempotence."""
        already_sorted = _sorted_directly(local_items, mode_id)

        assert reorder(already_sorted, mode_id) == []

    def test_missing_size_counts_as_zero(self, mixed_items):
        result = apply_moves(mixed_items, reorder(mixed_items, "size-desc"))

        assert _paths(result) == ["/media/clip.mp4", "https://example.com/watch?v=1"]

    def test_missing_date_counts_as_zero(self, mixed_items):
        reordered = list(reversed(mixed_items))

        result = apply_moves(reordered, reorder(reordered, "date-asc"))

        assert _paths(result)[0] == "https://example.com/watch?v=1"

    def test_date_and_size_orders(self, local_items):
        by_date = apply_moves(local_items, reorder(local_items, "date-desc"))
        by_size = apply_moves(local_items, reorder(local_items, "size-asc"))

        assert _paths(by_date) == ["b.mkv", "a.mkv", "c.mkv"]
        assert _paths(by_size) == ["b.mkv", "a.mkv", "c.mkv"]

    def test_name_order_uses_display_name(self):
        items = [
            PlaylistItem(path="/x/1.mp4", display_name="zeta"),
            PlaylistItem(path="/x/2.mp4", display_name="alpha"),
        ]

        result = apply_moves(items, reorder(items, "name-asc"))

        assert _paths(result) == ["/x/2.mp4", "/x/1.mp4"]

    @pytest.mark.parametrize("mode_id", ["bogus", "", None, "NAME-ASC"])
    def test_unknown_key_falls_back_to_name_asc(self, make_items, mode_id):
        items = make_items(["b", "c", "a"])

        assert reorder(items, mode_id) == reorder(items, "name-asc")

    def test_reset_position_does_not_change_moves(self, local_items):
        assert reorder(local_items, "size-desc", reset_position=True) == reorder(
            local_items, "size-desc"
        )


class TestReverseMoves:
    """Test reverse realized as moves."""

    def test_reverse_moves(self):
        assert apply_moves("abcd", reverse_moves(4)) == ["d", "c", "b", "a"]

    @pytest.mark.parametrize("count", [0, 1])
    def test_short_playlists(self, count):
        assert reverse_moves(count) == []
