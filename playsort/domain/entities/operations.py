"""Operation-related domain entities.

Playlist edits expressed as single-entry relocations, the only edit the
host playlist supports.
"""

from collections.abc import Iterable, Sequence
from typing import TypeVar

from attrs import define, field, validators

T = TypeVar("T")


@define(frozen=True, slots=True)
class PlaylistMove:
    """Relocate one playlist entry.

    Insert-before semantics: the entry at ``from_index`` is taken out and put
    in front of the entry that was at ``to_index`` before the move. A
    ``to_index`` equal to the playlist length appends. When ``to_index`` is
    greater than ``from_index`` the entry therefore ends up at
    ``to_index - 1``.
    """

    from_index: int = field(validator=[validators.instance_of(int), validators.ge(0)])
    to_index: int = field(validator=[validators.instance_of(int), validators.ge(0)])

    @property
    def final_index(self) -> int:
        """Index the moved entry occupies after the move."""
        if self.to_index > self.from_index:
            return self.to_index - 1
        return self.to_index

    @property
    def is_noop(self) -> bool:
        """True when the move leaves the playlist unchanged."""
        return self.final_index == self.from_index

    def as_tuple(self) -> tuple[int, int]:
        return (self.from_index, self.to_index)


def apply_moves(sequence: Iterable[T], moves: Sequence[PlaylistMove]) -> list[T]:
    """Replay moves on a copy of ``sequence``.

    Args:
        sequence: Entries in their current order
        moves: Moves to apply, in order

    Returns:
        New list with every move applied

    Raises:
        IndexError: If a move refers to an index outside the list
    """
    result = list(sequence)
    for move in moves:
        if move.from_index >= len(result) or move.to_index > len(result):
            raise IndexError(
                f"Move {move.as_tuple()} out of range for {len(result)} entries"
            )
        if move.is_noop:
            continue
        entry = result.pop(move.from_index)
        result.insert(move.final_index, entry)
    return result
