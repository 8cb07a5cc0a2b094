"""Playlist command interpreter.

Turns command lines in the player's script-message style into playlist
transforms::

    sort date-desc startover
    sort name-asc
    shuffle
    reverse
    playfirst
    playlast

Each line becomes one transform; a sequence of lines becomes a pipeline.
"""

from collections.abc import Iterable
import random
import shlex

from attrs import define, field

from playsort.config import get_logger, settings
from playsort.domain.entities.playlist import Playlist
from playsort.domain.exceptions import UnknownCommandError
from playsort.domain.transforms import (
    Transform,
    create_pipeline,
    play_first,
    play_last,
    reverse,
    shuffle,
    sort_by,
)

logger = get_logger(__name__)

STARTOVER = "startover"
COMMAND_VERBS = ("sort", "shuffle", "reverse", "playfirst", "playlast")


@define(frozen=True, slots=True)
class PlaylistCommand:
    """A parsed playlist command line."""

    verb: str
    args: tuple[str, ...] = field(factory=tuple, converter=tuple)

    @property
    def sort_mode(self) -> str | None:
        """Sort mode id for ``sort`` commands (None: configured default)."""
        return self.args[0] if self.args else None

    @property
    def startover(self) -> bool:
        """Whether a ``sort`` command asks to restart from the first entry."""
        return len(self.args) > 1 and self.args[1] == STARTOVER

    def to_transform(self, rng: random.Random | None = None) -> Transform:
        """Build the playlist transform for this command."""
        match self.verb:
            case "sort":
                mode = self.sort_mode or settings.playlist.default_sort_mode
                return sort_by(mode, self.startover)
            case "shuffle":
                return shuffle(rng)
            case "reverse":
                return reverse()
            case "playfirst":
                return play_first()
            case "playlast":
                return play_last()
            case _:
                raise UnknownCommandError(self.verb)


def parse_command(line: str) -> PlaylistCommand:
    """Parse one command line.

    Raises:
        UnknownCommandError: If the line is empty, badly quoted or names an
            unknown verb
    """
    try:
        words = shlex.split(line)
    except ValueError as e:
        raise UnknownCommandError(line) from e
    if not words or words[0] not in COMMAND_VERBS:
        raise UnknownCommandError(line)
    return PlaylistCommand(verb=words[0], args=words[1:])


def build_pipeline(
    lines: Iterable[str], rng: random.Random | None = None
) -> Transform:
    """Parse command lines and compose them into one transform."""
    commands = [parse_command(line) for line in lines]
    logger.debug(f"Running commands: {[c.verb for c in commands]}")
    return create_pipeline(*(command.to_transform(rng) for command in commands))


def run_commands(
    playlist: Playlist,
    lines: Iterable[str],
    rng: random.Random | None = None,
) -> Playlist:
    """Apply command lines to a playlist, in order."""
    lines = list(lines)
    if not lines:
        return playlist
    return build_pipeline(lines, rng)(playlist)
