"""Domain-level exceptions for playsort."""


class PlaysortError(Exception):
    """Base class for errors raised by playsort."""


class UnknownCommandError(PlaysortError, ValueError):
    """A playlist command line could not be interpreted."""

    def __init__(self, command: str) -> None:
        self.command = command
        super().__init__(f"Unknown playlist command: {command!r}")


class EmptyPlaylistError(PlaysortError):
    """An operation that needs at least one entry got an empty playlist."""


class PlaylistSaveError(PlaysortError):
    """Writing a playlist file failed."""
