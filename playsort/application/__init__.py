"""Application layer: playlist command handling."""

from .commands import (
    COMMAND_VERBS,
    PlaylistCommand,
    build_pipeline,
    parse_command,
    run_commands,
)

__all__ = [
    "COMMAND_VERBS",
    "PlaylistCommand",
    "build_pipeline",
    "parse_command",
    "run_commands",
]
