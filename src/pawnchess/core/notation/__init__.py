"""Notation package: move commands and pawn layout strings."""

from pawnchess.core.notation.commands import (
    EXIT_COMMAND,
    MOVE_PATTERN,
    Command,
    ExitCommand,
    MalformedInput,
    MoveCommand,
    parse_command,
)
from pawnchess.core.notation.layout import (
    STARTING_LAYOUT,
    board_from_layout,
    board_to_layout,
)

__all__ = [
    "EXIT_COMMAND",
    "MOVE_PATTERN",
    "STARTING_LAYOUT",
    "Command",
    "ExitCommand",
    "MalformedInput",
    "MoveCommand",
    "board_from_layout",
    "board_to_layout",
    "parse_command",
]
