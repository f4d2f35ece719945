"""Text command grammar: ``exit`` or four-character coordinate moves."""

from __future__ import annotations

import re
from dataclasses import dataclass

from pawnchess.core.types import Position

EXIT_COMMAND = "exit"

MOVE_PATTERN = re.compile(
    r"(?P<from_column>[a-h])(?P<from_row>[1-8])(?P<to_column>[a-h])(?P<to_row>[1-8])"
)


@dataclass(frozen=True, slots=True)
class ExitCommand:
    """The player asked to leave the session."""


@dataclass(frozen=True, slots=True)
class MoveCommand:
    """A well-formed move request; both squares are on the board."""

    from_pos: Position
    to_pos: Position

    def __str__(self) -> str:
        return f"{self.from_pos}{self.to_pos}"


@dataclass(frozen=True, slots=True)
class MalformedInput:
    """Text matching neither the move grammar nor the exit command."""

    text: str


Command = ExitCommand | MoveCommand | MalformedInput


def parse_command(text: str) -> Command:
    """Classify raw input without looking at the board."""
    if text == EXIT_COMMAND:
        return ExitCommand()

    match = MOVE_PATTERN.fullmatch(text)
    if match is None:
        return MalformedInput(text)

    return MoveCommand(
        Position(match["from_column"], int(match["from_row"])),
        Position(match["to_column"], int(match["to_row"])),
    )
