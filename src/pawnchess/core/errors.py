"""Recoverable rejection errors raised by the rules layer.

None of these is fatal: the game layer turns each of them into a
``Rejected`` outcome and the same player is asked to move again.
"""

from __future__ import annotations

from pawnchess.core.enums import Color, RejectReason
from pawnchess.core.types import Position


class PawnChessError(Exception):
    """Base class for every error raised by :mod:`pawnchess`."""


class MoveRejected(PawnChessError):
    """A command was refused; game state is untouched."""

    reason: RejectReason = RejectReason.INVALID_MOVE


class MalformedCommand(MoveRejected):
    """Input matches neither the move grammar nor the exit command."""

    reason = RejectReason.MALFORMED_COMMAND

    def __init__(self, text: str) -> None:
        super().__init__(f"Malformed command: {text!r}")
        self.text = text


class NoPawnAtSource(MoveRejected):
    """No pawn of the moving color stands on the origin square."""

    reason = RejectReason.NO_PAWN_AT_SOURCE

    def __init__(
        self,
        color: Color,
        position: Position,
        *,
        occupied_by_opponent: bool = False,
    ) -> None:
        super().__init__(f"No {color} pawn at {position}")
        self.color = color
        self.position = position
        self.occupied_by_opponent = occupied_by_opponent


class InvalidMove(MoveRejected):
    """Origin is valid but no legality branch accepts the destination."""

    reason = RejectReason.INVALID_MOVE

    def __init__(self, from_pos: Position, to_pos: Position, detail: str = "") -> None:
        message = f"Invalid move {from_pos}{to_pos}"
        if detail:
            message += f": {detail}"
        super().__init__(message)
        self.from_pos = from_pos
        self.to_pos = to_pos
        self.detail = detail
