"""Pawn entity."""

from __future__ import annotations

from pawnchess.core.enums import Color
from pawnchess.core.types import Position


class Pawn:
    """A live pawn on the board.

    Pawns are mutable and compared by identity: two pawns of the same color
    on the same square at different times are still different pieces, which
    matters for en-passant eligibility.
    """

    __slots__ = ("color", "position", "still_at_starting_rank")

    def __init__(
        self,
        color: Color,
        position: Position,
        still_at_starting_rank: bool = True,
    ) -> None:
        self.color = color
        self.position = position
        self.still_at_starting_rank = still_at_starting_rank

    def capture_targets(self) -> tuple[Position, ...]:
        """Diagonal squares one row forward that stay on the board."""
        ahead = self.position.advance(self.color.delta_row)
        if not ahead.is_on_board:
            return ()
        targets = (ahead.shift(-1), ahead.shift(1))
        return tuple(t for t in targets if t is not None)

    def move_to(self, position: Position) -> None:
        """Relocate the pawn; any move ends its starting-rank privileges."""
        self.position = position
        self.still_at_starting_rank = False

    def copy(self) -> Pawn:
        return Pawn(self.color, self.position, self.still_at_starting_rank)

    def __repr__(self) -> str:
        return f"Pawn{{color={self.color}, position={self.position}}}"
