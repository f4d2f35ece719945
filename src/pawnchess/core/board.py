"""Board - the set of live pawns on an 8x8 grid."""

from __future__ import annotations

from collections.abc import Iterator

from pawnchess.core.enums import Color
from pawnchess.core.pawn import Pawn
from pawnchess.core.types import COLUMNS, Position

BoardSnapshot = tuple[tuple[int, str, bool], ...]


class Board:
    """Mutable collection of pawns.

    Invariant: no two pawns share a :class:`Position`. Pawns only enter
    through :meth:`add` (game setup) and only leave through :meth:`remove`
    (captures).
    """

    __slots__ = ("_pawns",)

    def __init__(self) -> None:
        self._pawns: list[Pawn] = []

    # -- Element access -----------------------------------------------------

    def pawn_at(self, position: Position) -> Pawn | None:
        """The unique pawn standing on *position*, if any."""
        for pawn in self._pawns:
            if pawn.position == position:
                return pawn
        return None

    def is_empty(self, position: Position) -> bool:
        return self.pawn_at(position) is None

    # -- Query helpers ------------------------------------------------------

    def pawns(self, color: Color | None = None) -> list[Pawn]:
        """Live pawns, optionally restricted to *color*."""
        if color is None:
            return list(self._pawns)
        return [p for p in self._pawns if p.color == color]

    def count(self, color: Color) -> int:
        return sum(1 for p in self._pawns if p.color == color)

    # -- Mutation -----------------------------------------------------------

    def add(self, pawn: Pawn) -> None:
        if not pawn.position.is_on_board:
            raise ValueError(f"Pawn placed off the board: {pawn.position}")
        if self.pawn_at(pawn.position) is not None:
            raise ValueError(f"Square already occupied: {pawn.position}")
        self._pawns.append(pawn)

    def remove(self, pawn: Pawn) -> None:
        for idx, live in enumerate(self._pawns):
            if live is pawn:
                del self._pawns[idx]
                return
        raise ValueError(f"Pawn not on board: {pawn!r}")

    def copy(self) -> Board:
        b = Board()
        b._pawns = [p.copy() for p in self._pawns]
        return b

    def snapshot(self) -> BoardSnapshot:
        """Order-independent, hashable view of every pawn's state."""
        return tuple(
            sorted(
                (int(p.color), str(p.position), p.still_at_starting_rank)
                for p in self._pawns
            )
        )

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Starting layout: eight pawns per side on rows 2 and 7."""
        b = cls()
        for column in COLUMNS:
            b.add(Pawn(Color.WHITE, Position(column, Color.WHITE.starting_row)))
            b.add(Pawn(Color.BLACK, Position(column, Color.BLACK.starting_row)))
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __len__(self) -> int:
        return len(self._pawns)

    def __iter__(self) -> Iterator[Pawn]:
        return iter(list(self._pawns))

    def __contains__(self, pawn: object) -> bool:
        return any(live is pawn for live in self._pawns)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self.snapshot() == other.snapshot()

    def __repr__(self) -> str:
        rows: list[str] = []
        for row in range(8, 0, -1):
            cells = []
            for column in COLUMNS:
                p = self.pawn_at(Position(column, row))
                if p is None:
                    cells.append(".")
                else:
                    cells.append("P" if p.color == Color.WHITE else "p")
            rows.append(f"{row} {' '.join(cells)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
