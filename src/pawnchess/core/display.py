"""Read-only board projections for front ends."""

from __future__ import annotations

from pawnchess.core.board import Board
from pawnchess.core.enums import Color
from pawnchess.core.types import COLUMNS, Position

_SEPARATOR = "+---" * 8 + "+"


def board_rows(board: Board) -> list[list[Color | None]]:
    """8 rows from row 8 down to row 1, each with 8 cells from a to h."""
    rows: list[list[Color | None]] = []
    for row in range(8, 0, -1):
        cells: list[Color | None] = []
        for column in COLUMNS:
            pawn = board.pawn_at(Position(column, row))
            cells.append(pawn.color if pawn is not None else None)
        rows.append(cells)
    return rows


def render_board(board: Board, *, show_coordinates: bool = True) -> str:
    """Text grid with ``W``/``B`` markers, row 8 at the top."""
    margin = "  " if show_coordinates else ""
    lines: list[str] = []
    for row, cells in zip(range(8, 0, -1), board_rows(board)):
        lines.append(margin + _SEPARATOR)
        label = f"{row} " if show_coordinates else ""
        markers = "".join(
            f" {cell.marker if cell is not None else ' '} |" for cell in cells
        )
        lines.append(f"{label}|{markers}")
    lines.append(margin + _SEPARATOR)
    if show_coordinates:
        lines.append("    " + "   ".join(COLUMNS))
    return "\n".join(lines)
