"""Pawn layout strings: FEN-style piece placement restricted to pawns.

``P`` is a white pawn, ``p`` a black pawn, digits are runs of empty
squares, and ranks are listed from row 8 down to row 1 separated by ``/``.
"""

from __future__ import annotations

from pawnchess.core.board import Board
from pawnchess.core.enums import Color
from pawnchess.core.pawn import Pawn
from pawnchess.core.types import COLUMNS, Position

STARTING_LAYOUT = "8/pppppppp/8/8/8/8/PPPPPPPP/8"

_CHAR_MAP: dict[str, Color] = {"P": Color.WHITE, "p": Color.BLACK}


def board_from_layout(layout: str) -> Board:
    """Parse a layout string into a :class:`Board`.

    A pawn counts as still at its starting rank iff it stands on its
    color's starting row.
    """
    ranks = layout.strip().split("/")
    if len(ranks) != 8:
        raise ValueError(f"Invalid layout (must contain 8 ranks): {layout!r}")

    board = Board()
    for rank_idx, rank_text in enumerate(ranks):
        row = 8 - rank_idx
        file = 0
        for ch in rank_text:
            if ch.isdigit():
                step = int(ch)
                if not (1 <= step <= 8):
                    raise ValueError(f"Invalid layout digit {ch!r}: {layout!r}")
                file += step
            else:
                color = _CHAR_MAP.get(ch)
                if color is None:
                    raise ValueError(f"Invalid layout character {ch!r}: {layout!r}")
                if file >= 8:
                    raise ValueError(f"Invalid layout rank width: {layout!r}")
                board.add(
                    Pawn(
                        color,
                        Position(COLUMNS[file], row),
                        still_at_starting_rank=row == color.starting_row,
                    )
                )
                file += 1
            if file > 8:
                raise ValueError(f"Invalid layout rank width: {layout!r}")
        if file != 8:
            raise ValueError(f"Invalid layout rank width: {layout!r}")
    return board


def board_to_layout(board: Board) -> str:
    """Serialise a :class:`Board` to a layout string."""
    rows: list[str] = []
    for row in range(8, 0, -1):
        empty = 0
        text = ""
        for column in COLUMNS:
            pawn = board.pawn_at(Position(column, row))
            if pawn is None:
                empty += 1
            else:
                if empty:
                    text += str(empty)
                    empty = 0
                text += "P" if pawn.color == Color.WHITE else "p"
        if empty:
            text += str(empty)
        rows.append(text)
    return "/".join(rows)
