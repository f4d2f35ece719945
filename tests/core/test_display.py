"""Tests for board projections."""

from pawnchess.core.board import Board
from pawnchess.core.display import board_rows, render_board
from pawnchess.core.enums import Color
from pawnchess.core.notation import board_from_layout

_SEPARATOR = "  +---+---+---+---+---+---+---+---+"


class TestBoardRows:
    def test_shape(self) -> None:
        rows = board_rows(Board.initial())
        assert len(rows) == 8
        assert all(len(row) == 8 for row in rows)

    def test_row_order(self) -> None:
        rows = board_rows(Board.initial())
        assert rows[0] == [None] * 8  # row 8
        assert rows[1] == [Color.BLACK] * 8  # row 7
        assert rows[6] == [Color.WHITE] * 8  # row 2
        assert rows[7] == [None] * 8  # row 1

    def test_column_order(self) -> None:
        rows = board_rows(board_from_layout("8/8/8/8/P6p/8/8/8"))
        assert rows[4][0] == Color.WHITE
        assert rows[4][7] == Color.BLACK


class TestRenderBoard:
    def test_initial_board(self) -> None:
        lines = render_board(Board.initial()).splitlines()
        assert len(lines) == 18
        assert lines[0] == _SEPARATOR
        assert lines[1] == "8 |   |   |   |   |   |   |   |   |"
        assert lines[3] == "7 | B | B | B | B | B | B | B | B |"
        assert lines[13] == "2 | W | W | W | W | W | W | W | W |"
        assert lines[16] == _SEPARATOR
        assert lines[17] == "    a   b   c   d   e   f   g   h"

    def test_without_coordinates(self) -> None:
        lines = render_board(Board.initial(), show_coordinates=False).splitlines()
        assert len(lines) == 17
        assert lines[0] == _SEPARATOR.strip()
        assert lines[3] == "| B | B | B | B | B | B | B | B |"
