"""Tests for move commands and pawn layout strings."""

import pytest

from pawnchess.core.board import Board
from pawnchess.core.enums import Color
from pawnchess.core.notation import (
    STARTING_LAYOUT,
    ExitCommand,
    MalformedInput,
    MoveCommand,
    board_from_layout,
    board_to_layout,
    parse_command,
)
from pawnchess.core.types import parse_square


class TestParseCommand:
    def test_exit(self) -> None:
        assert parse_command("exit") == ExitCommand()

    def test_move(self) -> None:
        cmd = parse_command("e2e4")
        assert cmd == MoveCommand(parse_square("e2"), parse_square("e4"))
        assert str(cmd) == "e2e4"

    @pytest.mark.parametrize(
        "text",
        [
            "",
            "e2",
            "e2e",
            "e2e4e",
            "e2 e4",
            " e2e4",
            "e2e4 ",
            "E2E4",
            "e0e4",
            "e2e9",
            "i2i4",
            "Pe2e4",
            "e2xe4",
            "EXIT",
            "exit ",
            "quit",
        ],
    )
    def test_malformed(self, text: str) -> None:
        assert parse_command(text) == MalformedInput(text)


class TestLayout:
    def test_starting_layout_matches_initial_board(self) -> None:
        assert board_from_layout(STARTING_LAYOUT) == Board.initial()
        assert board_to_layout(Board.initial()) == STARTING_LAYOUT

    def test_starting_flag_follows_row(self) -> None:
        board = board_from_layout("8/8/3p4/8/8/8/4P3/8")
        white = board.pawn_at(parse_square("e2"))
        black = board.pawn_at(parse_square("d6"))
        assert white is not None and white.still_at_starting_rank
        assert black is not None and not black.still_at_starting_rank

    def test_colors(self) -> None:
        board = board_from_layout("8/8/8/3pP3/8/8/8/8")
        d5 = board.pawn_at(parse_square("d5"))
        e5 = board.pawn_at(parse_square("e5"))
        assert d5 is not None and d5.color == Color.BLACK
        assert e5 is not None and e5.color == Color.WHITE

    def test_round_trip_sparse(self) -> None:
        layout = "8/p7/8/3pP3/8/8/7P/8"
        assert board_to_layout(board_from_layout(layout)) == layout

    @pytest.mark.parametrize(
        "layout",
        [
            "8/8/8/8/8/8/8",
            "8/8/8/8/8/8/8/8/8",
            "9/8/8/8/8/8/8/8",
            "7/8/8/8/8/8/8/8",
            "8/8/8/8/8/8/8/PPPPPPPPP",
            "8/8/8/8/4N3/8/8/8",
            "8/8/8/8/8/8/8/0P7",
        ],
    )
    def test_invalid_layouts(self, layout: str) -> None:
        with pytest.raises(ValueError):
            board_from_layout(layout)
