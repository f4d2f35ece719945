"""Tests for the Pawn entity."""

from pawnchess.core.enums import Color
from pawnchess.core.pawn import Pawn
from pawnchess.core.types import Position, parse_square


class TestCaptureTargets:
    def test_white_centre(self) -> None:
        pawn = Pawn(Color.WHITE, parse_square("e4"))
        assert set(pawn.capture_targets()) == {parse_square("d5"), parse_square("f5")}

    def test_black_centre(self) -> None:
        pawn = Pawn(Color.BLACK, parse_square("e5"))
        assert set(pawn.capture_targets()) == {parse_square("d4"), parse_square("f4")}

    def test_edge_column(self) -> None:
        assert Pawn(Color.WHITE, parse_square("a2")).capture_targets() == (
            parse_square("b3"),
        )
        assert Pawn(Color.BLACK, parse_square("h7")).capture_targets() == (
            parse_square("g6"),
        )

    def test_last_row_has_no_targets(self) -> None:
        assert Pawn(Color.WHITE, parse_square("c8")).capture_targets() == ()
        assert Pawn(Color.BLACK, parse_square("c1")).capture_targets() == ()


class TestMoveTo:
    def test_move_clears_starting_flag(self) -> None:
        pawn = Pawn(Color.WHITE, parse_square("e2"))
        assert pawn.still_at_starting_rank
        pawn.move_to(parse_square("e3"))
        assert pawn.position == Position("e", 3)
        assert not pawn.still_at_starting_rank

    def test_identity_semantics(self) -> None:
        a = Pawn(Color.WHITE, parse_square("e2"))
        b = Pawn(Color.WHITE, parse_square("e2"))
        assert a != b
        assert a == a

    def test_copy_is_independent(self) -> None:
        pawn = Pawn(Color.BLACK, parse_square("d7"))
        clone = pawn.copy()
        clone.move_to(parse_square("d6"))
        assert pawn.position == parse_square("d7")
        assert pawn.still_at_starting_rank
