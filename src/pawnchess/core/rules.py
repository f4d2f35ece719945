"""Pawn move legality, stalemate and win detection."""

from __future__ import annotations

from pawnchess.core.board import Board
from pawnchess.core.enums import Color, MoveKind
from pawnchess.core.errors import InvalidMove, NoPawnAtSource
from pawnchess.core.move import Move
from pawnchess.core.pawn import Pawn
from pawnchess.core.types import Position


class Rules:
    """Static rule-checker operating on a :class:`Board`.

    ``en_passant_target`` is the single pawn (if any) that double-stepped
    on the previous ply. It is compared by identity, never by square.
    """

    # -- Legality -----------------------------------------------------------

    @staticmethod
    def validate(
        board: Board,
        color: Color,
        from_pos: Position,
        to_pos: Position,
        en_passant_target: Pawn | None = None,
    ) -> Move:
        """Resolve the moving pawn and classify the move.

        Raises :class:`NoPawnAtSource` or :class:`InvalidMove`.
        """
        pawn = board.pawn_at(from_pos)
        if pawn is None or pawn.color != color:
            raise NoPawnAtSource(
                color, from_pos, occupied_by_opponent=pawn is not None
            )
        return Rules.classify_move(board, pawn, to_pos, en_passant_target)

    @staticmethod
    def classify_move(
        board: Board,
        pawn: Pawn,
        to_pos: Position,
        en_passant_target: Pawn | None = None,
    ) -> Move:
        """Return the :class:`Move` *pawn* makes by going to *to_pos*."""
        from_pos = pawn.position
        if from_pos == to_pos:
            raise InvalidMove(from_pos, to_pos, "origin equals destination")

        occupant = board.pawn_at(to_pos)
        one_step = from_pos.advance(pawn.color.delta_row)

        if from_pos.column == to_pos.column:
            # Straight moves never capture.
            if occupant is not None:
                raise InvalidMove(from_pos, to_pos, "destination occupied")
            if to_pos == one_step:
                return Move(from_pos, to_pos, MoveKind.SINGLE_STEP)
            two_steps = one_step.advance(pawn.color.delta_row)
            if pawn.still_at_starting_rank and to_pos == two_steps:
                return Move(from_pos, to_pos, MoveKind.DOUBLE_STEP)
            raise InvalidMove(from_pos, to_pos, "illegal advance")

        if to_pos in pawn.capture_targets():
            if occupant is not None:
                if occupant.color == pawn.color:
                    raise InvalidMove(from_pos, to_pos, "own pawn on destination")
                return Move(from_pos, to_pos, MoveKind.CAPTURE, to_pos)

            beside = Position(to_pos.column, from_pos.row)
            victim = board.pawn_at(beside)
            if victim is not None and victim is en_passant_target:
                return Move(from_pos, to_pos, MoveKind.EN_PASSANT, beside)
            raise InvalidMove(from_pos, to_pos, "nothing to capture")

        raise InvalidMove(from_pos, to_pos, "illegal pawn move")

    # -- Move enumeration ---------------------------------------------------

    @staticmethod
    def candidate_destinations(pawn: Pawn) -> list[Position]:
        """On-board squares a pawn could reach by any move shape."""
        one_step = pawn.position.advance(pawn.color.delta_row)
        candidates = [one_step, one_step.advance(pawn.color.delta_row)]
        candidates.extend(pawn.capture_targets())
        return [sq for sq in candidates if sq.is_on_board]

    @staticmethod
    def legal_moves(
        board: Board,
        pawn: Pawn,
        en_passant_target: Pawn | None = None,
    ) -> list[Move]:
        """Every move *pawn* may legally make right now."""
        moves: list[Move] = []
        for to_pos in Rules.candidate_destinations(pawn):
            try:
                moves.append(
                    Rules.classify_move(board, pawn, to_pos, en_passant_target)
                )
            except InvalidMove:
                continue
        return moves

    @staticmethod
    def has_legal_move(
        board: Board,
        pawn: Pawn,
        en_passant_target: Pawn | None = None,
    ) -> bool:
        return bool(Rules.legal_moves(board, pawn, en_passant_target))

    # -- Terminal conditions ------------------------------------------------

    @staticmethod
    def is_stalemate(
        board: Board,
        color: Color,
        en_passant_target: Pawn | None = None,
    ) -> bool:
        """Whether *color* has pawns but none of them can move."""
        pawns = board.pawns(color)
        if not pawns:
            return False
        return not any(
            Rules.has_legal_move(board, pawn, en_passant_target) for pawn in pawns
        )

    @staticmethod
    def winner_after(board: Board, move: Move, color: Color) -> Color | None:
        """Winner once *color* has played *move* on *board*, if any."""
        if move.to_pos.row in (1, 8):
            return color
        if board.count(color.opposite) == 0:
            return color
        return None
