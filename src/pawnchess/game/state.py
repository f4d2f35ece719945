"""Game state machine: board, turn, en-passant window and result."""

from __future__ import annotations

from dataclasses import dataclass, field

from pawnchess.core.board import Board, BoardSnapshot
from pawnchess.core.enums import Color, GameResult, MoveKind
from pawnchess.core.move import Move
from pawnchess.core.notation import board_from_layout
from pawnchess.core.pawn import Pawn
from pawnchess.core.rules import Rules
from pawnchess.game.interfaces import GamePhase

StateSnapshot = tuple[BoardSnapshot, int, str | None, GameResult, GamePhase]


@dataclass
class GameState:
    """Everything one session mutates, threaded explicitly through the game.

    This is a pure data/logic class with no I/O. Legality is checked by the
    caller (:func:`pawnchess.game.controller.submit_command`) before
    :meth:`apply_move`.
    """

    board: Board = field(default_factory=Board.initial)
    current_player_index: int = 0
    en_passant_target: Pawn | None = None
    result: GameResult = GameResult.IN_PROGRESS
    phase: GamePhase = GamePhase.NOT_STARTED

    # ── Initialisation ───────────────────────────────────────────────────

    def setup(self, layout: str | None = None, side_to_move: Color = Color.WHITE) -> None:
        """Initialise (or reset) the game."""
        self.board = board_from_layout(layout) if layout else Board.initial()
        self.current_player_index = int(side_to_move)
        self.en_passant_target = None
        self.result = GameResult.IN_PROGRESS
        self.phase = GamePhase.AWAITING_MOVE

    # ── Move application ─────────────────────────────────────────────────

    def apply_move(self, move: Move) -> GameResult:
        """Apply a validated move, then evaluate terminal conditions.

        Turn alternates only when the game goes on; stalemate is judged
        for the player about to move.
        """
        color = self.side_to_move
        pawn = self.board.pawn_at(move.from_pos)
        if pawn is None or pawn.color != color:
            raise ValueError(f"Move {move} does not belong to {color}")

        if move.captured_pos is not None:
            victim = self.board.pawn_at(move.captured_pos)
            if victim is not None:
                self.board.remove(victim)
        pawn.move_to(move.to_pos)
        self.en_passant_target = pawn if move.kind == MoveKind.DOUBLE_STEP else None

        winner = Rules.winner_after(self.board, move, color)
        if winner is not None:
            self._finish(GameResult.win_for(winner))
            return self.result

        self.current_player_index = 1 - self.current_player_index
        if Rules.is_stalemate(self.board, self.side_to_move, self.en_passant_target):
            self._finish(GameResult.STALEMATE)
        return self.result

    def terminate(self) -> None:
        """End the session early without a result."""
        self.phase = GamePhase.TERMINATED

    # ── Query helpers ────────────────────────────────────────────────────

    @property
    def side_to_move(self) -> Color:
        return Color(self.current_player_index)

    @property
    def is_game_over(self) -> bool:
        return self.phase in (GamePhase.GAME_OVER, GamePhase.TERMINATED)

    def legal_moves(self) -> list[Move]:
        """Legal moves for the side to move."""
        moves: list[Move] = []
        for pawn in self.board.pawns(self.side_to_move):
            moves.extend(Rules.legal_moves(self.board, pawn, self.en_passant_target))
        return moves

    def snapshot(self) -> StateSnapshot:
        """Hashable summary used to compare states before and after a command."""
        target = self.en_passant_target
        return (
            self.board.snapshot(),
            self.current_player_index,
            str(target.position) if target is not None else None,
            self.result,
            self.phase,
        )

    # ── Internal ─────────────────────────────────────────────────────────

    def _finish(self, result: GameResult) -> None:
        self.result = result
        self.phase = GamePhase.GAME_OVER
