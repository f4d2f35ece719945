"""Command processing and the GameController orchestrator.

:func:`submit_command` is the single seam where raw text meets the rules:
it parses, validates, applies and reports. :class:`GameController` wraps
it with players and observable callbacks so a front end can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from pawnchess.core.display import board_rows
from pawnchess.core.enums import Color, GameResult, RejectReason
from pawnchess.core.errors import MalformedCommand, MoveRejected
from pawnchess.core.notation import ExitCommand, MalformedInput, parse_command
from pawnchess.core.rules import Rules
from pawnchess.game.interfaces import (
    Continuing,
    ExitRequested,
    GamePhase,
    OutcomeSignal,
    Rejected,
    Stalemated,
    Won,
)
from pawnchess.game.player import Player
from pawnchess.game.state import GameState

_LOGGER = logging.getLogger(__name__)


def new_game(layout: str | None = None, side_to_move: Color = Color.WHITE) -> GameState:
    """Fresh state: 16-pawn layout (or *layout*), *side_to_move* first."""
    state = GameState()
    state.setup(layout, side_to_move)
    return state


def submit_command(state: GameState, raw_text: str) -> tuple[GameState, OutcomeSignal]:
    """Process one line of player input against *state*.

    Rejections leave *state* untouched and do not consume the turn.
    """
    command = parse_command(raw_text)

    if isinstance(command, MalformedInput):
        return state, Rejected(
            RejectReason.MALFORMED_COMMAND, MalformedCommand(command.text)
        )

    if isinstance(command, ExitCommand):
        if not state.is_game_over:
            state.terminate()
        return state, ExitRequested()

    if state.is_game_over:
        return state, Rejected(RejectReason.GAME_OVER)

    color = state.side_to_move
    try:
        move = Rules.validate(
            state.board,
            color,
            command.from_pos,
            command.to_pos,
            state.en_passant_target,
        )
    except MoveRejected as exc:
        return state, Rejected(exc.reason, exc)

    result = state.apply_move(move)
    if result == GameResult.STALEMATE:
        return state, Stalemated(move)
    winner = result.winner
    if winner is not None:
        return state, Won(winner, move)
    return state, Continuing(move)


# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[OutcomeSignal, GameState], None]
RejectedCallback = Callable[[Rejected], None]
GameOverCallback = Callable[[GameResult], None]
PhaseCallback = Callable[[GamePhase], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_rejected: list[RejectedCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)
    on_phase_changed: list[PhaseCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class GameController:
    """Orchestrates a two-player game: owns the state, tracks players,
    forwards commands and notifies listeners.

    Single-threaded: every call runs to completion before the next command
    is accepted.
    """

    __slots__ = ("_state", "_players", "events")

    def __init__(self) -> None:
        self._state = GameState()
        self._players: dict[Color, Player] = {}
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def current_player(self) -> Player | None:
        return self._players.get(self._state.side_to_move)

    def player(self, color: Color) -> Player | None:
        return self._players.get(color)

    def board_rows(self) -> list[list[Color | None]]:
        return board_rows(self._state.board)

    # ── Game lifecycle ───────────────────────────────────────────────────

    def new_game(
        self,
        white: Player,
        black: Player,
        layout: str | None = None,
        side_to_move: Color = Color.WHITE,
    ) -> None:
        self._players = {Color.WHITE: white, Color.BLACK: black}
        self._state = new_game(layout, side_to_move)
        _LOGGER.info("New game: %s vs %s", white.name, black.name)
        self._emit_phase(GamePhase.AWAITING_MOVE)

    def submit(self, raw_text: str) -> OutcomeSignal:
        """Feed one line of input; returns the outcome signal."""
        color = self._state.side_to_move
        self._state, signal = submit_command(self._state, raw_text)

        if isinstance(signal, Rejected):
            _LOGGER.debug("Rejected %r from %s: %s", raw_text, color, signal.reason.name)
            for cb in self.events.on_rejected:
                cb(signal)
            return signal

        if isinstance(signal, ExitRequested):
            _LOGGER.info("%s requested exit", color)
            self._emit_phase(GamePhase.TERMINATED)
            return signal

        _LOGGER.debug("%s played %s", color, signal.move)
        for cb in self.events.on_move:
            cb(signal, self._state)

        if isinstance(signal, (Won, Stalemated)):
            _LOGGER.info("Game over: %s", self._state.result.name)
            self._emit_game_over(self._state.result)
        return signal

    # ── Internal helpers ─────────────────────────────────────────────────

    def _emit_game_over(self, result: GameResult) -> None:
        self._emit_phase(GamePhase.GAME_OVER)
        for cb in self.events.on_game_over:
            cb(result)

    def _emit_phase(self, phase: GamePhase) -> None:
        for cb in self.events.on_phase_changed:
            cb(phase)
