"""ConsoleSession, the blocking input/print loop around GameController."""

from __future__ import annotations

from collections.abc import Callable

from pawnchess.console.i18n import set_language, t
from pawnchess.console.settings import ConsoleSettings
from pawnchess.core.display import render_board
from pawnchess.core.enums import Color, GameResult, RejectReason
from pawnchess.core.errors import NoPawnAtSource
from pawnchess.core.notation import EXIT_COMMAND
from pawnchess.game.controller import GameController
from pawnchess.game.interfaces import (
    Continuing,
    ExitRequested,
    OutcomeSignal,
    Rejected,
    Stalemated,
    Won,
)
from pawnchess.game.player import Player
from pawnchess.game.state import GameState

InputFn = Callable[[], str]
OutputFn = Callable[[str], None]


def _color_name(color: Color) -> str:
    s = t()
    return s.color_white if color == Color.WHITE else s.color_black


def _color_name_lower(color: Color) -> str:
    s = t()
    return s.color_white_lower if color == Color.WHITE else s.color_black_lower


class ConsoleSession:
    """Reads player names and moves, prints the board and verdicts.

    Holds no rules logic: every line goes straight to the controller and
    the returned outcome signal decides what gets printed.
    """

    __slots__ = ("_settings", "_read", "_write", "_controller")

    def __init__(
        self,
        settings: ConsoleSettings | None = None,
        *,
        input_fn: InputFn = input,
        output_fn: OutputFn = print,
    ) -> None:
        self._settings = settings or ConsoleSettings()
        self._read = input_fn
        self._write = output_fn
        self._controller = GameController()

    @property
    def controller(self) -> GameController:
        return self._controller

    def run(self, layout: str | None = None) -> GameResult:
        """Play one session to the end and return its result."""
        set_language(self._settings.language)
        s = t()

        self._write(s.title)
        self._write(s.first_player_prompt)
        first = self._read_line()
        self._write(s.second_player_prompt)
        second = self._read_line()

        self._controller.new_game(
            Player(Color.WHITE, first or ""),
            Player(Color.BLACK, second or ""),
            layout=layout,
        )
        self._print_board()

        while True:
            player = self._controller.current_player
            name = player.name if player is not None else ""
            self._write(s.turn_prompt.format(name=name))
            line = self._read_line()
            signal = self._controller.submit(EXIT_COMMAND if line is None else line)
            if self._report(signal):
                return self._controller.state.result

    # ── Internal helpers ─────────────────────────────────────────────────

    def _read_line(self) -> str | None:
        """Next input line, or ``None`` once input is exhausted."""
        try:
            return self._read()
        except EOFError:
            return None

    def _report(self, signal: OutcomeSignal) -> bool:
        """Print the consequence of *signal*; True when the session ends."""
        s = t()
        if isinstance(signal, Rejected):
            self._write(self._rejection_message(signal))
            return False
        if isinstance(signal, ExitRequested):
            self._write(s.bye)
            return True
        if isinstance(signal, Continuing):
            self._print_board()
            return False

        self._print_board()
        if isinstance(signal, Won):
            self._write(s.wins.format(color=_color_name(signal.color)))
        elif isinstance(signal, Stalemated):
            self._write(s.stalemate)
        self._write(s.bye)
        return True

    def _rejection_message(self, signal: Rejected) -> str:
        s = t()
        error = signal.error
        if signal.reason == RejectReason.NO_PAWN_AT_SOURCE and isinstance(
            error, NoPawnAtSource
        ):
            return s.no_pawn_at.format(
                color=_color_name_lower(error.color), square=error.position
            )
        if signal.reason == RejectReason.GAME_OVER:
            return s.game_over
        return s.invalid_input

    def _print_board(self) -> None:
        self._write(self._board_text(self._controller.state))

    def _board_text(self, state: GameState) -> str:
        return render_board(
            state.board, show_coordinates=self._settings.show_coordinates
        )
