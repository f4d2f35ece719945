"""Tests for the console session loop."""

from __future__ import annotations

from collections.abc import Callable

from pawnchess.console.i18n import t
from pawnchess.console.session import ConsoleSession
from pawnchess.console.settings import ConsoleSettings
from pawnchess.core.enums import GameResult

ScriptFactory = Callable[[list[str]], Callable[[], str]]


def _run(
    scripted_input: ScriptFactory,
    lines: list[str],
    *,
    layout: str | None = None,
    settings: ConsoleSettings | None = None,
) -> tuple[GameResult, list[str]]:
    output: list[str] = []
    session = ConsoleSession(
        settings, input_fn=scripted_input(lines), output_fn=output.append
    )
    result = session.run(layout)
    return result, output


class TestPrompts:
    def test_title_and_names(self, scripted_input: ScriptFactory) -> None:
        _, output = _run(scripted_input, ["Amelia", "Tom", "exit"])
        assert output[0] == " Pawns-Only Chess"
        assert output[1] == "First Player's name:"
        assert output[2] == "Second Player's name:"
        assert output[3].startswith("  +---+")
        assert output[4] == "Amelia's turn:"
        assert output[-1] == "Bye!"

    def test_turn_passes_after_move(self, scripted_input: ScriptFactory) -> None:
        _, output = _run(scripted_input, ["Amelia", "Tom", "e2e4", "exit"])
        assert output.count("Amelia's turn:") == 1
        assert output.count("Tom's turn:") == 1

    def test_eof_ends_session(self, scripted_input: ScriptFactory) -> None:
        result, output = _run(scripted_input, [])
        assert result == GameResult.IN_PROGRESS
        assert "Player (white)'s turn:" in output
        assert output[-1] == "Bye!"


class TestRejections:
    def test_invalid_input_reprompts_same_player(
        self, scripted_input: ScriptFactory
    ) -> None:
        _, output = _run(scripted_input, ["A", "B", "e2e5", "go", "exit"])
        assert output.count("Invalid input") == 2
        assert output.count("A's turn:") == 3
        assert "B's turn:" not in output

    def test_no_pawn_message(self, scripted_input: ScriptFactory) -> None:
        _, output = _run(scripted_input, ["A", "B", "e7e5", "e2e4", "e2e3", "exit"])
        assert "No white pawn at e7" in output
        assert "No black pawn at e2" in output


class TestOutcomes:
    def test_win(self, scripted_input: ScriptFactory) -> None:
        result, output = _run(
            scripted_input, ["A", "B", "a7a8"], layout="8/P6p/8/8/8/8/8/8"
        )
        assert result == GameResult.WHITE_WINS
        assert output[-2:] == ["White Wins!", "Bye!"]

    def test_stalemate(self, scripted_input: ScriptFactory) -> None:
        result, output = _run(
            scripted_input, ["A", "B", "a2a3"], layout="8/8/8/4p3/4P3/8/P7/8"
        )
        assert result == GameResult.STALEMATE
        assert output[-2:] == ["Stalemate!", "Bye!"]

    def test_board_printed_after_each_move(self, scripted_input: ScriptFactory) -> None:
        _, output = _run(scripted_input, ["A", "B", "e2e4", "d7d5", "exit"])
        boards = [line for line in output if line.startswith("  +---+")]
        assert len(boards) == 3


class TestSettings:
    def test_russian(self, scripted_input: ScriptFactory) -> None:
        _, output = _run(
            scripted_input,
            ["A", "B", "e2e5", "exit"],
            settings=ConsoleSettings(language="Russian"),
        )
        assert output[0] == t().title
        assert "Неверный ввод" in output
        assert output[-1] == "До свидания!"

    def test_hidden_coordinates(self, scripted_input: ScriptFactory) -> None:
        _, output = _run(
            scripted_input,
            ["A", "B", "exit"],
            settings=ConsoleSettings(show_coordinates=False),
        )
        board = output[3].splitlines()
        assert board[0].startswith("+---+")
        assert not any(line.startswith("8 ") for line in board)
