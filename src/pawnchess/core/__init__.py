"""Core domain layer: pure pawns-only rules with zero external dependencies.

Quick start::

    from pawnchess.core import Board, Rules, Color, parse_square

    board = Board.initial()
    move = Rules.validate(board, Color.WHITE, parse_square("e2"), parse_square("e4"))
"""

from pawnchess.core.board import Board
from pawnchess.core.display import board_rows, render_board
from pawnchess.core.enums import Color, GameResult, MoveKind, RejectReason
from pawnchess.core.errors import (
    InvalidMove,
    MalformedCommand,
    MoveRejected,
    NoPawnAtSource,
    PawnChessError,
)
from pawnchess.core.move import Move
from pawnchess.core.notation import (
    EXIT_COMMAND,
    STARTING_LAYOUT,
    ExitCommand,
    MalformedInput,
    MoveCommand,
    board_from_layout,
    board_to_layout,
    parse_command,
)
from pawnchess.core.pawn import Pawn
from pawnchess.core.rules import Rules
from pawnchess.core.types import COLUMNS, ROWS, Position, parse_square

__all__ = [
    # Enums
    "Color",
    "GameResult",
    "MoveKind",
    "RejectReason",
    # Types / helpers
    "COLUMNS",
    "ROWS",
    "Position",
    "parse_square",
    # Domain objects
    "Board",
    "Move",
    "Pawn",
    "Rules",
    # Errors
    "InvalidMove",
    "MalformedCommand",
    "MoveRejected",
    "NoPawnAtSource",
    "PawnChessError",
    # Notation
    "EXIT_COMMAND",
    "STARTING_LAYOUT",
    "ExitCommand",
    "MalformedInput",
    "MoveCommand",
    "board_from_layout",
    "board_to_layout",
    "parse_command",
    # Display
    "board_rows",
    "render_board",
]
