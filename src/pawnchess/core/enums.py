"""Core enumerations for the pawns-only domain."""

from __future__ import annotations

from enum import IntEnum, auto


class Color(IntEnum):
    """Side color. The integer value doubles as the player index."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    @property
    def delta_row(self) -> int:
        """Row direction of travel: white moves up, black moves down."""
        return 1 if self == Color.WHITE else -1

    @property
    def starting_row(self) -> int:
        return 2 if self == Color.WHITE else 7

    @property
    def last_row(self) -> int:
        return 8 if self == Color.WHITE else 1

    @property
    def marker(self) -> str:
        """Single-letter board marker, e.g. ``W``."""
        return self.name[0]

    def __str__(self) -> str:
        return self.name.lower()


class GameResult(IntEnum):
    """Outcome of a game."""

    IN_PROGRESS = 0
    WHITE_WINS = 1
    BLACK_WINS = 2
    STALEMATE = 3

    @classmethod
    def win_for(cls, color: Color) -> GameResult:
        return cls.WHITE_WINS if color == Color.WHITE else cls.BLACK_WINS

    @property
    def winner(self) -> Color | None:
        if self == GameResult.WHITE_WINS:
            return Color.WHITE
        if self == GameResult.BLACK_WINS:
            return Color.BLACK
        return None


class MoveKind(IntEnum):
    """Classification of an accepted pawn move."""

    SINGLE_STEP = auto()
    DOUBLE_STEP = auto()
    CAPTURE = auto()
    EN_PASSANT = auto()


class RejectReason(IntEnum):
    """Why a submitted command was refused without consuming the turn."""

    MALFORMED_COMMAND = auto()
    NO_PAWN_AT_SOURCE = auto()
    INVALID_MOVE = auto()
    GAME_OVER = auto()
