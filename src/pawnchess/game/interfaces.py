"""Game phases and the outcome signals returned for each submitted command."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum, auto

from pawnchess.core.enums import Color, RejectReason
from pawnchess.core.errors import MoveRejected
from pawnchess.core.move import Move

# ── Game phase FSM states ────────────────────────────────────────────────────


class GamePhase(IntEnum):
    """Finite-state-machine states for a pawns-only game."""

    NOT_STARTED = auto()
    AWAITING_MOVE = auto()
    GAME_OVER = auto()  # win or stalemate
    TERMINATED = auto()  # exit command, no result


# ── Outcome signals ──────────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class Rejected:
    """Command refused; the same player moves again."""

    reason: RejectReason
    error: MoveRejected | None = None


@dataclass(frozen=True, slots=True)
class ExitRequested:
    """The player ended the session."""


@dataclass(frozen=True, slots=True)
class Continuing:
    """Move applied; the turn passed to the opponent."""

    move: Move


@dataclass(frozen=True, slots=True)
class Won:
    """Move applied and decided the game."""

    color: Color
    move: Move


@dataclass(frozen=True, slots=True)
class Stalemated:
    """Move applied and left the opponent without any legal reply."""

    move: Move


OutcomeSignal = Rejected | ExitRequested | Continuing | Won | Stalemated
