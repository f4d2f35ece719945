"""Game management layer: controller, players and the state machine.

Quick start::

    from pawnchess.game import new_game, submit_command

    state = new_game()
    state, signal = submit_command(state, "e2e4")
"""

from pawnchess.game.controller import (
    GameController,
    GameEvents,
    new_game,
    submit_command,
)
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

__all__ = [
    # Interfaces
    "GamePhase",
    "OutcomeSignal",
    "Continuing",
    "ExitRequested",
    "Rejected",
    "Stalemated",
    "Won",
    # Concrete
    "GameController",
    "GameEvents",
    "GameState",
    "Player",
    # Functional API
    "new_game",
    "submit_command",
]
