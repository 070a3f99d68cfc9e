"""Game orchestration: players, state machine and controller."""

from gambit.game.controller import GameController, GameEvents
from gambit.game.interfaces import GamePhase, IGameController, IPlayer
from gambit.game.player import AIPlayer, HumanPlayer
from gambit.game.state import GameState, MoveRecord

__all__ = [
    "AIPlayer",
    "GameController",
    "GameEvents",
    "GamePhase",
    "GameState",
    "HumanPlayer",
    "IGameController",
    "IPlayer",
    "MoveRecord",
]
