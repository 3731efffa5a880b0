"""Game management layer — lobby, game state, controller, board selection.

Quick start::

    from chessgrid.game import GameController, Lobby

    lobby = Lobby()
    game = lobby.create_game("Alice")
    lobby.join_game(game.game_id, "Bob")
    ctrl = GameController(game)
    ctrl.submit_move("Alice", (6, 4), (4, 4))  # e2-e4
"""

from chessgrid.game.controller import GameController, GameEvents
from chessgrid.game.errors import (
    GameError,
    GameNotFound,
    GameNotJoinable,
    GameOver,
    IllegalMove,
    InvalidPlayerName,
    NotYourTurn,
)
from chessgrid.game.lobby import Lobby
from chessgrid.game.selection import SquareSelection
from chessgrid.game.settings import GameSettings
from chessgrid.game.state import GameState, GameStatus, MoveRecord

__all__ = [
    # Errors
    "GameError",
    "GameNotFound",
    "GameNotJoinable",
    "GameOver",
    "IllegalMove",
    "InvalidPlayerName",
    "NotYourTurn",
    # Concrete
    "GameController",
    "GameEvents",
    "GameSettings",
    "GameState",
    "GameStatus",
    "Lobby",
    "MoveRecord",
    "SquareSelection",
]
