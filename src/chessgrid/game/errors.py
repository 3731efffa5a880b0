"""Exceptions raised by the game layer."""

from __future__ import annotations


class GameError(Exception):
    """Base class for game-layer failures."""


class InvalidPlayerName(GameError, ValueError):
    """Display name is too short or blank."""


class GameNotFound(GameError, KeyError):
    """No game registered under the requested id."""

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else ""


class GameNotJoinable(GameError):
    """Game is not waiting for an opponent, or the joiner created it."""


class GameOver(GameError):
    """Game has already finished."""


class NotYourTurn(GameError):
    """Player tried to move out of turn or is not seated in the game."""


class IllegalMove(GameError, ValueError):
    """Move is not among the mover's safe destinations."""
