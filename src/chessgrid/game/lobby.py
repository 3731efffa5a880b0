"""Lobby — in-memory registry of games waiting for, or playing, two players."""

from __future__ import annotations

import logging
import uuid
from collections.abc import Callable

from chessgrid.game.errors import GameNotFound, InvalidPlayerName
from chessgrid.game.settings import GameSettings
from chessgrid.game.state import GameState, GameStatus

_LOGGER = logging.getLogger(__name__)


def _new_id() -> str:
    return uuid.uuid4().hex


class Lobby:
    """Creates, lists, joins and removes games.

    Args:
        settings: Shared game settings (name length, promotion piece).
        id_factory: Produces fresh game ids; injectable for tests.
    """

    __slots__ = ("_games", "_settings", "_id_factory")

    def __init__(
        self,
        settings: GameSettings | None = None,
        id_factory: Callable[[], str] = _new_id,
    ) -> None:
        self._games: dict[str, GameState] = {}
        self._settings = settings or GameSettings()
        self._id_factory = id_factory

    @property
    def settings(self) -> GameSettings:
        return self._settings

    def validate_name(self, name: str) -> str:
        """Trimmed display name; raises if outside the configured length range."""
        trimmed = name.strip()
        if len(trimmed) < self._settings.min_name_length:
            raise InvalidPlayerName(
                f"Name must be at least {self._settings.min_name_length} characters"
            )
        if len(trimmed) > self._settings.max_name_length:
            raise InvalidPlayerName(
                f"Name must be at most {self._settings.max_name_length} characters"
            )
        return trimmed

    def create_game(self, player_name: str) -> GameState:
        """Open a new game with *player_name* playing white."""
        name = self.validate_name(player_name)
        game = GameState(
            game_id=self._id_factory(), white_player=name, settings=self._settings
        )
        self._games[game.game_id] = game
        _LOGGER.info("Game %s created by %s", game.game_id, name)
        return game

    def open_games(self, search: str = "") -> list[GameState]:
        """Games waiting for an opponent, filtered by creator name."""
        needle = search.strip().lower()
        return [
            g
            for g in self._games.values()
            if g.status == GameStatus.WAITING and needle in g.white_player.lower()
        ]

    def join_game(self, game_id: str, player_name: str) -> GameState:
        game = self.get(game_id)
        game.join(self.validate_name(player_name))
        return game

    def get(self, game_id: str) -> GameState:
        try:
            return self._games[game_id]
        except KeyError:
            raise GameNotFound(f"Game not found: {game_id!r}") from None

    def remove(self, game_id: str) -> None:
        """Delete a game; unknown ids are ignored."""
        if self._games.pop(game_id, None) is not None:
            _LOGGER.info("Game %s removed", game_id)

    def __len__(self) -> int:
        return len(self._games)

    def __contains__(self, game_id: object) -> bool:
        return game_id in self._games
