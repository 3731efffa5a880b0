"""GameController — validates submitted moves and drives a :class:`GameState`.

Emits events via simple callbacks so the UI / tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from chessgrid.core.enums import GameResult
from chessgrid.core.types import Square, in_bounds
from chessgrid.game.state import GameState, GameStatus, MoveRecord

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[MoveRecord, GameState], None]
GameOverCallback = Callable[[GameStatus, GameResult], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class GameController:
    """Accepts moves from seated players and notifies listeners.

    A move is accepted only when the game is active, the player holds the
    side to move, and the destination is one of the piece's safe
    destinations (the same set the board offers for selection).
    """

    __slots__ = ("_state", "events")

    def __init__(self, state: GameState) -> None:
        self._state = state
        self.events = GameEvents()

    @property
    def state(self) -> GameState:
        return self._state

    def submit_move(
        self,
        player_name: str,
        from_sq: tuple[int, int],
        to_sq: tuple[int, int],
    ) -> bool:
        """Returns True if the move was legal and applied."""
        state = self._state
        if not state.is_active:
            _LOGGER.debug("Rejected move in game %s: not active", state.game_id)
            return False
        if state.player_color(player_name) != state.side_to_move:
            _LOGGER.debug("Rejected move by %s: not your turn", player_name)
            return False
        if not (in_bounds(*from_sq) and in_bounds(*to_sq)):
            return False
        if Square(*to_sq) not in state.legal_destinations(from_sq):
            _LOGGER.debug(
                "Rejected illegal move by %s: %s -> %s", player_name, from_sq, to_sq
            )
            return False

        record = state.apply_move(player_name, from_sq, to_sq)
        for cb in self.events.on_move:
            cb(record, state)

        if state.is_game_over:
            self._emit_game_over()
        return True

    def resign(self, player_name: str) -> bool:
        """Returns True if *player_name* was seated and the game ended."""
        state = self._state
        if not state.is_active or state.player_color(player_name) is None:
            return False
        state.resign(player_name)
        self._emit_game_over()
        return True

    def _emit_game_over(self) -> None:
        for cb in self.events.on_game_over:
            cb(self._state.status, self._state.result)
