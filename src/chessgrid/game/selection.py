"""SquareSelection — click handling for a board: select, show targets, move."""

from __future__ import annotations

from chessgrid.core.enums import Color
from chessgrid.core.types import BOARD_SIZE, Square
from chessgrid.game.state import GameState


class SquareSelection:
    """Tracks the selected square and its safe destinations.

    *viewer* is the colour of the player sitting at this board, or None for
    a hot-seat board that always plays the side to move.
    """

    __slots__ = ("_state", "_viewer", "_selected", "_destinations")

    def __init__(self, state: GameState, viewer: Color | None = None) -> None:
        self._state = state
        self._viewer = viewer
        self._selected: Square | None = None
        self._destinations: list[Square] = []

    # -- Properties -----------------------------------------------------------

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def selected(self) -> Square | None:
        return self._selected

    @property
    def destinations(self) -> list[Square]:
        return list(self._destinations)

    @property
    def is_interactive(self) -> bool:
        state = self._state
        if not state.is_active:
            return False
        return self._viewer is None or self._viewer == state.side_to_move

    @property
    def flipped(self) -> bool:
        """Black players see their own pieces at the bottom."""
        return self._viewer == Color.BLACK and self._state.settings.flip_for_black

    # -- Interaction ----------------------------------------------------------

    def click(self, sq: tuple[int, int]) -> tuple[Square, Square] | None:
        """Handle a click on *sq*; returns ``(from, to)`` when a move is chosen."""
        if not self.is_interactive:
            return None
        sq = Square(*sq)
        piece = self._state.board.piece_at(*sq)
        own = piece is not None and piece.color == self._state.side_to_move

        if self._selected is not None:
            if sq in self._destinations:
                move = (self._selected, sq)
                self.clear()
                return move
            if own:
                self._select(sq)
            else:
                self.clear()
        elif own:
            self._select(sq)
        return None

    def clear(self) -> None:
        self._selected = None
        self._destinations = []

    def refresh(self) -> None:
        """Recompute destinations after the game state changed."""
        if self._selected is None:
            return
        piece = self._state.board.piece_at(*self._selected)
        if piece is None or piece.color != self._state.side_to_move:
            self.clear()
            return
        self._destinations = self._state.legal_destinations(self._selected)

    # -- Display helpers ------------------------------------------------------

    def is_destination(self, sq: tuple[int, int]) -> bool:
        return Square(*sq) in self._destinations

    def is_capture(self, sq: tuple[int, int]) -> bool:
        """Destination holding a piece (drawn with a ring instead of a dot)."""
        return self.is_destination(sq) and self._state.board.piece_at(*sq) is not None

    def display_to_square(self, display_row: int, display_col: int) -> Square:
        """Board square shown at a display cell, honouring orientation."""
        if self.flipped:
            return Square(BOARD_SIZE - 1 - display_row, BOARD_SIZE - 1 - display_col)
        return Square(display_row, display_col)

    def _select(self, sq: Square) -> None:
        self._selected = sq
        self._destinations = self._state.legal_destinations(sq)
