"""MainWindow — local two-player (hot seat) game window."""

from __future__ import annotations

import logging

from PyQt6.QtWidgets import (
    QHBoxLayout,
    QMainWindow,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from chessgrid.core.enums import GameResult
from chessgrid.core.types import Square
from chessgrid.game.controller import GameController
from chessgrid.game.lobby import Lobby
from chessgrid.game.selection import SquareSelection
from chessgrid.game.settings import GameSettings
from chessgrid.game.state import GameStatus
from chessgrid.ui.board_widget import BoardWidget
from chessgrid.ui.info_panel import GameInfoPanel

_LOGGER = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """Board on the left, status and game actions on the right."""

    def __init__(
        self,
        settings: GameSettings | None = None,
        white_name: str = "White",
        black_name: str = "Black",
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self._lobby = Lobby(settings)
        self._names = (white_name, black_name)
        self._controller: GameController | None = None

        self.setWindowTitle("chessgrid")
        self._setup_ui()
        self.new_game()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def controller(self) -> GameController:
        assert self._controller is not None
        return self._controller

    @property
    def board_widget(self) -> BoardWidget:
        return self._board

    @property
    def info_panel(self) -> GameInfoPanel:
        return self._info

    # ── Actions ──────────────────────────────────────────────────────────

    def new_game(self) -> None:
        if self._controller is not None:
            self._lobby.remove(self._controller.state.game_id)

        white, black = self._names
        state = self._lobby.create_game(white)
        self._lobby.join_game(state.game_id, black)

        self._controller = GameController(state)
        self._controller.events.on_game_over.append(self._on_game_over)
        self._board.set_selection(SquareSelection(state))
        self._refresh()
        self.statusBar().clearMessage()

    # ── UI setup ─────────────────────────────────────────────────────────

    def _setup_ui(self) -> None:
        central = QWidget()
        central.setObjectName("centralWidget")
        layout = QHBoxLayout(central)

        self._board = BoardWidget()
        self._board.move_made.connect(self._on_move_made)
        layout.addWidget(self._board)

        side = QVBoxLayout()
        self._info = GameInfoPanel()
        side.addWidget(self._info)

        self._btn_resign = QPushButton("Quit Game")
        self._btn_resign.setObjectName("resignButton")
        self._btn_resign.clicked.connect(self._on_resign)
        side.addWidget(self._btn_resign)

        self._btn_new = QPushButton("New Game")
        self._btn_new.clicked.connect(self.new_game)
        side.addWidget(self._btn_new)
        side.addStretch()
        layout.addLayout(side)

        self.setCentralWidget(central)

    # ── Slots ────────────────────────────────────────────────────────────

    def _on_move_made(self, move: tuple[Square, Square]) -> None:
        state = self.controller.state
        player = state.player_name(state.side_to_move)
        if player is None:
            return
        from_sq, to_sq = move
        self.controller.submit_move(player, from_sq, to_sq)
        self._refresh()

    def _on_resign(self) -> None:
        state = self.controller.state
        player = state.player_name(state.side_to_move)
        if player is not None:
            self.controller.resign(player)
        self._refresh()

    def _on_game_over(self, status: GameStatus, result: GameResult) -> None:
        _LOGGER.info("Game over: %s, %s", status.value, result.name)
        self.statusBar().showMessage(f"Game over: {status.value}")

    def _refresh(self) -> None:
        state = self.controller.state
        self._board.refresh()
        self._info.update_state(state)
        self._btn_resign.setEnabled(state.is_active)
