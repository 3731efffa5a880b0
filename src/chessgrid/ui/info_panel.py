"""GameInfoPanel — colours, turn and check / checkmate / stalemate banner."""

from __future__ import annotations

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import QFormLayout, QLabel, QVBoxLayout, QWidget

from chessgrid.core.enums import Color
from chessgrid.game.state import GameState, GameStatus

_BANNER_STYLES: dict[str, str] = {
    "check": "background-color: #713f12; color: #fef08a;",
    "checkmate": "background-color: #7f1d1d; color: #fecaca;",
    "resigned": "background-color: #7f1d1d; color: #fecaca;",
    "stalemate": "background-color: #374151; color: #f3f4f6;",
    "your_turn": "background-color: #14532d; color: #dcfce7;",
    "waiting": "background-color: #374151; color: #f3f4f6;",
}


def status_message(state: GameState, viewer: Color | None) -> tuple[str, str]:
    """``(kind, text)`` of the status banner for *viewer* (None = hot seat)."""
    if state.status == GameStatus.RESIGNED:
        return "resigned", f"{state.quit_by} quit the game."
    if state.is_checkmate:
        winner = state.result.winner or state.side_to_move.opposite
        return "checkmate", f"Checkmate! {str(winner).capitalize()} wins!"
    if state.is_stalemate:
        return "stalemate", "Stalemate! Game is a draw."
    if state.is_check:
        return "check", "Check!"
    your_turn = viewer is None or viewer == state.side_to_move
    if your_turn and state.is_active:
        return "your_turn", "Your turn to move!"
    return "waiting", "Waiting for opponent..."


class GameInfoPanel(QWidget):
    """Shows the viewer's colour, the side to move and the status banner."""

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._setup_ui()

    def _setup_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(4, 4, 4, 4)
        layout.setSpacing(8)

        title = QLabel("Game Status")
        title.setFont(QFont("sans-serif", 14, QFont.Weight.Bold))
        title.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(title)

        form = QFormLayout()
        self._lbl_color = QLabel()
        self._lbl_turn = QLabel()
        form.addRow("Your Color:", self._lbl_color)
        form.addRow("Current Turn:", self._lbl_turn)
        layout.addLayout(form)

        self._banner = QLabel()
        self._banner.setObjectName("statusBanner")
        self._banner.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._banner.setWordWrap(True)
        layout.addWidget(self._banner)
        layout.addStretch()

    def update_state(self, state: GameState, viewer: Color | None = None) -> None:
        color = viewer if viewer is not None else state.side_to_move
        self._lbl_color.setText(str(color).capitalize())
        self._lbl_turn.setText(str(state.side_to_move).capitalize())
        kind, text = status_message(state, viewer)
        self._banner.setText(text)
        self._banner.setStyleSheet(_BANNER_STYLES[kind])

    @property
    def banner_text(self) -> str:
        return self._banner.text()

    @property
    def turn_text(self) -> str:
        return self._lbl_turn.text()
