"""BoardWidget — 8x8 grid of square buttons driven by a SquareSelection."""

from __future__ import annotations

from functools import partial

from PyQt6.QtCore import pyqtSignal
from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import QGridLayout, QPushButton, QSizePolicy, QWidget

from chessgrid.core.enums import Color
from chessgrid.core.piece import Piece
from chessgrid.core.types import BOARD_SIZE, Square
from chessgrid.game.selection import SquareSelection
from chessgrid.ui.theme import BoardTheme, rgba

_DOT = "●"


class BoardWidget(QWidget):
    """Renders the board and turns clicks into moves.

    Signals:
        move_made(tuple): ``(from_square, to_square)`` of a chosen safe move.
    """

    move_made = pyqtSignal(object)

    TILE = 64  # px per square

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._theme = BoardTheme.default()
        self._selection: SquareSelection | None = None
        self._cells: list[list[QPushButton]] = []
        self._setup_ui()

    # ── Public API ───────────────────────────────────────────────────────

    @property
    def selection(self) -> SquareSelection | None:
        return self._selection

    def set_selection(self, selection: SquareSelection) -> None:
        self._selection = selection
        self.refresh()

    def cell(self, display_row: int, display_col: int) -> QPushButton:
        return self._cells[display_row][display_col]

    def refresh(self) -> None:
        """Redraw pieces and highlights from the current selection state."""
        selection = self._selection
        if selection is None:
            return
        state = selection.state
        board = state.board
        check_sq = board.king_square(state.side_to_move) if state.is_check else None
        enabled = state.is_active

        for r in range(BOARD_SIZE):
            for c in range(BOARD_SIZE):
                sq = selection.display_to_square(r, c)
                piece = board[sq]
                btn = self._cells[r][c]
                if piece is not None:
                    btn.setText(piece.symbol)
                elif selection.is_destination(sq):
                    btn.setText(_DOT)
                else:
                    btn.setText("")
                btn.setStyleSheet(self._cell_style(selection, sq, piece, check_sq))
                btn.setEnabled(enabled)

    # ── Internal ─────────────────────────────────────────────────────────

    def _setup_ui(self) -> None:
        layout = QGridLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(0)

        font = QFont("serif", self.TILE // 2)
        for r in range(BOARD_SIZE):
            row: list[QPushButton] = []
            for c in range(BOARD_SIZE):
                btn = QPushButton()
                btn.setFont(font)
                btn.setFixedSize(self.TILE, self.TILE)
                btn.setSizePolicy(QSizePolicy.Policy.Fixed, QSizePolicy.Policy.Fixed)
                btn.clicked.connect(partial(self._on_cell_clicked, r, c))
                layout.addWidget(btn, r, c)
                row.append(btn)
            self._cells.append(row)

    def _on_cell_clicked(
        self, display_row: int, display_col: int, _checked: bool = False
    ) -> None:
        if self._selection is None:
            return
        sq = self._selection.display_to_square(display_row, display_col)
        move = self._selection.click(sq)
        if move is not None:
            self.move_made.emit(move)
        self.refresh()

    def _cell_style(
        self,
        selection: SquareSelection,
        sq: Square,
        piece: Piece | None,
        check_sq: Square | None,
    ) -> str:
        t = self._theme
        light = (sq.row + sq.col) % 2 == 0
        background = t.light_square if light else t.dark_square
        if sq == check_sq:
            background = t.check

        if piece is not None:
            fg = t.white_piece if piece.color == Color.WHITE else t.black_piece
        else:
            fg = t.destination

        border = "none"
        if sq == selection.selected:
            border = f"4px solid {rgba(t.selected)}"
        elif selection.is_capture(sq):
            border = f"4px solid {rgba(t.capture)}"

        return (
            f"QPushButton {{ background-color: {rgba(background)};"
            f" color: {rgba(fg)}; border: {border}; border-radius: 0px; }}"
        )
