"""Visual theme constants and QSS styles for chessgrid."""

from __future__ import annotations

from dataclasses import dataclass

from PyQt6.QtGui import QColor


@dataclass(frozen=True)
class BoardTheme:
    """Colour scheme for the chessboard."""

    light_square: QColor
    dark_square: QColor
    selected: QColor  # ring around the selected piece
    destination: QColor  # dot on quiet destinations
    capture: QColor  # ring around capturable pieces
    check: QColor  # king in check
    white_piece: QColor
    black_piece: QColor

    @classmethod
    def default(cls) -> BoardTheme:
        return cls(
            light_square=QColor(252, 211, 77),  # amber
            dark_square=QColor(217, 119, 6),
            selected=QColor(34, 197, 94),  # green
            destination=QColor(34, 197, 94, 204),
            capture=QColor(220, 38, 38),  # red
            check=QColor(255, 0, 0, 120),
            white_piece=QColor(238, 238, 238),
            black_piece=QColor(34, 34, 34),
        )


def rgba(color: QColor) -> str:
    """QSS ``rgba(...)`` literal for *color*."""
    return f"rgba({color.red()}, {color.green()}, {color.blue()}, {color.alpha()})"


APP_STYLE = """
QMainWindow, QWidget#centralWidget {
    background-color: #1e293b;
}
QLabel {
    color: #e2e8f0;
}
QLabel#statusBanner {
    border-radius: 6px;
    padding: 8px;
    font-weight: bold;
}
QPushButton#resignButton {
    background-color: #6b2020;
    color: #ffffff;
    min-height: 32px;
}
QPushButton#resignButton:hover {
    background-color: #8b2020;
}
"""
