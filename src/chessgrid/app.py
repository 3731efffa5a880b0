"""Application entry point."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import TYPE_CHECKING

from chessgrid.game.errors import InvalidPlayerName
from chessgrid.game.lobby import Lobby
from chessgrid.game.settings import GameSettings

if TYPE_CHECKING:
    from PyQt6.QtWidgets import QApplication

_LOGGER = logging.getLogger(__name__)

_LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def configure_logging(level: str | int = logging.INFO) -> None:
    """Root logging setup for the desktop application."""
    if isinstance(level, str):
        numeric = logging.getLevelName(level.upper())
        if not isinstance(numeric, int):
            raise ValueError(f"Invalid log level: {level!r}")
        level = numeric
    logging.basicConfig(level=level, format=_LOG_FORMAT)


def parse_args(
    argv: list[str] | None = None, settings: GameSettings | None = None
) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="chessgrid", description="Two-player chess.")
    parser.add_argument("--white", default="White", help="White player's name")
    parser.add_argument("--black", default="Black", help="Black player's name")
    parser.add_argument(
        "--log-level",
        default=os.environ.get("CHESSGRID_LOG_LEVEL", "INFO"),
        help="Logging level (default: INFO, or $CHESSGRID_LOG_LEVEL)",
    )
    args = parser.parse_args(argv)

    lobby = Lobby(settings)
    try:
        args.white = lobby.validate_name(args.white)
        args.black = lobby.validate_name(args.black)
    except InvalidPlayerName as exc:
        parser.error(str(exc))
    if args.white == args.black:
        parser.error("white and black players need different names")
    return args


def _configure_application(app: QApplication) -> None:
    """Apply app-wide settings and theme."""
    from chessgrid.ui.theme import APP_STYLE

    app.setApplicationName("chessgrid")
    app.setStyle("Fusion")
    app.setStyleSheet(APP_STYLE)


def run_application(argv: list[str] | None = None) -> int:
    """Create and run the main Qt application."""
    from PyQt6.QtWidgets import QApplication

    from chessgrid.ui.main_window import MainWindow

    settings = GameSettings.from_env()
    args = parse_args(argv, settings)
    configure_logging(args.log_level)
    _LOGGER.debug("Settings: %s", settings)

    app = QApplication(sys.argv[:1])
    _configure_application(app)

    window = MainWindow(settings, white_name=args.white, black_name=args.black)
    window.show()

    return app.exec()


def main() -> None:
    """Launch the chessgrid application."""
    sys.exit(run_application(sys.argv[1:]))


if __name__ == "__main__":
    main()
