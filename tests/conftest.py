"""Fixtures for the chessgrid test suite.

Widget tests under ``tests/ui`` share one QApplication styled the same way
the desktop entry point styles it. Core and game tests never touch Qt.
"""

from __future__ import annotations

import os
from collections.abc import Iterator
from pathlib import Path

import pytest

# Widget tests must not need a display server.
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

_UI_TESTS = Path(__file__).resolve().parent / "ui"


@pytest.fixture(scope="session")
def qapp() -> Iterator[object]:
    """QApplication carrying the chessgrid stylesheet."""
    from PyQt6.QtWidgets import QApplication

    from chessgrid.app import _configure_application

    app = QApplication.instance() or QApplication([])
    _configure_application(app)
    yield app


@pytest.fixture(autouse=True)
def _close_windows(request: pytest.FixtureRequest) -> Iterator[None]:
    """Close board windows a UI test leaves open."""
    if _UI_TESTS not in Path(request.node.path).resolve().parents:
        yield
        return

    app = request.getfixturevalue("qapp")
    yield
    for widget in app.topLevelWidgets():
        widget.close()
        widget.deleteLater()
    app.processEvents()
