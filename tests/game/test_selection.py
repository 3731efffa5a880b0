"""Tests for SquareSelection — click-to-select, click-to-move."""

from chessgrid.core.board import Board
from chessgrid.core.enums import Color
from chessgrid.core.notation import board_from_fen, notation_to_square
from chessgrid.core.types import A1, D2, E2, E3, E4, E7, E8, Square
from chessgrid.game.selection import SquareSelection
from chessgrid.game.settings import GameSettings
from chessgrid.game.state import GameState, GameStatus


def _state(fen: str | None = None, settings: GameSettings | None = None) -> GameState:
    return GameState(
        game_id="g1",
        white_player="Alice",
        black_player="Bob",
        board=Board.initial() if fen is None else board_from_fen(fen),
        status=GameStatus.ACTIVE,
        settings=settings or GameSettings(),
    )


def _selection(fen: str | None = None, viewer: Color | None = None) -> SquareSelection:
    return SquareSelection(_state(fen), viewer)


class TestClick:
    def test_select_own_piece(self) -> None:
        sel = _selection()
        assert sel.click(E2) is None
        assert sel.selected == E2
        assert set(sel.destinations) == {E3, E4}

    def test_click_destination_returns_move(self) -> None:
        sel = _selection()
        sel.click(E2)
        assert sel.click(E4) == (E2, E4)
        assert sel.selected is None
        assert sel.destinations == []

    def test_click_opponent_piece_without_selection(self) -> None:
        sel = _selection()
        assert sel.click(E7) is None
        assert sel.selected is None

    def test_click_empty_square_clears(self) -> None:
        sel = _selection()
        sel.click(E2)
        assert sel.click(notation_to_square("e5")) is None
        assert sel.selected is None

    def test_click_other_own_piece_reselects(self) -> None:
        sel = _selection()
        sel.click(E2)
        sel.click(D2)
        assert sel.selected == D2
        assert E4 not in sel.destinations

    def test_click_selected_piece_keeps_it(self) -> None:
        sel = _selection()
        sel.click(E2)
        sel.click(E2)
        assert sel.selected == E2

    def test_pinned_piece_destinations_are_safe_only(self) -> None:
        sel = _selection("4r3/8/8/8/8/8/4R3/4K3")
        sel.click(E2)
        assert D2 not in sel.destinations
        assert sel.is_destination(E8)
        assert sel.is_capture(E8)
        assert not sel.is_capture(E3)

    def test_piece_without_moves_can_be_selected(self) -> None:
        sel = _selection()
        sel.click(A1)
        assert sel.selected == A1
        assert sel.destinations == []


class TestInteractivity:
    def test_viewer_must_be_side_to_move(self) -> None:
        sel = _selection(viewer=Color.BLACK)
        assert not sel.is_interactive
        assert sel.click(E7) is None
        assert sel.selected is None

    def test_finished_game_is_not_interactive(self) -> None:
        state = _state()
        state.resign("Alice")
        sel = SquareSelection(state)
        assert not sel.is_interactive
        assert sel.click(E2) is None

    def test_refresh_drops_stale_selection(self) -> None:
        state = _state()
        sel = SquareSelection(state)
        sel.click(E2)
        state.apply_move("Alice", D2, notation_to_square("d4"))
        sel.refresh()
        assert sel.selected is None


class TestOrientation:
    def test_black_viewer_is_flipped(self) -> None:
        sel = _selection(viewer=Color.BLACK)
        assert sel.flipped
        assert sel.display_to_square(0, 0) == Square(7, 7)
        assert sel.display_to_square(7, 3) == Square(0, 4)

    def test_flip_can_be_disabled(self) -> None:
        state = _state(settings=GameSettings(flip_for_black=False))
        sel = SquareSelection(state, viewer=Color.BLACK)
        assert not sel.flipped
        assert sel.display_to_square(0, 0) == Square(0, 0)

    def test_hot_seat_is_not_flipped(self) -> None:
        assert not _selection().flipped
