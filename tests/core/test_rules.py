"""Tests for rules: check, move safety, checkmate, stalemate."""

import pytest

from chessgrid.core.board import Board
from chessgrid.core.enums import Color, PieceType, PositionStatus
from chessgrid.core.move_generator import is_valid_move
from chessgrid.core.notation import board_from_fen, notation_to_square
from chessgrid.core.piece import Piece
from chessgrid.core.rules import (
    classify,
    has_safe_move,
    is_checkmate,
    is_in_check,
    is_move_safe,
    is_stalemate,
    safe_moves,
)
from chessgrid.core.types import D2, E1, E2, E8, Square

FOOLS_MATE = "rnb1kbnr/pppp1ppp/8/4p3/6Pq/5P2/PPPPP2P/RNBQKBNR"
CLASSIC_STALEMATE = "k7/8/KQ6/8/8/8/8/8"
QUEEN_FILE_MATE = "k6q/8/8/8/8/8/6P1/6RK"
BARE_KINGS = "K7/8/8/8/8/8/8/7k"
PINNED_ROOK = "4r3/8/8/8/8/8/4R3/4K3"


def _play(board: Board, *moves: str) -> Board:
    for text in moves:
        src, dst = text.split("-")
        board = board.relocate(notation_to_square(src), notation_to_square(dst))
    return board


class TestCheck:
    def test_starting_not_in_check(self) -> None:
        board = Board.initial()
        assert not is_in_check(board, Color.WHITE)
        assert not is_in_check(board, Color.BLACK)

    def test_fools_mate_in_check(self) -> None:
        board = board_from_fen(FOOLS_MATE)
        assert is_in_check(board, Color.WHITE)
        assert not is_in_check(board, Color.BLACK)

    def test_missing_king_is_not_in_check(self) -> None:
        board = board_from_fen("8/8/8/8/8/8/8/q7")
        assert not is_in_check(board, Color.WHITE)

    def test_adjacent_kings_attack_each_other(self) -> None:
        board = board_from_fen("8/8/8/4k3/4K3/8/8/8")
        assert is_in_check(board, Color.WHITE)
        assert is_in_check(board, Color.BLACK)

    def test_pawn_attacks_diagonally_only(self) -> None:
        in_front = board_from_fen("8/8/8/4p3/4K3/8/8/8")
        diagonal = board_from_fen("8/8/8/3p4/4K3/8/8/8")
        assert not is_in_check(in_front, Color.WHITE)
        assert is_in_check(diagonal, Color.WHITE)

    def test_blocked_slider_does_not_check(self) -> None:
        board = board_from_fen("4r3/8/8/8/8/8/4P3/4K3")
        assert not is_in_check(board, Color.WHITE)

    def test_knight_check(self) -> None:
        board = board_from_fen("8/8/8/8/8/5n2/8/4K3")
        assert is_in_check(board, Color.WHITE)


class TestMoveSafety:
    def test_pinned_rook_leaving_file_is_unsafe(self) -> None:
        board = board_from_fen(PINNED_ROOK)
        assert not is_move_safe(board, E2, D2, Color.WHITE)

    def test_pinned_rook_along_file_is_safe(self) -> None:
        board = board_from_fen(PINNED_ROOK)
        assert is_move_safe(board, E2, notation_to_square("e5"), Color.WHITE)
        assert is_move_safe(board, E2, E8, Color.WHITE)

    def test_king_cannot_step_into_attack(self) -> None:
        board = board_from_fen("8/8/8/8/8/8/3r4/4K3")
        assert not is_move_safe(board, E1, notation_to_square("e2"), Color.WHITE)
        assert is_move_safe(board, E1, D2, Color.WHITE)  # captures the rook

    def test_input_board_is_not_mutated(self) -> None:
        board = board_from_fen(PINNED_ROOK)
        snapshot = board.to_grid()
        is_move_safe(board, E2, D2, Color.WHITE)
        safe_moves(board, E2, Color.WHITE)
        assert board.to_grid() == snapshot

    def test_off_board_is_not_safe(self) -> None:
        assert not is_move_safe(Board.initial(), E2, (9, 9), Color.WHITE)

    def test_safe_moves_filter(self) -> None:
        board = board_from_fen(PINNED_ROOK)
        names = {str(sq) for sq in safe_moves(board, E2, Color.WHITE)}
        assert names == {"e3", "e4", "e5", "e6", "e7", "e8"}

    def test_validity_and_safety_disagree_on_pinned_piece(self) -> None:
        # The single-move validity check does not filter self-check.
        board = board_from_fen(PINNED_ROOK)
        assert is_valid_move(board, E2, D2)
        assert D2 not in safe_moves(board, E2, Color.WHITE)

    def test_safe_moves_en_passant(self) -> None:
        board = board_from_fen("8/8/8/3pP3/8/8/8/4K3")
        d6 = notation_to_square("d6")
        assert d6 in safe_moves(board, notation_to_square("e5"), Color.WHITE, d6)
        assert d6 not in safe_moves(board, notation_to_square("e5"), Color.WHITE)


class TestCheckmate:
    def test_fools_mate_from_start(self) -> None:
        board = _play(Board.initial(), "f2-f3", "e7-e5", "g2-g4", "d8-h4")
        assert is_checkmate(board, Color.WHITE)
        assert board == board_from_fen(FOOLS_MATE)

    def test_queen_on_open_file(self) -> None:
        board = board_from_fen(QUEEN_FILE_MATE)
        assert is_in_check(board, Color.WHITE)
        assert is_checkmate(board, Color.WHITE)

    def test_back_rank_mate(self) -> None:
        # R on a8 checks black king d8; white king d6 covers all escapes.
        board = board_from_fen("R2k4/8/3K4/8/8/8/8/8")
        assert is_checkmate(board, Color.BLACK)

    def test_not_checkmate_when_can_escape(self) -> None:
        board = board_from_fen("4k3/8/8/8/8/8/8/r3K3")
        assert is_in_check(board, Color.WHITE)
        assert not is_checkmate(board, Color.WHITE)

    def test_not_checkmate_when_check_can_be_blocked(self) -> None:
        board = board_from_fen("k6q/8/8/8/8/8/6P1/5NRK")
        assert is_in_check(board, Color.WHITE)
        assert not is_checkmate(board, Color.WHITE)  # Nf1-h2
        board = board_from_fen("k6q/6R1/8/8/8/8/6P1/6RK")
        assert not is_checkmate(board, Color.WHITE)  # Rg7-h7

    def test_not_checkmate_when_checker_can_be_taken(self) -> None:
        board = board_from_fen("k6q/8/8/8/8/8/6P1/6RK").with_piece(
            notation_to_square("b2"), Piece(Color.WHITE, PieceType.BISHOP)
        )
        assert is_in_check(board, Color.WHITE)
        assert not is_checkmate(board, Color.WHITE)

    def test_bare_kings(self) -> None:
        board = board_from_fen(BARE_KINGS)
        for side in (Color.WHITE, Color.BLACK):
            assert not is_checkmate(board, side)
            assert not is_stalemate(board, side)


class TestStalemate:
    def test_classic_corner_stalemate(self) -> None:
        board = board_from_fen(CLASSIC_STALEMATE)
        assert not is_in_check(board, Color.BLACK)
        assert not has_safe_move(board, Color.BLACK)
        assert is_stalemate(board, Color.BLACK)

    def test_same_position_other_side_is_not_stalemate(self) -> None:
        board = board_from_fen(CLASSIC_STALEMATE)
        assert not is_stalemate(board, Color.WHITE)

    def test_king_trapped(self) -> None:
        board = board_from_fen("7k/8/5KQ1/8/8/8/8/8")
        assert is_stalemate(board, Color.BLACK)

    def test_not_stalemate_when_has_moves(self) -> None:
        board = board_from_fen("7k/8/5K2/8/8/8/8/8")
        assert not is_stalemate(board, Color.BLACK)

    def test_no_pieces_at_all_is_stalemate(self) -> None:
        # Inconsistent boards are tolerated: nothing to move, nothing in check.
        assert is_stalemate(Board.empty(), Color.WHITE)
        assert not is_checkmate(Board.empty(), Color.WHITE)


@pytest.mark.parametrize(
    "fen",
    [FOOLS_MATE, CLASSIC_STALEMATE, QUEEN_FILE_MATE, BARE_KINGS, PINNED_ROOK],
)
@pytest.mark.parametrize("side", [Color.WHITE, Color.BLACK])
def test_terminal_states_exclude_each_other(fen: str, side: Color) -> None:
    board = board_from_fen(fen)
    in_check = is_in_check(board, side)
    if not in_check:
        assert not is_checkmate(board, side)
    else:
        assert not is_stalemate(board, side)
    assert not (is_checkmate(board, side) and is_stalemate(board, side))


class TestClassify:
    def test_ongoing(self) -> None:
        assert classify(Board.initial(), Color.WHITE) == PositionStatus.ONGOING

    def test_checkmate(self) -> None:
        board = board_from_fen(FOOLS_MATE)
        assert classify(board, Color.WHITE) == PositionStatus.CHECKMATE

    def test_stalemate(self) -> None:
        board = board_from_fen(CLASSIC_STALEMATE)
        assert classify(board, Color.BLACK) == PositionStatus.STALEMATE

    def test_check_but_not_mate_is_ongoing(self) -> None:
        board = Board.empty().with_piece(E1, Piece(Color.WHITE, PieceType.KING))
        board = board.with_piece(Square(0, 4), Piece(Color.BLACK, PieceType.ROOK))
        assert is_in_check(board, Color.WHITE)
        assert classify(board, Color.WHITE) == PositionStatus.ONGOING
