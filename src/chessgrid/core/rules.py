"""High-level chess rules: check, move safety, checkmate and stalemate.

Every predicate rescans the whole board on each call; nothing is cached
between calls.
"""

from __future__ import annotations

from chessgrid.core.board import Board
from chessgrid.core.enums import Color, PositionStatus
from chessgrid.core.move_generator import generate_moves
from chessgrid.core.types import Square, in_bounds


def is_in_check(board: Board, side: Color) -> bool:
    """Is *side*'s king attacked by any opposing piece?

    A board without a king for *side* is never in check.
    """
    king_sq = board.king_square(side)
    if king_sq is None:
        return False
    for sq, piece in board.occupied():
        if piece.color == side:
            continue
        # Pawns cannot take a king en passant, so no target is passed.
        if king_sq in generate_moves(board, sq):
            return True
    return False


def is_move_safe(
    board: Board,
    from_sq: tuple[int, int],
    to_sq: tuple[int, int],
    side: Color,
) -> bool:
    """Would *side*'s king be out of check after relocating *from_sq* to *to_sq*?

    The hypothetical board is a plain relocation: no en-passant removal and
    no castling rook move.
    """
    if not (in_bounds(*from_sq) and in_bounds(*to_sq)):
        return False
    return not is_in_check(board.relocate(from_sq, to_sq), side)


def safe_moves(
    board: Board,
    from_sq: tuple[int, int],
    side: Color,
    en_passant_target: tuple[int, int] | None = None,
) -> list[Square]:
    """Pseudo-legal destinations of *from_sq* that keep *side*'s king safe."""
    return [
        to_sq
        for to_sq in generate_moves(board, from_sq, en_passant_target)
        if is_move_safe(board, from_sq, to_sq, side)
    ]


def has_safe_move(board: Board, side: Color) -> bool:
    """Does any piece of *side* have at least one safe destination?"""
    for sq, piece in board.occupied():
        if piece.color != side:
            continue
        for to_sq in generate_moves(board, sq):
            if is_move_safe(board, sq, to_sq, side):
                return True
    return False


def is_checkmate(board: Board, side: Color) -> bool:
    if not is_in_check(board, side):
        return False
    return not has_safe_move(board, side)


def is_stalemate(board: Board, side: Color) -> bool:
    if is_in_check(board, side):
        return False
    return not has_safe_move(board, side)


def classify(board: Board, side: Color) -> PositionStatus:
    """Checkmate, stalemate or ongoing for *side* to move."""
    if is_checkmate(board, side):
        return PositionStatus.CHECKMATE
    if is_stalemate(board, side):
        return PositionStatus.STALEMATE
    return PositionStatus.ONGOING
