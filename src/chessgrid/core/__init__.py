"""Core domain layer — pure chess rules with zero external dependencies.

Quick start::

    from chessgrid.core import Board, Color, notation_to_square, safe_moves

    board = Board.initial()
    e2 = notation_to_square("e2")
    for sq in safe_moves(board, e2, Color.WHITE):
        print(sq)
"""

from chessgrid.core.board import Board
from chessgrid.core.enums import Color, GameResult, PieceType, PositionStatus
from chessgrid.core.move import Move
from chessgrid.core.move_generator import generate_moves, is_valid_move
from chessgrid.core.notation import (
    STARTING_PLACEMENT,
    board_from_fen,
    board_to_fen,
    notation_to_square,
    square_to_notation,
)
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
from chessgrid.core.types import Square, in_bounds

__all__ = [
    # Enums
    "Color",
    "GameResult",
    "PieceType",
    "PositionStatus",
    # Types / helpers
    "Square",
    "in_bounds",
    # Domain objects
    "Board",
    "Move",
    "Piece",
    # Move generation
    "generate_moves",
    "is_valid_move",
    # Rules
    "classify",
    "has_safe_move",
    "is_checkmate",
    "is_in_check",
    "is_move_safe",
    "is_stalemate",
    "safe_moves",
    # Notation
    "STARTING_PLACEMENT",
    "board_from_fen",
    "board_to_fen",
    "notation_to_square",
    "square_to_notation",
]
