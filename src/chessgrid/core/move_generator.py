"""Pseudo-legal move generation.

Every generator is a pure function of ``(board, square, piece, en_passant)``
returning destination squares. Nothing here filters out moves that leave the
mover's own king attacked; see :mod:`chessgrid.core.rules` for that.
"""

from __future__ import annotations

from collections.abc import Callable

from chessgrid.core.board import Board
from chessgrid.core.enums import PieceType
from chessgrid.core.piece import Piece
from chessgrid.core.types import ALL_SQUARES, BOARD_SIZE, Square, in_bounds

KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

BISHOP_DIRS: tuple[tuple[int, int], ...] = ((1, 1), (1, -1), (-1, 1), (-1, -1))
ROOK_DIRS: tuple[tuple[int, int], ...] = ((0, 1), (0, -1), (1, 0), (-1, 0))
QUEEN_DIRS: tuple[tuple[int, int], ...] = ROOK_DIRS + BISHOP_DIRS

Generator = Callable[[Board, Square, Piece, Square | None], list[Square]]


# -- Precomputed lookup tables ---------------------------------------------


def _build_targets(
    offsets: tuple[tuple[int, int], ...],
) -> dict[Square, tuple[Square, ...]]:
    targets: dict[Square, tuple[Square, ...]] = {}
    for sq in ALL_SQUARES:
        targets[sq] = tuple(
            Square(sq.row + dr, sq.col + dc)
            for dr, dc in offsets
            if in_bounds(sq.row + dr, sq.col + dc)
        )
    return targets


def _build_rays(
    directions: tuple[tuple[int, int], ...],
) -> dict[Square, tuple[tuple[Square, ...], ...]]:
    rays_per_square: dict[Square, tuple[tuple[Square, ...], ...]] = {}
    for sq in ALL_SQUARES:
        square_rays: list[tuple[Square, ...]] = []
        for dr, dc in directions:
            row, col = sq.row + dr, sq.col + dc
            ray: list[Square] = []
            while in_bounds(row, col):
                ray.append(Square(row, col))
                row += dr
                col += dc
            square_rays.append(tuple(ray))
        rays_per_square[sq] = tuple(square_rays)
    return rays_per_square


_KNIGHT_TARGETS = _build_targets(KNIGHT_OFFSETS)
_KING_TARGETS = _build_targets(KING_OFFSETS)

_BISHOP_RAYS = _build_rays(BISHOP_DIRS)
_ROOK_RAYS = _build_rays(ROOK_DIRS)
_QUEEN_RAYS = _build_rays(QUEEN_DIRS)


# -- Piece-specific generators -------------------------------------------------


def _gen_pawn(
    board: Board, sq: Square, piece: Piece, en_passant: Square | None
) -> list[Square]:
    moves: list[Square] = []
    step = piece.color.forward
    forward_row = sq.row + step
    if not 0 <= forward_row < BOARD_SIZE:
        return moves

    one_step = Square(forward_row, sq.col)
    if board.is_empty(one_step):
        moves.append(one_step)
        if sq.row == piece.color.pawn_row:
            two_step = Square(sq.row + 2 * step, sq.col)
            if board.is_empty(two_step):
                moves.append(two_step)

    for d_col in (-1, 1):
        col = sq.col + d_col
        if not 0 <= col < BOARD_SIZE:
            continue
        cap_sq = Square(forward_row, col)
        target = board[cap_sq]
        if target is not None:
            if target.color != piece.color:
                moves.append(cap_sq)
        elif cap_sq == en_passant:
            moves.append(cap_sq)
    return moves


def _gen_stepper(
    targets: dict[Square, tuple[Square, ...]],
) -> Generator:
    def generate(
        board: Board, sq: Square, piece: Piece, en_passant: Square | None
    ) -> list[Square]:
        moves: list[Square] = []
        for to_sq in targets[sq]:
            target = board[to_sq]
            if target is None or target.color != piece.color:
                moves.append(to_sq)
        return moves

    return generate


def _gen_slider(
    rays: dict[Square, tuple[tuple[Square, ...], ...]],
) -> Generator:
    def generate(
        board: Board, sq: Square, piece: Piece, en_passant: Square | None
    ) -> list[Square]:
        moves: list[Square] = []
        for ray in rays[sq]:
            for to_sq in ray:
                target = board[to_sq]
                if target is None:
                    moves.append(to_sq)
                    continue
                if target.color != piece.color:
                    moves.append(to_sq)
                break
        return moves

    return generate


# King destinations never include castling.
_GENERATORS: dict[PieceType, Generator] = {
    PieceType.PAWN: _gen_pawn,
    PieceType.KNIGHT: _gen_stepper(_KNIGHT_TARGETS),
    PieceType.BISHOP: _gen_slider(_BISHOP_RAYS),
    PieceType.ROOK: _gen_slider(_ROOK_RAYS),
    PieceType.QUEEN: _gen_slider(_QUEEN_RAYS),
    PieceType.KING: _gen_stepper(_KING_TARGETS),
}


# -- Public API ---------------------------------------------------------------


def generate_moves(
    board: Board,
    from_sq: tuple[int, int],
    en_passant_target: tuple[int, int] | None = None,
) -> list[Square]:
    """Pseudo-legal destinations of the piece on *from_sq*.

    Returns an empty list for an empty or off-board source square.
    """
    sq = Square(*from_sq)
    piece = board.piece_at(sq.row, sq.col)
    if piece is None:
        return []
    ep = Square(*en_passant_target) if en_passant_target is not None else None
    return _GENERATORS[piece.piece_type](board, sq, piece, ep)


def is_valid_move(
    board: Board,
    from_sq: tuple[int, int],
    to_sq: tuple[int, int],
    en_passant_target: tuple[int, int] | None = None,
) -> bool:
    """Whether *to_sq* is a pseudo-legal destination of the piece on *from_sq*.

    This does not check whether the move leaves the mover's own king in
    check; use :func:`chessgrid.core.rules.is_move_safe` for that.
    """
    piece = board.piece_at(*from_sq)
    if piece is None:
        return False
    target = board.piece_at(*to_sq)
    if target is not None and target.color == piece.color:
        return False
    return Square(*to_sq) in generate_moves(board, from_sq, en_passant_target)
