"""Square names (``e4``) and FEN piece-placement parsing / serialisation."""

from __future__ import annotations

from chessgrid.core.board import Board
from chessgrid.core.piece import Piece
from chessgrid.core.types import BOARD_SIZE, Square, in_bounds

FILES = "abcdefgh"
STARTING_PLACEMENT = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR"


# -- Square names -------------------------------------------------------------


def square_to_notation(sq: tuple[int, int]) -> str:
    """Algebraic name, e.g. ``(6, 4)`` -> ``'e2'``."""
    row, col = sq
    if not in_bounds(row, col):
        raise ValueError(f"Square off the board: {sq!r}")
    return f"{FILES[col]}{BOARD_SIZE - row}"


def notation_to_square(name: str) -> Square:
    """Parse a square name, e.g. ``'e2'`` -> ``Square(6, 4)``."""
    if len(name) != 2 or name[0] not in FILES or name[1] not in "12345678":
        raise ValueError(f"Invalid square name: {name!r}")
    return Square(BOARD_SIZE - int(name[1]), FILES.index(name[0]))


# -- FEN placement ------------------------------------------------------------


def board_from_fen(fen: str) -> Board:
    """Build a board from a FEN string; only the placement field is read."""
    placement = fen.split()[0] if fen.strip() else ""
    ranks = placement.split("/")
    if len(ranks) != BOARD_SIZE:
        raise ValueError(f"Invalid FEN board (must contain 8 ranks): {fen!r}")

    grid: list[list[Piece | None]] = []
    for rank_text in ranks:
        row: list[Piece | None] = []
        for ch in rank_text:
            if ch.isdigit():
                step = int(ch)
                if not (1 <= step <= BOARD_SIZE):
                    raise ValueError(f"Invalid FEN digit {ch!r}: {fen!r}")
                row.extend([None] * step)
            else:
                row.append(Piece.from_char(ch))
            if len(row) > BOARD_SIZE:
                raise ValueError(f"Invalid FEN rank width: {fen!r}")
        if len(row) != BOARD_SIZE:
            raise ValueError(f"Invalid FEN rank width: {fen!r}")
        grid.append(row)
    return Board(grid)


def board_to_fen(board: Board) -> str:
    """Placement field of FEN for *board*."""
    ranks: list[str] = []
    for row in board.rows:
        text = ""
        empty = 0
        for piece in row:
            if piece is None:
                empty += 1
                continue
            if empty:
                text += str(empty)
                empty = 0
            text += str(piece)
        if empty:
            text += str(empty)
        ranks.append(text)
    return "/".join(ranks)
