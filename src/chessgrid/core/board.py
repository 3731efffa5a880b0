"""Board - immutable snapshot of piece placement on an 8x8 grid."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from typing import Any

from chessgrid.core.enums import Color, PieceType
from chessgrid.core.piece import Piece
from chessgrid.core.types import ALL_SQUARES, BOARD_SIZE, Square, in_bounds

Grid = Sequence[Sequence[Piece | None]]

_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


class Board:
    """Value snapshot of the position, indexed ``[row][col]``.

    Every "mutation" returns a new board; the engine hands boards around
    freely without defensive copies.
    """

    __slots__ = ("_rows",)

    def __init__(self, grid: Grid | None = None) -> None:
        if grid is None:
            rows: tuple[tuple[Piece | None, ...], ...] = tuple(
                (None,) * BOARD_SIZE for _ in range(BOARD_SIZE)
            )
        else:
            if len(grid) != BOARD_SIZE or any(len(r) != BOARD_SIZE for r in grid):
                raise ValueError("Board grid must be 8x8")
            rows = tuple(tuple(r) for r in grid)
        self._rows = rows

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: tuple[int, int]) -> Piece | None:
        return self._rows[sq[0]][sq[1]]

    def piece_at(self, row: int, col: int) -> Piece | None:
        """Piece on ``(row, col)``; off-board coordinates read as empty."""
        if not in_bounds(row, col):
            return None
        return self._rows[row][col]

    def is_empty(self, sq: tuple[int, int]) -> bool:
        return self._rows[sq[0]][sq[1]] is None

    @property
    def rows(self) -> tuple[tuple[Piece | None, ...], ...]:
        return self._rows

    # -- Query helpers ------------------------------------------------------

    def occupied(self) -> Iterator[tuple[Square, Piece]]:
        """``(square, piece)`` for every occupied square, row-major."""
        for sq in ALL_SQUARES:
            piece = self._rows[sq.row][sq.col]
            if piece is not None:
                yield sq, piece

    def pieces(self, color: Color) -> list[Square]:
        """All squares occupied by *color*."""
        return [sq for sq, piece in self.occupied() if piece.color == color]

    def king_square(self, color: Color) -> Square | None:
        """First square holding *color*'s king, or None if there is none."""
        for sq, piece in self.occupied():
            if piece.piece_type == PieceType.KING and piece.color == color:
                return sq
        return None

    # -- Derived boards -----------------------------------------------------

    def with_piece(self, sq: tuple[int, int], piece: Piece | None) -> Board:
        grid = [list(r) for r in self._rows]
        grid[sq[0]][sq[1]] = piece
        return Board(grid)

    def relocate(self, from_sq: tuple[int, int], to_sq: tuple[int, int]) -> Board:
        """Plain relocation: *to_sq* takes whatever stood on *from_sq*."""
        grid = [list(r) for r in self._rows]
        grid[to_sq[0]][to_sq[1]] = grid[from_sq[0]][from_sq[1]]
        grid[from_sq[0]][from_sq[1]] = None
        return Board(grid)

    # -- Conversion ---------------------------------------------------------

    @classmethod
    def from_grid(cls, grid: Grid) -> Board:
        return cls(grid)

    def to_grid(self) -> list[list[Piece | None]]:
        return [list(r) for r in self._rows]

    def to_state(self) -> list[list[dict[str, Any] | None]]:
        """JSON-ready grid as stored in the ``board_state`` column."""
        return [[p.to_dict() if p else None for p in r] for r in self._rows]

    @classmethod
    def from_state(cls, state: Sequence[Sequence[dict[str, Any] | None]]) -> Board:
        return cls([[Piece.from_dict(p) if p else None for p in r] for r in state])

    # -- Factory ------------------------------------------------------------

    @classmethod
    def empty(cls) -> Board:
        return cls()

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position (white on rows 6-7)."""
        grid: list[list[Piece | None]] = [[None] * BOARD_SIZE for _ in range(BOARD_SIZE)]
        for col, pt in enumerate(_BACK_RANK):
            grid[0][col] = Piece(Color.BLACK, pt)
            grid[1][col] = Piece(Color.BLACK, PieceType.PAWN)
            grid[6][col] = Piece(Color.WHITE, PieceType.PAWN)
            grid[7][col] = Piece(Color.WHITE, pt)
        return cls(grid)

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._rows == other._rows

    def __hash__(self) -> int:
        return hash(self._rows)

    def __repr__(self) -> str:
        lines: list[str] = []
        for row in range(BOARD_SIZE):
            cells = [str(p) if p else "." for p in self._rows[row]]
            lines.append(f"{BOARD_SIZE - row} {' '.join(cells)}")
        lines.append("  a b c d e f g h")
        return "\n".join(lines)
