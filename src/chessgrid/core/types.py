"""Square type and coordinate helpers.

Board layout (row-major, as the board is stored)::

    row 0 = rank 8:  a8=(0, 0) ... h8=(0, 7)
    ...
    row 7 = rank 1:  a1=(7, 0) ... h1=(7, 7)
"""

from __future__ import annotations

from typing import NamedTuple

BOARD_SIZE = 8


class Square(NamedTuple):
    """A ``(row, col)`` coordinate on the 8x8 grid."""

    row: int
    col: int

    def __str__(self) -> str:
        from chessgrid.core.notation import square_to_notation

        return square_to_notation(self)


def in_bounds(row: int, col: int) -> bool:
    """Whether ``(row, col)`` lies on the board."""
    return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE


ALL_SQUARES: tuple[Square, ...] = tuple(
    Square(row, col) for row in range(BOARD_SIZE) for col in range(BOARD_SIZE)
)


# ── Named square constants ──────────────────────────────────────────────────

A8, B8, C8, D8, E8, F8, G8, H8 = (Square(0, c) for c in range(BOARD_SIZE))
A7, B7, C7, D7, E7, F7, G7, H7 = (Square(1, c) for c in range(BOARD_SIZE))
A6, B6, C6, D6, E6, F6, G6, H6 = (Square(2, c) for c in range(BOARD_SIZE))
A5, B5, C5, D5, E5, F5, G5, H5 = (Square(3, c) for c in range(BOARD_SIZE))
A4, B4, C4, D4, E4, F4, G4, H4 = (Square(4, c) for c in range(BOARD_SIZE))
A3, B3, C3, D3, E3, F3, G3, H3 = (Square(5, c) for c in range(BOARD_SIZE))
A2, B2, C2, D2, E2, F2, G2, H2 = (Square(6, c) for c in range(BOARD_SIZE))
A1, B1, C1, D1, E1, F1, G1, H1 = (Square(7, c) for c in range(BOARD_SIZE))
