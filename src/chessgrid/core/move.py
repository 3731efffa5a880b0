"""Move value object."""

from __future__ import annotations

from dataclasses import dataclass

from chessgrid.core.enums import PieceType
from chessgrid.core.notation import square_to_notation
from chessgrid.core.piece import Piece
from chessgrid.core.types import Square


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable value object representing a single move.

    Generation and legality only look at ``from_sq`` / ``to_sq``; the other
    fields describe the move once it has been played.
    """

    from_sq: Square
    to_sq: Square
    piece: Piece | None = None
    captured: Piece | None = None
    is_en_passant: bool = False
    is_castling: bool = False
    promotion: PieceType | None = None

    # -- Display ---------------------------------------------------------------

    def __str__(self) -> str:
        return self.notation

    @property
    def notation(self) -> str:
        """Coordinate notation, e.g. ``e2-e4``."""
        return f"{square_to_notation(self.from_sq)}-{square_to_notation(self.to_sq)}"
