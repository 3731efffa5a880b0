"""Core enumerations for the chess domain."""

from __future__ import annotations

from enum import IntEnum


class Color(IntEnum):
    """Side color."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    @property
    def forward(self) -> int:
        """Row delta of a pawn step: white heads for row 0, black for row 7."""
        return -1 if self is Color.WHITE else 1

    @property
    def pawn_row(self) -> int:
        """Starting row of this side's pawns."""
        return 6 if self is Color.WHITE else 1

    @classmethod
    def from_name(cls, name: str) -> Color:
        try:
            return cls[name.upper()]
        except KeyError:
            raise ValueError(f"Invalid color: {name!r}") from None

    def __str__(self) -> str:
        return self.name.lower()


class PieceType(IntEnum):
    """Chess piece types ordered by conventional value."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6

    @classmethod
    def from_name(cls, name: str) -> PieceType:
        try:
            return cls[name.upper()]
        except KeyError:
            raise ValueError(f"Invalid piece type: {name!r}") from None

    def __str__(self) -> str:
        return self.name.lower()


class PositionStatus(IntEnum):
    """Classification of a position for the side to move."""

    ONGOING = 0
    CHECKMATE = 1
    STALEMATE = 2


class GameResult(IntEnum):
    """Outcome of a game."""

    IN_PROGRESS = 0
    WHITE_WINS = 1
    BLACK_WINS = 2
    DRAW = 3

    @classmethod
    def win_for(cls, color: Color) -> GameResult:
        return cls.WHITE_WINS if color == Color.WHITE else cls.BLACK_WINS

    @property
    def winner(self) -> Color | None:
        if self == GameResult.WHITE_WINS:
            return Color.WHITE
        if self == GameResult.BLACK_WINS:
            return Color.BLACK
        return None
