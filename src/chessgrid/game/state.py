"""Game state — one two-player game: seats, board, turn, status, history."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from chessgrid.core.board import Board
from chessgrid.core.enums import Color, GameResult, PieceType
from chessgrid.core.move import Move
from chessgrid.core.notation import square_to_notation
from chessgrid.core.rules import is_checkmate, is_in_check, is_stalemate, safe_moves
from chessgrid.core.types import BOARD_SIZE, Square, in_bounds
from chessgrid.game.errors import GameNotJoinable, GameOver, IllegalMove, NotYourTurn
from chessgrid.game.settings import GameSettings

_LOGGER = logging.getLogger(__name__)

_LAST_ROWS = (0, BOARD_SIZE - 1)


class GameStatus(str, Enum):
    """Lifecycle of a game as stored in the ``game_status`` column."""

    WAITING = "waiting"
    ACTIVE = "active"
    CHECKMATE = "checkmate"
    STALEMATE = "stalemate"
    RESIGNED = "resigned"

    @property
    def is_finished(self) -> bool:
        return self in (GameStatus.CHECKMATE, GameStatus.STALEMATE, GameStatus.RESIGNED)


_WINNER_TOKENS: dict[GameResult, str | None] = {
    GameResult.IN_PROGRESS: None,
    GameResult.WHITE_WINS: "white",
    GameResult.BLACK_WINS: "black",
    GameResult.DRAW: "draw",
}
_RESULT_FROM_TOKEN: dict[str | None, GameResult] = {
    v: k for k, v in _WINNER_TOKENS.items()
}


@dataclass
class MoveRecord:
    """A single entry in the move history (one row of the ``moves`` table)."""

    player_name: str
    move: Move
    is_check: bool = False
    is_checkmate: bool = False

    @property
    def notation(self) -> str:
        return self.move.notation

    @property
    def from_square(self) -> str:
        return square_to_notation(self.move.from_sq)

    @property
    def to_square(self) -> str:
        return square_to_notation(self.move.to_sq)

    def to_dict(self) -> dict[str, Any]:
        piece = self.move.piece
        captured = self.move.captured
        return {
            "player_name": self.player_name,
            "move_notation": self.notation,
            "from_square": self.from_square,
            "to_square": self.to_square,
            "piece": str(piece.piece_type) if piece else None,
            "captured_piece": str(captured.piece_type) if captured else None,
            "is_check": self.is_check,
            "is_checkmate": self.is_checkmate,
        }


@dataclass
class GameState:
    """Seats, position and lifecycle of a single game.

    Check, checkmate and stalemate for the side to move are derived from the
    board on every access.
    """

    game_id: str
    white_player: str
    black_player: str | None = None
    board: Board = field(default_factory=Board.initial)
    side_to_move: Color = Color.WHITE
    status: GameStatus = GameStatus.WAITING
    result: GameResult = GameResult.IN_PROGRESS
    quit_by: str | None = None
    move_history: list[MoveRecord] = field(default_factory=list)
    settings: GameSettings = field(default_factory=GameSettings, repr=False, compare=False)

    # ── Seats ────────────────────────────────────────────────────────────

    def join(self, player_name: str) -> None:
        """Seat *player_name* as black and start the game."""
        if self.status != GameStatus.WAITING or self.black_player is not None:
            raise GameNotJoinable(f"Game {self.game_id} is not waiting for a player")
        if player_name == self.white_player:
            raise GameNotJoinable("Cannot join your own game")
        self.black_player = player_name
        self.status = GameStatus.ACTIVE
        _LOGGER.info("Game %s: %s joined as black", self.game_id, player_name)

    def player_color(self, player_name: str) -> Color | None:
        """Seat of *player_name*, or None for a spectator."""
        if player_name == self.white_player:
            return Color.WHITE
        if self.black_player is not None and player_name == self.black_player:
            return Color.BLACK
        return None

    def view_color(self, player_name: str) -> Color:
        """Orientation for *player_name*; spectators watch from white."""
        color = self.player_color(player_name)
        return Color.WHITE if color is None else color

    def player_name(self, color: Color) -> str | None:
        return self.white_player if color == Color.WHITE else self.black_player

    # ── Derived state ────────────────────────────────────────────────────

    @property
    def is_active(self) -> bool:
        return self.status == GameStatus.ACTIVE

    @property
    def is_game_over(self) -> bool:
        return self.status.is_finished

    @property
    def is_check(self) -> bool:
        return is_in_check(self.board, self.side_to_move)

    @property
    def is_checkmate(self) -> bool:
        return is_checkmate(self.board, self.side_to_move)

    @property
    def is_stalemate(self) -> bool:
        return is_stalemate(self.board, self.side_to_move)

    @property
    def ply_count(self) -> int:
        """Number of half-moves played."""
        return len(self.move_history)

    def legal_destinations(self, from_sq: tuple[int, int]) -> list[Square]:
        """Safe destinations for a piece of the side to move; else empty."""
        piece = self.board.piece_at(*from_sq)
        if piece is None or piece.color != self.side_to_move:
            return []
        return safe_moves(self.board, from_sq, self.side_to_move)

    # ── Move application ─────────────────────────────────────────────────

    def apply_move(
        self,
        player_name: str,
        from_sq: tuple[int, int],
        to_sq: tuple[int, int],
    ) -> MoveRecord:
        """Play a move for the side to move and return the history record.

        Caller is responsible for the legality check; only the presence of a
        piece of the side to move is verified here.
        """
        if not self.is_active:
            raise GameOver(f"Game {self.game_id} is not in progress")
        if not (in_bounds(*from_sq) and in_bounds(*to_sq)):
            raise IllegalMove(f"Square off the board: {from_sq!r} -> {to_sq!r}")
        from_sq, to_sq = Square(*from_sq), Square(*to_sq)
        piece = self.board[from_sq]
        if piece is None or piece.color != self.side_to_move:
            raise IllegalMove(
                f"No {self.side_to_move} piece on {square_to_notation(from_sq)}"
            )

        captured = self.board[to_sq]
        board = self.board.relocate(from_sq, to_sq)
        promotion: PieceType | None = None
        if piece.piece_type == PieceType.PAWN and to_sq.row in _LAST_ROWS:
            promotion = self.settings.promotion_piece
            board = board.with_piece(to_sq, piece.promoted(promotion))

        mover = self.side_to_move
        self.board = board
        self.side_to_move = mover.opposite

        gives_check = is_in_check(board, self.side_to_move)
        mate = is_checkmate(board, self.side_to_move)
        stale = is_stalemate(board, self.side_to_move)

        record = MoveRecord(
            player_name=player_name,
            move=Move(from_sq, to_sq, piece=piece, captured=captured, promotion=promotion),
            is_check=gives_check,
            is_checkmate=mate,
        )
        self.move_history.append(record)
        _LOGGER.debug("Game %s: %s played %s", self.game_id, player_name, record.notation)

        if mate:
            self._finish(GameStatus.CHECKMATE, GameResult.win_for(mover))
        elif stale:
            self._finish(GameStatus.STALEMATE, GameResult.DRAW)
        return record

    # ── Resignation ──────────────────────────────────────────────────────

    def resign(self, player_name: str) -> None:
        """*player_name* quits; the opponent wins."""
        if not self.is_active:
            raise GameOver(f"Game {self.game_id} is not in progress")
        color = self.player_color(player_name)
        if color is None:
            raise NotYourTurn(f"{player_name!r} is not playing in game {self.game_id}")
        self.quit_by = player_name
        self._finish(GameStatus.RESIGNED, GameResult.win_for(color.opposite))

    def _finish(self, status: GameStatus, result: GameResult) -> None:
        self.status = status
        self.result = result
        _LOGGER.info("Game %s over: %s (%s)", self.game_id, status.value, result.name)

    # ── Storage ──────────────────────────────────────────────────────────

    def to_dict(self) -> dict[str, Any]:
        """Row of the ``games`` table; move history is stored separately."""
        return {
            "id": self.game_id,
            "white_player_name": self.white_player,
            "black_player_name": self.black_player,
            "current_turn": str(self.side_to_move),
            "board_state": self.board.to_state(),
            "game_status": self.status.value,
            "winner": _WINNER_TOKENS[self.result],
            "quit_by": self.quit_by,
        }

    @classmethod
    def from_dict(
        cls, data: dict[str, Any], settings: GameSettings | None = None
    ) -> GameState:
        try:
            result = _RESULT_FROM_TOKEN[data.get("winner")]
            return cls(
                game_id=str(data["id"]),
                white_player=data["white_player_name"],
                black_player=data.get("black_player_name"),
                board=Board.from_state(data["board_state"]),
                side_to_move=Color.from_name(data.get("current_turn", "white")),
                status=GameStatus(data.get("game_status", GameStatus.WAITING.value)),
                result=result,
                quit_by=data.get("quit_by"),
                settings=settings or GameSettings(),
            )
        except (KeyError, TypeError, AttributeError):
            raise ValueError(f"Invalid game record: {data!r}") from None
