"""Core enumerations for the chess domain."""

from __future__ import annotations

from enum import IntEnum, StrEnum


class Color(StrEnum):
    """Side color."""

    WHITE = "white"
    BLACK = "black"

    @property
    def opposite(self) -> Color:
        return Color.BLACK if self is Color.WHITE else Color.WHITE

    @property
    def pawn_direction(self) -> int:
        """Row step of a pawn advance: white moves toward row 0."""
        return -1 if self is Color.WHITE else 1

    @property
    def pawn_home_row(self) -> int:
        return 6 if self is Color.WHITE else 1

    @property
    def back_row(self) -> int:
        return 7 if self is Color.WHITE else 0


class PieceType(StrEnum):
    """The six chess piece kinds."""

    KING = "king"
    QUEEN = "queen"
    ROOK = "rook"
    BISHOP = "bishop"
    KNIGHT = "knight"
    PAWN = "pawn"


class GameStatus(IntEnum):
    """Classification of a position for the side to move."""

    IN_PROGRESS = 0
    CHECK = 1
    CHECKMATE = 2
    STALEMATE = 3

    @property
    def is_terminal(self) -> bool:
        return self in (GameStatus.CHECKMATE, GameStatus.STALEMATE)


class MoveRejection(StrEnum):
    """Reasons a proposed move is refused."""

    INVALID_MOVE = "Invalid move"
    KING_IN_CHECK = "Move would put king in check"
    GAME_OVER = "Game is over"
