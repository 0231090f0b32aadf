"""Move value objects."""

from __future__ import annotations

from dataclasses import dataclass

from royalchess.core.piece import Piece
from royalchess.core.types import Square, square_name


@dataclass(frozen=True, slots=True)
class Move:
    """A from/to pair."""

    from_sq: Square
    to_sq: Square

    def __str__(self) -> str:
        return f"{square_name(self.from_sq)}{square_name(self.to_sq)}"


@dataclass(frozen=True, slots=True)
class MoveRecord:
    """A played move as kept in the game history."""

    from_sq: Square
    to_sq: Square
    piece: Piece
    captured: Piece | None = None

    @property
    def move(self) -> Move:
        return Move(self.from_sq, self.to_sq)

    @property
    def was_capture(self) -> bool:
        return self.captured is not None

    def to_dict(self) -> dict[str, object]:
        return {
            "from": {"row": self.from_sq.row, "col": self.from_sq.col},
            "to": {"row": self.to_sq.row, "col": self.to_sq.col},
            "piece": self.piece.to_dict(),
            "capturedPiece": self.captured.to_dict() if self.captured else None,
        }
