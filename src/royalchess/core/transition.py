"""Move application: board relocation plus the captured-piece ledger."""

from __future__ import annotations

from dataclasses import dataclass, field

from royalchess.config import RulesSettings
from royalchess.core.board import Board
from royalchess.core.enums import Color, MoveRejection
from royalchess.core.move_generator import MoveGenerator
from royalchess.core.piece import Piece


@dataclass(frozen=True, slots=True)
class CapturedPieces:
    """Pieces removed from the board, per color, in capture order."""

    white: tuple[Piece, ...] = ()
    black: tuple[Piece, ...] = ()

    def with_capture(self, piece: Piece) -> CapturedPieces:
        """New ledger with *piece* appended to its own color's list."""
        if piece.color == Color.WHITE:
            return CapturedPieces(self.white + (piece,), self.black)
        return CapturedPieces(self.white, self.black + (piece,))

    def of(self, color: Color) -> tuple[Piece, ...]:
        return self.white if color == Color.WHITE else self.black

    @property
    def total(self) -> int:
        return len(self.white) + len(self.black)

    def to_dict(self) -> dict[str, list[dict[str, object]]]:
        return {
            "white": [p.to_dict() for p in self.white],
            "black": [p.to_dict() for p in self.black],
        }


@dataclass(frozen=True, slots=True)
class MoveResult:
    """Outcome of :func:`apply_move`.

    Accepted results carry the new board and ledger; rejected ones carry
    only ``reason``.
    """

    accepted: bool
    board: Board | None = None
    captured_piece: Piece | None = None
    captured: CapturedPieces = field(default_factory=CapturedPieces)
    reason: MoveRejection | None = None

    @classmethod
    def rejected(cls, reason: MoveRejection) -> MoveResult:
        return cls(accepted=False, reason=reason)


def apply_move(
    board: Board,
    from_sq: tuple[int, int],
    to_sq: tuple[int, int],
    color: Color,
    captured: CapturedPieces | None = None,
    settings: RulesSettings | None = None,
) -> MoveResult:
    """Validate and play *from_sq* → *to_sq* for *color*.

    *board* and *captured* are never modified. The result does not say
    anything about check or mate; ask :class:`~royalchess.core.rules.Rules`.
    """
    rejection = MoveGenerator(board, settings).validate(from_sq, to_sq, color)
    if rejection is not None:
        return MoveResult.rejected(rejection)

    ledger = captured if captured is not None else CapturedPieces()
    taken = board[to_sq]
    if taken is not None:
        ledger = ledger.with_capture(taken)

    return MoveResult(
        accepted=True,
        board=board.move_piece(from_sq, to_sq),
        captured_piece=taken,
        captured=ledger,
    )
