"""Move legality, legal move enumeration and attack detection."""

from __future__ import annotations

from collections.abc import Callable

from royalchess.config import DEFAULT_SETTINGS, RulesSettings
from royalchess.core.board import Board, is_path_clear
from royalchess.core.enums import Color, MoveRejection, PieceType
from royalchess.core.move import Move
from royalchess.core.piece import Piece
from royalchess.core.types import Square, all_squares, in_bounds

_ALL_SQUARES: tuple[Square, ...] = tuple(all_squares())


class MoveGenerator:
    """Answers legality and attack questions about a single :class:`Board`.

    The board is immutable, so self-check probes build a new board per
    candidate move instead of make/unmake.
    """

    __slots__ = ("_board", "_settings")

    def __init__(self, board: Board, settings: RulesSettings | None = None) -> None:
        self._board = board
        self._settings = settings or DEFAULT_SETTINGS

    @property
    def board(self) -> Board:
        return self._board

    # -- Public API ---------------------------------------------------------

    def validate(
        self, from_sq: tuple[int, int], to_sq: tuple[int, int], color: Color
    ) -> MoveRejection | None:
        """Why *color* may not play *from_sq* → *to_sq*, or None if legal."""
        if not in_bounds(from_sq) or not in_bounds(to_sq):
            return MoveRejection.INVALID_MOVE

        piece = self._board[from_sq]
        if piece is None or piece.color != color:
            return MoveRejection.INVALID_MOVE

        target = self._board[to_sq]
        if target is not None and target.color == color:
            return MoveRejection.INVALID_MOVE

        if not self.is_pattern_move(from_sq, to_sq):
            return MoveRejection.INVALID_MOVE

        after = MoveGenerator(self._board.move_piece(from_sq, to_sq), self._settings)
        if after.is_in_check(color):
            return MoveRejection.KING_IN_CHECK
        return None

    def is_legal_move(
        self, from_sq: tuple[int, int], to_sq: tuple[int, int], color: Color
    ) -> bool:
        return self.validate(from_sq, to_sq, color) is None

    def legal_destinations(self, from_sq: tuple[int, int], color: Color) -> list[Square]:
        """Squares the piece on *from_sq* may legally move to."""
        return [to_sq for to_sq in _ALL_SQUARES if self.is_legal_move(from_sq, to_sq, color)]

    def generate_legal_moves(self, color: Color) -> list[Move]:
        """All legal moves for *color*, by exhaustive from/to enumeration."""
        moves: list[Move] = []
        for from_sq, _piece in self._board.pieces(color):
            for to_sq in _ALL_SQUARES:
                if self.is_legal_move(from_sq, to_sq, color):
                    moves.append(Move(from_sq, to_sq))
        return moves

    def has_any_legal_move(self, color: Color) -> bool:
        for from_sq, _piece in self._board.pieces(color):
            for to_sq in _ALL_SQUARES:
                if self.is_legal_move(from_sq, to_sq, color):
                    return True
        return False

    # -- Attack detection (public) -----------------------------------------

    def is_in_check(self, color: Color) -> bool:
        """Is *color*'s king attacked by the opponent?  False if no king."""
        king_sq = self._board.king_square(color)
        if king_sq is None:
            return False
        return self.is_square_attacked(king_sq, color.opposite)

    def is_square_attacked(self, sq: tuple[int, int], by_color: Color) -> bool:
        """Is *sq* a geometric destination of any piece of *by_color*?

        Pattern and path only: never consults full legality.
        """
        for from_sq, _piece in self._board.pieces(by_color):
            if from_sq != sq and self.is_pattern_move(from_sq, sq):
                return True
        return False

    # -- Movement patterns --------------------------------------------------

    def is_pattern_move(self, from_sq: tuple[int, int], to_sq: tuple[int, int]) -> bool:
        """Whether the piece on *from_sq* can geometrically reach *to_sq*."""
        piece = self._board[from_sq]
        if piece is None:
            return False
        dr = to_sq[0] - from_sq[0]
        dc = to_sq[1] - from_sq[1]
        return _PATTERNS[piece.piece_type](self, piece, from_sq, to_sq, dr, dc)

    def _pawn(
        self,
        piece: Piece,
        from_sq: tuple[int, int],
        to_sq: tuple[int, int],
        dr: int,
        dc: int,
    ) -> bool:
        direction = piece.color.pawn_direction
        target = self._board[to_sq]

        if dc == 0:
            if target is not None:
                return False
            if dr == direction:
                return True
            if from_sq[0] == piece.color.pawn_home_row and dr == 2 * direction:
                if self._settings.strict_pawn_double_step:
                    return self._board.is_empty((from_sq[0] + direction, from_sq[1]))
                return True
            return False

        if abs(dc) == 1 and dr == direction:
            return target is not None
        return False

    def _rook(
        self,
        piece: Piece,
        from_sq: tuple[int, int],
        to_sq: tuple[int, int],
        dr: int,
        dc: int,
    ) -> bool:
        return (dr == 0) != (dc == 0) and is_path_clear(self._board, from_sq, to_sq)

    def _bishop(
        self,
        piece: Piece,
        from_sq: tuple[int, int],
        to_sq: tuple[int, int],
        dr: int,
        dc: int,
    ) -> bool:
        return dr != 0 and abs(dr) == abs(dc) and is_path_clear(self._board, from_sq, to_sq)

    def _queen(
        self,
        piece: Piece,
        from_sq: tuple[int, int],
        to_sq: tuple[int, int],
        dr: int,
        dc: int,
    ) -> bool:
        return self._rook(piece, from_sq, to_sq, dr, dc) or self._bishop(
            piece, from_sq, to_sq, dr, dc
        )

    def _king(
        self,
        piece: Piece,
        from_sq: tuple[int, int],
        to_sq: tuple[int, int],
        dr: int,
        dc: int,
    ) -> bool:
        return abs(dr) <= 1 and abs(dc) <= 1

    def _knight(
        self,
        piece: Piece,
        from_sq: tuple[int, int],
        to_sq: tuple[int, int],
        dr: int,
        dc: int,
    ) -> bool:
        return {abs(dr), abs(dc)} == {1, 2}


_PatternCheck = Callable[
    [MoveGenerator, Piece, tuple[int, int], tuple[int, int], int, int], bool
]

# One entry per PieceType; the table must stay total.
_PATTERNS: dict[PieceType, _PatternCheck] = {
    PieceType.PAWN: MoveGenerator._pawn,
    PieceType.ROOK: MoveGenerator._rook,
    PieceType.BISHOP: MoveGenerator._bishop,
    PieceType.QUEEN: MoveGenerator._queen,
    PieceType.KING: MoveGenerator._king,
    PieceType.KNIGHT: MoveGenerator._knight,
}


# -- Functional boundary ----------------------------------------------------


def is_legal_move(
    board: Board,
    from_sq: tuple[int, int],
    to_sq: tuple[int, int],
    color: Color,
    settings: RulesSettings | None = None,
) -> bool:
    """Whether *color* may legally play *from_sq* → *to_sq* on *board*."""
    return MoveGenerator(board, settings).is_legal_move(from_sq, to_sq, color)


def is_square_attacked(
    board: Board,
    sq: tuple[int, int],
    by_color: Color,
    settings: RulesSettings | None = None,
) -> bool:
    """Whether any piece of *by_color* attacks *sq* on *board*."""
    return MoveGenerator(board, settings).is_square_attacked(sq, by_color)
