"""Board - immutable piece placement on an 8x8 grid."""

from __future__ import annotations

from collections.abc import Iterator, Mapping

from royalchess.core.enums import Color, PieceType
from royalchess.core.piece import Piece
from royalchess.core.types import BOARD_SIZE, Square

Cell = Piece | None
Grid = tuple[tuple[Cell, ...], ...]

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

_EMPTY_ROW: tuple[Cell, ...] = (None,) * BOARD_SIZE


def _sign(n: int) -> int:
    return (n > 0) - (n < 0)


class Board:
    """Immutable 8x8 grid of ``Piece | None`` addressed by (row, col).

    Every "mutation" returns a new board; the receiver is left untouched.
    """

    __slots__ = ("_rows",)

    def __init__(self, rows: Grid | None = None) -> None:
        if rows is None:
            rows = (_EMPTY_ROW,) * BOARD_SIZE
        if len(rows) != BOARD_SIZE or any(len(r) != BOARD_SIZE for r in rows):
            raise ValueError("Board must be 8x8")
        self._rows: Grid = tuple(tuple(r) for r in rows)

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: tuple[int, int]) -> Cell:
        row, col = sq
        return self._rows[row][col]

    def is_empty(self, sq: tuple[int, int]) -> bool:
        return self[sq] is None

    @property
    def rows(self) -> Grid:
        return self._rows

    # -- Query helpers ------------------------------------------------------

    def occupied(self) -> Iterator[tuple[Square, Piece]]:
        """All (square, piece) pairs in row-major order."""
        for row, cells in enumerate(self._rows):
            for col, piece in enumerate(cells):
                if piece is not None:
                    yield Square(row, col), piece

    def pieces(self, color: Color) -> list[tuple[Square, Piece]]:
        """(square, piece) pairs for every piece of *color*."""
        return [(sq, p) for sq, p in self.occupied() if p.color == color]

    def king_square(self, color: Color) -> Square | None:
        """Square of *color*'s king, or None if it is missing."""
        for sq, piece in self.occupied():
            if piece.piece_type == PieceType.KING and piece.color == color:
                return sq
        return None

    def piece_count(self, color: Color | None = None) -> int:
        if color is None:
            return sum(1 for _ in self.occupied())
        return len(self.pieces(color))

    # -- Derivation ---------------------------------------------------------

    def replace(self, changes: Mapping[tuple[int, int], Cell]) -> Board:
        """New board with the given squares overwritten."""
        grid = [list(r) for r in self._rows]
        for (row, col), piece in changes.items():
            grid[row][col] = piece
        return Board(tuple(tuple(r) for r in grid))

    def move_piece(self, from_sq: tuple[int, int], to_sq: tuple[int, int]) -> Board:
        """New board with the piece on *from_sq* relocated to *to_sq*.

        Whatever stood on *to_sq* is dropped and the moved piece is flagged
        ``has_moved``. No legality checks.
        """
        piece = self[from_sq]
        if piece is None:
            raise ValueError(f"No piece on {from_sq}")
        return self.replace({from_sq: None, to_sq: piece.moved()})

    # -- Factories ----------------------------------------------------------

    @classmethod
    def empty(cls) -> Board:
        return cls()

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position: black on rows 0-1, white on rows 6-7."""
        grid: list[list[Cell]] = [[None] * BOARD_SIZE for _ in range(BOARD_SIZE)]
        for col in range(BOARD_SIZE):
            grid[1][col] = Piece(PieceType.PAWN, Color.BLACK)
            grid[6][col] = Piece(PieceType.PAWN, Color.WHITE)
        for col, pt in enumerate(_BACK_RANK):
            grid[0][col] = Piece(pt, Color.BLACK)
            grid[7][col] = Piece(pt, Color.WHITE)
        return cls(tuple(tuple(r) for r in grid))

    @classmethod
    def from_pieces(cls, placement: Mapping[tuple[int, int], Piece]) -> Board:
        return cls().replace(placement)

    @classmethod
    def from_diagram(cls, text: str) -> Board:
        """Parse eight rows of piece letters and dots, row 0 first.

        Whitespace inside a row is ignored, so ``"r . . . k . . ."`` and
        ``"r...k..."`` are equivalent.
        """
        lines = ["".join(line.split()) for line in text.strip().splitlines()]
        lines = [line for line in lines if line]
        if len(lines) != BOARD_SIZE:
            raise ValueError(f"Diagram must have 8 rows, got {len(lines)}")
        grid: list[tuple[Cell, ...]] = []
        for line in lines:
            if len(line) != BOARD_SIZE:
                raise ValueError(f"Diagram row must have 8 cells: {line!r}")
            grid.append(tuple(None if ch == "." else Piece.from_char(ch) for ch in line))
        return cls(tuple(grid))

    # -- Rendering ----------------------------------------------------------

    def diagram(self) -> str:
        """Plain diagram accepted by :meth:`from_diagram`."""
        return "\n".join(
            "".join(str(p) if p else "." for p in cells) for cells in self._rows
        )

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._rows == other._rows

    def __hash__(self) -> int:
        return hash(self._rows)

    def __repr__(self) -> str:
        rows: list[str] = []
        for row, cells in enumerate(self._rows):
            text = " ".join(str(p) if p else "." for p in cells)
            rows.append(f"{BOARD_SIZE - row} {text}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)


def is_path_clear(board: Board, from_sq: tuple[int, int], to_sq: tuple[int, int]) -> bool:
    """Whether every square strictly between two aligned squares is empty.

    Only meaningful for straight or diagonal lines; the step is the sign of
    each delta.
    """
    row_step = _sign(to_sq[0] - from_sq[0])
    col_step = _sign(to_sq[1] - from_sq[1])
    row, col = from_sq[0] + row_step, from_sq[1] + col_step
    while (row, col) != tuple(to_sq):
        if board[row, col] is not None:
            return False
        row += row_step
        col += col_step
    return True
