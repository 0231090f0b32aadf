"""Square type and coordinate helpers.

Board layout (row, col), as seen from white:
    row 0 = rank 8 (black back rank), row 7 = rank 1 (white back rank)
    col 0 = file a, col 7 = file h

    (0, 0) = a8, (0, 7) = h8
    (7, 0) = a1, (7, 4) = e1
"""

from __future__ import annotations

from typing import NamedTuple

BOARD_SIZE = 8


class Square(NamedTuple):
    """A (row, col) board coordinate."""

    row: int
    col: int

    def __str__(self) -> str:
        return square_name(self) if in_bounds(self) else f"({self.row}, {self.col})"


def in_bounds(sq: tuple[int, int]) -> bool:
    """Whether both coordinates lie in 0–7."""
    row, col = sq
    return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE


def square_name(sq: tuple[int, int]) -> str:
    """Algebraic name, e.g. (6, 4) → 'e2'."""
    row, col = sq
    return chr(ord("a") + col) + str(BOARD_SIZE - row)


def parse_square(name: str) -> Square:
    """Parse an algebraic square name, e.g. 'e4' → Square(4, 4)."""
    if len(name) != 2 or name[0] not in "abcdefgh" or name[1] not in "12345678":
        raise ValueError(f"Invalid square name: {name!r}")
    return Square(BOARD_SIZE - int(name[1]), ord(name[0]) - ord("a"))


def all_squares() -> list[Square]:
    """Every board square in row-major order."""
    return [Square(row, col) for row in range(BOARD_SIZE) for col in range(BOARD_SIZE)]
