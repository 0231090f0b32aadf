"""Core domain layer — pure chess rules with zero external dependencies.

Quick start::

    from royalchess.core import Board, Color, Rules, apply_move, parse_square

    board = Board.initial()
    result = apply_move(board, parse_square("e2"), parse_square("e4"), Color.WHITE)
    if result.accepted:
        print(Rules.status(result.board, Color.BLACK))
"""

from royalchess.core.board import Board, is_path_clear
from royalchess.core.enums import Color, GameStatus, MoveRejection, PieceType
from royalchess.core.move import Move, MoveRecord
from royalchess.core.move_generator import MoveGenerator, is_legal_move, is_square_attacked
from royalchess.core.piece import Piece
from royalchess.core.rules import Rules
from royalchess.core.transition import CapturedPieces, MoveResult, apply_move
from royalchess.core.types import Square, in_bounds, parse_square, square_name

__all__ = [
    # Enums
    "Color",
    "GameStatus",
    "MoveRejection",
    "PieceType",
    # Types / helpers
    "Square",
    "in_bounds",
    "is_path_clear",
    "parse_square",
    "square_name",
    # Domain objects
    "Board",
    "CapturedPieces",
    "Move",
    "MoveGenerator",
    "MoveRecord",
    "MoveResult",
    "Piece",
    "Rules",
    # Functional boundary
    "apply_move",
    "is_legal_move",
    "is_square_attacked",
]
