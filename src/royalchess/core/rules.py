"""High-level chess rules: check, checkmate, stalemate."""

from __future__ import annotations

from royalchess.config import RulesSettings
from royalchess.core.board import Board
from royalchess.core.enums import Color, GameStatus
from royalchess.core.move_generator import MoveGenerator


class Rules:
    """Static rule-checker that operates on a :class:`Board` and a color.

    Checkmate and stalemate are only reported; refusing further moves is up
    to the caller.
    """

    @staticmethod
    def is_in_check(
        board: Board, color: Color, settings: RulesSettings | None = None
    ) -> bool:
        return MoveGenerator(board, settings).is_in_check(color)

    @staticmethod
    def has_any_legal_move(
        board: Board, color: Color, settings: RulesSettings | None = None
    ) -> bool:
        return MoveGenerator(board, settings).has_any_legal_move(color)

    @staticmethod
    def is_checkmate(
        board: Board, color: Color, settings: RulesSettings | None = None
    ) -> bool:
        if not Rules.is_in_check(board, color, settings):
            return False
        return not Rules.has_any_legal_move(board, color, settings)

    @staticmethod
    def is_stalemate(
        board: Board, color: Color, settings: RulesSettings | None = None
    ) -> bool:
        if Rules.is_in_check(board, color, settings):
            return False
        return not Rules.has_any_legal_move(board, color, settings)

    @staticmethod
    def status(
        board: Board, color: Color, settings: RulesSettings | None = None
    ) -> GameStatus:
        """Classify the position for *color* to move."""
        gen = MoveGenerator(board, settings)
        in_check = gen.is_in_check(color)
        if gen.has_any_legal_move(color):
            return GameStatus.CHECK if in_check else GameStatus.IN_PROGRESS
        return GameStatus.CHECKMATE if in_check else GameStatus.STALEMATE
