"""Tests for MoveGenerator: movement patterns, legality and attack detection."""

from collections.abc import Callable

import pytest

from royalchess.config import RulesSettings
from royalchess.core.board import Board
from royalchess.core.enums import Color, MoveRejection
from royalchess.core.move_generator import (
    MoveGenerator,
    is_legal_move,
    is_square_attacked,
)
from royalchess.core.transition import apply_move
from royalchess.core.types import Square, parse_square

sq = parse_square


def perft(
    board: Board, color: Color, depth: int, settings: RulesSettings | None = None
) -> int:
    """Count leaf nodes at *depth*."""
    if depth == 0:
        return 1
    moves = MoveGenerator(board, settings).generate_legal_moves(color)
    if depth == 1:
        return len(moves)
    nodes = 0
    for move in moves:
        result = apply_move(board, move.from_sq, move.to_sq, color, settings=settings)
        assert result.board is not None
        nodes += perft(result.board, color.opposite, depth - 1, settings)
    return nodes


# ── Preconditions ────────────────────────────────────────────────────────────


class TestPreconditions:
    def test_out_of_bounds_destination(self, initial_board: Board) -> None:
        assert not is_legal_move(initial_board, (6, 0), (8, 0), Color.WHITE)

    def test_out_of_bounds_origin(self, initial_board: Board) -> None:
        assert not is_legal_move(initial_board, (-1, 0), (5, 0), Color.WHITE)

    def test_empty_origin(self, initial_board: Board) -> None:
        assert not is_legal_move(initial_board, sq("e4"), sq("e5"), Color.WHITE)

    def test_wrong_color_origin(self, initial_board: Board) -> None:
        assert not is_legal_move(initial_board, sq("e7"), sq("e5"), Color.WHITE)

    def test_no_self_capture(self, initial_board: Board) -> None:
        assert not is_legal_move(initial_board, sq("d1"), sq("d2"), Color.WHITE)

    def test_same_square(self, initial_board: Board) -> None:
        assert not is_legal_move(initial_board, sq("e1"), sq("e1"), Color.WHITE)

    def test_query_is_pure(self, initial_board: Board) -> None:
        first = is_legal_move(initial_board, sq("g1"), sq("f3"), Color.WHITE)
        second = is_legal_move(initial_board, sq("g1"), sq("f3"), Color.WHITE)
        assert first is second is True
        assert initial_board == Board.initial()


# ── Piece patterns ───────────────────────────────────────────────────────────


class TestPawn:
    def test_single_and_double_step(self, initial_board: Board) -> None:
        assert is_legal_move(initial_board, sq("e2"), sq("e3"), Color.WHITE)
        assert is_legal_move(initial_board, sq("e2"), sq("e4"), Color.WHITE)
        assert is_legal_move(initial_board, sq("d7"), sq("d5"), Color.BLACK)

    def test_no_triple_step_or_backwards(self, initial_board: Board) -> None:
        assert not is_legal_move(initial_board, sq("e2"), sq("e5"), Color.WHITE)
        board = initial_board.move_piece(sq("e2"), sq("e4"))
        assert not is_legal_move(board, sq("e4"), sq("e3"), Color.WHITE)

    def test_double_step_only_from_home_row(self, play: Callable[..., Board]) -> None:
        board = play(Board.initial(), "e2e3", "a7a6")
        assert not is_legal_move(board, sq("e3"), sq("e5"), Color.WHITE)

    def test_blocked_forward_but_can_capture_diagonally(self) -> None:
        board = Board.from_diagram(
            """
            .......k
            ........
            ........
            ...np...
            ....P...
            ........
            ........
            K.......
            """
        )
        assert not is_legal_move(board, sq("e4"), sq("e5"), Color.WHITE)
        assert is_legal_move(board, sq("e4"), sq("d5"), Color.WHITE)

    def test_diagonal_requires_a_target(self, initial_board: Board) -> None:
        assert not is_legal_move(initial_board, sq("e2"), sq("d3"), Color.WHITE)

    def test_double_step_over_piece_allowed_by_default(self) -> None:
        # Only the destination is checked for the two-square advance.
        board = Board.from_diagram(
            """
            ....k...
            ........
            ........
            ........
            ........
            ....n...
            ....P...
            ....K...
            """
        )
        assert is_legal_move(board, sq("e2"), sq("e4"), Color.WHITE)

    def test_double_step_over_piece_rejected_when_strict(self) -> None:
        board = Board.from_diagram(
            """
            ....k...
            ........
            ........
            ........
            ........
            ....n...
            ....P...
            ....K...
            """
        )
        strict = RulesSettings(strict_pawn_double_step=True)
        assert not is_legal_move(board, sq("e2"), sq("e4"), Color.WHITE, strict)
        assert not is_legal_move(board, sq("e2"), sq("e3"), Color.WHITE, strict)

    def test_strict_double_step_still_allowed_on_open_file(
        self, initial_board: Board
    ) -> None:
        strict = RulesSettings(strict_pawn_double_step=True)
        assert is_legal_move(initial_board, sq("e2"), sq("e4"), Color.WHITE, strict)


class TestSlidingPieces:
    def test_blocked_rook(self, initial_board: Board) -> None:
        assert not is_legal_move(initial_board, (7, 0), (5, 0), Color.WHITE)
        assert not is_legal_move(initial_board, (7, 0), (7, 3), Color.WHITE)

    def test_rook_open_lines(self) -> None:
        board = Board.from_diagram(
            """
            .......k
            ........
            ........
            ........
            ...R....
            ........
            ........
            K.......
            """
        )
        assert is_legal_move(board, sq("d4"), sq("d8"), Color.WHITE)
        assert is_legal_move(board, sq("d4"), sq("h4"), Color.WHITE)
        assert not is_legal_move(board, sq("d4"), sq("e5"), Color.WHITE)

    def test_bishop_diagonals(self) -> None:
        board = Board.from_diagram(
            """
            .......k
            ........
            ........
            ........
            ...B....
            ........
            .p......
            .......K
            """
        )
        assert is_legal_move(board, sq("d4"), sq("g7"), Color.WHITE)
        assert is_legal_move(board, sq("d4"), sq("b2"), Color.WHITE)
        assert not is_legal_move(board, sq("d4"), sq("a1"), Color.WHITE)
        assert not is_legal_move(board, sq("d4"), sq("d5"), Color.WHITE)

    def test_queen_combines_rook_and_bishop(self) -> None:
        board = Board.from_diagram(
            """
            .......k
            ........
            ........
            ........
            ...Q....
            ........
            ........
            K.......
            """
        )
        assert is_legal_move(board, sq("d4"), sq("d1"), Color.WHITE)
        assert is_legal_move(board, sq("d4"), sq("g7"), Color.WHITE)
        assert not is_legal_move(board, sq("d4"), sq("e6"), Color.WHITE)


class TestKingAndKnight:
    def test_knight_from_start(self, initial_board: Board) -> None:
        gen = MoveGenerator(initial_board)
        assert gen.legal_destinations(sq("b1"), Color.WHITE) == [sq("a3"), sq("c3")]

    def test_knight_jumps_over_pieces(self, initial_board: Board) -> None:
        assert is_legal_move(initial_board, sq("g8"), sq("f6"), Color.BLACK)

    def test_king_one_square(self) -> None:
        board = Board.from_diagram(
            """
            .......k
            ........
            ........
            ........
            ...K....
            ........
            ........
            ........
            """
        )
        dests = MoveGenerator(board).legal_destinations(sq("d4"), Color.WHITE)
        assert len(dests) == 8
        assert not is_legal_move(board, sq("d4"), sq("d6"), Color.WHITE)


# ── Self-check ───────────────────────────────────────────────────────────────


class TestSelfCheck:
    PINNED = """
        ....r..k
        ........
        ........
        ........
        ........
        ........
        ....R...
        ....K...
    """

    def test_pinned_rook_cannot_leave_file(self) -> None:
        gen = MoveGenerator(Board.from_diagram(self.PINNED))
        assert gen.validate(sq("e2"), sq("d2"), Color.WHITE) == MoveRejection.KING_IN_CHECK
        assert gen.validate(sq("e2"), sq("e5"), Color.WHITE) is None
        assert gen.validate(sq("e2"), sq("e8"), Color.WHITE) is None

    def test_malformed_requests_are_invalid(self) -> None:
        gen = MoveGenerator(Board.from_diagram(self.PINNED))
        assert gen.validate(sq("e2"), sq("f3"), Color.WHITE) == MoveRejection.INVALID_MOVE
        assert gen.validate(sq("e8"), sq("e7"), Color.WHITE) == MoveRejection.INVALID_MOVE

    def test_king_cannot_step_into_attack(self) -> None:
        board = Board.from_diagram(
            """
            ...r...k
            ........
            ........
            ........
            ........
            ........
            ........
            ....K...
            """
        )
        gen = MoveGenerator(board)
        assert gen.validate(sq("e1"), sq("d1"), Color.WHITE) == MoveRejection.KING_IN_CHECK
        assert gen.validate(sq("e1"), sq("f1"), Color.WHITE) is None

    def test_legal_moves_never_leave_king_attacked(self, play: Callable[..., Board]) -> None:
        board = play(Board.initial(), "e2e4", "e7e5", "d1h5", "b8c6")
        gen = MoveGenerator(board)
        for move in gen.generate_legal_moves(Color.WHITE):
            after = board.move_piece(move.from_sq, move.to_sq)
            assert not MoveGenerator(after).is_in_check(Color.WHITE)


# ── Attack oracle ────────────────────────────────────────────────────────────


class TestAttacks:
    def test_knight_attacks(self, initial_board: Board) -> None:
        assert is_square_attacked(initial_board, sq("f3"), Color.WHITE)
        assert is_square_attacked(initial_board, sq("f6"), Color.BLACK)

    def test_pawn_diagonal_needs_an_occupied_square(self) -> None:
        board = Board.from_diagram(
            """
            .......k
            ........
            ........
            ........
            ....P...
            ........
            ........
            K.......
            """
        )
        assert not is_square_attacked(board, sq("d5"), Color.WHITE)
        occupied = board.replace({sq("d5"): board[sq("h8")]})
        assert is_square_attacked(occupied, sq("d5"), Color.WHITE)

    def test_pawn_push_square_counts_as_reachable(self) -> None:
        # Attack detection reuses the movement patterns, forward pushes included.
        board = Board.from_diagram(
            """
            .......k
            ........
            ........
            ........
            ....P...
            ........
            ........
            K.......
            """
        )
        assert is_square_attacked(board, sq("e5"), Color.WHITE)

    def test_far_square_not_attacked(self, initial_board: Board) -> None:
        assert not is_square_attacked(initial_board, sq("e5"), Color.WHITE)

    def test_attack_follows_double_step_setting(self) -> None:
        board = Board.from_diagram(
            """
            .......k
            ........
            ........
            ........
            ........
            ....n...
            ....P...
            K.......
            """
        )
        strict = RulesSettings(strict_pawn_double_step=True)
        assert is_square_attacked(board, sq("e4"), Color.WHITE)
        assert not is_square_attacked(board, sq("e4"), Color.WHITE, strict)

    def test_sliding_attack_blocked(self) -> None:
        board = Board.from_diagram(
            """
            r......k
            ........
            ........
            p.......
            ........
            ........
            ........
            K.......
            """
        )
        assert not is_square_attacked(board, sq("a1"), Color.BLACK)
        assert is_square_attacked(board, sq("a6"), Color.BLACK)

    def test_in_check_without_king(self) -> None:
        assert not MoveGenerator(Board.empty()).is_in_check(Color.WHITE)


# ── Enumeration ──────────────────────────────────────────────────────────────


class TestEnumeration:
    def test_twenty_moves_from_start(self, initial_board: Board) -> None:
        gen = MoveGenerator(initial_board)
        assert len(gen.generate_legal_moves(Color.WHITE)) == 20
        assert len(gen.generate_legal_moves(Color.BLACK)) == 20

    def test_has_any_legal_move(self, initial_board: Board) -> None:
        assert MoveGenerator(initial_board).has_any_legal_move(Color.WHITE)

    def test_no_moves_without_pieces(self) -> None:
        assert MoveGenerator(Board.empty()).generate_legal_moves(Color.WHITE) == []

    def test_moves_only_from_own_pieces(self, initial_board: Board) -> None:
        moves = MoveGenerator(initial_board).generate_legal_moves(Color.WHITE)
        assert all(initial_board[m.from_sq].color == Color.WHITE for m in moves)
        assert all(isinstance(m.to_sq, Square) for m in moves)

    def test_perft_depth_2(self, initial_board: Board) -> None:
        assert perft(initial_board, Color.WHITE, 2) == 400

    @pytest.mark.slow
    def test_perft_depth_3_strict(self, initial_board: Board) -> None:
        strict = RulesSettings(strict_pawn_double_step=True)
        assert perft(initial_board, Color.WHITE, 3, strict) == 8_902
