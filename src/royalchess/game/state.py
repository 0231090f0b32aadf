"""Game state — side to move, captured pieces, status and move history."""

from __future__ import annotations

from dataclasses import dataclass, field

from royalchess.config import RulesSettings
from royalchess.core.board import Board
from royalchess.core.enums import Color, GameStatus, MoveRejection
from royalchess.core.move import MoveRecord
from royalchess.core.move_generator import MoveGenerator
from royalchess.core.piece import Piece
from royalchess.core.rules import Rules
from royalchess.core.transition import CapturedPieces, MoveResult, apply_move
from royalchess.core.types import Square, in_bounds
from royalchess.game.interfaces import Snapshot

GAME_MODE_TWO_PLAYER = "two-player"


@dataclass(frozen=True, slots=True)
class _Undo:
    """Everything needed to step back over one move."""

    board: Board
    side_to_move: Color
    captured: CapturedPieces
    status: GameStatus
    recent_capture: Piece | None


@dataclass
class GameState:
    """Manages a single game: board, turn, captures, status and history.

    This is a pure data/logic class — no threading, no UI, no I/O.
    """

    settings: RulesSettings = field(default_factory=RulesSettings)
    board: Board = field(init=False)
    side_to_move: Color = field(default=Color.WHITE, init=False)
    captured: CapturedPieces = field(default_factory=CapturedPieces, init=False)
    status: GameStatus = field(default=GameStatus.IN_PROGRESS, init=False)
    move_history: list[MoveRecord] = field(default_factory=list, init=False)
    recent_capture: Piece | None = field(default=None, init=False)
    game_mode: str = field(default=GAME_MODE_TWO_PLAYER, init=False)
    selected_square: Square | None = field(default=None, init=False)
    valid_moves: list[Square] = field(default_factory=list, init=False)
    _undo_stack: list[_Undo] = field(default_factory=list, init=False, repr=False)

    def __post_init__(self) -> None:
        self.setup()

    # ── Initialisation ───────────────────────────────────────────────────

    def setup(self, board: Board | None = None, side_to_move: Color = Color.WHITE) -> None:
        """Initialise (or reset) the game, by default to the starting position."""
        self.board = board if board is not None else Board.initial()
        self.side_to_move = side_to_move
        self.captured = CapturedPieces()
        self.move_history.clear()
        self.recent_capture = None
        self._undo_stack.clear()
        self.clear_selection()
        self.status = Rules.status(self.board, self.side_to_move, self.settings)

    # ── Move application ─────────────────────────────────────────────────

    def apply_move(self, from_sq: tuple[int, int], to_sq: tuple[int, int]) -> MoveResult:
        """Play a move for the side to move.

        Rejected moves (including any move after checkmate or stalemate)
        leave the state untouched.
        """
        if self.status.is_terminal:
            return MoveResult.rejected(MoveRejection.GAME_OVER)

        result = apply_move(
            self.board,
            from_sq,
            to_sq,
            self.side_to_move,
            self.captured,
            self.settings,
        )
        if not result.accepted or result.board is None:
            return result

        piece = self.board[from_sq]
        assert piece is not None
        self._undo_stack.append(
            _Undo(
                board=self.board,
                side_to_move=self.side_to_move,
                captured=self.captured,
                status=self.status,
                recent_capture=self.recent_capture,
            )
        )
        self.move_history.append(
            MoveRecord(Square(*from_sq), Square(*to_sq), piece, result.captured_piece)
        )

        self.board = result.board
        self.captured = result.captured
        self.recent_capture = result.captured_piece
        self.side_to_move = self.side_to_move.opposite
        self.status = Rules.status(self.board, self.side_to_move, self.settings)
        self.clear_selection()
        return result

    def undo_last_move(self) -> MoveRecord | None:
        """Undo the last move. Returns its record, or None if there is none."""
        if not self.move_history:
            return None

        record = self.move_history.pop()
        undo = self._undo_stack.pop()
        self.board = undo.board
        self.side_to_move = undo.side_to_move
        self.captured = undo.captured
        self.status = undo.status
        self.recent_capture = undo.recent_capture
        self.clear_selection()
        return record

    # ── Query helpers ────────────────────────────────────────────────────

    @property
    def is_check(self) -> bool:
        return self.status in (GameStatus.CHECK, GameStatus.CHECKMATE)

    @property
    def is_checkmate(self) -> bool:
        return self.status == GameStatus.CHECKMATE

    @property
    def is_stalemate(self) -> bool:
        return self.status == GameStatus.STALEMATE

    @property
    def is_game_over(self) -> bool:
        return self.status.is_terminal

    @property
    def winner(self) -> Color | None:
        """The side that delivered checkmate, if any."""
        if self.status == GameStatus.CHECKMATE:
            return self.side_to_move.opposite
        return None

    @property
    def ply_count(self) -> int:
        """Number of half-moves played."""
        return len(self.move_history)

    def legal_destinations(self, from_sq: tuple[int, int]) -> list[Square]:
        """Where the side to move may send the piece on *from_sq*."""
        if self.is_game_over or not in_bounds(from_sq):
            return []
        gen = MoveGenerator(self.board, self.settings)
        return gen.legal_destinations(from_sq, self.side_to_move)

    def select_square(self, sq: tuple[int, int]) -> list[Square]:
        """Select a piece of the side to move and cache where it may go.

        Anything else clears the selection.
        """
        piece = self.board[sq] if in_bounds(sq) else None
        if piece is None or piece.color != self.side_to_move or self.is_game_over:
            self.clear_selection()
            return []
        self.selected_square = Square(*sq)
        self.valid_moves = self.legal_destinations(sq)
        return list(self.valid_moves)

    def clear_selection(self) -> None:
        self.selected_square = None
        self.valid_moves = []

    # ── Serialisation ────────────────────────────────────────────────────

    def to_snapshot(self) -> Snapshot:
        """The full game as plain JSON-compatible data."""
        return {
            "gameMode": self.game_mode,
            "currentPlayer": self.side_to_move.value,
            "board": [
                [p.to_dict() if p is not None else None for p in row]
                for row in self.board.rows
            ],
            "selectedSquare": (
                _square_dict(self.selected_square)
                if self.selected_square is not None
                else None
            ),
            "validMoves": [_square_dict(s) for s in self.valid_moves],
            "capturedPieces": self.captured.to_dict(),
            "isCheck": self.is_check,
            "isCheckmate": self.is_checkmate,
            "isStalemate": self.is_stalemate,
            "moveHistory": [record.to_dict() for record in self.move_history],
            "recentCapture": (
                self.recent_capture.to_dict() if self.recent_capture is not None else None
            ),
        }


def _square_dict(sq: Square) -> dict[str, int]:
    return {"row": sq.row, "col": sq.col}
