"""Qt bridge exposing a GameController to a Qt presentation layer."""

from __future__ import annotations

from PyQt6.QtCore import QObject, pyqtSignal, pyqtSlot

from royalchess.core.enums import MoveRejection
from royalchess.core.move import MoveRecord
from royalchess.game.controller import GameController
from royalchess.game.state import GameState


class GameBridge(QObject):
    """Re-emits controller callbacks as Qt signals on the owning thread."""

    move_applied = pyqtSignal(object)  # MoveRecord
    move_rejected = pyqtSignal(str)
    status_changed = pyqtSignal(object)  # GameStatus
    save_failed = pyqtSignal(str)

    def __init__(
        self,
        controller: GameController | None = None,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self._controller = controller or GameController()
        events = self._controller.events
        events.on_move.append(self._on_move)
        events.on_rejected.append(self._on_rejected)
        events.on_status_changed.append(self.status_changed.emit)
        events.on_save_failed.append(self.save_failed.emit)

    @property
    def controller(self) -> GameController:
        return self._controller

    @pyqtSlot(int, int, int, int, result=bool)
    def submit_move(
        self, from_row: int, from_col: int, to_row: int, to_col: int
    ) -> bool:
        """Submit a move; results arrive through the signals."""
        result = self._controller.submit_move((from_row, from_col), (to_row, to_col))
        return result.accepted

    @pyqtSlot()
    def new_game(self) -> None:
        self._controller.new_game()

    @pyqtSlot(result=bool)
    def undo_move(self) -> bool:
        return self._controller.undo_move()

    def _on_move(self, record: MoveRecord, _state: GameState) -> None:
        self.move_applied.emit(record)

    def _on_rejected(self, reason: MoveRejection) -> None:
        self.move_rejected.emit(reason.value)
