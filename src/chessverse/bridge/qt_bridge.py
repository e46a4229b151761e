"""Qt bridge exposing a GameController through signals and slots."""

from __future__ import annotations

import logging

from PyQt6.QtCore import QObject, pyqtSignal, pyqtSlot

from chessverse.core.enums import Color, GameEndReason, GameResult
from chessverse.core.notation import position_to_fen
from chessverse.core.types import is_valid_square, make_square
from chessverse.game.controller import GameController
from chessverse.game.interfaces import MoveResult
from chessverse.game.state import GameState, MoveRecord

_LOGGER = logging.getLogger(__name__)


class GameBridge(QObject):
    """Thread-affine adapter between a Qt front end and a :class:`GameController`.

    Board widgets and socket handlers call the slots; the bridge re-emits the
    controller's callbacks as signals so every view mirrors the same
    authoritative game.
    """

    move_applied = pyqtSignal(object)  # MoveRecord
    move_rejected = pyqtSignal(int, str)  # MoveError, message
    targets_ready = pyqtSignal(int, int, object)  # row, col, set[Square]
    game_over = pyqtSignal(int, int)  # GameResult, GameEndReason
    position_changed = pyqtSignal(str)  # FEN
    setup_failed = pyqtSignal(str)  # message

    __slots__ = ("_controller",)

    def __init__(self, controller: GameController | None = None) -> None:
        super().__init__()
        self._controller = controller or GameController()
        events = self._controller.events
        events.on_move.append(self._on_move)
        events.on_rejected.append(self._on_rejected)
        events.on_game_over.append(self._on_game_over)

    @property
    def controller(self) -> GameController:
        return self._controller

    # ── Slots ────────────────────────────────────────────────────────────

    @pyqtSlot(str)
    def new_game(self, fen: str = "") -> None:
        """Start a game from *fen* (empty string: standard start)."""
        try:
            self._controller.new_game(fen or None)
        except ValueError as exc:
            _LOGGER.warning("Refusing new game: %s", exc)
            self.setup_failed.emit(str(exc))
            return
        self._emit_position()

    @pyqtSlot(str)
    def submit_uci(self, text: str) -> None:
        """Apply a move given as UCI text (local click or remote message)."""
        self._controller.submit_uci(text)

    @pyqtSlot(int, int)
    def select_square(self, row: int, col: int) -> None:
        """Emit the legal destinations of the piece on (*row*, *col*)."""
        if not is_valid_square(row, col):
            self.targets_ready.emit(row, col, set())
            return
        targets = self._controller.select(make_square(row, col))
        self.targets_ready.emit(row, col, targets)

    @pyqtSlot(int)
    def resign(self, color: int) -> None:
        if color not in (Color.WHITE, Color.BLACK):
            _LOGGER.warning("Ignoring resignation for unknown color %r", color)
            return
        self._controller.resign(Color(color))

    @pyqtSlot()
    def claim_draw(self) -> None:
        state = self._controller.state
        self._controller.claim_draw(state.side_to_move)

    @pyqtSlot()
    def undo(self) -> None:
        if self._controller.undo_move():
            self._emit_position()

    # ── Controller callbacks ─────────────────────────────────────────────

    def _on_move(self, record: MoveRecord, _state: GameState) -> None:
        self.move_applied.emit(record)
        self.position_changed.emit(record.fen_after)

    def _on_rejected(self, result: MoveResult) -> None:
        error = int(result.error) if result.error is not None else 0
        self.move_rejected.emit(error, result.message)

    def _on_game_over(self, result: GameResult, reason: GameEndReason) -> None:
        self.game_over.emit(int(result), int(reason))

    def _emit_position(self) -> None:
        self.position_changed.emit(position_to_fen(self._controller.state.position))
