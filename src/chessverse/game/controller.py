"""GameController: the single authoritative owner of a chess game.

Coordinates GameState, house-rule policies and listeners. Local clicks, moves
relayed from a remote peer and moves picked by an AI all come through
:meth:`GameController.submit_move`, so every source is validated the same way.
Emits events via simple callbacks so the UI / network layer / tests can
subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from chessverse.core.enums import Color, GameEndReason, GameResult
from chessverse.core.move import Move
from chessverse.core.types import Square
from chessverse.game.interfaces import (
    GamePhase,
    IGameController,
    MoveError,
    MoveResult,
)
from chessverse.game.policies import MovePolicy
from chessverse.game.settings import GameSettings
from chessverse.game.state import GameState, MoveRecord

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[MoveRecord, GameState], None]
RejectedCallback = Callable[[MoveResult], None]
GameOverCallback = Callable[[GameResult, GameEndReason], None]
PhaseCallback = Callable[[GamePhase], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_rejected: list[RejectedCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)
    on_phase_changed: list[PhaseCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class GameController(IGameController):
    """Orchestrates a full chess game: validates moves, applies house rules,
    switches turns, notifies listeners.

    Thread-safety: methods are designed to be called from a single thread.
    In a networked game exactly one party owns the controller and the others
    mirror what it emits.
    """

    __slots__ = ("_state", "_settings", "policies", "events")

    def __init__(
        self,
        settings: GameSettings | None = None,
        policies: list[MovePolicy] | None = None,
    ) -> None:
        self._settings = settings or GameSettings()
        self._state = GameState(self._settings)
        self._state.setup()
        self.policies: list[MovePolicy] = list(policies or [])
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def settings(self) -> GameSettings:
        return self._settings

    # ── IGameController impl ─────────────────────────────────────────────

    def new_game(self, fen: str | None = None) -> None:
        state = GameState(self._settings)
        state.setup(fen)
        self._state = state
        _LOGGER.info("New game from %s", state.start_fen)

        if state.is_game_over:
            self._emit_game_over()
        else:
            self._emit_phase(GamePhase.AWAITING_MOVE)

    def submit_move(self, move: Move, color: Color | None = None) -> MoveResult:
        checked = self._state.validate(move, color)
        if isinstance(checked, MoveResult):
            return self._reject(checked)

        for policy in self.policies:
            reason = policy(self._state, checked)
            if reason is not None:
                return self._reject(
                    MoveResult.rejected(MoveError.POLICY_REJECTED, reason)
                )

        record = self._state.apply_move(checked)
        self._emit_move(record)

        if self._state.is_game_over:
            self._emit_game_over()
        return MoveResult.accepted(record)

    def submit_uci(self, text: str, color: Color | None = None) -> MoveResult:
        """Submit a move given as UCI text, e.g. a message from a remote peer."""
        try:
            move = Move.from_uci(text)
        except ValueError as exc:
            _LOGGER.warning("Malformed move message %r: %s", text, exc)
            return self._reject(MoveResult.rejected(MoveError.INVALID_MOVE, str(exc)))
        return self.submit_move(move, color)

    def select(self, sq: Square) -> set[Square]:
        """Legal destinations for the piece on *sq* (empty if not selectable)."""
        return self._state.legal_targets(sq)

    def resign(self, color: Color) -> None:
        if self._state.is_game_over:
            return
        self._state.resign(color)
        self._emit_game_over()

    def claim_draw(self, color: Color) -> bool:
        if self._state.is_game_over:
            return False
        if color != self._state.side_to_move:
            return False
        if not self._state.claim_draw_by_rule():
            return False
        self._emit_game_over()
        return True

    def undo_move(self) -> bool:
        if self._state.is_game_over or not self._state.move_history:
            return False

        self._state.undo_last_move()
        self._emit_phase(GamePhase.AWAITING_MOVE)
        return True

    # ── Internal helpers ─────────────────────────────────────────────────

    def _reject(self, result: MoveResult) -> MoveResult:
        _LOGGER.debug("Move rejected: %s (%s)", result.message, result.error)
        for cb in self.events.on_rejected:
            cb(result)
        return result

    def _emit_move(self, record: MoveRecord) -> None:
        for cb in self.events.on_move:
            cb(record, self._state)

    def _emit_game_over(self) -> None:
        self._emit_phase(GamePhase.GAME_OVER)
        for cb in self.events.on_game_over:
            cb(self._state.result, self._state.end_reason)

    def _emit_phase(self, phase: GamePhase) -> None:
        for cb in self.events.on_phase_changed:
            cb(phase)
