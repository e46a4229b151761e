"""Abstract interfaces and result types for the game layer.

Front ends (click handling, socket relay, AI pickers) depend on these, not on
the concrete controller.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import IntEnum, auto
from typing import TYPE_CHECKING

from chessverse.core.enums import Color

if TYPE_CHECKING:
    from chessverse.core.move import Move
    from chessverse.game.state import MoveRecord


# ── Game phase FSM states ────────────────────────────────────────────────────


class GamePhase(IntEnum):
    """Finite-state-machine states for a chess game."""

    NOT_STARTED = auto()
    AWAITING_MOVE = auto()
    GAME_OVER = auto()


class MoveError(IntEnum):
    """Why a submitted move was refused."""

    INVALID_MOVE = auto()
    NOT_YOUR_TURN = auto()
    AMBIGUOUS_PROMOTION = auto()
    POLICY_REJECTED = auto()
    GAME_OVER = auto()


@dataclass(frozen=True, slots=True)
class MoveResult:
    """Outcome of a move submission. The game is untouched when ``ok`` is False."""

    ok: bool
    record: MoveRecord | None = None
    error: MoveError | None = None
    message: str = ""

    @classmethod
    def accepted(cls, record: MoveRecord) -> MoveResult:
        return cls(True, record=record)

    @classmethod
    def rejected(cls, error: MoveError, message: str) -> MoveResult:
        return cls(False, error=error, message=message)


# ── Abstract interfaces ─────────────────────────────────────────────────────


class IGameController(ABC):
    """Interface for the game orchestrator."""

    @abstractmethod
    def new_game(self, fen: str | None = None) -> None:
        """Set up a new game."""

    @abstractmethod
    def submit_move(self, move: Move, color: Color | None = None) -> MoveResult:
        """Submit a move on behalf of *color* (default: side to move)."""

    @abstractmethod
    def resign(self, color: Color) -> None:
        """Player of *color* resigns."""

    @abstractmethod
    def claim_draw(self, color: Color) -> bool:
        """Claim a fifty-move or threefold-repetition draw."""

    @abstractmethod
    def undo_move(self) -> bool:
        """Undo the last move. Returns True on success."""
