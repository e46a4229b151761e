"""Game state machine: tracks phase transitions, history and repetitions."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace

from chessverse.core.board import Board
from chessverse.core.enums import (
    Color,
    GameEndReason,
    GameResult,
    GameStatus,
    PieceType,
)
from chessverse.core.executor import apply_move
from chessverse.core.move import Move
from chessverse.core.move_generator import MoveGenerator
from chessverse.core.notation import (
    STARTING_FEN,
    move_to_san,
    position_from_fen,
    position_to_fen,
)
from chessverse.core.piece import Piece
from chessverse.core.position import Position
from chessverse.core.rules import Rules
from chessverse.core.types import Square
from chessverse.game.interfaces import GamePhase, MoveError, MoveResult
from chessverse.game.settings import GameSettings

_LOGGER = logging.getLogger(__name__)


@dataclass
class MoveRecord:
    """A single entry in the move history."""

    move: Move
    color: Color
    san: str
    fen_after: str
    status_after: GameStatus = GameStatus.NORMAL
    promoted: PieceType | None = None
    captured: Piece | None = None

    @property
    def was_check(self) -> bool:
        return self.status_after in (GameStatus.CHECK, GameStatus.CHECKMATE)

    @property
    def was_capture(self) -> bool:
        return self.captured is not None


@dataclass
class GameState:
    """Manages game lifecycle: phase, result, move history, repetitions.

    This is a pure data/logic class: no threading, no UI. Positions are
    immutable snapshots; the state swaps in a new one after every move and
    keeps the earlier ones for undo.
    """

    settings: GameSettings = field(default_factory=GameSettings)
    position: Position = field(default_factory=Position.initial, init=False)
    phase: GamePhase = field(default=GamePhase.NOT_STARTED, init=False)
    result: GameResult = field(default=GameResult.IN_PROGRESS, init=False)
    end_reason: GameEndReason = field(default=GameEndReason.NONE, init=False)
    move_history: list[MoveRecord] = field(default_factory=list, init=False)
    start_fen: str = field(default=STARTING_FEN, init=False)
    _snapshots: list[Position] = field(default_factory=list, init=False, repr=False)
    _key_counts: dict[int, int] = field(default_factory=dict, init=False, repr=False)

    # ── Initialisation ───────────────────────────────────────────────────

    def setup(self, fen: str | None = None) -> None:
        """Initialise (or reset) the game. Raises ``ValueError`` on bad FEN."""
        position = position_from_fen(fen or STARTING_FEN)
        self.start_fen = fen or STARTING_FEN
        self.position = position
        self.phase = GamePhase.AWAITING_MOVE
        self.result = GameResult.IN_PROGRESS
        self.end_reason = GameEndReason.NONE
        self.move_history.clear()
        self._snapshots.clear()
        self._key_counts = {position.zobrist_hash: 1}
        self._check_game_over()

    # ── Move validation / application ────────────────────────────────────

    def validate(self, move: Move, color: Color | None = None) -> Move | MoveResult:
        """Check *move* against the rules without touching the game.

        Returns the move to play (with the promotion piece filled in when it
        was left open) or a rejected :class:`MoveResult`.
        """
        if self.phase == GamePhase.NOT_STARTED:
            return MoveResult.rejected(MoveError.INVALID_MOVE, "The game has not started.")
        if self.is_game_over:
            return MoveResult.rejected(MoveError.GAME_OVER, "The game is over.")

        mover = self.side_to_move
        wrong_turn = f"It is {mover.name.lower()}'s turn to move."
        if color is not None and color != mover:
            return MoveResult.rejected(MoveError.NOT_YOUR_TURN, wrong_turn)

        piece = self.position.board[move.from_sq]
        if piece is None:
            return MoveResult.rejected(
                MoveError.INVALID_MOVE, f"There is no piece on {move.from_sq}."
            )
        if piece.color != mover:
            return MoveResult.rejected(MoveError.NOT_YOUR_TURN, wrong_turn)

        if (
            piece.piece_type == PieceType.PAWN
            and move.promotion is None
            and move.to_sq.row in (0, 7)
        ):
            if not self.settings.auto_queen:
                return MoveResult.rejected(
                    MoveError.AMBIGUOUS_PROMOTION,
                    "Choose a piece to promote to.",
                )
            move = replace(move, promotion=PieceType.QUEEN)

        if move not in MoveGenerator(self.position).legal_moves(move.from_sq):
            return MoveResult.rejected(
                MoveError.INVALID_MOVE, f"{move} is not a legal move."
            )
        return move

    def submit_move(self, move: Move, color: Color | None = None) -> MoveResult:
        """Validate and apply *move*; the game is unchanged on rejection."""
        checked = self.validate(move, color)
        if isinstance(checked, MoveResult):
            return checked
        return MoveResult.accepted(self.apply_move(checked))

    def apply_move(self, move: Move) -> MoveRecord:
        """Apply a validated move and return the history record.

        Caller is responsible for legality check.
        """
        before = self.position
        mover = self.side_to_move
        san = move_to_san(before, move)
        applied = apply_move(before, move)

        self._snapshots.append(before)
        self.position = applied.position
        key = self.position.zobrist_hash
        self._key_counts[key] = self._key_counts.get(key, 0) + 1

        record = MoveRecord(
            move=move,
            color=mover,
            san=san,
            fen_after=position_to_fen(self.position),
            status_after=Rules.status(self.position),
            promoted=applied.promoted,
            captured=applied.captured,
        )
        self.move_history.append(record)
        _LOGGER.debug("%s played %s (%s)", mover, san, move)

        # Check for game-ending conditions
        self._check_game_over()
        return record

    def undo_last_move(self) -> Move | None:
        """Undo the last move. Returns the undone Move, or None if empty."""
        if not self.move_history:
            return None

        record = self.move_history.pop()
        key = self.position.zobrist_hash
        remaining = self._key_counts[key] - 1
        if remaining:
            self._key_counts[key] = remaining
        else:
            del self._key_counts[key]
        self.position = self._snapshots.pop()

        # Reset result if we un-did a game-ending move
        if self.result != GameResult.IN_PROGRESS:
            self.result = GameResult.IN_PROGRESS
            self.end_reason = GameEndReason.NONE
            self.phase = GamePhase.AWAITING_MOVE

        return record.move

    # ── Resignation / draw ───────────────────────────────────────────────

    def resign(self, color: Color) -> None:
        self.result = (
            GameResult.BLACK_WINS if color == Color.WHITE else GameResult.WHITE_WINS
        )
        self.end_reason = GameEndReason.RESIGNATION
        self.phase = GamePhase.GAME_OVER

    def set_draw(self, reason: GameEndReason) -> None:
        self.result = GameResult.DRAW
        self.end_reason = reason
        self.phase = GamePhase.GAME_OVER

    def claim_draw_by_rule(self) -> bool:
        """End the game by the 50-move rule or threefold repetition if either holds."""
        if self.is_game_over or not self.settings.allow_draw_claims:
            return False
        if Rules.is_fifty_move_rule(self.position):
            self.set_draw(GameEndReason.FIFTY_MOVE_RULE)
            return True
        if self.repetition_count() >= 3:
            self.set_draw(GameEndReason.THREEFOLD_REPETITION)
            return True
        return False

    # ── Query helpers ────────────────────────────────────────────────────

    @property
    def board(self) -> Board:
        return self.position.board

    @property
    def side_to_move(self) -> Color:
        return self.position.side_to_move

    @property
    def is_game_over(self) -> bool:
        return self.phase == GamePhase.GAME_OVER

    @property
    def status(self) -> GameStatus:
        """Status of the side to move in the current position."""
        return Rules.status(self.position)

    @property
    def ply_count(self) -> int:
        """Number of half-moves played."""
        return len(self.move_history)

    @property
    def fullmove_display(self) -> int:
        """Current full-move number for display."""
        return self.position.fullmove_number

    @property
    def snapshots(self) -> list[Position]:
        """Every position of the game so far, oldest first, current last."""
        return [*self._snapshots, self.position]

    def legal_moves(self) -> list[Move]:
        """Legal moves in the current position."""
        return MoveGenerator(self.position).all_legal_moves()

    def legal_targets(self, sq: Square) -> set[Square]:
        """Where the piece on *sq* may go; empty unless it belongs to the side to move."""
        piece = self.position.board[sq]
        if self.is_game_over or piece is None or piece.color != self.side_to_move:
            return set()
        return MoveGenerator(self.position).legal_targets(sq)

    def repetition_count(self) -> int:
        """How many times the current position occurred in this game."""
        return self._key_counts.get(self.position.zobrist_hash, 0)

    # ── Internal ─────────────────────────────────────────────────────────

    def _check_game_over(self) -> None:
        status = Rules.status(self.position)
        if status == GameStatus.CHECKMATE:
            self.result = (
                GameResult.BLACK_WINS
                if self.side_to_move == Color.WHITE
                else GameResult.WHITE_WINS
            )
            self.end_reason = GameEndReason.CHECKMATE
            self.phase = GamePhase.GAME_OVER
        elif status == GameStatus.STALEMATE:
            self.set_draw(GameEndReason.STALEMATE)
        elif self.settings.automatic_draws:
            reason = Rules.automatic_draw_reason(self.position)
            if reason == GameEndReason.NONE and self.repetition_count() >= 5:
                reason = GameEndReason.FIVEFOLD_REPETITION
            if reason != GameEndReason.NONE:
                self.set_draw(reason)

        if self.is_game_over:
            _LOGGER.info("Game over: %s (%s)", self.result.name, self.end_reason.name)
