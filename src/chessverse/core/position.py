"""Position: a board snapshot together with the metadata the rules need."""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from chessverse.core.board import Board
from chessverse.core.castling import CastlingRights
from chessverse.core.enums import Color
from chessverse.core.types import Square
from chessverse.core.zobrist import position_key


@dataclass(frozen=True, slots=True)
class Position:
    """Full chess position: board + side to move + castling + en passant + clocks.

    Positions are values. Applying a move (see
    :func:`chessverse.core.executor.apply_move`) builds a new ``Position``;
    nothing ever mutates an existing one, so callers may keep old snapshots as
    history.
    """

    board: Board = field(default_factory=Board.initial)
    side_to_move: Color = Color.WHITE
    castling: CastlingRights = CastlingRights()
    en_passant: Square | None = None
    halfmove_clock: int = 0
    fullmove_number: int = 1

    @classmethod
    def initial(cls) -> Position:
        return cls()

    def copy(self) -> Position:
        """Clone with an independent board."""
        return replace(self, board=self.board.copy())

    @property
    def zobrist_hash(self) -> int:
        """Repetition key (see :func:`chessverse.core.zobrist.position_key`)."""
        return position_key(
            self.board, self.side_to_move, self.castling, self.en_passant
        )
