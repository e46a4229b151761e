"""Moves as submitted by a player, a peer or an AI picker."""

from __future__ import annotations

from dataclasses import dataclass

from chessverse.core.enums import Color, PieceType
from chessverse.core.piece import PROMOTION_TYPES, Piece
from chessverse.core.types import Square, parse_square, square_name


@dataclass(frozen=True, slots=True)
class Move:
    """A from/to pair plus an optional promotion kind.

    Castling is the king's two-file step and en passant is a pawn's diagonal
    step onto an empty square; both are recognised from the board when the
    move is applied, so no flag is stored here.
    """

    from_sq: Square
    to_sq: Square
    promotion: PieceType | None = None

    def __str__(self) -> str:
        return self.uci

    @property
    def uci(self) -> str:
        """Long algebraic text, e.g. ``e2e4`` or ``e7e8q``."""
        text = square_name(self.from_sq) + square_name(self.to_sq)
        if self.promotion is not None:
            text += str(Piece(Color.BLACK, self.promotion))
        return text

    @classmethod
    def from_uci(cls, text: str) -> Move:
        """Parse long algebraic text; raises ``ValueError`` when malformed."""
        text = text.strip()
        if len(text) not in (4, 5):
            raise ValueError(f"Invalid UCI move: {text!r}")
        promotion: PieceType | None = None
        if len(text) == 5:
            kind = Piece.from_char(text[4].lower()).piece_type
            if kind not in PROMOTION_TYPES:
                raise ValueError(f"Invalid promotion piece in move: {text!r}")
            promotion = kind
        return cls(parse_square(text[:2]), parse_square(text[2:4]), promotion)
