"""Pieces and their text forms."""

from __future__ import annotations

from dataclasses import dataclass

from chessverse.core.enums import Color, PieceType

# FEN letters in PieceType order; White uses the uppercase form.
_LETTERS = "pnbrqk"
# Unicode glyphs in PieceType order, indexed by Color.
_GLYPHS = ("♙♘♗♖♕♔", "♟♞♝♜♛♚")

PROMOTION_TYPES: tuple[PieceType, ...] = (
    PieceType.QUEEN,
    PieceType.ROOK,
    PieceType.BISHOP,
    PieceType.KNIGHT,
)


@dataclass(frozen=True, slots=True)
class Piece:
    """A colored chessman, compared and hashed by value."""

    color: Color
    piece_type: PieceType

    def __str__(self) -> str:
        """FEN letter (uppercase = white, lowercase = black)."""
        letter = _LETTERS[self.piece_type - 1]
        return letter.upper() if self.color == Color.WHITE else letter

    @classmethod
    def from_char(cls, char: str) -> Piece:
        """Parse a FEN letter, e.g. ``'N'`` → white knight."""
        kind = _LETTERS.find(char.lower()) if len(char) == 1 else -1
        if kind < 0:
            raise ValueError(f"Invalid piece character: {char!r}")
        color = Color.WHITE if char.isupper() else Color.BLACK
        return cls(color, PieceType(kind + 1))

    @property
    def symbol(self) -> str:
        """Unicode chess glyph, e.g. ♞."""
        return _GLYPHS[self.color][self.piece_type - 1]
