"""Castling eligibility bookkeeping.

Eligibility is tracked by the *role* of an origin square (king start, kingside
rook corner, queenside rook corner) rather than by piece identity. Once a flag
is set it is never cleared again for the rest of the game.
"""

from __future__ import annotations

from dataclasses import dataclass, replace

from chessverse.core.enums import Color
from chessverse.core.types import A1, A8, E1, E8, H1, H8, Square


@dataclass(frozen=True, slots=True)
class SideCastling:
    """Move-history flags for one color."""

    king_moved: bool = False
    kingside_rook_moved: bool = False
    queenside_rook_moved: bool = False

    @property
    def can_castle_kingside(self) -> bool:
        return not (self.king_moved or self.kingside_rook_moved)

    @property
    def can_castle_queenside(self) -> bool:
        return not (self.king_moved or self.queenside_rook_moved)


# Home rank of each color and the origin squares of its king and rooks.
HOME_ROW: dict[Color, int] = {Color.WHITE: 7, Color.BLACK: 0}
KING_ORIGIN: dict[Color, Square] = {Color.WHITE: E1, Color.BLACK: E8}
KINGSIDE_ROOK_ORIGIN: dict[Color, Square] = {Color.WHITE: H1, Color.BLACK: H8}
QUEENSIDE_ROOK_ORIGIN: dict[Color, Square] = {Color.WHITE: A1, Color.BLACK: A8}

_ORIGIN_FLAGS: dict[Square, tuple[Color, str]] = {
    E1: (Color.WHITE, "king_moved"),
    H1: (Color.WHITE, "kingside_rook_moved"),
    A1: (Color.WHITE, "queenside_rook_moved"),
    E8: (Color.BLACK, "king_moved"),
    H8: (Color.BLACK, "kingside_rook_moved"),
    A8: (Color.BLACK, "queenside_rook_moved"),
}


@dataclass(frozen=True, slots=True)
class CastlingRights:
    """Castling flags for both colors."""

    white: SideCastling = SideCastling()
    black: SideCastling = SideCastling()

    @classmethod
    def none(cls) -> CastlingRights:
        """Rights with every flag set (nobody may castle)."""
        lost = SideCastling(True, True, True)
        return cls(lost, lost)

    def for_color(self, color: Color) -> SideCastling:
        return self.white if color == Color.WHITE else self.black

    def with_side(self, color: Color, side: SideCastling) -> CastlingRights:
        if color == Color.WHITE:
            return replace(self, white=side)
        return replace(self, black=side)

    def touch(self, *squares: Square) -> CastlingRights:
        """Mark the roles of any king/rook origin squares in *squares* as moved.

        Called with the origin and destination of every move: leaving an
        origin square means its occupant moved, landing on one means the rook
        standing there (if any) was captured.
        """
        rights = self
        for sq in squares:
            entry = _ORIGIN_FLAGS.get(sq)
            if entry is None:
                continue
            color, flag = entry
            side = rights.for_color(color)
            if not getattr(side, flag):
                rights = rights.with_side(color, replace(side, **{flag: True}))
        return rights

    @property
    def mask(self) -> int:
        """Effective rights as a 4-bit mask (K=1, Q=2, k=4, q=8)."""
        bits = 0
        if self.white.can_castle_kingside:
            bits |= 1
        if self.white.can_castle_queenside:
            bits |= 2
        if self.black.can_castle_kingside:
            bits |= 4
        if self.black.can_castle_queenside:
            bits |= 8
        return bits
