"""Square type and coordinate helpers.

Board layout (row-major, as seen from White):
    row 0 = rank 8, row 7 = rank 1
    col 0 = file a, col 7 = file h

So ``a8`` is ``Square(0, 0)`` and ``h1`` is ``Square(7, 7)``.
"""

from __future__ import annotations

from typing import NamedTuple


class Square(NamedTuple):
    """A board coordinate."""

    row: int
    col: int

    @property
    def ordinal(self) -> int:
        """Flat index 0–63 (a8=0, h8=7, ..., h1=63)."""
        return self.row * 8 + self.col

    def offset(self, d_row: int, d_col: int) -> Square | None:
        """Neighbouring square, or ``None`` if it falls off the board."""
        row = self.row + d_row
        col = self.col + d_col
        if 0 <= row < 8 and 0 <= col < 8:
            return SQUARES[row * 8 + col]
        return None

    def __str__(self) -> str:
        return square_name(self)


SQUARES: tuple[Square, ...] = tuple(Square(i // 8, i % 8) for i in range(64))


def is_valid_square(row: int, col: int) -> bool:
    """Check whether (*row*, *col*) lies on the board."""
    return 0 <= row < 8 and 0 <= col < 8


def make_square(row: int, col: int) -> Square:
    """Create square from row and col, validating the range."""
    if not is_valid_square(row, col):
        raise ValueError(f"Square out of range: ({row}, {col})")
    return SQUARES[row * 8 + col]


def square_name(sq: Square) -> str:
    """Algebraic name, e.g. ``Square(7, 0)`` → ``'a1'``."""
    return chr(ord("a") + sq.col) + str(8 - sq.row)


def parse_square(name: str) -> Square:
    """Parse algebraic name, e.g. ``'e4'`` → ``Square(4, 4)``."""
    if len(name) != 2 or name[0] not in "abcdefgh" or name[1] not in "12345678":
        raise ValueError(f"Invalid square name: {name!r}")
    return SQUARES[(8 - int(name[1])) * 8 + ord(name[0]) - ord("a")]


# ── Named square constants ──────────────────────────────────────────────────

A8, B8, C8, D8, E8, F8, G8, H8 = SQUARES[0:8]
A7, B7, C7, D7, E7, F7, G7, H7 = SQUARES[8:16]
A6, B6, C6, D6, E6, F6, G6, H6 = SQUARES[16:24]
A5, B5, C5, D5, E5, F5, G5, H5 = SQUARES[24:32]
A4, B4, C4, D4, E4, F4, G4, H4 = SQUARES[32:40]
A3, B3, C3, D3, E3, F3, G3, H3 = SQUARES[40:48]
A2, B2, C2, D2, E2, F2, G2, H2 = SQUARES[48:56]
A1, B1, C1, D1, E1, F1, G1, H1 = SQUARES[56:64]
