"""Board - immutable piece placement on an 8x8 grid."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping

from chessverse.core.enums import Color, PieceType
from chessverse.core.piece import Piece
from chessverse.core.types import SQUARES, Square, parse_square

_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


class Board:
    """Immutable 64-square board.

    There is no item assignment: every change goes through
    :meth:`with_changes`, which returns a new board and leaves this one intact.
    """

    __slots__ = ("_squares",)

    def __init__(self, squares: Iterable[Piece | None] | None = None) -> None:
        cells = tuple(squares) if squares is not None else (None,) * 64
        if len(cells) != 64:
            raise ValueError(f"Board needs 64 squares, got {len(cells)}")
        self._squares: tuple[Piece | None, ...] = cells

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Piece | None:
        return self._squares[sq.row * 8 + sq.col]

    def piece_at(self, sq: Square) -> Piece | None:
        """Total lookup: ``None`` for an empty square, never raises."""
        return self._squares[sq.row * 8 + sq.col]

    def is_empty(self, sq: Square) -> bool:
        return self._squares[sq.row * 8 + sq.col] is None

    # -- Query helpers ------------------------------------------------------

    def occupied(self) -> Iterator[tuple[Square, Piece]]:
        """``(square, piece)`` for every occupied square, a8 first."""
        for idx, piece in enumerate(self._squares):
            if piece is not None:
                yield SQUARES[idx], piece

    def pieces(self, color: Color, piece_type: PieceType | None = None) -> list[Square]:
        """Squares occupied by *color* (optionally only its *piece_type*)."""
        return [
            sq
            for sq, piece in self.occupied()
            if piece.color == color
            and (piece_type is None or piece.piece_type == piece_type)
        ]

    def count(self, color: Color, piece_type: PieceType) -> int:
        return len(self.pieces(color, piece_type))

    def king_square(self, color: Color) -> Square | None:
        """Square of *color*'s king, or ``None`` if it has none."""
        king = Piece(color, PieceType.KING)
        for sq, piece in self.occupied():
            if piece == king:
                return sq
        return None

    def rows(self) -> tuple[tuple[Piece | None, ...], ...]:
        """The grid as 8 rows of 8 cells, rank 8 first (for rendering)."""
        return tuple(self._squares[r * 8 : r * 8 + 8] for r in range(8))

    # -- Transformations ----------------------------------------------------

    def with_changes(self, changes: Mapping[Square, Piece | None]) -> Board:
        """New board with *changes* applied; this board is left untouched."""
        cells = list(self._squares)
        for sq, piece in changes.items():
            cells[sq.row * 8 + sq.col] = piece
        return Board(cells)

    def copy(self) -> Board:
        """Independent clone of this board."""
        return Board(self._squares)

    # -- Factory ------------------------------------------------------------

    @classmethod
    def empty(cls) -> Board:
        return cls()

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        cells: list[Piece | None] = [None] * 64
        for col, pt in enumerate(_BACK_RANK):
            cells[col] = Piece(Color.BLACK, pt)
            cells[8 + col] = Piece(Color.BLACK, PieceType.PAWN)
            cells[48 + col] = Piece(Color.WHITE, PieceType.PAWN)
            cells[56 + col] = Piece(Color.WHITE, pt)
        return cls(cells)

    @classmethod
    def from_pieces(cls, placement: Mapping[str, Piece]) -> Board:
        """Build a board from ``{"e1": Piece(...), ...}``."""
        return cls().with_changes(
            {parse_square(name): piece for name, piece in placement.items()}
        )

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._squares == other._squares

    def __hash__(self) -> int:
        return hash(self._squares)

    def __iter__(self) -> Iterator[Piece | None]:
        return iter(self._squares)

    def __repr__(self) -> str:
        lines: list[str] = []
        for r, row in enumerate(self.rows()):
            cells = [str(p) if p else "." for p in row]
            lines.append(f"{8 - r} {' '.join(cells)}")
        lines.append("  a b c d e f g h")
        return "\n".join(lines)
