"""Attack detection and the per-piece movement tables it shares with move
generation.

Attack detection never calls the legal move generator: it looks outward from
the target square along the same offsets and rays the generator uses, so the
king-safety filter can depend on it without recursion.
"""

from __future__ import annotations

from chessverse.core.board import Board
from chessverse.core.enums import Color, PieceType
from chessverse.core.types import SQUARES, Square

KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

BISHOP_DIRS: tuple[tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
ROOK_DIRS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
QUEEN_DIRS: tuple[tuple[int, int], ...] = BISHOP_DIRS + ROOK_DIRS


# -- Precomputed lookup tables ---------------------------------------------


def _build_targets(
    offsets: tuple[tuple[int, int], ...],
) -> tuple[tuple[Square, ...], ...]:
    targets: list[tuple[Square, ...]] = []
    for sq in SQUARES:
        moves: list[Square] = []
        for d_row, d_col in offsets:
            to_sq = sq.offset(d_row, d_col)
            if to_sq is not None:
                moves.append(to_sq)
        targets.append(tuple(moves))
    return tuple(targets)


def _build_rays(
    directions: tuple[tuple[int, int], ...],
) -> tuple[tuple[tuple[Square, ...], ...], ...]:
    rays_per_square: list[tuple[tuple[Square, ...], ...]] = []
    for sq in SQUARES:
        square_rays: list[tuple[Square, ...]] = []
        for d_row, d_col in directions:
            ray: list[Square] = []
            to_sq = sq.offset(d_row, d_col)
            while to_sq is not None:
                ray.append(to_sq)
                to_sq = to_sq.offset(d_row, d_col)
            square_rays.append(tuple(ray))
        rays_per_square.append(tuple(square_rays))
    return tuple(rays_per_square)


def _build_pawn_attackers(color: Color) -> tuple[tuple[Square, ...], ...]:
    """For each square, where a *color* pawn must stand to attack it."""
    back = -color.pawn_direction
    return _build_targets(((back, -1), (back, 1)))


KNIGHT_TARGETS = _build_targets(KNIGHT_OFFSETS)
KING_TARGETS = _build_targets(KING_OFFSETS)
BISHOP_RAYS = _build_rays(BISHOP_DIRS)
ROOK_RAYS = _build_rays(ROOK_DIRS)
QUEEN_RAYS = _build_rays(QUEEN_DIRS)
_PAWN_ATTACKERS = (
    _build_pawn_attackers(Color.WHITE),
    _build_pawn_attackers(Color.BLACK),
)

_DIAGONAL_SLIDERS = frozenset((PieceType.BISHOP, PieceType.QUEEN))
_ORTHOGONAL_SLIDERS = frozenset((PieceType.ROOK, PieceType.QUEEN))


def _attacked_along(
    board: Board,
    rays: tuple[tuple[Square, ...], ...],
    by_color: Color,
    sliders: frozenset[PieceType],
) -> bool:
    for ray in rays:
        for to_sq in ray:
            piece = board[to_sq]
            if piece is None:
                continue
            if piece.color == by_color and piece.piece_type in sliders:
                return True
            break
    return False


def _attacked_by_step(
    board: Board,
    origins: tuple[Square, ...],
    by_color: Color,
    piece_type: PieceType,
) -> bool:
    for from_sq in origins:
        piece = board[from_sq]
        if (
            piece is not None
            and piece.color == by_color
            and piece.piece_type == piece_type
        ):
            return True
    return False


def is_square_attacked(board: Board, sq: Square, by_color: Color) -> bool:
    """Is *sq* attacked by any piece of *by_color*?

    Pawns attack their two forward diagonals whether or not anything stands
    there; pawn pushes and castling never count as attacks.
    """
    idx = sq.ordinal
    return (
        _attacked_by_step(board, _PAWN_ATTACKERS[by_color][idx], by_color, PieceType.PAWN)
        or _attacked_by_step(board, KNIGHT_TARGETS[idx], by_color, PieceType.KNIGHT)
        or _attacked_by_step(board, KING_TARGETS[idx], by_color, PieceType.KING)
        or _attacked_along(board, BISHOP_RAYS[idx], by_color, _DIAGONAL_SLIDERS)
        or _attacked_along(board, ROOK_RAYS[idx], by_color, _ORTHOGONAL_SLIDERS)
    )


def is_in_check(board: Board, color: Color) -> bool:
    """Is *color*'s king attacked by the opponent?

    A board without a king for *color* is never in check.
    """
    king_sq = board.king_square(color)
    if king_sq is None:
        return False
    return is_square_attacked(board, king_sq, color.opposite)
