"""Zobrist keys: 64-bit position fingerprints used to count repetitions."""

from __future__ import annotations

from collections.abc import Iterator
from itertools import islice
from typing import TYPE_CHECKING, Final

from chessverse.core.enums import Color, PieceType
from chessverse.core.piece import Piece
from chessverse.core.types import SQUARES, Square

if TYPE_CHECKING:
    from chessverse.core.board import Board
    from chessverse.core.castling import CastlingRights

_MASK_64: Final = (1 << 64) - 1
_GOLDEN_GAMMA: Final = 0x9E3779B97F4A7C15


def _key_stream(seed: int) -> Iterator[int]:
    """SplitMix64 output sequence (same keys on every run and platform)."""
    state = seed
    while True:
        state = (state + _GOLDEN_GAMMA) & _MASK_64
        z = state
        z = ((z ^ (z >> 30)) * 0xBF58476D1CE4E5B9) & _MASK_64
        z = ((z ^ (z >> 27)) * 0x94D049BB133111EB) & _MASK_64
        yield z ^ (z >> 31)


_stream = _key_stream(0x3C6EF372FE94F82B)
# Indexed by color * 384 + (piece_type - 1) * 64 + square ordinal.
_PIECE_KEYS: Final = tuple(islice(_stream, 2 * 6 * 64))
_BLACK_TO_MOVE_KEY: Final = next(_stream)
_CASTLING_KEYS: Final = tuple(islice(_stream, 16))
_EN_PASSANT_FILE_KEYS: Final = tuple(islice(_stream, 8))
del _stream


def _en_passant_capturable(board: Board, side_to_move: Color, en_passant: Square) -> bool:
    """Whether a pawn of *side_to_move* stands beside the pawn that just passed."""
    # The passed pawn sits one row past the target, seen from the mover.
    row = en_passant.row + (1 if side_to_move == Color.WHITE else -1)
    pawn = Piece(side_to_move, PieceType.PAWN)
    return any(
        0 <= col < 8 and board[SQUARES[row * 8 + col]] == pawn
        for col in (en_passant.col - 1, en_passant.col + 1)
    )


def position_key(
    board: Board,
    side_to_move: Color,
    castling: CastlingRights,
    en_passant: Square | None,
) -> int:
    """Fingerprint of everything that makes two positions "the same".

    Clocks are left out. Castling contributes its effective rights. An en-passant
    target contributes its file, but only while a pawn stands ready to take.
    """
    key = _CASTLING_KEYS[castling.mask]
    if side_to_move == Color.BLACK:
        key ^= _BLACK_TO_MOVE_KEY
    if en_passant is not None and _en_passant_capturable(board, side_to_move, en_passant):
        key ^= _EN_PASSANT_FILE_KEYS[en_passant.col]
    for sq, piece in board.occupied():
        key ^= _PIECE_KEYS[piece.color * 384 + (piece.piece_type - 1) * 64 + sq.ordinal]
    return key
