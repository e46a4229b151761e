"""SAN rendering for the move list shown next to the board."""

from __future__ import annotations

from chessverse.core.enums import Color, GameStatus, PieceType
from chessverse.core.executor import apply_move
from chessverse.core.move import Move
from chessverse.core.move_generator import MoveGenerator
from chessverse.core.piece import Piece
from chessverse.core.position import Position
from chessverse.core.rules import Rules
from chessverse.core.types import Square, square_name

_SUFFIX: dict[GameStatus, str] = {GameStatus.CHECK: "+", GameStatus.CHECKMATE: "#"}


def _letter(piece_type: PieceType) -> str:
    return str(Piece(Color.WHITE, piece_type))


def _disambiguator(position: Position, move: Move) -> str:
    """File, rank or full square needed to tell *move* apart from its twins."""
    piece = position.board[move.from_sq]
    twins: list[Square] = [
        other.from_sq
        for other in MoveGenerator(position).all_legal_moves(position.side_to_move)
        if other.to_sq == move.to_sq
        and other.from_sq != move.from_sq
        and position.board[other.from_sq] == piece
    ]
    if not twins:
        return ""
    origin = square_name(move.from_sq)
    if all(sq.col != move.from_sq.col for sq in twins):
        return origin[0]
    if all(sq.row != move.from_sq.row for sq in twins):
        return origin[1]
    return origin


def move_to_san(position: Position, move: Move) -> str:
    """SAN of a legal *move* played from *position*, e.g. ``Nbd2`` or ``exd6``.

    Castling is written ``O-O`` / ``O-O-O``; promotions get ``=Q`` style
    suffixes and the result of the move adds ``+`` or ``#``.
    """
    piece = position.board[move.from_sq]
    if piece is None:
        raise ValueError(f"No piece on {move.from_sq}")

    file_shift = move.to_sq.col - move.from_sq.col
    if piece.piece_type == PieceType.KING and abs(file_shift) == 2:
        text = "O-O" if file_shift > 0 else "O-O-O"
    elif piece.piece_type == PieceType.PAWN:
        # A pawn changing file always captures (en passant included).
        text = square_name(move.to_sq)
        if file_shift:
            text = f"{square_name(move.from_sq)[0]}x{text}"
    else:
        text = _letter(piece.piece_type) + _disambiguator(position, move)
        if position.board[move.to_sq] is not None:
            text += "x"
        text += square_name(move.to_sq)

    applied = apply_move(position, move)
    if applied.promoted is not None:
        text += "=" + _letter(applied.promoted)
    return text + _SUFFIX.get(Rules.status(applied.position), "")
