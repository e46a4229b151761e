"""Move application: turns a position and a move into the next position."""

from __future__ import annotations

from dataclasses import dataclass

from chessverse.core.enums import Color, PieceType
from chessverse.core.move import Move
from chessverse.core.piece import Piece
from chessverse.core.position import Position
from chessverse.core.types import SQUARES, Square


@dataclass(frozen=True, slots=True)
class AppliedMove:
    """Result of :func:`apply_move`."""

    position: Position
    promoted: PieceType | None = None
    captured: Piece | None = None


def apply_move(
    position: Position,
    move: Move,
    promotion: PieceType | None = None,
) -> AppliedMove:
    """Apply *move* to *position* and return the resulting snapshot.

    Legality is not re-checked: that is the move generator's job. An illegal
    move still yields a structurally valid board, just not one reachable by
    the rules. A pawn reaching the last rank becomes ``move.promotion``, else
    *promotion*, else a queen.
    """
    board = position.board
    piece = board[move.from_sq]
    if piece is None:
        raise ValueError(f"No piece on {move.from_sq}")

    from_sq, to_sq = move.from_sq, move.to_sq
    captured = board[to_sq]
    changes: dict[Square, Piece | None] = {from_sq: None}
    promoted: PieceType | None = None
    next_en_passant: Square | None = None
    touched = [from_sq, to_sq]

    if piece.piece_type == PieceType.PAWN:
        # Diagonal onto an empty square: the passed pawn sits beside us.
        if to_sq.col != from_sq.col and captured is None:
            victim_sq = SQUARES[from_sq.row * 8 + to_sq.col]
            captured = board[victim_sq]
            changes[victim_sq] = None
        if abs(to_sq.row - from_sq.row) == 2:
            next_en_passant = SQUARES[(from_sq.row + to_sq.row) // 2 * 8 + from_sq.col]

    if piece.piece_type == PieceType.KING and abs(to_sq.col - from_sq.col) == 2:
        row = from_sq.row
        if to_sq.col > from_sq.col:
            rook_from, rook_to = SQUARES[row * 8 + 7], SQUARES[row * 8 + 5]
        else:
            rook_from, rook_to = SQUARES[row * 8 + 0], SQUARES[row * 8 + 3]
        changes[rook_to] = board[rook_from]
        changes[rook_from] = None
        touched.append(rook_from)

    placed = piece
    if piece.piece_type == PieceType.PAWN and to_sq.row in (0, 7):
        promoted = move.promotion or promotion or PieceType.QUEEN
        placed = Piece(piece.color, promoted)
    changes[to_sq] = placed

    if piece.piece_type == PieceType.PAWN or captured is not None:
        halfmove_clock = 0
    else:
        halfmove_clock = position.halfmove_clock + 1

    fullmove_number = position.fullmove_number
    if piece.color == Color.BLACK:
        fullmove_number += 1

    next_position = Position(
        board=board.with_changes(changes),
        side_to_move=piece.color.opposite,
        castling=position.castling.touch(*touched),
        en_passant=next_en_passant,
        halfmove_clock=halfmove_clock,
        fullmove_number=fullmove_number,
    )
    return AppliedMove(next_position, promoted, captured)
