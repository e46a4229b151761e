"""Pseudo-legal and legal move generation.

Two tiers share one set of per-piece rules:

* :meth:`MoveGenerator.pseudo_legal_moves` follows movement patterns only;
* :meth:`MoveGenerator.legal_moves` plays each candidate on a new position and
  drops it if the mover's king is left attacked.

Castling preconditions and the king-safety filter both ask
:func:`~chessverse.core.attacks.is_square_attacked`, which never calls back
into this module.
"""

from __future__ import annotations

from chessverse.core.attacks import (
    BISHOP_RAYS,
    KING_TARGETS,
    KNIGHT_TARGETS,
    QUEEN_RAYS,
    ROOK_RAYS,
    is_in_check,
    is_square_attacked,
)
from chessverse.core.castling import (
    HOME_ROW,
    KING_ORIGIN,
    KINGSIDE_ROOK_ORIGIN,
    QUEENSIDE_ROOK_ORIGIN,
)
from chessverse.core.enums import Color, PieceType
from chessverse.core.executor import apply_move
from chessverse.core.move import Move
from chessverse.core.piece import PROMOTION_TYPES, Piece
from chessverse.core.position import Position
from chessverse.core.types import SQUARES, Square

# Row a color's pawns start on and the row they promote on.
_PAWN_HOME_ROW: dict[Color, int] = {Color.WHITE: 6, Color.BLACK: 1}
_PROMOTION_ROW: dict[Color, int] = {Color.WHITE: 0, Color.BLACK: 7}
# Row of an en-passant target the given color may capture onto.
_EP_TARGET_ROW: dict[Color, int] = {Color.WHITE: 2, Color.BLACK: 5}


class MoveGenerator:
    """Generates moves for a given :class:`Position`.

    The position is never modified; trial moves work on fresh snapshots
    returned by :func:`~chessverse.core.executor.apply_move`.
    """

    __slots__ = ("_pos", "_board")

    def __init__(self, position: Position) -> None:
        self._pos = position
        self._board = position.board

    # -- Public API ---------------------------------------------------------

    def pseudo_legal_moves(self, sq: Square) -> list[Move]:
        """Moves of the piece on *sq* by movement pattern (may expose its king)."""
        piece = self._board[sq]
        if piece is None:
            return []

        moves: list[Move] = []
        ptype = piece.piece_type
        if ptype == PieceType.PAWN:
            self._gen_pawn(sq, piece.color, moves)
        elif ptype == PieceType.KNIGHT:
            self._gen_step(sq, piece.color, KNIGHT_TARGETS[sq.ordinal], moves)
        elif ptype == PieceType.BISHOP:
            self._gen_sliding(sq, piece.color, BISHOP_RAYS[sq.ordinal], moves)
        elif ptype == PieceType.ROOK:
            self._gen_sliding(sq, piece.color, ROOK_RAYS[sq.ordinal], moves)
        elif ptype == PieceType.QUEEN:
            self._gen_sliding(sq, piece.color, QUEEN_RAYS[sq.ordinal], moves)
        else:
            self._gen_step(sq, piece.color, KING_TARGETS[sq.ordinal], moves)
            self._gen_castling(sq, piece.color, moves)
        return moves

    def legal_moves(self, sq: Square) -> list[Move]:
        """Strictly legal moves of the piece on *sq*."""
        piece = self._board[sq]
        if piece is None:
            return []
        return [
            move
            for move in self.pseudo_legal_moves(sq)
            if not self._leaves_king_attacked(move, piece.color)
        ]

    def all_pseudo_legal_moves(self, color: Color | None = None) -> list[Move]:
        """Pseudo-legal moves of every piece of *color* (default: side to move)."""
        color = self._pos.side_to_move if color is None else color
        moves: list[Move] = []
        for sq in self._board.pieces(color):
            moves.extend(self.pseudo_legal_moves(sq))
        return moves

    def all_legal_moves(self, color: Color | None = None) -> list[Move]:
        """Legal moves of every piece of *color* (default: side to move)."""
        color = self._pos.side_to_move if color is None else color
        moves: list[Move] = []
        for sq in self._board.pieces(color):
            moves.extend(self.legal_moves(sq))
        return moves

    def has_legal_move(self, color: Color | None = None) -> bool:
        """Whether *color* has at least one legal move (stops at the first)."""
        color = self._pos.side_to_move if color is None else color
        for sq in self._board.pieces(color):
            for move in self.pseudo_legal_moves(sq):
                if not self._leaves_king_attacked(move, color):
                    return True
        return False

    def legal_targets(self, sq: Square) -> set[Square]:
        """Destination squares of the piece on *sq* (for move hints)."""
        return {move.to_sq for move in self.legal_moves(sq)}

    # -- King safety --------------------------------------------------------

    def _leaves_king_attacked(self, move: Move, color: Color) -> bool:
        trial = apply_move(self._pos, move).position
        return is_in_check(trial.board, color)

    # -- Piece-specific generators (private) -------------------------------

    def _gen_pawn(self, sq: Square, color: Color, moves: list[Move]) -> None:
        board = self._board
        step = color.pawn_direction
        promotes = sq.row + step == _PROMOTION_ROW[color]

        one_step = sq.offset(step, 0)
        if one_step is not None and board.is_empty(one_step):
            self._add_pawn_move(sq, one_step, promotes, moves)
            if sq.row == _PAWN_HOME_ROW[color]:
                two_step = SQUARES[(sq.row + 2 * step) * 8 + sq.col]
                if board.is_empty(two_step):
                    moves.append(Move(sq, two_step))

        ep = self._pos.en_passant
        for d_col in (-1, 1):
            cap_sq = sq.offset(step, d_col)
            if cap_sq is None:
                continue
            target = board[cap_sq]
            if target is not None:
                if target.color != color:
                    self._add_pawn_move(sq, cap_sq, promotes, moves)
            elif cap_sq == ep and cap_sq.row == _EP_TARGET_ROW[color]:
                passed = board[SQUARES[sq.row * 8 + cap_sq.col]]
                if passed == Piece(color.opposite, PieceType.PAWN):
                    moves.append(Move(sq, cap_sq))

    @staticmethod
    def _add_pawn_move(
        from_sq: Square, to_sq: Square, promotes: bool, moves: list[Move]
    ) -> None:
        if promotes:
            for pt in PROMOTION_TYPES:
                moves.append(Move(from_sq, to_sq, pt))
        else:
            moves.append(Move(from_sq, to_sq))

    def _gen_step(
        self,
        sq: Square,
        color: Color,
        targets: tuple[Square, ...],
        moves: list[Move],
    ) -> None:
        board = self._board
        for to_sq in targets:
            target = board[to_sq]
            if target is None or target.color != color:
                moves.append(Move(sq, to_sq))

    def _gen_sliding(
        self,
        sq: Square,
        color: Color,
        rays: tuple[tuple[Square, ...], ...],
        moves: list[Move],
    ) -> None:
        board = self._board
        for ray in rays:
            for to_sq in ray:
                target = board[to_sq]
                if target is None:
                    moves.append(Move(sq, to_sq))
                    continue
                if target.color != color:
                    moves.append(Move(sq, to_sq))
                break

    def _gen_castling(self, king_sq: Square, color: Color, moves: list[Move]) -> None:
        if king_sq != KING_ORIGIN[color]:
            return

        rights = self._pos.castling.for_color(color)
        if not (rights.can_castle_kingside or rights.can_castle_queenside):
            return

        board = self._board
        opponent = color.opposite
        if is_square_attacked(board, king_sq, opponent):
            return

        row = HOME_ROW[color]
        rook = Piece(color, PieceType.ROOK)

        if rights.can_castle_kingside and board[KINGSIDE_ROOK_ORIGIN[color]] == rook:
            f_sq = SQUARES[row * 8 + 5]
            g_sq = SQUARES[row * 8 + 6]
            if (
                board.is_empty(f_sq)
                and board.is_empty(g_sq)
                and not is_square_attacked(board, f_sq, opponent)
                and not is_square_attacked(board, g_sq, opponent)
            ):
                moves.append(Move(king_sq, g_sq))

        if rights.can_castle_queenside and board[QUEENSIDE_ROOK_ORIGIN[color]] == rook:
            b_sq = SQUARES[row * 8 + 1]
            c_sq = SQUARES[row * 8 + 2]
            d_sq = SQUARES[row * 8 + 3]
            if (
                board.is_empty(b_sq)
                and board.is_empty(c_sq)
                and board.is_empty(d_sq)
                and not is_square_attacked(board, c_sq, opponent)
                and not is_square_attacked(board, d_sq, opponent)
            ):
                moves.append(Move(king_sq, c_sq))
