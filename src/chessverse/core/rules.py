"""High-level chess rules: check, checkmate, stalemate, draw detection."""

from __future__ import annotations

from chessverse.core.attacks import is_in_check
from chessverse.core.enums import Color, GameEndReason, GameResult, GameStatus, PieceType
from chessverse.core.move_generator import MoveGenerator
from chessverse.core.position import Position

_MINOR_PIECES = (PieceType.KNIGHT, PieceType.BISHOP)


class Rules:
    """Static rule-checker that operates on a :class:`Position`.

    Every predicate takes an optional *color*; when omitted the side to move
    is evaluated.
    """

    # Product policy:
    # - Claim-based draws: 50-move rule, threefold repetition.
    # - Automatic draws: insufficient material, 75-move rule, fivefold repetition.
    # Repetition needs game history, so GameState owns those two.

    @staticmethod
    def is_in_check(position: Position, color: Color | None = None) -> bool:
        color = position.side_to_move if color is None else color
        return is_in_check(position.board, color)

    @staticmethod
    def is_checkmate(position: Position, color: Color | None = None) -> bool:
        return Rules.status(position, color) == GameStatus.CHECKMATE

    @staticmethod
    def is_stalemate(position: Position, color: Color | None = None) -> bool:
        return Rules.status(position, color) == GameStatus.STALEMATE

    @staticmethod
    def status(position: Position, color: Color | None = None) -> GameStatus:
        """Checkmate > Stalemate > Check > Normal."""
        color = position.side_to_move if color is None else color
        in_check = is_in_check(position.board, color)
        if not MoveGenerator(position).has_legal_move(color):
            return GameStatus.CHECKMATE if in_check else GameStatus.STALEMATE
        return GameStatus.CHECK if in_check else GameStatus.NORMAL

    @staticmethod
    def is_insufficient_material(position: Position) -> bool:
        """K vs K, K+B vs K, K+N vs K, K+B vs K+B (same-color bishops)."""
        board = position.board
        others = [
            (sq, piece)
            for sq, piece in board.occupied()
            if piece.piece_type != PieceType.KING
        ]

        # K vs K
        if not others:
            return True

        # K+minor vs K
        if len(others) == 1:
            return others[0][1].piece_type in _MINOR_PIECES

        # K+B vs K+B with same-colour bishops
        if len(others) == 2:
            (sq_a, a), (sq_b, b) = others
            if (
                a.piece_type == PieceType.BISHOP
                and b.piece_type == PieceType.BISHOP
                and a.color != b.color
            ):
                return (sq_a.row + sq_a.col) % 2 == (sq_b.row + sq_b.col) % 2

        return False

    @staticmethod
    def is_fifty_move_rule(position: Position) -> bool:
        return position.halfmove_clock >= 100  # 100 half-moves = 50 full moves

    @staticmethod
    def is_seventy_five_move_rule(position: Position) -> bool:
        return position.halfmove_clock >= 150  # 150 half-moves = 75 full moves

    @staticmethod
    def automatic_draw_reason(position: Position) -> GameEndReason:
        """Draw that applies without a claim, or ``GameEndReason.NONE``."""
        if Rules.is_insufficient_material(position):
            return GameEndReason.INSUFFICIENT_MATERIAL
        if Rules.is_seventy_five_move_rule(position):
            return GameEndReason.SEVENTY_FIVE_MOVE_RULE
        return GameEndReason.NONE

    @staticmethod
    def game_result(position: Position) -> GameResult:
        """Determine the current game result (repetition not considered)."""
        status = Rules.status(position)
        if status == GameStatus.CHECKMATE:
            return (
                GameResult.BLACK_WINS
                if position.side_to_move == Color.WHITE
                else GameResult.WHITE_WINS
            )
        if status == GameStatus.STALEMATE:
            return GameResult.DRAW

        if Rules.automatic_draw_reason(position) != GameEndReason.NONE:
            return GameResult.DRAW

        return GameResult.IN_PROGRESS
