"""Core domain layer: pure chess rules with zero external dependencies.

Quick start::

    from chessverse.core import MoveGenerator, Position, Rules, apply_move

    pos = Position.initial()
    gen = MoveGenerator(pos)
    move = gen.all_legal_moves()[0]
    pos = apply_move(pos, move).position
    print(Rules.status(pos))
"""

from chessverse.core.attacks import is_in_check, is_square_attacked
from chessverse.core.board import Board
from chessverse.core.castling import CastlingRights, SideCastling
from chessverse.core.enums import Color, GameEndReason, GameResult, GameStatus, PieceType
from chessverse.core.executor import AppliedMove, apply_move
from chessverse.core.move import Move
from chessverse.core.move_generator import MoveGenerator
from chessverse.core.notation import (
    STARTING_FEN,
    move_to_san,
    position_from_fen,
    position_to_fen,
)
from chessverse.core.piece import Piece
from chessverse.core.position import Position
from chessverse.core.rules import Rules
from chessverse.core.types import Square, make_square, parse_square, square_name

__all__ = [
    # Enums
    "Color",
    "GameEndReason",
    "GameResult",
    "GameStatus",
    "PieceType",
    # Types / helpers
    "Square",
    "make_square",
    "parse_square",
    "square_name",
    # Domain objects
    "AppliedMove",
    "Board",
    "CastlingRights",
    "Move",
    "MoveGenerator",
    "Piece",
    "Position",
    "Rules",
    "SideCastling",
    # Operations
    "apply_move",
    "is_in_check",
    "is_square_attacked",
    # Notation
    "STARTING_FEN",
    "move_to_san",
    "position_from_fen",
    "position_to_fen",
]
