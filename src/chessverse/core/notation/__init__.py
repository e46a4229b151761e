"""Notation package: FEN parsing/serialization and SAN rendering."""

from chessverse.core.notation.fen import STARTING_FEN, position_from_fen, position_to_fen
from chessverse.core.notation.san import move_to_san

__all__ = [
    "STARTING_FEN",
    "position_from_fen",
    "position_to_fen",
    "move_to_san",
]
