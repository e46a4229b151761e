"""House rules applied by the controller on top of the chess rules.

A policy sees the game and a move that already passed rule validation and
returns ``None`` to allow it or a short message to refuse it. Policies never
live in the engine: they are application choices, not chess.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import TYPE_CHECKING

from chessverse.core.enums import PieceType

if TYPE_CHECKING:
    from chessverse.core.move import Move
    from chessverse.game.state import GameState

MovePolicy = Callable[["GameState", "Move"], "str | None"]

# How many of each promotable piece a side starts with.
BASE_SET_COUNTS: dict[PieceType, int] = {
    PieceType.QUEEN: 1,
    PieceType.ROOK: 2,
    PieceType.BISHOP: 2,
    PieceType.KNIGHT: 2,
}


def promotion_cap_policy(
    limits: Mapping[PieceType, int] | None = None,
) -> MovePolicy:
    """Refuse promoting to a piece the mover already has *limits* of on the board.

    By default the limits are the base-set counts, so a side still holding its
    queen cannot promote to a second one.
    """
    caps = dict(BASE_SET_COUNTS if limits is None else limits)

    def policy(state: GameState, move: Move) -> str | None:
        if move.promotion is None or move.promotion not in caps:
            return None
        color = state.side_to_move
        on_board = state.position.board.count(color, move.promotion)
        if on_board >= caps[move.promotion]:
            name = move.promotion.name.lower()
            return f"You already have the maximum number of {name}s on the board."
        return None

    return policy
