"""Tests for house-rule move policies."""

from chessverse.core.enums import PieceType
from chessverse.core.move import Move
from chessverse.game.policies import BASE_SET_COUNTS, promotion_cap_policy
from chessverse.game.state import GameState


def _state(fen: str) -> GameState:
    state = GameState()
    state.setup(fen)
    return state


class TestPromotionCap:
    def test_base_set_counts(self) -> None:
        assert BASE_SET_COUNTS[PieceType.QUEEN] == 1
        assert BASE_SET_COUNTS[PieceType.KNIGHT] == 2
        assert PieceType.PAWN not in BASE_SET_COUNTS

    def test_queen_blocked_while_original_remains(self) -> None:
        state = _state("4k3/P7/8/8/8/8/8/3QK3 w - - 0 1")
        policy = promotion_cap_policy()
        message = policy(state, Move.from_uci("a7a8q"))
        assert message == "You already have the maximum number of queens on the board."

    def test_queen_allowed_after_losing_it(self) -> None:
        state = _state("4k3/P7/8/8/8/8/8/4K3 w - - 0 1")
        assert promotion_cap_policy()(state, Move.from_uci("a7a8q")) is None

    def test_two_knights_block_a_third(self) -> None:
        state = _state("4k3/P7/8/8/8/8/8/1N2KN2 w - - 0 1")
        policy = promotion_cap_policy()
        assert policy(state, Move.from_uci("a7a8n")) is not None
        assert policy(state, Move.from_uci("a7a8b")) is None

    def test_non_promotion_ignored(self) -> None:
        state = _state("4k3/P7/8/8/8/8/8/3QK3 w - - 0 1")
        assert promotion_cap_policy()(state, Move.from_uci("d1d2")) is None

    def test_custom_limits(self) -> None:
        state = _state("4k3/P7/8/8/8/8/8/3QK3 w - - 0 1")
        policy = promotion_cap_policy({PieceType.QUEEN: 2})
        assert policy(state, Move.from_uci("a7a8q")) is None

    def test_unlisted_piece_type_unlimited(self) -> None:
        state = _state("4k3/P7/8/8/8/8/8/1N2KN2 w - - 0 1")
        policy = promotion_cap_policy({PieceType.QUEEN: 1})
        assert policy(state, Move.from_uci("a7a8n")) is None

    def test_counts_mover_only(self) -> None:
        state = _state("3qk3/8/8/8/8/8/p7/4K3 b - - 0 1")
        assert promotion_cap_policy()(state, Move.from_uci("a2a1q")) is not None
        state = _state("4k3/8/8/8/8/8/p7/3QK3 b - - 0 1")
        assert promotion_cap_policy()(state, Move.from_uci("a2a1q")) is None
