"""Tests for move application."""

import pytest

from chessverse.core.enums import Color, PieceType
from chessverse.core.executor import apply_move
from chessverse.core.move import Move
from chessverse.core.notation import position_from_fen, position_to_fen
from chessverse.core.piece import Piece
from chessverse.core.position import Position
from chessverse.core.types import parse_square


class TestApplyMove:
    def test_original_position_untouched(self) -> None:
        pos = Position.initial()
        before = position_to_fen(pos)
        apply_move(pos, Move.from_uci("e2e4"))
        assert position_to_fen(pos) == before

    def test_quiet_move(self) -> None:
        after = apply_move(Position.initial(), Move.from_uci("g1f3")).position
        assert after.board[parse_square("f3")] == Piece(Color.WHITE, PieceType.KNIGHT)
        assert after.board[parse_square("g1")] is None
        assert after.side_to_move == Color.BLACK
        assert after.halfmove_clock == 1
        assert after.fullmove_number == 1

    def test_double_step_sets_en_passant_target(self) -> None:
        after = apply_move(Position.initial(), Move.from_uci("e2e4")).position
        assert after.en_passant == parse_square("e3")

    def test_single_step_clears_en_passant_target(self) -> None:
        pos = apply_move(Position.initial(), Move.from_uci("e2e4")).position
        after = apply_move(pos, Move.from_uci("g8f6")).position
        assert after.en_passant is None

    def test_fullmove_increments_after_black(self) -> None:
        pos = apply_move(Position.initial(), Move.from_uci("e2e4")).position
        after = apply_move(pos, Move.from_uci("e7e5")).position
        assert after.fullmove_number == 2
        assert after.side_to_move == Color.WHITE

    def test_capture_reports_victim_and_resets_clock(self) -> None:
        pos = position_from_fen("4k3/8/8/3p4/4N3/8/8/4K3 w - - 7 20")
        applied = apply_move(pos, Move.from_uci("e4d6"))
        assert applied.captured is None
        assert applied.position.halfmove_clock == 8

        pos = position_from_fen("4k3/8/5p2/8/4N3/8/8/4K3 w - - 7 20")
        applied = apply_move(pos, Move.from_uci("e4f6"))
        assert applied.captured == Piece(Color.BLACK, PieceType.PAWN)
        assert applied.position.halfmove_clock == 0

    def test_pawn_move_resets_clock(self) -> None:
        pos = position_from_fen("4k3/8/8/8/8/8/4P3/4K3 w - - 33 40")
        after = apply_move(pos, Move.from_uci("e2e3")).position
        assert after.halfmove_clock == 0

    def test_empty_origin_rejected(self) -> None:
        with pytest.raises(ValueError):
            apply_move(Position.initial(), Move.from_uci("e4e5"))


class TestPromotionApplication:
    FEN = "8/4P3/8/8/8/8/8/k6K w - - 0 1"

    def test_move_choice_wins(self) -> None:
        pos = position_from_fen(self.FEN)
        applied = apply_move(pos, Move.from_uci("e7e8n"), PieceType.ROOK)
        assert applied.promoted == PieceType.KNIGHT
        assert applied.position.board[parse_square("e8")] == Piece(
            Color.WHITE, PieceType.KNIGHT
        )

    def test_argument_choice_used_when_move_has_none(self) -> None:
        pos = position_from_fen(self.FEN)
        applied = apply_move(pos, Move.from_uci("e7e8"), PieceType.ROOK)
        assert applied.promoted == PieceType.ROOK

    def test_defaults_to_queen(self) -> None:
        pos = position_from_fen(self.FEN)
        applied = apply_move(pos, Move.from_uci("e7e8"))
        assert applied.promoted == PieceType.QUEEN
        assert applied.position.board[parse_square("e7")] is None

    def test_non_promotion_reports_none(self) -> None:
        applied = apply_move(Position.initial(), Move.from_uci("e2e4"))
        assert applied.promoted is None
