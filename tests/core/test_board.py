"""Tests for Board."""

import pytest

from chessverse.core.board import Board
from chessverse.core.enums import Color, PieceType
from chessverse.core.piece import Piece
from chessverse.core.types import (
    A1, B1, C1, D1, E1, F1, G1, H1,
    E2,
    A8, B8, C8, D8, E8, F8, G8, H8,
    E4,
    SQUARES,
)


class TestBoardInitial:
    def test_white_king_position(self) -> None:
        board = Board.initial()
        assert board[E1] == Piece(Color.WHITE, PieceType.KING)

    def test_black_king_position(self) -> None:
        board = Board.initial()
        assert board[E8] == Piece(Color.BLACK, PieceType.KING)

    def test_white_back_rank(self) -> None:
        board = Board.initial()
        expected = [
            (A1, PieceType.ROOK), (B1, PieceType.KNIGHT), (C1, PieceType.BISHOP),
            (D1, PieceType.QUEEN), (E1, PieceType.KING), (F1, PieceType.BISHOP),
            (G1, PieceType.KNIGHT), (H1, PieceType.ROOK),
        ]
        for sq, pt in expected:
            assert board[sq] == Piece(Color.WHITE, pt), f"Mismatch at square {sq}"

    def test_black_back_rank(self) -> None:
        board = Board.initial()
        expected = [
            (A8, PieceType.ROOK), (B8, PieceType.KNIGHT), (C8, PieceType.BISHOP),
            (D8, PieceType.QUEEN), (E8, PieceType.KING), (F8, PieceType.BISHOP),
            (G8, PieceType.KNIGHT), (H8, PieceType.ROOK),
        ]
        for sq, pt in expected:
            assert board[sq] == Piece(Color.BLACK, pt), f"Mismatch at square {sq}"

    def test_white_pawns(self) -> None:
        board = Board.initial()
        pawns = board.pieces(Color.WHITE, PieceType.PAWN)
        assert len(pawns) == 8
        assert all(sq.row == 6 for sq in pawns)  # rank 2

    def test_black_pawns(self) -> None:
        board = Board.initial()
        pawns = board.pieces(Color.BLACK, PieceType.PAWN)
        assert len(pawns) == 8
        assert all(sq.row == 1 for sq in pawns)  # rank 7

    def test_empty_middle(self) -> None:
        board = Board.initial()
        for sq in SQUARES[16:48]:
            assert board[sq] is None

    def test_piece_at_is_total(self) -> None:
        board = Board.empty()
        assert all(board.piece_at(sq) is None for sq in SQUARES)


class TestBoardValueSemantics:
    def test_with_changes_leaves_original(self) -> None:
        board = Board.initial()
        moved = board.with_changes({E2: None, E4: Piece(Color.WHITE, PieceType.PAWN)})
        assert board[E2] == Piece(Color.WHITE, PieceType.PAWN)
        assert board[E4] is None
        assert moved[E2] is None
        assert moved[E4] == Piece(Color.WHITE, PieceType.PAWN)

    def test_copy_is_equal_but_distinct(self) -> None:
        board = Board.initial()
        clone = board.copy()
        assert clone == board
        assert clone is not board
        assert hash(clone) == hash(board)

    def test_no_item_assignment(self) -> None:
        board = Board.initial()
        with pytest.raises(TypeError):
            board[E4] = Piece(Color.WHITE, PieceType.QUEEN)  # type: ignore[index]

    def test_wrong_size_rejected(self) -> None:
        with pytest.raises(ValueError):
            Board([None] * 10)


class TestBoardQueries:
    def test_king_square(self) -> None:
        board = Board.initial()
        assert board.king_square(Color.WHITE) == E1
        assert board.king_square(Color.BLACK) == E8

    def test_missing_king_is_none(self) -> None:
        board = Board.from_pieces({"e1": Piece(Color.WHITE, PieceType.KING)})
        assert board.king_square(Color.BLACK) is None

    def test_count(self) -> None:
        board = Board.initial()
        assert board.count(Color.WHITE, PieceType.KNIGHT) == 2
        assert board.count(Color.BLACK, PieceType.QUEEN) == 1

    def test_rows_rank_eight_first(self) -> None:
        rows = Board.initial().rows()
        assert len(rows) == 8
        assert rows[0][4] == Piece(Color.BLACK, PieceType.KING)
        assert rows[7][4] == Piece(Color.WHITE, PieceType.KING)

    def test_repr(self) -> None:
        text = repr(Board.initial())
        lines = text.splitlines()
        assert lines[0] == "8 r n b q k b n r"
        assert lines[7] == "1 R N B Q K B N R"
        assert lines[8] == "  a b c d e f g h"
