"""Tests for squares, pieces and moves."""

import pytest

from chessverse.core.enums import Color, PieceType
from chessverse.core.move import Move
from chessverse.core.piece import Piece
from chessverse.core.types import (
    A1, A8, E2, E4, E7, E8, H1, H8,
    Square,
    make_square,
    parse_square,
    square_name,
)


class TestSquareNames:
    def test_corners(self) -> None:
        assert square_name(Square(7, 0)) == "a1"
        assert square_name(Square(0, 0)) == "a8"
        assert square_name(Square(7, 7)) == "h1"
        assert square_name(Square(0, 7)) == "h8"

    def test_constants_match_names(self) -> None:
        assert (A1, A8, H1, H8) == (
            parse_square("a1"), parse_square("a8"), parse_square("h1"), parse_square("h8")
        )

    def test_file_and_rank_formula(self) -> None:
        for row in range(8):
            for col in range(8):
                name = square_name(Square(row, col))
                assert name[0] == chr(ord("a") + col)
                assert name[1] == str(8 - row)

    def test_parse_is_inverse(self) -> None:
        for row in range(8):
            for col in range(8):
                sq = Square(row, col)
                assert parse_square(square_name(sq)) == sq

    @pytest.mark.parametrize("name", ["", "e", "i1", "a9", "a0", "e44"])
    def test_parse_rejects_garbage(self, name: str) -> None:
        with pytest.raises(ValueError):
            parse_square(name)

    def test_make_square_range(self) -> None:
        assert make_square(4, 4) == E4
        with pytest.raises(ValueError):
            make_square(8, 0)

    def test_offset_off_board(self) -> None:
        assert A1.offset(1, 0) is None
        assert A1.offset(-1, 0) == parse_square("a2")


class TestPiece:
    def test_from_char(self) -> None:
        assert Piece.from_char("N") == Piece(Color.WHITE, PieceType.KNIGHT)
        assert Piece.from_char("q") == Piece(Color.BLACK, PieceType.QUEEN)

    def test_invalid_char(self) -> None:
        with pytest.raises(ValueError):
            Piece.from_char("x")

    def test_str_and_symbol(self) -> None:
        piece = Piece(Color.BLACK, PieceType.KNIGHT)
        assert str(piece) == "n"
        assert piece.symbol == "♞"


class TestMove:
    def test_uci(self) -> None:
        assert Move(E2, E4).uci == "e2e4"
        assert str(Move(E7, E8, PieceType.QUEEN)) == "e7e8q"

    def test_from_uci(self) -> None:
        assert Move.from_uci("e2e4") == Move(E2, E4)
        assert Move.from_uci("e7e8N") == Move(E7, E8, PieceType.KNIGHT)

    @pytest.mark.parametrize("text", ["e2", "e2e9", "e7e8k", "e7e8qq"])
    def test_from_uci_rejects_garbage(self, text: str) -> None:
        with pytest.raises(ValueError):
            Move.from_uci(text)
