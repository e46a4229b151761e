"""Tests for attack detection."""

from chessverse.core.attacks import (
    KING_TARGETS,
    KNIGHT_TARGETS,
    is_in_check,
    is_square_attacked,
)
from chessverse.core.board import Board
from chessverse.core.enums import Color, PieceType
from chessverse.core.notation import position_from_fen
from chessverse.core.piece import Piece
from chessverse.core.types import A1, E4, H8, SQUARES, parse_square


def _board(**placement: str) -> Board:
    """Board from keyword squares, e.g. ``_board(e1="K", e8="k")``."""
    return Board.from_pieces(
        {name: Piece.from_char(ch) for name, ch in placement.items()}
    )


class TestTables:
    def test_knight_targets_center_and_corner(self) -> None:
        assert len(KNIGHT_TARGETS[E4.ordinal]) == 8
        assert len(KNIGHT_TARGETS[A1.ordinal]) == 2

    def test_king_targets_corner(self) -> None:
        assert set(KING_TARGETS[H8.ordinal]) == {
            parse_square("g8"),
            parse_square("g7"),
            parse_square("h7"),
        }


class TestPawnAttacks:
    def test_white_pawn_attacks_diagonals(self) -> None:
        board = _board(e4="P")
        assert is_square_attacked(board, parse_square("d5"), Color.WHITE)
        assert is_square_attacked(board, parse_square("f5"), Color.WHITE)

    def test_pawn_push_square_is_not_attacked(self) -> None:
        board = _board(e4="P")
        assert not is_square_attacked(board, parse_square("e5"), Color.WHITE)

    def test_black_pawn_attacks_downward(self) -> None:
        board = _board(e5="p")
        assert is_square_attacked(board, parse_square("d4"), Color.BLACK)
        assert is_square_attacked(board, parse_square("f4"), Color.BLACK)
        assert not is_square_attacked(board, parse_square("d6"), Color.BLACK)

    def test_pawn_does_not_wrap_around_edge(self) -> None:
        board = _board(h4="P")
        assert not is_square_attacked(board, parse_square("a5"), Color.WHITE)
        assert is_square_attacked(board, parse_square("g5"), Color.WHITE)


class TestPieceAttacks:
    def test_knight(self) -> None:
        board = _board(g1="N")
        assert is_square_attacked(board, parse_square("f3"), Color.WHITE)
        assert is_square_attacked(board, parse_square("e2"), Color.WHITE)
        assert not is_square_attacked(board, parse_square("g3"), Color.WHITE)

    def test_rook_blocked(self) -> None:
        board = _board(a1="R", a4="p")
        assert is_square_attacked(board, parse_square("a4"), Color.WHITE)
        assert not is_square_attacked(board, parse_square("a5"), Color.WHITE)

    def test_bishop_diagonal_only(self) -> None:
        board = _board(c1="B")
        assert is_square_attacked(board, parse_square("h6"), Color.WHITE)
        assert not is_square_attacked(board, parse_square("c2"), Color.WHITE)

    def test_queen_both_directions(self) -> None:
        board = _board(d1="Q")
        assert is_square_attacked(board, parse_square("d8"), Color.WHITE)
        assert is_square_attacked(board, parse_square("h5"), Color.WHITE)

    def test_king_adjacent(self) -> None:
        board = _board(e1="K")
        assert is_square_attacked(board, parse_square("d2"), Color.WHITE)
        assert not is_square_attacked(board, parse_square("e3"), Color.WHITE)

    def test_own_color_not_counted(self) -> None:
        board = _board(a1="R")
        assert not is_square_attacked(board, parse_square("a5"), Color.BLACK)

    def test_initial_position_attacks(self) -> None:
        board = Board.initial()
        # Third rank is covered by White, sixth by Black, the middle by nobody.
        assert all(is_square_attacked(board, sq, Color.WHITE) for sq in SQUARES[40:48])
        assert all(is_square_attacked(board, sq, Color.BLACK) for sq in SQUARES[16:24])
        assert not any(
            is_square_attacked(board, sq, color)
            for sq in SQUARES[24:40]
            for color in Color
        )


class TestIsInCheck:
    def test_initial_not_in_check(self) -> None:
        board = Board.initial()
        assert not is_in_check(board, Color.WHITE)
        assert not is_in_check(board, Color.BLACK)

    def test_rook_check(self) -> None:
        board = _board(e1="K", e8="r")
        assert is_in_check(board, Color.WHITE)

    def test_check_blocked(self) -> None:
        board = _board(e1="K", e4="N", e8="r")
        assert not is_in_check(board, Color.WHITE)

    def test_pawn_check(self) -> None:
        board = _board(e1="K", d2="p")
        assert is_in_check(board, Color.WHITE)

    def test_no_king_is_never_in_check(self) -> None:
        board = _board(e8="r")
        assert not is_in_check(board, Color.WHITE)

    def test_fools_mate_position(self) -> None:
        pos = position_from_fen(
            "rnb1kbnr/pppp1ppp/8/4p3/6Pq/5P2/PPPPP2P/RNBQKBNR w KQkq - 1 3"
        )
        assert is_in_check(pos.board, Color.WHITE)
        assert pos.board[parse_square("h4")] == Piece(Color.BLACK, PieceType.QUEEN)
