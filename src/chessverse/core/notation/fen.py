"""FEN, the position encoding exchanged with front ends and peers.

The encoding is lossless for everything legality depends on: placement, side
to move, effective castling rights and the en-passant target. Both clocks are
carried as well.
"""

from __future__ import annotations

from chessverse.core.board import Board
from chessverse.core.castling import CastlingRights, SideCastling
from chessverse.core.enums import Color
from chessverse.core.piece import Piece
from chessverse.core.position import Position
from chessverse.core.types import Square, parse_square, square_name

STARTING_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"

_SIDES: dict[str, Color] = {"w": Color.WHITE, "b": Color.BLACK}
# Row holding the en-passant target when the given color is to move.
_EP_ROW: dict[Color, int] = {Color.WHITE: 2, Color.BLACK: 5}


def position_from_fen(fen: str) -> Position:
    """Parse *fen*; raises ``ValueError`` describing the first bad field."""
    parts = fen.split()
    if not (4 <= len(parts) <= 6):
        raise ValueError(f"Invalid FEN (need 4-6 fields): {fen!r}")

    board = _parse_placement(parts[0], fen)
    side = _SIDES.get(parts[1])
    if side is None:
        raise ValueError(f"Invalid FEN side-to-move field: {parts[1]!r}")
    castling = _parse_castling(parts[2])
    ep = _parse_en_passant(parts[3], side)
    halfmove = _parse_counter(parts, 4, default=0, minimum=0)
    fullmove = _parse_counter(parts, 5, default=1, minimum=1)
    return Position(board, side, castling, ep, halfmove, fullmove)


def position_to_fen(pos: Position) -> str:
    """Serialise *pos* to a six-field FEN string."""
    fields = (
        "/".join(_rank_text(row) for row in pos.board.rows()),
        "w" if pos.side_to_move == Color.WHITE else "b",
        _castling_text(pos.castling),
        square_name(pos.en_passant) if pos.en_passant is not None else "-",
        str(pos.halfmove_clock),
        str(pos.fullmove_number),
    )
    return " ".join(fields)


# -- Parsing helpers --------------------------------------------------------


def _parse_placement(placement: str, fen: str) -> Board:
    ranks = placement.split("/")
    if len(ranks) != 8:
        raise ValueError(f"Invalid FEN board (must contain 8 ranks): {fen!r}")
    cells: list[Piece | None] = []
    for rank_text in ranks:
        row: list[Piece | None] = []
        for ch in rank_text:
            if ch.isdigit():
                if not "1" <= ch <= "8":
                    raise ValueError(f"Invalid FEN digit {ch!r}: {fen!r}")
                row.extend([None] * int(ch))
            else:
                row.append(Piece.from_char(ch))
        if len(row) != 8:
            raise ValueError(f"Invalid FEN rank width: {fen!r}")
        cells.extend(row)
    return Board(cells)


def _side_rights(kingside: bool, queenside: bool) -> SideCastling:
    # Neither right left: record it as a king move so both sides stay lost.
    if not (kingside or queenside):
        return SideCastling(king_moved=True)
    return SideCastling(
        kingside_rook_moved=not kingside,
        queenside_rook_moved=not queenside,
    )


def _parse_castling(text: str) -> CastlingRights:
    letters = "" if text == "-" else text
    if len(set(letters)) != len(letters) or not set(letters) <= set("KQkq"):
        raise ValueError(f"Invalid FEN castling field: {text!r}")
    return CastlingRights(
        white=_side_rights("K" in letters, "Q" in letters),
        black=_side_rights("k" in letters, "q" in letters),
    )


def _parse_en_passant(text: str, side: Color) -> Square | None:
    if text == "-":
        return None
    ep = parse_square(text)
    if ep.row not in _EP_ROW.values():
        raise ValueError(f"Invalid FEN en-passant square: {text!r}")
    if ep.row != _EP_ROW[side]:
        raise ValueError(f"Invalid FEN en-passant square for side-to-move: {text!r}")
    return ep


def _parse_counter(parts: list[str], index: int, *, default: int, minimum: int) -> int:
    if len(parts) <= index:
        return default
    try:
        value = int(parts[index])
    except ValueError:
        raise ValueError(f"Invalid FEN clock field: {parts[index]!r}") from None
    if value < minimum:
        raise ValueError(f"Invalid FEN clock field: {parts[index]!r}")
    return value


# -- Serialisation helpers --------------------------------------------------


def _rank_text(row: tuple[Piece | None, ...]) -> str:
    out = ""
    gap = 0
    for piece in row:
        if piece is None:
            gap += 1
            continue
        if gap:
            out += str(gap)
            gap = 0
        out += str(piece)
    return out + (str(gap) if gap else "")


def _castling_text(castling: CastlingRights) -> str:
    text = ""
    for side, kingside, queenside in (
        (castling.white, "K", "Q"),
        (castling.black, "k", "q"),
    ):
        if side.can_castle_kingside:
            text += kingside
        if side.can_castle_queenside:
            text += queenside
    return text or "-"
