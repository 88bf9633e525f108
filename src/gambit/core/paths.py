"""Path clearing: whether a piece's line to a destination is unobstructed."""

from __future__ import annotations

from gambit.core.board import Board
from gambit.core.enums import MoveAxis, PieceType
from gambit.core.piece import Piece
from gambit.core.types import Coord, squares_between


def classify_axis(origin: Coord, dest: Coord) -> MoveAxis:
    """Same row is horizontal, same column vertical, anything else diagonal."""
    if origin.row == dest.row:
        return MoveAxis.HORIZONTAL
    if origin.col == dest.col:
        return MoveAxis.VERTICAL
    return MoveAxis.DIAGONAL


def is_line_clear(board: Board, origin: Coord, dest: Coord) -> bool:
    """No piece on any square strictly between *origin* and *dest*."""
    return all(board.is_empty(sq) for sq in squares_between(origin, dest))


def is_path_clear(board: Board, origin: Coord, dest: Coord) -> bool:
    """Whether the piece on *origin* may travel to *dest* given occupancy.

    *dest* is assumed to be in the piece's move set.  Knights jump; pawns
    capture only diagonally and advance only onto empty squares; every other
    piece needs the squares strictly between origin and destination empty.
    """
    piece = board[origin]
    if piece is None:
        return False
    if piece.piece_type == PieceType.KNIGHT:
        return True
    if piece.piece_type == PieceType.PAWN:
        return _is_pawn_path_clear(board, piece, origin, dest)
    return is_line_clear(board, origin, dest)


def _is_pawn_path_clear(board: Board, pawn: Piece, origin: Coord, dest: Coord) -> bool:
    target = board[dest]

    if classify_axis(origin, dest) == MoveAxis.DIAGONAL:
        return target is not None and target.color != pawn.color

    if target is not None:
        return False
    # Double step: the square jumped over must be empty too.
    return is_line_clear(board, origin, dest)
