"""Check and checkmate detection."""

from __future__ import annotations

from gambit.core.board import Board
from gambit.core.enums import Color
from gambit.core.paths import is_path_clear
from gambit.core.piece import Piece
from gambit.core.types import Coord


class Rules:
    """Static rule-checker that operates on a :class:`Board`."""

    @staticmethod
    def attacks(board: Board, origin: Coord, target: Coord) -> bool:
        """Could the piece on *origin* move onto *target* right now?

        Uses the same path rules as a real move, so a pawn only attacks
        diagonally and only when *target* is occupied.
        """
        piece = board[origin]
        if piece is None or target not in piece.move_set():
            return False
        return is_path_clear(board, origin, target)

    @staticmethod
    def candidate_moves(board: Board, piece: Piece) -> list[Coord]:
        """Path-clear destinations of *piece* not held by a friendly piece.

        Self-check is *not* filtered here.
        """
        origin = piece.position
        moves: list[Coord] = []
        for dest in sorted(piece.move_set()):
            occupant = board[dest]
            if occupant is not None and occupant.color == piece.color:
                continue
            if is_path_clear(board, origin, dest):
                moves.append(dest)
        return moves

    @staticmethod
    def is_in_check(board: Board, color: Color) -> bool:
        """Is *color*'s king attacked by any enemy piece?"""
        king_sq = board.king_square(color)
        if king_sq is None:
            return False
        return any(
            Rules.attacks(board, enemy.position, king_sq)
            for enemy in board.pieces(color.opposite)
        )

    @staticmethod
    def escapes_check(board: Board, origin: Coord, dest: Coord, color: Color) -> bool:
        """Try *origin* -> *dest*, report whether *color* is out of check, undo."""
        snapshot = board.snapshot((origin, dest))
        board.relocate(origin, dest)
        try:
            return not Rules.is_in_check(board, color)
        finally:
            board.restore(snapshot)

    @staticmethod
    def is_checkmate(board: Board, color: Color) -> bool:
        """Exhaustively search for a move that gets *color* out of check."""
        if not Rules.is_in_check(board, color):
            return False
        for piece in board.pieces(color):
            origin = piece.position
            for dest in Rules.candidate_moves(board, piece):
                if Rules.escapes_check(board, origin, dest, color):
                    return False
        return True
