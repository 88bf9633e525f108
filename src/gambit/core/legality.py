"""Move legality: selection, path clearing, self-check rollback, castling.

:class:`MoveValidator` applies a candidate move provisionally, asks
:class:`~gambit.core.rules.Rules` whether the mover's own king is attacked,
and either keeps the result or restores the touched cells.  Validation
(`is_legal_destination`) and commit (`apply`) share that one procedure.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from gambit.core.board import BoardSnapshot
from gambit.core.enums import CastleSide, Color, PieceType
from gambit.core.messages import MoveNotification
from gambit.core.paths import is_line_clear, is_path_clear
from gambit.core.piece import Piece, promotion_row
from gambit.core.position import Position
from gambit.core.rules import Rules
from gambit.core.types import Coord

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class _Trial:
    """A provisionally executed move, ready to be kept or rolled back."""

    snapshot: BoardSnapshot
    is_castle: bool = False
    king_square: Coord | None = None
    rook_square: Coord | None = None


def castle_side(king: Piece, rook: Piece) -> CastleSide:
    """Three squares apart is the short side, anything else the long side."""
    return CastleSide.SHORT if abs(rook.col - king.col) == 3 else CastleSide.LONG


def castle_targets(king: Piece, rook: Piece) -> tuple[Coord, Coord]:
    """Landing squares ``(king, rook)``: king two steps toward the rook,
    rook on the square the king crossed."""
    step = 1 if rook.col > king.col else -1
    king_dest = Coord(king.row, king.col + 2 * step)
    rook_dest = Coord(king.row, king_dest.col - step)
    return king_dest, rook_dest


class MoveValidator:
    """Decides and applies moves for the side to move in a :class:`Position`.

    The validator mutates the board while testing a move but always restores
    it before reporting a rejection.
    """

    __slots__ = ("_pos", "_board")

    def __init__(self, position: Position) -> None:
        self._pos = position
        self._board = position.board

    # -- Public API ---------------------------------------------------------

    def is_legal_origin(self, coord: Coord) -> bool:
        """A first selection must hold a piece of the side to move."""
        if not coord.in_bounds:
            return False
        piece = self._board[coord]
        return piece is not None and piece.color == self._pos.side_to_move

    def is_legal_destination(self, origin: Coord, dest: Coord) -> bool:
        """Would ``origin -> dest`` be accepted?  Leaves the board unchanged."""
        trial = self._try(origin, dest)
        if trial is None:
            return False
        self._board.restore(trial.snapshot)
        return True

    def legal_destinations(self, origin: Coord) -> set[Coord]:
        """Every square the piece on *origin* may legally move to.

        Castling partners (the friendly rook or king) are included.
        """
        if not self.is_legal_origin(origin):
            return set()
        piece = self._board[origin]
        assert piece is not None
        candidates = set(piece.move_set())
        if piece.piece_type in (PieceType.KING, PieceType.ROOK) and not piece.has_moved:
            candidates.update(
                other.position
                for other in self._board.pieces(piece.color)
                if other.piece_type in (PieceType.KING, PieceType.ROOK)
            )
        return {dest for dest in candidates if self.is_legal_destination(origin, dest)}

    def apply(self, origin: Coord, dest: Coord) -> MoveNotification | None:
        """Commit ``origin -> dest``.

        Returns the change notification, or ``None`` if the move is illegal
        (in which case nothing on the board or turn has changed).
        """
        trial = self._try(origin, dest)
        if trial is None:
            _LOGGER.debug("Rejected move %s -> %s", origin, dest)
            return None

        mover = self._pos.side_to_move
        if not trial.is_castle:
            self._promote_if_needed(dest)

        self._pos.flip_turn()
        opponent = mover.opposite
        is_check = Rules.is_in_check(self._board, opponent)
        is_checkmate = is_check and Rules.is_checkmate(self._board, opponent)

        landed = self._board[dest]
        notification = MoveNotification(
            origin=origin,
            destination=dest,
            glyph=landed.glyph if landed is not None else "",
            is_checkmate=is_checkmate,
            is_castle=trial.is_castle,
            king_square=trial.king_square,
            rook_square=trial.rook_square,
            is_check=is_check,
        )
        _LOGGER.debug(
            "%s played %s -> %s%s%s",
            mover,
            origin,
            dest,
            " (castle)" if trial.is_castle else "",
            " checkmate" if is_checkmate else "",
        )
        return notification

    # -- Trial execution (private) ------------------------------------------

    def _try(self, origin: Coord, dest: Coord) -> _Trial | None:
        """Provisionally execute the move; ``None`` means rejected and undone."""
        if not dest.in_bounds or not self.is_legal_origin(origin):
            return None

        board = self._board
        piece = board[origin]
        target = board[dest]
        assert piece is not None

        castle = self._castle_pair(piece, target)
        if castle is not None:
            return self._try_castle(*castle)

        if dest not in piece.move_set():
            return None
        if target is not None and target.color == piece.color:
            return None
        if not is_path_clear(board, origin, dest):
            return None

        snapshot = board.snapshot((origin, dest))
        board.relocate(origin, dest)
        if Rules.is_in_check(board, piece.color):
            board.restore(snapshot)
            return None
        return _Trial(snapshot)

    def _castle_pair(
        self, first: Piece, second: Piece | None
    ) -> tuple[Piece, Piece] | None:
        """``(king, rook)`` when the two selections form a castling pair."""
        if second is None or second.color != first.color:
            return None
        if first.has_moved or second.has_moved:
            return None
        kinds = {first.piece_type, second.piece_type}
        if kinds != {PieceType.KING, PieceType.ROOK}:
            return None
        if first.piece_type == PieceType.KING:
            return first, second
        return second, first

    def _try_castle(self, king: Piece, rook: Piece) -> _Trial | None:
        board = self._board
        color: Color = king.color
        king_sq = king.position
        rook_sq = rook.position

        if king.row != rook.row or abs(rook.col - king.col) < 3:
            return None
        if Rules.is_in_check(board, color):
            return None
        if not is_line_clear(board, king_sq, rook_sq):
            return None

        king_dest, rook_dest = castle_targets(king, rook)
        snapshot = board.snapshot((king_sq, rook_sq, king_dest, rook_dest))
        board.relocate(king_sq, king_dest)
        board.relocate(rook_sq, rook_dest)
        if Rules.is_in_check(board, color):
            board.restore(snapshot)
            return None

        _LOGGER.debug("%s castles %s side", color, castle_side(king, rook).name.lower())
        return _Trial(snapshot, is_castle=True, king_square=king_dest, rook_square=rook_dest)

    def _promote_if_needed(self, dest: Coord) -> None:
        piece = self._board[dest]
        if piece is None or piece.piece_type != PieceType.PAWN:
            return
        if dest.row != promotion_row(piece.color):
            return
        queen = Piece(PieceType.QUEEN, piece.color, dest.row, dest.col, has_moved=True)
        self._board.place(queen)
        _LOGGER.debug("%s pawn promoted on %s", piece.color, dest)
