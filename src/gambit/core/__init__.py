"""Core domain layer — pure chess rules with zero external dependencies.

Quick start::

    from gambit.core import Coord, MoveValidator, Position

    pos = Position.initial()
    validator = MoveValidator(pos)
    note = validator.apply(Coord(6, 4), Coord(4, 4))
"""

from gambit.core.board import Board, BoardSnapshot
from gambit.core.enums import CastleSide, Color, MoveAxis, PieceType
from gambit.core.legality import MoveValidator, castle_side, castle_targets
from gambit.core.messages import (
    MoveIntent,
    MoveNotification,
    Notification,
    ResetNotification,
)
from gambit.core.paths import classify_axis, is_line_clear, is_path_clear
from gambit.core.piece import Piece, pawn_direction, promotion_row
from gambit.core.position import Position
from gambit.core.rules import Rules
from gambit.core.savefile import (
    SaveFormatError,
    dump_game,
    parse_game,
    read_game_file,
    write_game_file,
)
from gambit.core.types import BOARD_SIZE, Coord, all_coords, in_bounds, squares_between

__all__ = [
    # Enums
    "CastleSide",
    "Color",
    "MoveAxis",
    "PieceType",
    # Types / helpers
    "BOARD_SIZE",
    "Coord",
    "all_coords",
    "in_bounds",
    "squares_between",
    # Domain objects
    "Board",
    "BoardSnapshot",
    "MoveValidator",
    "Piece",
    "Position",
    "Rules",
    "castle_side",
    "castle_targets",
    "classify_axis",
    "is_line_clear",
    "is_path_clear",
    "pawn_direction",
    "promotion_row",
    # Messages
    "MoveIntent",
    "MoveNotification",
    "Notification",
    "ResetNotification",
    # Save format
    "SaveFormatError",
    "dump_game",
    "parse_game",
    "read_game_file",
    "write_game_file",
]
