"""Core enumerations for the chess domain."""

from __future__ import annotations

from enum import Enum, IntEnum, auto


class Color(IntEnum):
    """Side color."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    @classmethod
    def from_white_flag(cls, is_white: bool) -> Color:
        return cls.WHITE if is_white else cls.BLACK

    def __str__(self) -> str:
        return self.name.lower()


class PieceType(IntEnum):
    """Chess piece kinds."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6


class MoveAxis(Enum):
    """Line along which a piece travels between two squares."""

    HORIZONTAL = auto()
    VERTICAL = auto()
    DIAGONAL = auto()


class CastleSide(Enum):
    """Which rook the king castles with."""

    SHORT = auto()
    LONG = auto()
