"""Value objects passed to display and transport collaborators."""

from __future__ import annotations

from dataclasses import dataclass

from gambit.core.enums import Color
from gambit.core.types import Coord


@dataclass(frozen=True, slots=True)
class MoveNotification:
    """What changed on the board after an accepted move.

    ``glyph`` is the symbol now standing on ``destination`` (a queen after a
    promotion, empty after a castle that vacated the second square).  For a
    castle, ``king_square`` and ``rook_square`` give where both pieces landed.
    """

    origin: Coord
    destination: Coord
    glyph: str
    is_checkmate: bool = False
    is_castle: bool = False
    king_square: Coord | None = None
    rook_square: Coord | None = None
    is_check: bool = False

    @property
    def changed_squares(self) -> frozenset[Coord]:
        """Every square a display needs to redraw."""
        squares = {self.origin, self.destination}
        if self.king_square is not None:
            squares.add(self.king_square)
        if self.rook_square is not None:
            squares.add(self.rook_square)
        return frozenset(squares)


@dataclass(frozen=True, slots=True)
class ResetNotification:
    """The whole board was replaced (new game or load)."""

    side_to_move: Color


Notification = MoveNotification | ResetNotification


@dataclass(frozen=True, slots=True)
class MoveIntent:
    """A move as sent between peers; always re-validated on arrival."""

    origin: Coord
    destination: Coord

    def to_tokens(self) -> str:
        """Compact text form: ``"r c r c"``."""
        return f"{self.origin.row} {self.origin.col} {self.destination.row} {self.destination.col}"

    @classmethod
    def from_tokens(cls, text: str) -> MoveIntent:
        parts = text.split()
        if len(parts) != 4:
            raise ValueError(f"Invalid move intent (need 4 fields): {text!r}")
        try:
            r1, c1, r2, c2 = (int(p) for p in parts)
        except ValueError:
            raise ValueError(f"Invalid move intent: {text!r}") from None
        return cls(Coord(r1, c1), Coord(r2, c2))
