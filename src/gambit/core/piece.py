"""Piece catalog: six piece kinds sharing one record type.

Each kind contributes a geometry function that lists the squares reachable
from the piece's current square, clipped to the board and ignoring
occupancy.  All legality (blocking, captures, check) lives elsewhere.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field

from gambit.core.enums import Color, PieceType
from gambit.core.types import Coord, in_bounds

KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (1, 2),
    (1, -2),
    (-1, 2),
    (-1, -2),
    (2, 1),
    (2, -1),
    (-2, 1),
    (-2, -1),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (0, 1),
    (0, -1),
    (1, 0),
    (1, 1),
    (1, -1),
    (-1, 0),
    (-1, 1),
    (-1, -1),
)

BISHOP_DIRS: tuple[tuple[int, int], ...] = ((1, 1), (1, -1), (-1, 1), (-1, -1))
ROOK_DIRS: tuple[tuple[int, int], ...] = ((1, 0), (-1, 0), (0, 1), (0, -1))
QUEEN_DIRS: tuple[tuple[int, int], ...] = BISHOP_DIRS + ROOK_DIRS

# Save-file short code <-> PieceType
_SHORT_CODES: dict[PieceType, str] = {
    PieceType.PAWN: "P",
    PieceType.KNIGHT: "Kn",
    PieceType.BISHOP: "B",
    PieceType.ROOK: "R",
    PieceType.QUEEN: "Q",
    PieceType.KING: "K",
}

_CODE_MAP: dict[str, PieceType] = {v: k for k, v in _SHORT_CODES.items()}

_UNICODE: dict[tuple[Color, PieceType], str] = {
    (Color.WHITE, PieceType.PAWN): "♙",
    (Color.WHITE, PieceType.KNIGHT): "♘",
    (Color.WHITE, PieceType.BISHOP): "♗",
    (Color.WHITE, PieceType.ROOK): "♖",
    (Color.WHITE, PieceType.QUEEN): "♕",
    (Color.WHITE, PieceType.KING): "♔",
    (Color.BLACK, PieceType.PAWN): "♟",
    (Color.BLACK, PieceType.KNIGHT): "♞",
    (Color.BLACK, PieceType.BISHOP): "♝",
    (Color.BLACK, PieceType.ROOK): "♜",
    (Color.BLACK, PieceType.QUEEN): "♛",
    (Color.BLACK, PieceType.KING): "♚",
}


def pawn_direction(color: Color) -> int:
    """Row step of a forward pawn move for *color*."""
    return -1 if color == Color.WHITE else 1


def promotion_row(color: Color) -> int:
    """The far back rank a pawn of *color* promotes on."""
    return 0 if color == Color.WHITE else 7


@dataclass(eq=False, slots=True)
class Piece:
    """A piece on the board.

    Pieces compare and hash by identity: two white pawns are distinct
    entries in the piece index even though they look alike.
    """

    piece_type: PieceType
    color: Color
    row: int
    col: int
    has_moved: bool = field(default=False)

    # ── Accessors ────────────────────────────────────────────────────────

    @property
    def position(self) -> Coord:
        return Coord(self.row, self.col)

    @property
    def short_code(self) -> str:
        """Save-file code, e.g. ``Kn`` for a knight."""
        return _SHORT_CODES[self.piece_type]

    @property
    def glyph(self) -> str:
        """Unicode chess symbol, e.g. ♞."""
        return _UNICODE[(self.color, self.piece_type)]

    # ── Geometry ─────────────────────────────────────────────────────────

    def move_set(self) -> set[Coord]:
        """Squares reachable by raw geometry from the current square."""
        return _GEOMETRY[self.piece_type](self)

    def move(self, row: int, col: int) -> None:
        """Relocate without validation and mark the piece as moved."""
        self.row = row
        self.col = col
        self.has_moved = True

    # ── Construction ─────────────────────────────────────────────────────

    @classmethod
    def from_code(cls, code: str, color: Color, row: int, col: int) -> Piece:
        """Create a piece from its save-file short code."""
        try:
            piece_type = _CODE_MAP[code]
        except KeyError:
            raise ValueError(f"Invalid piece code: {code!r}") from None
        return cls(piece_type, color, row, col)

    def __repr__(self) -> str:
        moved = ", moved" if self.has_moved else ""
        return f"Piece({self.color} {self.piece_type.name.lower()} @ {self.position}{moved})"


# ── Per-kind geometry ────────────────────────────────────────────────────────


def _rays(piece: Piece, directions: tuple[tuple[int, int], ...]) -> set[Coord]:
    moves: set[Coord] = set()
    for d_row, d_col in directions:
        row = piece.row + d_row
        col = piece.col + d_col
        while in_bounds(row, col):
            moves.add(Coord(row, col))
            row += d_row
            col += d_col
    return moves


def _offsets(piece: Piece, offsets: tuple[tuple[int, int], ...]) -> set[Coord]:
    return {
        Coord(piece.row + d_row, piece.col + d_col)
        for d_row, d_col in offsets
        if in_bounds(piece.row + d_row, piece.col + d_col)
    }


def _pawn_moves(piece: Piece) -> set[Coord]:
    step = pawn_direction(piece.color)
    candidates = [
        (piece.row + step, piece.col),
        (piece.row + step, piece.col + 1),
        (piece.row + step, piece.col - 1),
    ]
    if not piece.has_moved:
        candidates.append((piece.row + 2 * step, piece.col))
    return {Coord(row, col) for row, col in candidates if in_bounds(row, col)}


_GEOMETRY: dict[PieceType, Callable[[Piece], set[Coord]]] = {
    PieceType.PAWN: _pawn_moves,
    PieceType.KNIGHT: lambda p: _offsets(p, KNIGHT_OFFSETS),
    PieceType.BISHOP: lambda p: _rays(p, BISHOP_DIRS),
    PieceType.ROOK: lambda p: _rays(p, ROOK_DIRS),
    PieceType.QUEEN: lambda p: _rays(p, QUEEN_DIRS),
    PieceType.KING: lambda p: _offsets(p, KING_OFFSETS),
}
