"""Board - piece placement on an 8x8 grid with a per-color piece index."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from gambit.core.enums import Color, PieceType
from gambit.core.piece import Piece
from gambit.core.types import BOARD_SIZE, Coord, all_coords

_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


@dataclass(frozen=True, slots=True)
class _CellState:
    coord: Coord
    piece: Piece | None
    has_moved: bool


@dataclass(frozen=True, slots=True)
class BoardSnapshot:
    """Saved contents of a handful of cells, taken before a provisional move."""

    cells: tuple[_CellState, ...]


class Board:
    """Mutable 8x8 board with an incremental piece index.

    Every placement and removal goes through :meth:`place` / :meth:`remove`
    (or :meth:`relocate`, built on both), so the grid and the index can never
    drift apart.
    """

    __slots__ = ("_grid", "_index", "_kings")

    def __init__(self) -> None:
        self._grid: list[list[Piece | None]] = [
            [None] * BOARD_SIZE for _ in range(BOARD_SIZE)
        ]
        # [color] -> live pieces, insertion ordered.
        self._index: dict[Color, dict[Piece, None]] = {
            Color.WHITE: {},
            Color.BLACK: {},
        }
        self._kings: dict[Color, Piece | None] = {Color.WHITE: None, Color.BLACK: None}

    # -- Element access -----------------------------------------------------

    def __getitem__(self, coord: Coord) -> Piece | None:
        row, col = coord
        return self._grid[row][col]

    def is_empty(self, coord: Coord) -> bool:
        return self[coord] is None

    # -- Mutation -----------------------------------------------------------

    def place(self, piece: Piece) -> Piece | None:
        """Put *piece* on its own square, returning any piece it displaced."""
        displaced = self.remove(piece.position)
        self._grid[piece.row][piece.col] = piece
        self._index[piece.color][piece] = None
        if piece.piece_type == PieceType.KING:
            self._kings[piece.color] = piece
        return displaced

    def remove(self, coord: Coord) -> Piece | None:
        """Clear *coord*, dropping its occupant from the index."""
        row, col = coord
        piece = self._grid[row][col]
        if piece is None:
            return None
        self._grid[row][col] = None
        self._index[piece.color].pop(piece, None)
        if self._kings[piece.color] is piece:
            self._kings[piece.color] = None
        return piece

    def relocate(self, origin: Coord, dest: Coord) -> Piece | None:
        """Move the piece on *origin* to *dest*, returning the captured piece."""
        piece = self.remove(origin)
        if piece is None:
            raise ValueError(f"No piece on {origin}")
        piece.move(dest.row, dest.col)
        return self.place(piece)

    # -- Provisional moves --------------------------------------------------

    def snapshot(self, coords: Iterable[Coord]) -> BoardSnapshot:
        """Record the occupants of *coords* so a trial move can be undone."""
        cells: list[_CellState] = []
        seen: set[Coord] = set()
        for coord in coords:
            if coord in seen:
                continue
            seen.add(coord)
            piece = self[coord]
            cells.append(
                _CellState(coord, piece, piece.has_moved if piece is not None else False)
            )
        return BoardSnapshot(tuple(cells))

    def restore(self, snapshot: BoardSnapshot) -> None:
        """Put every recorded cell back exactly as it was."""
        for cell in snapshot.cells:
            self.remove(cell.coord)
        for cell in snapshot.cells:
            piece = cell.piece
            if piece is None:
                continue
            # The piece may currently sit on another recorded cell.
            current = self[piece.position]
            if current is piece:
                self.remove(piece.position)
            piece.row, piece.col = cell.coord
            piece.has_moved = cell.has_moved
            self.place(piece)

    # -- Query helpers ------------------------------------------------------

    def pieces(self, color: Color) -> list[Piece]:
        """Live pieces of *color* (a copy, safe to iterate while mutating)."""
        return list(self._index[color])

    def king(self, color: Color) -> Piece | None:
        return self._kings[color]

    def king_square(self, color: Color) -> Coord | None:
        king = self._kings[color]
        return king.position if king is not None else None

    def occupied(self) -> Iterator[Piece]:
        """Pieces in row-major square order."""
        for row in self._grid:
            for piece in row:
                if piece is not None:
                    yield piece

    def rebuild_index(self) -> None:
        """Recompute the piece index and king lookup from the grid."""
        self._index = {Color.WHITE: {}, Color.BLACK: {}}
        self._kings = {Color.WHITE: None, Color.BLACK: None}
        for piece in self.occupied():
            self._index[piece.color][piece] = None
            if piece.piece_type == PieceType.KING:
                self._kings[piece.color] = piece

    def placement(self) -> list[tuple[Coord, PieceType, Color]]:
        """Comparable description of the board: (square, kind, color) per piece."""
        return [(p.position, p.piece_type, p.color) for p in self.occupied()]

    # -- Copying ------------------------------------------------------------

    def copy(self) -> Board:
        b = Board()
        for piece in self.occupied():
            b.place(
                Piece(piece.piece_type, piece.color, piece.row, piece.col, piece.has_moved)
            )
        return b

    def clear(self) -> None:
        for coord in all_coords():
            self.remove(coord)

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        b = cls()
        for col in range(BOARD_SIZE):
            b.place(Piece(PieceType.PAWN, Color.BLACK, 1, col))
            b.place(Piece(PieceType.PAWN, Color.WHITE, 6, col))
        for col, pt in enumerate(_BACK_RANK):
            b.place(Piece(pt, Color.BLACK, 0, col))
            b.place(Piece(pt, Color.WHITE, 7, col))
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self.placement() == other.placement()

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        rows: list[str] = []
        for row in range(BOARD_SIZE):
            cells = []
            for col in range(BOARD_SIZE):
                p = self._grid[row][col]
                cells.append(p.glyph if p else ".")
            rows.append(f"{row} {' '.join(cells)}")
        rows.append("  0 1 2 3 4 5 6 7")
        return "\n".join(rows)
