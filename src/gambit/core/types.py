"""Coordinate type and board geometry helpers.

Board layout (row-major, as seen from White's side):
    row 0 = Black's back rank, row 7 = White's back rank
    col 0 = a-file, col 7 = h-file

White pawns advance toward row 0, Black pawns toward row 7.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import NamedTuple

BOARD_SIZE = 8


class Coord(NamedTuple):
    """A square on the board, addressed by (row, col)."""

    row: int
    col: int

    def offset(self, d_row: int, d_col: int) -> Coord:
        return Coord(self.row + d_row, self.col + d_col)

    @property
    def in_bounds(self) -> bool:
        return in_bounds(self.row, self.col)

    def __str__(self) -> str:
        return f"({self.row},{self.col})"


def in_bounds(row: int, col: int) -> bool:
    """Whether (*row*, *col*) lies on the 8x8 board."""
    return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE


def all_coords() -> Iterator[Coord]:
    """Every square in row-major order."""
    for row in range(BOARD_SIZE):
        for col in range(BOARD_SIZE):
            yield Coord(row, col)


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def squares_between(origin: Coord, dest: Coord) -> list[Coord]:
    """Squares strictly between *origin* and *dest* on a shared line.

    Raises ``ValueError`` when the two squares share no row, column or
    diagonal.
    """
    d_row = dest.row - origin.row
    d_col = dest.col - origin.col
    if d_row != 0 and d_col != 0 and abs(d_row) != abs(d_col):
        raise ValueError(f"Squares not on a common line: {origin} -> {dest}")

    step_row = _sign(d_row)
    step_col = _sign(d_col)
    between: list[Coord] = []
    current = origin.offset(step_row, step_col)
    while current != dest:
        between.append(current)
        current = current.offset(step_row, step_col)
    return between
