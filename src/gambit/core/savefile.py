"""Plain-text save format.

Layout::

    true            <- side to move: ``true`` = White, ``false`` = Black
    0 0 R false     <- one line per occupied square: row col code is_white
    0 1 Kn false
    ...

Lines are written in row-major order.  ``has_moved`` is not persisted, so
every reconstructed piece starts out unmoved.
"""

from __future__ import annotations

import logging
from pathlib import Path

from gambit.core.board import Board
from gambit.core.enums import Color
from gambit.core.piece import Piece
from gambit.core.position import Position
from gambit.core.types import Coord, in_bounds

_LOGGER = logging.getLogger(__name__)

_TRUE = "true"
_FALSE = "false"


class SaveFormatError(ValueError):
    """A save source contains a line that cannot be understood."""

    def __init__(self, line_no: int, line: str, reason: str) -> None:
        super().__init__(f"Line {line_no}: {reason}: {line!r}")
        self.line_no = line_no
        self.line = line
        self.reason = reason


def _flag_text(value: bool) -> str:
    return _TRUE if value else _FALSE


def _parse_flag(token: str) -> bool:
    lowered = token.lower()
    if lowered == _TRUE:
        return True
    if lowered == _FALSE:
        return False
    raise ValueError(f"Invalid boolean token: {token!r}")


def dump_game(position: Position) -> str:
    """Serialise *position* to save-file text."""
    lines = [_flag_text(position.white_to_move)]
    for piece in position.board.occupied():
        lines.append(
            f"{piece.row} {piece.col} {piece.short_code} "
            f"{_flag_text(piece.color == Color.WHITE)}"
        )
    return "\n".join(lines) + "\n"


def _parse_piece(tokens: list[str]) -> Piece:
    row_text, col_text, code, color_text = tokens
    try:
        row = int(row_text)
        col = int(col_text)
    except ValueError:
        raise ValueError("row/col must be integers") from None
    if not in_bounds(row, col):
        raise ValueError(f"square {Coord(row, col)} is off the board")
    color = Color.from_white_flag(_parse_flag(color_text))
    return Piece.from_code(code, color, row, col)


def parse_game(text: str, *, strict: bool = False) -> Position:
    """Build a fresh :class:`Position` from save-file *text*.

    A one-token line sets the side to move; a four-token line places a
    piece.  Anything else is skipped with a warning, or raises
    :class:`SaveFormatError` when *strict* is set.  The side to move
    defaults to White when no turn line is present.
    """
    board = Board()
    white_to_move = True

    def reject(line_no: int, line: str, reason: str) -> None:
        if strict:
            raise SaveFormatError(line_no, line, reason)
        _LOGGER.warning("Skipping save line %d (%s): %r", line_no, reason, line)

    for line_no, line in enumerate(text.splitlines(), start=1):
        tokens = line.split()
        if not tokens:
            continue
        if len(tokens) == 1:
            try:
                white_to_move = _parse_flag(tokens[0])
            except ValueError as exc:
                reject(line_no, line, str(exc))
            continue
        if len(tokens) != 4:
            reject(line_no, line, f"expected 1 or 4 fields, got {len(tokens)}")
            continue
        try:
            piece = _parse_piece(tokens)
        except ValueError as exc:
            reject(line_no, line, str(exc))
            continue
        if not board.is_empty(piece.position):
            reject(line_no, line, f"square {piece.position} listed twice")
        board.place(piece)

    # Index and king lookup are recomputed from the finished grid.
    board.rebuild_index()
    return Position(board, Color.from_white_flag(white_to_move))


def read_game_file(path: Path | str, *, strict: bool = False, encoding: str = "utf-8") -> Position:
    """Read and parse a save file.  ``OSError`` propagates to the caller."""
    text = Path(path).read_text(encoding=encoding)
    return parse_game(text, strict=strict)


def write_game_file(position: Position, path: Path | str, *, encoding: str = "utf-8") -> None:
    Path(path).write_text(dump_game(position), encoding=encoding)
