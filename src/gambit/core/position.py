"""Position - board plus side to move."""

from __future__ import annotations

from gambit.core.board import Board
from gambit.core.enums import Color


class Position:
    """Full game state: the board and whose turn it is."""

    __slots__ = ("board", "side_to_move")

    def __init__(
        self,
        board: Board | None = None,
        side_to_move: Color = Color.WHITE,
    ) -> None:
        self.board = board if board is not None else Board.initial()
        self.side_to_move = side_to_move

    @property
    def white_to_move(self) -> bool:
        return self.side_to_move == Color.WHITE

    def flip_turn(self) -> None:
        self.side_to_move = self.side_to_move.opposite

    @classmethod
    def initial(cls, white_to_move: bool = True) -> Position:
        return cls(Board.initial(), Color.from_white_flag(white_to_move))

    def copy(self) -> Position:
        return Position(self.board.copy(), self.side_to_move)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Position):
            return NotImplemented
        return self.side_to_move == other.side_to_move and self.board == other.board

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{self.board!r}\n{self.side_to_move} to move"
