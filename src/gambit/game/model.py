"""GameModel — the public face of the rules engine.

Owns the live :class:`Position`, routes every move through
:class:`MoveValidator`, and tells listeners what changed via simple
callbacks so a display (or tests) can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path

from gambit.core.enums import Color
from gambit.core.legality import MoveValidator
from gambit.core.messages import (
    MoveIntent,
    MoveNotification,
    Notification,
    ResetNotification,
)
from gambit.core.position import Position
from gambit.core.rules import Rules
from gambit.core.savefile import dump_game, parse_game, read_game_file, write_game_file
from gambit.core.types import Coord
from gambit.game.settings import GameSettings

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[MoveNotification], None]
ResetCallback = Callable[[ResetNotification], None]
NotificationCallback = Callable[[Notification], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_reset: list[ResetCallback] = field(default_factory=list)


def _as_coord(value: tuple[int, int]) -> Coord:
    return value if isinstance(value, Coord) else Coord(*value)


# ── Model ────────────────────────────────────────────────────────────────────


class GameModel:
    """Board state plus the move API consumed by a display or a session.

    Thread-safety: none.  All calls must come from one thread; remote moves
    are expected to be funnelled onto that thread before they arrive here.
    """

    __slots__ = ("_position", "_settings", "_last_notification", "events")

    def __init__(self, settings: GameSettings | None = None) -> None:
        self._settings = settings if settings is not None else GameSettings()
        self._position = Position.initial(self._settings.white_to_move_on_new_game)
        self._last_notification: MoveNotification | None = None
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def position(self) -> Position:
        return self._position

    @property
    def settings(self) -> GameSettings:
        return self._settings

    @property
    def side_to_move(self) -> Color:
        return self._position.side_to_move

    @property
    def white_to_move(self) -> bool:
        return self._position.white_to_move

    @property
    def last_notification(self) -> MoveNotification | None:
        """Notification of the most recently accepted move, if any."""
        return self._last_notification

    def is_in_check(self, color: Color) -> bool:
        return Rules.is_in_check(self._position.board, color)

    # ── Move API ─────────────────────────────────────────────────────────

    def try_select_origin(self, coord: tuple[int, int]) -> bool:
        return MoveValidator(self._position).is_legal_origin(_as_coord(coord))

    def is_legal_destination(
        self, origin: tuple[int, int], dest: tuple[int, int]
    ) -> bool:
        return MoveValidator(self._position).is_legal_destination(
            _as_coord(origin), _as_coord(dest)
        )

    def legal_destinations_from(self, origin: tuple[int, int]) -> set[Coord]:
        return MoveValidator(self._position).legal_destinations(_as_coord(origin))

    def commit_move(self, origin: tuple[int, int], dest: tuple[int, int]) -> bool:
        """Apply a move and notify listeners. Returns True if legal and applied."""
        notification = self._commit(_as_coord(origin), _as_coord(dest))
        if notification is None:
            return False
        self.publish(notification)
        return True

    def commit_networked_move(
        self, origin: tuple[int, int], dest: tuple[int, int]
    ) -> MoveIntent | None:
        """Apply a move without notifying listeners.

        Returns the intent to transmit to the peer, or ``None`` if the move
        was rejected.  The caller decides when to :meth:`publish`
        :attr:`last_notification`.
        """
        origin_c = _as_coord(origin)
        dest_c = _as_coord(dest)
        if self._commit(origin_c, dest_c) is None:
            return None
        return MoveIntent(origin_c, dest_c)

    def piece_glyph_at(self, coord: tuple[int, int]) -> str:
        coord = _as_coord(coord)
        if not coord.in_bounds:
            return ""
        piece = self._position.board[coord]
        return piece.glyph if piece is not None else ""

    # ── Persistence ──────────────────────────────────────────────────────

    def save(self) -> str:
        return dump_game(self._position)

    def save_file(self, path: Path | str) -> None:
        write_game_file(self._position, path, encoding=self._settings.save_encoding)
        _LOGGER.info("Game saved to %s", path)

    def load(
        self,
        source: str | None = None,
        white_to_move_if_new: bool = True,
        *,
        strict: bool | None = None,
    ) -> None:
        """Replace the board from save text, or start afresh when *source* is None.

        The live position is swapped only after the replacement has been
        fully built; a reset notification is always emitted.
        """
        if source is None:
            replacement = Position.initial(white_to_move_if_new)
        else:
            replacement = parse_game(source, strict=self._strict(strict))
        self._replace(replacement)

    def load_file(self, path: Path | str, *, strict: bool | None = None) -> None:
        """Load a save file.  ``OSError`` propagates and leaves the board as is."""
        replacement = read_game_file(
            path, strict=self._strict(strict), encoding=self._settings.save_encoding
        )
        _LOGGER.info("Game loaded from %s", path)
        self._replace(replacement)

    def new_game(self, white_to_move: bool | None = None) -> None:
        if white_to_move is None:
            white_to_move = self._settings.white_to_move_on_new_game
        self.load(None, white_to_move)

    # ── Notification channel ─────────────────────────────────────────────

    def subscribe(self, callback: NotificationCallback) -> Callable[[], None]:
        """Register *callback* for every notification; returns an unsubscriber."""
        self.events.on_move.append(callback)
        self.events.on_reset.append(callback)

        def unsubscribe() -> None:
            if callback in self.events.on_move:
                self.events.on_move.remove(callback)
            if callback in self.events.on_reset:
                self.events.on_reset.remove(callback)

        return unsubscribe

    def publish(self, notification: Notification) -> None:
        if isinstance(notification, MoveNotification):
            for cb in list(self.events.on_move):
                cb(notification)
        else:
            for cb in list(self.events.on_reset):
                cb(notification)

    # ── Internal helpers ─────────────────────────────────────────────────

    def _commit(self, origin: Coord, dest: Coord) -> MoveNotification | None:
        notification = MoveValidator(self._position).apply(origin, dest)
        if notification is not None:
            self._last_notification = notification
        return notification

    def _strict(self, strict: bool | None) -> bool:
        return self._settings.strict_load if strict is None else strict

    def _replace(self, replacement: Position) -> None:
        self._position = replacement
        self._last_notification = None
        _LOGGER.info("Board reset, %s to move", replacement.side_to_move)
        self.publish(ResetNotification(replacement.side_to_move))
