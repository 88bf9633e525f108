"""GameSession — local or networked play on top of a :class:`GameModel`.

In a local session both seats sit at this board and every commit goes
straight to :meth:`GameModel.commit_move`.  In a networked session this
process owns one color: its moves are committed through the networked
variant and handed to an :class:`IMoveTransport`, and the peer's moves come
back through :meth:`receive_remote_move`, which re-validates them exactly
like a local move.
"""

from __future__ import annotations

import logging

from gambit.core.enums import Color
from gambit.core.messages import MoveIntent
from gambit.game.interfaces import IMoveTransport
from gambit.game.model import GameModel

_LOGGER = logging.getLogger(__name__)


class GameSession:
    """Routes selections and moves for one or two local seats."""

    __slots__ = ("_model", "_transport", "_local_color")

    def __init__(
        self,
        model: GameModel | None = None,
        transport: IMoveTransport | None = None,
        local_color: Color | None = None,
    ) -> None:
        self._model = model if model is not None else GameModel()
        if local_color is None:
            local_color = self._model.settings.local_color
        if transport is not None and local_color is None:
            raise ValueError("A networked session needs a local_color")
        self._transport = transport
        self._local_color = local_color if transport is not None else None

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def model(self) -> GameModel:
        return self._model

    @property
    def is_networked(self) -> bool:
        return self._transport is not None

    @property
    def local_color(self) -> Color | None:
        return self._local_color

    @property
    def is_my_turn(self) -> bool:
        """Whether the seat at this process may move now."""
        if self._local_color is None:
            return True
        return self._model.side_to_move == self._local_color

    # ── Lifecycle ────────────────────────────────────────────────────────

    def start(self, source: str | None = None, white_to_move: bool = True) -> None:
        """Begin a game from the opening position or from save text."""
        self._model.load(source, white_to_move)

    # ── Local input ──────────────────────────────────────────────────────

    def select(self, coord: tuple[int, int]) -> bool:
        return self.is_my_turn and self._model.try_select_origin(coord)

    def submit_move(self, origin: tuple[int, int], dest: tuple[int, int]) -> bool:
        """Submit a move from the local seat. Returns True if applied."""
        if not self.is_my_turn:
            return False
        if not self._model.try_select_origin(origin):
            return False

        if self._transport is None:
            return self._model.commit_move(origin, dest)

        intent = self._model.commit_networked_move(origin, dest)
        if intent is None:
            return False
        self._transport.send(intent)
        notification = self._model.last_notification
        if notification is not None:
            self._model.publish(notification)
        return True

    # ── Remote input ─────────────────────────────────────────────────────

    def receive_remote_move(self, intent: MoveIntent) -> bool:
        """Apply the peer's move after the same checks a local move gets."""
        if self._transport is None:
            _LOGGER.warning("Remote move %s ignored: session is local", intent)
            return False
        if self.is_my_turn:
            _LOGGER.warning("Remote move %s rejected: not the peer's turn", intent)
            return False
        if not self._model.try_select_origin(intent.origin):
            _LOGGER.warning("Remote move %s rejected: illegal origin", intent)
            return False
        if not self._model.commit_move(intent.origin, intent.destination):
            _LOGGER.warning("Remote move %s rejected: illegal destination", intent)
            return False
        return True
