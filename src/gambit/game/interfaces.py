"""Abstract interfaces for the game layer.

The session depends on these ABCs rather than on a concrete socket or UI.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from gambit.core.messages import MoveIntent


class IMoveTransport(ABC):
    """Carries accepted local moves to the remote peer."""

    @abstractmethod
    def send(self, intent: MoveIntent) -> None:
        """Deliver *intent* to the other side.

        Replies come back through ``GameSession.receive_remote_move``; the
        transport must hand them over on the thread that owns the model.
        """
