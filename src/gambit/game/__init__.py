"""Game management layer — model façade, sessions, settings.

Quick start::

    from gambit.game import GameModel

    model = GameModel()
    model.subscribe(print)
    model.commit_move((6, 4), (4, 4))
"""

from gambit.game.interfaces import IMoveTransport
from gambit.game.model import GameEvents, GameModel
from gambit.game.session import GameSession
from gambit.game.settings import GameSettings

__all__ = [
    # Interfaces
    "IMoveTransport",
    # Concrete
    "GameEvents",
    "GameModel",
    "GameSession",
    "GameSettings",
]
