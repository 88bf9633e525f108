"""Qt bridge between a game session and the display / transport threads."""

from __future__ import annotations

from PyQt6.QtCore import QObject, Qt, pyqtSignal, pyqtSlot

from gambit.core.messages import MoveIntent, MoveNotification, Notification
from gambit.game.session import GameSession


class SessionSignals(QObject):
    """Thread-affine adaptor that re-emits session notifications as signals.

    Lives on the thread that owns the model.  Remote moves must reach
    :meth:`apply_remote_move` through a queued connection (see
    :class:`RemoteMoveInbox`) so the board is only touched from this thread.
    """

    move_applied = pyqtSignal(object)
    board_reset = pyqtSignal(object)
    remote_move_rejected = pyqtSignal(object)

    def __init__(self, session: GameSession) -> None:
        super().__init__()
        self._session = session
        self._unsubscribe = session.model.subscribe(self._relay)

    @property
    def session(self) -> GameSession:
        return self._session

    @pyqtSlot(object)
    def apply_remote_move(self, intent_obj: object) -> None:
        """Validate and apply a move received from the peer."""
        if not isinstance(intent_obj, MoveIntent):
            self.remote_move_rejected.emit(intent_obj)
            return
        if not self._session.receive_remote_move(intent_obj):
            self.remote_move_rejected.emit(intent_obj)

    def detach(self) -> None:
        """Stop relaying model notifications."""
        self._unsubscribe()

    def _relay(self, notification: Notification) -> None:
        if isinstance(notification, MoveNotification):
            self.move_applied.emit(notification)
        else:
            self.board_reset.emit(notification)


class RemoteMoveInbox(QObject):
    """Entry point for a transport's reader thread.

    :meth:`deliver` may be called from any thread; the intent is queued onto
    the thread that owns the connected :class:`SessionSignals`.
    """

    received = pyqtSignal(object)

    def connect_to(self, signals: SessionSignals) -> None:
        self.received.connect(
            signals.apply_remote_move, Qt.ConnectionType.QueuedConnection
        )

    def deliver(self, intent: MoveIntent) -> None:
        self.received.emit(intent)
