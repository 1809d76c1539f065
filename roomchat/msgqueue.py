"""A per-session queue of outgoing messages, drained by one consumer."""

from __future__ import annotations

import threading
from typing import Any, Callable


class MessageQueue:
    """Thread-safe message queue with online/valid flags for its session."""

    def __init__(self, login: str = "", name: str = "") -> None:
        self.login = login
        self.name = name
        self.is_online = True
        self.is_valid = True
        self._messages: list[Any] = []
        self._cond = threading.Condition()

    def __len__(self) -> int:
        with self._cond:
            return len(self._messages)

    def pending(self) -> list[Any]:
        """Return a copy of the messages not yet consumed."""
        with self._cond:
            return list(self._messages)

    def add(self, message: Any) -> None:
        """Queue a message and wake the consumer."""
        with self._cond:
            self._messages.append(message)
            self._cond.notify_all()

    def absorb(self, other: MessageQueue) -> None:
        """Append the messages still pending in ``other`` to this queue."""
        if other is self:
            return
        taken = other.pending()
        with self._cond:
            self._messages.extend(taken)
            self._cond.notify_all()

    def wait_on_queue(self, func: Callable[[Any], object]) -> bool:
        """Feed queued messages to ``func`` until the queue is closed.

        Returns False when the queue was finished, True when it was only
        taken offline.
        """
        while True:
            with self._cond:
                self._cond.wait_for(
                    lambda: bool(self._messages) or not self.is_online or not self.is_valid
                )
                if not self.is_online or not self.is_valid:
                    return self.is_valid
                batch, self._messages = self._messages, []
            for message in batch:
                func(message)

    def invalidate(self) -> None:
        """Mark the session offline and stop the consumer."""
        with self._cond:
            self.is_online = False
            self._cond.notify_all()

    def finish(self) -> None:
        """Mark the queue as no longer valid and stop the consumer."""
        with self._cond:
            self.is_valid = False
            self._cond.notify_all()