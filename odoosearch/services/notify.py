"""Out-of-band user notifications (toasts in a launcher, red lines in the CLI)."""

from __future__ import annotations

import time
from collections import deque
from dataclasses import dataclass, field
from typing import Callable, Literal

from loguru import logger

from odoosearch.utils.exceptions import sanitize_error_message

NotificationLevel = Literal["failure", "success", "info"]


@dataclass(frozen=True)
class Notification:
    level: NotificationLevel
    title: str
    message: str
    created_at: float = field(default_factory=time.time)


Subscriber = Callable[[Notification], None]


class NotificationCenter:
    """Keeps a bounded history of notifications and fans them out to subscribers."""

    def __init__(self, max_history: int = 50):
        self._history: deque[Notification] = deque(maxlen=max(1, max_history))
        self._subscribers: list[Subscriber] = []

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """Register a subscriber; returns a function that removes it."""
        self._subscribers.append(callback)

        def _unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return _unsubscribe

    @property
    def history(self) -> list[Notification]:
        return list(self._history)

    @property
    def failures(self) -> list[Notification]:
        return [n for n in self._history if n.level == "failure"]

    def clear(self) -> None:
        self._history.clear()

    def publish(self, notification: Notification) -> Notification:
        self._history.append(notification)
        for callback in list(self._subscribers):
            try:
                callback(notification)
            except Exception as exc:
                logger.warning("Notification subscriber failed: {}", exc)
        return notification

    def failure(self, title: str, message: str) -> Notification:
        text = sanitize_error_message(message)
        logger.error("{}: {}", title, text)
        return self.publish(Notification("failure", title, text))

    def success(self, title: str, message: str = "") -> Notification:
        logger.info("{}: {}", title, message)
        return self.publish(Notification("success", title, message))

    def info(self, title: str, message: str = "") -> Notification:
        logger.debug("{}: {}", title, message)
        return self.publish(Notification("info", title, message))
