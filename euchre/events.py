"""Minimal broadcast channel for engine notifications."""

from __future__ import annotations

import logging
from typing import Callable, List

logger = logging.getLogger(__name__)

Listener = Callable[[], None]


class EventChannel:
    """Fan a payload-free notification out to zero or more listeners.

    Listeners are called in subscription order, after the state change they
    announce has been applied. They re-read whatever they need through the
    controller's queries.
    """

    def __init__(self, name: str) -> None:
        self.name = name
        self._listeners: List[Listener] = []

    def subscribe(self, listener: Listener) -> Listener:
        self._listeners.append(listener)
        return listener

    def unsubscribe(self, listener: Listener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def publish(self) -> None:
        logger.debug("Publishing %s to %d listener(s)", self.name, len(self._listeners))
        for listener in list(self._listeners):
            listener()

    def __len__(self) -> int:
        return len(self._listeners)
