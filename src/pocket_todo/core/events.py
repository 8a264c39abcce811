# src/pocket_todo/core/events.py

from __future__ import annotations

import logging

from .ports import ChangeListener, Unsubscribe

logger = logging.getLogger(__name__)


class ChangeNotifier:
    """
    Minimal publish/subscribe helper.

    Listeners take no arguments: they re-read whatever derived state they need.
    A listener that raises is logged and skipped; the rest still run.
    """

    def __init__(self, owner: str) -> None:
        self._owner = owner
        self._listeners: list[ChangeListener] = []

    def subscribe(self, listener: ChangeListener) -> Unsubscribe:
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    def notify(self) -> None:
        for listener in list(self._listeners):
            try:
                listener()
            except Exception:
                logger.exception("%s change listener failed: %r", self._owner, listener)

    def __len__(self) -> int:
        return len(self._listeners)
