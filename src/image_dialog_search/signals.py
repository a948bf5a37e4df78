"""Named event channel shared between UI components."""

import logging
from collections.abc import Callable
from typing import Any

logger = logging.getLogger(__name__)


class SignalEmitter:
    """Dispatch named events to registered listeners.

    One emitter is created by the application and handed to every component
    that needs to broadcast or react to cross-component events.
    """

    def __init__(self) -> None:
        self._listeners: dict[str, list[Callable[..., Any]]] = {}

    def add_listener(self, event: str, callback: Callable[..., Any]) -> None:
        """Register ``callback`` for ``event``; registering twice is a no-op."""
        listeners = self._listeners.setdefault(event, [])
        if callback not in listeners:
            listeners.append(callback)

    def remove_listener(self, event: str, callback: Callable[..., Any]) -> None:
        """Unregister ``callback``; unknown callbacks are ignored."""
        listeners = self._listeners.get(event)
        if listeners and callback in listeners:
            listeners.remove(callback)
            if not listeners:
                del self._listeners[event]

    def listener_count(self, event: str) -> int:
        return len(self._listeners.get(event, ()))

    def emit(self, event: str, *args: Any) -> None:
        """Call every listener of ``event`` with ``args``."""
        for callback in list(self._listeners.get(event, ())):
            try:
                callback(*args)
            except Exception:
                logger.exception("Listener for %r raised", event)
