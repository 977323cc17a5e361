"""In-memory event bus with per-tick flush semantics, keyed by event type."""
from __future__ import annotations

from typing import Any, Callable

_Handler = Callable[[Any], None]


class EventBus:
    """Queues gaze events and dispatches them to subscribers on ``flush``.

    Handlers subscribed to a base class also receive its subclasses, so
    subscribing to ``GazeError`` catches every reported error.
    """

    def __init__(self) -> None:
        self._subscribers: dict[type, list[_Handler]] = {}
        self._queue: list[Any] = []

    def subscribe(self, event_type: type, handler: _Handler) -> None:
        self._subscribers.setdefault(event_type, []).append(handler)

    def unsubscribe(self, event_type: type, handler: _Handler) -> None:
        handlers = self._subscribers.get(event_type)
        if handlers is None:
            return
        try:
            handlers.remove(handler)
        except ValueError:
            pass

    def publish(self, event: Any) -> None:
        self._queue.append(event)

    def flush(self) -> None:
        snapshot = self._queue
        self._queue = []
        for event in snapshot:
            for event_type, handlers in list(self._subscribers.items()):
                if isinstance(event, event_type):
                    for handler in list(handlers):
                        handler(event)

    def clear(self) -> None:
        self._queue.clear()

    @property
    def pending(self) -> int:
        return len(self._queue)
