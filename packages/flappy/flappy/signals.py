"""In-memory pub/sub bus for game events, flushed once per frame."""
from __future__ import annotations

from typing import Any, Callable

_Handler = Callable[[str, dict[str, Any]], None]

START = "start"
FLAP = "flap"
SCORE = "score"
GAME_OVER = "game_over"


class SignalBus:
    """Queues game events until the frame driver flushes them.

    ``Game`` publishes:

    - ``start``: ``high_score`` when a session begins.
    - ``flap``: ``y`` and ``velocity`` right after an impulse.
    - ``score``: the new ``score`` on the tick a pipe is passed.
    - ``game_over``: ``score``, ``high_score`` and ``new_record`` on a crash.

    Handlers are called as ``handler(signal_name, data)``.
    """

    def __init__(self) -> None:
        self._subscribers: dict[str, list[_Handler]] = {}
        self._queue: list[tuple[str, dict[str, Any]]] = []

    def subscribe(self, signal_name: str, handler: _Handler) -> None:
        self._subscribers.setdefault(signal_name, []).append(handler)

    def unsubscribe(self, signal_name: str, handler: _Handler) -> None:
        handlers = self._subscribers.get(signal_name)
        if handlers is None:
            return
        try:
            handlers.remove(handler)
        except ValueError:
            pass

    def publish(self, signal_name: str, **data: Any) -> None:
        self._queue.append((signal_name, data))

    def pending(self) -> int:
        return len(self._queue)

    def flush(self) -> None:
        """Deliver queued signals. Signals published by handlers wait for the next flush."""
        snapshot = self._queue
        self._queue = []
        for signal_name, data in snapshot:
            for handler in list(self._subscribers.get(signal_name, [])):
                handler(signal_name, data)

    def clear(self) -> None:
        self._queue.clear()
