"""In-memory signal bus between the state machine and its observers.

Signals are queued by ``publish`` and delivered in publish order by
``flush``. The widget flushes once per input event and once per
``advance`` call, so observers always see state changes in arrival order.
"""
from __future__ import annotations

from typing import Any, Callable

Handler = Callable[[str, dict[str, Any]], None]

STATE_CHANGED = "state_changed"
VERIFIED = "verified"
FAILED = "failed"
REDIRECTED = "redirected"


class SignalBus:

    def __init__(self) -> None:
        self._subscribers: dict[str, list[Handler]] = {}
        self._queue: list[tuple[str, dict[str, Any]]] = []

    def subscribe(self, signal_name: str, handler: Handler) -> Callable[[], None]:
        """Register *handler*. Returns a callable that unsubscribes it."""
        self._subscribers.setdefault(signal_name, []).append(handler)
        return lambda: self.unsubscribe(signal_name, handler)

    def unsubscribe(self, signal_name: str, handler: Handler) -> None:
        handlers = self._subscribers.get(signal_name, [])
        if handler in handlers:
            handlers.remove(handler)

    def publish(self, signal_name: str, **data: Any) -> None:
        self._queue.append((signal_name, data))

    @property
    def pending(self) -> int:
        return len(self._queue)

    def flush(self) -> int:
        """Deliver queued signals. Returns how many were dispatched.

        Signals published by a handler during the flush are delivered in
        the same call, after everything queued before them.
        """
        delivered = 0
        while self._queue:
            signal_name, data = self._queue.pop(0)
            for handler in list(self._subscribers.get(signal_name, ())):
                handler(signal_name, data)
            delivered += 1
        return delivered

    def clear(self) -> None:
        self._queue.clear()
