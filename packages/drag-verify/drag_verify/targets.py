"""In-process event targets standing in for the handle and the document."""
from __future__ import annotations

from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from drag_verify.adapters import RawEvent

Listener = Callable[["RawEvent"], None]


class ListenerTarget:
    """Keeps listeners per event type and dispatches events to them."""

    def __init__(self, name: str = "target") -> None:
        self.name = name
        self._listeners: dict[str, list[Listener]] = {}

    def add_listener(self, event_type: str, listener: Listener) -> None:
        listeners = self._listeners.setdefault(event_type, [])
        if listener not in listeners:
            listeners.append(listener)

    def remove_listener(self, event_type: str, listener: Listener) -> None:
        listeners = self._listeners.get(event_type)
        if listeners and listener in listeners:
            listeners.remove(listener)

    def listener_count(self, event_type: str | None = None) -> int:
        if event_type is not None:
            return len(self._listeners.get(event_type, ()))
        return sum(len(v) for v in self._listeners.values())

    def dispatch(self, event: RawEvent) -> bool:
        """Deliver *event* to its listeners. Returns False if any prevented the default."""
        for listener in list(self._listeners.get(event.type, ())):
            listener(event)
        return not event.default_prevented

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"


class CaptureTarget(ListenerTarget):
    """A target that can hold pointer capture for any number of pointer ids."""

    def __init__(self, name: str = "handle") -> None:
        super().__init__(name)
        self._captured: set[int] = set()

    def set_capture(self, pointer_id: int) -> None:
        self._captured.add(pointer_id)

    def release_capture(self, pointer_id: int) -> None:
        self._captured.discard(pointer_id)

    def has_capture(self, pointer_id: int) -> bool:
        return pointer_id in self._captured
