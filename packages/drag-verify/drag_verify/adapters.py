"""Input adapters - pointer, mouse and touch events to drag signals.

Every adapter reduces its raw events to ``drag_start(client_x)``,
``drag_move(client_x)`` and ``drag_end()`` on a ``GestureReceiver``.
Only the first contact is tracked.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Protocol

logger = logging.getLogger(__name__)

Listener = Callable[["RawEvent"], None]


@dataclass(frozen=True)
class TouchPoint:
    identifier: int
    client_x: Any


@dataclass
class RawEvent:
    """A platform input event, reduced to the fields the adapters read.

    ``touches`` holds the contact points that changed in this event.
    """

    type: str
    client_x: Any = None
    pointer_id: int | None = None
    pointer_type: str = "mouse"
    button: int = 0
    touches: tuple[TouchPoint, ...] = ()
    default_prevented: bool = field(default=False, compare=False)

    def prevent_default(self) -> None:
        self.default_prevented = True


class EventTarget(Protocol):
    def add_listener(self, event_type: str, listener: Listener) -> None: ...
    def remove_listener(self, event_type: str, listener: Listener) -> None: ...


class PointerCaptureTarget(EventTarget, Protocol):
    def set_capture(self, pointer_id: int) -> None: ...
    def release_capture(self, pointer_id: int) -> None: ...
    def has_capture(self, pointer_id: int) -> bool: ...


class GestureReceiver(Protocol):
    def drag_start(self, client_x: Any = None) -> bool: ...
    def drag_move(self, client_x: Any) -> bool: ...
    def drag_end(self) -> bool: ...


class InputAdapter:
    """Base class: binds to a handle (and optionally a document) and forwards signals."""

    def __init__(self, receiver: GestureReceiver) -> None:
        self._receiver = receiver
        self._handle: Any = None
        self._document: Any = None
        self._bound: list[tuple[Any, str, Listener]] = []

    @property
    def mounted(self) -> bool:
        return self._handle is not None

    def mount(self, handle: Any, document: Any = None) -> None:
        if self.mounted:
            raise RuntimeError(f"{type(self).__name__} is already mounted")
        self._handle = handle
        self._document = document
        self._on_mount()

    def unmount(self) -> None:
        for target, event_type, listener in self._bound:
            target.remove_listener(event_type, listener)
        self._bound.clear()
        self._handle = None
        self._document = None

    def _on_mount(self) -> None:
        raise NotImplementedError

    def _listen(self, target: Any, event_type: str, listener: Listener) -> None:
        target.add_listener(event_type, listener)
        self._bound.append((target, event_type, listener))

    def _unlisten(self, target: Any, event_type: str, listener: Listener) -> None:
        target.remove_listener(event_type, listener)
        entry = (target, event_type, listener)
        if entry in self._bound:
            self._bound.remove(entry)


class PointerAdapter(InputAdapter):
    """Pointer events on the handle, gated by pointer capture."""

    def __init__(self, receiver: GestureReceiver) -> None:
        super().__init__(receiver)
        self._pointer_id: int | None = None

    @property
    def active_pointer(self) -> int | None:
        return self._pointer_id

    def _on_mount(self) -> None:
        self._listen(self._handle, "pointerdown", self._on_down)
        self._listen(self._handle, "pointermove", self._on_move)
        self._listen(self._handle, "pointerup", self._on_up)
        self._listen(self._handle, "pointercancel", self._on_up)
        self._listen(self._handle, "lostpointercapture", self._on_lost_capture)

    def unmount(self) -> None:
        if self._pointer_id is not None and self._handle is not None:
            self._handle.release_capture(self._pointer_id)
        self._pointer_id = None
        super().unmount()

    def _captured(self, event: RawEvent) -> bool:
        return (
            self._pointer_id is not None
            and event.pointer_id == self._pointer_id
            and self._handle.has_capture(event.pointer_id)
        )

    def _on_down(self, event: RawEvent) -> None:
        if self._pointer_id is not None or event.pointer_id is None:
            return
        if event.pointer_type == "mouse" and event.button != 0:
            return
        if not self._receiver.drag_start(event.client_x):
            return
        if event.pointer_type == "touch":
            event.prevent_default()
        self._handle.set_capture(event.pointer_id)
        self._pointer_id = event.pointer_id

    def _on_move(self, event: RawEvent) -> None:
        if not self._captured(event):
            logger.debug("Discarding %s without capture", event.type)
            return
        if event.pointer_type == "touch":
            event.prevent_default()
        self._receiver.drag_move(event.client_x)

    def _on_up(self, event: RawEvent) -> None:
        if not self._captured(event):
            return
        self._handle.release_capture(event.pointer_id)
        self._pointer_id = None
        self._receiver.drag_end()

    def _on_lost_capture(self, event: RawEvent) -> None:
        # Capture is already gone here, so only the pointer id can be checked.
        if self._pointer_id is None or event.pointer_id != self._pointer_id:
            return
        self._pointer_id = None
        self._receiver.drag_end()


class MouseTouchAdapter(InputAdapter):
    """Mouse and touch events with document-level listeners while dragging."""

    def __init__(self, receiver: GestureReceiver) -> None:
        super().__init__(receiver)
        self._source: str | None = None
        self._touch_id: int | None = None

    @property
    def dragging(self) -> bool:
        return self._source is not None

    def _on_mount(self) -> None:
        if self._document is None:
            raise ValueError("MouseTouchAdapter needs a document-level target")
        self._listen(self._handle, "mousedown", self._on_mouse_down)
        self._listen(self._handle, "touchstart", self._on_touch_start)

    def unmount(self) -> None:
        self._source = None
        self._touch_id = None
        super().unmount()

    def _on_mouse_down(self, event: RawEvent) -> None:
        if self.dragging or event.button != 0:
            return
        if not self._receiver.drag_start(event.client_x):
            return
        self._source = "mouse"
        self._listen(self._document, "mousemove", self._on_mouse_move)
        self._listen(self._document, "mouseup", self._on_mouse_up)

    def _on_mouse_move(self, event: RawEvent) -> None:
        self._receiver.drag_move(event.client_x)

    def _on_mouse_up(self, event: RawEvent) -> None:
        if event.button != 0:
            return
        self._finish()

    def _on_touch_start(self, event: RawEvent) -> None:
        if self.dragging or not event.touches:
            return
        first = event.touches[0]
        if not self._receiver.drag_start(first.client_x):
            return
        event.prevent_default()
        self._source = "touch"
        self._touch_id = first.identifier
        self._listen(self._document, "touchmove", self._on_touch_move)
        self._listen(self._document, "touchend", self._on_touch_end)
        self._listen(self._document, "touchcancel", self._on_touch_end)

    def _tracked(self, event: RawEvent) -> TouchPoint | None:
        for touch in event.touches:
            if touch.identifier == self._touch_id:
                return touch
        return None

    def _on_touch_move(self, event: RawEvent) -> None:
        touch = self._tracked(event)
        if touch is None:
            return
        event.prevent_default()
        self._receiver.drag_move(touch.client_x)

    def _on_touch_end(self, event: RawEvent) -> None:
        if self._tracked(event) is None:
            return
        self._finish()

    def _finish(self) -> None:
        if self._source == "mouse":
            self._unlisten(self._document, "mousemove", self._on_mouse_move)
            self._unlisten(self._document, "mouseup", self._on_mouse_up)
        elif self._source == "touch":
            self._unlisten(self._document, "touchmove", self._on_touch_move)
            self._unlisten(self._document, "touchend", self._on_touch_end)
            self._unlisten(self._document, "touchcancel", self._on_touch_end)
        self._source = None
        self._touch_id = None
        self._receiver.drag_end()


@dataclass(frozen=True)
class PlatformCapabilities:
    pointer_events: bool = True


def select_adapter(
    receiver: GestureReceiver,
    capabilities: PlatformCapabilities | None = None,
) -> InputAdapter:
    """Pointer events where available, mouse+touch otherwise."""
    caps = capabilities if capabilities is not None else PlatformCapabilities()
    if caps.pointer_events:
        return PointerAdapter(receiver)
    return MouseTouchAdapter(receiver)
