"""Translate pygame mouse and finger events into widget input events."""
from __future__ import annotations

from typing import Callable

import pygame

from drag_verify import CaptureTarget, ListenerTarget, RawEvent, TouchPoint

MOUSE_POINTER_ID = 0


class PygameBridge:
    """Feeds pygame events to a handle and a document target.

    In pointer mode everything goes to the handle: presses only when they
    hit it, moves and releases when they hit it or the handle holds capture.
    In mouse/touch mode presses go to the handle and everything else to the
    document.
    """

    def __init__(
        self,
        handle: CaptureTarget,
        document: ListenerTarget,
        handle_rect: Callable[[], pygame.Rect],
        screen_size: tuple[int, int],
        pointer_events: bool,
    ) -> None:
        self._handle = handle
        self._document = document
        self._handle_rect = handle_rect
        self._screen_w, self._screen_h = screen_size
        self._pointer_events = pointer_events

    def feed(self, event: pygame.event.Event) -> None:
        if event.type in (pygame.MOUSEBUTTONDOWN, pygame.MOUSEMOTION, pygame.MOUSEBUTTONUP):
            if getattr(event, "touch", False):
                return  # pygame mirrors touches as mouse events; FINGER* handles them
            self._feed_mouse(event)
        elif event.type in (pygame.FINGERDOWN, pygame.FINGERMOTION, pygame.FINGERUP):
            self._feed_finger(event)

    def _feed_mouse(self, event: pygame.event.Event) -> None:
        x, y = event.pos
        button = getattr(event, "button", 1) - 1
        if self._pointer_events:
            kind = {
                pygame.MOUSEBUTTONDOWN: "pointerdown",
                pygame.MOUSEMOTION: "pointermove",
                pygame.MOUSEBUTTONUP: "pointerup",
            }[event.type]
            raw = RawEvent(kind, client_x=x, pointer_id=MOUSE_POINTER_ID, button=button)
            self._to_handle(raw, MOUSE_POINTER_ID, (x, y))
        else:
            kind = {
                pygame.MOUSEBUTTONDOWN: "mousedown",
                pygame.MOUSEMOTION: "mousemove",
                pygame.MOUSEBUTTONUP: "mouseup",
            }[event.type]
            raw = RawEvent(kind, client_x=x, button=button)
            if kind == "mousedown":
                if self._handle_rect().collidepoint(x, y):
                    self._handle.dispatch(raw)
            else:
                self._document.dispatch(raw)

    def _feed_finger(self, event: pygame.event.Event) -> None:
        # Finger coordinates are normalised to [0, 1].
        x, y = event.x * self._screen_w, event.y * self._screen_h
        finger = int(event.finger_id) + 1
        if self._pointer_events:
            kind = {
                pygame.FINGERDOWN: "pointerdown",
                pygame.FINGERMOTION: "pointermove",
                pygame.FINGERUP: "pointerup",
            }[event.type]
            raw = RawEvent(kind, client_x=x, pointer_id=finger, pointer_type="touch")
            self._to_handle(raw, finger, (x, y))
        else:
            kind = {
                pygame.FINGERDOWN: "touchstart",
                pygame.FINGERMOTION: "touchmove",
                pygame.FINGERUP: "touchend",
            }[event.type]
            raw = RawEvent(kind, touches=(TouchPoint(finger, x),))
            if kind == "touchstart":
                if self._handle_rect().collidepoint(x, y):
                    self._handle.dispatch(raw)
            else:
                self._document.dispatch(raw)

    def _to_handle(self, raw: RawEvent, pointer_id: int, pos: tuple[float, float]) -> None:
        if self._handle.has_capture(pointer_id) or self._handle_rect().collidepoint(pos):
            self._handle.dispatch(raw)
