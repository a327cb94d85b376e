"""drag-verify - Drag-to-verify gesture widget core."""
from __future__ import annotations

from drag_verify.adapters import (
    InputAdapter,
    MouseTouchAdapter,
    PlatformCapabilities,
    PointerAdapter,
    RawEvent,
    TouchPoint,
    select_adapter,
)
from drag_verify.bus import SignalBus
from drag_verify.config import VerifyConfig
from drag_verify.geometry import compute_progress
from drag_verify.guards import ReleaseGuards
from drag_verify.machine import GestureStateMachine
from drag_verify.scheduler import ScheduledStep, TransitionScheduler
from drag_verify.sinks import BrowserRedirectSink, LoggingRedirectSink, RedirectSink
from drag_verify.targets import CaptureTarget, ListenerTarget
from drag_verify.types import (
    DegenerateTrackError,
    DragSession,
    OutcomeUrls,
    Phase,
    StateChange,
    TrackGeometry,
)
from drag_verify.view import WidgetView
from drag_verify.widget import VerifyWidget

__all__ = [
    "BrowserRedirectSink",
    "CaptureTarget",
    "DegenerateTrackError",
    "DragSession",
    "GestureStateMachine",
    "InputAdapter",
    "ListenerTarget",
    "LoggingRedirectSink",
    "MouseTouchAdapter",
    "OutcomeUrls",
    "Phase",
    "PlatformCapabilities",
    "PointerAdapter",
    "RawEvent",
    "RedirectSink",
    "ReleaseGuards",
    "ScheduledStep",
    "SignalBus",
    "StateChange",
    "TouchPoint",
    "TrackGeometry",
    "TransitionScheduler",
    "VerifyConfig",
    "VerifyWidget",
    "WidgetView",
    "compute_progress",
    "select_adapter",
]
