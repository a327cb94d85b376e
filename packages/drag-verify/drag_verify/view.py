"""View-model derived from ``{phase, progress}`` for whatever draws the widget."""
from __future__ import annotations

from dataclasses import dataclass

from drag_verify.types import Phase

PROMPT = "Drag to verify you are human"
SUCCESS_MESSAGE = "Verification complete!"
FAILURE_MESSAGE = "Verification failed"

# Share of the track the handle's left edge may occupy, in percent.
HANDLE_SPAN_PCT = 85.0


@dataclass(frozen=True)
class WidgetView:
    tone: str
    message: str
    icon: str
    fill_pct: float
    handle_left_pct: float
    text_inverted: bool

    @classmethod
    def from_state(cls, phase: Phase, progress: float) -> WidgetView:
        if phase is Phase.SUCCEEDED:
            tone, message, icon = "success", SUCCESS_MESSAGE, "check"
        elif phase is Phase.FAILED_TRANSIENT:
            tone, message, icon = "failure", FAILURE_MESSAGE, "alert"
        elif phase is Phase.RESET:
            tone, message, icon = "neutral", FAILURE_MESSAGE, "alert"
        else:
            tone = "active" if progress > 0 else "neutral"
            message, icon = PROMPT, "arrow"
        return cls(
            tone=tone,
            message=message,
            icon=icon,
            fill_pct=progress,
            handle_left_pct=progress / 100 * HANDLE_SPAN_PCT,
            text_inverted=progress > 50 and tone in ("neutral", "active"),
        )
