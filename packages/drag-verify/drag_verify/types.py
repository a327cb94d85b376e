"""Shared data types for the drag-verify widget."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class Phase(Enum):
    IDLE = "idle"
    DRAGGING = "dragging"
    SUCCEEDED = "succeeded"
    FAILED_TRANSIENT = "failed_transient"
    RESET = "reset"

    @property
    def is_terminal(self) -> bool:
        return self in (Phase.SUCCEEDED, Phase.RESET)


@dataclass(frozen=True, slots=True)
class TrackGeometry:
    """Horizontal extent of the track and the width of its handle, in px."""

    origin_x: float
    width: float
    handle_width: float

    @property
    def travel(self) -> float:
        """Distance the handle's left edge can move. May be <= 0."""
        return self.width - self.handle_width


@dataclass(frozen=True, slots=True)
class OutcomeUrls:
    """Redirect destinations. Opaque strings, never parsed."""

    success: str = "/"
    failure: str = "/"


@dataclass(frozen=True, slots=True)
class StateChange:
    """Payload delivered to the presentation layer on every state change."""

    phase: Phase
    progress: float


@dataclass
class DragSession:
    """The single mutable record behind one widget instance.

    ``outcome_pending`` is set as soon as a timed redirect is scheduled and
    stays set; ``redirected`` flips once the Redirect Sink has been called.
    """

    urls: OutcomeUrls
    success_threshold: float = 85.0
    progress: float = 0.0
    phase: Phase = Phase.IDLE
    geometry: TrackGeometry | None = None
    degenerate: bool = False
    outcome_pending: bool = False
    redirected: bool = False
    history: list[Phase] = field(default_factory=list)

    def state(self) -> StateChange:
        return StateChange(phase=self.phase, progress=self.progress)


class DegenerateTrackError(ValueError):
    """Raised when the track is not wider than its handle."""

    def __init__(self, track_width: float, handle_width: float) -> None:
        self.track_width = track_width
        self.handle_width = handle_width
        super().__init__(
            f"Track width {track_width} leaves no travel for handle width {handle_width}"
        )
