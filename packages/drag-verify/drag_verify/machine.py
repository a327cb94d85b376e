"""GestureStateMachine - drag gestures to verification outcomes.

Transitions::

    Idle ──drag-start──▶ Dragging ──drag-move──▶ Dragging
    Dragging ──drag-end──▶ Succeeded | FailedTransient | Idle
    Succeeded ──800ms──▶ navigate(success)
    FailedTransient ──1500ms──▶ Idle (progress 0) ──1000ms──▶ Reset, navigate(failure)

Input signals return True when they changed or were accepted by the
machine and False when they were ignored.
"""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Callable

from drag_verify.bus import FAILED, REDIRECTED, STATE_CHANGED, VERIFIED, SignalBus
from drag_verify.config import VerifyConfig
from drag_verify.geometry import coerce_client_x, progress_for
from drag_verify.guards import RELEASE_TRANSITIONS, ReleaseGuards
from drag_verify.scheduler import (
    REDIRECT_FAILURE,
    REDIRECT_SUCCESS,
    RESET_PROGRESS,
    ScheduledStep,
    TransitionScheduler,
    failure_plan,
    success_plan,
)
from drag_verify.types import DegenerateTrackError, DragSession, Phase, TrackGeometry

if TYPE_CHECKING:
    from drag_verify.sinks import RedirectSink

logger = logging.getLogger(__name__)


class GestureStateMachine:
    """Owns one ``DragSession`` and sequences it to a single redirect."""

    def __init__(
        self,
        config: VerifyConfig,
        sink: RedirectSink,
        geometry_provider: Callable[[], TrackGeometry],
        bus: SignalBus | None = None,
        scheduler: TransitionScheduler | None = None,
        guards: ReleaseGuards | None = None,
    ) -> None:
        self._config = config
        self._sink = sink
        self._geometry_provider = geometry_provider
        self._bus = bus if bus is not None else SignalBus()
        self._scheduler = scheduler if scheduler is not None else TransitionScheduler()
        self._guards = guards if guards is not None else ReleaseGuards.default()
        self._session = DragSession(
            urls=config.outcome_urls,
            success_threshold=config.success_threshold,
        )

        self._scheduler.handle(REDIRECT_SUCCESS, self._on_redirect_success)
        self._scheduler.handle(RESET_PROGRESS, self._on_reset_progress)
        self._scheduler.handle(REDIRECT_FAILURE, self._on_redirect_failure)

    @property
    def session(self) -> DragSession:
        return self._session

    @property
    def phase(self) -> Phase:
        return self._session.phase

    @property
    def progress(self) -> float:
        return self._session.progress

    @property
    def bus(self) -> SignalBus:
        return self._bus

    @property
    def scheduler(self) -> TransitionScheduler:
        return self._scheduler

    # --- Input signals ---

    def drag_start(self, client_x: Any = None) -> bool:
        s = self._session
        if s.phase is not Phase.IDLE or s.outcome_pending:
            logger.debug("drag-start ignored in %s", s.phase.name)
            return False
        s.geometry = self._geometry_provider()
        s.degenerate = s.geometry.travel <= 0
        if s.degenerate:
            logger.warning(
                "Degenerate track (width=%s, handle=%s); gesture cannot succeed",
                s.geometry.width, s.geometry.handle_width,
            )
        self._set(Phase.DRAGGING, s.progress)
        return True

    def drag_move(self, client_x: Any) -> bool:
        s = self._session
        if s.phase is not Phase.DRAGGING:
            return False
        x = coerce_client_x(client_x)
        if x is None:
            logger.debug("Discarding malformed sample %r", client_x)
            return False
        if self._config.requery_geometry or s.geometry is None:
            s.geometry = self._geometry_provider()
        try:
            progress = progress_for(x, s.geometry)
        except DegenerateTrackError:
            s.degenerate = True
            return False
        self._set(Phase.DRAGGING, progress)
        return True

    def drag_end(self) -> bool:
        s = self._session
        if s.phase is not Phase.DRAGGING:
            return False
        target = self._guards.resolve(s, RELEASE_TRANSITIONS)
        if target is Phase.SUCCEEDED:
            s.outcome_pending = True
            self._set(Phase.SUCCEEDED, 100.0)
            logger.info("Gesture verified")
            self._scheduler.schedule(success_plan(self._config))
        elif target is Phase.FAILED_TRANSIENT:
            s.outcome_pending = True
            self._set(Phase.FAILED_TRANSIENT, s.progress)
            logger.info("Gesture failed at %.1f%%", s.progress)
            self._scheduler.schedule(failure_plan(self._config))
        elif target is Phase.IDLE:
            self._set(Phase.IDLE, 0.0)
        else:
            raise LookupError(f"No release transition matched at {s.progress:.1f}%")
        return True

    def advance(self, elapsed_ms: float) -> list[ScheduledStep]:
        return self._scheduler.advance(elapsed_ms)

    # --- Scheduled transitions ---

    def _on_redirect_success(self, step: ScheduledStep) -> None:
        self._bus.publish(VERIFIED, url=self._session.urls.success)
        self._navigate(self._session.urls.success)

    def _on_reset_progress(self, step: ScheduledStep) -> None:
        self._set(Phase.IDLE, 0.0)

    def _on_redirect_failure(self, step: ScheduledStep) -> None:
        self._set(Phase.RESET, 0.0)
        self._bus.publish(FAILED, url=self._session.urls.failure)
        self._navigate(self._session.urls.failure)

    def _navigate(self, url: str) -> None:
        s = self._session
        if s.redirected:
            logger.error("Redirect to %r suppressed; session already redirected", url)
            return
        s.redirected = True
        logger.info("Redirecting to %r", url)
        self._sink.navigate(url)
        self._bus.publish(REDIRECTED, url=url)

    def _set(self, phase: Phase, progress: float) -> None:
        s = self._session
        if phase is s.phase and progress == s.progress:
            return
        if phase is not s.phase:
            logger.debug("%s -> %s", s.phase.name, phase.name)
            s.history.append(phase)
        s.phase = phase
        s.progress = progress
        self._bus.publish(STATE_CHANGED, phase=phase, progress=progress)
