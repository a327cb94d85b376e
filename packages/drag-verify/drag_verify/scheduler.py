"""TransitionScheduler - timed transitions as an ordered list of steps."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable

from drag_verify.config import VerifyConfig

REDIRECT_SUCCESS = "redirect_success"
RESET_PROGRESS = "reset_progress"
REDIRECT_FAILURE = "redirect_failure"


@dataclass(frozen=True)
class ScheduledStep:
    """A transition to run ``delay_ms`` after the step before it."""

    delay_ms: float
    action: str


@dataclass
class _Pending:
    due: float
    seq: int
    step: ScheduledStep


def success_plan(config: VerifyConfig) -> list[ScheduledStep]:
    return [ScheduledStep(config.success_delay_ms, REDIRECT_SUCCESS)]


def failure_plan(config: VerifyConfig) -> list[ScheduledStep]:
    """Visible failure, then reset, then a further pause before redirecting."""
    return [
        ScheduledStep(config.failure_reset_delay_ms, RESET_PROGRESS),
        ScheduledStep(config.failure_redirect_delay_ms, REDIRECT_FAILURE),
    ]


class TransitionScheduler:
    """Owns a millisecond clock and the transitions waiting on it.

    Steps are chained: each delay counts from the due time of the step
    scheduled before it in the same call, so a late ``advance`` still fires
    a chain in order and with its original spacing. Nothing scheduled can
    be cancelled.
    """

    def __init__(self) -> None:
        self._now: float = 0.0
        self._seq: int = 0
        self._pending: list[_Pending] = []
        self._handlers: dict[str, Callable[[ScheduledStep], None]] = {}

    @property
    def now(self) -> float:
        return self._now

    def handle(self, action: str, fn: Callable[[ScheduledStep], None]) -> None:
        """Register the handler for *action*. Later calls overwrite."""
        self._handlers[action] = fn

    def schedule(self, steps: Iterable[ScheduledStep]) -> None:
        due = self._now
        for step in steps:
            if step.delay_ms < 0:
                raise ValueError(f"Negative delay for {step.action!r}")
            due += step.delay_ms
            self._pending.append(_Pending(due=due, seq=self._seq, step=step))
            self._seq += 1
        self._pending.sort(key=lambda p: (p.due, p.seq))

    def pending(self) -> list[ScheduledStep]:
        """Steps not yet fired, in firing order."""
        return [p.step for p in self._pending]

    def time_until_next(self) -> float | None:
        if not self._pending:
            return None
        return max(0.0, self._pending[0].due - self._now)

    def advance(self, elapsed_ms: float) -> list[ScheduledStep]:
        """Move the clock forward and fire every step that has come due.

        Returns the fired steps in order. Raises ``LookupError`` when a due
        step has no registered handler.
        """
        if elapsed_ms < 0:
            raise ValueError("elapsed_ms must be non-negative")
        self._now += elapsed_ms
        fired: list[ScheduledStep] = []
        while self._pending and self._pending[0].due <= self._now:
            entry = self._pending.pop(0)
            handler = self._handlers.get(entry.step.action)
            if handler is None:
                raise LookupError(f"No handler registered for {entry.step.action!r}")
            handler(entry.step)
            fired.append(entry.step)
        return fired
