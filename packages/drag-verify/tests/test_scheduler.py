"""Tests for TransitionScheduler and the outcome plans."""
from __future__ import annotations

import pytest
from drag_verify.config import VerifyConfig
from drag_verify.scheduler import (
    REDIRECT_FAILURE,
    REDIRECT_SUCCESS,
    RESET_PROGRESS,
    ScheduledStep,
    TransitionScheduler,
    failure_plan,
    success_plan,
)


@pytest.fixture
def scheduler() -> TransitionScheduler:
    return TransitionScheduler()


def _recording(s: TransitionScheduler, *actions: str) -> list[tuple[str, float]]:
    log: list[tuple[str, float]] = []
    for action in actions:
        s.handle(action, lambda step, s=s: log.append((step.action, s.now)))
    return log


class TestPlans:
    def test_success_plan(self) -> None:
        assert success_plan(VerifyConfig()) == [ScheduledStep(800, REDIRECT_SUCCESS)]

    def test_failure_plan(self) -> None:
        assert failure_plan(VerifyConfig()) == [
            ScheduledStep(1500, RESET_PROGRESS),
            ScheduledStep(1000, REDIRECT_FAILURE),
        ]

    def test_plans_follow_config(self) -> None:
        config = VerifyConfig(success_delay_ms=5, failure_reset_delay_ms=6, failure_redirect_delay_ms=7)
        assert [s.delay_ms for s in success_plan(config)] == [5]
        assert [s.delay_ms for s in failure_plan(config)] == [6, 7]


class TestAdvance:
    def test_step_fires_when_due_not_before(self, scheduler: TransitionScheduler) -> None:
        log = _recording(scheduler, "go")
        scheduler.schedule([ScheduledStep(800, "go")])

        assert scheduler.advance(799) == []
        assert log == []

        fired = scheduler.advance(1)
        assert fired == [ScheduledStep(800, "go")]
        assert log == [("go", 800)]

    def test_chained_delays_are_relative(self, scheduler: TransitionScheduler) -> None:
        log = _recording(scheduler, "a", "b")
        scheduler.schedule([ScheduledStep(1500, "a"), ScheduledStep(1000, "b")])

        scheduler.advance(1500)
        assert [a for a, _ in log] == ["a"]
        scheduler.advance(999)
        assert [a for a, _ in log] == ["a"]
        scheduler.advance(1)
        assert [a for a, _ in log] == ["a", "b"]

    def test_single_large_advance_fires_chain_in_order(self, scheduler: TransitionScheduler) -> None:
        order: list[str] = []
        scheduler.handle("a", lambda step: order.append("a"))
        scheduler.handle("b", lambda step: order.append("b"))
        scheduler.schedule([ScheduledStep(1500, "a"), ScheduledStep(1000, "b")])

        scheduler.advance(10_000)
        assert order == ["a", "b"]
        assert scheduler.pending() == []

    def test_chain_counts_from_schedule_time(self, scheduler: TransitionScheduler) -> None:
        log = _recording(scheduler, "go")
        scheduler.advance(300)
        scheduler.schedule([ScheduledStep(100, "go")])
        scheduler.advance(99)
        assert log == []
        scheduler.advance(1)
        assert log == [("go", 400)]

    def test_ties_fire_in_insertion_order(self, scheduler: TransitionScheduler) -> None:
        order: list[str] = []
        scheduler.handle("x", lambda step: order.append("x"))
        scheduler.handle("y", lambda step: order.append("y"))
        scheduler.schedule([ScheduledStep(10, "x")])
        scheduler.schedule([ScheduledStep(10, "y")])
        scheduler.advance(10)
        assert order == ["x", "y"]

    def test_zero_delay_fires_on_next_advance(self, scheduler: TransitionScheduler) -> None:
        log = _recording(scheduler, "now")
        scheduler.schedule([ScheduledStep(0, "now")])
        assert log == []
        scheduler.advance(0)
        assert log == [("now", 0)]

    def test_missing_handler_raises(self, scheduler: TransitionScheduler) -> None:
        scheduler.schedule([ScheduledStep(1, "unknown")])
        with pytest.raises(LookupError, match="unknown"):
            scheduler.advance(1)

    def test_negative_elapsed_rejected(self, scheduler: TransitionScheduler) -> None:
        with pytest.raises(ValueError):
            scheduler.advance(-1)

    def test_negative_delay_rejected(self, scheduler: TransitionScheduler) -> None:
        with pytest.raises(ValueError):
            scheduler.schedule([ScheduledStep(-5, "x")])


class TestQueries:
    def test_pending_in_firing_order(self, scheduler: TransitionScheduler) -> None:
        scheduler.schedule([ScheduledStep(50, "late")])
        scheduler.schedule([ScheduledStep(10, "early")])
        assert [s.action for s in scheduler.pending()] == ["early", "late"]

    def test_time_until_next(self, scheduler: TransitionScheduler) -> None:
        assert scheduler.time_until_next() is None
        scheduler.handle("go", lambda step: None)
        scheduler.schedule([ScheduledStep(800, "go")])
        scheduler.advance(300)
        assert scheduler.time_until_next() == 500

    def test_now_accumulates(self, scheduler: TransitionScheduler) -> None:
        scheduler.advance(16.5)
        scheduler.advance(16.5)
        assert scheduler.now == 33.0
