"""Tests for WidgetView."""
from __future__ import annotations

import pytest
from drag_verify.types import Phase
from drag_verify.view import FAILURE_MESSAGE, PROMPT, SUCCESS_MESSAGE, WidgetView


def test_idle_untouched():
    view = WidgetView.from_state(Phase.IDLE, 0.0)
    assert view.tone == "neutral"
    assert view.message == PROMPT
    assert view.icon == "arrow"
    assert view.fill_pct == 0.0
    assert view.handle_left_pct == 0.0
    assert view.text_inverted is False


def test_dragging_past_half_inverts_text():
    view = WidgetView.from_state(Phase.DRAGGING, 60.0)
    assert view.tone == "active"
    assert view.text_inverted is True
    assert view.handle_left_pct == pytest.approx(51.0)


def test_succeeded():
    view = WidgetView.from_state(Phase.SUCCEEDED, 100.0)
    assert (view.tone, view.message, view.icon) == ("success", SUCCESS_MESSAGE, "check")
    assert view.handle_left_pct == pytest.approx(85.0)
    assert view.text_inverted is False


def test_failed_keeps_progress_visible():
    view = WidgetView.from_state(Phase.FAILED_TRANSIENT, 41.0)
    assert (view.tone, view.message, view.icon) == ("failure", FAILURE_MESSAGE, "alert")
    assert view.fill_pct == 41.0


def test_reset_after_failure():
    view = WidgetView.from_state(Phase.RESET, 0.0)
    assert view.message == FAILURE_MESSAGE
    assert view.fill_pct == 0.0
