"""Tests for ReleaseGuards and the release transition table."""
from __future__ import annotations

import pytest
from drag_verify.guards import RELEASE_TRANSITIONS, ReleaseGuards
from drag_verify.types import DragSession, OutcomeUrls, Phase


def _session(progress: float, degenerate: bool = False) -> DragSession:
    return DragSession(urls=OutcomeUrls(), progress=progress, degenerate=degenerate)


@pytest.fixture
def guards() -> ReleaseGuards:
    return ReleaseGuards.default()


class TestDefaultTable:
    @pytest.mark.parametrize(
        "progress,expected",
        [
            (100.0, Phase.SUCCEEDED),
            (85.0001, Phase.SUCCEEDED),
            (85.0, Phase.FAILED_TRANSIENT),
            (41.7, Phase.FAILED_TRANSIENT),
            (0.001, Phase.FAILED_TRANSIENT),
            (0.0, Phase.IDLE),
        ],
    )
    def test_classification(self, guards: ReleaseGuards, progress: float, expected: Phase) -> None:
        assert guards.resolve(_session(progress)) is expected

    @pytest.mark.parametrize("progress", [0.0, 50.0, 100.0])
    def test_degenerate_always_fails(self, guards: ReleaseGuards, progress: float) -> None:
        assert guards.resolve(_session(progress, degenerate=True)) is Phase.FAILED_TRANSIENT

    def test_threshold_comes_from_session(self, guards: ReleaseGuards) -> None:
        session = _session(60.0)
        session.success_threshold = 50.0
        assert guards.resolve(session) is Phase.SUCCEEDED

    def test_every_table_guard_is_registered(self, guards: ReleaseGuards) -> None:
        for name, _ in RELEASE_TRANSITIONS:
            assert guards.has(name)


class TestRegistry:
    def test_register_and_check(self) -> None:
        guards = ReleaseGuards()
        guards.register("always", lambda s: True)
        assert guards.check("always", _session(0.0)) is True

    def test_unknown_guard_raises(self) -> None:
        with pytest.raises(KeyError):
            ReleaseGuards().check("missing", _session(0.0))

    def test_first_match_wins(self) -> None:
        guards = ReleaseGuards()
        guards.register("yes_a", lambda s: True)
        guards.register("yes_b", lambda s: True)
        table = [("yes_a", Phase.SUCCEEDED), ("yes_b", Phase.IDLE)]
        assert guards.resolve(_session(0.0), table) is Phase.SUCCEEDED

    def test_no_match_returns_none(self) -> None:
        guards = ReleaseGuards()
        guards.register("no", lambda s: False)
        assert guards.resolve(_session(0.0), [("no", Phase.IDLE)]) is None

    def test_register_overwrites(self) -> None:
        guards = ReleaseGuards.default()
        guards.register("past_threshold", lambda s: s.progress > 50)
        assert guards.resolve(_session(60.0)) is Phase.SUCCEEDED

    def test_gap_in_table_resolves_to_none(self) -> None:
        guards = ReleaseGuards.default()
        guards.register("past_threshold", lambda s: False)
        assert guards.resolve(_session(99.0)) is None
