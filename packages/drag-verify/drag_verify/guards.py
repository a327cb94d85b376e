"""Release guards - classify a finished drag."""
from __future__ import annotations

from typing import Callable

from drag_verify.types import DragSession, Phase

# Evaluated in order on drag-end; the first guard that passes wins.
RELEASE_TRANSITIONS: list[tuple[str, Phase]] = [
    ("degenerate_track", Phase.FAILED_TRANSIENT),
    ("past_threshold", Phase.SUCCEEDED),
    ("partial_progress", Phase.FAILED_TRANSIENT),
    ("untouched", Phase.IDLE),
]


class ReleaseGuards:
    """Maps guard name strings to predicates over a ``DragSession``."""

    def __init__(self) -> None:
        self._guards: dict[str, Callable[[DragSession], bool]] = {}

    @classmethod
    def default(cls) -> ReleaseGuards:
        guards = cls()
        guards.register("degenerate_track", lambda s: s.degenerate)
        # Strictly greater: exactly-at-threshold is a failure.
        guards.register("past_threshold", lambda s: s.progress > s.success_threshold)
        guards.register("partial_progress", lambda s: 0 < s.progress <= s.success_threshold)
        guards.register("untouched", lambda s: s.progress == 0)
        return guards

    def register(self, name: str, fn: Callable[[DragSession], bool]) -> None:
        """Register a named guard. Overwrites if already registered."""
        self._guards[name] = fn

    def check(self, name: str, session: DragSession) -> bool:
        """Evaluate a guard. Raises KeyError if not registered."""
        return self._guards[name](session)

    def has(self, name: str) -> bool:
        return name in self._guards

    def resolve(
        self,
        session: DragSession,
        table: list[tuple[str, Phase]] = RELEASE_TRANSITIONS,
    ) -> Phase | None:
        """Return the target of the first passing guard, or None."""
        for guard_name, target in table:
            if self.check(guard_name, session):
                return target
        return None
