"""Geometry engine - pointer coordinates to clamped track progress."""
from __future__ import annotations

import math
from numbers import Real
from typing import Any

from drag_verify.types import DegenerateTrackError, TrackGeometry


def compute_progress(
    client_x: float,
    track_left: float,
    track_width: float,
    handle_width: float,
) -> float:
    """Return the percentage of the track traversed by the handle.

    The handle is assumed to be grabbed at its centre, so the raw offset is
    ``client_x - track_left - handle_width / 2``. The offset is clamped to
    ``[0, track_width - handle_width]`` and scaled to ``[0, 100]``.

    Raises ``DegenerateTrackError`` when the track leaves no travel.

    >>> compute_progress(280.0, 0.0, 300.0, 60.0)
    100.0
    """
    travel = track_width - handle_width
    if travel <= 0:
        raise DegenerateTrackError(track_width, handle_width)
    offset = client_x - track_left - handle_width / 2
    clamped = min(max(0.0, offset), travel)
    return (clamped / travel) * 100


def progress_for(client_x: float, geometry: TrackGeometry) -> float:
    """``compute_progress`` against a captured ``TrackGeometry``."""
    return compute_progress(
        client_x, geometry.origin_x, geometry.width, geometry.handle_width
    )


def coerce_client_x(value: Any) -> float | None:
    """Normalise a raw coordinate. Returns None for anything unusable."""
    if value is None or isinstance(value, bool):
        return None
    if not isinstance(value, Real):
        return None
    x = float(value)
    if not math.isfinite(x):
        return None
    return x
