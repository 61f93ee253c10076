"""Trailing time-window filter for validated series."""

import time
from typing import List, Optional, Sequence, TypeVar

from nock_analytics.domain.entities.chart import TimePeriod
from nock_analytics.domain.entities.time_series import TimePoint
from nock_analytics.shared.consts import MS_PER_DAY, MS_PER_SECOND

P = TypeVar("P", bound=TimePoint)


def current_time_ms() -> int:
    return int(time.time() * MS_PER_SECOND)


def window_cutoff(period: TimePeriod, now_ms: int) -> Optional[int]:
    """Earliest timestamp kept for ``period``, or None when nothing is cut."""
    days = period.days
    if days is None:
        return None
    return now_ms - days * MS_PER_DAY


def filter_by_period(
    points: Sequence[P], period: TimePeriod, now_ms: Optional[int] = None
) -> List[P]:
    """Return the points with ``timestamp >= now - period``.

    ``now_ms`` is sampled once per call when not given, so every point is
    compared against the same cutoff. ``TimePeriod.ALL`` returns the input.
    """
    if now_ms is None:
        now_ms = current_time_ms()
    cutoff = window_cutoff(period, now_ms)
    if cutoff is None:
        return list(points)
    return [point for point in points if point.timestamp >= cutoff]
