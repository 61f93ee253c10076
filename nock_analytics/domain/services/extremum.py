"""All-time high / low lookup over a window of points."""

from typing import Callable, Optional, Sequence, TypeVar

from nock_analytics.domain.entities.time_series import TimePoint

P = TypeVar("P", bound=TimePoint)


def _value(point: TimePoint) -> float:
    return point.value


def find_maximum(
    points: Sequence[P], value_of: Callable[[P], float] = _value
) -> Optional[P]:
    """First point holding the largest value, or None for an empty sequence."""
    best: Optional[P] = None
    for point in points:
        if best is None or value_of(point) > value_of(best):
            best = point
    return best


def find_minimum(
    points: Sequence[P], value_of: Callable[[P], float] = _value
) -> Optional[P]:
    """First point holding the smallest value, or None for an empty sequence."""
    best: Optional[P] = None
    for point in points:
        if best is None or value_of(point) < value_of(best):
            best = point
    return best
