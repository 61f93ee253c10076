"""Forward extrapolation of a fitted power law."""

import math
from typing import List, Optional, Sequence

from nock_analytics.domain.entities.analytics import ProjectionPoint, RegressionResult
from nock_analytics.domain.entities.time_series import AddressPoint, TimePoint
from nock_analytics.domain.services.regression import days_since_genesis
from nock_analytics.shared.consts import MS_PER_DAY

PROJECTION_HORIZON_DAYS = 1000
PROJECTION_STEP_DAYS = 10
MIN_PROJECTION_POINTS = 10

# Heuristic: the last active/total ratio, damped and floored. Not fitted.
ACTIVE_RATIO_DAMPING = 0.9
ACTIVE_RATIO_FLOOR = 0.1


def active_ratio(
    last_point: AddressPoint,
    damping: float = ACTIVE_RATIO_DAMPING,
    floor: float = ACTIVE_RATIO_FLOOR,
) -> float:
    """Share of the projected total expected to be active addresses."""
    return max(floor, (last_point.active_addresses / last_point.value) * damping)


def generate_projection(
    regression: Optional[RegressionResult],
    points: Sequence[TimePoint],
    genesis_ms: int,
    horizon_days: int = PROJECTION_HORIZON_DAYS,
    step_days: int = PROJECTION_STEP_DAYS,
    min_points: int = MIN_PROJECTION_POINTS,
    active_share: Optional[float] = None,
) -> List[ProjectionPoint]:
    """
    Extrapolate ``regression`` beyond the last observed point.

    One point every ``step_days`` up to and including ``horizon_days``.
    When ``active_share`` is given each point also carries
    ``projected_active = projected_value * active_share``.

    Returns an empty list when the regression is missing or the series
    holds fewer than ``min_points`` points, and stops early once the curve
    overflows a float.

    Raises:
        ValueError: If ``step_days`` is not positive.
    """
    if step_days <= 0:
        raise ValueError("Projection step must be a positive number of days.")
    if regression is None or len(points) < min_points:
        return []

    last_point = points[-1]
    last_days = days_since_genesis(last_point.timestamp, genesis_ms)

    projection: List[ProjectionPoint] = []
    for offset in range(step_days, horizon_days + 1, step_days):
        future_days = last_days + offset
        projected = regression.evaluate(future_days)
        if not math.isfinite(projected):
            break
        projection.append(
            ProjectionPoint(
                timestamp=last_point.timestamp + offset * MS_PER_DAY,
                days_since_genesis=future_days,
                projected_value=projected,
                projected_active=(
                    projected * active_share if active_share is not None else None
                ),
            )
        )
    return projection
