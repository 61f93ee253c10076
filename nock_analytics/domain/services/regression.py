"""
Power-law regression in log-log space.

Fits ``value = a * days^b`` where ``days`` counts whole days since a
dataset-specific genesis, by ordinary least squares on ``(ln days, ln value)``.
"""

import math
from typing import Callable, Optional, Sequence

import numpy as np

from nock_analytics.domain.entities.analytics import RegressionResult
from nock_analytics.domain.entities.time_series import TimePoint
from nock_analytics.shared.consts import MS_PER_DAY


def days_since_genesis(timestamp_ms: int, genesis_ms: int) -> int:
    """Whole days since genesis, counting the genesis day as day 1.

    Never less than 1, so the logarithm stays defined for timestamps
    before genesis.
    """
    return max(1, (int(timestamp_ms) - int(genesis_ms)) // MS_PER_DAY + 1)


def _value(point: TimePoint) -> float:
    return point.value


def fit_power_law(
    points: Sequence[TimePoint],
    genesis_ms: int,
    value_of: Callable[[TimePoint], float] = _value,
) -> Optional[RegressionResult]:
    """
    Fit a power law to ``points``.

    Args:
        points: Validated series, at least two points.
        genesis_ms: Epoch-ms origin of the day axis.
        value_of: Accessor for the fitted quantity.

    Returns:
        The fitted curve, or None when the input is too short or degenerate
        (non-finite logs, identical day values, a constant value, or
        non-finite coefficients or R²).
    """
    if len(points) < 2:
        return None

    days = np.array(
        [days_since_genesis(point.timestamp, genesis_ms) for point in points],
        dtype=np.float64,
    )
    values = np.array([value_of(point) for point in points], dtype=np.float64)

    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        log_x = np.log(days)
        log_y = np.log(values)

        if not (np.all(np.isfinite(log_x)) and np.all(np.isfinite(log_y))):
            return None
        if np.ptp(log_x) == 0 or np.ptp(log_y) == 0:
            return None

        n = len(log_x)
        sum_x = np.sum(log_x)
        sum_y = np.sum(log_y)
        sum_xy = np.sum(log_x * log_y)
        sum_x2 = np.sum(log_x**2)
        sum_y2 = np.sum(log_y**2)

        slope = (n * sum_xy - sum_x * sum_y) / (n * sum_x2 - sum_x**2)
        intercept = (sum_y - slope * sum_x) / n
        if not (math.isfinite(slope) and math.isfinite(intercept)):
            return None

        mean_x = sum_x / n
        mean_y = sum_y / n
        ss_xy = sum_xy - n * mean_x * mean_y
        ss_xx = sum_x2 - n * mean_x * mean_x
        ss_yy = sum_y2 - n * mean_y * mean_y
        r_value = ss_xy / np.sqrt(ss_xx * ss_yy)

    r2 = float(r_value * r_value)
    if not math.isfinite(r2):
        return None

    a = math.exp(float(intercept))
    if not math.isfinite(a):
        return None

    return RegressionResult(a=a, b=float(slope), r2=min(1.0, max(0.0, r2)))
