"""
Series analysis pipeline.

Single entry point shared by every chart: window the validated series,
fit the power law, build the fit line and projection, and locate the
extrema. Parameterised by a :class:`DatasetProfile` instead of being
duplicated per dataset.
"""

import math
from typing import Callable, List, Optional, Sequence

from nock_analytics.domain.entities.analytics import (
    Extrema,
    FitPoint,
    RegressionResult,
    SeriesAnalysis,
)
from nock_analytics.domain.entities.chart import (
    ChartOptions,
    DatasetProfile,
    Visibility,
)
from nock_analytics.domain.entities.time_series import AddressPoint, TimePoint
from nock_analytics.domain.services.extremum import find_maximum, find_minimum
from nock_analytics.domain.services.projection import active_ratio, generate_projection
from nock_analytics.domain.services.regression import days_since_genesis, fit_power_law
from nock_analytics.domain.services.windowing import filter_by_period


def _value(point: TimePoint) -> float:
    return point.value


def build_fit_line(
    regression: RegressionResult, points: Sequence[TimePoint], genesis_ms: int
) -> List[FitPoint]:
    """Fitted value at each observed timestamp; overflowing values are skipped."""
    line: List[FitPoint] = []
    for point in points:
        days = days_since_genesis(point.timestamp, genesis_ms)
        fitted = regression.evaluate(days)
        if math.isfinite(fitted):
            line.append(
                FitPoint(
                    timestamp=point.timestamp,
                    days_since_genesis=days,
                    fitted_value=fitted,
                )
            )
    return line


def analyze_series(
    points: Sequence[TimePoint],
    profile: DatasetProfile,
    options: ChartOptions,
    now_ms: Optional[int] = None,
    value_of: Callable[[TimePoint], float] = _value,
) -> SeriesAnalysis:
    """
    Run the full chart pipeline over an already validated series.

    The regression is computed on the selected window and only when it
    holds at least ``profile.min_fit_points`` points. The projection is
    anchored on the last point of that window.
    """
    window = filter_by_period(points, options.time_period, now_ms)

    regression: Optional[RegressionResult] = None
    if (
        options.show_power_law == Visibility.SHOW
        and len(window) >= profile.min_fit_points
    ):
        regression = fit_power_law(window, profile.genesis_ms, value_of)

    fit_line: List[FitPoint] = []
    if regression is not None:
        fit_line = build_fit_line(regression, window, profile.genesis_ms)

    projection = []
    if options.show_projection == Visibility.SHOW and window:
        share = None
        last_point = window[-1]
        if profile.project_active and isinstance(last_point, AddressPoint):
            share = active_ratio(last_point)
        projection = generate_projection(
            regression,
            window,
            profile.genesis_ms,
            horizon_days=profile.projection_horizon_days,
            step_days=profile.projection_step_days,
            min_points=profile.min_fit_points,
            active_share=share,
        )

    extrema = Extrema(
        maximum=find_maximum(window, value_of),
        minimum=find_minimum(window, value_of) if profile.track_minimum else None,
    )

    return SeriesAnalysis(
        points=list(points),
        window=window,
        regression=regression,
        fit_line=fit_line,
        projection=projection,
        extrema=extrema,
    )
