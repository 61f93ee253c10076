from __future__ import annotations

import pytest

from nock_analytics.domain.entities.chart import TimePeriod
from nock_analytics.domain.entities.time_series import TimePoint
from nock_analytics.domain.services.windowing import filter_by_period, window_cutoff
from nock_analytics.shared.consts import MS_PER_DAY

from conftest import day

NOW = day(400)


@pytest.fixture()
def yearly_points():
    return [TimePoint(timestamp=day(n), value=float(n + 1)) for n in range(0, 400, 5)]


def test_all_period_returns_every_point(yearly_points) -> None:
    assert filter_by_period(yearly_points, TimePeriod.ALL, NOW) == yearly_points


@pytest.mark.parametrize(
    "period, days",
    [
        (TimePeriod.ONE_MONTH, 30),
        (TimePeriod.THREE_MONTHS, 90),
        (TimePeriod.SIX_MONTHS, 180),
        (TimePeriod.ONE_YEAR, 365),
    ],
)
def test_window_keeps_points_inside_period(yearly_points, period, days) -> None:
    window = filter_by_period(yearly_points, period, NOW)

    cutoff = NOW - days * MS_PER_DAY
    assert window_cutoff(period, NOW) == cutoff
    assert window == [p for p in yearly_points if p.timestamp >= cutoff]
    assert all(point in yearly_points for point in window)


def test_cutoff_boundary_is_inclusive() -> None:
    cutoff = NOW - 30 * MS_PER_DAY
    points = [
        TimePoint(timestamp=cutoff - 1, value=1.0),
        TimePoint(timestamp=cutoff, value=2.0),
    ]

    window = filter_by_period(points, TimePeriod.ONE_MONTH, NOW)

    assert window == [TimePoint(timestamp=cutoff, value=2.0)]


def test_old_series_can_yield_empty_window() -> None:
    points = [TimePoint(timestamp=day(1), value=1.0)]

    assert filter_by_period(points, TimePeriod.ONE_MONTH, NOW) == []


def test_time_period_days() -> None:
    assert TimePeriod.ALL.days is None
    assert TimePeriod("6M").days == 180
