from __future__ import annotations

from nock_analytics.domain.entities.time_series import AddressPoint, TimePoint
from nock_analytics.domain.services.extremum import find_maximum, find_minimum


def test_find_maximum_returns_highest_point() -> None:
    points = [
        TimePoint(timestamp=1, value=5.0),
        TimePoint(timestamp=2, value=9.0),
        TimePoint(timestamp=3, value=7.0),
    ]

    assert find_maximum(points) == TimePoint(timestamp=2, value=9.0)
    assert find_minimum(points) == TimePoint(timestamp=1, value=5.0)


def test_minimum_can_be_the_last_point() -> None:
    points = [
        TimePoint(timestamp=1, value=5.0),
        TimePoint(timestamp=2, value=9.0),
        TimePoint(timestamp=3, value=3.0),
    ]

    assert find_maximum(points) == TimePoint(timestamp=2, value=9.0)
    assert find_minimum(points) == TimePoint(timestamp=3, value=3.0)


def test_ties_resolve_to_earliest_point() -> None:
    points = [
        TimePoint(timestamp=1, value=3.0),
        TimePoint(timestamp=2, value=9.0),
        TimePoint(timestamp=3, value=9.0),
        TimePoint(timestamp=4, value=3.0),
    ]

    assert find_maximum(points).timestamp == 2
    assert find_minimum(points).timestamp == 1


def test_empty_sequence_has_no_extremum() -> None:
    assert find_maximum([]) is None
    assert find_minimum([]) is None


def test_custom_accessor_selects_field() -> None:
    points = [
        AddressPoint(timestamp=1, value=100.0, active_addresses=40),
        AddressPoint(timestamp=2, value=200.0, active_addresses=10),
    ]

    busiest = find_maximum(points, value_of=lambda p: p.active_addresses)

    assert busiest.timestamp == 1
