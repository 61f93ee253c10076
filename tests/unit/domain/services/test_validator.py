from __future__ import annotations

import math
from types import SimpleNamespace

from nock_analytics.domain.entities.time_series import AddressPoint, TimePoint
from nock_analytics.domain.services.validator import (
    validate_address_series,
    validate_series,
)


def test_validate_series_drops_invalid_and_sorts() -> None:
    records = [
        {"timestamp": 3000, "value": 3.0},
        {"timestamp": 1000, "value": 1.0},
        {"timestamp": 2000, "value": -5.0},
        {"timestamp": 4000, "value": 0},
        {"timestamp": 5000, "value": math.nan},
        {"timestamp": 6000, "value": math.inf},
        {"timestamp": 7000, "value": "12"},
        {"timestamp": None, "value": 1.0},
        {"value": 1.0},
        None,
        {"timestamp": 2500, "value": 2.5},
    ]

    points = validate_series(records)

    assert points == [
        TimePoint(timestamp=1000, value=1.0),
        TimePoint(timestamp=2500, value=2.5),
        TimePoint(timestamp=3000, value=3.0),
    ]


def test_validate_series_rejects_booleans() -> None:
    assert validate_series([{"timestamp": 1000, "value": True}]) == []


def test_validate_series_handles_missing_input() -> None:
    assert validate_series(None) == []
    assert validate_series([]) == []


def test_validate_series_accepts_objects_with_attributes() -> None:
    points = validate_series([SimpleNamespace(timestamp=10, value=2)])

    assert points == [TimePoint(timestamp=10, value=2.0)]
    assert isinstance(points[0].value, float)


def test_validate_series_keeps_input_order_for_equal_timestamps() -> None:
    points = validate_series(
        [
            {"timestamp": 2000, "value": 9.0},
            {"timestamp": 1000, "value": 1.0},
            {"timestamp": 2000, "value": 4.0},
        ]
    )

    assert [point.value for point in points] == [1.0, 9.0, 4.0]


def test_validate_series_output_is_valid_and_sorted() -> None:
    records = [{"timestamp": t, "value": v} for t, v in [(5, 1), (3, 0), (1, 2)]]

    points = validate_series(records)

    assert all(point.value > 0 and point.timestamp > 0 for point in points)
    assert [point.timestamp for point in points] == sorted(
        point.timestamp for point in points
    )


def test_validate_address_series_defaults_counters_to_zero() -> None:
    points = validate_address_series(
        [
            {
                "timestamp": 2000,
                "value": 50,
                "block_height": "n/a",
                "new_addresses": None,
            },
            {
                "timestamp": 1000,
                "value": 10,
                "block_height": 1200,
                "new_addresses": 4,
                "active_addresses": 7,
            },
            {"timestamp": 3000, "value": None, "active_addresses": 9},
        ]
    )

    assert points == [
        AddressPoint(
            timestamp=1000,
            value=10.0,
            block_height=1200,
            new_addresses=4,
            active_addresses=7,
        ),
        AddressPoint(timestamp=2000, value=50.0),
    ]


def test_validate_series_drops_integers_too_large_for_a_float() -> None:
    records = [
        {"timestamp": 10**400, "value": 1.0},
        {"timestamp": 1000, "value": 10**400},
        {"timestamp": 2000, "value": 2.0},
    ]

    assert validate_series(records) == [TimePoint(timestamp=2000, value=2.0)]


def test_validate_address_series_zeroes_oversized_counters() -> None:
    points = validate_address_series(
        [{"timestamp": 1000, "value": 10, "active_addresses": 10**400}]
    )

    assert points == [AddressPoint(timestamp=1000, value=10.0, active_addresses=0)]
