"""Domain service for turning loosely typed upstream records into TimePoints."""

import math
from collections.abc import Mapping
from typing import Any, Iterable, List, Optional

from nock_analytics.domain.entities.time_series import AddressPoint, TimePoint


def _field(record: Any, name: str) -> Any:
    if isinstance(record, Mapping):
        return record.get(name)
    return getattr(record, name, None)


def _as_float(value: Any) -> Optional[float]:
    # bool is an int subclass, but True is not a measurement
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    try:
        as_float = float(value)
    except OverflowError:
        return None
    return as_float if math.isfinite(as_float) else None


def _positive_finite(value: Any) -> Optional[float]:
    as_float = _as_float(value)
    if as_float is None or as_float <= 0:
        return None
    return as_float


def _count(value: Any) -> int:
    as_float = _as_float(value)
    return 0 if as_float is None else int(as_float)


def _sorted_by_timestamp(points: List[TimePoint]) -> List[TimePoint]:
    # sorted() is stable, so duplicate timestamps keep their input order
    return sorted(points, key=lambda point: point.timestamp)


def validate_series(records: Optional[Iterable[Any]]) -> List[TimePoint]:
    """Keep records whose ``timestamp`` and ``value`` are numeric, finite and positive.

    Invalid records are dropped without raising. The result is sorted
    ascending by timestamp.
    """
    if records is None:
        return []

    points: List[TimePoint] = []
    for record in records:
        if record is None:
            continue
        timestamp = _positive_finite(_field(record, "timestamp"))
        value = _positive_finite(_field(record, "value"))
        if timestamp is None or value is None:
            continue
        points.append(TimePoint(timestamp=int(timestamp), value=float(value)))

    return _sorted_by_timestamp(points)


def validate_address_series(records: Optional[Iterable[Any]]) -> List[AddressPoint]:
    """Like :func:`validate_series`, producing :class:`AddressPoint` values.

    ``block_height``, ``new_addresses`` and ``active_addresses`` are
    informational: missing or non-numeric values become 0.
    """
    if records is None:
        return []

    points: List[AddressPoint] = []
    for record in records:
        if record is None:
            continue
        timestamp = _positive_finite(_field(record, "timestamp"))
        value = _positive_finite(_field(record, "value"))
        if timestamp is None or value is None:
            continue
        points.append(
            AddressPoint(
                timestamp=int(timestamp),
                value=float(value),
                block_height=_count(_field(record, "block_height")),
                new_addresses=_count(_field(record, "new_addresses")),
                active_addresses=_count(_field(record, "active_addresses")),
            )
        )

    return _sorted_by_timestamp(points)
