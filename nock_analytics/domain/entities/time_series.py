"""Domain entities for validated time-series points."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class TimePoint:
    """A validated observation: positive, finite value at an epoch-ms timestamp."""

    timestamp: int
    value: float


@dataclass(frozen=True, slots=True)
class AddressPoint(TimePoint):
    """Address-growth window; ``value`` is the cumulative unique address count."""

    block_height: int = 0
    new_addresses: int = 0
    active_addresses: int = 0
