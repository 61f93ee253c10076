"""Snapshots of the NockChain datasets served by the proxy endpoints."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from .time_series import AddressPoint, TimePoint


@dataclass(frozen=True, slots=True)
class ChainTip:
    """Current chain tip as reported by ``getTip``."""

    height: int = 0
    timestamp: int = 0
    difficulty: float = 0.0
    proofs_per_second: float = 0.0


@dataclass(frozen=True, slots=True)
class DateRange:
    start: int
    end: int


@dataclass(frozen=True, slots=True)
class HashrateSnapshot:
    """Validated proof-rate history plus the tip it was fetched against."""

    points: List[TimePoint]
    tip: ChainTip

    @property
    def total_points(self) -> int:
        return len(self.points)

    @property
    def date_range(self) -> DateRange:
        return DateRange(start=self.points[0].timestamp, end=self.points[-1].timestamp)

    @property
    def current_hashrate(self) -> float:
        return self.points[-1].value

    @property
    def growth_factor(self) -> float:
        return self.points[-1].value / self.points[0].value


@dataclass(frozen=True, slots=True)
class AddressSnapshot:
    """Validated wallet-growth windows plus the tip they were fetched against."""

    points: List[AddressPoint]
    tip: ChainTip

    @property
    def total_points(self) -> int:
        return len(self.points)

    @property
    def date_range(self) -> DateRange:
        return DateRange(start=self.points[0].timestamp, end=self.points[-1].timestamp)

    @property
    def current_addresses(self) -> float:
        return self.points[-1].value

    @property
    def growth_factor(self) -> float:
        return self.points[-1].value / self.points[0].value

    @property
    def latest_window(self) -> Optional[AddressPoint]:
        return self.points[-1] if self.points else None
