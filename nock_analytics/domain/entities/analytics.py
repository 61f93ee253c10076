"""
Analytics domain entities.

Value objects produced by the regression / projection pipeline. None of
them are persisted; they are rebuilt on every analysis call.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Generic, List, Optional, TypeVar

from .time_series import TimePoint

P = TypeVar("P", bound=TimePoint)


@dataclass(frozen=True, slots=True)
class RegressionResult:
    """Power law ``y = a * x^b`` fitted in log-log space, with its R²."""

    a: float
    b: float
    r2: float

    def evaluate(self, days_since_genesis: float) -> float:
        try:
            return self.a * days_since_genesis**self.b
        except OverflowError:
            return math.inf


@dataclass(frozen=True, slots=True)
class ProjectionPoint:
    """Synthetic future point on the fitted curve."""

    timestamp: int
    days_since_genesis: int
    projected_value: float
    projected_active: Optional[float] = None


@dataclass(frozen=True, slots=True)
class FitPoint:
    """Fitted curve value at an observed timestamp."""

    timestamp: int
    days_since_genesis: int
    fitted_value: float


@dataclass(frozen=True, slots=True)
class Extrema(Generic[P]):
    """All-time high / low inside the analysed window."""

    maximum: Optional[P] = None
    minimum: Optional[P] = None


@dataclass(slots=True)
class SeriesAnalysis(Generic[P]):
    """Everything a chart needs for one dataset and one set of options."""

    points: List[P]
    window: List[P]
    regression: Optional[RegressionResult] = None
    fit_line: List[FitPoint] = field(default_factory=list)
    projection: List[ProjectionPoint] = field(default_factory=list)
    extrema: Extrema = field(default_factory=Extrema)
