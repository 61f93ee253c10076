"""Chart options and per-dataset analysis profiles."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class TimePeriod(str, Enum):
    """Trailing window selectable on a chart."""

    ONE_MONTH = "1M"
    THREE_MONTHS = "3M"
    SIX_MONTHS = "6M"
    ONE_YEAR = "1Y"
    ALL = "All"

    @property
    def days(self) -> Optional[int]:
        return _PERIOD_DAYS.get(self)


_PERIOD_DAYS = {
    TimePeriod.ONE_MONTH: 30,
    TimePeriod.THREE_MONTHS: 90,
    TimePeriod.SIX_MONTHS: 180,
    TimePeriod.ONE_YEAR: 365,
}


class AxisScale(str, Enum):
    LINEAR = "Linear"
    LOG = "Log"


class Visibility(str, Enum):
    HIDE = "Hide"
    SHOW = "Show"


class ChartType(str, Enum):
    """Which address series the client draws."""

    TOTAL = "Total"
    ACTIVE = "Active"
    BOTH = "Both"


@dataclass(frozen=True, slots=True)
class ChartOptions:
    """Presentation toggles sent by the client.

    Only ``time_period``, ``show_power_law`` and ``show_projection`` change
    the computation; the scales and chart type are echoed back for rendering.
    """

    time_period: TimePeriod = TimePeriod.ALL
    value_scale: AxisScale = AxisScale.LOG
    time_scale: AxisScale = AxisScale.LINEAR
    show_power_law: Visibility = Visibility.SHOW
    show_projection: Visibility = Visibility.SHOW
    chart_type: Optional[ChartType] = None


@dataclass(frozen=True, slots=True)
class DatasetProfile:
    """Dataset-specific configuration for the analysis pipeline."""

    name: str
    genesis_ms: int
    track_minimum: bool = False
    project_active: bool = False
    min_fit_points: int = 10
    projection_horizon_days: int = 1000
    projection_step_days: int = 10
