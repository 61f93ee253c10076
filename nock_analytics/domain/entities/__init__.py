"""
Domain Entities Package

Value objects for time series, analytics results, chart options,
chain snapshots, health and domain errors.
"""

from .analytics import (
    Extrema,
    FitPoint,
    ProjectionPoint,
    RegressionResult,
    SeriesAnalysis,
)
from .chain import AddressSnapshot, ChainTip, DateRange, HashrateSnapshot
from .chart import (
    AxisScale,
    ChartOptions,
    ChartType,
    DatasetProfile,
    TimePeriod,
    Visibility,
)
from .errors import DatasetUnavailableError, DomainError, NockBlocksRPCError
from .health import ApplicationInfo, ServiceStatus, SystemHealth
from .time_series import AddressPoint, TimePoint

__all__ = [
    "TimePoint",
    "AddressPoint",
    "RegressionResult",
    "ProjectionPoint",
    "FitPoint",
    "Extrema",
    "SeriesAnalysis",
    "ChainTip",
    "DateRange",
    "HashrateSnapshot",
    "AddressSnapshot",
    "TimePeriod",
    "AxisScale",
    "Visibility",
    "ChartType",
    "ChartOptions",
    "DatasetProfile",
    "SystemHealth",
    "ServiceStatus",
    "ApplicationInfo",
    "DomainError",
    "NockBlocksRPCError",
    "DatasetUnavailableError",
]
