"""
Domain Services Package

Pure, synchronous functions implementing the chart analytics: validation,
windowing, power-law regression, projection, extrema and formatting.
"""

from .extremum import find_maximum, find_minimum
from .formatting import format_count, format_growth_factor, format_hashrate, format_r2
from .projection import active_ratio, generate_projection
from .regression import days_since_genesis, fit_power_law
from .series_analysis import analyze_series, build_fit_line
from .validator import validate_address_series, validate_series
from .windowing import filter_by_period

__all__ = [
    "validate_series",
    "validate_address_series",
    "filter_by_period",
    "days_since_genesis",
    "fit_power_law",
    "generate_projection",
    "active_ratio",
    "find_maximum",
    "find_minimum",
    "format_hashrate",
    "format_count",
    "format_growth_factor",
    "format_r2",
    "analyze_series",
    "build_fit_line",
]
