"""Human readable rendering of large magnitudes."""

from typing import Union

Number = Union[int, float]

_HASHRATE_UNITS = (
    (1e18, "EH/s"),
    (1e15, "PH/s"),
    (1e12, "TH/s"),
    (1e9, "GH/s"),
)


def format_hashrate(value: Number) -> str:
    """``1.5e15 -> "1.50 PH/s"``; anything below a GH/s is shown in MH/s."""
    for threshold, unit in _HASHRATE_UNITS:
        if value >= threshold:
            return f"{value / threshold:.2f} {unit}"
    return f"{value / 1e6:.2f} MH/s"


def format_count(value: Number) -> str:
    """``1_234_567 -> "1.23M"``, ``12_345 -> "12.3K"``, ``999 -> "999"``."""
    if value >= 1e6:
        return f"{value / 1e6:.2f}M"
    if value >= 1e3:
        return f"{value / 1e3:.1f}K"
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    if isinstance(value, int):
        return f"{value:,}"
    return f"{value:,.3f}".rstrip("0").rstrip(".")


def format_growth_factor(factor: float) -> str:
    return f"{factor:.1f}x"


def format_r2(r2: float) -> str:
    return f"{r2:.3f}"
