"""Human readable durations on an 8-hour workday."""

from __future__ import annotations

import math

HOURS_PER_WORKDAY = 8


def _number(value: float) -> str:
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


def format_duration(seconds: float) -> str:
    """Render seconds as ``"{d}d {h}h {m}m"`` or ``"{h}h {m}m"`` when under a workday.

    Minutes are not truncated, so a value that is not a multiple of 60 seconds
    renders with fractional minutes.
    """

    minutes = seconds / 60
    hours = math.floor(minutes / 60)
    days = math.floor(hours / HOURS_PER_WORKDAY)

    if days > 0:
        return f"{days}d {hours % HOURS_PER_WORKDAY}h {_number(minutes % 60)}m"
    return f"{hours}h {_number(minutes % 60)}m"
