"""Pace and duration formatting utilities."""
from typing import Optional

# 1 mile in kilometers
_KM_PER_MILE = 1.60934


def pace_from_speed_ms(speed_ms: Optional[float]) -> Optional[float]:
    """
    Convert speed in m/s to pace in seconds per kilometer.

    Returns:
        Pace in seconds/km, or None if speed is missing, zero or negative.
    """
    if not speed_ms or speed_ms <= 0:
        return None
    return 1000.0 / speed_ms


def format_pace(pace_s_per_km: float, unit: str = "km") -> str:
    """
    Format a pace (seconds/km) as a human-readable string.

    Args:
        pace_s_per_km: pace in seconds per kilometer
        unit: "km" for per-kilometer (default), "mi" for per-mile

    Returns:
        Formatted string like "5:17/km" or "8:30/mi"
    """
    if unit == "mi":
        pace_s = pace_s_per_km * _KM_PER_MILE
        unit_label = "mi"
    else:
        pace_s = pace_s_per_km
        unit_label = "km"

    total = int(round(pace_s))
    return f"{total // 60}:{total % 60:02d}/{unit_label}"


def format_speed_as_pace(speed_ms: Optional[float], unit: str = "km") -> str:
    """Format a speed in m/s as pace, "N/A" when there is no usable speed."""
    pace = pace_from_speed_ms(speed_ms)
    if pace is None:
        return "N/A"
    return format_pace(pace, unit=unit)


def format_duration(seconds: Optional[float]) -> str:
    """
    Format a duration as "1h05" when at least one hour, otherwise "42min".
    Seconds are truncated.
    """
    total = int(seconds or 0)
    hours = total // 3600
    minutes = (total % 3600) // 60
    if hours > 0:
        return f"{hours}h{minutes:02d}"
    return f"{minutes}min"
