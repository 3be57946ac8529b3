"""
TimeseriesPoint and GPSPoint dataclasses.

These are the in-memory records produced by the stream queries and consumed
by the analysis modules (lap filtering, power zones). They are plain Python
dataclasses: no SQLModel, no DB dependencies.
"""
from dataclasses import dataclass
from typing import Any, Dict, List, Optional


@dataclass
class TimeseriesPoint:
    """
    One joined sample of an activity, ~1 per second.
    All fields except timestamp are optional (the sensor may be absent).
    """

    timestamp: int                        # epoch seconds
    power: Optional[float] = None         # W
    heart_rate: Optional[float] = None    # bpm
    speed: Optional[float] = None         # m/s
    cadence: Optional[float] = None       # spm
    distance: Optional[float] = None      # cumulative meters
    stride_length: Optional[float] = None # meters
    elevation: Optional[float] = None     # meters


@dataclass
class GPSPoint:
    """One location fix with the power recorded at the same second, if any."""

    timestamp: int
    lat: float
    lng: float
    power: Optional[float] = None


def rows_to_timeseries(rows: List[Dict[str, Any]]) -> List[TimeseriesPoint]:
    """
    Convert joined row mappings (column label -> value) into TimeseriesPoint
    instances, preserving order.
    """
    return [
        TimeseriesPoint(
            timestamp=row["timestamp"],
            power=row.get("power"),
            heart_rate=row.get("heart_rate"),
            speed=row.get("speed"),
            cadence=row.get("cadence"),
            distance=row.get("distance"),
            stride_length=row.get("stride_length"),
            elevation=row.get("elevation"),
        )
        for row in rows
    ]
