"""Activity store models: training sessions, laps and GPS fixes.

These map onto tables created by the upstream Stryd export. Column names
follow that schema, which is why ``date`` is stored as ISO-8601 text.
"""
from typing import Optional

from sqlmodel import Field, SQLModel


class Activity(SQLModel, table=True):
    """One row per recorded training session."""

    __tablename__ = "activities"

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None
    type: Optional[str] = Field(default=None, index=True)  # "Run", "Trail Run", ...
    date: Optional[str] = Field(default=None, index=True)  # ISO-8601, e.g. "2024-01-05T07:30:00"

    distance: Optional[float] = None  # meters
    moving_time: Optional[float] = None  # seconds

    average_speed: Optional[float] = None  # m/s
    average_power: Optional[float] = None  # W
    average_heart_rate: Optional[float] = None  # bpm
    average_cadence: Optional[float] = None  # spm

    # Power threshold reference (CP/FTP) used for zone bucketing
    ftp: Optional[float] = None

    # Comma-separated free text, e.g. "Easy, Tempo"
    tags: Optional[str] = None

    calories: Optional[float] = None
    total_elevation_gain: Optional[float] = None  # meters


class Lap(SQLModel, table=True):
    """
    One row per lap marker. Lap numbers start at 1 and are contiguous; a lap
    covers [timestamp, next lap's timestamp).
    """

    __tablename__ = "laps"

    activity_id: int = Field(primary_key=True)
    lap_number: int = Field(primary_key=True)
    timestamp: int  # epoch seconds
    trigger: Optional[int] = None  # how the split was created (manual, distance, ...)
    workout_step: Optional[int] = None


class GPSFix(SQLModel, table=True):
    """One recorded location fix."""

    __tablename__ = "gps_points"

    activity_id: int = Field(primary_key=True)
    timestamp: int = Field(primary_key=True)
    lat: float
    lng: float
