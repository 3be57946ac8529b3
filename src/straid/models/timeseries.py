"""
Per-second sensor tables.

The export splits each activity's samples into four partitions keyed by
(activity_id, timestamp). Any partition may lack rows for a given timestamp
when the corresponding sensor was not present.
"""
from typing import Optional

from sqlmodel import Field, SQLModel


class PowerSample(SQLModel, table=True):
    __tablename__ = "timeseries_power"

    activity_id: int = Field(primary_key=True)
    timestamp: int = Field(primary_key=True)
    total_power: Optional[float] = None  # W


class CardioSample(SQLModel, table=True):
    __tablename__ = "timeseries_cardio"

    activity_id: int = Field(primary_key=True)
    timestamp: int = Field(primary_key=True)
    heart_rate: Optional[float] = None  # bpm


class KinematicsSample(SQLModel, table=True):
    __tablename__ = "timeseries_kinematics"

    activity_id: int = Field(primary_key=True)
    timestamp: int = Field(primary_key=True)
    speed: Optional[float] = None  # m/s
    cadence: Optional[float] = None  # spm
    distance: Optional[float] = None  # cumulative meters
    stride_length: Optional[float] = None  # meters


class ElevationSample(SQLModel, table=True):
    __tablename__ = "timeseries_elevation"

    activity_id: int = Field(primary_key=True)
    timestamp: int = Field(primary_key=True)
    elevation: Optional[float] = None  # meters
