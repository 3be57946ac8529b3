"""
Per-activity stream reads: joined timeseries, laps and GPS track.

The power partition is the primary series. Cardio, kinematics and elevation
rows are attached with LEFT OUTER JOINs on (activity_id, timestamp), so a
missing sensor leaves fields empty but never drops a sample.
"""
from typing import List

from sqlalchemy import and_
from sqlmodel import Session, select

from straid.analysis.timeseries import GPSPoint, TimeseriesPoint, rows_to_timeseries
from straid.models.activity import GPSFix, Lap
from straid.models.timeseries import (
    CardioSample,
    ElevationSample,
    KinematicsSample,
    PowerSample,
)


def _same_sample(other, primary=PowerSample):
    return and_(
        other.activity_id == primary.activity_id,
        other.timestamp == primary.timestamp,
    )


def get_timeseries(session: Session, activity_id: int) -> List[TimeseriesPoint]:
    """One point per power-series timestamp, ascending."""
    statement = (
        select(
            PowerSample.timestamp,
            PowerSample.total_power.label("power"),
            CardioSample.heart_rate,
            KinematicsSample.speed,
            KinematicsSample.cadence,
            KinematicsSample.distance,
            KinematicsSample.stride_length,
            ElevationSample.elevation,
        )
        .select_from(PowerSample)
        .outerjoin(CardioSample, _same_sample(CardioSample))
        .outerjoin(KinematicsSample, _same_sample(KinematicsSample))
        .outerjoin(ElevationSample, _same_sample(ElevationSample))
        .where(PowerSample.activity_id == activity_id)
        .order_by(PowerSample.timestamp)
    )
    rows = [dict(row._mapping) for row in session.exec(statement)]
    return rows_to_timeseries(rows)


def get_laps(session: Session, activity_id: int) -> List[Lap]:
    """Laps of an activity ordered by lap number."""
    return list(
        session.exec(
            select(Lap).where(Lap.activity_id == activity_id).order_by(Lap.lap_number)
        ).all()
    )


def get_gps_points(session: Session, activity_id: int) -> List[GPSPoint]:
    """One point per GPS fix with power at the same second, ascending."""
    statement = (
        select(
            GPSFix.timestamp,
            GPSFix.lat,
            GPSFix.lng,
            PowerSample.total_power.label("power"),
        )
        .select_from(GPSFix)
        .outerjoin(PowerSample, _same_sample(PowerSample, primary=GPSFix))
        .where(GPSFix.activity_id == activity_id)
        .order_by(GPSFix.timestamp)
    )
    return [
        GPSPoint(timestamp=ts, lat=lat, lng=lng, power=power)
        for ts, lat, lng, power in session.exec(statement)
    ]
