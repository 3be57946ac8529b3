"""Aggregate training totals used to brief the chat assistant."""
from dataclasses import dataclass
from datetime import date
from typing import List, Optional

from sqlalchemy import func
from sqlmodel import Session, select

from straid.models.activity import Activity

RECENT_ACTIVITY_LIMIT = 20


@dataclass
class TrainingTotals:
    count: int
    distance_m: float
    moving_time_s: float
    avg_power: Optional[float] = None
    avg_heart_rate: Optional[float] = None
    avg_cadence: Optional[float] = None
    avg_speed: Optional[float] = None


def get_totals(session: Session, since: Optional[date] = None) -> TrainingTotals:
    """
    Count and sum activities, optionally only those dated on or after `since`.
    Averages are plain means of the per-activity averages.
    """
    statement = select(
        func.count(Activity.id),
        func.sum(Activity.distance),
        func.sum(Activity.moving_time),
        func.avg(Activity.average_power),
        func.avg(Activity.average_heart_rate),
        func.avg(Activity.average_cadence),
        func.avg(Activity.average_speed),
    )
    if since is not None:
        statement = statement.where(Activity.date >= since.isoformat())
    count, distance, moving_time, power, hr, cadence, speed = session.exec(statement).one()
    return TrainingTotals(
        count=count or 0,
        distance_m=distance or 0.0,
        moving_time_s=moving_time or 0.0,
        avg_power=power,
        avg_heart_rate=hr,
        avg_cadence=cadence,
        avg_speed=speed,
    )


def list_recent_activities(
    session: Session, limit: int = RECENT_ACTIVITY_LIMIT
) -> List[Activity]:
    """Most recent activities, newest first."""
    return list(
        session.exec(
            select(Activity).order_by(Activity.date.desc()).limit(limit)
        ).all()
    )
