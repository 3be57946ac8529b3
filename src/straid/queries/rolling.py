"""
Rolling training-load windows.

Daily totals are summed in SQL (one row per calendar day that has at least
one activity); trailing 7-day and 10-day sums are then computed per day in
Python. Windows are inclusive of the day itself: [day-6, day] and
[day-9, day].

A day's 7-day value is undefined until the store covers a full week, i.e.
when [day-6, day] starts before the first day recorded in the store. Such
days are dropped. The 10-day value has no such rule and may cover a partial
window. A start date drops earlier activities before grouping, so no window
ever sums a day before it.
"""
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Dict, List, Optional, Tuple

from sqlalchemy import func
from sqlmodel import Session, select

from straid.models.activity import Activity

SHORT_WINDOW_DAYS = 7
LONG_WINDOW_DAYS = 10


@dataclass
class DailyTotals:
    distance_km: float
    duration_min: float


@dataclass
class RollingStat:
    date: date
    distance_7d: float   # km
    duration_7d: float   # minutes
    distance_10d: float  # km
    duration_10d: float  # minutes


def get_daily_totals(
    session: Session, start_date: Optional[date] = None
) -> Dict[date, DailyTotals]:
    """Sum distance (km) and moving time (min) per calendar day on or after `start_date`."""
    day = func.date(Activity.date)
    statement = select(
        day,
        func.sum(Activity.distance) / 1000.0,
        func.sum(Activity.moving_time) / 60.0,
    ).where(Activity.date.is_not(None))
    if start_date is not None:
        statement = statement.where(Activity.date >= start_date.isoformat())
    statement = statement.group_by(day).order_by(day)
    totals: Dict[date, DailyTotals] = {}
    for day_str, distance_km, duration_min in session.exec(statement):
        if day_str is None:
            continue  # unparseable date text
        totals[date.fromisoformat(day_str)] = DailyTotals(
            distance_km=distance_km or 0.0,
            duration_min=duration_min or 0.0,
        )
    return totals


def _window_sum(
    daily: Dict[date, DailyTotals], day: date, days: int
) -> Tuple[float, float]:
    distance = 0.0
    duration = 0.0
    for offset in range(days):
        totals = daily.get(day - timedelta(days=offset))
        if totals is not None:
            distance += totals.distance_km
            duration += totals.duration_min
    return distance, duration


def get_first_day(session: Session) -> Optional[date]:
    """Earliest calendar day recorded in the store, ignoring any start date."""
    day_str = session.exec(
        select(func.min(func.date(Activity.date))).where(Activity.date.is_not(None))
    ).one()
    return date.fromisoformat(day_str) if day_str else None


def compute_rolling_stats(
    daily: Dict[date, DailyTotals],
    first_day: Optional[date] = None,
) -> List[RollingStat]:
    """
    Build rolling rows from daily totals.

    Args:
        daily: totals per calendar day that participate in the windows.
        first_day: earliest day recorded in the store; defaults to the
            earliest day in `daily`.

    Returns:
        One RollingStat per eligible day with daily data, ascending.
    """
    if not daily:
        return []
    if first_day is None:
        first_day = min(daily)
    stats: List[RollingStat] = []
    for day in sorted(daily):
        if day - timedelta(days=SHORT_WINDOW_DAYS - 1) < first_day:
            continue
        distance_7d, duration_7d = _window_sum(daily, day, SHORT_WINDOW_DAYS)
        distance_10d, duration_10d = _window_sum(daily, day, LONG_WINDOW_DAYS)
        stats.append(
            RollingStat(
                date=day,
                distance_7d=distance_7d,
                duration_7d=duration_7d,
                distance_10d=distance_10d,
                duration_10d=duration_10d,
            )
        )
    return stats


def get_rolling_stats(
    session: Session, start_date: Optional[date] = None
) -> List[RollingStat]:
    """Rolling 7/10-day distance and duration per day, ascending."""
    daily = get_daily_totals(session, start_date=start_date)
    return compute_rolling_stats(daily, first_day=get_first_day(session))
