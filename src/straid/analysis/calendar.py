"""
Week grid for the training calendar.

Weeks start on Monday. Every week that holds at least one activity gets all
seven days, Monday first, with weekly distance and moving-time totals.
"""
from datetime import date, timedelta
from typing import Dict, Iterable, List, Optional

from pydantic import BaseModel

from straid.i18n import DEFAULT_LANGUAGE, WEEKDAY_KEYS, MessageKey, translate
from straid.models.activity import Activity


class CalendarDay(BaseModel):
    date: date
    weekday: str
    activities: List[Activity] = []


class CalendarWeek(BaseModel):
    week_start: date
    label: str                       # "Week of 2024-01-08"
    days: List[CalendarDay]
    total_distance: float = 0.0      # meters
    total_moving_time: float = 0.0   # seconds


def activity_day(activity: Activity) -> Optional[date]:
    """Calendar day of an activity, taken from the date part of its timestamp."""
    if not activity.date:
        return None
    try:
        return date.fromisoformat(activity.date[:10])
    except ValueError:
        return None


def week_start(day: date) -> date:
    """Monday of the week containing `day`."""
    return day - timedelta(days=day.weekday())


def group_by_week(
    activities: Iterable[Activity], language: str = DEFAULT_LANGUAGE
) -> List[CalendarWeek]:
    """
    Group activities into Monday-start weeks, newest week first.

    Activities without a parseable date are skipped. Within a day, activities
    keep their input order.
    """
    weeks: Dict[date, CalendarWeek] = {}
    for activity in activities:
        day = activity_day(activity)
        if day is None:
            continue
        monday = week_start(day)
        week = weeks.get(monday)
        if week is None:
            week = CalendarWeek(
                week_start=monday,
                label=f"{translate(MessageKey.WEEK_OF, language)} {monday.isoformat()}",
                days=[
                    CalendarDay(
                        date=monday + timedelta(days=i),
                        weekday=translate(WEEKDAY_KEYS[i], language),
                    )
                    for i in range(7)
                ],
            )
            weeks[monday] = week
        week.days[day.weekday()].activities.append(activity)
        week.total_distance += activity.distance or 0.0
        week.total_moving_time += activity.moving_time or 0.0

    return [weeks[monday] for monday in sorted(weeks, reverse=True)]
