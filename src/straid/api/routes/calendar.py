"""Calendar grid route."""
from datetime import date
from typing import List, Optional

from fastapi import APIRouter, Depends
from sqlmodel import Session

from straid.analysis.calendar import CalendarWeek, group_by_week
from straid.db.engine import get_session
from straid.preferences import Language
from straid.queries.activities import list_activities

router = APIRouter()


@router.get("/", response_model=List[CalendarWeek])
def calendar_weeks(
    start_date: Optional[date] = None,
    language: Language = "en",
    session: Session = Depends(get_session),
):
    """Activities laid out in Monday-start weeks, newest week first."""
    return group_by_week(list_activities(session, start_date=start_date), language=language)
