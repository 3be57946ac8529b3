"""Training-load trend routes."""
from datetime import date
from typing import List, Optional

from fastapi import APIRouter, Depends
from sqlmodel import Session

from straid.db.engine import get_session
from straid.queries.rolling import RollingStat, get_rolling_stats

router = APIRouter()


@router.get("/rolling", response_model=List[RollingStat])
def rolling_stats(
    start_date: Optional[date] = None,
    session: Session = Depends(get_session),
):
    """Trailing 7- and 10-day distance (km) and duration (min) per day."""
    return get_rolling_stats(session, start_date=start_date)
