"""Activity list, detail and per-activity stream routes."""
from datetime import date
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlmodel import Session

from straid.analysis.laps import filter_by_laps
from straid.analysis.power_zones import PowerZoneShare, power_zone_distribution
from straid.analysis.timeseries import GPSPoint, TimeseriesPoint
from straid.db.engine import get_session
from straid.i18n import MessageKey, translate
from straid.models.activity import Activity, Lap
from straid.queries.activities import (
    get_activity,
    get_all_tags,
    get_all_types,
    list_activities,
)
from straid.queries.streams import get_gps_points, get_laps, get_timeseries

router = APIRouter()


def _require_activity(session: Session, activity_id: int) -> Activity:
    activity = get_activity(session, activity_id)
    if not activity:
        raise HTTPException(status_code=404, detail=translate(MessageKey.ACTIVITY_NOT_FOUND))
    return activity


@router.get("/", response_model=List[Activity])
def list_activities_route(
    tags: List[str] = Query(default=[]),
    types: List[str] = Query(default=[]),
    start_date: Optional[date] = None,
    session: Session = Depends(get_session),
):
    """List activities, newest first. Repeat `tags`/`types` to select several."""
    return list_activities(session, tags=tags, types=types, start_date=start_date)


@router.get("/tags", response_model=List[str])
def list_tags(session: Session = Depends(get_session)):
    """Every distinct tag, for the filter bar."""
    return get_all_tags(session)


@router.get("/types", response_model=List[str])
def list_types(session: Session = Depends(get_session)):
    """Every distinct activity type, for the filter bar."""
    return get_all_types(session)


@router.get("/{activity_id}", response_model=Activity)
def get_activity_route(activity_id: int, session: Session = Depends(get_session)):
    """Fetch a single activity by primary key."""
    return _require_activity(session, activity_id)


@router.get("/{activity_id}/timeseries", response_model=List[TimeseriesPoint])
def get_timeseries_route(
    activity_id: int,
    lap: List[int] = Query(default=[]),
    session: Session = Depends(get_session),
):
    """Joined per-second samples; repeat `lap` to keep only those laps."""
    _require_activity(session, activity_id)
    points = get_timeseries(session, activity_id)
    if lap:
        points = filter_by_laps(points, get_laps(session, activity_id), lap)
    return points


@router.get("/{activity_id}/laps", response_model=List[Lap])
def get_laps_route(activity_id: int, session: Session = Depends(get_session)):
    _require_activity(session, activity_id)
    return get_laps(session, activity_id)


@router.get("/{activity_id}/gps", response_model=List[GPSPoint])
def get_gps_route(activity_id: int, session: Session = Depends(get_session)):
    _require_activity(session, activity_id)
    return get_gps_points(session, activity_id)


@router.get("/{activity_id}/power-zones", response_model=List[PowerZoneShare])
def get_power_zones_route(
    activity_id: int,
    cp: Optional[float] = None,
    session: Session = Depends(get_session),
):
    """Time in power zones against `cp`, or the activity's own FTP."""
    activity = _require_activity(session, activity_id)
    return power_zone_distribution(get_timeseries(session, activity_id), cp or activity.ftp)
