"""
Activity list, single lookup and filter-control enumeration.

Tags are stored upstream as one comma-separated text field per activity.
Matching splits on commas, trims each tag and compares case-insensitively;
enumeration keeps the stored casing.
"""
from datetime import date
from typing import Iterable, List, Optional, Set

from sqlmodel import Session, select

from straid.models.activity import Activity


def split_tags(raw: Optional[str]) -> List[str]:
    """Split a comma-separated tag field into trimmed, non-empty tags."""
    if not raw:
        return []
    return [tag.strip() for tag in raw.split(",") if tag.strip()]


def has_any_tag(raw: Optional[str], wanted: Set[str]) -> bool:
    """True if any tag in `raw` equals one of `wanted` (already lower-cased)."""
    return any(tag.lower() in wanted for tag in split_tags(raw))


def list_activities(
    session: Session,
    tags: Optional[Iterable[str]] = None,
    types: Optional[Iterable[str]] = None,
    start_date: Optional[date] = None,
) -> List[Activity]:
    """
    Return activities matching every active filter, newest first.

    Args:
        tags: keep activities carrying at least one of these tags.
        types: keep activities whose type is one of these.
        start_date: keep activities dated on or after this day.

    Empty or None filters are inactive.
    """
    statement = select(Activity)
    if start_date is not None:
        statement = statement.where(Activity.date >= start_date.isoformat())
    type_list = [t for t in types or []]
    if type_list:
        statement = statement.where(Activity.type.in_(type_list))
    statement = statement.order_by(Activity.date.desc())

    activities = list(session.exec(statement).all())

    wanted = {tag.strip().lower() for tag in tags or [] if tag.strip()}
    if not wanted:
        return activities
    return [a for a in activities if has_any_tag(a.tags, wanted)]


def get_activity(session: Session, activity_id: int) -> Optional[Activity]:
    """Fetch a single activity by primary key, or None."""
    return session.get(Activity, activity_id)


def get_all_tags(session: Session) -> List[str]:
    """Distinct trimmed tags across all activities, sorted."""
    raw_values = session.exec(
        select(Activity.tags).where(Activity.tags.is_not(None), Activity.tags != "")
    ).all()
    found: Set[str] = set()
    for raw in raw_values:
        found.update(split_tags(raw))
    return sorted(found)


def get_all_types(session: Session) -> List[str]:
    """Distinct non-null activity types, sorted."""
    return list(
        session.exec(
            select(Activity.type)
            .where(Activity.type.is_not(None))
            .distinct()
            .order_by(Activity.type)
        ).all()
    )
