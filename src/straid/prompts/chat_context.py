"""System prompt for the StrAId chat assistant: training summary + recent runs."""
import logging
from datetime import date, timedelta
from typing import List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session

from straid.analysis.pace import format_duration, format_speed_as_pace
from straid.i18n import MessageKey, translate
from straid.models.activity import Activity
from straid.queries.stats import TrainingTotals, get_totals, list_recent_activities

logger = logging.getLogger(__name__)

RECENT_WINDOW_DAYS = 7


def _rounded(value: Optional[float], unit: str) -> str:
    return f"{round(value)} {unit}" if value is not None else "n/a"


def _activity_date(activity: Activity) -> str:
    # dd/mm/yyyy, matching how the dashboard lists runs
    if not activity.date:
        return "n/a"
    try:
        return date.fromisoformat(activity.date[:10]).strftime("%d/%m/%Y")
    except ValueError:
        return activity.date


def format_activity_line(index: int, activity: Activity) -> str:
    lines = [
        f"{index}. {activity.name or 'Untitled'} ({activity.type or 'n/a'}) - {_activity_date(activity)}",
        f"   Distance: {(activity.distance or 0.0) / 1000:.2f} km, "
        f"Time: {format_duration(activity.moving_time)}",
        f"   Power: {_rounded(activity.average_power, 'W')}, "
        f"HR: {_rounded(activity.average_heart_rate, 'bpm')}",
        f"   Pace: {format_speed_as_pace(activity.average_speed)}, "
        f"Cadence: {_rounded(activity.average_cadence, 'spm')}",
    ]
    if activity.tags:
        lines.append(f"   Tags: {activity.tags}")
    return "\n".join(lines)


def build_chat_system_prompt(
    overall: TrainingTotals,
    last_week: TrainingTotals,
    recent: List[Activity],
) -> str:
    """
    Render the assistant's system prompt.

    Args:
        overall: totals across the whole store.
        last_week: totals for the trailing week.
        recent: most recent activities, newest first.
    """
    lines = [
        "You are StrAId, a running assistant analyzing Stryd running data.",
        "",
        "OVERALL STATISTICS:",
        f"- Total activities: {overall.count}",
        f"- Total distance: {overall.distance_m / 1000:.1f} km",
        f"- Total time: {round(overall.moving_time_s / 3600)} hours",
        f"- Average power: {_rounded(overall.avg_power, 'W')}",
        f"- Average heart rate: {_rounded(overall.avg_heart_rate, 'bpm')}",
        f"- Average cadence: {_rounded(overall.avg_cadence, 'spm')}",
        f"- Average pace: {format_speed_as_pace(overall.avg_speed)}",
        "",
        f"LAST {RECENT_WINDOW_DAYS} DAYS:",
        f"- Activities: {last_week.count}",
        f"- Distance: {last_week.distance_m / 1000:.1f} km",
        f"- Duration: {round(last_week.moving_time_s / 60)} minutes",
        "",
        f"RECENT ACTIVITIES (last {len(recent)}):",
        "\n\n".join(format_activity_line(i, a) for i, a in enumerate(recent, start=1)),
        "",
        "Answer questions about this training data in a helpful and insightful way. "
        "Provide specific recommendations based on the actual data. Always respond "
        "in the same language as the user's question (French or English).",
    ]
    return "\n".join(lines)


def build_training_context(session: Session, today: Optional[date] = None) -> str:
    """
    Query the store and build the system prompt. Falls back to a short
    "data unavailable" prompt when the store cannot be read.
    """
    today = today or date.today()
    try:
        overall = get_totals(session)
        last_week = get_totals(session, since=today - timedelta(days=RECENT_WINDOW_DAYS))
        recent = list_recent_activities(session)
    except SQLAlchemyError as exc:
        logger.error("Error getting training context: %s", exc)
        return translate(MessageKey.DATA_UNAVAILABLE)
    return build_chat_system_prompt(overall, last_week, recent)
