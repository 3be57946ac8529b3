"""
Lap time windows and lap-based sample filtering.

A lap covers [its timestamp, next lap's timestamp). The last lap is
open-ended. A sample stamped exactly at a lap boundary belongs to the lap
that starts there.
"""
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, TypeVar

from straid.models.activity import Lap

T = TypeVar("T")


@dataclass
class LapWindow:
    lap_number: int
    start: int
    end: Optional[int] = None  # exclusive; None for the final lap

    def contains(self, timestamp: int) -> bool:
        if timestamp < self.start:
            return False
        return self.end is None or timestamp < self.end


def lap_windows(laps: Iterable[Lap]) -> List[LapWindow]:
    """
    Build one window per lap. The end of lap N is the start of lap N+1;
    lap numbers are contiguous, so the lookup is by number, not by position.
    """
    by_number: Dict[int, Lap] = {lap.lap_number: lap for lap in laps}
    windows = []
    for number in sorted(by_number):
        following = by_number.get(number + 1)
        windows.append(
            LapWindow(
                lap_number=number,
                start=by_number[number].timestamp,
                end=following.timestamp if following else None,
            )
        )
    return windows


def lap_for_timestamp(windows: List[LapWindow], timestamp: int) -> Optional[int]:
    """Lap number whose window contains `timestamp`, or None before the first lap."""
    for window in windows:
        if window.contains(timestamp):
            return window.lap_number
    return None


def filter_by_laps(
    points: List[T],
    laps: Iterable[Lap],
    selected: Optional[Iterable[int]] = None,
) -> List[T]:
    """
    Keep samples that fall inside any selected lap window.

    Args:
        points: anything with an integer `timestamp` attribute, in order.
        laps: laps of the same activity.
        selected: lap numbers to keep. Empty or None keeps every sample.
            Numbers without a matching lap are ignored.
    """
    wanted = set(selected or [])
    if not wanted:
        return list(points)
    windows = [w for w in lap_windows(laps) if w.lap_number in wanted]
    return [p for p in points if any(w.contains(p.timestamp) for w in windows)]
