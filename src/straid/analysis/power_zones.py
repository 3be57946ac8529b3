"""
Running power zones relative to Critical Power (CP).

Each powered sample is assumed to last one second, so the count of samples
in a zone is the time spent there. Samples at or above the top of Z5
(130% CP) fall outside every zone and are not counted in any bucket, but they
still count towards the percentage denominator.
"""
from dataclasses import dataclass
from typing import Iterable, List, Optional

from straid.analysis.timeseries import TimeseriesPoint


@dataclass(frozen=True)
class PowerZone:
    label: str
    name: str
    lower: float  # fraction of CP, inclusive
    upper: float  # fraction of CP, exclusive


# ─── Zone table ────────────────────────────────────────────────────────────────

POWER_ZONES = [
    PowerZone("Z1", "Easy", 0.00, 0.80),
    PowerZone("Z2", "Moderate", 0.80, 0.90),
    PowerZone("Z3", "Threshold", 0.90, 1.00),
    PowerZone("Z4", "Interval", 1.00, 1.15),
    PowerZone("Z5", "Repetition", 1.15, 1.30),
]


@dataclass
class PowerZoneShare:
    label: str
    name: str
    min_watts: float
    max_watts: float
    seconds: int
    percentage: float


def classify_power_zone(power: float, cp: float) -> Optional[str]:
    """
    Return the zone label ("Z1".."Z5") for a power reading, or None when it is
    at or above 130% CP.
    """
    pct = power / cp
    for zone in POWER_ZONES:
        if zone.lower <= pct < zone.upper:
            return zone.label
    return None


def power_zone_distribution(
    points: Iterable[TimeseriesPoint], cp: Optional[float]
) -> List[PowerZoneShare]:
    """
    Time in each power zone.

    Args:
        points: joined timeseries samples; only samples with power > 0 count.
        cp: Critical Power (or FTP) in watts.

    Returns:
        One share per zone in Z1..Z5 order, or [] when CP is missing or not
        positive, or when no sample carries power.
    """
    if not cp or cp <= 0:
        return []
    powers = [p.power for p in points if p.power is not None and p.power > 0]
    if not powers:
        return []

    counts = {zone.label: 0 for zone in POWER_ZONES}
    for power in powers:
        label = classify_power_zone(power, cp)
        if label is not None:
            counts[label] += 1

    return [
        PowerZoneShare(
            label=zone.label,
            name=zone.name,
            min_watts=zone.lower * cp,
            max_watts=zone.upper * cp,
            seconds=counts[zone.label],
            percentage=counts[zone.label] / len(powers) * 100,
        )
        for zone in POWER_ZONES
    ]
