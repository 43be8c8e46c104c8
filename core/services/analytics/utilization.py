from __future__ import annotations

import math
from collections import defaultdict
from datetime import date
from typing import Dict, Iterable, List

from core.models import WeeklyEffort
from core.services.analytics.cost import is_usable_effort
from core.services.analytics.policy import CAPACITY_MIN_OBSERVATIONS, CAPACITY_PERCENTILE_RANK
from core.services.analytics.timeseries import week_key


def realistic_capacity(observations: List[float]) -> float:
    """
    Weekly capacity read from a high percentile of observed weeks.

    Sorted descending, the value at ``floor(rank * n)`` is used once there are
    enough weeks; with fewer the maximum stands in.
    """
    if not observations:
        return 0.0
    ordered = sorted(observations, reverse=True)
    if len(ordered) >= CAPACITY_MIN_OBSERVATIONS:
        return ordered[math.floor(CAPACITY_PERCENTILE_RANK * len(ordered))]
    return ordered[0]


def _weekly_hours_by_resource(efforts: Iterable[WeeklyEffort]) -> Dict[str, List[float]]:
    per_week: Dict[str, Dict[date, float]] = defaultdict(lambda: defaultdict(float))
    for e in efforts:
        if not is_usable_effort(e):
            continue
        wk = week_key(e.week_start_date)
        per_week[e.resource.value.id][wk] += float(e.hours)

    return {
        rid: [h for h in weeks.values() if h > 0]
        for rid, weeks in per_week.items()
    }


def per_resource_utilization(efforts: Iterable[WeeklyEffort]) -> Dict[str, float]:
    """Utilization in [0, 1] per resource id; resources with no worked week are left out."""
    out: Dict[str, float] = {}
    for rid, observations in _weekly_hours_by_resource(efforts).items():
        if not observations:
            continue
        avg = sum(observations) / len(observations)
        capacity = realistic_capacity(observations)
        out[rid] = min(avg / capacity, 1.0) if capacity > 0 else 0.0
    return out


def resource_utilization(efforts: Iterable[WeeklyEffort]) -> float:
    ratios = per_resource_utilization(efforts)
    if not ratios:
        return 0.0
    return sum(ratios.values()) / len(ratios)


__all__ = ["realistic_capacity", "per_resource_utilization", "resource_utilization"]
