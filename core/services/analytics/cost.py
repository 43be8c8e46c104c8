from __future__ import annotations

import math
from typing import Any, Iterable, List, Tuple

from core.models import Project, Resolved, WeeklyEffort
from core.services.analytics.rates import RatePolicy, resolve_rate
from core.services.analytics.timeseries import week_key


def is_valid_hours(value: Any) -> bool:
    if value is None or isinstance(value, bool):
        return False
    if not isinstance(value, (int, float)):
        return False
    return math.isfinite(value) and value >= 0


def is_usable_effort(effort: WeeklyEffort) -> bool:
    """
    A row every view may count: sane hours, a resource that still exists
    and a parseable week.
    """
    return (
        is_valid_hours(getattr(effort, "hours", None))
        and isinstance(getattr(effort, "resource", None), Resolved)
        and week_key(getattr(effort, "week_start_date", None)) is not None
    )


def usable_efforts(efforts: Iterable[WeeklyEffort]) -> Tuple[List[WeeklyEffort], int]:
    """Split ``efforts`` into countable rows and the number of rows left out."""
    rows: List[WeeklyEffort] = []
    skipped = 0
    for e in efforts:
        if is_usable_effort(e):
            rows.append(e)
        else:
            skipped += 1
    return rows, skipped


def effort_cost(effort: WeeklyEffort, project: Project, policy: RatePolicy | None = None) -> float:
    """Cost of one usable row. Callers filter with ``is_usable_effort`` first."""
    resource = effort.resource.value if isinstance(effort.resource, Resolved) else None
    return float(effort.hours) * resolve_rate(project, resource, policy)


def actual_cost(
    efforts: Iterable[WeeklyEffort],
    project: Project,
    policy: RatePolicy | None = None,
) -> float:
    total = 0.0
    for e in efforts:
        if not is_usable_effort(e):
            continue
        total += effort_cost(e, project, policy)
    return total


def total_hours(efforts: Iterable[WeeklyEffort]) -> float:
    return sum(float(e.hours) for e in efforts if is_usable_effort(e))


__all__ = [
    "is_valid_hours",
    "is_usable_effort",
    "usable_efforts",
    "effort_cost",
    "actual_cost",
    "total_hours",
]
