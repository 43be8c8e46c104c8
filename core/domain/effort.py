from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, timedelta
from typing import Optional

from core.domain.identifiers import generate_id
from core.domain.references import Reference, Unresolved
from core.domain.resource import Resource


@dataclass
class WeeklyEffort:
    id: str
    project_id: str
    resource: Reference[Resource] = field(default_factory=Unresolved)
    hours: Optional[float] = 0.0
    week_start_date: Optional[date] = None
    week_end_date: Optional[date] = None

    @staticmethod
    def create(
        project_id: str,
        resource: Reference[Resource],
        hours: float,
        week_start_date: date,
        week_end_date: date | None = None,
    ) -> "WeeklyEffort":
        return WeeklyEffort(
            id=generate_id(),
            project_id=project_id,
            resource=resource,
            hours=hours,
            week_start_date=week_start_date,
            week_end_date=week_end_date or week_start_date + timedelta(days=6),
        )


@dataclass
class WeeklyMetrics:
    id: str
    project_id: str
    week_start_date: Optional[date] = None
    week_end_date: Optional[date] = None
    rollup_hours: float = 0.0
    scope_completed: Optional[float] = 0.0
    comments: str = ""

    @staticmethod
    def create(
        project_id: str,
        week_start_date: date,
        scope_completed: float,
        rollup_hours: float = 0.0,
        comments: str = "",
        week_end_date: date | None = None,
    ) -> "WeeklyMetrics":
        return WeeklyMetrics(
            id=generate_id(),
            project_id=project_id,
            week_start_date=week_start_date,
            week_end_date=week_end_date or week_start_date + timedelta(days=6),
            rollup_hours=rollup_hours,
            scope_completed=scope_completed,
            comments=comments,
        )


__all__ = ["WeeklyEffort", "WeeklyMetrics"]
