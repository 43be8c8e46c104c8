from __future__ import annotations

from core.models import WeeklyMetrics
from infra.db.models import WeeklyMetricsORM


def metrics_to_orm(metrics: WeeklyMetrics) -> WeeklyMetricsORM:
    return WeeklyMetricsORM(
        id=metrics.id,
        project_id=metrics.project_id,
        week_start_date=metrics.week_start_date,
        week_end_date=metrics.week_end_date,
        rollup_hours=metrics.rollup_hours,
        scope_completed=metrics.scope_completed,
        comments=metrics.comments,
    )


def metrics_from_orm(obj: WeeklyMetricsORM) -> WeeklyMetrics:
    return WeeklyMetrics(
        id=obj.id,
        project_id=obj.project_id,
        week_start_date=obj.week_start_date,
        week_end_date=obj.week_end_date,
        rollup_hours=obj.rollup_hours or 0.0,
        scope_completed=obj.scope_completed,
        comments=obj.comments or "",
    )


__all__ = ["metrics_to_orm", "metrics_from_orm"]
