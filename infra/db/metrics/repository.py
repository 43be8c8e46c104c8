from __future__ import annotations

from typing import List

from sqlalchemy import select
from sqlalchemy.orm import Session

from core.interfaces import PageWindow, WeeklyMetricsRepository
from core.models import WeeklyMetrics
from infra.db.metrics.mapper import metrics_from_orm, metrics_to_orm
from infra.db.models import WeeklyMetricsORM


class SqlAlchemyWeeklyMetricsRepository(WeeklyMetricsRepository):
    def __init__(self, session: Session):
        self.session = session

    def add(self, metrics: WeeklyMetrics) -> None:
        self.session.add(metrics_to_orm(metrics))

    def list_by_project(self, project_id: str, window: PageWindow) -> List[WeeklyMetrics]:
        week = WeeklyMetricsORM.week_start_date
        order = week.asc() if window.ascending else week.desc()
        stmt = (
            select(WeeklyMetricsORM)
            .where(WeeklyMetricsORM.project_id == project_id)
            .order_by(order, WeeklyMetricsORM.id)
            .offset(window.offset)
            .limit(window.limit)
        )
        return [metrics_from_orm(r) for r in self.session.execute(stmt).scalars().all()]


__all__ = ["SqlAlchemyWeeklyMetricsRepository"]
