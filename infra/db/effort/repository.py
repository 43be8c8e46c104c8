from __future__ import annotations

from datetime import date
from typing import Dict, List, Sequence

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from core.interfaces import WeekProjectTotal, WeeklyEffortRepository, WeekTotal
from core.models import WeeklyEffort
from infra.db.effort.mapper import effort_from_orm, effort_to_orm
from infra.db.models import ProjectORM, ResourceORM, WeeklyEffortORM


class SqlAlchemyWeeklyEffortRepository(WeeklyEffortRepository):
    def __init__(self, session: Session):
        self.session = session

    def add(self, effort: WeeklyEffort) -> None:
        self.session.add(effort_to_orm(effort))

    def list_by_project(self, project_id: str) -> List[WeeklyEffort]:
        stmt = (
            select(WeeklyEffortORM)
            .where(WeeklyEffortORM.project_id == project_id)
            .order_by(WeeklyEffortORM.week_start_date, WeeklyEffortORM.id)
        )
        rows = self.session.execute(stmt).scalars().all()
        resource_ids = {r.resource_id for r in rows if r.resource_id}
        resources: Dict[str, ResourceORM] = {}
        if resource_ids:
            res_stmt = select(ResourceORM).where(ResourceORM.id.in_(resource_ids))
            resources = {r.id: r for r in self.session.execute(res_stmt).scalars().all()}
        return [effort_from_orm(r, resources.get(r.resource_id or "")) for r in rows]

    def _countable(self, stmt, project_ids: Sequence[str], since: date):
        """Restrict an aggregate to rows every view counts: live resource and project, sane hours."""
        return (
            stmt.join(
                ResourceORM,
                (ResourceORM.id == WeeklyEffortORM.resource_id) & ResourceORM.is_deleted.is_(False),
            )
            .join(
                ProjectORM,
                (ProjectORM.id == WeeklyEffortORM.project_id) & ProjectORM.is_deleted.is_(False),
            )
            .where(
                WeeklyEffortORM.project_id.in_(list(project_ids)),
                WeeklyEffortORM.week_start_date.is_not(None),
                WeeklyEffortORM.week_start_date >= since,
                WeeklyEffortORM.hours.is_not(None),
                WeeklyEffortORM.hours >= 0,
            )
        )

    def weekly_totals(self, project_ids: Sequence[str], since: date) -> List[WeekTotal]:
        if not project_ids:
            return []
        stmt = self._countable(
            select(WeeklyEffortORM.week_start_date, func.sum(WeeklyEffortORM.hours)),
            project_ids,
            since,
        )
        stmt = stmt.group_by(WeeklyEffortORM.week_start_date).order_by(WeeklyEffortORM.week_start_date)
        return [
            WeekTotal(week_start_date=week, total_hours=float(total or 0.0))
            for week, total in self.session.execute(stmt).all()
        ]

    def weekly_totals_by_project(
        self, project_ids: Sequence[str], since: date
    ) -> List[WeekProjectTotal]:
        if not project_ids:
            return []
        stmt = self._countable(
            select(
                WeeklyEffortORM.week_start_date,
                WeeklyEffortORM.project_id,
                func.sum(WeeklyEffortORM.hours),
            ),
            project_ids,
            since,
        )
        stmt = stmt.group_by(WeeklyEffortORM.week_start_date, WeeklyEffortORM.project_id).order_by(
            WeeklyEffortORM.week_start_date, WeeklyEffortORM.project_id
        )
        return [
            WeekProjectTotal(week_start_date=week, project_id=pid, total_hours=float(total or 0.0))
            for week, pid, total in self.session.execute(stmt).all()
        ]


__all__ = ["SqlAlchemyWeeklyEffortRepository"]
