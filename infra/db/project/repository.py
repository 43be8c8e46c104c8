from __future__ import annotations

from collections import defaultdict
from typing import Dict, List, Optional

from sqlalchemy import select, update
from sqlalchemy.orm import Session

from core.interfaces import ProjectRepository
from core.models import Project
from infra.db.models import CustomerORM, MilestoneORM, ProjectORM
from infra.db.project.mapper import milestones_to_orm, project_from_orm, project_to_orm


class SqlAlchemyProjectRepository(ProjectRepository):
    def __init__(self, session: Session):
        self.session = session

    def add(self, project: Project) -> None:
        self.session.add(project_to_orm(project))
        self.session.add_all(milestones_to_orm(project))

    def delete(self, project_id: str) -> None:
        self.session.execute(
            update(ProjectORM).where(ProjectORM.id == project_id).values(is_deleted=True)
        )

    def get(self, project_id: str) -> Optional[Project]:
        obj = self.session.get(ProjectORM, project_id)
        if obj is None or obj.is_deleted:
            return None
        return self._hydrate([obj])[0]

    def list_all(self) -> List[Project]:
        stmt = (
            select(ProjectORM)
            .where(ProjectORM.is_deleted.is_(False))
            .order_by(ProjectORM.name, ProjectORM.id)
        )
        return self._hydrate(self.session.execute(stmt).scalars().all())

    def list_by_manager(self, manager_id: str) -> List[Project]:
        stmt = (
            select(ProjectORM)
            .where(ProjectORM.is_deleted.is_(False), ProjectORM.manager_id == manager_id)
            .order_by(ProjectORM.name, ProjectORM.id)
        )
        return self._hydrate(self.session.execute(stmt).scalars().all())

    def _hydrate(self, rows: List[ProjectORM]) -> List[Project]:
        """Load customers and milestones for ``rows`` in two queries."""
        if not rows:
            return []
        customer_ids = {r.customer_id for r in rows if r.customer_id}
        customers: Dict[str, CustomerORM] = {}
        if customer_ids:
            stmt = select(CustomerORM).where(CustomerORM.id.in_(customer_ids))
            customers = {c.id: c for c in self.session.execute(stmt).scalars().all()}

        milestones: Dict[str, List[MilestoneORM]] = defaultdict(list)
        stmt = (
            select(MilestoneORM)
            .where(MilestoneORM.project_id.in_([r.id for r in rows]))
            .order_by(MilestoneORM.project_id, MilestoneORM.position)
        )
        for m in self.session.execute(stmt).scalars().all():
            milestones[m.project_id].append(m)

        return [
            project_from_orm(r, customers.get(r.customer_id or ""), milestones.get(r.id, []))
            for r in rows
        ]


__all__ = ["SqlAlchemyProjectRepository"]
