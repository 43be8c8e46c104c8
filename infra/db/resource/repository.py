from __future__ import annotations

from typing import List, Optional

from sqlalchemy import select, update
from sqlalchemy.orm import Session

from core.interfaces import ResourceRepository
from core.models import Resource
from infra.db.models import ResourceORM
from infra.db.resource.mapper import resource_from_orm, resource_to_orm


class SqlAlchemyResourceRepository(ResourceRepository):
    def __init__(self, session: Session):
        self.session = session

    def add(self, resource: Resource) -> None:
        self.session.add(resource_to_orm(resource))

    def delete(self, resource_id: str) -> None:
        # soft delete: effort rows keep the id and resolve to Unresolved
        self.session.execute(
            update(ResourceORM).where(ResourceORM.id == resource_id).values(is_deleted=True)
        )

    def get(self, resource_id: str) -> Optional[Resource]:
        obj = self.session.get(ResourceORM, resource_id)
        return resource_from_orm(obj) if obj and not obj.is_deleted else None

    def list_all(self) -> List[Resource]:
        stmt = select(ResourceORM).where(ResourceORM.is_deleted.is_(False)).order_by(ResourceORM.name)
        rows = self.session.execute(stmt).scalars().all()
        return [resource_from_orm(row) for row in rows]


__all__ = ["SqlAlchemyResourceRepository"]
