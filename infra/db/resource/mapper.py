from __future__ import annotations

from core.models import Reference, Resolved, Resource, Unresolved
from infra.db.models import ResourceORM


def resource_to_orm(resource: Resource) -> ResourceORM:
    return ResourceORM(
        id=resource.id,
        name=resource.name,
        email=resource.email,
        per_hour_rate=resource.per_hour_rate,
        currency=resource.currency,
        status=resource.status,
        is_deleted=False,
    )


def resource_from_orm(obj: ResourceORM) -> Resource:
    return Resource(
        id=obj.id,
        name=obj.name,
        email=obj.email or "",
        per_hour_rate=obj.per_hour_rate,
        currency=obj.currency or "USD",
        status=obj.status,
    )


def resource_reference(resource_id: str | None, obj: ResourceORM | None) -> Reference[Resource]:
    if obj is None or obj.is_deleted:
        return Unresolved(resource_id)
    return Resolved(resource_from_orm(obj))


__all__ = ["resource_to_orm", "resource_from_orm", "resource_reference"]
