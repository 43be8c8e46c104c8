from __future__ import annotations

from typing import Optional

from core.models import Reference, Resolved, Resource, Unresolved, WeeklyEffort
from infra.db.models import ResourceORM, WeeklyEffortORM
from infra.db.resource.mapper import resource_reference


def _resource_id(ref: Reference[Resource] | None) -> Optional[str]:
    if isinstance(ref, Resolved):
        return ref.value.id
    if isinstance(ref, Unresolved):
        return ref.ref_id
    return None


def effort_to_orm(effort: WeeklyEffort) -> WeeklyEffortORM:
    return WeeklyEffortORM(
        id=effort.id,
        project_id=effort.project_id,
        resource_id=_resource_id(effort.resource),
        hours=effort.hours,
        week_start_date=effort.week_start_date,
        week_end_date=effort.week_end_date,
    )


def effort_from_orm(obj: WeeklyEffortORM, resource: ResourceORM | None) -> WeeklyEffort:
    return WeeklyEffort(
        id=obj.id,
        project_id=obj.project_id,
        resource=resource_reference(obj.resource_id, resource),
        hours=obj.hours,
        week_start_date=obj.week_start_date,
        week_end_date=obj.week_end_date,
    )


__all__ = ["effort_to_orm", "effort_from_orm"]
