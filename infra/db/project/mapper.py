from __future__ import annotations

from typing import List, Optional

from core.models import Customer, Milestone, Project, Reference, Resolved, Unresolved, generate_id
from infra.db.customer.mapper import customer_reference
from infra.db.models import CustomerORM, MilestoneORM, ProjectORM


def _customer_id(ref: Reference[Customer] | None) -> Optional[str]:
    if isinstance(ref, Resolved):
        return ref.value.id
    if isinstance(ref, Unresolved):
        return ref.ref_id
    return None


def project_to_orm(project: Project) -> ProjectORM:
    return ProjectORM(
        id=project.id,
        name=project.name,
        manager_id=project.manager_id,
        customer_id=_customer_id(project.customer),
        start_date=project.start_date,
        end_date=project.end_date,
        project_type=project.project_type,
        estimated_effort=project.estimated_effort,
        estimated_budget=project.estimated_budget,
        estimated_resources=project.estimated_resources,
        scope_completed=project.scope_completed,
        hourly_rate=project.hourly_rate,
        hourly_rate_source=project.hourly_rate_source,
        project_status=project.project_status,
        overall_status=project.overall_status,
        scope_status=project.scope_status,
        quality_status=project.quality_status,
        budget_status=project.budget_status,
        tracking_by=project.tracking_by,
        is_deleted=False,
    )


def milestones_to_orm(project: Project) -> List[MilestoneORM]:
    return [
        MilestoneORM(
            id=generate_id(),
            project_id=project.id,
            position=pos,
            description=m.description,
            estimated_date=m.estimated_date,
            estimated_effort=m.estimated_effort,
            scope_completed=m.scope_completed,
            completed_date=m.completed_date,
        )
        for pos, m in enumerate(project.milestones)
    ]


def milestone_from_orm(obj: MilestoneORM) -> Milestone:
    return Milestone(
        description=obj.description,
        estimated_date=obj.estimated_date,
        estimated_effort=obj.estimated_effort or 0.0,
        scope_completed=obj.scope_completed or 0.0,
        completed_date=obj.completed_date,
    )


def project_from_orm(
    obj: ProjectORM,
    customer: CustomerORM | None = None,
    milestones: List[MilestoneORM] | None = None,
) -> Project:
    return Project(
        id=obj.id,
        name=obj.name,
        manager_id=obj.manager_id,
        customer=customer_reference(obj.customer_id, customer),
        start_date=obj.start_date,
        end_date=obj.end_date,
        project_type=obj.project_type,
        estimated_effort=obj.estimated_effort,
        estimated_budget=obj.estimated_budget,
        estimated_resources=obj.estimated_resources or 0,
        scope_completed=obj.scope_completed,
        hourly_rate=obj.hourly_rate,
        hourly_rate_source=obj.hourly_rate_source,
        project_status=obj.project_status,
        overall_status=obj.overall_status,
        scope_status=obj.scope_status,
        quality_status=obj.quality_status,
        budget_status=obj.budget_status,
        tracking_by=obj.tracking_by,
        milestones=[milestone_from_orm(m) for m in (milestones or [])],
    )


__all__ = ["project_to_orm", "project_from_orm", "milestones_to_orm", "milestone_from_orm"]
