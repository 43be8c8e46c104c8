from core.domain.customer import Customer
from core.domain.effort import WeeklyEffort, WeeklyMetrics
from core.domain.enums import (
    HourlyRateSource,
    MilestoneState,
    ProjectStatus,
    ProjectType,
    RAGStatus,
    ResourceStatus,
    TrackingBy,
)
from core.domain.identifiers import generate_id
from core.domain.project import Milestone, Project
from core.domain.references import Reference, Resolved, Unresolved, is_resolved, resolved_value
from core.domain.resource import Resource

__all__ = [
    "generate_id",
    "ProjectStatus",
    "RAGStatus",
    "HourlyRateSource",
    "TrackingBy",
    "ProjectType",
    "ResourceStatus",
    "MilestoneState",
    "Customer",
    "Project",
    "Milestone",
    "Resource",
    "WeeklyEffort",
    "WeeklyMetrics",
    "Reference",
    "Resolved",
    "Unresolved",
    "resolved_value",
    "is_resolved",
]
