"""Flat import surface for the domain model used by the infra layer."""
from __future__ import annotations

from core.domain import (
    Customer,
    HourlyRateSource,
    Milestone,
    MilestoneState,
    Project,
    ProjectStatus,
    ProjectType,
    RAGStatus,
    Reference,
    Resolved,
    Resource,
    ResourceStatus,
    TrackingBy,
    Unresolved,
    WeeklyEffort,
    WeeklyMetrics,
    generate_id,
    is_resolved,
    resolved_value,
)

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
