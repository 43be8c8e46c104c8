from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import List, Optional

from core.domain.customer import Customer
from core.domain.enums import (
    HourlyRateSource,
    ProjectStatus,
    ProjectType,
    RAGStatus,
    TrackingBy,
)
from core.domain.identifiers import generate_id
from core.domain.references import Reference, Unresolved


@dataclass
class Milestone:
    description: str
    estimated_date: date
    estimated_effort: float = 0.0
    scope_completed: float = 0.0
    completed_date: Optional[date] = None


@dataclass
class Project:
    id: str
    name: str
    manager_id: Optional[str] = None
    customer: Reference[Customer] = field(default_factory=Unresolved)
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    project_type: ProjectType = ProjectType.FIXED_PRICE
    estimated_effort: float = 0.0
    estimated_budget: float = 0.0
    estimated_resources: int = 0
    scope_completed: float = 0.0
    hourly_rate: Optional[float] = None
    hourly_rate_source: HourlyRateSource = HourlyRateSource.RESOURCE
    project_status: ProjectStatus = ProjectStatus.ACTIVE
    overall_status: RAGStatus = RAGStatus.GREEN
    scope_status: RAGStatus = RAGStatus.GREEN
    quality_status: RAGStatus = RAGStatus.GREEN
    budget_status: RAGStatus = RAGStatus.GREEN
    tracking_by: TrackingBy = TrackingBy.END_DATE
    milestones: List[Milestone] = field(default_factory=list)

    @staticmethod
    def create(name: str, **extra) -> "Project":
        return Project(
            id=generate_id(),
            name=name,
            **extra,
        )


__all__ = ["Project", "Milestone"]
