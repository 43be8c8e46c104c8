from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import List, Optional

from core.services.analytics.timeseries import BreakdownTrend


@dataclass
class ProjectSummary:
    project_id: str
    name: str
    customer_name: str
    overall_status: str
    scope_status: str
    quality_status: str
    budget_status: str
    project_status: str
    project_type: str
    scope_completed: float
    estimated_budget: float
    estimated_effort: float
    start_date: Optional[date]
    end_date: Optional[date]


@dataclass
class CountRow:
    label: str
    count: int


@dataclass
class WeeklyHours:
    week: date
    hours: float


@dataclass
class BudgetRow:
    project_id: str
    project_name: str
    estimated_budget: float
    actual_cost: float
    variance_percent: float


@dataclass
class ResourceAllocationRow:
    resource: str
    hours: float
    projects: int


@dataclass
class PortfolioDashboard:
    as_of: date
    projects_summary: List[ProjectSummary] = field(default_factory=list)
    projects_by_customer: List[CountRow] = field(default_factory=list)
    projects_by_status: List[CountRow] = field(default_factory=list)
    effort_by_week: List[WeeklyHours] = field(default_factory=list)
    budget_utilization: List[BudgetRow] = field(default_factory=list)
    resource_allocation: List[ResourceAllocationRow] = field(default_factory=list)
    total_projects: int = 0
    active_projects: int = 0
    completed_projects: int = 0
    at_risk_projects: int = 0


@dataclass
class BudgetPoint:
    week: date
    estimated: float
    actual: float


@dataclass
class ScopePoint:
    week: date
    scope_completed: float


@dataclass
class ScopeDeltaPoint:
    week: date
    delta: float


@dataclass
class MilestoneView:
    description: str
    estimated_date: Optional[date]
    completed_date: Optional[date]
    estimated_effort: float
    scope_completed: float
    status: str


@dataclass
class ProjectDrilldown:
    as_of: date
    project: ProjectSummary
    effort_by_resource: BreakdownTrend
    budget_burndown: List[BudgetPoint] = field(default_factory=list)
    scope_trend: List[ScopePoint] = field(default_factory=list)
    scope_delta: List[ScopeDeltaPoint] = field(default_factory=list)
    milestones: List[MilestoneView] = field(default_factory=list)
    total_effort_hours: float = 0.0
    actual_cost: float = 0.0
    effort_percent: float = 0.0
    cost_percent: float = 0.0


@dataclass
class KpiSummary:
    total_projects: int
    active_projects: int
    completed_projects: int
    at_risk_projects: int
    health_score: float
    on_time_completion_rate: float
    overall_completion_rate: float
    budget_variance: float
    schedule_variance: float
    resource_utilization: float
    total_estimated_budget: float
    total_actual_cost: float
    total_estimated_effort: float
    total_actual_effort: float


@dataclass
class CostPoint:
    week: date
    cost: float


@dataclass
class ProjectScopePoint:
    week: date
    project_id: str
    project_name: str
    scope_completed: float


@dataclass
class TrendsData:
    start_date: date
    end_date: date
    time_range_days: int
    breakdown_by: str
    effort_trend: List[WeeklyHours] = field(default_factory=list)
    effort_breakdown: BreakdownTrend = field(default_factory=BreakdownTrend)
    budget_trend: List[CostPoint] = field(default_factory=list)
    scope_trend: List[ProjectScopePoint] = field(default_factory=list)
