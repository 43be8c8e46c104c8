from .models import (
    BudgetPoint,
    BudgetRow,
    CostPoint,
    CountRow,
    KpiSummary,
    MilestoneView,
    PortfolioDashboard,
    ProjectDrilldown,
    ProjectScopePoint,
    ProjectSummary,
    ResourceAllocationRow,
    ScopeDeltaPoint,
    ScopePoint,
    TrendsData,
    WeeklyHours,
)
from .service import DashboardService

__all__ = [
    "DashboardService",
    "PortfolioDashboard",
    "ProjectSummary",
    "CountRow",
    "WeeklyHours",
    "BudgetRow",
    "ResourceAllocationRow",
    "ProjectDrilldown",
    "BudgetPoint",
    "ScopePoint",
    "ScopeDeltaPoint",
    "MilestoneView",
    "KpiSummary",
    "TrendsData",
    "CostPoint",
    "ProjectScopePoint",
]
