from __future__ import annotations

from collections import defaultdict
from datetime import date, timedelta
from typing import Dict, List, Sequence, Set

from core.models import ProjectStatus, Project, RAGStatus, WeeklyEffort
from core.services.analytics.cost import actual_cost
from core.services.analytics.policy import (
    BUDGET_UTILIZATION_PROJECT_LIMIT,
    EFFORT_TREND_LOOKBACK_DAYS,
)
from core.services.analytics.variance import round1, variance
from core.services.dashboard.base import DashboardBaseMixin, enum_text, finite_or_zero
from core.services.dashboard.models import (
    BudgetRow,
    CountRow,
    PortfolioDashboard,
    ResourceAllocationRow,
    WeeklyHours,
)


def _count_in_order(labels: Sequence[str]) -> List[CountRow]:
    counts: Dict[str, int] = {}
    for label in labels:
        counts[label] = counts.get(label, 0) + 1
    return [CountRow(label=k, count=v) for k, v in counts.items()]


class DashboardPortfolioMixin(DashboardBaseMixin):
    def get_manager_dashboard(self, manager_id: str, as_of: date | None = None) -> PortfolioDashboard:
        """Portfolio view over the projects managed by ``manager_id``."""
        return self._build_portfolio(self._project_repo.list_by_manager(manager_id), as_of)

    def get_organization_dashboard(self, as_of: date | None = None) -> PortfolioDashboard:
        """Same view as the manager dashboard, over every project."""
        return self._build_portfolio(self._project_repo.list_all(), as_of)

    # --------------------------------------------------------------
    # Internals
    # --------------------------------------------------------------

    def _build_portfolio(self, projects: List[Project], as_of: date | None) -> PortfolioDashboard:
        as_of = self._as_of(as_of)
        efforts = self._usable_efforts_by_project(projects)

        return PortfolioDashboard(
            as_of=as_of,
            projects_summary=[self._summary(p) for p in projects],
            projects_by_customer=_count_in_order([self._customer_name(p) for p in projects]),
            projects_by_status=_count_in_order([enum_text(p.overall_status) for p in projects]),
            effort_by_week=self._effort_by_week(projects, as_of),
            budget_utilization=self._budget_utilization(projects, efforts),
            resource_allocation=self._resource_allocation(efforts),
            total_projects=len(projects),
            active_projects=sum(1 for p in projects if p.project_status == ProjectStatus.ACTIVE),
            completed_projects=sum(1 for p in projects if p.project_status == ProjectStatus.COMPLETED),
            at_risk_projects=sum(1 for p in projects if p.overall_status == RAGStatus.RED),
        )

    def _effort_by_week(self, projects: List[Project], as_of: date) -> List[WeeklyHours]:
        if not projects:
            return []
        since = as_of - timedelta(days=EFFORT_TREND_LOOKBACK_DAYS)
        totals = self._effort_repo.weekly_totals([p.id for p in projects], since)
        return [
            WeeklyHours(week=t.week_start_date, hours=t.total_hours)
            for t in sorted(totals, key=lambda x: x.week_start_date)
            if t.week_start_date <= as_of
        ]

    def _budget_utilization(
        self,
        projects: List[Project],
        efforts: Dict[str, List[WeeklyEffort]],
    ) -> List[BudgetRow]:
        rows: List[BudgetRow] = []
        for p in projects[:BUDGET_UTILIZATION_PROJECT_LIMIT]:
            estimated = finite_or_zero(p.estimated_budget)
            actual = actual_cost(efforts.get(p.id, []), p, self._rate_policy)
            rows.append(
                BudgetRow(
                    project_id=p.id,
                    project_name=p.name,
                    estimated_budget=estimated,
                    actual_cost=actual,
                    variance_percent=round1(variance(actual, estimated)),
                )
            )
        return rows

    @staticmethod
    def _resource_allocation(efforts: Dict[str, List[WeeklyEffort]]) -> List[ResourceAllocationRow]:
        # keyed by resource id: two people may share a name
        names: Dict[str, str] = {}
        hours: Dict[str, float] = defaultdict(float)
        projects: Dict[str, Set[str]] = defaultdict(set)
        for pid, rows in efforts.items():
            for e in rows:
                resource = e.resource.value
                names[resource.id] = resource.name
                hours[resource.id] += float(e.hours)
                projects[resource.id].add(pid)

        ordered = sorted(hours, key=lambda rid: (-hours[rid], names[rid], rid))
        return [
            ResourceAllocationRow(resource=names[rid], hours=hours[rid], projects=len(projects[rid]))
            for rid in ordered
        ]
