from __future__ import annotations

from datetime import date, timedelta
from typing import Dict, List, Optional

from core.models import Project, ProjectStatus, RAGStatus, TrackingBy, WeeklyEffort
from core.services.analytics.cost import actual_cost, total_hours
from core.services.analytics.policy import LATEST_METRICS_PAGE
from core.services.analytics.timeseries import week_key
from core.services.analytics.utilization import resource_utilization
from core.services.analytics.variance import round1, variance
from core.services.dashboard.base import DashboardBaseMixin, finite_or_zero
from core.services.dashboard.models import KpiSummary


def week_end_of(row) -> Optional[date]:
    end = week_key(getattr(row, "week_end_date", None))
    if end is not None:
        return end
    start = week_key(getattr(row, "week_start_date", None))
    return start + timedelta(days=6) if start is not None else None


def milestones_on_time(project: Project) -> bool:
    """Every completed milestone finished on or before its estimate (vacuously true)."""
    for m in project.milestones:
        if m.completed_date and m.estimated_date and m.completed_date > m.estimated_date:
            return False
    return True


def _pct(part: float, whole: float) -> float:
    return round1(part / whole * 100.0) if whole else 0.0


class DashboardKpiMixin(DashboardBaseMixin):
    def get_kpi_summary(self, manager_id: str | None = None) -> KpiSummary:
        """
        Portfolio KPIs for one manager, or the whole organization when no
        manager is given. Percentages are rounded to one decimal.
        """
        projects = self._select_projects(manager_id)
        efforts = self._usable_efforts_by_project(projects)

        total = len(projects)
        active = [p for p in projects if p.project_status == ProjectStatus.ACTIVE]
        completed = [p for p in projects if p.project_status == ProjectStatus.COMPLETED]
        at_risk = sum(1 for p in projects if p.overall_status == RAGStatus.RED)
        healthy = sum(1 for p in projects if p.overall_status == RAGStatus.GREEN)
        on_time = sum(1 for p in completed if self._completed_on_time(p, efforts.get(p.id, [])))

        estimated_budget = sum(finite_or_zero(p.estimated_budget) for p in projects)
        estimated_effort = sum(finite_or_zero(p.estimated_effort) for p in projects)
        cost = sum(actual_cost(efforts.get(p.id, []), p, self._rate_policy) for p in projects)
        hours = sum(total_hours(rows) for rows in efforts.values())

        all_rows: List[WeeklyEffort] = [e for rows in efforts.values() for e in rows]

        return KpiSummary(
            total_projects=total,
            active_projects=len(active),
            completed_projects=len(completed),
            at_risk_projects=at_risk,
            health_score=_pct(healthy, total),
            on_time_completion_rate=_pct(on_time, len(completed)),
            overall_completion_rate=_pct(len(completed), total),
            budget_variance=round1(variance(cost, estimated_budget)),
            schedule_variance=round1(variance(hours, estimated_effort)),
            resource_utilization=round1(resource_utilization(all_rows) * 100.0),
            total_estimated_budget=estimated_budget,
            total_actual_cost=cost,
            total_estimated_effort=estimated_effort,
            total_actual_effort=hours,
        )

    def _completed_on_time(self, project: Project, efforts: List[WeeklyEffort]) -> bool:
        if project.tracking_by == TrackingBy.MILESTONE:
            return milestones_on_time(project)

        if project.end_date is None:
            return True
        completion = self._derived_completion_date(project, efforts)
        if completion is None:
            return True
        return completion <= project.end_date

    def _derived_completion_date(self, project: Project, efforts: List[WeeklyEffort]) -> Optional[date]:
        """Latest of last effort week, last metrics week and last milestone completion."""
        candidates: Dict[str, date] = {}

        effort_ends = [d for d in (week_end_of(e) for e in efforts) if d is not None]
        if effort_ends:
            candidates["effort"] = max(effort_ends)

        latest = self._metrics_repo.list_by_project(project.id, LATEST_METRICS_PAGE)
        metric_ends = [d for d in (week_end_of(m) for m in latest) if d is not None]
        if metric_ends:
            candidates["metrics"] = max(metric_ends)

        done = [m.completed_date for m in project.milestones if m.completed_date]
        if done:
            candidates["milestones"] = max(done)

        return max(candidates.values()) if candidates else None
