from __future__ import annotations

import logging
from datetime import date
from typing import List

from core.exceptions import NotFoundError
from core.models import Milestone, MilestoneState, Project, WeeklyMetrics
from core.services.analytics.cost import actual_cost, effort_cost, total_hours
from core.services.analytics.policy import DRILLDOWN_METRICS_PAGE
from core.services.analytics.timeseries import (
    WeekValue,
    breakdown_trend,
    cumulative,
    week_key,
    week_over_week,
    weekly_trend,
)
from core.services.analytics.variance import percent_of, round1
from core.services.dashboard.base import DashboardBaseMixin, finite_or_zero, is_finite_number
from core.services.dashboard.models import (
    BudgetPoint,
    MilestoneView,
    ProjectDrilldown,
    ScopeDeltaPoint,
    ScopePoint,
)

logger = logging.getLogger(__name__)


def milestone_status(milestone: Milestone, as_of: date) -> MilestoneState:
    if milestone.completed_date:
        return MilestoneState.COMPLETED
    if milestone.estimated_date and as_of > milestone.estimated_date:
        return MilestoneState.DELAYED
    return MilestoneState.ON_TRACK


def scope_points(metrics: List[WeeklyMetrics]) -> List[WeekValue]:
    """Scope-completed per week from metrics rows; rows without a week or a finite scope are dropped."""
    points: List[WeekValue] = []
    for m in metrics:
        wk = week_key(m.week_start_date)
        scope = m.scope_completed
        if wk is None or not is_finite_number(scope):
            continue
        points.append(WeekValue(week=wk, value=float(scope)))
    points.sort(key=lambda p: p.week)
    return points


class DashboardDrilldownMixin(DashboardBaseMixin):
    def get_project_drilldown(self, project_id: str, as_of: date | None = None) -> ProjectDrilldown:
        """
        Single-project view: cumulative effort per resource, budget burn-down,
        scope trend with week-over-week deltas, milestone states and totals.
        """
        project = self._project_repo.get(project_id)
        if not project:
            raise NotFoundError("Project not found.", code="PROJECT_NOT_FOUND")
        as_of = self._as_of(as_of)

        efforts = self._usable_efforts_by_project([project])[project.id]
        metrics = self._metrics_repo.list_by_project(project.id, DRILLDOWN_METRICS_PAGE)

        scope = scope_points(metrics)
        if len(scope) < len(metrics):
            logger.warning(
                "Excluded %s malformed metrics rows for project %s",
                len(metrics) - len(scope),
                project.id,
            )

        hours = total_hours(efforts)
        cost = actual_cost(efforts, project, self._rate_policy)

        return ProjectDrilldown(
            as_of=as_of,
            project=self._summary(project),
            effort_by_resource=breakdown_trend(
                efforts,
                week_of=lambda e: e.week_start_date,
                key_of=lambda e: e.resource.value.name,
                value_of=lambda e: e.hours,
                cumulative=True,
            ),
            budget_burndown=self._budget_burndown(project, efforts),
            scope_trend=[ScopePoint(week=p.week, scope_completed=p.value) for p in scope],
            scope_delta=[ScopeDeltaPoint(week=p.week, delta=p.value) for p in week_over_week(scope)],
            milestones=[self._milestone_view(m, as_of) for m in project.milestones],
            total_effort_hours=hours,
            actual_cost=cost,
            effort_percent=round1(percent_of(hours, project.estimated_effort)),
            cost_percent=round1(percent_of(cost, project.estimated_budget)),
        )

    def _budget_burndown(self, project: Project, efforts) -> List[BudgetPoint]:
        estimated = finite_or_zero(project.estimated_budget)
        weekly = weekly_trend(
            efforts,
            week_of=lambda e: e.week_start_date,
            value_of=lambda e: effort_cost(e, project, self._rate_policy),
        )
        return [
            BudgetPoint(week=p.week, estimated=estimated, actual=p.value)
            for p in cumulative(weekly)
        ]

    @staticmethod
    def _milestone_view(milestone: Milestone, as_of: date) -> MilestoneView:
        return MilestoneView(
            description=milestone.description,
            estimated_date=milestone.estimated_date,
            completed_date=milestone.completed_date,
            estimated_effort=finite_or_zero(milestone.estimated_effort),
            scope_completed=finite_or_zero(milestone.scope_completed),
            status=milestone_status(milestone, as_of).value,
        )
