from __future__ import annotations

import logging
from datetime import date, timedelta
from typing import Dict, List

from core.exceptions import NotFoundError
from core.models import Project, WeeklyEffort
from core.services.analytics.cost import effort_cost
from core.services.analytics.policy import DEFAULT_TRENDS_WINDOW_DAYS, TRENDS_METRICS_PAGE
from core.services.analytics.timeseries import breakdown_trend, cumulative, week_key, weekly_trend
from core.services.dashboard.base import DashboardBaseMixin, is_finite_number
from core.services.dashboard.drilldown import scope_points
from core.services.dashboard.models import CostPoint, ProjectScopePoint, TrendsData, WeeklyHours

logger = logging.getLogger(__name__)


class DashboardTrendsMixin(DashboardBaseMixin):
    _trends_window_days: int

    def get_trends(
        self,
        project_id: str | None = None,
        manager_id: str | None = None,
        time_range_days=None,
        as_of: date | None = None,
    ) -> TrendsData:
        """
        Effort, budget and scope trends over the last ``time_range_days`` days.

        One project selected: the effort breakdown is per resource. Otherwise
        the selection is the manager's projects (or all) and the breakdown is
        per project.
        """
        as_of = self._as_of(as_of)
        days = self._window_days(time_range_days)
        since = as_of - timedelta(days=days)

        if project_id:
            project = self._project_repo.get(project_id)
            if not project:
                raise NotFoundError("Project not found.", code="PROJECT_NOT_FOUND")
            projects = [project]
        else:
            projects = self._select_projects(manager_id)

        def in_window(value) -> bool:
            wk = week_key(value)
            return wk is not None and since <= wk <= as_of

        efforts = {
            pid: [e for e in rows if in_window(e.week_start_date)]
            for pid, rows in self._usable_efforts_by_project(projects).items()
        }
        project_ids = [p.id for p in projects]

        effort_trend: List[WeeklyHours] = []
        if project_ids:
            effort_trend = [
                WeeklyHours(week=t.week_start_date, hours=t.total_hours)
                for t in sorted(self._effort_repo.weekly_totals(project_ids, since), key=lambda x: x.week_start_date)
                if in_window(t.week_start_date)
            ]

        if project_id:
            breakdown_by = "resource"
            breakdown = breakdown_trend(
                efforts[project_id],
                week_of=lambda e: e.week_start_date,
                key_of=lambda e: e.resource.value.name,
                value_of=lambda e: e.hours,
            )
        else:
            breakdown_by = "project"
            names = {p.id: p.name for p in projects}
            totals = self._effort_repo.weekly_totals_by_project(project_ids, since) if project_ids else []
            breakdown = breakdown_trend(
                [t for t in totals if in_window(t.week_start_date)],
                week_of=lambda t: t.week_start_date,
                key_of=lambda t: names.get(t.project_id),
                value_of=lambda t: t.total_hours,
            )

        return TrendsData(
            start_date=since,
            end_date=as_of,
            time_range_days=days,
            breakdown_by=breakdown_by,
            effort_trend=effort_trend,
            effort_breakdown=breakdown,
            budget_trend=self._budget_trend(projects, efforts),
            scope_trend=self._scope_trend(projects, since, as_of),
        )

    def _window_days(self, time_range_days) -> int:
        default = getattr(self, "_trends_window_days", DEFAULT_TRENDS_WINDOW_DAYS)
        if time_range_days is None:
            return default
        if not is_finite_number(time_range_days) or time_range_days < 1:
            logger.warning("Invalid trends window %r; using %s days", time_range_days, default)
            return default
        return int(time_range_days)

    def _budget_trend(self, projects: List[Project], efforts: Dict[str, List[WeeklyEffort]]) -> List[CostPoint]:
        weekly_costs = []
        for p in projects:
            for e in efforts.get(p.id, []):
                weekly_costs.append((e.week_start_date, effort_cost(e, p, self._rate_policy)))
        weekly = weekly_trend(weekly_costs, week_of=lambda r: r[0], value_of=lambda r: r[1])
        return [CostPoint(week=p.week, cost=p.value) for p in cumulative(weekly)]

    def _scope_trend(self, projects: List[Project], since: date, as_of: date) -> List[ProjectScopePoint]:
        raw = self._read_many(
            lambda pid: self._metrics_repo.list_by_project(pid, TRENDS_METRICS_PAGE),
            [p.id for p in projects],
        )
        out: List[ProjectScopePoint] = []
        for p in projects:
            for point in scope_points(raw.get(p.id, [])):
                if since <= point.week <= as_of:
                    out.append(
                        ProjectScopePoint(
                            week=point.week,
                            project_id=p.id,
                            project_name=p.name,
                            scope_completed=point.value,
                        )
                    )
        out.sort(key=lambda r: (r.week, r.project_name))
        return out
