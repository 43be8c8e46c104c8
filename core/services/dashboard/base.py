from __future__ import annotations

import logging
import math
from concurrent.futures import Executor
from datetime import date
from typing import Callable, Dict, List, Optional, Sequence, TypeVar

from core.interfaces import ProjectRepository, WeeklyEffortRepository, WeeklyMetricsRepository
from core.models import Customer, Project, Resolved, WeeklyEffort
from core.services.analytics.cost import usable_efforts
from core.services.analytics.policy import UNKNOWN_LABEL
from core.services.analytics.rates import RatePolicy
from core.services.dashboard.models import ProjectSummary

logger = logging.getLogger(__name__)

T = TypeVar("T")


def enum_text(value) -> str:
    return value.value if hasattr(value, "value") else str(value or "")


def is_finite_number(value) -> bool:
    if value is None or isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value)


def finite_or_zero(value) -> float:
    return float(value) if is_finite_number(value) else 0.0


class DashboardBaseMixin:
    _project_repo: ProjectRepository
    _effort_repo: WeeklyEffortRepository
    _metrics_repo: WeeklyMetricsRepository
    _rate_policy: RatePolicy
    _executor: Optional[Executor]

    @staticmethod
    def _as_of(as_of: date | None) -> date:
        return as_of or date.today()

    def _select_projects(self, manager_id: str | None) -> List[Project]:
        if manager_id:
            return self._project_repo.list_by_manager(manager_id)
        return self._project_repo.list_all()

    def _read_many(self, fn: Callable[[str], T], ids: Sequence[str]) -> Dict[str, T]:
        """Run one independent read per id; on the executor when one is configured."""
        if self._executor is None or len(ids) < 2:
            return {pid: fn(pid) for pid in ids}
        return dict(zip(ids, self._executor.map(fn, ids)))

    def _usable_efforts_by_project(self, projects: Sequence[Project]) -> Dict[str, List[WeeklyEffort]]:
        raw = self._read_many(self._effort_repo.list_by_project, [p.id for p in projects])
        out: Dict[str, List[WeeklyEffort]] = {}
        skipped_total = 0
        for pid, efforts in raw.items():
            rows, skipped = usable_efforts(efforts)
            out[pid] = rows
            skipped_total += skipped
        if skipped_total:
            logger.warning(
                "Excluded %s malformed or orphaned effort rows across %s projects",
                skipped_total,
                len(projects),
            )
        return out

    @staticmethod
    def _customer_name(project: Project) -> str:
        ref = project.customer
        if isinstance(ref, Resolved) and isinstance(ref.value, Customer) and ref.value.name:
            return ref.value.name
        return UNKNOWN_LABEL

    def _summary(self, project: Project) -> ProjectSummary:
        return ProjectSummary(
            project_id=project.id,
            name=project.name,
            customer_name=self._customer_name(project),
            overall_status=enum_text(project.overall_status),
            scope_status=enum_text(project.scope_status),
            quality_status=enum_text(project.quality_status),
            budget_status=enum_text(project.budget_status),
            project_status=enum_text(project.project_status),
            project_type=enum_text(project.project_type),
            scope_completed=finite_or_zero(project.scope_completed),
            estimated_budget=finite_or_zero(project.estimated_budget),
            estimated_effort=finite_or_zero(project.estimated_effort),
            start_date=project.start_date,
            end_date=project.end_date,
        )
