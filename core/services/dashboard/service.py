from __future__ import annotations

from concurrent.futures import Executor

from core.interfaces import ProjectRepository, WeeklyEffortRepository, WeeklyMetricsRepository
from core.services.analytics.policy import DEFAULT_TRENDS_WINDOW_DAYS
from core.services.analytics.rates import RatePolicy
from core.services.dashboard.drilldown import DashboardDrilldownMixin
from core.services.dashboard.kpi import DashboardKpiMixin
from core.services.dashboard.portfolio import DashboardPortfolioMixin
from core.services.dashboard.trends import DashboardTrendsMixin


class DashboardService(
    DashboardPortfolioMixin,
    DashboardDrilldownMixin,
    DashboardKpiMixin,
    DashboardTrendsMixin,
):
    """
    Read-only analytics over projects, weekly efforts and weekly metrics.

    Each call reads fresh data; nothing is cached between calls. Per-project
    reads run on ``executor`` when one is given.
    """

    def __init__(
        self,
        project_repo: ProjectRepository,
        effort_repo: WeeklyEffortRepository,
        metrics_repo: WeeklyMetricsRepository,
        rate_policy: RatePolicy | None = None,
        executor: Executor | None = None,
        trends_window_days: int = DEFAULT_TRENDS_WINDOW_DAYS,
    ):
        self._project_repo = project_repo
        self._effort_repo = effort_repo
        self._metrics_repo = metrics_repo
        self._rate_policy = rate_policy or RatePolicy()
        self._executor = executor
        self._trends_window_days = trends_window_days
