"""Product-policy constants shared by the analytics primitives and dashboards."""
from __future__ import annotations

from core.interfaces import PageWindow

# Organization rate used when nothing else is configured.
DEFAULT_ORGANIZATION_RATE = 50.0

# Realistic weekly capacity of a resource is read at this rank of its weekly
# hours sorted descending (0.2 from the top, i.e. the 80th percentile). Keeps
# the occasional overtime week from defining capacity.
CAPACITY_PERCENTILE_RANK = 0.2

# Below this many observed weeks the raw maximum is used as capacity.
CAPACITY_MIN_OBSERVATIONS = 3

# Rolling window of the effort-by-week chart on portfolio dashboards (12 weeks).
EFFORT_TREND_LOOKBACK_DAYS = 84

# Budget-vs-actual is computed for this many projects only.
BUDGET_UTILIZATION_PROJECT_LIMIT = 10

# WeeklyMetrics page read for the drill-down scope trend.
DRILLDOWN_METRICS_PAGE = PageWindow(page=1, limit=100, ascending=True)

# WeeklyMetrics page read for the trends scope series.
TRENDS_METRICS_PAGE = PageWindow(page=1, limit=1000, ascending=True)

# Most recent WeeklyMetrics row, used to date the completion of a project.
LATEST_METRICS_PAGE = PageWindow(page=1, limit=1, ascending=False)

DEFAULT_TRENDS_WINDOW_DAYS = 30

UNKNOWN_LABEL = "Unknown"


__all__ = [
    "DEFAULT_ORGANIZATION_RATE",
    "CAPACITY_PERCENTILE_RANK",
    "CAPACITY_MIN_OBSERVATIONS",
    "EFFORT_TREND_LOOKBACK_DAYS",
    "BUDGET_UTILIZATION_PROJECT_LIMIT",
    "DRILLDOWN_METRICS_PAGE",
    "TRENDS_METRICS_PAGE",
    "LATEST_METRICS_PAGE",
    "DEFAULT_TRENDS_WINDOW_DAYS",
    "UNKNOWN_LABEL",
]
