from core.services.analytics.cost import (
    actual_cost,
    effort_cost,
    is_usable_effort,
    is_valid_hours,
    total_hours,
    usable_efforts,
)
from core.services.analytics.rates import RatePolicy, is_valid_rate, resolve_rate
from core.services.analytics.timeseries import (
    BreakdownPoint,
    BreakdownTrend,
    WeekValue,
    breakdown_trend,
    cumulative,
    week_key,
    week_over_week,
    weekly_trend,
)
from core.services.analytics.utilization import (
    per_resource_utilization,
    realistic_capacity,
    resource_utilization,
)
from core.services.analytics.variance import percent_of, round1, variance

__all__ = [
    "RatePolicy",
    "is_valid_rate",
    "resolve_rate",
    "is_valid_hours",
    "is_usable_effort",
    "usable_efforts",
    "effort_cost",
    "actual_cost",
    "total_hours",
    "variance",
    "percent_of",
    "round1",
    "week_key",
    "WeekValue",
    "BreakdownPoint",
    "BreakdownTrend",
    "weekly_trend",
    "breakdown_trend",
    "cumulative",
    "week_over_week",
    "realistic_capacity",
    "per_resource_utilization",
    "resource_utilization",
]
