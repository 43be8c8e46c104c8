from .analytics import RatePolicy, resolve_rate
from .dashboard import DashboardService

__all__ = [
    "DashboardService",
    "RatePolicy",
    "resolve_rate",
]
