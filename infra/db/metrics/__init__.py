from infra.db.metrics.mapper import metrics_from_orm, metrics_to_orm
from infra.db.metrics.repository import SqlAlchemyWeeklyMetricsRepository

__all__ = [
    "metrics_to_orm",
    "metrics_from_orm",
    "SqlAlchemyWeeklyMetricsRepository",
]
