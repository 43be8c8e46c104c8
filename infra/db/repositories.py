# infra/db/repositories.py
from infra.db.customer.repository import SqlAlchemyCustomerRepository
from infra.db.effort.repository import SqlAlchemyWeeklyEffortRepository
from infra.db.metrics.repository import SqlAlchemyWeeklyMetricsRepository
from infra.db.project.repository import SqlAlchemyProjectRepository
from infra.db.resource.repository import SqlAlchemyResourceRepository

__all__ = [
    "SqlAlchemyCustomerRepository",
    "SqlAlchemyResourceRepository",
    "SqlAlchemyProjectRepository",
    "SqlAlchemyWeeklyEffortRepository",
    "SqlAlchemyWeeklyMetricsRepository",
]
