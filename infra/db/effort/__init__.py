from infra.db.effort.mapper import effort_from_orm, effort_to_orm
from infra.db.effort.repository import SqlAlchemyWeeklyEffortRepository

__all__ = [
    "effort_to_orm",
    "effort_from_orm",
    "SqlAlchemyWeeklyEffortRepository",
]
