from __future__ import annotations

from concurrent.futures import Executor
from dataclasses import dataclass
from typing import Any

from sqlalchemy.orm import Session

from core.services.dashboard import DashboardService
from infra.db.repositories import (
    SqlAlchemyCustomerRepository,
    SqlAlchemyProjectRepository,
    SqlAlchemyResourceRepository,
    SqlAlchemyWeeklyEffortRepository,
    SqlAlchemyWeeklyMetricsRepository,
)
from infra.settings import Settings, load_settings


@dataclass(frozen=True)
class ServiceGraph:
    session: Session
    settings: Settings
    customer_repo: SqlAlchemyCustomerRepository
    resource_repo: SqlAlchemyResourceRepository
    project_repo: SqlAlchemyProjectRepository
    effort_repo: SqlAlchemyWeeklyEffortRepository
    metrics_repo: SqlAlchemyWeeklyMetricsRepository
    dashboard_service: DashboardService

    def as_dict(self) -> dict[str, Any]:
        return {
            "session": self.session,
            "settings": self.settings,
            "customer_repo": self.customer_repo,
            "resource_repo": self.resource_repo,
            "project_repo": self.project_repo,
            "effort_repo": self.effort_repo,
            "metrics_repo": self.metrics_repo,
            "dashboard_service": self.dashboard_service,
        }


def build_service_graph(
    session: Session,
    settings: Settings | None = None,
    executor: Executor | None = None,
) -> ServiceGraph:
    """
    Wire repositories and the dashboard service around one session.

    Leave ``executor`` unset for a single SQLAlchemy session: sessions are
    not safe to share between threads.
    """
    settings = settings or load_settings()
    customer_repo = SqlAlchemyCustomerRepository(session)
    resource_repo = SqlAlchemyResourceRepository(session)
    project_repo = SqlAlchemyProjectRepository(session)
    effort_repo = SqlAlchemyWeeklyEffortRepository(session)
    metrics_repo = SqlAlchemyWeeklyMetricsRepository(session)

    dashboard_service = DashboardService(
        project_repo=project_repo,
        effort_repo=effort_repo,
        metrics_repo=metrics_repo,
        rate_policy=settings.rate_policy(),
        executor=executor,
        trends_window_days=settings.trends_window_days,
    )

    return ServiceGraph(
        session=session,
        settings=settings,
        customer_repo=customer_repo,
        resource_repo=resource_repo,
        project_repo=project_repo,
        effort_repo=effort_repo,
        metrics_repo=metrics_repo,
        dashboard_service=dashboard_service,
    )


def build_service_dict(session: Session, settings: Settings | None = None) -> dict[str, Any]:
    return build_service_graph(session, settings).as_dict()
