# core/interfaces.py
"""Read interfaces the analytics engine consumes from the persistence layer."""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import date
from typing import List, Optional, Sequence

from core.models import Customer, Project, Resource, WeeklyEffort, WeeklyMetrics


@dataclass(frozen=True)
class PageWindow:
    page: int = 1
    limit: int = 100
    ascending: bool = True

    @property
    def offset(self) -> int:
        return max(self.page - 1, 0) * max(self.limit, 0)


@dataclass(frozen=True)
class WeekTotal:
    week_start_date: date
    total_hours: float


@dataclass(frozen=True)
class WeekProjectTotal:
    week_start_date: date
    project_id: str
    total_hours: float


class ProjectRepository(ABC):
    @abstractmethod
    def add(self, project: Project) -> None: ...

    @abstractmethod
    def delete(self, project_id: str) -> None: ...

    @abstractmethod
    def get(self, project_id: str) -> Optional[Project]: ...

    @abstractmethod
    def list_all(self) -> List[Project]: ...

    @abstractmethod
    def list_by_manager(self, manager_id: str) -> List[Project]: ...


class ResourceRepository(ABC):
    @abstractmethod
    def add(self, resource: Resource) -> None: ...

    @abstractmethod
    def delete(self, resource_id: str) -> None: ...

    @abstractmethod
    def get(self, resource_id: str) -> Optional[Resource]: ...

    @abstractmethod
    def list_all(self) -> List[Resource]: ...


class CustomerRepository(ABC):
    @abstractmethod
    def add(self, customer: Customer) -> None: ...

    @abstractmethod
    def delete(self, customer_id: str) -> None: ...

    @abstractmethod
    def get(self, customer_id: str) -> Optional[Customer]: ...


class WeeklyEffortRepository(ABC):
    @abstractmethod
    def add(self, effort: WeeklyEffort) -> None: ...

    @abstractmethod
    def list_by_project(self, project_id: str) -> List[WeeklyEffort]:
        """All effort rows of a project, oldest week first; resource left Unresolved if gone."""

    @abstractmethod
    def weekly_totals(self, project_ids: Sequence[str], since: date) -> List[WeekTotal]: ...

    @abstractmethod
    def weekly_totals_by_project(
        self, project_ids: Sequence[str], since: date
    ) -> List[WeekProjectTotal]: ...


class WeeklyMetricsRepository(ABC):
    @abstractmethod
    def add(self, metrics: WeeklyMetrics) -> None: ...

    @abstractmethod
    def list_by_project(self, project_id: str, window: PageWindow) -> List[WeeklyMetrics]: ...


__all__ = [
    "PageWindow",
    "WeekTotal",
    "WeekProjectTotal",
    "ProjectRepository",
    "ResourceRepository",
    "CustomerRepository",
    "WeeklyEffortRepository",
    "WeeklyMetricsRepository",
]
