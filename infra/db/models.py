# infra/db/models.py
from __future__ import annotations

from datetime import date
from typing import Optional

from sqlalchemy import (
    Boolean,
    Date,
    Enum as SAEnum,
    Float,
    ForeignKey,
    Index,
    Integer,
    String,
    UniqueConstraint,
)
from sqlalchemy.orm import Mapped, mapped_column

from core.models import (
    HourlyRateSource,
    ProjectStatus,
    ProjectType,
    RAGStatus,
    ResourceStatus,
    TrackingBy,
)
from infra.db.base import Base


class CustomerORM(Base):
    __tablename__ = "customers"

    id: Mapped[str] = mapped_column(String, primary_key=True)
    name: Mapped[str] = mapped_column(String, nullable=False)
    is_deleted: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)


class ResourceORM(Base):
    __tablename__ = "resources"

    id: Mapped[str] = mapped_column(String, primary_key=True)
    name: Mapped[str] = mapped_column(String, nullable=False)
    email: Mapped[str] = mapped_column(String, default="")
    per_hour_rate: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    currency: Mapped[str] = mapped_column(String(8), default="USD")
    status: Mapped[ResourceStatus] = mapped_column(
        SAEnum(ResourceStatus), default=ResourceStatus.ACTIVE, nullable=False
    )
    is_deleted: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)


class ProjectORM(Base):
    __tablename__ = "projects"

    id: Mapped[str] = mapped_column(String, primary_key=True)
    name: Mapped[str] = mapped_column(String, nullable=False)
    manager_id: Mapped[Optional[str]] = mapped_column(String, nullable=True)
    # no FK: a customer may disappear while its projects remain
    customer_id: Mapped[Optional[str]] = mapped_column(String, nullable=True)
    start_date: Mapped[Optional[date]] = mapped_column(Date, nullable=True)
    end_date: Mapped[Optional[date]] = mapped_column(Date, nullable=True)
    project_type: Mapped[ProjectType] = mapped_column(
        SAEnum(ProjectType), default=ProjectType.FIXED_PRICE, nullable=False
    )
    estimated_effort: Mapped[float] = mapped_column(Float, default=0.0)
    estimated_budget: Mapped[float] = mapped_column(Float, default=0.0)
    estimated_resources: Mapped[int] = mapped_column(Integer, default=0)
    scope_completed: Mapped[float] = mapped_column(Float, default=0.0)
    hourly_rate: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    hourly_rate_source: Mapped[HourlyRateSource] = mapped_column(
        SAEnum(HourlyRateSource), default=HourlyRateSource.RESOURCE, nullable=False
    )
    project_status: Mapped[ProjectStatus] = mapped_column(
        SAEnum(ProjectStatus), default=ProjectStatus.ACTIVE, nullable=False
    )
    overall_status: Mapped[RAGStatus] = mapped_column(SAEnum(RAGStatus), default=RAGStatus.GREEN, nullable=False)
    scope_status: Mapped[RAGStatus] = mapped_column(SAEnum(RAGStatus), default=RAGStatus.GREEN, nullable=False)
    quality_status: Mapped[RAGStatus] = mapped_column(SAEnum(RAGStatus), default=RAGStatus.GREEN, nullable=False)
    budget_status: Mapped[RAGStatus] = mapped_column(SAEnum(RAGStatus), default=RAGStatus.GREEN, nullable=False)
    tracking_by: Mapped[TrackingBy] = mapped_column(
        SAEnum(TrackingBy), default=TrackingBy.END_DATE, nullable=False
    )
    is_deleted: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
Index("idx_projects_manager_id", ProjectORM.manager_id)


class MilestoneORM(Base):
    __tablename__ = "milestones"

    id: Mapped[str] = mapped_column(String, primary_key=True)
    project_id: Mapped[str] = mapped_column(
        String,
        ForeignKey("projects.id", ondelete="CASCADE"),
        nullable=False,
    )
    position: Mapped[int] = mapped_column(Integer, default=0)
    description: Mapped[str] = mapped_column(String, default="")
    estimated_date: Mapped[Optional[date]] = mapped_column(Date, nullable=True)
    estimated_effort: Mapped[float] = mapped_column(Float, default=0.0)
    scope_completed: Mapped[float] = mapped_column(Float, default=0.0)
    completed_date: Mapped[Optional[date]] = mapped_column(Date, nullable=True)
Index("idx_milestones_project_id", MilestoneORM.project_id)


class WeeklyEffortORM(Base):
    __tablename__ = "weekly_efforts"
    __table_args__ = (
        UniqueConstraint("project_id", "resource_id", "week_start_date", name="ux_effort_project_resource_week"),
    )

    id: Mapped[str] = mapped_column(String, primary_key=True)
    # plain ids: rows outlive deleted projects and resources and are resolved on read
    project_id: Mapped[str] = mapped_column(String, nullable=False)
    resource_id: Mapped[Optional[str]] = mapped_column(String, nullable=True)
    hours: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    week_start_date: Mapped[Optional[date]] = mapped_column(Date, nullable=True)
    week_end_date: Mapped[Optional[date]] = mapped_column(Date, nullable=True)
Index("idx_weekly_efforts_project_week", WeeklyEffortORM.project_id, WeeklyEffortORM.week_start_date)


class WeeklyMetricsORM(Base):
    __tablename__ = "weekly_metrics"
    __table_args__ = (
        UniqueConstraint("project_id", "week_start_date", name="ux_metrics_project_week"),
    )

    id: Mapped[str] = mapped_column(String, primary_key=True)
    project_id: Mapped[str] = mapped_column(String, nullable=False)
    week_start_date: Mapped[Optional[date]] = mapped_column(Date, nullable=True)
    week_end_date: Mapped[Optional[date]] = mapped_column(Date, nullable=True)
    rollup_hours: Mapped[float] = mapped_column(Float, default=0.0)
    scope_completed: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    comments: Mapped[str] = mapped_column(String, default="")
Index("idx_weekly_metrics_project_week", WeeklyMetricsORM.project_id, WeeklyMetricsORM.week_start_date)


__all__ = [
    "CustomerORM",
    "ResourceORM",
    "ProjectORM",
    "MilestoneORM",
    "WeeklyEffortORM",
    "WeeklyMetricsORM",
]
