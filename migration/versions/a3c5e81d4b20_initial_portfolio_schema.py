"""initial portfolio schema

Revision ID: a3c5e81d4b20
Revises:
Create Date: 2026-10-18
"""

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = "a3c5e81d4b20"
down_revision = None
branch_labels = None
depends_on = None


def _rag(name: str) -> sa.Column:
    return sa.Column(
        name,
        sa.Enum("RED", "AMBER", "GREEN", name="ragstatus"),
        nullable=False,
        server_default="GREEN",
    )


def upgrade() -> None:
    op.create_table(
        "customers",
        sa.Column("id", sa.String(), primary_key=True),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("is_deleted", sa.Boolean(), nullable=False, server_default=sa.false()),
    )
    op.create_table(
        "resources",
        sa.Column("id", sa.String(), primary_key=True),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("email", sa.String(), nullable=True),
        sa.Column("per_hour_rate", sa.Float(), nullable=True),
        sa.Column("currency", sa.String(length=8), nullable=True),
        sa.Column(
            "status",
            sa.Enum("ACTIVE", "INACTIVE", name="resourcestatus"),
            nullable=False,
            server_default="ACTIVE",
        ),
        sa.Column("is_deleted", sa.Boolean(), nullable=False, server_default=sa.false()),
    )
    op.create_table(
        "projects",
        sa.Column("id", sa.String(), primary_key=True),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("manager_id", sa.String(), nullable=True),
        sa.Column("customer_id", sa.String(), nullable=True),
        sa.Column("start_date", sa.Date(), nullable=True),
        sa.Column("end_date", sa.Date(), nullable=True),
        sa.Column(
            "project_type",
            sa.Enum("FIXED_PRICE", "TIME_MATERIAL", name="projecttype"),
            nullable=False,
            server_default="FIXED_PRICE",
        ),
        sa.Column("estimated_effort", sa.Float(), nullable=True),
        sa.Column("estimated_budget", sa.Float(), nullable=True),
        sa.Column("estimated_resources", sa.Integer(), nullable=True),
        sa.Column("scope_completed", sa.Float(), nullable=True),
        sa.Column("hourly_rate", sa.Float(), nullable=True),
        sa.Column(
            "hourly_rate_source",
            sa.Enum("PROJECT", "RESOURCE", "ORGANIZATION", name="hourlyratesource"),
            nullable=False,
            server_default="RESOURCE",
        ),
        sa.Column(
            "project_status",
            sa.Enum("ACTIVE", "COMPLETED", "DEFERRED", name="projectstatus"),
            nullable=False,
            server_default="ACTIVE",
        ),
        _rag("overall_status"),
        _rag("scope_status"),
        _rag("quality_status"),
        _rag("budget_status"),
        sa.Column(
            "tracking_by",
            sa.Enum("END_DATE", "MILESTONE", name="trackingby"),
            nullable=False,
            server_default="END_DATE",
        ),
        sa.Column("is_deleted", sa.Boolean(), nullable=False, server_default=sa.false()),
    )
    op.create_index("idx_projects_manager_id", "projects", ["manager_id"])

    op.create_table(
        "milestones",
        sa.Column("id", sa.String(), primary_key=True),
        sa.Column(
            "project_id",
            sa.String(),
            sa.ForeignKey("projects.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("position", sa.Integer(), nullable=True),
        sa.Column("description", sa.String(), nullable=True),
        sa.Column("estimated_date", sa.Date(), nullable=True),
        sa.Column("estimated_effort", sa.Float(), nullable=True),
        sa.Column("scope_completed", sa.Float(), nullable=True),
        sa.Column("completed_date", sa.Date(), nullable=True),
    )
    op.create_index("idx_milestones_project_id", "milestones", ["project_id"])

    op.create_table(
        "weekly_efforts",
        sa.Column("id", sa.String(), primary_key=True),
        sa.Column("project_id", sa.String(), nullable=False),
        sa.Column("resource_id", sa.String(), nullable=True),
        sa.Column("hours", sa.Float(), nullable=True),
        sa.Column("week_start_date", sa.Date(), nullable=True),
        sa.Column("week_end_date", sa.Date(), nullable=True),
        sa.UniqueConstraint(
            "project_id", "resource_id", "week_start_date", name="ux_effort_project_resource_week"
        ),
    )
    op.create_index(
        "idx_weekly_efforts_project_week", "weekly_efforts", ["project_id", "week_start_date"]
    )

    op.create_table(
        "weekly_metrics",
        sa.Column("id", sa.String(), primary_key=True),
        sa.Column("project_id", sa.String(), nullable=False),
        sa.Column("week_start_date", sa.Date(), nullable=True),
        sa.Column("week_end_date", sa.Date(), nullable=True),
        sa.Column("rollup_hours", sa.Float(), nullable=True),
        sa.Column("scope_completed", sa.Float(), nullable=True),
        sa.Column("comments", sa.String(), nullable=True),
        sa.UniqueConstraint("project_id", "week_start_date", name="ux_metrics_project_week"),
    )
    op.create_index(
        "idx_weekly_metrics_project_week", "weekly_metrics", ["project_id", "week_start_date"]
    )


def downgrade() -> None:
    op.drop_index("idx_weekly_metrics_project_week", table_name="weekly_metrics")
    op.drop_table("weekly_metrics")
    op.drop_index("idx_weekly_efforts_project_week", table_name="weekly_efforts")
    op.drop_table("weekly_efforts")
    op.drop_index("idx_milestones_project_id", table_name="milestones")
    op.drop_table("milestones")
    op.drop_index("idx_projects_manager_id", table_name="projects")
    op.drop_table("projects")
    op.drop_table("resources")
    op.drop_table("customers")
