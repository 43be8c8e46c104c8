from datetime import date

import pytest

from core.exceptions import NotFoundError
from core.models import HourlyRateSource, Milestone
from tests.factories import week

AS_OF = date(2024, 1, 20)


def _project_with_history(seed):
    alice = seed.resource("Alice", rate=10.0)
    bob = seed.resource("Bob", rate=20.0)
    project = seed.project(
        "Drill",
        manager_id="m1",
        estimated_budget=1000.0,
        estimated_effort=100.0,
        hourly_rate_source=HourlyRateSource.RESOURCE,
        milestones=[
            Milestone("Kick-off", estimated_date=week(2), completed_date=week(2)),
            Milestone("Design", estimated_date=date(2024, 1, 10)),
            Milestone("Launch", estimated_date=date(2024, 3, 1), estimated_effort=40.0),
        ],
    )
    seed.effort(project, alice, 10.0, week(1))
    seed.effort(project, bob, 5.0, week(2))
    seed.effort(project, alice, 10.0, week(3))
    seed.effort(project, None, 100.0, week(2))

    seed.metrics_row(project, week(1), 10.0)
    seed.metrics_row(project, week(2), 22.0)
    seed.metrics_row(project, week(3), 18.0)
    return project


def test_drilldown_totals(seed, dashboard):
    project = _project_with_history(seed)

    view = dashboard.get_project_drilldown(project.id, as_of=AS_OF)

    assert view.project.name == "Drill"
    assert view.project.estimated_effort == 100.0
    assert view.total_effort_hours == 25.0
    assert view.actual_cost == 10 * 10.0 + 5 * 20.0 + 10 * 10.0
    assert view.effort_percent == 25.0
    assert view.cost_percent == 30.0


def test_drilldown_effort_by_resource_is_cumulative_and_gap_filled(seed, dashboard):
    project = _project_with_history(seed)

    trend = dashboard.get_project_drilldown(project.id, as_of=AS_OF).effort_by_resource

    assert trend.keys == ["Alice", "Bob"]
    assert trend.weeks == [week(1), week(2), week(3)]
    assert [p.values for p in trend.points] == [
        {"Alice": 10.0, "Bob": 0.0},
        {"Alice": 10.0, "Bob": 5.0},
        {"Alice": 20.0, "Bob": 5.0},
    ]


def test_drilldown_budget_burndown(seed, dashboard):
    project = _project_with_history(seed)

    burndown = dashboard.get_project_drilldown(project.id, as_of=AS_OF).budget_burndown

    assert [(b.week, b.estimated, b.actual) for b in burndown] == [
        (week(1), 1000.0, 100.0),
        (week(2), 1000.0, 200.0),
        (week(3), 1000.0, 300.0),
    ]
    assert burndown[-1].actual == dashboard.get_project_drilldown(project.id, as_of=AS_OF).actual_cost


def test_drilldown_scope_trend_and_weekly_change(seed, dashboard):
    project = _project_with_history(seed)

    view = dashboard.get_project_drilldown(project.id, as_of=AS_OF)

    assert [(s.week, s.scope_completed) for s in view.scope_trend] == [
        (week(1), 10.0),
        (week(2), 22.0),
        (week(3), 18.0),
    ]
    assert [d.delta for d in view.scope_delta] == [10.0, 12.0, -4.0]


def test_drilldown_milestone_states(seed, dashboard):
    project = _project_with_history(seed)

    milestones = dashboard.get_project_drilldown(project.id, as_of=AS_OF).milestones

    assert [(m.description, m.status) for m in milestones] == [
        ("Kick-off", "Completed"),
        ("Design", "Delayed"),
        ("Launch", "On Track"),
    ]
    assert milestones[2].estimated_effort == 40.0


def test_milestone_due_today_is_on_track(seed, dashboard):
    project = seed.project("Due", milestones=[Milestone("Today", estimated_date=AS_OF)])

    milestones = dashboard.get_project_drilldown(project.id, as_of=AS_OF).milestones

    assert milestones[0].status == "On Track"


def test_drilldown_skips_metrics_without_scope(seed, dashboard):
    project = seed.project("Sparse")
    seed.metrics_row(project, week(1), 5.0)
    seed.metrics_row(project, week(2), None)

    view = dashboard.get_project_drilldown(project.id, as_of=AS_OF)

    assert [s.scope_completed for s in view.scope_trend] == [5.0]


def test_drilldown_without_history(seed, dashboard):
    project = seed.project("Empty", estimated_budget=0.0, estimated_effort=0.0)

    view = dashboard.get_project_drilldown(project.id, as_of=AS_OF)

    assert view.effort_by_resource.points == []
    assert view.budget_burndown == []
    assert view.scope_trend == []
    assert view.total_effort_hours == 0.0
    assert view.effort_percent == 0.0
    assert view.cost_percent == 0.0


def test_unknown_project_raises_not_found(dashboard):
    with pytest.raises(NotFoundError) as exc:
        dashboard.get_project_drilldown("does-not-exist")
    assert exc.value.code == "PROJECT_NOT_FOUND"


def test_deleted_project_raises_not_found(seed, dashboard, services):
    project = seed.project("Gone")
    services["project_repo"].delete(project.id)
    services["session"].commit()

    with pytest.raises(NotFoundError):
        dashboard.get_project_drilldown(project.id)
