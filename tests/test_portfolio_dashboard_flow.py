from datetime import date, timedelta

from core.models import HourlyRateSource, ProjectStatus, RAGStatus
from tests.factories import week

AS_OF = date(2024, 1, 20)


def _portfolio(seed):
    acme = seed.customer("Acme")
    globex = seed.customer("Globex")
    alice = seed.resource("Alice", rate=100.0)
    bob = seed.resource("Bob", rate=50.0)

    alpha = seed.project(
        "Alpha",
        customer=acme,
        manager_id="m1",
        estimated_budget=5000.0,
        overall_status=RAGStatus.RED,
        hourly_rate_source=HourlyRateSource.RESOURCE,
    )
    beta = seed.project(
        "Beta",
        manager_id="m1",
        estimated_budget=400.0,
        project_status=ProjectStatus.COMPLETED,
        hourly_rate_source=HourlyRateSource.PROJECT,
        hourly_rate=80.0,
    )
    gamma = seed.project("Gamma", customer=globex, manager_id="m2", estimated_budget=1000.0)

    seed.effort(alpha, alice, 10.0, week(1))
    seed.effort(alpha, bob, 20.0, week(1))
    seed.effort(alpha, alice, 5.0, week(2))
    seed.effort(beta, alice, 10.0, week(2))
    seed.effort(gamma, bob, 40.0, week(2))
    return {"alpha": alpha, "beta": beta, "gamma": gamma, "alice": alice, "bob": bob, "acme": acme}


def test_manager_dashboard_summaries_and_counters(seed, dashboard):
    _portfolio(seed)

    view = dashboard.get_manager_dashboard("m1", as_of=AS_OF)

    assert [s.name for s in view.projects_summary] == ["Alpha", "Beta"]
    assert [s.customer_name for s in view.projects_summary] == ["Acme", "Unknown"]
    assert view.projects_summary[0].overall_status == "RED"
    assert [(c.label, c.count) for c in view.projects_by_customer] == [("Acme", 1), ("Unknown", 1)]
    assert [(c.label, c.count) for c in view.projects_by_status] == [("RED", 1), ("GREEN", 1)]
    assert view.total_projects == 2
    assert view.active_projects == 1
    assert view.completed_projects == 1
    assert view.at_risk_projects == 1
    assert view.as_of == AS_OF


def test_manager_dashboard_effort_budget_and_allocation(seed, dashboard):
    _portfolio(seed)

    view = dashboard.get_manager_dashboard("m1", as_of=AS_OF)

    assert [(p.week, p.hours) for p in view.effort_by_week] == [(week(1), 30.0), (week(2), 15.0)]

    budget = {row.project_name: row for row in view.budget_utilization}
    assert budget["Alpha"].actual_cost == 10 * 100.0 + 20 * 50.0 + 5 * 100.0
    assert budget["Alpha"].variance_percent == -50.0
    assert budget["Beta"].actual_cost == 800.0
    assert budget["Beta"].variance_percent == 100.0

    assert [(r.resource, r.hours, r.projects) for r in view.resource_allocation] == [
        ("Alice", 25.0, 2),
        ("Bob", 20.0, 1),
    ]


def test_organization_dashboard_covers_every_project(seed, dashboard):
    _portfolio(seed)

    view = dashboard.get_organization_dashboard(as_of=AS_OF)

    assert view.total_projects == 3
    assert [(c.label, c.count) for c in view.projects_by_customer] == [
        ("Acme", 1),
        ("Unknown", 1),
        ("Globex", 1),
    ]
    assert [(p.week, p.hours) for p in view.effort_by_week] == [(week(1), 30.0), (week(2), 55.0)]
    assert view.resource_allocation[0].resource == "Bob"
    assert view.resource_allocation[0].hours == 60.0


def test_deleted_resource_rows_are_left_out_everywhere(seed, dashboard, services):
    data = _portfolio(seed)
    services["resource_repo"].delete(data["bob"].id)
    services["session"].commit()

    view = dashboard.get_manager_dashboard("m1", as_of=AS_OF)

    budget = {row.project_name: row for row in view.budget_utilization}
    assert budget["Alpha"].actual_cost == 15 * 100.0
    assert [(p.week, p.hours) for p in view.effort_by_week] == [(week(1), 10.0), (week(2), 15.0)]
    assert [r.resource for r in view.resource_allocation] == ["Alice"]


def test_deleted_customer_reads_as_unknown(seed, dashboard, services):
    data = _portfolio(seed)
    services["customer_repo"].delete(data["acme"].id)
    services["session"].commit()

    view = dashboard.get_manager_dashboard("m1", as_of=AS_OF)

    assert [c.label for c in view.projects_by_customer] == ["Unknown"]
    assert view.projects_by_customer[0].count == 2


def test_effort_window_is_twelve_weeks(seed, dashboard):
    alice = seed.resource("Alice", rate=10.0)
    project = seed.project("Old and new", manager_id="m1")
    seed.effort(project, alice, 99.0, AS_OF - timedelta(days=91))
    seed.effort(project, alice, 8.0, week(2))

    view = dashboard.get_manager_dashboard("m1", as_of=AS_OF)

    assert [p.hours for p in view.effort_by_week] == [8.0]


def test_budget_utilization_is_limited_to_ten_projects(seed, dashboard):
    for i in range(12):
        seed.project(f"P{i:02d}", manager_id="m1", estimated_budget=100.0)

    view = dashboard.get_manager_dashboard("m1", as_of=AS_OF)

    assert view.total_projects == 12
    assert len(view.budget_utilization) == 10
    assert [r.project_name for r in view.budget_utilization][:2] == ["P00", "P01"]


def test_unknown_manager_gets_empty_dashboard(seed, dashboard):
    _portfolio(seed)

    view = dashboard.get_manager_dashboard("nobody", as_of=AS_OF)

    assert view.total_projects == 0
    assert view.projects_summary == []
    assert view.effort_by_week == []
    assert view.budget_utilization == []
    assert view.resource_allocation == []


def test_allocation_keeps_namesakes_apart(seed, dashboard):
    first = seed.resource("Alex", rate=10.0)
    second = seed.resource("Alex", rate=20.0)
    p1 = seed.project("P1", manager_id="m1")
    p2 = seed.project("P2", manager_id="m1")
    seed.effort(p1, first, 10.0, week(1))
    seed.effort(p2, second, 30.0, week(1))

    view = dashboard.get_manager_dashboard("m1", as_of=AS_OF)

    assert [(r.resource, r.hours, r.projects) for r in view.resource_allocation] == [
        ("Alex", 30.0, 1),
        ("Alex", 10.0, 1),
    ]
