import logging
from datetime import date

import pytest

from core.exceptions import NotFoundError
from core.models import HourlyRateSource
from tests.factories import week

AS_OF = date(2024, 1, 31)


def _trend_data(seed):
    alice = seed.resource("Alice")
    bob = seed.resource("Bob")
    org = dict(hourly_rate_source=HourlyRateSource.ORGANIZATION)
    p1 = seed.project("Apollo", manager_id="m1", **org)
    p2 = seed.project("Borealis", manager_id="m1", **org)
    p3 = seed.project("Other", manager_id="m2", **org)

    seed.effort(p1, alice, 10.0, week(1))
    seed.effort(p1, bob, 5.0, week(2))
    seed.effort(p1, alice, 8.0, week(4))
    seed.effort(p1, alice, 40.0, date(2023, 12, 4))
    seed.effort(p2, bob, 4.0, week(2))
    seed.effort(p3, bob, 30.0, week(2))

    seed.metrics_row(p1, week(1), 10.0)
    seed.metrics_row(p1, date(2023, 12, 4), 5.0)
    seed.metrics_row(p2, week(2), 20.0)
    seed.metrics_row(p3, week(1), 50.0)
    return p1, p2, p3


def test_single_project_trends_break_down_by_resource(seed, dashboard):
    p1, _, _ = _trend_data(seed)

    trends = dashboard.get_trends(project_id=p1.id, time_range_days=30, as_of=AS_OF)

    assert trends.start_date == date(2024, 1, 1)
    assert trends.end_date == AS_OF
    assert trends.time_range_days == 30
    assert trends.breakdown_by == "resource"
    assert [(p.week, p.hours) for p in trends.effort_trend] == [
        (week(1), 10.0),
        (week(2), 5.0),
        (week(4), 8.0),
    ]
    assert trends.effort_breakdown.keys == ["Alice", "Bob"]
    assert [p.values for p in trends.effort_breakdown.points] == [
        {"Alice": 10.0, "Bob": 0.0},
        {"Alice": 0.0, "Bob": 5.0},
        {"Alice": 8.0, "Bob": 0.0},
    ]


def test_budget_trend_is_cumulative_within_window(seed, dashboard):
    p1, _, _ = _trend_data(seed)

    trends = dashboard.get_trends(project_id=p1.id, time_range_days=30, as_of=AS_OF)

    assert [(p.week, p.cost) for p in trends.budget_trend] == [
        (week(1), 500.0),
        (week(2), 750.0),
        (week(4), 1150.0),
    ]


def test_manager_trends_break_down_by_project(seed, dashboard):
    _trend_data(seed)

    trends = dashboard.get_trends(manager_id="m1", time_range_days=30, as_of=AS_OF)

    assert trends.breakdown_by == "project"
    assert trends.effort_breakdown.keys == ["Apollo", "Borealis"]
    by_week = {p.week: p.values for p in trends.effort_breakdown.points}
    assert by_week[week(2)] == {"Apollo": 5.0, "Borealis": 4.0}
    assert by_week[week(1)] == {"Apollo": 10.0, "Borealis": 0.0}
    assert [(p.week, p.hours) for p in trends.effort_trend][1] == (week(2), 9.0)


def test_scope_trend_is_limited_to_selection_and_window(seed, dashboard):
    _trend_data(seed)

    trends = dashboard.get_trends(manager_id="m1", time_range_days=30, as_of=AS_OF)

    assert [(s.week, s.project_name, s.scope_completed) for s in trends.scope_trend] == [
        (week(1), "Apollo", 10.0),
        (week(2), "Borealis", 20.0),
    ]


def test_organization_trends_include_every_project(seed, dashboard):
    _trend_data(seed)

    trends = dashboard.get_trends(time_range_days=30, as_of=AS_OF)

    assert trends.effort_breakdown.keys == ["Apollo", "Borealis", "Other"]
    assert {s.project_name for s in trends.scope_trend} == {"Apollo", "Borealis", "Other"}


def test_wider_window_reaches_older_rows(seed, dashboard):
    p1, _, _ = _trend_data(seed)

    trends = dashboard.get_trends(project_id=p1.id, time_range_days=90, as_of=AS_OF)

    assert trends.effort_trend[0].week == date(2023, 12, 4)
    assert trends.budget_trend[-1].cost == (40 + 10 + 5 + 8) * 50.0


def test_default_window_comes_from_settings(seed, dashboard):
    p1, _, _ = _trend_data(seed)

    trends = dashboard.get_trends(project_id=p1.id, as_of=AS_OF)

    assert trends.time_range_days == 30


@pytest.mark.parametrize("bad", [0, 0.5, -5, float("nan"), "abc", True])
def test_invalid_window_falls_back_to_default(bad, seed, dashboard, caplog):
    p1, _, _ = _trend_data(seed)

    with caplog.at_level(logging.WARNING):
        trends = dashboard.get_trends(project_id=p1.id, time_range_days=bad, as_of=AS_OF)

    assert trends.time_range_days == 30
    assert "Invalid trends window" in caplog.text


def test_unknown_project_raises_not_found(dashboard):
    with pytest.raises(NotFoundError):
        dashboard.get_trends(project_id="missing", as_of=AS_OF)


def test_empty_selection_has_empty_series(dashboard):
    trends = dashboard.get_trends(manager_id="nobody", as_of=AS_OF)

    assert trends.effort_trend == []
    assert trends.effort_breakdown.points == []
    assert trends.budget_trend == []
    assert trends.scope_trend == []
