from __future__ import annotations

import json
from datetime import date

import pytest
from sqlalchemy import create_engine, inspect

import main_cli
from core.models import HourlyRateSource, Project, Resolved, Resource, WeeklyEffort
from infra.db.base import Base, create_session_factory
from infra.migrate import run_migrations
from infra.services import build_service_graph
from infra.settings import Settings


@pytest.fixture
def db_url(tmp_path):
    return f"sqlite:///{(tmp_path / 'cli.db').as_posix()}"


@pytest.fixture
def cli_env(monkeypatch, isolated_logging, db_url):
    monkeypatch.setenv("PT_DATABASE_URL", db_url)
    return db_url


def test_migrations_create_every_mapped_table(db_url):
    run_migrations(db_url)
    run_migrations(db_url)

    engine = create_engine(db_url, future=True)
    try:
        tables = set(inspect(engine).get_table_names())
    finally:
        engine.dispose()

    assert set(Base.metadata.tables) <= tables
    assert "alembic_version" in tables


def _seed_project(db_url) -> Project:
    run_migrations(db_url)
    session = create_session_factory(db_url)()
    try:
        graph = build_service_graph(session, Settings(database_url=db_url))
        dev = Resource.create("Dev", per_hour_rate=30.0)
        project = Project.create(
            "CLI project",
            manager_id="m1",
            estimated_budget=600.0,
            estimated_effort=20.0,
            hourly_rate_source=HourlyRateSource.RESOURCE,
        )
        graph.resource_repo.add(dev)
        graph.project_repo.add(project)
        graph.effort_repo.add(WeeklyEffort.create(project.id, Resolved(dev), 10.0, date(2024, 1, 1)))
        session.commit()
        return project
    finally:
        session.close()


def test_cli_org_dashboard_on_empty_database(cli_env, capsys):
    assert main_cli.main(["--as-of", "2024-01-31", "org"]) == 0

    payload = json.loads(capsys.readouterr().out)
    assert payload["as_of"] == "2024-01-31"
    assert payload["total_projects"] == 0
    assert payload["projects_summary"] == []


def test_cli_project_drilldown(cli_env, capsys):
    project = _seed_project(cli_env)

    assert main_cli.main(["--as-of", "2024-01-31", "project", project.id]) == 0

    payload = json.loads(capsys.readouterr().out)
    assert payload["project"]["name"] == "CLI project"
    assert payload["actual_cost"] == 300.0
    assert payload["cost_percent"] == 50.0


def test_cli_kpis_for_manager(cli_env, capsys):
    _seed_project(cli_env)

    assert main_cli.main(["kpis", "--manager", "m1"]) == 0

    payload = json.loads(capsys.readouterr().out)
    assert payload["total_projects"] == 1
    assert payload["schedule_variance"] == -50.0


def test_cli_unknown_project_exits_with_not_found(cli_env, capsys):
    assert main_cli.main(["project", "nope"]) == main_cli.EXIT_NOT_FOUND

    assert "Project not found." in capsys.readouterr().err


def test_cli_export_writes_file(cli_env, capsys, tmp_path):
    project = _seed_project(cli_env)
    out = tmp_path / "exports" / "drill.xlsx"

    code = main_cli.main(
        ["--as-of", "2024-01-31", "export", "drilldown-xlsx", "--project", project.id, "--out", str(out)]
    )

    assert code == 0
    assert out.exists()
    assert json.loads(capsys.readouterr().out) == {"path": str(out)}


def test_cli_export_needing_project_requires_it(cli_env, tmp_path):
    with pytest.raises(SystemExit):
        main_cli.main(["export", "burndown-png", "--out", str(tmp_path / "x.png")])


def test_cli_events_lists_journal_and_filters_by_trace(cli_env, capsys):
    assert main_cli.main(["org"]) == 0
    capsys.readouterr()

    assert main_cli.main(["events"]) == 0
    events = json.loads(capsys.readouterr().out)
    assert [e["event_type"] for e in events] == ["app.logging.initialized"] * 2

    first_trace = events[0]["trace_id"]
    assert main_cli.main(["events", "--trace", first_trace]) == 0
    filtered = json.loads(capsys.readouterr().out)
    assert [e["trace_id"] for e in filtered] == [first_trace]
