from __future__ import annotations

from datetime import date

import pytest
from openpyxl import load_workbook

from core.models import Milestone
from core.reporting.api import (
    generate_burndown_png,
    generate_drilldown_excel,
    generate_drilldown_pdf,
    generate_kpi_excel,
    generate_trends_png,
)
from tests.factories import week

AS_OF = date(2024, 1, 31)
PNG_MAGIC = b"\x89PNG"


def _reportable_project(seed):
    alice = seed.resource("Alice", rate=40.0)
    project = seed.project(
        "Report",
        manager_id="m1",
        estimated_budget=2000.0,
        estimated_effort=50.0,
        milestones=[Milestone("Go live", estimated_date=week(4))],
    )
    seed.effort(project, alice, 10.0, week(1))
    seed.effort(project, alice, 12.0, week(2))
    seed.metrics_row(project, week(1), 20.0)
    seed.metrics_row(project, week(2), 35.0)
    return project


def test_drilldown_workbook_sheets_and_overview(seed, dashboard, tmp_path):
    project = _reportable_project(seed)

    out = generate_drilldown_excel(dashboard, project.id, tmp_path / "xlsx" / "drill.xlsx", as_of=AS_OF)

    wb = load_workbook(out)
    assert wb.sheetnames == ["Overview", "Effort by Resource", "Budget", "Scope", "Milestones"]
    overview_values = [c.value for row in wb["Overview"].iter_rows() for c in row]
    assert "Project drill-down - Report" in overview_values


def test_kpi_workbook(seed, dashboard, tmp_path):
    _reportable_project(seed)

    out = generate_kpi_excel(dashboard, tmp_path / "kpis.xlsx", manager_id="m1")

    wb = load_workbook(out)
    assert wb.sheetnames == ["KPIs"]


def test_burndown_and_trends_png(seed, dashboard, tmp_path):
    project = _reportable_project(seed)

    burndown = generate_burndown_png(dashboard, project.id, tmp_path / "burndown.png", as_of=AS_OF)
    trends = generate_trends_png(dashboard, tmp_path / "trends.png", manager_id="m1", as_of=AS_OF)

    assert burndown.read_bytes().startswith(PNG_MAGIC)
    assert trends.read_bytes().startswith(PNG_MAGIC)


def test_trends_png_for_empty_selection(dashboard, tmp_path):
    out = generate_trends_png(dashboard, tmp_path / "empty.png", manager_id="nobody", as_of=AS_OF)

    assert out.exists()


def test_drilldown_pdf_cleans_up_chart(seed, dashboard, tmp_path):
    project = _reportable_project(seed)
    charts = tmp_path / "charts"

    out = generate_drilldown_pdf(dashboard, project.id, tmp_path / "drill.pdf", temp_dir=charts, as_of=AS_OF)

    assert out.read_bytes().startswith(b"%PDF")
    assert not charts.exists()


def test_burndown_without_effort_is_rejected_but_pdf_still_renders(seed, dashboard, tmp_path):
    project = seed.project("Quiet", estimated_budget=100.0)

    with pytest.raises(ValueError):
        generate_burndown_png(dashboard, project.id, tmp_path / "none.png", as_of=AS_OF)

    out = generate_drilldown_pdf(dashboard, project.id, tmp_path / "quiet.pdf", as_of=AS_OF)
    assert out.read_bytes().startswith(b"%PDF")
