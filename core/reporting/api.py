"""Reporting API wrappers around renderer classes."""

import tempfile
from contextlib import suppress
from datetime import date
from pathlib import Path

from core.reporting.contexts import (
    DrilldownPdfContext,
    DrilldownReportContext,
    KpiReportContext,
    TrendsChartContext,
)
from core.reporting.renderers.charts import BurndownChartRenderer, TrendsChartRenderer
from core.reporting.renderers.excel import DrilldownExcelRenderer, KpiExcelRenderer
from core.reporting.renderers.pdf import DrilldownPdfRenderer
from core.services.dashboard import DashboardService


def _ensure_parent(path: Path) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    return path


def _cleanup_temp_artifact(path: Path | None, temp_dir: Path | None = None) -> None:
    if path:
        with suppress(FileNotFoundError):
            path.unlink()
    if temp_dir is not None and temp_dir.exists() and not any(temp_dir.iterdir()):
        temp_dir.rmdir()


def generate_burndown_png(
    dashboard_service: DashboardService,
    project_id: str,
    output_path: str | Path,
    as_of: date | None = None,
) -> Path:
    drilldown = dashboard_service.get_project_drilldown(project_id, as_of=as_of)
    return BurndownChartRenderer().render(drilldown, _ensure_parent(Path(output_path)))


def generate_trends_png(
    dashboard_service: DashboardService,
    output_path: str | Path,
    project_id: str | None = None,
    manager_id: str | None = None,
    time_range_days: int | None = None,
    as_of: date | None = None,
) -> Path:
    trends = dashboard_service.get_trends(
        project_id=project_id,
        manager_id=manager_id,
        time_range_days=time_range_days,
        as_of=as_of,
    )
    title = "Project trends" if project_id else "Portfolio trends"
    ctx = TrendsChartContext(trends=trends, title=title)
    return TrendsChartRenderer().render(ctx, _ensure_parent(Path(output_path)))


def generate_drilldown_excel(
    dashboard_service: DashboardService,
    project_id: str,
    output_path: str | Path,
    as_of: date | None = None,
) -> Path:
    as_of = as_of or date.today()
    ctx = DrilldownReportContext(
        drilldown=dashboard_service.get_project_drilldown(project_id, as_of=as_of),
        generated_on=as_of,
    )
    return DrilldownExcelRenderer().render(ctx, _ensure_parent(Path(output_path)))


def generate_kpi_excel(
    dashboard_service: DashboardService,
    output_path: str | Path,
    manager_id: str | None = None,
) -> Path:
    ctx = KpiReportContext(
        kpis=dashboard_service.get_kpi_summary(manager_id=manager_id),
        generated_on=date.today(),
        manager_id=manager_id,
    )
    return KpiExcelRenderer().render(ctx, _ensure_parent(Path(output_path)))


def generate_drilldown_pdf(
    dashboard_service: DashboardService,
    project_id: str,
    output_path: str | Path,
    temp_dir: str | Path | None = None,
    as_of: date | None = None,
) -> Path:
    as_of = as_of or date.today()
    drilldown = dashboard_service.get_project_drilldown(project_id, as_of=as_of)

    temp_dir = Path(temp_dir) if temp_dir else Path(tempfile.mkdtemp(prefix="pt_report_"))
    temp_dir.mkdir(parents=True, exist_ok=True)
    chart_path: Path | None = temp_dir / f"burndown_{project_id}.png"
    try:
        BurndownChartRenderer().render(drilldown, chart_path)
    except ValueError:
        chart_path = None

    ctx = DrilldownPdfContext(
        drilldown=drilldown,
        burndown_png_path=str(chart_path) if chart_path else "",
        generated_on=as_of,
    )
    try:
        return DrilldownPdfRenderer().render(ctx, _ensure_parent(Path(output_path)))
    finally:
        _cleanup_temp_artifact(chart_path, temp_dir=temp_dir)
