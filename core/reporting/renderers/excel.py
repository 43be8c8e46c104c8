from pathlib import Path
from typing import Iterable, List, Sequence

from openpyxl import Workbook
from openpyxl.styles import Alignment, Border, Font, PatternFill, Side
from openpyxl.worksheet.worksheet import Worksheet

from core.reporting.contexts import DrilldownReportContext, KpiReportContext

HEADER_FONT = Font(bold=True)
TITLE_FONT = Font(bold=True, size=14)
CENTER = Alignment(horizontal="center")
THIN_BORDER = Border(
    left=Side(style="thin"),
    right=Side(style="thin"),
    top=Side(style="thin"),
    bottom=Side(style="thin"),
)
HEADER_FILL = PatternFill("solid", fgColor="DDDDDD")


def _iso(value):
    return value.isoformat() if value else ""


def _write_table(ws: Worksheet, headers: Sequence[str], rows: Iterable[Sequence], widths: List[int]) -> None:
    for c, h in enumerate(headers, start=1):
        cell = ws.cell(row=1, column=c, value=h)
        cell.font = HEADER_FONT
        cell.alignment = CENTER
        cell.fill = HEADER_FILL
        cell.border = THIN_BORDER

    for r, values in enumerate(rows, start=2):
        for c, v in enumerate(values, start=1):
            ws.cell(row=r, column=c, value=v).border = THIN_BORDER

    for c, width in enumerate(widths, start=1):
        ws.column_dimensions[ws.cell(row=1, column=c).column_letter].width = width


def _key_values(ws: Worksheet, title: str, pairs: Sequence[tuple]) -> None:
    ws["A1"] = title
    ws["A1"].font = TITLE_FONT
    row = 3
    for key, value in pairs:
        if key is None:
            row += 1
            continue
        ws[f"A{row}"] = key
        ws[f"B{row}"] = value
        ws[f"A{row}"].font = HEADER_FONT
        ws[f"A{row}"].border = THIN_BORDER
        ws[f"B{row}"].border = THIN_BORDER
        row += 1
    ws.column_dimensions["A"].width = 30
    ws.column_dimensions["B"].width = 25


class DrilldownExcelRenderer:
    def render(self, ctx: DrilldownReportContext, output_path: Path) -> Path:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        d = ctx.drilldown
        p = d.project
        wb = Workbook()

        # ---------------- Overview ----------------
        ws = wb.active
        ws.title = "Overview"
        _key_values(
            ws,
            f"Project drill-down - {p.name}",
            [
                ("Project ID", p.project_id),
                ("Customer", p.customer_name),
                ("Status", p.project_status),
                ("Overall RAG", p.overall_status),
                ("Start date", _iso(p.start_date)),
                ("End date", _iso(p.end_date)),
                (None, None),
                ("Estimated effort (h)", p.estimated_effort),
                ("Actual effort (h)", d.total_effort_hours),
                ("Effort used (%)", d.effort_percent),
                ("Estimated budget", p.estimated_budget),
                ("Actual cost", d.actual_cost),
                ("Budget used (%)", d.cost_percent),
                (None, None),
                ("Generated on", _iso(ctx.generated_on)),
            ],
        )

        # ---------------- Effort by resource ----------------
        breakdown = d.effort_by_resource
        _write_table(
            wb.create_sheet("Effort by Resource"),
            ["Week", *breakdown.keys],
            ([_iso(pt.week), *[pt.values[k] for k in breakdown.keys]] for pt in breakdown.points),
            [14] + [18] * len(breakdown.keys),
        )

        # ---------------- Budget ----------------
        _write_table(
            wb.create_sheet("Budget"),
            ["Week", "Estimated budget", "Cumulative actual cost"],
            ([_iso(b.week), b.estimated, b.actual] for b in d.budget_burndown),
            [14, 20, 24],
        )

        # ---------------- Scope ----------------
        deltas = {s.week: s.delta for s in d.scope_delta}
        _write_table(
            wb.create_sheet("Scope"),
            ["Week", "Scope completed (%)", "Change"],
            ([_iso(s.week), s.scope_completed, deltas.get(s.week, 0.0)] for s in d.scope_trend),
            [14, 20, 12],
        )

        # ---------------- Milestones ----------------
        _write_table(
            wb.create_sheet("Milestones"),
            ["Description", "Estimated date", "Completed date", "Estimated effort", "Scope (%)", "Status"],
            (
                [
                    m.description,
                    _iso(m.estimated_date),
                    _iso(m.completed_date),
                    m.estimated_effort,
                    m.scope_completed,
                    m.status,
                ]
                for m in d.milestones
            ),
            [34, 16, 16, 16, 12, 12],
        )

        wb.save(output_path)
        return output_path


class KpiExcelRenderer:
    def render(self, ctx: KpiReportContext, output_path: Path) -> Path:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        k = ctx.kpis
        wb = Workbook()
        ws = wb.active
        ws.title = "KPIs"
        scope = f"manager {ctx.manager_id}" if ctx.manager_id else "organization"
        _key_values(
            ws,
            f"Portfolio KPIs - {scope}",
            [
                ("Total projects", k.total_projects),
                ("Active projects", k.active_projects),
                ("Completed projects", k.completed_projects),
                ("At-risk projects", k.at_risk_projects),
                (None, None),
                ("Health score (%)", k.health_score),
                ("On-time completion (%)", k.on_time_completion_rate),
                ("Overall completion (%)", k.overall_completion_rate),
                ("Budget variance (%)", k.budget_variance),
                ("Schedule variance (%)", k.schedule_variance),
                ("Resource utilization (%)", k.resource_utilization),
                (None, None),
                ("Estimated budget", k.total_estimated_budget),
                ("Actual cost", k.total_actual_cost),
                ("Estimated effort (h)", k.total_estimated_effort),
                ("Actual effort (h)", k.total_actual_effort),
                (None, None),
                ("Generated on", _iso(ctx.generated_on)),
            ],
        )
        wb.save(output_path)
        return output_path
