from pathlib import Path

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4, landscape
from reportlab.lib.styles import getSampleStyleSheet
from reportlab.platypus import (
    Image,
    Paragraph,
    SimpleDocTemplate,
    Spacer,
    Table,
    TableStyle,
)

from core.reporting.contexts import DrilldownPdfContext

_TABLE_STYLE = TableStyle([
    ("BACKGROUND", (0, 0), (-1, 0), colors.lightgrey),
    ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
    ("GRID", (0, 0), (-1, -1), 0.5, colors.grey),
    ("ALIGN", (1, 1), (-1, -1), "RIGHT"),
])


class DrilldownPdfRenderer:
    def render(self, ctx: DrilldownPdfContext, output_path: Path) -> Path:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        doc = SimpleDocTemplate(
            str(output_path),
            pagesize=landscape(A4),
            leftMargin=40,
            rightMargin=40,
            topMargin=40,
            bottomMargin=40,
        )
        d = ctx.drilldown
        p = d.project

        styles = getSampleStyleSheet()
        story = []

        # ---------------- Title ----------------
        story.append(Paragraph(f"Project Report - {p.name}", styles["Title"]))
        story.append(Spacer(1, 12))

        # ---------------- Summary ----------------
        info = [
            f"Customer: {p.customer_name}",
            f"Status: {p.project_status} (overall {p.overall_status})",
            f"Start date: {p.start_date or '-'}",
            f"End date: {p.end_date or '-'}",
            f"Effort: {d.total_effort_hours:.1f} h of {p.estimated_effort:.1f} h ({d.effort_percent:.1f}%)",
            f"Cost: {d.actual_cost:.2f} of {p.estimated_budget:.2f} ({d.cost_percent:.1f}%)",
            f"Generated on: {ctx.generated_on.isoformat()}",
        ]
        for line in info:
            story.append(Paragraph(line, styles["Normal"]))
        story.append(Spacer(1, 16))

        # ---------------- Burn-down ----------------
        if ctx.burndown_png_path:
            story.append(Paragraph("Budget Burn-down", styles["Heading2"]))
            story.append(Spacer(1, 8))
            img = Image(ctx.burndown_png_path)
            img._restrictSize(720, 280)
            story.append(img)
            story.append(Spacer(1, 16))

        # ---------------- Milestones ----------------
        if d.milestones:
            story.append(Paragraph("Milestones", styles["Heading2"]))
            story.append(Spacer(1, 8))
            data = [["Milestone", "Estimated", "Completed", "Status"]]
            for m in d.milestones:
                data.append([
                    m.description,
                    m.estimated_date.isoformat() if m.estimated_date else "-",
                    m.completed_date.isoformat() if m.completed_date else "-",
                    m.status,
                ])
            table = Table(data, colWidths=[300, 110, 110, 90])
            table.setStyle(_TABLE_STYLE)
            story.append(table)
            story.append(Spacer(1, 16))

        # ---------------- Scope ----------------
        if d.scope_trend:
            story.append(Paragraph("Scope Completion", styles["Heading2"]))
            story.append(Spacer(1, 8))
            deltas = {s.week: s.delta for s in d.scope_delta}
            data = [["Week", "Scope completed (%)", "Change"]]
            for s in d.scope_trend:
                data.append([
                    s.week.isoformat(),
                    f"{s.scope_completed:.1f}",
                    f"{deltas.get(s.week, 0.0):+.1f}",
                ])
            table = Table(data, colWidths=[140, 140, 100])
            table.setStyle(_TABLE_STYLE)
            story.append(table)

        doc.build(story)
        return output_path
