from pathlib import Path

import matplotlib.pyplot as plt

from core.reporting.contexts import TrendsChartContext
from core.services.dashboard.models import ProjectDrilldown


class BurndownChartRenderer:
    def render(self, drilldown: ProjectDrilldown, output_path: Path) -> Path:
        points = drilldown.budget_burndown
        if not points:
            raise ValueError("No effort recorded; nothing to plot.")
        output_path.parent.mkdir(parents=True, exist_ok=True)

        xs = [p.week for p in points]
        fig, ax = plt.subplots(figsize=(9, 3))
        ax.plot(xs, [p.actual for p in points], marker="o", label="Actual cost")
        ax.plot(xs, [p.estimated for p in points], linestyle="--", label="Estimated budget")
        ax.set_title(f"Budget burn-down - {drilldown.project.name}")
        ax.legend()
        ax.grid(True, axis="y", linestyle=":", linewidth=0.6)
        fig.autofmt_xdate()

        fig.tight_layout()
        fig.savefig(output_path, dpi=150)
        plt.close(fig)

        return output_path


class TrendsChartRenderer:
    def render(self, ctx: TrendsChartContext, output_path: Path) -> Path:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        trends = ctx.trends

        fig, (ax_effort, ax_cost) = plt.subplots(2, 1, figsize=(9, 6), sharex=True)

        breakdown = trends.effort_breakdown
        if breakdown.points:
            xs = [p.week for p in breakdown.points]
            bottom = [0.0] * len(xs)
            for key in breakdown.keys:
                ys = [p.values.get(key, 0.0) for p in breakdown.points]
                ax_effort.bar(xs, ys, bottom=bottom, width=5, label=key)
                bottom = [b + y for b, y in zip(bottom, ys)]
            ax_effort.legend(fontsize="small")
        ax_effort.set_title(f"{ctx.title} - effort by {trends.breakdown_by}")
        ax_effort.set_ylabel("Hours")
        ax_effort.grid(True, axis="y", linestyle=":", linewidth=0.6)

        if trends.budget_trend:
            ax_cost.plot(
                [p.week for p in trends.budget_trend],
                [p.cost for p in trends.budget_trend],
                marker="o",
            )
        ax_cost.set_title("Cumulative cost")
        ax_cost.grid(True, axis="y", linestyle=":", linewidth=0.6)
        fig.autofmt_xdate()

        fig.tight_layout()
        fig.savefig(output_path, dpi=150)
        plt.close(fig)

        return output_path
