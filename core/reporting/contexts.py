from dataclasses import dataclass
from datetime import date
from typing import Optional

from core.services.dashboard.models import KpiSummary, ProjectDrilldown, TrendsData


@dataclass
class DrilldownReportContext:
    drilldown: ProjectDrilldown
    generated_on: date


@dataclass
class KpiReportContext:
    kpis: KpiSummary
    generated_on: date
    manager_id: Optional[str] = None


@dataclass
class DrilldownPdfContext:
    drilldown: ProjectDrilldown
    burndown_png_path: str
    generated_on: date


@dataclass
class TrendsChartContext:
    trends: TrendsData
    title: str
