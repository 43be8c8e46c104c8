#!/usr/bin/env python3
"""Portfolio Tracker analytics CLI.

Usage:
    python main_cli.py org
    python main_cli.py manager <manager_id>
    python main_cli.py project <project_id> --as-of 2024-03-01
    python main_cli.py kpis [--manager <manager_id>]
    python main_cli.py trends [--project <id> | --manager <id>] [--days 30]
    python main_cli.py export drilldown-xlsx --project <id> --out report.xlsx
    python main_cli.py events [--trace <trace_id>]
"""
from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import asdict
from datetime import date
from enum import Enum
from typing import Any, Sequence

from core.exceptions import NotFoundError
from core.reporting.api import (
    generate_burndown_png,
    generate_drilldown_excel,
    generate_drilldown_pdf,
    generate_kpi_excel,
    generate_trends_png,
)
from infra.db.base import create_session_factory
from infra.logging_config import setup_logging
from infra.migrate import run_migrations
from infra.operational_support import bind_trace_id, get_operational_support
from infra.services import build_service_graph
from infra.settings import load_settings
from infra.version import get_app_version

logger = logging.getLogger(__name__)

EXIT_NOT_FOUND = 2

EXPORT_KINDS = ("drilldown-xlsx", "drilldown-pdf", "kpi-xlsx", "burndown-png", "trends-png")


def _json_default(value: Any) -> Any:
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, Enum):
        return value.value
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def to_json(result: Any) -> str:
    return json.dumps(asdict(result), default=_json_default, indent=2)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="portfolio-tracker",
        description="Portfolio analytics: dashboards, KPIs, trends and report exports",
    )
    parser.add_argument("--version", action="version", version=get_app_version())
    parser.add_argument("--as-of", type=date.fromisoformat, default=None, help="Reference date (YYYY-MM-DD)")
    sub = parser.add_subparsers(dest="command", required=True)

    p_manager = sub.add_parser("manager", help="Dashboard for one manager's projects")
    p_manager.add_argument("manager_id")

    sub.add_parser("org", help="Organization-wide dashboard")

    p_project = sub.add_parser("project", help="Single project drill-down")
    p_project.add_argument("project_id")

    p_kpis = sub.add_parser("kpis", help="Portfolio KPI summary")
    p_kpis.add_argument("--manager", dest="manager_id", default=None)

    p_trends = sub.add_parser("trends", help="Effort, budget and scope trends")
    p_trends.add_argument("--project", dest="project_id", default=None)
    p_trends.add_argument("--manager", dest="manager_id", default=None)
    p_trends.add_argument("--days", dest="time_range_days", type=int, default=None)

    p_export = sub.add_parser("export", help="Write a report file")
    p_export.add_argument("kind", choices=EXPORT_KINDS)
    p_export.add_argument("--out", required=True)
    p_export.add_argument("--project", dest="project_id", default=None)
    p_export.add_argument("--manager", dest="manager_id", default=None)
    p_export.add_argument("--days", dest="time_range_days", type=int, default=None)

    p_events = sub.add_parser("events", help="Show the operational event journal")
    p_events.add_argument("--trace", dest="trace_id", default=None)

    return parser


def _run_export(service, args: argparse.Namespace) -> str:
    needs_project = args.kind in ("drilldown-xlsx", "drilldown-pdf", "burndown-png")
    if needs_project and not args.project_id:
        raise SystemExit(f"export {args.kind} requires --project")

    if args.kind == "drilldown-xlsx":
        path = generate_drilldown_excel(service, args.project_id, args.out, as_of=args.as_of)
    elif args.kind == "drilldown-pdf":
        path = generate_drilldown_pdf(service, args.project_id, args.out, as_of=args.as_of)
    elif args.kind == "burndown-png":
        path = generate_burndown_png(service, args.project_id, args.out, as_of=args.as_of)
    elif args.kind == "kpi-xlsx":
        path = generate_kpi_excel(service, args.out, manager_id=args.manager_id)
    else:
        path = generate_trends_png(
            service,
            args.out,
            project_id=args.project_id,
            manager_id=args.manager_id,
            time_range_days=args.time_range_days,
            as_of=args.as_of,
        )
    return json.dumps({"path": str(path)})


def dispatch(service, args: argparse.Namespace) -> str:
    if args.command == "manager":
        return to_json(service.get_manager_dashboard(args.manager_id, as_of=args.as_of))
    if args.command == "org":
        return to_json(service.get_organization_dashboard(as_of=args.as_of))
    if args.command == "project":
        return to_json(service.get_project_drilldown(args.project_id, as_of=args.as_of))
    if args.command == "kpis":
        return to_json(service.get_kpi_summary(manager_id=args.manager_id))
    if args.command == "trends":
        return to_json(
            service.get_trends(
                project_id=args.project_id,
                manager_id=args.manager_id,
                time_range_days=args.time_range_days,
                as_of=args.as_of,
            )
        )
    return _run_export(service, args)


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    settings = load_settings()
    setup_logging(settings.log_level)

    if args.command == "events":
        events = get_operational_support().read_events(trace_id=args.trace_id)
        print(json.dumps(events, indent=2))
        return 0

    with bind_trace_id() as trace_id:
        logger.info("Running '%s' (trace %s)", args.command, trace_id)
        run_migrations(settings.database_url)
        session = create_session_factory(settings.database_url)()
        try:
            graph = build_service_graph(session, settings)
            print(dispatch(graph.dashboard_service, args))
        except NotFoundError as exc:
            logger.warning("%s [%s]", exc, exc.code)
            print(f"error: {exc}", file=sys.stderr)
            return EXIT_NOT_FOUND
        except Exception as exc:
            get_operational_support().capture_exception(exc, context=f"cli:{args.command}")
            raise
        finally:
            session.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
