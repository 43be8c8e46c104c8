from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any, Callable, Dict, Iterable, List, Optional, Sequence, TypeVar

R = TypeVar("R")


def week_key(value: Any) -> Optional[date]:
    """
    Normalize a week-start value to a calendar date.

    Accepts ``date``, ``datetime`` and ISO-8601 strings; returns None for
    anything else so callers can treat the row as malformed.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str) and value.strip():
        text = value.strip()
        try:
            return datetime.fromisoformat(text.replace("Z", "+00:00")).date()
        except ValueError:
            pass
        try:
            return date.fromisoformat(text[:10])
        except ValueError:
            return None
    return None


@dataclass
class WeekValue:
    week: date
    value: float


@dataclass
class BreakdownPoint:
    week: date
    values: Dict[str, float] = field(default_factory=dict)


@dataclass
class BreakdownTrend:
    weeks: List[date] = field(default_factory=list)
    keys: List[str] = field(default_factory=list)
    points: List[BreakdownPoint] = field(default_factory=list)


def weekly_trend(
    records: Iterable[R],
    week_of: Callable[[R], Any],
    value_of: Callable[[R], float],
    weeks: Optional[Iterable[Any]] = None,
) -> List[WeekValue]:
    """Sum ``value_of`` per week, ascending. Pre-registered ``weeks`` appear even when empty."""
    totals: Dict[date, float] = {}
    for wk in weeks or ():
        key = week_key(wk)
        if key is not None:
            totals.setdefault(key, 0.0)

    for rec in records:
        key = week_key(week_of(rec))
        if key is None:
            continue
        totals[key] = totals.get(key, 0.0) + float(value_of(rec))

    return [WeekValue(week=wk, value=totals[wk]) for wk in sorted(totals)]


def breakdown_trend(
    records: Iterable[R],
    week_of: Callable[[R], Any],
    key_of: Callable[[R], Optional[str]],
    value_of: Callable[[R], float],
    cumulative: bool = False,
) -> BreakdownTrend:
    """
    Two-key (week x series) trend with gap filling.

    Every emitted week carries every key, initialized to 0 before the real
    values are overlaid, so chart series always line up. With
    ``cumulative=True`` each key carries its running total forward through
    the weeks where it has no entry.
    """
    grid: Dict[date, Dict[str, float]] = defaultdict(dict)
    keys: set[str] = set()

    for rec in records:
        wk = week_key(week_of(rec))
        key = key_of(rec)
        if wk is None or key is None:
            continue
        keys.add(key)
        cell = grid[wk]
        cell[key] = cell.get(key, 0.0) + float(value_of(rec))

    ordered_weeks = sorted(grid)
    ordered_keys = sorted(keys)

    points: List[BreakdownPoint] = []
    running = {k: 0.0 for k in ordered_keys}
    for wk in ordered_weeks:
        values = {k: 0.0 for k in ordered_keys}
        for k, v in grid[wk].items():
            values[k] = v
        if cumulative:
            for k in ordered_keys:
                running[k] += values[k]
                values[k] = running[k]
        points.append(BreakdownPoint(week=wk, values=values))

    return BreakdownTrend(weeks=ordered_weeks, keys=ordered_keys, points=points)


def cumulative(points: Sequence[WeekValue]) -> List[WeekValue]:
    running = 0.0
    out: List[WeekValue] = []
    for p in sorted(points, key=lambda x: x.week):
        running += p.value
        out.append(WeekValue(week=p.week, value=running))
    return out


def week_over_week(points: Sequence[WeekValue]) -> List[WeekValue]:
    previous = 0.0
    out: List[WeekValue] = []
    for p in sorted(points, key=lambda x: x.week):
        out.append(WeekValue(week=p.week, value=p.value - previous))
        previous = p.value
    return out


__all__ = [
    "week_key",
    "WeekValue",
    "BreakdownPoint",
    "BreakdownTrend",
    "weekly_trend",
    "breakdown_trend",
    "cumulative",
    "week_over_week",
]
