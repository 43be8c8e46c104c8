from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal
from typing import Any


def _finite(value: Any) -> bool:
    if value is None or isinstance(value, bool):
        return False
    if not isinstance(value, (int, float)):
        return False
    return math.isfinite(value)


def variance(actual: Any, estimated: Any) -> float:
    """
    Percentage deviation of ``actual`` from ``estimated``.

    Non-finite input yields 0. A zero or negative estimate cannot be divided
    by, so the result is 0 when nothing was spent and +/-100 otherwise,
    keeping the sign of the over/under-run.
    """
    if not (_finite(actual) and _finite(estimated)):
        return 0.0
    if estimated <= 0:
        if actual == 0:
            return 0.0
        return 100.0 if actual > 0 else -100.0
    return float((actual - estimated) / estimated * 100.0)


def percent_of(actual: Any, estimated: Any) -> float:
    if not (_finite(actual) and _finite(estimated)) or estimated <= 0:
        return 0.0
    return float(actual / estimated * 100.0)


def round1(value: Any) -> float:
    """Round half-up to one decimal; non-finite values become 0.0."""
    if not _finite(value):
        return 0.0
    return float(Decimal(repr(float(value))).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


__all__ = ["variance", "percent_of", "round1"]
