from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Any, Optional

from core.models import HourlyRateSource, Project, Resource
from core.services.analytics.policy import DEFAULT_ORGANIZATION_RATE

logger = logging.getLogger(__name__)


def is_valid_rate(value: Any) -> bool:
    """True for a finite, non-negative real number (bools are not rates)."""
    if value is None or isinstance(value, bool):
        return False
    if not isinstance(value, (int, float)):
        return False
    return math.isfinite(value) and value >= 0


@dataclass(frozen=True)
class RatePolicy:
    organization_rate: float = DEFAULT_ORGANIZATION_RATE

    def __post_init__(self) -> None:
        if not is_valid_rate(self.organization_rate):
            logger.warning(
                "Invalid organization hourly rate %r; using default %.2f",
                self.organization_rate,
                DEFAULT_ORGANIZATION_RATE,
            )
            object.__setattr__(self, "organization_rate", DEFAULT_ORGANIZATION_RATE)
        else:
            object.__setattr__(self, "organization_rate", float(self.organization_rate))


def _rate_source(project: Project) -> Optional[HourlyRateSource]:
    raw = getattr(project, "hourly_rate_source", None)
    if isinstance(raw, HourlyRateSource):
        return raw
    try:
        return HourlyRateSource(str(raw or "").upper())
    except ValueError:
        return None


def resolve_rate(
    project: Project,
    resource: Resource | None = None,
    policy: RatePolicy | None = None,
) -> float:
    """
    Hourly rate to apply to one logged hour on ``project``.

    PROJECT uses the project's own rate, RESOURCE the resource's rate; both
    fall back to the organization rate when the specific rate is absent or
    unusable. ORGANIZATION, or an unknown source, always uses the
    organization rate. Never raises.
    """
    policy = policy or RatePolicy()
    source = _rate_source(project)

    if source == HourlyRateSource.PROJECT:
        rate = getattr(project, "hourly_rate", None)
        if is_valid_rate(rate):
            return float(rate)
    elif source == HourlyRateSource.RESOURCE:
        rate = getattr(resource, "per_hour_rate", None) if resource is not None else None
        if is_valid_rate(rate):
            return float(rate)

    return policy.organization_rate


__all__ = ["RatePolicy", "is_valid_rate", "resolve_rate"]
