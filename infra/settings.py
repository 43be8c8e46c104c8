# infra/settings.py
from __future__ import annotations

import logging
import math
import os
from dataclasses import dataclass
from typing import Mapping

from core.services.analytics.policy import DEFAULT_ORGANIZATION_RATE, DEFAULT_TRENDS_WINDOW_DAYS
from core.services.analytics.rates import RatePolicy
from infra.db.base import default_db_url

logger = logging.getLogger(__name__)

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class Settings:
    organization_hourly_rate: float = DEFAULT_ORGANIZATION_RATE
    database_url: str = ""
    trends_window_days: int = DEFAULT_TRENDS_WINDOW_DAYS
    log_level: str = "INFO"

    def rate_policy(self) -> RatePolicy:
        return RatePolicy(organization_rate=self.organization_hourly_rate)


def _env(environ: Mapping[str, str], name: str) -> str:
    return (environ.get(name) or "").strip()


def _float_setting(environ: Mapping[str, str], name: str, default: float) -> float:
    raw = _env(environ, name)
    if not raw:
        return default
    try:
        value = float(raw)
    except ValueError:
        logger.warning("Ignoring %s=%r (not a number); using %s", name, raw, default)
        return default
    if not math.isfinite(value) or value < 0:
        logger.warning("Ignoring %s=%r (must be a finite non-negative number); using %s", name, raw, default)
        return default
    return value


def _positive_int_setting(environ: Mapping[str, str], name: str, default: int) -> int:
    raw = _env(environ, name)
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning("Ignoring %s=%r (not an integer); using %s", name, raw, default)
        return default
    if value <= 0:
        logger.warning("Ignoring %s=%r (must be positive); using %s", name, raw, default)
        return default
    return value


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Read ``PT_*`` environment variables once; bad values fall back to defaults."""
    environ = os.environ if environ is None else environ

    level = _env(environ, "PT_LOG_LEVEL").upper() or "INFO"
    if level not in _LOG_LEVELS:
        logger.warning("Ignoring PT_LOG_LEVEL=%r; using INFO", level)
        level = "INFO"

    return Settings(
        organization_hourly_rate=_float_setting(
            environ, "PT_ORGANIZATION_HOURLY_RATE", DEFAULT_ORGANIZATION_RATE
        ),
        database_url=_env(environ, "PT_DATABASE_URL") or default_db_url(),
        trends_window_days=_positive_int_setting(
            environ, "PT_TRENDS_WINDOW_DAYS", DEFAULT_TRENDS_WINDOW_DAYS
        ),
        log_level=level,
    )


__all__ = ["Settings", "load_settings"]
