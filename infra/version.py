from __future__ import annotations

import os
from importlib import metadata

DISTRIBUTION_NAME = "portfolio-tracker"
_FALLBACK_VERSION = "0.0.0+local"


def _installed_version() -> str | None:
    try:
        return metadata.version(DISTRIBUTION_NAME)
    except metadata.PackageNotFoundError:
        return None


def get_app_version() -> str:
    """``PT_APP_VERSION`` wins, then the installed distribution, then a local marker."""
    env_override = (os.getenv("PT_APP_VERSION") or "").strip()
    if env_override:
        return env_override
    return _installed_version() or _FALLBACK_VERSION


__all__ = ["DISTRIBUTION_NAME", "get_app_version"]
