from __future__ import annotations

import logging
import sys
from pathlib import Path

from alembic import command
from alembic.config import Config

logger = logging.getLogger(__name__)


def _app_dir() -> Path:
    """
    Directory holding the ``migration`` folder: the bundle dir for frozen
    builds, else the project root (infra -> project root).
    """
    if getattr(sys, "frozen", False):
        meipass = getattr(sys, "_MEIPASS", None)
        if meipass:
            return Path(meipass).resolve()
        return Path(sys.executable).resolve().parent
    return Path(__file__).resolve().parents[1]


def alembic_config(db_url: str) -> Config:
    script_location = _app_dir() / "migration"
    alembic_ini = script_location / "alembic.ini"
    if not script_location.exists():
        raise RuntimeError(f"Alembic script_location missing: {script_location}")
    if not alembic_ini.exists():
        raise RuntimeError(f"Alembic config missing: {alembic_ini}")

    cfg = Config(str(alembic_ini))
    cfg.set_main_option("script_location", str(script_location))
    cfg.set_main_option("sqlalchemy.url", db_url)
    cfg.attributes["configure_logger"] = False
    return cfg


def run_migrations(db_url: str) -> None:
    logger.info("Upgrading database schema to head")
    command.upgrade(alembic_config(db_url), "head")


__all__ = ["alembic_config", "run_migrations"]
