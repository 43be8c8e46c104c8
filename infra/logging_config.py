# infra/logging_config.py
from __future__ import annotations
import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from infra.path import user_data_dir
from infra.operational_support import TraceIdLogFilter, get_operational_support

LOG_FILE_MAX_BYTES = 1_000_000
LOG_FILE_BACKUPS = 5


def setup_logging(level: str = "INFO", log_dir: Path | None = None) -> Path:
    """
    Configure root logging: a rotating file under the per-user data dir
    plus a console handler, both stamped with the current trace id.
    Returns the log file path.
    """
    log_dir = log_dir or user_data_dir() / "logs"
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / "app.log"

    logger = logging.getLogger()
    logger.setLevel(getattr(logging, (level or "INFO").upper(), logging.INFO))

    # idempotent when called more than once per process
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    trace_filter = TraceIdLogFilter()

    file_handler = RotatingFileHandler(
        log_file,
        maxBytes=LOG_FILE_MAX_BYTES,
        backupCount=LOG_FILE_BACKUPS,
        encoding="utf-8",
    )
    file_handler.addFilter(trace_filter)
    file_handler.setFormatter(
        logging.Formatter("%(asctime)s [%(levelname)s] trace=%(trace_id)s %(name)s - %(message)s")
    )
    logger.addHandler(file_handler)

    console = logging.StreamHandler()
    console.addFilter(trace_filter)
    console.setFormatter(logging.Formatter("%(levelname)s [trace=%(trace_id)s]: %(message)s"))
    logger.addHandler(console)

    logger.info("Logging initialized. Log file at %s", log_file)
    get_operational_support().emit_event(
        event_type="app.logging.initialized",
        message=f"Logging initialized at {log_file}",
        data={"log_file": str(log_file), "level": logging.getLevelName(logger.level)},
    )
    return log_file


__all__ = ["setup_logging", "LOG_FILE_MAX_BYTES", "LOG_FILE_BACKUPS"]
