from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler

import pytest

import infra.operational_support as operational_support
from infra.logging_config import LOG_FILE_BACKUPS, LOG_FILE_MAX_BYTES, setup_logging
from infra.settings import Settings, load_settings


def test_defaults_when_environment_is_empty(monkeypatch, tmp_path):
    monkeypatch.setenv("PT_DATA_DIR", str(tmp_path))

    settings = load_settings({})

    assert settings.organization_hourly_rate == 50.0
    assert settings.trends_window_days == 30
    assert settings.log_level == "INFO"
    assert settings.database_url.startswith("sqlite:///")
    assert settings.database_url.endswith("portfolio_tracker.db")


def test_values_are_read_from_environment():
    settings = load_settings(
        {
            "PT_ORGANIZATION_HOURLY_RATE": "72.5",
            "PT_DATABASE_URL": "sqlite:///:memory:",
            "PT_TRENDS_WINDOW_DAYS": "90",
            "PT_LOG_LEVEL": "debug",
        }
    )

    assert settings == Settings(
        organization_hourly_rate=72.5,
        database_url="sqlite:///:memory:",
        trends_window_days=90,
        log_level="DEBUG",
    )
    assert settings.rate_policy().organization_rate == 72.5


@pytest.mark.parametrize(
    "name, raw",
    [
        ("PT_ORGANIZATION_HOURLY_RATE", "abc"),
        ("PT_ORGANIZATION_HOURLY_RATE", "-10"),
        ("PT_ORGANIZATION_HOURLY_RATE", "inf"),
        ("PT_TRENDS_WINDOW_DAYS", "0"),
        ("PT_TRENDS_WINDOW_DAYS", "two"),
        ("PT_LOG_LEVEL", "chatty"),
    ],
)
def test_invalid_values_fall_back_with_warning(name, raw, caplog):
    env = {"PT_DATABASE_URL": "sqlite:///:memory:", name: raw}

    with caplog.at_level(logging.WARNING, logger="infra.settings"):
        settings = load_settings(env)

    assert settings.organization_hourly_rate == 50.0
    assert settings.trends_window_days == 30
    assert settings.log_level == "INFO"
    assert "Ignoring" in caplog.text


def test_zero_organization_rate_is_kept():
    settings = load_settings({"PT_DATABASE_URL": "sqlite://", "PT_ORGANIZATION_HOURLY_RATE": "0"})

    assert settings.organization_hourly_rate == 0.0


def test_setup_logging_writes_rotating_file_with_trace_ids(isolated_logging):
    log_dir = isolated_logging / "logs"

    log_file = setup_logging("DEBUG", log_dir=log_dir)
    logging.getLogger("portfolio.test").info("hello from test")
    for handler in logging.getLogger().handlers:
        handler.flush()

    assert log_file == log_dir / "app.log"
    text = log_file.read_text(encoding="utf-8")
    assert "hello from test" in text
    assert "trace=-" in text

    file_handlers = [
        h for h in logging.getLogger().handlers if isinstance(h, RotatingFileHandler)
    ]
    assert len(file_handlers) == 1
    assert file_handlers[0].maxBytes == LOG_FILE_MAX_BYTES
    assert file_handlers[0].backupCount == LOG_FILE_BACKUPS


def test_setup_logging_is_idempotent_and_journals_startup(isolated_logging):
    setup_logging("INFO", log_dir=isolated_logging / "logs")
    setup_logging("INFO", log_dir=isolated_logging / "logs")

    assert len(logging.getLogger().handlers) == 2
    events = operational_support.get_operational_support().read_events()
    assert [e["event_type"] for e in events] == ["app.logging.initialized"] * 2
