# tests/conftest.py
import logging

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

import infra.operational_support as operational_support
from infra.db.base import Base
from infra.operational_support import OperationalSupport
from infra.services import build_service_dict
from infra.settings import Settings
from tests.factories import Seed


@pytest.fixture
def session():
    # separate in-memory DB for tests
    engine = create_engine("sqlite:///:memory:", future=True)
    TestingSessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False, future=True)
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def settings(tmp_path):
    return Settings(
        organization_hourly_rate=50.0,
        database_url=f"sqlite:///{(tmp_path / 'unused.db').as_posix()}",
        trends_window_days=30,
        log_level="INFO",
    )


@pytest.fixture
def services(session, settings):
    # what the CLI wires up, around the test session
    return build_service_dict(session, settings)


@pytest.fixture
def seed(services):
    return Seed(services)


@pytest.fixture
def dashboard(services):
    return services["dashboard_service"]


@pytest.fixture
def isolated_logging(monkeypatch, tmp_path):
    # fresh event journal and root handlers restored after the test
    monkeypatch.setattr(
        operational_support,
        "_GLOBAL_SUPPORT",
        OperationalSupport(events_path=tmp_path / "events.jsonl"),
    )
    monkeypatch.setenv("PT_DATA_DIR", str(tmp_path / "data"))
    root = logging.getLogger()
    saved_handlers = list(root.handlers)
    saved_level = root.level
    yield tmp_path
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()
    for handler in saved_handlers:
        root.addHandler(handler)
    root.setLevel(saved_level)
