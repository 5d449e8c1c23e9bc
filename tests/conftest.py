# tests/conftest.py
from __future__ import annotations

import os
from collections.abc import Callable, Generator, Iterator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

os.environ.setdefault("PYTEST_RUNNING", "true")
os.environ.setdefault("DATABASE_URL", "sqlite://")

from stakeguard.core.security import create_access_token
from stakeguard.core.settings import Settings, settings
from stakeguard.db.session import Base
from stakeguard.db.session import get_db as app_get_session
from stakeguard.main import app as fastapi_app
from stakeguard.models import Post
from stakeguard.services.ledger import DatabaseLedger
from stakeguard.services.reports import ReportEngine

TEST_DB_URL = "sqlite://"

AUTHOR = "principal-author"
REPORTER = "principal-reporter"
STARTING_BALANCE = 100_000_000
CONTENT_REF = bytes(range(64))


@pytest.fixture()
def engine() -> Generator[Engine, None, None]:
    engine = create_engine(
        TEST_DB_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    try:
        yield engine
    finally:
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture()
def db_session(engine: Engine) -> Iterator[Session]:
    SessionLocal = sessionmaker(
        bind=engine,
        autocommit=False,
        autoflush=False,
        expire_on_commit=False,
    )
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture(scope="session")
def test_settings() -> Settings:
    """Provide the Settings instance the engine runs with."""
    return settings


@pytest.fixture()
def ledger(db_session: Session) -> DatabaseLedger:
    return DatabaseLedger(db_session)


@pytest.fixture()
def fund(db_session: Session, ledger: DatabaseLedger) -> Callable[[str, int], int]:
    """Return a helper that deposits and commits funds for a principal."""

    def _fund(principal: str, amount: int = STARTING_BALANCE) -> int:
        balance = ledger.deposit(principal, amount)
        db_session.commit()
        return balance

    return _fund


@pytest.fixture()
def report_engine(db_session: Session, ledger: DatabaseLedger) -> ReportEngine:
    return ReportEngine(db_session, ledger)


@pytest.fixture()
def make_moderator(
    report_engine: ReportEngine,
    fund: Callable[[str, int], int],
    test_settings: Settings,
) -> Callable[[str], str]:
    """Return a helper that funds a principal and promotes it to moderator."""

    def _make(principal: str) -> str:
        fund(principal, STARTING_BALANCE)
        current = report_engine.reputation.reputation_of(principal)
        report_engine.reputation.apply_delta(
            principal, test_settings.moderator_threshold - current
        )
        report_engine.promote_to_moderator(principal)
        return principal

    return _make


@pytest.fixture()
def test_post(report_engine: ReportEngine, fund: Callable[[str, int], int]) -> Post:
    """Create a post by AUTHOR at height 0 and fund the reporter."""
    fund(REPORTER, STARTING_BALANCE)
    return report_engine.create_post(AUTHOR, CONTENT_REF, 0)


@pytest.fixture(scope="session")
def app() -> FastAPI:
    return fastapi_app


@pytest.fixture(autouse=True)
def override_session_dependency(app: FastAPI, db_session: Session) -> Iterator[None]:
    def _get_session_override() -> Generator[Session, None, None]:
        yield db_session

    app.dependency_overrides[app_get_session] = _get_session_override
    try:
        yield
    finally:
        app.dependency_overrides.pop(app_get_session, None)


@pytest.fixture()
def client(app: FastAPI) -> Iterator[TestClient]:
    with TestClient(app, base_url="http://test") as test_client:
        yield test_client


@pytest.fixture()
def auth_headers() -> Callable[[str], dict[str, str]]:
    """Return a helper producing bearer headers for a principal."""

    def _headers(principal: str) -> dict[str, str]:
        token = create_access_token(principal)
        return {"Authorization": f"Bearer {token}"}

    return _headers
