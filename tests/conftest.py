from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Generator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

# Keep test imports independent of a local .env or a running Postgres.
os.environ.setdefault("DATABASE_URL", "sqlite+pysqlite:///:memory:")

from letshang.core.db import get_db
from letshang.main import app
from letshang.models import Activity, Base, User

DEFAULT_TEST_DATABASE_URL = "sqlite+pysqlite:///:memory:"


def _create_engine(database_url: str) -> Engine:
    if make_url(database_url).get_backend_name() == "sqlite":
        # One shared connection so every session sees the same in-memory database.
        return create_engine(
            database_url,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
            future=True,
        )
    return create_engine(database_url, pool_pre_ping=True, future=True)


def _clear_tables(db: Session) -> None:
    db.query(Activity).delete()
    db.query(User).delete()
    db.commit()


def _override_with(factory) -> None:
    def override_get_db():
        db = factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db


@pytest.fixture(scope="session")
def integration_db_url() -> str:
    return os.getenv("TEST_DATABASE_URL", DEFAULT_TEST_DATABASE_URL)


@pytest.fixture(scope="session")
def integration_engine(integration_db_url: str) -> Generator[Engine, None, None]:
    try:
        engine = _create_engine(integration_db_url)
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        Base.metadata.create_all(engine)
    except Exception as exc:
        pytest.skip(f"Integration database unavailable: {exc}")

    try:
        yield engine
    finally:
        Base.metadata.drop_all(engine)
        engine.dispose()


@pytest.fixture()
def session_factory(integration_engine: Engine):
    return sessionmaker(bind=integration_engine, autoflush=False, autocommit=False)


@pytest.fixture()
def clean_database(session_factory):
    with session_factory() as db:
        _clear_tables(db)

    yield

    with session_factory() as db:
        _clear_tables(db)


@pytest.fixture()
def db_session(session_factory, clean_database) -> Generator[Session, None, None]:
    with session_factory() as db:
        yield db


@pytest.fixture()
def api_client(session_factory, clean_database) -> Generator[TestClient, None, None]:
    _override_with(session_factory)
    try:
        with TestClient(app) as client:
            yield client
    finally:
        app.dependency_overrides.pop(get_db, None)


@pytest.fixture()
def broken_api_client() -> Generator[TestClient, None, None]:
    """Client whose database has no tables, so every query fails."""
    engine = _create_engine(DEFAULT_TEST_DATABASE_URL)
    _override_with(sessionmaker(bind=engine, autoflush=False, autocommit=False))
    try:
        with TestClient(app) as client:
            yield client
    finally:
        app.dependency_overrides.pop(get_db, None)
        engine.dispose()
