"""
Shared test fixtures.

Provides: in-memory SQLite engine/session, FastAPI TestClient wired to it,
Flask test client for the dashboard.
"""

import os

# Keep the module-level engine off the on-disk servers.db
os.environ.setdefault("HUB_DB_URL", "sqlite://")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from hub.database import configure_sqlite, get_db, init_db


@pytest.fixture
def db_engine():
    engine = configure_sqlite(create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    ))
    init_db(bind=engine, seed=False)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(db_engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=db_engine)


@pytest.fixture
def db_session(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def api_client(session_factory):
    from hub.service import app

    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def gui_client():
    from dashboard.service import app

    app.config["TESTING"] = True
    with app.test_client() as client:
        yield client
