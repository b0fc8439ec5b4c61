from __future__ import annotations

import os
import sys

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

import importlib

fastapi_app = importlib.import_module("customer_mgmt.main").app
from customer_mgmt.db.base import Base
from customer_mgmt.db.session import build_engine, get_uow, make_session_factory
from customer_mgmt.db.unit_of_work import UnitOfWork

# Ensure all models are registered with SQLAlchemy metadata
import customer_mgmt.models  # noqa: F401


@pytest.fixture(scope="session")
def engine():
    # build_engine turns on foreign_keys and case_sensitive_like for SQLite.
    engine = build_engine("sqlite://", poolclass=StaticPool)
    Base.metadata.create_all(engine)
    return engine


@pytest.fixture(scope="function")
def session_factory(engine):
    Base.metadata.drop_all(engine)
    Base.metadata.create_all(engine)
    return make_session_factory(engine)


@pytest.fixture(scope="function")
def db_session(session_factory):
    db = session_factory()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture(scope="function")
def uow(db_session):
    return UnitOfWork(db_session)


@pytest.fixture(scope="function")
def fresh_uow(session_factory):
    """A second, independent unit of work for reading back committed state."""
    db = session_factory()
    try:
        yield UnitOfWork(db)
    finally:
        db.close()


@pytest.fixture(scope="function")
def client(session_factory):
    def _override_get_uow():
        db = session_factory()
        try:
            yield UnitOfWork(db)
        finally:
            db.close()

    fastapi_app.dependency_overrides[get_uow] = _override_get_uow
    with TestClient(fastapi_app) as test_client:
        yield test_client
    fastapi_app.dependency_overrides.clear()
