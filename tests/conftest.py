"""
Shared fixtures: a seeded in-memory database per test and an API client
bound to it.
"""

import pytest
from fastapi.testclient import TestClient

from movies_api.api.dependencies import get_db
from movies_api.api.main import app
from movies_api.database.connection import DatabaseManager


@pytest.fixture
def empty_db_manager():
    """In-memory database with tables but no rows."""
    manager = DatabaseManager(db_path=":memory:")
    manager.create_tables()
    yield manager
    manager.close()


@pytest.fixture
def db_manager(empty_db_manager):
    """In-memory database loaded with the fixture catalog."""
    empty_db_manager.seed()
    return empty_db_manager


@pytest.fixture
def session(db_manager):
    """Session on the seeded database."""
    session = db_manager.get_session()
    yield session
    session.close()


def _client_for(manager):
    def override_get_db():
        with manager.session_scope() as s:
            yield s

    app.dependency_overrides[get_db] = override_get_db
    return TestClient(app)


@pytest.fixture
def client(db_manager):
    """API client backed by the seeded database (lifespan not run)."""
    yield _client_for(db_manager)
    app.dependency_overrides.clear()


@pytest.fixture
def empty_client(empty_db_manager):
    """API client backed by an empty database."""
    yield _client_for(empty_db_manager)
    app.dependency_overrides.clear()
