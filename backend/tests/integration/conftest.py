"""
Fixtures for tests that run against the real SQLAlchemy stack.

Every test gets freshly created tables on the shared in-memory SQLite
engine configured by the root conftest.
"""

import pytest

from beer_api.db.session import create_tables, drop_tables, get_sessionmaker
from beer_api.main import create_app
from beer_api.repositories.beer_repository import BeerRepository


@pytest.fixture
def clean_db():
    drop_tables()
    create_tables()
    yield
    drop_tables()


@pytest.fixture
def repository(clean_db):
    return BeerRepository(get_sessionmaker())


@pytest.fixture
def sql_app(clean_db):
    """App built without an injected service, wired to the SQL repository."""
    return create_app(config={"TESTING": True})


@pytest.fixture
def sql_client(sql_app):
    with sql_app.test_client() as test_client:
        yield test_client
