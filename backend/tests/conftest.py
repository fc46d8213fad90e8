"""
Central pytest configuration for the beer API tests.

This file provides common fixtures, test markers, and environment setup
for both unit and integration tests.
"""

import os

import pytest

# Test environment (set early so import-time settings use it)
TEST_DATABASE_URL = "sqlite:///:memory:"  # In-memory SQLite for fast tests
os.environ["DATABASE_URL"] = TEST_DATABASE_URL
os.environ["TESTING"] = "true"
os.environ["LOG_TO_FILE"] = "0"  # Never write log files from tests
os.environ["METRICS_ENABLED"] = "false"
os.environ.pop("SENTRY_DSN", None)

from beer_api.domain.entities import Beer  # noqa: E402
from beer_api.main import create_app  # noqa: E402
from tests.factories.service_factories import InMemoryBeerService  # noqa: E402


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "unit: mark test as a unit test")
    config.addinivalue_line("markers", "integration: mark test as an integration test")
    config.addinivalue_line("markers", "controllers: mark test as controller-related")
    config.addinivalue_line("markers", "services: mark test as service layer test")
    config.addinivalue_line("markers", "repositories: mark test as repository test")


def pytest_collection_modifyitems(config, items):
    """Add markers based on test file location."""
    for item in items:
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
        if "integration" in str(item.fspath):
            item.add_marker(pytest.mark.integration)


# =====================================================
# DOMAIN FIXTURES
# =====================================================


@pytest.fixture
def sample_beers():
    """Two valid persisted beers."""
    return [
        Beer(id=1, name="Skol", type=2, style=12),
        Beer(id=2, name="Old", type=1, style=1),
    ]


# =====================================================
# FLASK APPLICATION FIXTURES
# =====================================================


@pytest.fixture
def fake_service(sample_beers):
    """In-memory use-case double seeded with sample_beers."""
    return InMemoryBeerService(sample_beers)


@pytest.fixture
def app(fake_service):
    """Flask app wired to the in-memory service."""
    application = create_app(service=fake_service, config={"TESTING": True})
    yield application


@pytest.fixture
def client(app):
    with app.test_client() as test_client:
        yield test_client
