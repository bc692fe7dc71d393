"""Pytest configuration for integration tests."""

import asyncio

import pytest
from fastapi.testclient import TestClient

from gymflow.config import Settings
from gymflow.data import seed_exercises_from_json
from gymflow.db import init_db
from gymflow.web import create_app


# Mark all tests in this directory as integration tests
def pytest_collection_modifyitems(items):
    """Add integration marker to all tests in this directory."""
    for item in items:
        if "integration_tests" in str(item.fspath):
            item.add_marker(pytest.mark.integration)


@pytest.fixture
def api(tmp_path):
    """A client for an app backed by a freshly initialized, fully seeded database."""
    db_path = tmp_path / "gymflow.db"
    asyncio.run(init_db(db_path))
    asyncio.run(seed_exercises_from_json(db_path))

    settings = Settings(db_path=db_path, data_dir=tmp_path, jwt_secret="integration-secret")
    with TestClient(create_app(settings)) as client:
        yield client
