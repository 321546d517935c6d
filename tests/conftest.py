# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# Sets environment variables before the application is imported and
# provides store and client fixtures for both storage back ends.
# =============================================================================

import os

# app.core.config reads the environment at import time
os.environ.setdefault("USER_STORE", "memory")
os.environ.setdefault("SEED_USERS", "false")
os.environ.setdefault("LOG_LEVEL", "WARNING")
os.environ.setdefault("API_PREFIX", "")

import pytest
from fastapi.testclient import TestClient

from users_api.app.main import create_app
from users_api.app.stores import MemoryUserStore, SqliteUserStore


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def memory_store():
    return MemoryUserStore()


@pytest.fixture
def sqlite_store(tmp_path):
    return SqliteUserStore(str(tmp_path / "users.db"))


@pytest.fixture(params=["memory", "sqlite"])
def store(request, tmp_path):
    """Each test using this fixture runs once per back end."""
    if request.param == "memory":
        return MemoryUserStore()
    return SqliteUserStore(str(tmp_path / "users.db"))


@pytest.fixture
def seeded_store(store):
    store.seed()
    return store


@pytest.fixture
def client(store):
    return TestClient(create_app(store))


@pytest.fixture
def seeded_client(seeded_store):
    return TestClient(create_app(seeded_store))


@pytest.fixture
def neo():
    return {"login": "Neo", "age": 30, "password": "aB1"}
