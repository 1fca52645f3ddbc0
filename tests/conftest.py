"""Pytest configuration and fixtures."""

import asyncio
import tempfile
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from forge_log.config import Settings
from forge_log.db import MemoryStorage, SqliteStorage, init_db
from forge_log.web import create_app


@pytest.fixture
def temp_db_path():
    """Create a temporary database path."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir) / "test.db"


@pytest.fixture
def memory_storage():
    return MemoryStorage()


@pytest.fixture
def sqlite_storage(temp_db_path):
    asyncio.run(init_db(temp_db_path))
    return SqliteStorage(temp_db_path)


@pytest.fixture(params=["memory", "sqlite"])
def storage(request):
    """Each storage backend in turn, so contract tests cover both."""
    return request.getfixturevalue(f"{request.param}_storage")


@pytest.fixture
def client(memory_storage):
    """API client over a fresh in-memory store, without demo data."""
    app = create_app(
        storage=memory_storage,
        settings=Settings(storage="memory", seed=False),
    )
    return TestClient(app)
