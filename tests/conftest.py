"""
Shared pytest fixtures for the string analyzer tests.

Every test gets its own store file under tmp_path, so nothing is written
to the working directory.
"""

import pytest
from fastapi.testclient import TestClient

from string_analyzer import config, database
from string_analyzer.main import app


@pytest.fixture
def store_path(tmp_path):
    return str(tmp_path / "data" / "strings.json")


@pytest.fixture
def store(store_path):
    """A freshly loaded, empty store."""
    s = database.JsonFileStore(store_path)
    s.load()
    return s


@pytest.fixture
def client(store_path, monkeypatch):
    """TestClient whose startup loads a store in tmp_path."""
    monkeypatch.setattr(config, "DATABASE_FILE", store_path)
    monkeypatch.setattr(database, "_store", None)
    with TestClient(app) as c:
        yield c
