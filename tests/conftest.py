"""Shared fixtures for HealthFinder tests."""

import pytest
from fastapi.testclient import TestClient

from healthfinder.data.store import MemoryStore
from healthfinder.main import create_app
from healthfinder.tools.catalog_search import CatalogSearchTool


@pytest.fixture
def store():
    return MemoryStore()


@pytest.fixture
def catalog_app(store):
    return create_app(store=store, lookup_tool=CatalogSearchTool())


@pytest.fixture
def api(catalog_app):
    """HTTP client for an app backed by the local catalog."""
    return TestClient(catalog_app)
