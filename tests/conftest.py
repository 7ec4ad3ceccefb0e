"""Pytest fixtures for the storefront service."""

import pytest
from fastapi.testclient import TestClient

from storefront.catalog import PRODUCTS, Catalog, get_catalog
from storefront.main import app


@pytest.fixture
def catalog():
    return Catalog(PRODUCTS)


@pytest.fixture
def legacy_catalog():
    return Catalog(PRODUCTS, legacy=True)


@pytest.fixture
def client(catalog):
    app.dependency_overrides[get_catalog] = lambda: catalog
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def legacy_client(legacy_catalog):
    app.dependency_overrides[get_catalog] = lambda: legacy_catalog
    yield TestClient(app)
    app.dependency_overrides.clear()
