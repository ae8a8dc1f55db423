"""
Shared pytest fixtures.

The TestClient is session-scoped so hypothesis-driven tests can reuse it;
the handlers keep no state between requests.
"""

import pytest
from fastapi.testclient import TestClient

from api.src.config import clear_settings_cache
from api.src.main import app


@pytest.fixture(scope="session")
def client():
    """TestClient bound to the application, with lifespan events run."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture(scope="session")
def openapi_document(client):
    """The OpenAPI document as served over HTTP."""
    response = client.get("/api-docs/openapi.json")
    assert response.status_code == 200
    return response.json()


@pytest.fixture
def clean_settings_cache():
    """Drop cached settings before and after a test that edits the environment."""
    clear_settings_cache()
    yield
    clear_settings_cache()
