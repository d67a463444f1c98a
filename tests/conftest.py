"""Pytest configuration and shared fixtures."""

import pytest
from fastapi.testclient import TestClient

from pocketlaw.api.deps import get_current_principal
from pocketlaw.api.main import app
from pocketlaw.core.session import Principal


@pytest.fixture
def principal_factory():
    """Build principals with sensible defaults."""
    counter = {"n": 0}

    def _make(role="client", **overrides):
        counter["n"] += 1
        n = counter["n"]
        data = {
            "id": f"user-{n}",
            "name": f"Test User {n}",
            "email": f"user{n}@example.com",
            "role": role,
        }
        data.update(overrides)
        return Principal(**data)

    return _make


@pytest.fixture
def client():
    """Test client for the API app with no signed-in principal."""
    app.dependency_overrides.clear()
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def sign_in_as(principal_factory):
    """Make the API see a principal with the given role."""
    def _sign_in(role):
        principal = principal_factory(role=role)
        app.dependency_overrides[get_current_principal] = lambda: principal
        return principal

    yield _sign_in
    app.dependency_overrides.clear()
