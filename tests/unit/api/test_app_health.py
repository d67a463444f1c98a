"""Tests for health and root endpoints."""

from fastapi.testclient import TestClient


class TestHealthEndpoints:
    """Test health check endpoints."""

    def test_basic_health_check(self, client: TestClient):
        """Test /health returns 200."""
        response = client.get("/health")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert "version" in data

    def test_root(self, client: TestClient):
        """Test the root endpoint reports name and version."""
        data = client.get("/").json()
        assert data["name"] == "Pocketlaw"
        assert data["version"] == "0.1.0"

    def test_health_is_not_guarded(self, client: TestClient, sign_in_as):
        """Test health is reachable for every role."""
        for role in ("admin", "team", "client", "nonexistent-role"):
            sign_in_as(role)
            assert client.get("/health").status_code == 200
