"""Tests for the permission query and navigation endpoints."""

from fastapi.testclient import TestClient


class TestMyPermissions:
    """Test /api/permissions/me."""

    def test_anonymous_is_client(self, client: TestClient):
        """Test an anonymous request gets client permissions."""
        response = client.get("/api/permissions/me")
        assert response.status_code == 200
        data = response.json()
        assert data["role"] == "client"
        assert data["display_name"] == "Client"
        assert "documents:read" in data["permissions"]
        assert "billing:read" not in data["permissions"]
        assert "document_viewing" in data["features"]
        assert data["capabilities"][0] == "View assigned documents"

    def test_admin(self, client: TestClient, sign_in_as):
        """Test an admin gets the full permission set."""
        sign_in_as("admin")
        data = client.get("/api/permissions/me").json()
        assert data["role"] == "admin"
        assert "users:manage_roles" in data["permissions"]
        assert len(data["features"]) == 10

    def test_unknown_role_has_nothing(self, client: TestClient, sign_in_as):
        """Test an unknown role is reported with no grants."""
        sign_in_as("viewer")
        data = client.get("/api/permissions/me").json()
        assert data == {
            "role": "viewer",
            "display_name": None,
            "permissions": [],
            "features": [],
            "capabilities": [],
        }


class TestChecks:
    """Test single-question endpoints."""

    def test_permission_check(self, client: TestClient, sign_in_as):
        """Test single permission checks."""
        sign_in_as("team")
        allowed = client.get("/api/permissions/check", params={"resource": "documents", "action": "update"})
        denied = client.get("/api/permissions/check", params={"resource": "documents", "action": "delete"})
        assert allowed.json() == {"role": "team", "allowed": True}
        assert denied.json() == {"role": "team", "allowed": False}

    def test_unknown_values_deny_instead_of_error(self, client: TestClient):
        """Test unknown resource and action names are denied."""
        response = client.get("/api/permissions/check", params={"resource": "spaceships", "action": "fly"})
        assert response.status_code == 200
        assert response.json()["allowed"] is False

    def test_missing_query_parameters(self, client: TestClient):
        """Test missing query parameters are a validation error."""
        response = client.get("/api/permissions/check", params={"resource": "documents"})
        assert response.status_code == 422

    def test_feature_check(self, client: TestClient):
        """Test feature checks, including unknown features."""
        assert client.get("/api/permissions/features/document_viewing").json()["allowed"] is True
        assert client.get("/api/permissions/features/billing_management").json()["allowed"] is False
        assert client.get("/api/permissions/features/no_such_feature").json()["allowed"] is False

    def test_route_check(self, client: TestClient, sign_in_as):
        """Test route checks report the rule that applies."""
        data = client.get("/api/permissions/routes", params={"path": "/user-management"}).json()
        assert data == {"role": "client", "allowed": False, "path": "/user-management", "rule": "users:manage_roles"}

        sign_in_as("admin")
        assert client.get("/api/permissions/routes", params={"path": "/user-management"}).json()["allowed"] is True

    def test_unmapped_route_is_open(self, client: TestClient):
        """Test unmapped routes are allowed with no rule."""
        data = client.get("/api/permissions/routes", params={"path": "/knowledge"}).json()
        assert data["allowed"] is True
        assert data["rule"] is None


class TestNavigation:
    """Test /api/navigation."""

    def test_client_menu(self, client: TestClient):
        """Test the client navigation menu."""
        data = client.get("/api/navigation").json()
        assert data["role"] == "client"
        assert [item["label"] for item in data["items"]] == [
            "Dashboard", "Documents", "Tasks", "Knowledge Hub", "Settings",
        ]
        documents = data["items"][1]
        assert [child["label"] for child in documents["children"]] == ["All documents"]

    def test_admin_menu(self, client: TestClient, sign_in_as):
        """Test the admin menu includes admin-only items."""
        sign_in_as("admin")
        labels = [item["label"] for item in client.get("/api/navigation").json()["items"]]
        assert "Team Management" in labels
        assert "Billing" in labels

    def test_route_mode(self, client: TestClient):
        """Test route-based navigation filtering."""
        labels = [item["label"] for item in client.get("/api/navigation", params={"mode": "route"}).json()["items"]]
        assert "Settings" not in labels
        assert "Security" in labels

    def test_invalid_mode(self, client: TestClient):
        """Test an unknown navigation mode is rejected."""
        assert client.get("/api/navigation", params={"mode": "sideways"}).status_code == 422
