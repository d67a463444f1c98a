"""Tests for the permission vocabulary and route table."""

import pytest

from pocketlaw.core.rbac.permissions import (
    Action,
    Feature,
    Permission,
    Resource,
    RouteRule,
    ROUTE_PERMISSIONS,
    get_route_rule,
    parse_action,
    parse_feature,
    parse_resource,
    permission_string,
)


class TestVocabulary:
    """Test the closed resource/action/feature sets."""

    def test_resources(self):
        """Test the resource vocabulary."""
        assert {r.value for r in Resource} == {
            "users", "documents", "folders", "tasks", "templates",
            "settings", "analytics", "billing", "integrations",
        }

    def test_parse_known_values(self):
        """Test parsing known names."""
        assert parse_resource("documents") is Resource.DOCUMENTS
        assert parse_action("manage_roles") is Action.MANAGE_ROLES
        assert parse_feature("audit_logs") is Feature.AUDIT_LOGS

    def test_parse_passes_members_through(self):
        """Test members parse to themselves."""
        assert parse_resource(Resource.BILLING) is Resource.BILLING
        assert parse_action(Action.USE) is Action.USE

    @pytest.mark.parametrize("value", ["Documents", "DOCUMENTS", " documents", "", "docs"])
    def test_parse_is_exact_and_case_sensitive(self, value):
        """Test parsing is exact and case-sensitive."""
        assert parse_resource(value) is None

    @pytest.mark.parametrize("value", [None, 3, ["read"], {"read": 1}, b"read"])
    def test_parse_non_strings(self, value):
        """Test non-strings parse to None."""
        assert parse_action(value) is None
        assert parse_resource(value) is None
        assert parse_feature(value) is None

    def test_parse_rejects_member_of_other_enum(self):
        """Test a member of another vocabulary is rejected."""
        assert parse_resource(Action.READ) is None


class TestPermission:
    """Test the Permission value type."""

    def test_allows(self):
        """Test Permission.allows."""
        perm = Permission.of(Resource.DOCUMENTS, [Action.READ, Action.DOWNLOAD])
        assert perm.allows(Action.READ)
        assert perm.allows("download")
        assert not perm.allows("delete")
        assert not perm.allows("READ")
        assert not perm.allows(None)

    def test_string_forms(self):
        """Test resource:action string forms."""
        perm = Permission.of(Resource.TASKS, [Action.UPDATE, Action.READ])
        assert str(perm) == "tasks:read,update"
        assert perm.as_strings() == ["tasks:read", "tasks:update"]
        assert permission_string(Resource.USERS, Action.INVITE) == "users:invite"

    def test_from_string(self):
        """Test parsing a permission string."""
        perm = Permission.from_string("templates:publish")
        assert perm.resource == Resource.TEMPLATES
        assert perm.actions == frozenset([Action.PUBLISH])

    @pytest.mark.parametrize("text", ["invalid", "too:many:parts", ":read", "documents:"])
    def test_from_string_malformed(self, text):
        """Test malformed permission strings are rejected."""
        with pytest.raises(ValueError):
            Permission.from_string(text)

    def test_from_string_unknown(self):
        """Test unknown names in permission strings are rejected."""
        with pytest.raises(ValueError):
            Permission.from_string("documents:fly")


class TestRouteTable:
    """Test the static route-to-permission table."""

    def test_table_contents(self):
        """Test the route permission table."""
        assert dict(ROUTE_PERMISSIONS) == {
            "/users": RouteRule(Resource.USERS, Action.READ),
            "/user-management": RouteRule(Resource.USERS, Action.MANAGE_ROLES),
            "/settings": RouteRule(Resource.SETTINGS, Action.READ),
            "/analytics": RouteRule(Resource.ANALYTICS, Action.READ),
            "/insights": RouteRule(Resource.ANALYTICS, Action.READ),
            "/billing": RouteRule(Resource.BILLING, Action.READ),
        }

    def test_table_is_read_only(self):
        """Test the route table cannot be modified."""
        with pytest.raises(TypeError):
            ROUTE_PERMISSIONS["/tasks"] = RouteRule(Resource.TASKS, Action.READ)

    def test_rule_lookup(self):
        """Test route rule lookup."""
        assert str(get_route_rule("/billing")) == "billing:read"
        assert get_route_rule("/tasks") is None
        assert get_route_rule(None) is None
        assert get_route_rule(["/billing"]) is None
