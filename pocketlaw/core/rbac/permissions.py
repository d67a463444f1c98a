"""Permission vocabulary for Pocketlaw access control.

Defines the closed sets of resources, actions and features, the permission
and route-rule value types, and the static route table.

Permission string format: "resource:action"
Examples:
  - documents:read
  - users:manage_roles
  - billing:manage
"""

from enum import Enum
from types import MappingProxyType
from typing import FrozenSet, Iterable, Mapping, NamedTuple, Optional, Type, TypeVar


class Resource(str, Enum):
    """Domain object classes subject to action-level checks."""

    # People and access
    USERS = "users"

    # Document repository and work tracking
    DOCUMENTS = "documents"
    FOLDERS = "folders"
    TASKS = "tasks"
    TEMPLATES = "templates"

    # Administration
    SETTINGS = "settings"
    ANALYTICS = "analytics"
    BILLING = "billing"
    INTEGRATIONS = "integrations"


class Action(str, Enum):
    """Operations that can be performed on resources."""

    # Standard CRUD actions
    CREATE = "create"
    READ = "read"
    UPDATE = "update"
    DELETE = "delete"

    # Specialized actions
    INVITE = "invite"
    MANAGE_ROLES = "manage_roles"
    DOWNLOAD = "download"
    SHARE = "share"
    APPROVE = "approve"
    ORGANIZE = "organize"
    ASSIGN = "assign"
    COMPLETE = "complete"
    PUBLISH = "publish"
    USE = "use"
    CONFIGURE = "configure"
    EXPORT = "export"
    MANAGE = "manage"


class Feature(str, Enum):
    """Coarse-grained capability flags granted wholesale to a role."""

    # Administrator
    USER_MANAGEMENT = "user_management"
    SYSTEM_SETTINGS = "system_settings"
    BILLING_MANAGEMENT = "billing_management"
    ANALYTICS_DASHBOARD = "analytics_dashboard"
    AUDIT_LOGS = "audit_logs"
    API_ACCESS = "api_access"
    WORKFLOW_AUTOMATION = "workflow_automation"
    ADVANCED_REPORTING = "advanced_reporting"
    BULK_OPERATIONS = "bulk_operations"
    DATA_EXPORT = "data_export"

    # Team member
    DOCUMENT_MANAGEMENT = "document_management"
    TASK_MANAGEMENT = "task_management"
    TEMPLATE_CREATION = "template_creation"
    COLLABORATION_TOOLS = "collaboration_tools"
    BASIC_REPORTING = "basic_reporting"
    FILE_SHARING = "file_sharing"
    WORKFLOW_PARTICIPATION = "workflow_participation"

    # Client
    DOCUMENT_VIEWING = "document_viewing"
    DOCUMENT_DOWNLOAD = "document_download"
    TASK_UPDATES = "task_updates"
    TEMPLATE_USAGE = "template_usage"
    BASIC_COLLABORATION = "basic_collaboration"
    STATUS_TRACKING = "status_tracking"


E = TypeVar("E", bound=Enum)


def _lookup(enum_cls: Type[E], value) -> Optional[E]:
    """Exact, case-sensitive lookup of an enum member by value.

    Returns None for anything that is not a known value, including
    non-string and unhashable input.
    """
    if isinstance(value, enum_cls):
        return value
    if not isinstance(value, str):
        return None
    try:
        return enum_cls(value)
    except ValueError:
        return None


def parse_resource(value) -> Optional[Resource]:
    """Resolve a raw resource string, or None if it is not in the vocabulary."""
    return _lookup(Resource, value)


def parse_action(value) -> Optional[Action]:
    """Resolve a raw action string, or None if it is not in the vocabulary."""
    return _lookup(Action, value)


def parse_feature(value) -> Optional[Feature]:
    """Resolve a raw feature string, or None if it is not in the vocabulary."""
    return _lookup(Feature, value)


def permission_string(resource: Resource, action: Action) -> str:
    """Render a single grant as "resource:action"."""
    return f"{resource.value}:{action.value}"


class Permission(NamedTuple):
    """A resource paired with every action a role may perform on it."""

    resource: Resource
    actions: FrozenSet[Action]

    def __str__(self) -> str:
        actions = ",".join(sorted(a.value for a in self.actions))
        return f"{self.resource.value}:{actions}"

    def allows(self, action) -> bool:
        """Check whether an action is granted on this resource."""
        parsed = parse_action(action)
        return parsed is not None and parsed in self.actions

    def as_strings(self) -> list[str]:
        """Expand to sorted "resource:action" strings."""
        return sorted(permission_string(self.resource, a) for a in self.actions)

    @classmethod
    def of(cls, resource: Resource, actions: Iterable[Action]) -> "Permission":
        return cls(resource, frozenset(actions))

    @classmethod
    def from_string(cls, perm_str: str) -> "Permission":
        """Parse a permission string like 'documents:read'.

        Raises:
            ValueError: If the string is malformed or names an unknown
                resource or action.
        """
        parts = perm_str.split(":")
        if len(parts) != 2 or not all(parts):
            raise ValueError(f"Invalid permission format: {perm_str}")
        resource = parse_resource(parts[0])
        action = parse_action(parts[1])
        if resource is None or action is None:
            raise ValueError(f"Unknown permission: {perm_str}")
        return cls(resource, frozenset([action]))


class RouteRule(NamedTuple):
    """The single (resource, action) grant a navigable path requires."""

    resource: Resource
    action: Action

    def __str__(self) -> str:
        return permission_string(self.resource, self.action)


# Paths absent from this table are open to every role.
ROUTE_PERMISSIONS: Mapping[str, RouteRule] = MappingProxyType({
    "/users": RouteRule(Resource.USERS, Action.READ),
    "/user-management": RouteRule(Resource.USERS, Action.MANAGE_ROLES),
    "/settings": RouteRule(Resource.SETTINGS, Action.READ),
    "/analytics": RouteRule(Resource.ANALYTICS, Action.READ),
    "/insights": RouteRule(Resource.ANALYTICS, Action.READ),
    "/billing": RouteRule(Resource.BILLING, Action.READ),
})


def get_route_rule(route) -> Optional[RouteRule]:
    """Get the rule guarding a route, or None for unmapped routes."""
    if not isinstance(route, str):
        return None
    return ROUTE_PERMISSIONS.get(route)
