"""Role catalog for Pocketlaw.

Defines the 3 standard roles with their permission and feature sets:
1. Admin - Full system access
2. Team - Internal staff managing documents, tasks and templates
3. Client - External party with access to assigned documents and tasks

The catalog is built once at import and is read-only afterwards.
"""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Dict, FrozenSet, Iterable, Mapping, Optional, Tuple

from .permissions import Action, Feature, Permission, Resource


class RoleName(str, Enum):
    """The closed set of principal tiers."""

    ADMIN = "admin"
    TEAM = "team"
    CLIENT = "client"


# Role bound when no principal is present
DEFAULT_ROLE = RoleName.CLIENT


def parse_role(value) -> Optional[RoleName]:
    """Resolve a raw role string, or None if it is not a known role."""
    if isinstance(value, RoleName):
        return value
    if not isinstance(value, str):
        return None
    try:
        return RoleName(value)
    except ValueError:
        return None


@dataclass(frozen=True)
class RoleDefinition:
    """A role with its permissions and features."""

    name: RoleName
    display_name: str
    description: str
    permissions: Tuple[Permission, ...]
    features: FrozenSet[Feature]

    def permission_for(self, resource) -> Optional[Permission]:
        """Get the permission entry for a resource, if the role has one."""
        for permission in self.permissions:
            if permission.resource == resource:
                return permission
        return None

    def permission_strings(self) -> list[str]:
        """Flatten the permission table to "resource:action" strings."""
        strings = []
        for permission in self.permissions:
            strings.extend(permission.as_strings())
        return strings


def _build_permissions(*grants: Tuple[Resource, Iterable[Action]]) -> Tuple[Permission, ...]:
    """Build permission entries from (Resource, actions) tuples.

    Raises:
        ValueError: If a resource is listed more than once.
    """
    seen = set()
    permissions = []
    for resource, actions in grants:
        if resource in seen:
            raise ValueError(f"Resource listed twice in one role: {resource.value}")
        seen.add(resource)
        permissions.append(Permission.of(resource, actions))
    return tuple(permissions)


# Admin: full access to every resource
ADMIN_PERMISSIONS = _build_permissions(
    (Resource.USERS, [
        Action.CREATE, Action.READ, Action.UPDATE, Action.DELETE,
        Action.INVITE, Action.MANAGE_ROLES,
    ]),
    (Resource.DOCUMENTS, [
        Action.CREATE, Action.READ, Action.UPDATE, Action.DELETE,
        Action.DOWNLOAD, Action.SHARE, Action.APPROVE,
    ]),
    (Resource.FOLDERS, [
        Action.CREATE, Action.READ, Action.UPDATE, Action.DELETE, Action.ORGANIZE,
    ]),
    (Resource.TASKS, [
        Action.CREATE, Action.READ, Action.UPDATE, Action.DELETE,
        Action.ASSIGN, Action.COMPLETE,
    ]),
    (Resource.TEMPLATES, [
        Action.CREATE, Action.READ, Action.UPDATE, Action.DELETE,
        Action.PUBLISH, Action.USE,
    ]),
    (Resource.SETTINGS, [Action.READ, Action.UPDATE, Action.CONFIGURE]),
    (Resource.ANALYTICS, [Action.READ, Action.EXPORT]),
    (Resource.BILLING, [Action.READ, Action.UPDATE, Action.MANAGE]),
    (Resource.INTEGRATIONS, [Action.READ, Action.UPDATE, Action.CONFIGURE]),
)

ADMIN_FEATURES = frozenset([
    Feature.USER_MANAGEMENT,
    Feature.SYSTEM_SETTINGS,
    Feature.BILLING_MANAGEMENT,
    Feature.ANALYTICS_DASHBOARD,
    Feature.AUDIT_LOGS,
    Feature.API_ACCESS,
    Feature.WORKFLOW_AUTOMATION,
    Feature.ADVANCED_REPORTING,
    Feature.BULK_OPERATIONS,
    Feature.DATA_EXPORT,
])

# Team: document and task work, no deletes, no billing or integrations
TEAM_PERMISSIONS = _build_permissions(
    (Resource.USERS, [Action.READ]),
    (Resource.DOCUMENTS, [
        Action.CREATE, Action.READ, Action.UPDATE, Action.DOWNLOAD, Action.SHARE,
    ]),
    (Resource.FOLDERS, [Action.CREATE, Action.READ, Action.UPDATE, Action.ORGANIZE]),
    (Resource.TASKS, [
        Action.CREATE, Action.READ, Action.UPDATE, Action.ASSIGN, Action.COMPLETE,
    ]),
    (Resource.TEMPLATES, [Action.CREATE, Action.READ, Action.UPDATE, Action.USE]),
    (Resource.SETTINGS, [Action.READ]),
    (Resource.ANALYTICS, [Action.READ]),
)

TEAM_FEATURES = frozenset([
    Feature.DOCUMENT_MANAGEMENT,
    Feature.TASK_MANAGEMENT,
    Feature.TEMPLATE_CREATION,
    Feature.COLLABORATION_TOOLS,
    Feature.BASIC_REPORTING,
    Feature.FILE_SHARING,
    Feature.WORKFLOW_PARTICIPATION,
])

# Client: view and download documents, update assigned tasks
CLIENT_PERMISSIONS = _build_permissions(
    (Resource.DOCUMENTS, [Action.READ, Action.DOWNLOAD]),
    (Resource.TASKS, [Action.READ, Action.UPDATE]),
    (Resource.TEMPLATES, [Action.READ, Action.USE]),
)

CLIENT_FEATURES = frozenset([
    Feature.DOCUMENT_VIEWING,
    Feature.DOCUMENT_DOWNLOAD,
    Feature.TASK_UPDATES,
    Feature.TEMPLATE_USAGE,
    Feature.BASIC_COLLABORATION,
    Feature.STATUS_TRACKING,
])


ROLES: Mapping[str, RoleDefinition] = MappingProxyType({
    RoleName.ADMIN.value: RoleDefinition(
        name=RoleName.ADMIN,
        display_name="Administrator",
        description="Full system access with all administrative privileges",
        permissions=ADMIN_PERMISSIONS,
        features=ADMIN_FEATURES,
    ),
    RoleName.TEAM.value: RoleDefinition(
        name=RoleName.TEAM,
        display_name="Team Member",
        description="Internal team member with document and task management access",
        permissions=TEAM_PERMISSIONS,
        features=TEAM_FEATURES,
    ),
    RoleName.CLIENT.value: RoleDefinition(
        name=RoleName.CLIENT,
        display_name="Client",
        description="External client with limited access to assigned documents and tasks",
        permissions=CLIENT_PERMISSIONS,
        features=CLIENT_FEATURES,
    ),
})


def get_role(name) -> Optional[RoleDefinition]:
    """Get a role definition by name.

    Unknown names yield None, which callers treat as "no permissions".
    """
    role = parse_role(name)
    if role is None:
        return None
    return ROLES[role.value]


def get_all_roles() -> Dict[str, RoleDefinition]:
    """Get all role definitions."""
    return dict(ROLES)
