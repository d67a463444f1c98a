"""Permission checking for Pocketlaw.

The module functions answer authorization questions for an explicit role.
PermissionChecker binds them to the current principal's role.

None of these raise: unknown roles, resources, actions, features and routes
all resolve to a defined boolean.
"""

from typing import Any, Iterable, List, Optional, Tuple, Union

from .permissions import Action, Feature, Resource, get_route_rule, parse_feature
from .roles import DEFAULT_ROLE, RoleDefinition, RoleName, get_role

RoleLike = Union[RoleName, str, None]


def has_permission(role: RoleLike, resource: Union[Resource, str], action: Union[Action, str]) -> bool:
    """
    Check if a role may perform an action on a resource.

    Args:
        role: Role name or RoleName
        resource: Resource identifier (exact, case-sensitive)
        action: Action identifier (exact, case-sensitive)

    Returns:
        True if the role's entry for the resource lists the action
    """
    definition = get_role(role)
    if definition is None:
        return False

    permission = definition.permission_for(resource)
    return permission.allows(action) if permission else False


def has_feature(role: RoleLike, feature: Union[Feature, str]) -> bool:
    """Check if a role has been granted a feature flag."""
    definition = get_role(role)
    if definition is None:
        return False

    parsed = parse_feature(feature)
    return parsed is not None and parsed in definition.features


def can_access_route(role: RoleLike, route: str) -> bool:
    """
    Check if a role may navigate to a route.

    Routes without a rule in the route table are open to every role.
    """
    rule = get_route_rule(route)
    if rule is None:
        return True

    return has_permission(role, rule.resource, rule.action)


def _bind_role(role: Any) -> str:
    """Normalize the role to bind: missing means client."""
    if isinstance(role, RoleName):
        return role.value
    if not role:
        return DEFAULT_ROLE.value
    return role if isinstance(role, str) else str(role)


class PermissionChecker:
    """Checks what the current principal may do based on their role."""

    def __init__(self, role: RoleLike = None):
        """
        Initialize with the principal's role.

        Args:
            role: Role name from the session; None or empty binds "client".
                Unrecognised names are kept and denied everything.
        """
        self._role = _bind_role(role)

    def __repr__(self) -> str:
        return f"PermissionChecker(role={self._role!r})"

    @property
    def role(self) -> str:
        return self._role

    @property
    def role_definition(self) -> Optional[RoleDefinition]:
        return get_role(self._role)

    def has_permission(self, resource: Union[Resource, str], action: Union[Action, str]) -> bool:
        return has_permission(self._role, resource, action)

    def has_feature(self, feature: Union[Feature, str]) -> bool:
        return has_feature(self._role, feature)

    def can_access_route(self, route: str) -> bool:
        return can_access_route(self._role, route)

    def is_admin(self) -> bool:
        return self._role == RoleName.ADMIN.value

    def is_team(self) -> bool:
        return self._role == RoleName.TEAM.value

    def is_client(self) -> bool:
        return self._role == RoleName.CLIENT.value

    def has_any_permission(self, grants: Iterable[Tuple[Union[Resource, str], Union[Action, str]]]) -> bool:
        """Check if the role has any of the given (resource, action) grants."""
        return any(self.has_permission(r, a) for r, a in grants)

    def has_all_permissions(self, grants: Iterable[Tuple[Union[Resource, str], Union[Action, str]]]) -> bool:
        """Check if the role has all of the given (resource, action) grants."""
        return all(self.has_permission(r, a) for r, a in grants)

    def get_accessible_resources(self, action: Union[Action, str]) -> List[Resource]:
        """Get list of resources the role can perform the action on."""
        accessible = []
        for resource in Resource:
            if self.has_permission(resource, action):
                accessible.append(resource)
        return accessible

    def features(self) -> List[str]:
        """Get the role's feature flags, sorted."""
        definition = self.role_definition
        if definition is None:
            return []
        return sorted(f.value for f in definition.features)


def permissions_for(principal: Any) -> PermissionChecker:
    """
    Build a checker for a principal.

    Args:
        principal: Object with a ``role`` attribute, a mapping with a
            "role" key, or None when nobody is signed in

    Returns:
        PermissionChecker bound to the principal's role
    """
    if principal is None:
        return PermissionChecker()
    if isinstance(principal, dict):
        return PermissionChecker(principal.get("role"))
    return PermissionChecker(getattr(principal, "role", None))
