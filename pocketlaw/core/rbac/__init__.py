"""RBAC (Role-Based Access Control) module for Pocketlaw.

This module defines the role catalog, the permission vocabulary and the
access control utilities consumed by routes, views and navigation.
"""

from .permissions import (
    Permission,
    Resource,
    Action,
    Feature,
    RouteRule,
    ROUTE_PERMISSIONS,
)
from .roles import RoleName, RoleDefinition, ROLES, DEFAULT_ROLE, get_role
from .checker import (
    PermissionChecker,
    has_permission,
    has_feature,
    can_access_route,
    permissions_for,
)
from .gate import AccessGate, permission_gate
from .navigation import NavItem, NAVIGATION_ITEMS, filter_navigation, get_role_based_features

__all__ = [
    "Permission",
    "Resource",
    "Action",
    "Feature",
    "RouteRule",
    "ROUTE_PERMISSIONS",
    "RoleName",
    "RoleDefinition",
    "ROLES",
    "DEFAULT_ROLE",
    "get_role",
    "PermissionChecker",
    "has_permission",
    "has_feature",
    "can_access_route",
    "permissions_for",
    "AccessGate",
    "permission_gate",
    "NavItem",
    "NAVIGATION_ITEMS",
    "filter_navigation",
    "get_role_based_features",
]
