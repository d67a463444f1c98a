"""Permission query API endpoints.

Lets the front end ask what the current principal may see and do. Unknown
resources, actions, features and routes answer ``allowed: false`` (or true
for unmapped routes) rather than an error.
"""

from fastapi import APIRouter, Depends, Query

from pocketlaw.api.deps import get_permissions
from pocketlaw.api.schemas.permissions import AccessDecision, PrincipalPermissions, RouteDecision
from pocketlaw.core.rbac import PermissionChecker, get_role_based_features
from pocketlaw.core.rbac.permissions import get_route_rule

router = APIRouter(prefix="/permissions", tags=["permissions"])


@router.get("/me", response_model=PrincipalPermissions)
async def my_permissions(checker: PermissionChecker = Depends(get_permissions)):
    """Describe the current principal's role, grants and features."""
    definition = checker.role_definition
    if definition is None:
        return PrincipalPermissions(role=checker.role)

    return PrincipalPermissions(
        role=checker.role,
        display_name=definition.display_name,
        permissions=definition.permission_strings(),
        features=checker.features(),
        capabilities=get_role_based_features(checker.role),
    )


@router.get("/check", response_model=AccessDecision)
async def check_permission(
    resource: str = Query(..., description="Resource identifier"),
    action: str = Query(..., description="Action identifier"),
    checker: PermissionChecker = Depends(get_permissions),
):
    """Check a single (resource, action) grant."""
    return AccessDecision(role=checker.role, allowed=checker.has_permission(resource, action))


@router.get("/features/{feature}", response_model=AccessDecision)
async def check_feature(feature: str, checker: PermissionChecker = Depends(get_permissions)):
    """Check a feature flag."""
    return AccessDecision(role=checker.role, allowed=checker.has_feature(feature))


@router.get("/routes", response_model=RouteDecision)
async def check_route(
    path: str = Query(..., description="Front-end route, e.g. /billing"),
    checker: PermissionChecker = Depends(get_permissions),
):
    """Check whether a front-end route may be opened."""
    rule = get_route_rule(path)
    return RouteDecision(
        role=checker.role,
        path=path,
        allowed=checker.can_access_route(path),
        rule=str(rule) if rule else None,
    )
