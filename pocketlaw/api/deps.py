from typing import Any, Optional, Union

from fastapi import Depends, HTTPException, Request, status

from pocketlaw.common.logger import get_logger
from pocketlaw.core.rbac import Action, Feature, PermissionChecker, Resource, RoleName, permissions_for
from pocketlaw.core.rbac.gate import AccessGate

access_logger = get_logger("access")


def get_current_principal(request: Request) -> Optional[Any]:
    """Principal placed on the request by the authentication layer, if any."""
    return getattr(request.state, "user", None)


def get_permissions(principal: Optional[Any] = Depends(get_current_principal)) -> PermissionChecker:
    """Permission accessor for the current request; no principal binds "client"."""
    return permissions_for(principal)


def _gate_dependency(gate: AccessGate, required: str):
    def _require(checker: PermissionChecker = Depends(get_permissions)) -> PermissionChecker:
        if not gate.allows(checker):
            access_logger.debug(f"Denied {required} for role {checker.role}")
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail=f"Insufficient permissions. Required: {required}",
            )
        return checker

    return _require


def require_permission(resource: Union[Resource, str], action: Union[Action, str]):
    """
    Dependency factory: require a (resource, action) grant.

    Usage:
        @router.get("/billing")
        async def billing(checker: PermissionChecker = Depends(require_permission("billing", "read"))):
            ...
    """
    resource = Resource(resource)
    action = Action(action)
    return _gate_dependency(AccessGate(resource=resource, action=action), f"{resource.value}:{action.value}")


def require_feature(feature: Union[Feature, str]):
    """Dependency factory: require a feature flag."""
    feature = Feature(feature)
    return _gate_dependency(AccessGate(feature=feature), f"feature {feature.value}")


def require_role(role: Union[RoleName, str]):
    """Dependency factory: require the bound role to equal ``role``."""
    role = RoleName(role)
    return _gate_dependency(AccessGate(role=role), f"role {role.value}")


def require_route_access(path: str):
    """Dependency factory: require access to a front-end route per the route table."""
    def _require(checker: PermissionChecker = Depends(get_permissions)) -> PermissionChecker:
        if not checker.can_access_route(path):
            access_logger.debug(f"Denied route {path} for role {checker.role}")
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail=f"Access to {path} is not permitted",
            )
        return checker

    return _require
