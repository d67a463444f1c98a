"""Role catalog API endpoints."""

from typing import List

from fastapi import APIRouter, Depends, HTTPException

from pocketlaw.api.deps import require_permission
from pocketlaw.api.schemas.permissions import PermissionEntry, RoleResponse
from pocketlaw.core.rbac import Action, Resource, RoleDefinition, ROLES, get_role

router = APIRouter(prefix="/roles", tags=["roles"])


def _role_response(role: RoleDefinition) -> RoleResponse:
    return RoleResponse(
        name=role.name.value,
        display_name=role.display_name,
        description=role.description,
        permissions=[
            PermissionEntry(
                resource=p.resource.value,
                actions=sorted(a.value for a in p.actions),
            )
            for p in role.permissions
        ],
        features=sorted(f.value for f in role.features),
    )


@router.get(
    "",
    response_model=List[RoleResponse],
    dependencies=[Depends(require_permission(Resource.USERS, Action.READ))],
)
async def list_roles():
    """List every role in the catalog."""
    return [_role_response(role) for role in ROLES.values()]


@router.get(
    "/{name}",
    response_model=RoleResponse,
    dependencies=[Depends(require_permission(Resource.USERS, Action.READ))],
)
async def get_role_detail(name: str):
    """Get a single role by name."""
    role = get_role(name)
    if role is None:
        raise HTTPException(status_code=404, detail="Role not found")
    return _role_response(role)
