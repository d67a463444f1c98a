"""Navigation API endpoint."""

from fastapi import APIRouter, Depends, Query

from pocketlaw.api.deps import get_permissions
from pocketlaw.api.schemas.permissions import NavigationResponse
from pocketlaw.core.rbac import NAVIGATION_ITEMS, PermissionChecker, filter_navigation
from pocketlaw.core.rbac.navigation import filter_navigation_by_route

router = APIRouter(prefix="/navigation", tags=["navigation"])


@router.get("", response_model=NavigationResponse)
async def get_navigation(
    mode: str = Query("role", pattern="^(role|route)$", description="Visibility rule"),
    checker: PermissionChecker = Depends(get_permissions),
):
    """Get the menu visible to the current principal."""
    if mode == "route":
        items = filter_navigation_by_route(NAVIGATION_ITEMS, checker)
    else:
        items = filter_navigation(NAVIGATION_ITEMS, checker)

    return NavigationResponse(role=checker.role, items=[item.to_dict() for item in items])
