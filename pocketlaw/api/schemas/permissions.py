"""Schemas for the access control API."""

from typing import List, Optional
from pydantic import BaseModel, Field


class PermissionEntry(BaseModel):
    """One resource with its granted actions."""
    resource: str
    actions: List[str]


class RoleResponse(BaseModel):
    """A role from the catalog."""
    name: str
    display_name: str
    description: str
    permissions: List[PermissionEntry]
    features: List[str]


class PrincipalPermissions(BaseModel):
    """Everything the current principal may do."""
    role: str
    display_name: Optional[str] = None
    permissions: List[str] = Field(default_factory=list, description="resource:action strings")
    features: List[str] = Field(default_factory=list)
    capabilities: List[str] = Field(default_factory=list, description="Human-readable summary")


class AccessDecision(BaseModel):
    """Outcome of a single permission or feature query."""
    role: str
    allowed: bool


class RouteDecision(AccessDecision):
    """Outcome of a route access query."""
    path: str
    rule: Optional[str] = None


class NavigationItem(BaseModel):
    """A visible menu entry."""
    label: str
    path: Optional[str] = None
    icon: Optional[str] = None
    children: List["NavigationItem"] = Field(default_factory=list)


class NavigationResponse(BaseModel):
    role: str
    items: List[NavigationItem]
