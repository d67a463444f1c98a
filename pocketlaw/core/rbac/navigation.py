"""Role-based navigation for Pocketlaw.

Filters the master menu down to what the bound role may see. Order is
preserved. Children are evaluated on their own rules, so a visible parent
can still hide some of its children.
"""

from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Tuple

from .checker import PermissionChecker
from .permissions import Action, Resource, RouteRule
from .roles import RoleName

ALL_ROLES = frozenset(RoleName)
STAFF_ROLES = frozenset([RoleName.ADMIN, RoleName.TEAM])
ADMIN_ONLY = frozenset([RoleName.ADMIN])


@dataclass(frozen=True)
class NavItem:
    """A menu entry.

    ``roles`` of None means every role; ``requires`` adds a finer
    (resource, action) check on top of the role list.
    """

    label: str
    path: Optional[str] = None
    roles: Optional[frozenset] = None
    requires: Optional[RouteRule] = None
    icon: Optional[str] = None
    children: Tuple["NavItem", ...] = field(default_factory=tuple)

    def is_visible(self, checker: PermissionChecker) -> bool:
        if self.roles is not None and checker.role not in {r.value for r in self.roles}:
            return False
        if self.requires is not None:
            return checker.has_permission(self.requires.resource, self.requires.action)
        return True

    def to_dict(self) -> dict:
        return {
            "label": self.label,
            "path": self.path,
            "icon": self.icon,
            "children": [child.to_dict() for child in self.children],
        }


NAVIGATION_ITEMS: Tuple[NavItem, ...] = (
    NavItem("Dashboard", "/", roles=ALL_ROLES, icon="layout-dashboard"),
    NavItem(
        "Documents", "/repository", roles=ALL_ROLES, icon="folder-open",
        children=(
            NavItem("Folders", "/folders", requires=RouteRule(Resource.FOLDERS, Action.READ)),
            NavItem("All documents", "/all-documents", requires=RouteRule(Resource.DOCUMENTS, Action.READ)),
            NavItem("Template drafts", "/template-drafts", requires=RouteRule(Resource.TEMPLATES, Action.CREATE)),
        ),
    ),
    NavItem("Tasks", "/tasks", roles=ALL_ROLES, icon="check-square"),
    NavItem("Templates", "/templates", roles=STAFF_ROLES, icon="file-type"),
    NavItem("Analytics", "/insights", roles=STAFF_ROLES, icon="bar-chart-3"),
    NavItem("Team Management", "/user-management", roles=ADMIN_ONLY, icon="users"),
    NavItem("Security", "/security", roles=ADMIN_ONLY, icon="shield"),
    NavItem("Billing", "/billing", roles=ADMIN_ONLY, icon="credit-card"),
    NavItem("Audit Logs", "/audit-logs", roles=ADMIN_ONLY, icon="activity"),
    NavItem("Knowledge Hub", "/knowledge", roles=ALL_ROLES, icon="book-open"),
    NavItem(
        "Settings", "/settings", roles=ALL_ROLES, icon="settings",
        children=(
            NavItem("Users & teams", "/users", requires=RouteRule(Resource.USERS, Action.READ)),
            NavItem("Account", "/account"),
        ),
    ),
)


def _with_children(item: NavItem, children: List[NavItem]) -> NavItem:
    if len(children) == len(item.children):
        return item
    return NavItem(
        label=item.label,
        path=item.path,
        roles=item.roles,
        requires=item.requires,
        icon=item.icon,
        children=tuple(children),
    )


def filter_navigation(items: Iterable[NavItem], checker: PermissionChecker) -> List[NavItem]:
    """
    Get the items visible to the checker's role, in input order.

    Args:
        items: Master menu
        checker: Accessor bound to the current principal

    Returns:
        Visible items, each carrying only its visible children
    """
    visible = []
    for item in items:
        if not item.is_visible(checker):
            continue
        children = [child for child in item.children if child.is_visible(checker)]
        visible.append(_with_children(item, children))
    return visible


def filter_navigation_by_route(items: Iterable[NavItem], checker: PermissionChecker) -> List[NavItem]:
    """Variant of filter_navigation deciding visibility from the route table alone."""
    visible = []
    for item in items:
        if item.path is not None and not checker.can_access_route(item.path):
            continue
        children = [
            child for child in item.children
            if child.path is None or checker.can_access_route(child.path)
        ]
        visible.append(_with_children(item, children))
    return visible


ROLE_FEATURE_SUMMARIES = {
    RoleName.ADMIN.value: (
        "Full system administration",
        "User and team management",
        "Billing and subscription management",
        "Advanced analytics and reporting",
        "Security and audit controls",
        "API and integration management",
        "Workflow automation",
        "Data export and backup",
    ),
    RoleName.TEAM.value: (
        "Document creation and management",
        "Task assignment and tracking",
        "Template creation and usage",
        "Team collaboration tools",
        "Basic analytics and reporting",
        "File sharing and organization",
        "Workflow participation",
    ),
    RoleName.CLIENT.value: (
        "View assigned documents",
        "Download approved files",
        "Update task status",
        "Use available templates",
        "Basic collaboration features",
        "Track project status",
    ),
}


def get_role_based_features(role) -> List[str]:
    """Get the human-readable capability summary for a role."""
    if isinstance(role, RoleName):
        role = role.value
    if not isinstance(role, str):
        return []
    return list(ROLE_FEATURE_SUMMARIES.get(role, ()))
