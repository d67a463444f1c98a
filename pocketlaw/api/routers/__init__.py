"""API routers for Pocketlaw."""

from . import permissions
from . import navigation
from . import roles

__all__ = [
    "permissions",
    "navigation",
    "roles",
]
