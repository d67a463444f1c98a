"""Declarative access gates.

An AccessGate evaluates one predicate against a PermissionChecker and picks
between a granted branch and a fallback branch. Branches may be plain values
or zero-argument callables, so the same gate serves view code, route guards
and background jobs.

Precedence when several discriminants are given:
    resource + action  >  feature  >  role

A gate with no discriminant grants access.
"""

from dataclasses import dataclass
from functools import wraps
from typing import Any, Callable, Optional, Union

from .checker import PermissionChecker
from .permissions import Action, Feature, Resource
from .roles import RoleName


def _resolve(branch: Any) -> Any:
    return branch() if callable(branch) else branch


@dataclass(frozen=True)
class AccessGate:
    """Guard selecting content by permission, feature or role."""

    resource: Optional[Union[Resource, str]] = None
    action: Optional[Union[Action, str]] = None
    feature: Optional[Union[Feature, str]] = None
    role: Optional[Union[RoleName, str]] = None

    def allows(self, checker: PermissionChecker) -> bool:
        """Evaluate the gate for the checker's bound role."""
        if self.resource and self.action:
            return checker.has_permission(self.resource, self.action)
        if self.feature:
            return checker.has_feature(self.feature)
        if self.role:
            role = self.role.value if isinstance(self.role, RoleName) else self.role
            return checker.role == role
        return True

    def render(self, checker: PermissionChecker, granted: Any, fallback: Any = None) -> Any:
        """
        Return the granted branch when access is allowed, else the fallback.

        Args:
            checker: Accessor bound to the current principal
            granted: Value, or zero-argument callable producing it
            fallback: Value or callable used on denial (default: None)
        """
        if self.allows(checker):
            return _resolve(granted)
        return _resolve(fallback)


def permission_gate(
    resource: Optional[Union[Resource, str]] = None,
    action: Optional[Union[Action, str]] = None,
    feature: Optional[Union[Feature, str]] = None,
    role: Optional[Union[RoleName, str]] = None,
    fallback: Any = None,
):
    """
    Decorator factory gating a function on the checker passed as its first argument.

    When denied, the wrapped function is not called. A callable fallback is
    called with the same arguments; anything else is returned as is.

    Usage:
        @permission_gate(resource="billing", action="manage")
        def billing_panel(checker, account):
            ...

        @permission_gate(feature="audit_logs", fallback=())
        def audit_entries(checker):
            ...
    """
    gate = AccessGate(resource=resource, action=action, feature=feature, role=role)

    def decorator(func: Callable):
        @wraps(func)
        def wrapper(checker: PermissionChecker, *args, **kwargs):
            if gate.allows(checker):
                return func(checker, *args, **kwargs)
            if callable(fallback):
                return fallback(checker, *args, **kwargs)
            return fallback

        wrapper.gate = gate
        return wrapper

    return decorator
