"""Session state as seen by access control.

The authentication provider owns sign-in and persistence; it reports the
outcome here. SessionStore keeps the current principal and rebuilds the
PermissionChecker inside every transition, before listeners are told, so no
check after a completed transition can see the previous role.
"""

import logging
import threading
from typing import Callable, List, Optional

from pydantic import BaseModel, ConfigDict

from pocketlaw.core.rbac.checker import PermissionChecker, permissions_for

logger = logging.getLogger(__name__)

SessionListener = Callable[[Optional["Principal"], PermissionChecker], None]


class Principal(BaseModel):
    """The signed-in user, as reported by the authentication provider."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str = ""
    email: str = ""
    role: Optional[str] = None


class SessionStore:
    """Current principal plus the permission accessor derived from it."""

    def __init__(self, principal: Optional[Principal] = None):
        self._lock = threading.Lock()
        self._listeners: List[SessionListener] = []
        self._principal = principal
        self._permissions = permissions_for(principal)

    @property
    def principal(self) -> Optional[Principal]:
        return self._principal

    @property
    def is_authenticated(self) -> bool:
        return self._principal is not None

    @property
    def permissions(self) -> PermissionChecker:
        return self._permissions

    def subscribe(self, listener: SessionListener) -> Callable[[], None]:
        """
        Register a callback run after every transition.

        Returns:
            Callable that removes the listener
        """
        with self._lock:
            self._listeners.append(listener)

        def unsubscribe() -> None:
            with self._lock:
                if listener in self._listeners:
                    self._listeners.remove(listener)

        return unsubscribe

    def sign_in(self, principal: Principal) -> PermissionChecker:
        logger.info(f"Session started for {principal.id} as {principal.role or 'client'}")
        return self._transition(lambda current: principal)

    def sign_out(self) -> PermissionChecker:
        def signed_out(current: Optional[Principal]) -> None:
            if current is not None:
                logger.info(f"Session ended for {current.id}")
            return None

        return self._transition(signed_out)

    def update_profile(self, **changes) -> PermissionChecker:
        """
        Apply profile changes reported by the provider.

        The changes are validated against Principal and applied to whichever
        principal is current when the transition runs.

        Raises:
            RuntimeError: If nobody is signed in
            pydantic.ValidationError: If a changed field has the wrong type
        """
        def updated(current: Optional[Principal]) -> Principal:
            if current is None:
                raise RuntimeError("Cannot update profile without a signed-in principal")
            principal = Principal.model_validate({**current.model_dump(), **changes})
            if principal.role != current.role:
                logger.info(f"Role for {current.id} changed from {current.role} to {principal.role}")
            return principal

        return self._transition(updated)

    def _transition(
        self, derive: Callable[[Optional[Principal]], Optional[Principal]]
    ) -> PermissionChecker:
        # Read, derive and swap under a single hold of the lock
        with self._lock:
            principal = derive(self._principal)
            self._principal = principal
            self._permissions = permissions_for(principal)
            checker = self._permissions
            listeners = list(self._listeners)

        for listener in listeners:
            try:
                listener(principal, checker)
            except Exception:
                logger.exception("Session listener failed")

        return checker
