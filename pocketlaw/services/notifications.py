"""Workflow-automation webhook notifications.

Posts document, task, user and template events to the automation webhook.
Delivery is best effort: failures are logged and reported as False, never
raised, so the main flow is not interrupted. Authorization never depends on
anything sent from here.
"""

import logging
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Iterable, Optional

import httpx

from pocketlaw.core.config import Settings, get_settings

logger = logging.getLogger(__name__)


class WebhookEvent(str, Enum):
    """Events forwarded to the automation webhook."""

    DOCUMENT_UPLOADED = "document_uploaded"
    DOCUMENT_STATUS_CHANGED = "document_status_changed"
    DOCUMENT_SHARED = "document_shared"
    TASK_CREATED = "task_created"
    TASK_COMPLETED = "task_completed"
    USER_INVITED = "user_invited"
    USER_ROLE_CHANGED = "user_role_changed"
    TEMPLATE_CREATED = "template_created"
    TEMPLATE_USED = "template_used"
    PROPOSAL_UPLOADED = "proposal_uploaded"


def _utcnow() -> str:
    return datetime.now(timezone.utc).isoformat()


def _field(record: Any, name: str, default: Any = None) -> Any:
    """Read a field from a dict or an object."""
    if isinstance(record, dict):
        return record.get(name, default)
    return getattr(record, name, default)


def _user_block(user: Any) -> Dict[str, Any]:
    return {
        "id": _field(user, "id"),
        "name": _field(user, "name"),
        "email": _field(user, "email"),
        "role": _field(user, "role"),
    }


class WebhookNotifier:
    """
    Sends event notifications to the automation webhook.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize the notifier.

        Args:
            settings: Application settings (defaults to the cached settings)
            transport: Custom httpx transport, used by tests
        """
        self.settings = settings or get_settings()
        self.transport = transport

    @property
    def webhook_url(self) -> str:
        return self.settings.webhook_url

    def build_payload(self, event: WebhookEvent, user: Any, data: Dict[str, Any]) -> Dict[str, Any]:
        return {
            "action": WebhookEvent(event).value,
            "timestamp": _utcnow(),
            "user": _user_block(user),
            "data": data,
        }

    async def notify(self, event: WebhookEvent, user: Any, data: Dict[str, Any]) -> bool:
        """
        Post an event to the webhook. Never raises.

        Returns:
            True if the webhook accepted the event, False if it was
            disabled or anything went wrong building or sending it
        """
        if not self.settings.webhook_enabled:
            logger.debug(f"Webhook disabled, dropping {event}")
            return False

        try:
            payload = self.build_payload(event, user, data)
            await self._deliver(payload)
        except Exception:
            logger.exception(f"Failed to send webhook {event} to {self.webhook_url}")
            return False

        logger.info(f"Webhook sent: {payload['action']}")
        return True

    async def _deliver(self, payload: Dict[str, Any]) -> None:
        async with httpx.AsyncClient(
            timeout=self.settings.webhook_timeout,
            transport=self.transport,
        ) as client:
            response = await client.post(
                self.webhook_url,
                json=payload,
                headers={"Content-Type": "application/json"},
            )
            response.raise_for_status()

    # Document events

    async def document_uploaded(self, user: Any, document: Any) -> bool:
        return await self.notify(WebhookEvent.DOCUMENT_UPLOADED, user, {
            "document": {
                "id": _field(document, "id"),
                "name": _field(document, "name"),
                "type": _field(document, "type"),
                "size": _field(document, "file_size"),
                "folderId": _field(document, "folder_id"),
                "tags": _field(document, "tags", []),
            },
        })

    async def document_status_changed(
        self, user: Any, document: Any, old_status: str, new_status: str
    ) -> bool:
        return await self.notify(WebhookEvent.DOCUMENT_STATUS_CHANGED, user, {
            "document": {
                "id": _field(document, "id"),
                "name": _field(document, "name"),
                "oldStatus": old_status,
                "newStatus": new_status,
            },
        })

    async def document_shared(self, user: Any, document: Any, shared_with: Iterable[str]) -> bool:
        return await self.notify(WebhookEvent.DOCUMENT_SHARED, user, {
            "document": {
                "id": _field(document, "id"),
                "name": _field(document, "name"),
            },
            "sharedWith": list(shared_with),
        })

    async def proposal_uploaded(self, user: Any, proposal: Any) -> bool:
        return await self.notify(WebhookEvent.PROPOSAL_UPLOADED, user, {
            "proposal": {
                "id": _field(proposal, "id"),
                "name": _field(proposal, "name"),
                "type": _field(proposal, "type"),
                "size": _field(proposal, "file_size"),
                "clientId": _field(proposal, "client_id"),
                "projectId": _field(proposal, "project_id"),
                "status": _field(proposal, "status"),
            },
        })

    # Task events

    async def task_created(self, user: Any, task: Any) -> bool:
        return await self.notify(WebhookEvent.TASK_CREATED, user, {
            "task": {
                "id": _field(task, "id"),
                "title": _field(task, "title"),
                "priority": _field(task, "priority"),
                "assignedTo": _field(task, "assigned_to"),
                "dueDate": _field(task, "due_date"),
            },
        })

    async def task_completed(self, user: Any, task: Any) -> bool:
        return await self.notify(WebhookEvent.TASK_COMPLETED, user, {
            "task": {
                "id": _field(task, "id"),
                "title": _field(task, "title"),
                "completedAt": _utcnow(),
            },
        })

    # User events

    async def user_invited(self, inviter: Any, invited_email: str, role: str) -> bool:
        return await self.notify(WebhookEvent.USER_INVITED, inviter, {
            "invitedEmail": invited_email,
            "role": role,
        })

    async def user_role_changed(self, admin: Any, target_user: Any, old_role: str, new_role: str) -> bool:
        return await self.notify(WebhookEvent.USER_ROLE_CHANGED, admin, {
            "targetUser": {
                "id": _field(target_user, "id"),
                "name": _field(target_user, "name"),
                "email": _field(target_user, "email"),
            },
            "oldRole": old_role,
            "newRole": new_role,
        })

    # Template events

    async def template_created(self, user: Any, template: Any) -> bool:
        return await self.notify(WebhookEvent.TEMPLATE_CREATED, user, {
            "template": {
                "id": _field(template, "id"),
                "name": _field(template, "name"),
                "category": _field(template, "category"),
                "isPublic": _field(template, "is_public"),
            },
        })

    async def template_used(self, user: Any, template: Any) -> bool:
        return await self.notify(WebhookEvent.TEMPLATE_USED, user, {
            "template": {
                "id": _field(template, "id"),
                "name": _field(template, "name"),
                "usageCount": _field(template, "usage_count"),
            },
        })
