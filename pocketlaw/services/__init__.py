"""Outbound services for Pocketlaw."""

from pocketlaw.services.notifications import WebhookNotifier, WebhookEvent

__all__ = [
    "WebhookNotifier",
    "WebhookEvent",
]
