"""Persistence helpers for notification entities."""

from __future__ import annotations

from dataclasses import replace
from typing import Any

from google.cloud.firestore import Client

from forager_notifications.domain.entities import Notification

from .user_repository import USERS_COLLECTION

NOTIFICATIONS_COLLECTION = "Notifications"


class NotificationRepository:
    """Append :class:`Notification` records to a user's history."""

    def __init__(self, client: Client) -> None:
        self.client = client

    def create(self, notification: Notification) -> Notification:
        collection = (
            self.client.collection(USERS_COLLECTION)
            .document(notification.recipient_email)
            .collection(NOTIFICATIONS_COLLECTION)
        )
        _, reference = collection.add(self._to_document(notification))
        return replace(notification, id=reference.id)

    @staticmethod
    def _to_document(notification: Notification) -> dict[str, Any]:
        return {
            "type": notification.type,
            "title": notification.title,
            "body": notification.body,
            "fromEmail": notification.from_email,
            "fromDisplayName": notification.from_display_name,
            "postId": notification.post_id,
            "requestId": notification.request_id,
            "commentId": notification.comment_id,
            "isRead": notification.is_read,
            "createdAt": notification.created_at,
        }


__all__ = ["NOTIFICATIONS_COLLECTION", "NotificationRepository"]
