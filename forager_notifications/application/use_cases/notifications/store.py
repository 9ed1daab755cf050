"""Append notifications to a recipient's in-app history."""

from __future__ import annotations

import logging
from collections.abc import Mapping

from forager_notifications.domain.entities import DeliveryResult, Notification
from forager_notifications.infrastructure.repositories import NotificationRepository
from forager_notifications.utils import notification_timestamp

from .services import NotificationServices

logger = logging.getLogger(__name__)

_ACTOR_KEYS = ("fromEmail", "likerEmail", "commenterEmail")


def store_notification(
    services: NotificationServices,
    recipient_email: str,
    title: str,
    body: str,
    notification_type: str,
    data: Mapping[str, str],
) -> DeliveryResult:
    """Persist one unread notification for ``recipient_email``.

    Write errors are logged and returned as a failed result.
    """

    try:
        notification = Notification(
            id=None,
            recipient_email=recipient_email,
            type=notification_type,
            title=title,
            body=body,
            from_email=_first_present(data, _ACTOR_KEYS),
            from_display_name=data.get("fromDisplayName") or None,
            post_id=data.get("postId") or None,
            request_id=data.get("requestId") or None,
            comment_id=data.get("commentId") or None,
            is_read=False,
            created_at=notification_timestamp(),
        )
        saved = NotificationRepository(services.firestore).create(notification)
    except Exception as exc:
        logger.exception("Error storing notification for %s", recipient_email)
        return DeliveryResult.failure(exc)

    logger.info("Notification stored for %s", recipient_email)
    return DeliveryResult.success(saved.id)


def _first_present(data: Mapping[str, str], keys: tuple[str, ...]) -> str | None:
    for key in keys:
        value = data.get(key)
        if value:
            return value
    return None


__all__ = ["store_notification"]
