"""Resolve where and whether a user can receive push notifications."""

from __future__ import annotations

import logging

from forager_notifications.domain.entities import NotificationInfo
from forager_notifications.infrastructure.repositories import UserRepository

from .services import NotificationServices

logger = logging.getLogger(__name__)


def get_user_notification_info(
    services: NotificationServices, email: str
) -> NotificationInfo:
    """Return the push token and switches for ``email``.

    Missing users and lookup failures yield :meth:`NotificationInfo.closed`,
    which also reports social notifications as disabled.
    """

    try:
        user = UserRepository(services.firestore).get(email)
    except Exception:
        logger.exception("Error getting notification info for %s", email)
        return NotificationInfo.closed()

    if user is None:
        return NotificationInfo.closed()

    preferences = user.preferences
    return NotificationInfo(
        token=preferences.fcm_token,
        social_enabled=preferences.social_notifications,
        enabled=preferences.enabled,
    )


__all__ = ["get_user_notification_info"]
