"""Resolve human readable names for notification actors."""

from __future__ import annotations

import logging

from forager_notifications.infrastructure.repositories import UserRepository

from .services import NotificationServices

logger = logging.getLogger(__name__)

FALLBACK_DISPLAY_NAME = "Someone"


def email_local_part(email: str | None) -> str | None:
    """Return the part of ``email`` before ``@``, or ``None`` when empty."""

    if not email:
        return None
    return email.split("@", 1)[0] or None


def resolve_display_name(
    services: NotificationServices,
    email: str | None,
    *,
    fallback: str | None = None,
) -> str:
    """Return the best available name for ``email``.

    Preference order is display name, username, ``fallback`` and finally
    ``"Someone"``. Lookup errors are logged and treated as a missing profile.
    """

    user = None
    if email:
        try:
            user = UserRepository(services.firestore).get(email)
        except Exception:
            logger.exception("Error resolving display name for %s", email)

    if user is not None:
        if user.display_name:
            return user.display_name
        if user.username:
            return user.username
    return fallback or FALLBACK_DISPLAY_NAME


__all__ = ["FALLBACK_DISPLAY_NAME", "email_local_part", "resolve_display_name"]
