"""Domain entities describing a user profile and its notification settings."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping


@dataclass
class NotificationPreferences:
    """Notification switches stored under ``notificationPreferences``."""

    fcm_token: str | None = None
    social_notifications: bool = True
    enabled: bool = True

    @classmethod
    def from_document(cls, data: Mapping[str, Any] | None) -> "NotificationPreferences":
        """Build preferences from a loosely typed Firestore map.

        Switches default to ``True`` unless they are explicitly ``False``.
        """

        data = data or {}
        token = data.get("fcmToken")
        return cls(
            fcm_token=token if isinstance(token, str) and token else None,
            social_notifications=data.get("socialNotifications") is not False,
            enabled=data.get("enabled") is not False,
        )


@dataclass
class User:
    """Public profile of an application user keyed by email."""

    email: str
    display_name: str | None = None
    username: str | None = None
    preferences: NotificationPreferences = field(default_factory=NotificationPreferences)

    @classmethod
    def from_document(cls, email: str, data: Mapping[str, Any] | None) -> "User":
        data = data or {}
        prefs = data.get("notificationPreferences")
        return cls(
            email=email,
            display_name=_optional_text(data.get("displayName")),
            username=_optional_text(data.get("username")),
            preferences=NotificationPreferences.from_document(
                prefs if isinstance(prefs, Mapping) else None
            ),
        )


@dataclass(frozen=True)
class NotificationInfo:
    """Push destination and switches resolved for a recipient."""

    token: str | None
    social_enabled: bool
    enabled: bool

    @classmethod
    def closed(cls) -> "NotificationInfo":
        """Return the conservative value used when a user cannot be resolved."""

        return cls(token=None, social_enabled=False, enabled=False)

    @property
    def can_receive_push(self) -> bool:
        return bool(self.token) and self.enabled and self.social_enabled


def _optional_text(value: Any) -> str | None:
    if isinstance(value, str) and value:
        return value
    return None


__all__ = ["NotificationInfo", "NotificationPreferences", "User"]
