"""Collaborators shared by the notification use cases."""

from __future__ import annotations

from dataclasses import dataclass

from google.cloud.firestore import Client

from forager_notifications.infrastructure.notifications import PushDispatcher


@dataclass(frozen=True)
class NotificationServices:
    """Firestore client and push dispatcher owned by the hosting process."""

    firestore: Client
    dispatcher: PushDispatcher


__all__ = ["NotificationServices"]
