"""Deliver push notifications through Firebase Cloud Messaging."""

from __future__ import annotations

import logging
from collections.abc import Mapping

from firebase_admin import messaging

from forager_notifications.domain.entities import DeliveryResult, PUSH_PRIORITY_HIGH
from forager_notifications.infrastructure.firebase import MessageSender

logger = logging.getLogger(__name__)

CLICK_ACTION = "FLUTTER_NOTIFICATION_CLICK"
ANDROID_CHANNEL_ID = "forager_notifications"
ANDROID_ICON = "ic_notification"
ANDROID_COLOR = "#4CAF50"
APNS_SOUND = "default"
APNS_BADGE = 1

_TOKEN_LOG_PREFIX = 20


class PushDispatcher:
    """Build FCM messages and hand them to a sender."""

    def __init__(self, sender: MessageSender) -> None:
        self._sender = sender

    def send(
        self,
        token: str,
        title: str,
        body: str,
        data: Mapping[str, str],
        priority: str = PUSH_PRIORITY_HIGH,
    ) -> DeliveryResult:
        """Attempt one delivery of a push to ``token``.

        Transport errors are logged and returned as a failed result.
        """

        try:
            message = build_push_message(token, title, body, data, priority=priority)
            message_id = self._sender(message)
        except Exception as exc:
            logger.error("Error sending notification to token %s...: %s", _mask(token), exc)
            return DeliveryResult.failure(exc)

        logger.info("Notification sent successfully to token: %s...", _mask(token))
        return DeliveryResult.success(message_id)


def build_push_message(
    token: str,
    title: str,
    body: str,
    data: Mapping[str, str],
    *,
    priority: str = PUSH_PRIORITY_HIGH,
) -> messaging.Message:
    """Return the FCM message carrying ``data`` plus the deep-link marker."""

    payload = {key: str(value) for key, value in data.items()}
    payload["click_action"] = CLICK_ACTION
    return messaging.Message(
        token=token,
        notification=messaging.Notification(title=title, body=body),
        data=payload,
        android=messaging.AndroidConfig(
            priority=priority,
            notification=messaging.AndroidNotification(
                channel_id=ANDROID_CHANNEL_ID,
                icon=ANDROID_ICON,
                color=ANDROID_COLOR,
            ),
        ),
        apns=messaging.APNSConfig(
            payload=messaging.APNSPayload(
                aps=messaging.Aps(sound=APNS_SOUND, badge=APNS_BADGE),
            ),
        ),
    )


def _mask(token: str) -> str:
    return (token or "")[:_TOKEN_LOG_PREFIX]


__all__ = [
    "ANDROID_CHANNEL_ID",
    "CLICK_ACTION",
    "PushDispatcher",
    "build_push_message",
]
