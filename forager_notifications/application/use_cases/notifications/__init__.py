"""Public helpers for emitting social notifications."""

from .display_names import resolve_display_name
from .events import (
    notify_friend_request_created,
    notify_friend_request_updated,
    notify_post_commented,
    notify_post_liked,
)
from .preferences import get_user_notification_info
from .services import NotificationServices
from .store import store_notification

__all__ = [
    "NotificationServices",
    "get_user_notification_info",
    "notify_friend_request_created",
    "notify_friend_request_updated",
    "notify_post_commented",
    "notify_post_liked",
    "resolve_display_name",
    "store_notification",
]
