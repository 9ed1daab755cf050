"""Domain entities exposed by the application."""

from .delivery import DeliveryResult, NotificationOutcome
from .friend_request import (
    FRIEND_REQUEST_STATUS_ACCEPTED,
    FRIEND_REQUEST_STATUS_PENDING,
    FriendRequest,
)
from .notification import (
    NOTIFICATION_TYPES,
    NOTIFICATION_TYPE_FRIEND_ACCEPTED,
    NOTIFICATION_TYPE_FRIEND_REQUEST,
    NOTIFICATION_TYPE_POST_COMMENT,
    NOTIFICATION_TYPE_POST_LIKE,
    PUSH_PRIORITY_HIGH,
    PUSH_PRIORITY_NORMAL,
    Notification,
    RenderedNotification,
)
from .post import DEFAULT_POST_NAME, Comment, Post
from .user import NotificationInfo, NotificationPreferences, User

__all__ = [
    "Comment",
    "DEFAULT_POST_NAME",
    "DeliveryResult",
    "FRIEND_REQUEST_STATUS_ACCEPTED",
    "FRIEND_REQUEST_STATUS_PENDING",
    "FriendRequest",
    "NOTIFICATION_TYPES",
    "NOTIFICATION_TYPE_FRIEND_ACCEPTED",
    "NOTIFICATION_TYPE_FRIEND_REQUEST",
    "NOTIFICATION_TYPE_POST_COMMENT",
    "NOTIFICATION_TYPE_POST_LIKE",
    "Notification",
    "NotificationInfo",
    "NotificationOutcome",
    "NotificationPreferences",
    "PUSH_PRIORITY_HIGH",
    "PUSH_PRIORITY_NORMAL",
    "Post",
    "RenderedNotification",
    "User",
]
