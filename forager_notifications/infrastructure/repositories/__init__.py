"""Repository implementations for infrastructure layer."""

from .notification_repository import NOTIFICATIONS_COLLECTION, NotificationRepository
from .post_repository import POSTS_COLLECTION, PostRepository
from .user_repository import USERS_COLLECTION, UserRepository

__all__ = [
    "NOTIFICATIONS_COLLECTION",
    "NotificationRepository",
    "POSTS_COLLECTION",
    "PostRepository",
    "USERS_COLLECTION",
    "UserRepository",
]
