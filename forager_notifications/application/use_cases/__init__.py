"""Aggregate application use cases."""

from .notifications import (
    NotificationServices,
    notify_friend_request_created,
    notify_friend_request_updated,
    notify_post_commented,
    notify_post_liked,
)

__all__ = [
    "NotificationServices",
    "notify_friend_request_created",
    "notify_friend_request_updated",
    "notify_post_commented",
    "notify_post_liked",
]
