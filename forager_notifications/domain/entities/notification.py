"""Domain entities representing user notifications."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

NOTIFICATION_TYPE_FRIEND_REQUEST = "friend_request"
NOTIFICATION_TYPE_FRIEND_ACCEPTED = "friend_accepted"
NOTIFICATION_TYPE_POST_LIKE = "post_like"
NOTIFICATION_TYPE_POST_COMMENT = "post_comment"

NOTIFICATION_TYPES = frozenset(
    {
        NOTIFICATION_TYPE_FRIEND_REQUEST,
        NOTIFICATION_TYPE_FRIEND_ACCEPTED,
        NOTIFICATION_TYPE_POST_LIKE,
        NOTIFICATION_TYPE_POST_COMMENT,
    }
)

PUSH_PRIORITY_HIGH = "high"
PUSH_PRIORITY_NORMAL = "normal"


@dataclass
class Notification:
    """In-app notification stored in a recipient's history."""

    id: str | None
    recipient_email: str
    type: str
    title: str
    body: str
    from_email: str | None = None
    from_display_name: str | None = None
    post_id: str | None = None
    request_id: str | None = None
    comment_id: str | None = None
    is_read: bool = False
    created_at: datetime | None = None

    def __post_init__(self) -> None:
        if self.type not in NOTIFICATION_TYPES:
            raise ValueError(f"Unsupported notification type: {self.type!r}")


@dataclass(frozen=True)
class RenderedNotification:
    """Title, body and client payload produced for one event."""

    type: str
    title: str
    body: str
    data: dict[str, str] = field(default_factory=dict)
    priority: str = PUSH_PRIORITY_HIGH


__all__ = [
    "NOTIFICATION_TYPES",
    "NOTIFICATION_TYPE_FRIEND_ACCEPTED",
    "NOTIFICATION_TYPE_FRIEND_REQUEST",
    "NOTIFICATION_TYPE_POST_COMMENT",
    "NOTIFICATION_TYPE_POST_LIKE",
    "Notification",
    "PUSH_PRIORITY_HIGH",
    "PUSH_PRIORITY_NORMAL",
    "RenderedNotification",
]
