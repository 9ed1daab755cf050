"""Build the title, body and client payload for each notification type."""

from __future__ import annotations

from forager_notifications.domain.entities import (
    NOTIFICATION_TYPE_FRIEND_ACCEPTED,
    NOTIFICATION_TYPE_FRIEND_REQUEST,
    NOTIFICATION_TYPE_POST_COMMENT,
    NOTIFICATION_TYPE_POST_LIKE,
    PUSH_PRIORITY_HIGH,
    PUSH_PRIORITY_NORMAL,
    RenderedNotification,
)

PREVIEW_LENGTH = 50
ELLIPSIS = "..."


def truncate_preview(text: str, limit: int = PREVIEW_LENGTH) -> str:
    """Keep the first ``limit`` characters of ``text`` and mark the cut."""

    if len(text) > limit:
        return f"{text[:limit]}{ELLIPSIS}"
    return text


def render_friend_request(
    *,
    request_id: str,
    sender_email: str | None,
    sender_name: str,
    message: str | None,
) -> RenderedNotification:
    if message and message.strip():
        body = f'{sender_name}: "{truncate_preview(message)}"'
    else:
        body = f"{sender_name} wants to connect with you!"
    return RenderedNotification(
        type=NOTIFICATION_TYPE_FRIEND_REQUEST,
        title="New Friend Request",
        body=body,
        data={
            "type": NOTIFICATION_TYPE_FRIEND_REQUEST,
            "requestId": request_id,
            "fromEmail": sender_email or "",
            "fromDisplayName": sender_name,
        },
        priority=PUSH_PRIORITY_HIGH,
    )


def render_friend_accepted(
    *, acceptor_email: str, acceptor_name: str
) -> RenderedNotification:
    # friendEmail duplicates fromEmail for older clients.
    return RenderedNotification(
        type=NOTIFICATION_TYPE_FRIEND_ACCEPTED,
        title="Friend Request Accepted",
        body=f"{acceptor_name} accepted your friend request!",
        data={
            "type": NOTIFICATION_TYPE_FRIEND_ACCEPTED,
            "friendEmail": acceptor_email,
            "fromEmail": acceptor_email,
            "fromDisplayName": acceptor_name,
        },
        priority=PUSH_PRIORITY_HIGH,
    )


def render_post_like(
    *, post_id: str, post_name: str, liker_email: str, liker_name: str
) -> RenderedNotification:
    return RenderedNotification(
        type=NOTIFICATION_TYPE_POST_LIKE,
        title="Someone liked your post",
        body=f'{liker_name} liked "{post_name}"',
        data={
            "type": NOTIFICATION_TYPE_POST_LIKE,
            "postId": post_id,
            "likerEmail": liker_email,
            "fromEmail": liker_email,
            "fromDisplayName": liker_name,
        },
        priority=PUSH_PRIORITY_NORMAL,
    )


def render_post_comment(
    *,
    post_id: str,
    comment_id: str,
    commenter_email: str | None,
    commenter_name: str,
    text: str,
) -> RenderedNotification:
    return RenderedNotification(
        type=NOTIFICATION_TYPE_POST_COMMENT,
        title="New comment on your post",
        body=f"{commenter_name}: {truncate_preview(text)}",
        data={
            "type": NOTIFICATION_TYPE_POST_COMMENT,
            "postId": post_id,
            "commentId": comment_id,
            "commenterEmail": commenter_email or "",
            "fromEmail": commenter_email or "",
            "fromDisplayName": commenter_name,
        },
        priority=PUSH_PRIORITY_NORMAL,
    )


__all__ = [
    "PREVIEW_LENGTH",
    "render_friend_accepted",
    "render_friend_request",
    "render_post_comment",
    "render_post_like",
    "truncate_preview",
]
