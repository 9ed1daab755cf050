"""React to Firestore document events by storing and pushing notifications."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from forager_notifications.domain.entities import (
    Comment,
    FriendRequest,
    NotificationOutcome,
    Post,
    RenderedNotification,
)
from forager_notifications.infrastructure.repositories import PostRepository

from .display_names import FALLBACK_DISPLAY_NAME, email_local_part, resolve_display_name
from .preferences import get_user_notification_info
from .rendering import (
    render_friend_accepted,
    render_friend_request,
    render_post_comment,
    render_post_like,
)
from .services import NotificationServices
from .store import store_notification

logger = logging.getLogger(__name__)

SKIP_MISSING_DOCUMENT = "missing_document"
SKIP_NOT_PENDING = "not_pending"
SKIP_OUTGOING_COPY = "outgoing_copy"
SKIP_NOT_ACCEPTED = "not_accepted_transition"
SKIP_MISSING_SENDER = "missing_sender"
SKIP_NO_NEW_LIKE = "no_new_like"
SKIP_POST_NOT_FOUND = "post_not_found"
SKIP_MISSING_OWNER = "missing_owner"
SKIP_SELF_ACTION = "self_action"
SKIP_PUSH_DISABLED = "push_disabled"
SKIP_PUSH_FAILED = "push_failed"


def _persist_and_push(
    services: NotificationServices,
    *,
    recipient_email: str,
    rendered: RenderedNotification,
) -> NotificationOutcome:
    """Store ``rendered`` for the recipient, then push it when allowed."""

    stored = store_notification(
        services,
        recipient_email,
        rendered.title,
        rendered.body,
        rendered.type,
        rendered.data,
    )
    if not stored.ok:
        logger.warning(
            "Continuing without in-app record for %s (%s)",
            recipient_email,
            rendered.type,
        )

    info = get_user_notification_info(services, recipient_email)
    if not info.can_receive_push:
        logger.info("Push skipped for %s (no token or disabled)", recipient_email)
        return NotificationOutcome.skipped(SKIP_PUSH_DISABLED, stored=stored.ok)

    pushed = services.dispatcher.send(
        info.token,
        rendered.title,
        rendered.body,
        rendered.data,
        priority=rendered.priority,
    )
    if not pushed.ok:
        return NotificationOutcome.skipped(SKIP_PUSH_FAILED, stored=stored.ok)
    return NotificationOutcome(stored=stored.ok, pushed=True)


def notify_friend_request_created(
    services: NotificationServices,
    *,
    user_id: str,
    request_id: str,
    data: Mapping[str, Any] | None,
) -> NotificationOutcome:
    """Tell ``user_id`` that a new friend request arrived."""

    if data is None:
        return NotificationOutcome.skipped(SKIP_MISSING_DOCUMENT)

    request = FriendRequest.from_document(
        owner_email=user_id, request_id=request_id, data=data
    )
    if not request.is_pending:
        logger.info("Skipping non-pending request %s", request_id)
        return NotificationOutcome.skipped(SKIP_NOT_PENDING)
    if request.is_outgoing_copy:
        logger.info("Skipping sender's own copy of request %s", request_id)
        return NotificationOutcome.skipped(SKIP_OUTGOING_COPY)

    rendered = render_friend_request(
        request_id=request_id,
        sender_email=request.from_email,
        sender_name=request.from_display_name or FALLBACK_DISPLAY_NAME,
        message=request.message,
    )
    return _persist_and_push(services, recipient_email=user_id, rendered=rendered)


def notify_friend_request_updated(
    services: NotificationServices,
    *,
    user_id: str,
    request_id: str,
    before: Mapping[str, Any] | None,
    after: Mapping[str, Any] | None,
) -> NotificationOutcome:
    """Tell the original sender that ``user_id`` accepted their request."""

    if before is None or after is None:
        return NotificationOutcome.skipped(SKIP_MISSING_DOCUMENT)

    previous = FriendRequest.from_document(
        owner_email=user_id, request_id=request_id, data=before
    )
    current = FriendRequest.from_document(
        owner_email=user_id, request_id=request_id, data=after
    )
    if previous.is_accepted or not current.is_accepted:
        return NotificationOutcome.skipped(SKIP_NOT_ACCEPTED)

    sender_email = current.from_email
    if not sender_email:
        logger.info("No sender email found on request %s", request_id)
        return NotificationOutcome.skipped(SKIP_MISSING_SENDER)
    if sender_email == user_id:
        logger.info("Skipping sender's own copy of request %s", request_id)
        return NotificationOutcome.skipped(SKIP_SELF_ACTION)

    acceptor_name = resolve_display_name(services, user_id)
    rendered = render_friend_accepted(acceptor_email=user_id, acceptor_name=acceptor_name)
    return _persist_and_push(services, recipient_email=sender_email, rendered=rendered)


def notify_post_liked(
    services: NotificationServices,
    *,
    post_id: str,
    before: Mapping[str, Any] | None,
    after: Mapping[str, Any] | None,
) -> NotificationOutcome:
    """Tell the post owner about a new like."""

    if before is None or after is None:
        return NotificationOutcome.skipped(SKIP_MISSING_DOCUMENT)

    previous = Post.from_document(post_id, before)
    current = Post.from_document(post_id, after)
    liker_email = current.new_liker_since(previous)
    if liker_email is None:
        return NotificationOutcome.skipped(SKIP_NO_NEW_LIKE)

    owner_email = current.owner_email
    if not owner_email:
        logger.info("No post owner email found on post %s", post_id)
        return NotificationOutcome.skipped(SKIP_MISSING_OWNER)
    if liker_email == owner_email:
        logger.info("Skipping self-like notification on post %s", post_id)
        return NotificationOutcome.skipped(SKIP_SELF_ACTION)

    liker_name = resolve_display_name(services, liker_email)
    rendered = render_post_like(
        post_id=post_id,
        post_name=current.display_name,
        liker_email=liker_email,
        liker_name=liker_name,
    )
    return _persist_and_push(services, recipient_email=owner_email, rendered=rendered)


def notify_post_commented(
    services: NotificationServices,
    *,
    post_id: str,
    comment_id: str,
    data: Mapping[str, Any] | None,
) -> NotificationOutcome:
    """Tell the post owner about a new comment."""

    if data is None:
        return NotificationOutcome.skipped(SKIP_MISSING_DOCUMENT)

    comment = Comment.from_document(post_id=post_id, comment_id=comment_id, data=data)

    try:
        post = PostRepository(services.firestore).get(post_id)
    except Exception:
        logger.exception("Error loading post %s", post_id)
        return NotificationOutcome.skipped(SKIP_POST_NOT_FOUND)
    if post is None:
        logger.info("Post %s not found", post_id)
        return NotificationOutcome.skipped(SKIP_POST_NOT_FOUND)

    owner_email = post.owner_email
    if not owner_email:
        logger.info("No post owner email found on post %s", post_id)
        return NotificationOutcome.skipped(SKIP_MISSING_OWNER)
    if comment.author_email == owner_email:
        logger.info("Skipping self-comment notification on post %s", post_id)
        return NotificationOutcome.skipped(SKIP_SELF_ACTION)

    commenter_name = comment.username or resolve_display_name(
        services,
        comment.author_email,
        fallback=email_local_part(comment.author_email),
    )
    rendered = render_post_comment(
        post_id=post_id,
        comment_id=comment_id,
        commenter_email=comment.author_email,
        commenter_name=commenter_name,
        text=comment.text,
    )
    return _persist_and_push(services, recipient_email=owner_email, rendered=rendered)


__all__ = [
    "notify_friend_request_created",
    "notify_friend_request_updated",
    "notify_post_commented",
    "notify_post_liked",
]
