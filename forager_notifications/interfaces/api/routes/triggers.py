"""Endpoints receiving Firestore document events from Eventarc."""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Depends, Header, HTTPException, status

from forager_notifications.application.use_cases.notifications import (
    NotificationServices,
    notify_friend_request_created,
    notify_friend_request_updated,
    notify_post_commented,
    notify_post_liked,
)
from forager_notifications.domain.entities import NotificationOutcome
from forager_notifications.infrastructure.firestore_events import (
    DocumentDecodeError,
    DocumentPathError,
    decode_fields,
    document_path,
    match_document_path,
)
from forager_notifications.interfaces.api.dependencies import get_notification_services
from forager_notifications.interfaces.api.schemas import (
    DocumentEventPayload,
    FirestoreDocument,
    TriggerResponse,
)

logger = logging.getLogger(__name__)

FRIEND_REQUEST_DOCUMENT = "Users/{userId}/FriendRequests/{requestId}"
POST_DOCUMENT = "Posts/{postId}"
COMMENT_DOCUMENT = "Posts/{postId}/Comments/{commentId}"

router = APIRouter(prefix="/triggers", tags=["triggers"])


def _path_params(
    pattern: str, payload: DocumentEventPayload, ce_document: str | None
) -> dict[str, str]:
    name = payload.document_name() or ce_document
    if not name:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Event does not identify the changed document",
        )
    try:
        return match_document_path(pattern, document_path(name))
    except DocumentPathError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc


def _fields(document: FirestoreDocument | None) -> dict[str, Any] | None:
    if document is None:
        return None
    try:
        return decode_fields(document.fields)
    except DocumentDecodeError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc


def _to_response(outcome: NotificationOutcome) -> TriggerResponse:
    return TriggerResponse(
        status="skipped" if outcome.skipped_reason else "delivered",
        stored=outcome.stored,
        pushed=outcome.pushed,
        reason=outcome.skipped_reason,
    )


@router.post("/friend-requests/created", response_model=TriggerResponse)
def friend_request_created(
    payload: DocumentEventPayload,
    ce_document: str | None = Header(default=None),
    services: NotificationServices = Depends(get_notification_services),
) -> TriggerResponse:
    """Notify the recipient of a newly created friend request."""

    params = _path_params(FRIEND_REQUEST_DOCUMENT, payload, ce_document)
    outcome = notify_friend_request_created(
        services,
        user_id=params["userId"],
        request_id=params["requestId"],
        data=_fields(payload.value),
    )
    logger.info("Friend request %s created: %s", params["requestId"], outcome)
    return _to_response(outcome)


@router.post("/friend-requests/updated", response_model=TriggerResponse)
def friend_request_updated(
    payload: DocumentEventPayload,
    ce_document: str | None = Header(default=None),
    services: NotificationServices = Depends(get_notification_services),
) -> TriggerResponse:
    """Notify the sender when their friend request is accepted."""

    params = _path_params(FRIEND_REQUEST_DOCUMENT, payload, ce_document)
    outcome = notify_friend_request_updated(
        services,
        user_id=params["userId"],
        request_id=params["requestId"],
        before=_fields(payload.old_value),
        after=_fields(payload.value),
    )
    logger.info("Friend request %s updated: %s", params["requestId"], outcome)
    return _to_response(outcome)


@router.post("/posts/updated", response_model=TriggerResponse)
def post_updated(
    payload: DocumentEventPayload,
    ce_document: str | None = Header(default=None),
    services: NotificationServices = Depends(get_notification_services),
) -> TriggerResponse:
    """Notify the post owner about a new like."""

    params = _path_params(POST_DOCUMENT, payload, ce_document)
    outcome = notify_post_liked(
        services,
        post_id=params["postId"],
        before=_fields(payload.old_value),
        after=_fields(payload.value),
    )
    logger.info("Post %s updated: %s", params["postId"], outcome)
    return _to_response(outcome)


@router.post("/comments/created", response_model=TriggerResponse)
def comment_created(
    payload: DocumentEventPayload,
    ce_document: str | None = Header(default=None),
    services: NotificationServices = Depends(get_notification_services),
) -> TriggerResponse:
    """Notify the post owner about a new comment."""

    params = _path_params(COMMENT_DOCUMENT, payload, ce_document)
    outcome = notify_post_commented(
        services,
        post_id=params["postId"],
        comment_id=params["commentId"],
        data=_fields(payload.value),
    )
    logger.info("Comment %s on post %s: %s", params["commentId"], params["postId"], outcome)
    return _to_response(outcome)
