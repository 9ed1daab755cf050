"""Firebase application bootstrap and client factories."""

from __future__ import annotations

import logging
from functools import partial
from typing import Callable

import firebase_admin
from firebase_admin import credentials, firestore, messaging
from google.cloud.firestore import Client

from forager_notifications.config import Settings, get_settings

logger = logging.getLogger(__name__)

APP_NAME = "forager-notifications"

MessageSender = Callable[[messaging.Message], str]


def initialize_firebase(settings: Settings | None = None) -> firebase_admin.App:
    """Create the process-wide Firebase app used by the notification handlers."""

    settings = settings or get_settings()
    if settings.firebase_credentials_path:
        credential = credentials.Certificate(settings.firebase_credentials_path)
    else:
        credential = credentials.ApplicationDefault()

    options = {}
    if settings.firebase_project_id:
        options["projectId"] = settings.firebase_project_id

    app = firebase_admin.initialize_app(credential, options or None, name=APP_NAME)
    logger.info(
        "Firebase app initialised for project %s",
        settings.firebase_project_id or "<default>",
    )
    return app


def create_firestore_client(app: firebase_admin.App) -> Client:
    """Return the Firestore client bound to ``app``."""

    return firestore.client(app)


def create_message_sender(
    app: firebase_admin.App, *, dry_run: bool = False
) -> MessageSender:
    """Return a callable that sends one FCM message through ``app``."""

    return partial(messaging.send, dry_run=dry_run, app=app)


def shutdown_firebase(app: firebase_admin.App) -> None:
    """Release the Firebase app and its cached service clients."""

    firebase_admin.delete_app(app)


__all__ = [
    "APP_NAME",
    "MessageSender",
    "create_firestore_client",
    "create_message_sender",
    "initialize_firebase",
    "shutdown_firebase",
]
