import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from forager_notifications.application.use_cases.notifications import NotificationServices
from forager_notifications.config import get_settings
from forager_notifications.infrastructure.firebase import (
    create_firestore_client,
    create_message_sender,
    initialize_firebase,
    shutdown_firebase,
)
from forager_notifications.infrastructure.notifications import PushDispatcher
from forager_notifications.interfaces.api.routes import register_routes

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create the Firebase clients at startup and release them on shutdown."""

    settings = get_settings()
    logging.basicConfig(level=settings.log_level)

    if getattr(app.state, "notification_services", None) is not None:
        yield
        return

    firebase_app = initialize_firebase(settings)
    app.state.notification_services = NotificationServices(
        firestore=create_firestore_client(firebase_app),
        dispatcher=PushDispatcher(
            create_message_sender(firebase_app, dry_run=settings.push_dry_run)
        ),
    )
    try:
        yield
    finally:
        app.state.notification_services = None
        shutdown_firebase(firebase_app)
        logger.info("Firebase app released")


def create_app(services: NotificationServices | None = None) -> FastAPI:
    """Build the FastAPI application serving the Firestore triggers.

    Prebuilt ``services`` skip the Firebase bootstrap.
    """

    app = FastAPI(title="Forager Notifications", lifespan=lifespan)
    app.state.notification_services = services
    register_routes(app)
    return app


app = create_app()
