"""FastAPI dependency utilities."""

from fastapi import HTTPException, Request, status

from forager_notifications.application.use_cases.notifications import NotificationServices


def get_notification_services(request: Request) -> NotificationServices:
    """Return the services created by the application lifespan."""

    services = getattr(request.app.state, "notification_services", None)
    if services is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Notification services are not initialised",
        )
    return services
