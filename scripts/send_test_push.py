"""Utility script to send a test push notification to a user's device."""

from __future__ import annotations

import argparse

from forager_notifications.application.use_cases.notifications import (
    NotificationServices,
    get_user_notification_info,
)
from forager_notifications.config import get_settings
from forager_notifications.infrastructure.firebase import (
    create_firestore_client,
    create_message_sender,
    initialize_firebase,
    shutdown_firebase,
)
from forager_notifications.infrastructure.notifications import PushDispatcher


def parse_args() -> argparse.Namespace:
    """Parse command line arguments for the test push."""

    parser = argparse.ArgumentParser(
        description="Send a test push notification to a Forager user.",
    )
    parser.add_argument("email", help="Email of the user that should receive the push")
    parser.add_argument(
        "--title",
        default="Forager test notification",
        help="Notification title (default: Forager test notification)",
    )
    parser.add_argument(
        "--body",
        default="Push notifications are working.",
        help="Notification body",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Ask FCM to validate the message without delivering it.",
    )
    parser.add_argument(
        "--ignore-preferences",
        action="store_true",
        help="Send even when the user disabled push or social notifications.",
    )
    return parser.parse_args()


def main() -> None:
    """Resolve the user's token and send one push."""

    args = parse_args()
    settings = get_settings()

    firebase_app = initialize_firebase(settings)
    try:
        services = NotificationServices(
            firestore=create_firestore_client(firebase_app),
            dispatcher=PushDispatcher(
                create_message_sender(
                    firebase_app, dry_run=args.dry_run or settings.push_dry_run
                )
            ),
        )
        info = get_user_notification_info(services, args.email)
        if not info.token:
            raise SystemExit(f"User {args.email} has no FCM token registered.")
        if not info.can_receive_push and not args.ignore_preferences:
            raise SystemExit(
                f"User {args.email} has push disabled "
                f"(enabled={info.enabled}, social={info.social_enabled})."
            )

        result = services.dispatcher.send(
            info.token, args.title, args.body, {"type": "test"}
        )
        if not result.ok:
            raise SystemExit(f"Push delivery failed: {result.error}")
        print(f"Push sent: {result.reference}")
    finally:
        shutdown_firebase(firebase_app)


if __name__ == "__main__":
    main()
