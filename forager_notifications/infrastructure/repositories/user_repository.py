"""Read access to user profiles stored in Firestore."""

from __future__ import annotations

from google.cloud.firestore import Client

from forager_notifications.domain.entities import User

USERS_COLLECTION = "Users"


class UserRepository:
    """Look up :class:`User` profiles keyed by email."""

    def __init__(self, client: Client) -> None:
        self.client = client

    def get(self, email: str) -> User | None:
        snapshot = self.client.collection(USERS_COLLECTION).document(email).get()
        if not snapshot.exists:
            return None
        return User.from_document(email, snapshot.to_dict())


__all__ = ["USERS_COLLECTION", "UserRepository"]
