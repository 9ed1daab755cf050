"""Domain entity representing a friend request copy."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

FRIEND_REQUEST_STATUS_PENDING = "pending"
FRIEND_REQUEST_STATUS_ACCEPTED = "accepted"


@dataclass
class FriendRequest:
    """A friend request stored under ``Users/{owner}/FriendRequests``.

    Both the sender and the recipient hold a copy; ``owner_email`` is the user
    whose subcollection contains this copy.
    """

    id: str
    owner_email: str
    from_email: str | None
    from_display_name: str | None
    status: str | None
    message: str | None = None

    @classmethod
    def from_document(
        cls, *, owner_email: str, request_id: str, data: Mapping[str, Any]
    ) -> "FriendRequest":
        message = data.get("message")
        return cls(
            id=request_id,
            owner_email=owner_email,
            from_email=data.get("fromEmail") or None,
            from_display_name=data.get("fromDisplayName") or None,
            status=data.get("status"),
            message=message if isinstance(message, str) else None,
        )

    @property
    def is_pending(self) -> bool:
        return self.status == FRIEND_REQUEST_STATUS_PENDING

    @property
    def is_accepted(self) -> bool:
        return self.status == FRIEND_REQUEST_STATUS_ACCEPTED

    @property
    def is_outgoing_copy(self) -> bool:
        """Return ``True`` for the sender's mirrored copy of the request."""

        return self.from_email == self.owner_email


__all__ = [
    "FRIEND_REQUEST_STATUS_ACCEPTED",
    "FRIEND_REQUEST_STATUS_PENDING",
    "FriendRequest",
]
