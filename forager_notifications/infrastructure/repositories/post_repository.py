"""Read access to posts stored in Firestore."""

from __future__ import annotations

from google.cloud.firestore import Client

from forager_notifications.domain.entities import Post

POSTS_COLLECTION = "Posts"


class PostRepository:
    """Look up :class:`Post` documents by identifier."""

    def __init__(self, client: Client) -> None:
        self.client = client

    def get(self, post_id: str) -> Post | None:
        snapshot = self.client.collection(POSTS_COLLECTION).document(post_id).get()
        if not snapshot.exists:
            return None
        return Post.from_document(post_id, snapshot.to_dict() or {})


__all__ = ["POSTS_COLLECTION", "PostRepository"]
