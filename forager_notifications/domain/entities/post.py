"""Domain entities for posts and their comments."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

DEFAULT_POST_NAME = "your post"


@dataclass
class Post:
    """A shared foraging post."""

    id: str
    owner_email: str | None
    name: str | None = None
    likes: list[str] = field(default_factory=list)

    @classmethod
    def from_document(cls, post_id: str, data: Mapping[str, Any]) -> "Post":
        likes = data.get("likes")
        return cls(
            id=post_id,
            owner_email=data.get("userEmail") or None,
            name=data.get("name") or None,
            likes=[liker for liker in likes if isinstance(liker, str)]
            if isinstance(likes, list)
            else [],
        )

    @property
    def display_name(self) -> str:
        return self.name or DEFAULT_POST_NAME

    def new_liker_since(self, previous: "Post") -> str | None:
        """Return the first liker present now but absent from ``previous``.

        Only a net growth of the likes list counts; unlikes and no-op updates
        return ``None``.
        """

        if len(self.likes) <= len(previous.likes):
            return None
        before = set(previous.likes)
        return next((liker for liker in self.likes if liker not in before), None)


@dataclass
class Comment:
    """A comment stored under ``Posts/{postId}/Comments``."""

    id: str
    post_id: str
    author_email: str | None
    username: str | None
    text: str

    @classmethod
    def from_document(
        cls, *, post_id: str, comment_id: str, data: Mapping[str, Any]
    ) -> "Comment":
        text = data.get("text")
        return cls(
            id=comment_id,
            post_id=post_id,
            author_email=data.get("userEmail") or None,
            username=data.get("username") or None,
            text=text if isinstance(text, str) else "",
        )


__all__ = ["Comment", "DEFAULT_POST_NAME", "Post"]
