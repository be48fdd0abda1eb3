"""In-memory forum records.

These are the entities held by the content store and serialized into the
``communities`` and ``users`` documents. Field aliases keep the camelCase
names used by the stored documents and the API.
"""

from __future__ import annotations

import uuid
from datetime import UTC, datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from forumhub.db.time import utcnow


def new_id() -> str:
    """Return a fresh random identifier."""
    return str(uuid.uuid4())


class _Record(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    @field_validator("created_at", mode="after", check_fields=False)
    @classmethod
    def _naive_utc(cls, value: datetime) -> datetime:
        # Documents written elsewhere may carry "Z" suffixes or epoch millis.
        if value.tzinfo is not None:
            return value.astimezone(UTC).replace(tzinfo=None)
        return value


class Comment(_Record):
    """Immutable reply attached to a post."""

    id: str = Field(default_factory=new_id)
    text: str
    # Free-form; not required to name an existing user.
    author: str
    created_at: datetime = Field(default_factory=utcnow, alias="createdAt")


class Post(_Record):
    """Content entry owned by exactly one community."""

    id: str = Field(default_factory=new_id)
    title: str
    content: str
    author: str
    created_at: datetime = Field(default_factory=utcnow, alias="createdAt")
    upvotes: int = Field(default=0, ge=0)
    comments: list[Comment] = Field(default_factory=list)


class Community(_Record):
    """Topical group holding posts in insertion order."""

    id: str = Field(default_factory=new_id)
    name: str
    description: str
    posts: list[Post] = Field(default_factory=list)


class UpvoteReceipt(_Record):
    """Record of one upvote, stored on the receiving author's profile."""

    post_id: str = Field(alias="postId")
    upvoter_id: str | None = Field(default=None, alias="upvoterId")
    created_at: datetime = Field(default_factory=utcnow, alias="createdAt")


class User(_Record):
    """Forum member identified by a caller-chosen id."""

    id: str
    subscriptions: list[str] = Field(default_factory=list)
    posts: list[str] = Field(default_factory=list)
    upvotes_received: list[UpvoteReceipt] = Field(
        default_factory=list, alias="upvotesReceived"
    )

    @field_validator("subscriptions", mode="after")
    @classmethod
    def _unique_subscriptions(cls, value: list[str]) -> list[str]:
        return list(dict.fromkeys(value))

    def is_subscribed(self, community_id: str) -> bool:
        """Return True if the user already follows ``community_id``."""
        return community_id in self.subscriptions
