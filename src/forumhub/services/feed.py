"""Read-only views over the content store.

The feed composer builds the responses that need ordering or cross-entity
resolution: a community's posts newest-first, single post lookups, and user
profiles with subscriptions and received upvotes resolved.

All stored timestamps are naive UTC. Rendering attaches UTC, converts to the
configured display zone and formats with one policy shared by every view.
"""
from __future__ import annotations

import heapq
import logging
from datetime import UTC, datetime
from typing import Literal
from zoneinfo import ZoneInfo

from forumhub.core.errors import NotFoundError
from forumhub.models.forum import Comment, Post, UpvoteReceipt
from forumhub.schemas.post import CommentView, PostView
from forumhub.schemas.user import ProfileView, ReceivedUpvoteView
from forumhub.services.content_store import ContentStore

__all__ = ["FeedComposer", "newest_first"]

logger = logging.getLogger(__name__)

TimestampFormat = Literal["iso", "24h"]


def newest_first(posts: list[Post]) -> list[Post]:
    """Order posts by creation time, most recent first.

    Posts created at the same instant keep their insertion order.
    """
    ranked = heapq.nlargest(
        len(posts),
        enumerate(posts),
        key=lambda item: (item[1].created_at, -item[0]),
    )
    return [post for _, post in ranked]


class FeedComposer:
    """Compose presentation views from a :class:`ContentStore`."""

    def __init__(
        self,
        store: ContentStore,
        *,
        zone: str = "America/New_York",
        timestamp_format: TimestampFormat = "iso",
    ) -> None:
        self.store = store
        self.zone = ZoneInfo(zone)
        self.timestamp_format = timestamp_format

    def render_timestamp(self, value: datetime) -> str:
        """Render a stored UTC instant in the display zone.

        ``iso`` yields ``2024-03-01T09:30:00-05:00``; ``24h`` yields
        ``03/01/2024, 09:30:00``.
        """
        local = value.replace(tzinfo=UTC).astimezone(self.zone)
        if self.timestamp_format == "24h":
            return local.strftime("%m/%d/%Y, %H:%M:%S")
        return local.isoformat(timespec="seconds")

    def _comment_view(self, comment: Comment) -> CommentView:
        return CommentView(
            id=comment.id,
            text=comment.text,
            author=comment.author,
            created_at=self.render_timestamp(comment.created_at),
        )

    def post_view(self, post: Post) -> PostView:
        """Copy a post into its rendered form."""
        return PostView(
            id=post.id,
            title=post.title,
            content=post.content,
            author=post.author,
            created_at=self.render_timestamp(post.created_at),
            upvotes=post.upvotes,
            comments=[self._comment_view(comment) for comment in post.comments],
        )

    def list_community_posts(self, community_id: str) -> list[PostView]:
        """Return a community's posts, most recent first.

        Raises:
            NotFoundError: If the community does not exist.
        """
        with self.store.lock:
            community = self.store.community_record(community_id)
            if community is None:
                raise NotFoundError("community", community_id)
            return [self.post_view(post) for post in newest_first(community.posts)]

    def get_post(self, post_id: str) -> PostView:
        """Return a single rendered post.

        Raises:
            NotFoundError: If no community holds a post with this id.
        """
        with self.store.lock:
            post = self.store.post_record(post_id)
            if post is None:
                raise NotFoundError("post", post_id)
            return self.post_view(post)

    def _received_upvote_view(self, receipt: UpvoteReceipt) -> ReceivedUpvoteView:
        post = self.store.post_record(receipt.post_id)
        return ReceivedUpvoteView(
            post=self.post_view(post) if post is not None else None,
            upvoter_id=receipt.upvoter_id,
            created_at=self.render_timestamp(receipt.created_at),
        )

    def get_user_profile(self, user_id: str) -> ProfileView:
        """Return a user with subscriptions and received upvotes resolved.

        Subscriptions that do not resolve stay in place as ``None`` so the
        resolved list lines up with the stored one.

        Raises:
            NotFoundError: If the user does not exist.
        """
        with self.store.lock:
            user = self.store.user_record(user_id)
            if user is None:
                raise NotFoundError("user", user_id)

            subscriptions = []
            for community_id in user.subscriptions:
                community = self.store.community_record(community_id)
                if community is None:
                    logger.debug("User %s has dangling subscription %s", user_id, community_id)
                subscriptions.append(community.model_copy(deep=True) if community else None)

            return ProfileView(
                user=user.model_copy(deep=True),
                subscriptions=subscriptions,
                upvotes_received=[
                    self._received_upvote_view(receipt) for receipt in user.upvotes_received
                ],
            )
