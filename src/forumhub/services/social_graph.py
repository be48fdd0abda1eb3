"""Subscriptions and upvote attribution."""
from __future__ import annotations

import logging

from forumhub.models.forum import Post, UpvoteReceipt
from forumhub.repositories.document_repo import COMMUNITIES_KEY, USERS_KEY
from forumhub.services.content_store import ContentStore

__all__ = ["SocialGraph"]

logger = logging.getLogger(__name__)


class SocialGraph:
    """Cross-entity mutations on top of a :class:`ContentStore`."""

    def __init__(self, store: ContentStore) -> None:
        self.store = store

    def subscribe(self, user_id: str, community_id: str) -> bool:
        """Subscribe a user to a community.

        Unknown users and repeat subscriptions are silent no-ops. The community
        id is not checked, so a dangling subscription can be recorded.

        Returns:
            True if a new subscription was stored.
        """
        with self.store.lock:
            user = self.store.user_record(user_id)
            if user is None:
                logger.debug("Subscribe ignored: unknown user %s", user_id)
                return False
            if user.is_subscribed(community_id):
                return False
            user.subscriptions.append(community_id)
            logger.info("User %s subscribed to community %s", user_id, community_id)
            self.store.flush(USERS_KEY)
        return True

    def upvote(self, post_id: str, upvoter_id: str | None) -> Post | None:
        """Add one upvote to a post.

        Every call counts, including repeats by the same upvoter. When the
        post's author is a known user a receipt is appended to their profile.
        """
        with self.store.lock:
            post = self.store.post_record(post_id)
            if post is None:
                return None

            post.upvotes += 1
            author = self.store.user_record(post.author)
            if author is not None:
                author.upvotes_received.append(
                    UpvoteReceipt(post_id=post_id, upvoter_id=upvoter_id, created_at=self.store.clock())
                )
                keys = (USERS_KEY, COMMUNITIES_KEY)
            else:
                logger.debug("Upvote on post %s not attributed: unknown author %s", post_id, post.author)
                keys = (COMMUNITIES_KEY,)
            logger.info("Post %s upvoted by %s (now %d)", post_id, upvoter_id, post.upvotes)
            snapshot = post.model_copy(deep=True)
            self.store.flush(*keys)
        return snapshot
