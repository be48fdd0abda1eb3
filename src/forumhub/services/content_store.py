"""In-memory community and user collections with durable flushes."""
from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Iterable
from datetime import datetime
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from forumhub.core.errors import DuplicateIdentityError, PersistenceError
from forumhub.db.time import utcnow
from forumhub.models.forum import Comment, Community, Post, User
from forumhub.repositories.document_repo import COMMUNITIES_KEY, USERS_KEY, DocumentRepository

__all__ = ["ContentStore"]

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", bound=BaseModel)


def _parse_records(key: str, raw: Iterable[Any], model: type[RecordT]) -> list[RecordT]:
    records: list[RecordT] = []
    for position, item in enumerate(raw):
        try:
            records.append(model.model_validate(item))
        except ValidationError as exc:
            # Dropping the record would erase it from storage on the next flush.
            logger.error("Unreadable record %d in %s: %s", position, key, exc)
            raise PersistenceError(key, f"record {position}: {exc}", action="load") from exc
    return records


class ContentStore:
    """Owns the community and user collections.

    Every mutation is applied in memory first and then flushed to the
    repository. A failed flush raises :class:`PersistenceError` but leaves the
    in-memory change in place.

    Public lookups hand out deep copies. The ``*_record`` helpers return the
    live objects and are meant for collaborators that already hold ``lock``.
    """

    def __init__(
        self,
        repository: DocumentRepository,
        *,
        communities: list[Community] | None = None,
        users: list[User] | None = None,
        clock: Callable[[], datetime] = utcnow,
    ) -> None:
        self.repository = repository
        self.communities: list[Community] = communities if communities is not None else []
        self.users: list[User] = users if users is not None else []
        self.clock = clock
        self.lock = threading.RLock()

    @classmethod
    def load(
        cls,
        repository: DocumentRepository,
        *,
        clock: Callable[[], datetime] = utcnow,
    ) -> ContentStore:
        """Build a store from the collections currently held by ``repository``.

        Raises:
            PersistenceError: If either collection cannot be read in full.
        """
        communities = _parse_records(COMMUNITIES_KEY, repository.load(COMMUNITIES_KEY), Community)
        users = _parse_records(USERS_KEY, repository.load(USERS_KEY), User)
        logger.info("Loaded %d communities and %d users", len(communities), len(users))
        return cls(repository, communities=communities, users=users, clock=clock)

    # -- persistence -----------------------------------------------------

    def _serialize(self, key: str) -> list[dict[str, Any]]:
        records = self.communities if key == COMMUNITIES_KEY else self.users
        return [record.model_dump(mode="json", by_alias=True) for record in records]

    def flush(self, *keys: str) -> None:
        """Write the named collections, attempting every key before failing.

        Raises:
            PersistenceError: For the first collection that could not be written.
        """
        failures: list[PersistenceError] = []
        with self.lock:
            for key in keys or (COMMUNITIES_KEY, USERS_KEY):
                try:
                    self.repository.save(key, self._serialize(key))
                except PersistenceError as exc:
                    failures.append(exc)
        if failures:
            raise failures[0]

    # -- live record access (caller holds ``lock``) ----------------------

    def community_record(self, community_id: str) -> Community | None:
        return next((c for c in self.communities if c.id == community_id), None)

    def user_record(self, user_id: str) -> User | None:
        return next((u for u in self.users if u.id == user_id), None)

    def post_record(self, post_id: str) -> Post | None:
        for community in self.communities:
            for post in community.posts:
                if post.id == post_id:
                    return post
        return None

    # -- communities -----------------------------------------------------

    def create_community(self, name: str, description: str) -> Community:
        """Create a community; duplicate names are allowed."""
        with self.lock:
            community = Community(name=name, description=description)
            self.communities.append(community)
            logger.info("Created community %s (%s)", community.id, name)
            snapshot = community.model_copy(deep=True)
            self.flush(COMMUNITIES_KEY)
        return snapshot

    def find_community_by_id(self, community_id: str) -> Community | None:
        with self.lock:
            community = self.community_record(community_id)
            return community.model_copy(deep=True) if community else None

    def list_communities(self) -> list[Community]:
        with self.lock:
            return [community.model_copy(deep=True) for community in self.communities]

    # -- users -----------------------------------------------------------

    def create_user(self, user_id: str, subscriptions: Iterable[str] = ()) -> User:
        """Register a user under a caller-chosen id.

        Raises:
            DuplicateIdentityError: If ``user_id`` is already taken.
        """
        with self.lock:
            if self.user_record(user_id) is not None:
                raise DuplicateIdentityError(user_id)
            user = User(id=user_id, subscriptions=list(subscriptions))
            self.users.append(user)
            logger.info("Created user %s", user_id)
            snapshot = user.model_copy(deep=True)
            self.flush(USERS_KEY)
        return snapshot

    def find_user_by_id(self, user_id: str) -> User | None:
        with self.lock:
            user = self.user_record(user_id)
            return user.model_copy(deep=True) if user else None

    # -- posts and comments ----------------------------------------------

    def create_post(
        self,
        community_id: str,
        title: str,
        content: str,
        author_id: str,
    ) -> Post | None:
        """Create a post in a community.

        Returns ``None`` unless both the community and the author exist.
        """
        with self.lock:
            community = self.community_record(community_id)
            author = self.user_record(author_id)
            if community is None or author is None:
                logger.debug(
                    "Post rejected: community=%s found=%s author=%s found=%s",
                    community_id, community is not None, author_id, author is not None,
                )
                return None

            post = Post(title=title, content=content, author=author_id, created_at=self.clock())
            community.posts.append(post)
            author.posts.append(post.id)
            logger.info("Created post %s in community %s", post.id, community_id)
            snapshot = post.model_copy(deep=True)
            self.flush(COMMUNITIES_KEY, USERS_KEY)
        return snapshot

    def find_post_by_id(self, post_id: str) -> Post | None:
        with self.lock:
            post = self.post_record(post_id)
            return post.model_copy(deep=True) if post else None

    def add_comment(self, post_id: str, text: str, author: str) -> Comment | None:
        """Append a comment to a post; the author is not checked against users."""
        with self.lock:
            post = self.post_record(post_id)
            if post is None:
                return None
            comment = Comment(text=text, author=author, created_at=self.clock())
            post.comments.append(comment)
            logger.info("Added comment %s to post %s", comment.id, post_id)
            snapshot = comment.model_copy(deep=True)
            self.flush(COMMUNITIES_KEY)
        return snapshot
