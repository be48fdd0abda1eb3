"""Shared API dependencies for the forum services."""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from forumhub.core.settings import settings
from forumhub.db.session import SessionLocal, create_tables
from forumhub.repositories.document_repo import DocumentRepository
from forumhub.services.content_store import ContentStore
from forumhub.services.feed import FeedComposer
from forumhub.services.social_graph import SocialGraph


@lru_cache(maxsize=1)
def get_content_store() -> ContentStore:
    """Return the process-wide content store, loading it on first use."""
    create_tables()
    return ContentStore.load(DocumentRepository(SessionLocal))


StoreDep = Annotated[ContentStore, Depends(get_content_store)]


def get_social_graph(store: StoreDep) -> SocialGraph:
    """Return subscription and upvote operations bound to the store."""
    return SocialGraph(store)


def get_feed_composer(store: StoreDep) -> FeedComposer:
    """Return the read-side view builder bound to the store."""
    return FeedComposer(
        store,
        zone=settings.display_timezone,
        timestamp_format=settings.timestamp_format,
    )


SocialGraphDep = Annotated[SocialGraph, Depends(get_social_graph)]
FeedDep = Annotated[FeedComposer, Depends(get_feed_composer)]
