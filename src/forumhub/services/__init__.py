"""Business logic services for the forumhub application."""

from .content_store import ContentStore
from .feed import FeedComposer
from .social_graph import SocialGraph

__all__ = [
    "ContentStore",
    "FeedComposer",
    "SocialGraph",
]
