# src/forumhub/models/__init__.py
"""Stored records for the forumhub application."""

from .document import StoredDocument
from .forum import Comment, Community, Post, UpvoteReceipt, User, new_id

__all__ = [
    "StoredDocument",
    "Comment", "Community", "Post",
    "UpvoteReceipt", "User",
    "new_id",
]
