"""
Pydantic schemas for API request/response models.

These schemas define the structure of API data for serialization and validation.
"""

from .community import CommunityCreate
from .post import CommentCreate, CommentView, PostCreate, PostView, UpvoteCreate
from .user import ProfileView, ReceivedUpvoteView, SubscriptionCreate, SubscriptionResponse, UserCreate

__all__ = [
    "CommunityCreate",
    "CommentCreate", "CommentView",
    "PostCreate", "PostView", "UpvoteCreate",
    "ProfileView", "ReceivedUpvoteView",
    "SubscriptionCreate", "SubscriptionResponse",
    "UserCreate",
]
