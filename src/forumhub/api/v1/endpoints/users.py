# src/forumhub/api/v1/endpoints/users.py
"""User-related endpoints for the forum API."""

from fastapi import APIRouter, status

from forumhub.models.forum import User
from forumhub.schemas.user import ProfileView, SubscriptionCreate, SubscriptionResponse, UserCreate

from ..dependencies import FeedDep, SocialGraphDep, StoreDep

router = APIRouter(prefix="/users", tags=["users"])


@router.post("/", response_model=User, status_code=status.HTTP_201_CREATED)
async def create_user(user_data: UserCreate, store: StoreDep) -> User:
    """Register a user under the requested id."""
    return store.create_user(user_data.user_id, user_data.subscriptions)


@router.post("/{user_id}/subscriptions", response_model=SubscriptionResponse)
async def subscribe(
    user_id: str,
    subscription: SubscriptionCreate,
    graph: SocialGraphDep,
) -> SubscriptionResponse:
    """Subscribe a user to a community.

    Unknown users, unknown communities and repeat subscriptions are not errors.
    """
    graph.subscribe(user_id, subscription.community_id)
    return SubscriptionResponse(
        message=f"Subscribed user {user_id} to community {subscription.community_id}"
    )


@router.get("/{user_id}/profile", response_model=ProfileView)
async def get_profile(user_id: str, feed: FeedDep) -> ProfileView:
    """Get a user's profile with subscriptions and received upvotes resolved."""
    return feed.get_user_profile(user_id)
