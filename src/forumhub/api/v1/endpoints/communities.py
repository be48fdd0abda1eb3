# src/forumhub/api/v1/endpoints/communities.py
"""Community-related endpoints for the forum API."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, status

from forumhub.models.forum import Community, Post
from forumhub.schemas.community import CommunityCreate
from forumhub.schemas.post import PostCreate, PostView

from ..dependencies import FeedDep, StoreDep

router = APIRouter(prefix="/communities", tags=["communities"])


@router.get("/", response_model=list[Community])
async def list_communities(store: StoreDep) -> list[Community]:
    """List all communities in creation order."""
    return store.list_communities()


@router.post("/",
          response_model=Community,
          status_code=status.HTTP_201_CREATED)
async def create_community(
    community_data: CommunityCreate,
    store: StoreDep,
) -> Community:
    """Create a new community."""
    return store.create_community(community_data.name, community_data.description)


@router.get("/{community_id}", response_model=Community)
async def get_community(community_id: str, store: StoreDep) -> Community:
    """Get a specific community by ID."""
    community = store.find_community_by_id(community_id)
    if community is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Community not found"
        )
    return community


@router.get("/{community_id}/posts", response_model=list[PostView])
async def get_community_posts(community_id: str, feed: FeedDep) -> list[PostView]:
    """Get a community's posts, most recent first."""
    return feed.list_community_posts(community_id)


@router.post("/{community_id}/posts",
          response_model=Post,
          status_code=status.HTTP_201_CREATED)
async def create_post(
    community_id: str,
    post_data: PostCreate,
    store: StoreDep,
) -> Post:
    """Create a post in a community on behalf of an existing user."""
    post = store.create_post(community_id, post_data.title, post_data.content, post_data.author)
    if post is None:
        detail = (
            "Community not found"
            if store.find_community_by_id(community_id) is None
            else "Author not found"
        )
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=detail)
    return post
