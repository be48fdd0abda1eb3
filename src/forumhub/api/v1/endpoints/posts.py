# src/forumhub/api/v1/endpoints/posts.py
"""Post-related endpoints for the forum API."""

from fastapi import APIRouter, HTTPException, status

from forumhub.models.forum import Comment, Post
from forumhub.schemas.post import CommentCreate, PostView, UpvoteCreate

from ..dependencies import FeedDep, SocialGraphDep, StoreDep

router = APIRouter(prefix="/posts", tags=["posts"])


def _post_not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Post not found")


@router.get("/{post_id}", response_model=PostView)
async def get_post(post_id: str, feed: FeedDep) -> PostView:
    """Get a single post with display-zone timestamps."""
    return feed.get_post(post_id)


@router.post("/{post_id}/upvote", response_model=Post)
async def upvote_post(
    post_id: str,
    graph: SocialGraphDep,
    vote_data: UpvoteCreate | None = None,
) -> Post:
    """Upvote a post. Repeat upvotes from the same user all count.

    The body is optional; without it the upvote is recorded anonymously.
    """
    post = graph.upvote(post_id, vote_data.user_id if vote_data else None)
    if post is None:
        raise _post_not_found()
    return post


@router.post("/{post_id}/comments",
          response_model=Comment,
          status_code=status.HTTP_201_CREATED)
async def add_comment(
    post_id: str,
    comment_data: CommentCreate,
    store: StoreDep,
) -> Comment:
    """Add a comment to a post."""
    comment = store.add_comment(post_id, comment_data.text, comment_data.author)
    if comment is None:
        raise _post_not_found()
    return comment
