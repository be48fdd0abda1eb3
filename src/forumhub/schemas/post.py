"""Post-related Pydantic schemas."""

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class PostCreate(BaseModel):
    """Schema for creating a new post in a community."""

    title: str
    content: str
    author: str = Field(
        ...,
        validation_alias=AliasChoices("author", "userId", "user_id"),
        description="Id of an existing user",
    )


class CommentCreate(BaseModel):
    """Schema for adding a comment to a post."""

    text: str
    author: str = Field(..., description="Free-form author label")


class UpvoteCreate(BaseModel):
    """Schema for upvoting a post."""

    user_id: str | None = Field(
        None,
        validation_alias=AliasChoices("userId", "user_id"),
        description="Id of the upvoting user; not checked",
    )


class CommentView(BaseModel):
    """Comment with its timestamp rendered in the display zone."""

    id: str
    text: str
    author: str
    created_at: str = Field(..., alias="createdAt")

    model_config = ConfigDict(populate_by_name=True)


class PostView(BaseModel):
    """Post with timestamps rendered in the display zone."""

    id: str
    title: str
    content: str
    author: str
    created_at: str = Field(..., alias="createdAt")
    upvotes: int
    comments: list[CommentView] = Field(default_factory=list)

    model_config = ConfigDict(populate_by_name=True)
