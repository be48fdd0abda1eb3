"""User-related Pydantic schemas."""

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from forumhub.models.forum import Community, User

from .post import PostView


class UserCreate(BaseModel):
    """Schema for registering a user under a caller-chosen id."""

    user_id: str = Field(
        ...,
        min_length=1,
        validation_alias=AliasChoices("userId", "user_id", "id"),
    )
    subscriptions: list[str] = Field(default_factory=list)

    @field_validator("subscriptions", mode="before")
    @classmethod
    def _null_subscriptions(cls, value: object) -> object:
        return [] if value is None else value


class SubscriptionCreate(BaseModel):
    """Schema for subscribing a user to a community."""

    community_id: str = Field(
        ...,
        validation_alias=AliasChoices("subredditId", "communityId", "community_id"),
    )


class SubscriptionResponse(BaseModel):
    """Confirmation returned after a subscribe request."""

    message: str


class ReceivedUpvoteView(BaseModel):
    """One upvote receipt with its post resolved."""

    post: PostView | None = Field(..., description="Null if the post no longer resolves")
    upvoter_id: str | None = Field(..., alias="upvoterId")
    created_at: str = Field(..., alias="createdAt")

    model_config = ConfigDict(populate_by_name=True)


class ProfileView(BaseModel):
    """User record plus resolved subscriptions and upvote history."""

    user: User
    # Null entries mark subscriptions whose community does not exist.
    subscriptions: list[Community | None]
    upvotes_received: list[ReceivedUpvoteView] = Field(..., alias="upvotesReceived")

    model_config = ConfigDict(populate_by_name=True)
