# src/forumhub/schemas/community.py
"""Community-related Pydantic schemas."""


from pydantic import BaseModel


class CommunityCreate(BaseModel):
    """Schema for creating a new community."""

    name: str
    description: str = ""
