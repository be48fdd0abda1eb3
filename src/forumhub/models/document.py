"""SQLAlchemy model for the durable collection documents."""

from datetime import datetime

from sqlalchemy import DateTime, Text
from sqlalchemy.orm import Mapped, mapped_column

from forumhub.db.session import Base
from forumhub.db.time import utcnow


class StoredDocument(Base):
    """One serialized collection, addressed by a fixed key.

    The forum keeps exactly two rows: ``communities`` (posts and comments
    embedded) and ``users`` (subscriptions and upvote receipts embedded).
    """

    __tablename__ = "document"

    key: Mapped[str] = mapped_column(Text, primary_key=True)
    # JSON array of records.
    payload: Mapped[str] = mapped_column(Text, nullable=False, default="[]")
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, default=utcnow, onupdate=utcnow
    )
