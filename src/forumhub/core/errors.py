"""Error types raised by the forum core."""

from __future__ import annotations


class ForumError(Exception):
    """Base class for forum core failures."""


class NotFoundError(ForumError):
    """A referenced community, post or user does not exist."""

    def __init__(self, kind: str, identifier: str) -> None:
        super().__init__(f"{kind.capitalize()} not found")
        self.kind = kind
        self.identifier = identifier


class DuplicateIdentityError(ForumError):
    """A user with the requested id already exists."""

    def __init__(self, user_id: str) -> None:
        super().__init__(f"User {user_id} already exists")
        self.user_id = user_id


class PersistenceError(ForumError):
    """A collection could not be read from or flushed to durable storage.

    When raised by a flush, the in-memory change that triggered it has
    already been applied.
    """

    def __init__(self, key: str, detail: str = "", *, action: str = "persist") -> None:
        message = f"Failed to {action} {key}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)
        self.key = key
