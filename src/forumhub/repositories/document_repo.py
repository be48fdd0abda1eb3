"""Durable load/save of the forum collections."""
from __future__ import annotations

import json
import logging
from collections.abc import Callable
from typing import Any

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from forumhub.models.document import StoredDocument
from forumhub.core.errors import PersistenceError

__all__ = ["COMMUNITIES_KEY", "USERS_KEY", "DocumentRepository"]

logger = logging.getLogger(__name__)

COMMUNITIES_KEY = "communities"
USERS_KEY = "users"


class DocumentRepository:
    """Thin wrapper around database access for the collection documents.

    Each collection is stored whole as a JSON array under its key. The
    repository knows nothing about what the records mean.
    """

    def __init__(self, session_factory: Callable[[], Session]) -> None:
        """Initialize the repository with a SQLAlchemy session factory."""
        self.session_factory = session_factory

    def load(self, key: str) -> list[dict[str, Any]]:
        """Return the records stored under ``key``.

        A key that was never saved yields an empty collection.

        Raises:
            PersistenceError: If the document exists but cannot be read or
                does not hold a JSON array.
        """
        try:
            with self.session_factory() as session:
                document = session.get(StoredDocument, key)
                if document is None:
                    return []
                payload = document.payload
        except SQLAlchemyError as exc:
            logger.error("Error reading %s: %s", key, exc, exc_info=True)
            raise PersistenceError(key, str(exc), action="load") from exc

        try:
            records = json.loads(payload)
        except ValueError as exc:
            logger.error("Error reading %s: %s", key, exc)
            raise PersistenceError(key, str(exc), action="load") from exc
        if not isinstance(records, list):
            logger.error("Error reading %s: expected a JSON array", key)
            raise PersistenceError(key, "expected a JSON array", action="load")
        return records

    def save(self, key: str, records: list[dict[str, Any]]) -> None:
        """Replace the document stored under ``key``.

        Raises:
            PersistenceError: If the write could not be committed.
        """
        payload = json.dumps(records, indent=2, default=str)
        try:
            with self.session_factory() as session:
                document = session.get(StoredDocument, key)
                if document is None:
                    session.add(StoredDocument(key=key, payload=payload))
                else:
                    document.payload = payload
                session.commit()
        except SQLAlchemyError as exc:
            logger.error("Error writing %s: %s", key, exc, exc_info=True)
            raise PersistenceError(key, str(exc)) from exc
        logger.debug("Saved %d records to %s", len(records), key)
