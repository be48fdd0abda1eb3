"""Data access helpers."""

from .document_repo import COMMUNITIES_KEY, USERS_KEY, DocumentRepository

__all__ = ["COMMUNITIES_KEY", "USERS_KEY", "DocumentRepository"]
