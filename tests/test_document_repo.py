# tests/test_document_repo.py
"""Tests for the durable document repository."""

import pytest

from forumhub.core.errors import PersistenceError
from forumhub.db.session import Base
from forumhub.models.document import StoredDocument
from forumhub.repositories.document_repo import COMMUNITIES_KEY, USERS_KEY


def test_missing_document_loads_empty(repository) -> None:
    assert repository.load(COMMUNITIES_KEY) == []


def test_save_then_load(repository) -> None:
    records = [{"id": "u1", "subscriptions": ["a", "b"], "upvotesReceived": []}]
    repository.save(USERS_KEY, records)
    assert repository.load(USERS_KEY) == records


def test_save_replaces_document(repository, session_factory) -> None:
    repository.save(USERS_KEY, [{"id": "u1"}])
    repository.save(USERS_KEY, [{"id": "u1"}, {"id": "u2"}])

    assert [r["id"] for r in repository.load(USERS_KEY)] == ["u1", "u2"]
    with session_factory() as session:
        assert session.query(StoredDocument).count() == 1


def test_collections_are_independent(repository) -> None:
    repository.save(USERS_KEY, [{"id": "u1"}])
    assert repository.load(COMMUNITIES_KEY) == []


def test_payload_is_indented_json(repository, session_factory) -> None:
    repository.save(USERS_KEY, [{"id": "u1"}])
    with session_factory() as session:
        payload = session.get(StoredDocument, USERS_KEY).payload
    assert payload == '[\n  {\n    "id": "u1"\n  }\n]'


def test_corrupt_payload_raises(repository, session_factory) -> None:
    with session_factory() as session:
        session.add(StoredDocument(key=USERS_KEY, payload="{not json"))
        session.commit()
    with pytest.raises(PersistenceError) as excinfo:
        repository.load(USERS_KEY)
    assert str(excinfo.value).startswith("Failed to load users")


def test_non_list_payload_raises(repository, session_factory) -> None:
    with session_factory() as session:
        session.add(StoredDocument(key=USERS_KEY, payload='{"id": "u1"}'))
        session.commit()
    with pytest.raises(PersistenceError):
        repository.load(USERS_KEY)


def test_save_failure_raises_persistence_error(repository, engine) -> None:
    Base.metadata.drop_all(bind=engine)
    with pytest.raises(PersistenceError) as excinfo:
        repository.save(USERS_KEY, [{"id": "u1"}])
    assert excinfo.value.key == USERS_KEY


def test_load_failure_raises_persistence_error(repository, engine) -> None:
    Base.metadata.drop_all(bind=engine)
    with pytest.raises(PersistenceError) as excinfo:
        repository.load(USERS_KEY)
    assert excinfo.value.key == USERS_KEY
