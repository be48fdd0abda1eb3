# tests/conftest.py
from __future__ import annotations

import os
from collections.abc import Iterator
from datetime import datetime, timedelta

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

TEST_DB_URL = "sqlite://"
os.environ.setdefault("USE_TEST_DATABASE", "true")
os.environ.setdefault("TEST_DATABASE_URL", TEST_DB_URL)

from forumhub.api.v1.dependencies import get_content_store
from forumhub.db.session import Base
from forumhub.main import app as fastapi_app
from forumhub.models.forum import Community, User
from forumhub.repositories.document_repo import DocumentRepository
from forumhub.services.content_store import ContentStore
from forumhub.services.feed import FeedComposer
from forumhub.services.social_graph import SocialGraph

# 09:30 in New York (EST, before the March DST switch).
CLOCK_START = datetime(2024, 3, 1, 14, 30)


class FakeClock:
    """Deterministic clock that advances one step per call."""

    def __init__(self, start: datetime = CLOCK_START, step: timedelta = timedelta(minutes=1)) -> None:
        self.now = start
        self.step = step

    def __call__(self) -> datetime:
        value = self.now
        self.now += self.step
        return value


@pytest.fixture()
def engine() -> Iterator[Engine]:
    engine = create_engine(
        TEST_DB_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    try:
        yield engine
    finally:
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture()
def session_factory(engine: Engine) -> sessionmaker[Session]:
    return sessionmaker(bind=engine, autocommit=False, autoflush=False, expire_on_commit=False)


@pytest.fixture()
def repository(session_factory: sessionmaker[Session]) -> DocumentRepository:
    return DocumentRepository(session_factory)


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def store(repository: DocumentRepository, clock: FakeClock) -> ContentStore:
    """Fresh content store backed by an empty in-memory database."""
    return ContentStore.load(repository, clock=clock)


@pytest.fixture()
def graph(store: ContentStore) -> SocialGraph:
    return SocialGraph(store)


@pytest.fixture()
def feed(store: ContentStore) -> FeedComposer:
    return FeedComposer(store, zone="America/New_York")


@pytest.fixture()
def community(store: ContentStore) -> Community:
    """Create a default test community."""
    return store.create_community("books", "Reading and reviews")


@pytest.fixture()
def author(store: ContentStore) -> User:
    """Create the user who authors test posts."""
    return store.create_user("u1")


@pytest.fixture(scope="session")
def app() -> FastAPI:
    return fastapi_app


@pytest.fixture(autouse=True)
def override_store_dependency(app: FastAPI, store: ContentStore) -> Iterator[None]:
    app.dependency_overrides[get_content_store] = lambda: store
    try:
        yield
    finally:
        app.dependency_overrides.pop(get_content_store, None)


@pytest.fixture()
def client(app: FastAPI) -> Iterator[TestClient]:
    with TestClient(app, base_url="http://test") as test_client:
        yield test_client
