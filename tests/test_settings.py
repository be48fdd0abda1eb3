# tests/test_settings.py
"""Tests for environment-driven settings."""

from forumhub.core.settings import Settings
from forumhub.db.session import engine


def test_suite_runs_against_test_database() -> None:
    assert engine.url.render_as_string() == "sqlite://"


def test_test_database_override(monkeypatch) -> None:
    monkeypatch.setenv("DATABASE_URL", "sqlite:///./prod.db")
    monkeypatch.setenv("TEST_DATABASE_URL", "sqlite:///./test.db")
    monkeypatch.setenv("USE_TEST_DATABASE", "true")
    assert Settings().effective_database_url == "sqlite:///./test.db"


def test_test_database_needs_url(monkeypatch) -> None:
    monkeypatch.setenv("DATABASE_URL", "sqlite:///./prod.db")
    monkeypatch.delenv("TEST_DATABASE_URL", raising=False)
    monkeypatch.setenv("USE_TEST_DATABASE", "true")
    assert Settings().effective_database_url == "sqlite:///./prod.db"


def test_production_database_by_default(monkeypatch) -> None:
    monkeypatch.setenv("DATABASE_URL", "sqlite:///./prod.db")
    monkeypatch.setenv("USE_TEST_DATABASE", "false")
    assert Settings().effective_database_url == "sqlite:///./prod.db"
