"""
Shared fixtures.

The application is imported after the environment is pointed at an
in-memory database with rate limiting off, so no file is written and
throttling never interferes with unrelated tests.
"""

import os

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("RATE_LIMIT_ENABLED", "false")
os.environ.setdefault("LOG_LEVEL", "WARNING")

from dataclasses import replace
from datetime import date, datetime, timedelta, timezone
from typing import Optional

import pytest
from fastapi.testclient import TestClient

from survey_basket.domain.auth.entities import AccessToken, User
from survey_basket.domain.auth.ports import (
    PasswordHasher,
    TokenProvider,
    UserRepository,
)
from survey_basket.domain.polls.entities import Poll
from survey_basket.domain.polls.ports import PollRepository
from survey_basket.infrastructure.database import build_engine, init_db
from survey_basket.interfaces.dependencies import get_engine
from survey_basket.main import app


class InMemoryPollRepository(PollRepository):
    """PollRepository keeping polls in a dict."""

    def __init__(self) -> None:
        self.polls: dict[int, Poll] = {}
        self._next_id = 1

    def list_all(self) -> list[Poll]:
        return [self.polls[key] for key in sorted(self.polls)]

    def get_by_id(self, poll_id: int) -> Optional[Poll]:
        return self.polls.get(poll_id)

    def get_by_title(self, title: str) -> Optional[Poll]:
        return next((p for p in self.polls.values() if p.title == title), None)

    def add(self, poll: Poll) -> Poll:
        stored = replace(poll, id=self._next_id)
        self.polls[stored.id] = stored
        self._next_id += 1
        return stored

    def update(self, poll: Poll) -> bool:
        self.polls[poll.id] = poll
        return True

    def delete(self, poll_id: int) -> None:
        del self.polls[poll_id]


class InMemoryUserRepository(UserRepository):
    """UserRepository keeping users in a list."""

    def __init__(self) -> None:
        self.users: list[User] = []

    def get_by_email(self, email: str) -> Optional[User]:
        wanted = email.strip().lower()
        return next((u for u in self.users if u.email.lower() == wanted), None)

    def add(self, user: User) -> User:
        stored = replace(user, id=len(self.users) + 1)
        self.users.append(stored)
        return stored


class PlainPasswordHasher(PasswordHasher):
    """Reversible hasher for tests."""

    def hash(self, password: str) -> str:
        return f"plain${password}"

    def verify(self, password: str, password_hash: str) -> bool:
        return password_hash == f"plain${password}"


class FixedTokenProvider(TokenProvider):
    """Issues the same token every time."""

    def issue(self, user: User) -> AccessToken:
        return AccessToken(
            token=f"token-{user.id}",
            expires_at=datetime(2030, 1, 1, tzinfo=timezone.utc),
            expires_in=1800,
        )


@pytest.fixture
def poll_repository() -> InMemoryPollRepository:
    return InMemoryPollRepository()


@pytest.fixture
def user_repository() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def password_hasher() -> PlainPasswordHasher:
    return PlainPasswordHasher()


@pytest.fixture
def token_provider() -> FixedTokenProvider:
    return FixedTokenProvider()


@pytest.fixture
def sample_poll() -> Poll:
    return Poll(
        id=0,
        title="Favorite language",
        summary="Pick the language you use the most",
        is_published=False,
        starts_at=date(2030, 1, 1),
        ends_at=date(2030, 1, 31),
    )


@pytest.fixture
def engine():
    """Fresh in-memory database with the schema created."""
    engine = build_engine("sqlite://")
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def client(engine):
    """TestClient bound to the in-memory database."""
    app.dependency_overrides[get_engine] = lambda: engine
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def poll_payload() -> dict:
    """A valid poll request body starting tomorrow."""
    starts_at = date.today() + timedelta(days=1)
    return {
        "title": "Favorite language",
        "summary": "Pick the language you use the most",
        "starts_at": starts_at.isoformat(),
        "ends_at": (starts_at + timedelta(days=30)).isoformat(),
    }
