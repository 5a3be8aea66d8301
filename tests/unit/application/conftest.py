"""Fixtures wiring use cases to in-memory collaborators."""

import pytest

from chirper.domain.identity.entities.user import User
from chirper.domain.identity.value_objects import Email, Username
from chirper.domain.social.entities import Tweet
from chirper.domain.social.value_objects import TweetContent
from fakes import (
    FakeFollowRepository,
    FakeLikeRepository,
    FakeRetweetRepository,
    FakeTweetRepository,
    FakeUnitOfWork,
    FakeUserRepository,
)


@pytest.fixture
def users() -> FakeUserRepository:
    return FakeUserRepository()


@pytest.fixture
def tweets() -> FakeTweetRepository:
    return FakeTweetRepository()


@pytest.fixture
def follows() -> FakeFollowRepository:
    return FakeFollowRepository()


@pytest.fixture
def likes() -> FakeLikeRepository:
    return FakeLikeRepository()


@pytest.fixture
def retweets() -> FakeRetweetRepository:
    return FakeRetweetRepository()


@pytest.fixture
def uow() -> FakeUnitOfWork:
    return FakeUnitOfWork()


@pytest.fixture
def make_user(users, hasher):
    """Create and store a user."""

    def _make(username: str, display_name: str | None = None) -> User:
        user = User.create(
            Username(username), Email(f"{username}@example.com"), "password123", hasher
        )
        user.display_name = display_name
        return users.save(user)

    return _make


@pytest.fixture
def make_tweet(tweets):
    """Create and store a tweet."""

    def _make(user: User, content: str = "hello world") -> Tweet:
        return tweets.save(Tweet.create(user.id, TweetContent(content)))

    return _make
