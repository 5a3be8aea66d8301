"""Fixtures for tests against the SQLAlchemy adapters."""

from collections.abc import Generator

import pytest
from dependency_injector import providers
from sqlalchemy.orm import Session

from chirper.config import Settings
from chirper.core import Container

TEST_SECRET_KEY = "integration-secret-key-that-is-long-enough"


@pytest.fixture
def container(db_session: Session) -> Generator[Container, None, None]:
    """Container bound to the test session with fast hashing."""
    container = Container()
    container.settings.override(
        providers.Object(
            Settings(
                DATABASE_URL="sqlite:///:memory:",
                SECRET_KEY=TEST_SECRET_KEY,
                PASSWORD_HASH_ROUNDS=4,
                ENVIRONMENT="test",
            )
        )
    )
    container.db.override(db_session)
    try:
        yield container
    finally:
        container.db.reset_override()
        container.settings.reset_override()
