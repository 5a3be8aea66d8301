"""Pytest configuration and fixtures."""

from collections.abc import Generator

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker

from chirper.database import Base
from chirper.domain.identity.services.authentication_service import AuthenticationService
from chirper.infrastructure.identity.services.password_hasher import BcryptPasswordHasher
from chirper.infrastructure.persistence import models  # noqa: F401
from fakes import FakePasswordHasher

# Test database URL (in-memory SQLite)
TEST_DATABASE_URL = "sqlite:///:memory:"

TEST_SECRET_KEY = "test-secret-key-that-is-long-enough-for-hs256"

# Create test engine
test_engine = create_engine(TEST_DATABASE_URL, connect_args={"check_same_thread": False})

# Create test session factory
TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)


@pytest.fixture
def db_session() -> Generator[Session, None, None]:
    """Create a fresh database session for each test."""
    # Create all tables
    Base.metadata.create_all(bind=test_engine)

    session = TestSessionLocal()
    try:
        yield session
    finally:
        session.close()
        # Drop all tables after test
        Base.metadata.drop_all(bind=test_engine)


@pytest.fixture
def hasher() -> FakePasswordHasher:
    """Cheap, deterministic hasher for unit tests."""
    return FakePasswordHasher()


@pytest.fixture(scope="session")
def bcrypt_hasher() -> BcryptPasswordHasher:
    # Minimum bcrypt cost keeps the suite fast
    return BcryptPasswordHasher(rounds=4)


@pytest.fixture
def auth_service() -> AuthenticationService:
    return AuthenticationService(TEST_SECRET_KEY)
