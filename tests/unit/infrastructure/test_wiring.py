"""Tests for settings, logging setup and session-scoped use case wiring."""

import threading
from collections.abc import Generator
from concurrent.futures import ThreadPoolExecutor

import pytest
import structlog
from dependency_injector import providers

from chirper.config import Settings, configure_logging
from chirper.core import container
from chirper.database import create_tables, dispose_engine, initialize_database
from chirper.domain.identity.exceptions import WeakSecretError
from chirper.infrastructure.common.di import use_case_scope

SETTINGS = Settings(
    DATABASE_URL="sqlite://",
    SECRET_KEY="wiring-test-secret-key-long-enough-for-hs256",
    PASSWORD_HASH_ROUNDS=4,
    ENVIRONMENT="test",
)


class TestSettings:
    def test_defaults(self, monkeypatch) -> None:
        monkeypatch.delenv("ACCESS_TOKEN_EXPIRE_MINUTES", raising=False)
        settings = Settings(_env_file=None)

        assert settings.ACCESS_TOKEN_EXPIRE_MINUTES == 60
        assert settings.PASSWORD_HASH_ROUNDS == 10

    def test_reads_environment(self, monkeypatch) -> None:
        monkeypatch.setenv("ACCESS_TOKEN_EXPIRE_MINUTES", "5")
        monkeypatch.setenv("SECRET_KEY", "  padded-secret  ")

        settings = Settings(_env_file=None)

        assert settings.ACCESS_TOKEN_EXPIRE_MINUTES == 5
        assert settings.SECRET_KEY == "padded-secret"

    def test_rejects_non_positive_rounds(self) -> None:
        with pytest.raises(ValueError):
            Settings(_env_file=None, PASSWORD_HASH_ROUNDS=0)


class TestConfigureLogging:
    @pytest.mark.parametrize("environment", ["development", "production"])
    def test_configures_structlog(self, environment) -> None:
        configure_logging(environment)

        logger = structlog.get_logger("chirper.test")
        logger.info("logging_configured", environment=environment)
        assert structlog.is_configured()
        structlog.reset_defaults()


class TestUseCaseScope:
    @pytest.fixture
    def database(self) -> Generator[None, None, None]:
        initialize_database(SETTINGS)
        create_tables()
        container.settings.override(providers.Object(SETTINGS))
        try:
            yield
        finally:
            container.settings.reset_override()
            container.password_hasher.reset()
            container.authentication_service.reset()
            dispose_engine()

    def test_use_case_is_bound_to_a_session(self, database) -> None:
        with use_case_scope(container.register_user_use_case) as register:
            alice = register.register_user("alice", "alice@example.com", "password123")

        with use_case_scope(container.login_user_use_case) as login:
            result = login.login("alice", "password123")

        assert result.user_id == alice.id

    def test_session_is_unbound_afterwards(self, database) -> None:
        with use_case_scope(container.search_use_case) as search:
            assert container.db() is search.user_repository.db

        with pytest.raises(LookupError):
            container.db()

    def test_concurrent_scopes_keep_their_own_sessions(self, database) -> None:
        both_inside = threading.Barrier(2, timeout=5)
        second_left = threading.Barrier(2, timeout=5)

        def register_scope() -> None:
            with use_case_scope(container.register_user_use_case) as register:
                session = register.unit_of_work.db
                both_inside.wait()
                second_left.wait()

                assert register.user_repository.db is session
                assert container.db() is session
                assert container.search_use_case().tweet_repository.db is session

        def search_scope() -> None:
            with use_case_scope(container.search_use_case) as search:
                both_inside.wait()
                assert container.db() is search.user_repository.db
            second_left.wait()

        with ThreadPoolExecutor(max_workers=2) as executor:
            futures = [executor.submit(register_scope), executor.submit(search_scope)]
            for future in futures:
                future.result()

    def test_weak_secret_fails_at_wiring(self, database) -> None:
        container.settings.override(
            providers.Object(Settings(_env_file=None, SECRET_KEY="short"))
        )
        container.authentication_service.reset()

        with pytest.raises(WeakSecretError):
            container.authentication_service()
