"""Tests for AuthenticationService."""

from datetime import UTC, datetime, timedelta

import jwt
import pytest

from chirper.domain.common.value_objects.ids import UserId
from chirper.domain.identity.entities.user import User
from chirper.domain.identity.exceptions import WeakSecretError
from chirper.domain.identity.services.authentication_service import AuthenticationService
from chirper.domain.identity.value_objects import Email, Username

SECRET = "another-test-secret-that-is-over-32-bytes"


class TestConstruction:
    @pytest.mark.parametrize("secret", [None, "", "   ", "too-short-secret"])
    def test_rejects_weak_secret(self, secret) -> None:
        with pytest.raises(WeakSecretError):
            AuthenticationService(secret)

    def test_accepts_32_byte_secret(self) -> None:
        assert AuthenticationService("k" * 32)


class TestAuthenticate:
    def test_true_only_for_matching_password(self, hasher, auth_service) -> None:
        user = User.create(Username("alice"), Email("alice@example.com"), "password123", hasher)

        assert auth_service.authenticate(user, "password123") is True
        assert auth_service.authenticate(user, "password12") is False

    def test_false_for_missing_inputs(self, hasher, auth_service) -> None:
        user = User.create(Username("alice"), Email("alice@example.com"), "password123", hasher)

        assert auth_service.authenticate(None, "password123") is False
        assert auth_service.authenticate(user, None) is False


class TestTokens:
    def test_issue_then_validate_returns_subject(self, auth_service) -> None:
        user_id = UserId.generate()
        token = auth_service.issue_token(user_id)

        assert auth_service.validate_token(token) == user_id

    def test_tokens_for_same_user_are_distinct(self, auth_service) -> None:
        user_id = UserId.generate()
        assert auth_service.issue_token(user_id) != auth_service.issue_token(user_id)

    def test_expiry_is_issue_time_plus_ttl(self) -> None:
        issued_at = datetime.now(UTC).replace(microsecond=0)
        service = AuthenticationService(
            SECRET, token_ttl=timedelta(minutes=15), clock=lambda: issued_at
        )

        token = service.issue_token(UserId.generate())

        assert service.get_expiration_time(token) == issued_at + timedelta(minutes=15)
        claims = jwt.decode(token, SECRET, algorithms=["HS256"])
        assert claims["exp"] - claims["iat"] == 15 * 60
        assert claims["jti"]

    def test_expired_token_is_rejected(self) -> None:
        past = datetime.now(UTC) - timedelta(hours=2)
        service = AuthenticationService(SECRET, token_ttl=timedelta(hours=1), clock=lambda: past)

        token = service.issue_token(UserId.generate())

        assert service.validate_token(token) is None
        assert service.get_expiration_time(token) is None

    def test_token_signed_with_other_key_is_rejected(self, auth_service) -> None:
        other = AuthenticationService(SECRET)
        token = other.issue_token(UserId.generate())

        assert auth_service.validate_token(token) is None

    @pytest.mark.parametrize("token", [None, "", "   ", "not.a.token", "garbage"])
    def test_malformed_tokens_are_rejected(self, auth_service, token) -> None:
        assert auth_service.validate_token(token) is None
        assert auth_service.get_expiration_time(token) is None

    def test_token_with_non_uuid_subject_is_rejected(self, auth_service) -> None:
        now = datetime.now(UTC)
        token = jwt.encode(
            {"sub": "42", "iat": now, "exp": now + timedelta(minutes=5)},
            "test-secret-key-that-is-long-enough-for-hs256",
            algorithm="HS256",
        )

        assert auth_service.validate_token(token) is None

    def test_token_missing_expiry_is_rejected(self, auth_service) -> None:
        token = jwt.encode(
            {"sub": str(UserId.generate()), "iat": datetime.now(UTC)},
            "test-secret-key-that-is-long-enough-for-hs256",
            algorithm="HS256",
        )

        assert auth_service.validate_token(token) is None
